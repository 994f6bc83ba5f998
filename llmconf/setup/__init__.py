# -*- coding: utf-8 -*-
"""Setup flows: the full wizard and one-shot fast setup."""

from .fast_setup import fast_setup, normalize_provider_id
from .model_select import browse_models, prompt_model_id, select_model
from .prompter import Prompter
from .wizard import SetupWizard

__all__ = [
    "Prompter",
    "SetupWizard",
    "browse_models",
    "fast_setup",
    "normalize_provider_id",
    "prompt_model_id",
    "select_model",
]
