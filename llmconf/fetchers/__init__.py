# -*- coding: utf-8 -*-
"""Live model lists with catalog fallback and display formatting."""

from .base import ModelFetcher
from .fetch import catalog_models, fetch_for_provider, get_model_fetcher
from .formatter import (
    ModelOption,
    find_model_by_number_or_id,
    format_model_list,
    format_model_option,
    format_model_page,
    paginate_models,
)
from .ollama import OllamaFetcher, infer_context_window
from .openai_compatible import OpenAICompatibleFetcher, enrich_model
from .openrouter import OpenRouterFetcher, decode_modality

__all__ = [
    # base
    "ModelFetcher",
    # fetch
    "catalog_models",
    "fetch_for_provider",
    "get_model_fetcher",
    # formatter
    "ModelOption",
    "find_model_by_number_or_id",
    "format_model_list",
    "format_model_option",
    "format_model_page",
    "paginate_models",
    # fetchers
    "OllamaFetcher",
    "OpenAICompatibleFetcher",
    "OpenRouterFetcher",
    "decode_modality",
    "enrich_model",
    "infer_context_window",
]
