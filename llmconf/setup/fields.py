# -*- coding: utf-8 -*-
"""Prompting for provider fields and storing the answers."""

from __future__ import annotations

from ..providers.field_mapper import map_field_to_config
from ..providers.models import FieldDescriptor, ProviderConfig, ProviderDefinition
from .prompter import Prompter


def field_label(field: FieldDescriptor, required: bool) -> str:
    label = field.name
    if field.comment:
        label += f" ({field.comment})"
    if required:
        label += " *"
    return label


def prompt_for_field(
    prompter: Prompter,
    field: FieldDescriptor,
    required: bool,
) -> str:
    """Ask for one field. Passwords are hidden and get no default."""
    secret = field.field_type == "password"
    value = prompter.text(
        field_label(field, required),
        default="" if secret else field.placeholder,
        secret=secret,
    )
    return value.strip()


def collect_optional_fields(
    defn: ProviderDefinition,
    config: ProviderConfig,
    prompter: Prompter,
) -> ProviderConfig:
    """Offer the optional fields behind a confirm; blank answers are skipped."""
    if not defn.optional_fields:
        return config
    if not prompter.confirm(
        "Would you like to configure optional settings?",
        default=False,
    ):
        return config
    prompter.echo("Optional configuration:")
    for field in defn.optional_fields:
        value = prompt_for_field(prompter, field, required=False)
        if value:
            config = map_field_to_config(field.name, value, config)
    return config
