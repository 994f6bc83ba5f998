# -*- coding: utf-8 -*-
"""One-shot setup: provider id plus (optionally) its API key."""

from __future__ import annotations

import logging

from ..exceptions import ConfigValidationError, UnknownProviderError
from ..fetchers import fetch_for_provider
from ..providers.field_mapper import (
    is_api_key_field,
    map_field_to_config,
    validate_required_fields,
)
from ..providers.models import ProviderConfig
from ..providers.registry import get_provider, validate_provider_config
from ..providers.store import ConfigStore
from .fields import collect_optional_fields, prompt_for_field
from .model_select import FetchFn, select_model
from .prompter import Prompter

logger = logging.getLogger(__name__)


def normalize_provider_id(provider_id: str) -> str:
    return provider_id.strip().lower()


def fast_setup(
    provider_id: str,
    api_key: str,
    *,
    store: ConfigStore,
    prompter: Prompter,
    fetch: FetchFn = fetch_for_provider,
) -> ProviderConfig:
    """Configure one provider with as few prompts as possible.

    Only the API-key field is prompted for when *api_key* is empty.
    Providers with several required fields get prompted for the rest in
    declaration order. The result is validated, added to *store* and
    saved; on any error nothing is written.
    """
    pid = normalize_provider_id(provider_id)
    if not pid:
        raise UnknownProviderError(provider_id)
    defn = get_provider(pid)
    store.get_config()

    prompter.echo(f"Configuring {defn.name}...")
    config = ProviderConfig(id=pid, name=defn.name)

    key_field = next(
        (f for f in defn.required_fields if is_api_key_field(f.name)),
        None,
    )
    if key_field is None:
        if api_key:
            raise ConfigValidationError(
                f"provider {pid} does not take an API key",
            )
    else:
        if not api_key:
            api_key = prompt_for_field(prompter, key_field, required=True)
        config = map_field_to_config(key_field.name, api_key.strip(), config)

    remaining = [
        f for f in defn.required_fields if not is_api_key_field(f.name)
    ]
    if remaining:
        prompter.echo("Additional required configuration:")
        for field in remaining:
            value = prompt_for_field(prompter, field, required=True)
            config = map_field_to_config(field.name, value, config)

    validate_required_fields(pid, config, defn.required_fields)
    config = collect_optional_fields(defn, config, prompter)
    config = select_model(defn, config, prompter, fast=True, fetch=fetch)
    validate_provider_config(config)

    store.add_provider(config)
    cli_config = store.get_config()
    if not cli_config.default_provider:
        cli_config.default_provider = pid
    store.validate(cli_config)
    store.save()

    logger.info("Configured provider %s", pid)
    prompter.echo(f"Successfully configured {defn.name}!")
    prompter.echo(f"Configuration saved to {store.config_path}")
    return config
