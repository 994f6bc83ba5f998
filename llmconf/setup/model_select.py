# -*- coding: utf-8 -*-
"""Model selection shared by the wizard and fast setup."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Optional, Tuple

from ..exceptions import FetchFailedError
from ..fetchers import (
    fetch_for_provider,
    find_model_by_number_or_id,
    format_model_list,
    format_model_page,
    paginate_models,
)
from ..providers.models import ModelInfo, ProviderConfig, ProviderDefinition
from .prompter import Prompter

logger = logging.getLogger(__name__)

FetchFn = Callable[
    [ProviderDefinition, str, str],
    Tuple[Dict[str, ModelInfo], Optional[FetchFailedError]],
]

NEXT_COMMANDS = ("next", "n")
BACK_COMMANDS = ("back", "prev", "b")


def with_model(
    config: ProviderConfig,
    model_id: str,
    info: Optional[ModelInfo] = None,
) -> ProviderConfig:
    return config.model_copy(
        update={"model_id": model_id, "model_info": info or ModelInfo()},
    )


def _catalog_info(defn: ProviderDefinition, model_id: str) -> Optional[ModelInfo]:
    spec = defn.models.get(model_id)
    return spec.to_info() if spec is not None else None


def browse_models(
    models: Mapping[str, ModelInfo],
    prompter: Prompter,
) -> Optional[str]:
    """Page through *models*; return the chosen id, or None if cancelled."""
    options = format_model_list(models)
    pages = paginate_models(options)
    index = 0
    while True:
        prompter.echo(format_model_page(pages[index], index + 1, len(pages)))
        answer = prompter.text(
            "Select a model by number or ID ('next'/'back' to page, "
            "empty to cancel)",
        ).strip()
        command = answer.lower()
        if not answer:
            return None
        if command in NEXT_COMMANDS:
            if index < len(pages) - 1:
                index += 1
            else:
                prompter.echo("Already on the last page.")
            continue
        if command in BACK_COMMANDS:
            if index > 0:
                index -= 1
            else:
                prompter.echo("Already on the first page.")
            continue
        found = find_model_by_number_or_id(answer, options)
        if found is not None:
            return found
        prompter.echo(f"No model matches '{answer}'.")


def prompt_model_id(
    defn: ProviderDefinition,
    config: ProviderConfig,
    prompter: Prompter,
    fetch: FetchFn = fetch_for_provider,
) -> ProviderConfig:
    """Ask for a model id; ``list`` shows the live (or built-in) list.

    An id is always required. Typed ids must come from the catalog or the
    fetched list unless the provider lists models dynamically.
    """
    fetched: Dict[str, ModelInfo] = {}
    while True:
        answer = prompter.text(
            "Enter model ID or type 'list' to see available models",
        ).strip()

        if answer.lower() == "list":
            models, error = fetch(defn, config.api_key, config.base_url)
            if error is not None:
                prompter.echo(f"Warning: {error}. Showing built-in models.")
            if not models:
                prompter.echo("No models available, enter an ID instead.")
                continue
            fetched = dict(models)
            picked = browse_models(fetched, prompter)
            if picked is not None:
                return with_model(config, picked, fetched[picked])
            continue

        if not answer:
            prompter.echo("A model ID is required.")
            continue

        if answer in fetched:
            return with_model(config, answer, fetched[answer])
        if (
            defn.models
            and answer not in defn.models
            and not defn.has_dynamic_models
        ):
            prompter.echo(f"Model {answer} not found for provider {defn.id}.")
            continue
        return with_model(config, answer, _catalog_info(defn, answer))


def select_model(
    defn: ProviderDefinition,
    config: ProviderConfig,
    prompter: Prompter,
    *,
    fast: bool,
    fetch: FetchFn = fetch_for_provider,
) -> ProviderConfig:
    """Choose a model for *config*.

    A default model is taken as-is in fast mode and offered with a confirm
    in the wizard. Fast mode otherwise falls back to the first built-in
    model, then to asking for an id.
    """
    default = defn.default_model_id
    if default:
        if fast or prompter.confirm(
            f"Use default model '{default}'?",
            default=True,
        ):
            if fast:
                prompter.echo(f"Using default model: {default}")
            return with_model(config, default, _catalog_info(defn, default))

    if fast and defn.models:
        first = next(iter(defn.models))
        prompter.echo(f"Using model: {first}")
        return with_model(config, first, _catalog_info(defn, first))

    logger.debug("Prompting for a model id for %s", defn.id)
    return prompt_model_id(defn, config, prompter, fetch)
