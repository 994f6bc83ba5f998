# -*- coding: utf-8 -*-
"""Pick a fetcher for a provider and fall back to its built-in models."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple

import httpx

from ..constant import FETCH_TIMEOUT
from ..exceptions import FetchFailedError
from ..providers.models import ModelInfo, ProviderDefinition
from .base import ModelFetcher
from .ollama import OllamaFetcher
from .openai_compatible import OpenAICompatibleFetcher
from .openrouter import OpenRouterFetcher

logger = logging.getLogger(__name__)


def catalog_models(defn: ProviderDefinition) -> Dict[str, ModelInfo]:
    """The provider's built-in models in the persisted ModelInfo shape."""
    return {mid: spec.to_info() for mid, spec in defn.models.items()}


def get_model_fetcher(
    provider_id: str,
    transport: Optional[httpx.BaseTransport] = None,
    timeout: float = FETCH_TIMEOUT,
) -> Optional[ModelFetcher]:
    """Return the fetcher for *provider_id*, or ``None`` if it has none."""
    if provider_id == "openrouter":
        return OpenRouterFetcher(transport, timeout)
    if provider_id == "ollama":
        return OllamaFetcher(transport, timeout)
    if provider_id in ("openai", "openai-native", "groq"):
        return OpenAICompatibleFetcher(transport, timeout)
    return None


def fetch_for_provider(
    defn: ProviderDefinition,
    api_key: str = "",
    base_url: str = "",
    transport: Optional[httpx.BaseTransport] = None,
    timeout: float = FETCH_TIMEOUT,
) -> Tuple[Dict[str, ModelInfo], Optional[FetchFailedError]]:
    """Return ``(models, error)`` for a provider.

    Providers without dynamic models (or without a fetcher) get their
    built-in catalog and no error. A failed or empty live fetch also yields
    the built-in catalog, paired with the ``FetchFailedError`` so callers
    can report it and carry on.
    """
    fallback = catalog_models(defn)
    if not defn.has_dynamic_models:
        return fallback, None
    fetcher = get_model_fetcher(defn.id, transport, timeout)
    if fetcher is None:
        return fallback, None

    try:
        models = fetcher.fetch_models(api_key, base_url or defn.default_base_url)
    except FetchFailedError as exc:
        logger.warning(
            "Model fetch for %s failed, using built-in list: %s",
            defn.id,
            exc,
        )
        return fallback, exc

    if not models:
        logger.warning("Model fetch for %s returned no models", defn.id)
        return fallback, FetchFailedError("API returned no models")
    return models, None
