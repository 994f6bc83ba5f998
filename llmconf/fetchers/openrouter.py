# -*- coding: utf-8 -*-
"""Model list from the OpenRouter aggregator."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from ..exceptions import FetchFailedError
from ..providers.models import ModelInfo
from .base import ModelFetcher, bearer_headers, payload_list

OPENROUTER_MODELS_URL = "https://openrouter.ai/api/v1/models"

# OpenRouter prices are USD per token; the catalog uses USD per 1M tokens.
PRICE_SCALE = 1_000_000


def decode_modality(value: Any) -> List[str]:
    """Accept a list of strings, a single string, or anything else as []."""
    if isinstance(value, list):
        return [str(item) for item in value if isinstance(item, str)]
    if isinstance(value, str):
        return [value]
    return []


def _parse_price(value: Optional[Union[str, float]]) -> float:
    try:
        return float(value) * PRICE_SCALE if value is not None else 0.0
    except (TypeError, ValueError):
        return 0.0


class _TopProvider(BaseModel):
    max_completion_tokens: Optional[int] = None


class _Architecture(BaseModel):
    modality: List[str] = Field(default_factory=list)

    @field_validator("modality", mode="before")
    @classmethod
    def _tolerant_modality(cls, value: Any) -> List[str]:
        return decode_modality(value)


class _Pricing(BaseModel):
    prompt: Optional[Union[str, float]] = None
    completion: Optional[Union[str, float]] = None


class OpenRouterModel(BaseModel):
    """One entry of the ``data`` array returned by ``/api/v1/models``."""

    id: str
    name: str = ""
    description: Optional[str] = None
    context_length: Optional[int] = None
    top_provider: Optional[_TopProvider] = None
    architecture: Optional[_Architecture] = None
    pricing: Optional[_Pricing] = None

    def to_info(self) -> ModelInfo:
        modality = self.architecture.modality if self.architecture else []
        pricing = self.pricing or _Pricing()
        return ModelInfo(
            description=self.description or "",
            context_window=self.context_length or 0,
            max_tokens=(
                self.top_provider.max_completion_tokens or 0
                if self.top_provider
                else 0
            ),
            supports_images="image" in modality,
            input_price=_parse_price(pricing.prompt),
            output_price=_parse_price(pricing.completion),
        )


class OpenRouterFetcher(ModelFetcher):
    """GET the fixed OpenRouter endpoint with Bearer authorization."""

    def fetch_models(
        self,
        api_key: str = "",
        base_url: str = "",
    ) -> Dict[str, ModelInfo]:
        payload = self._get_json(
            OPENROUTER_MODELS_URL,
            headers=bearer_headers(api_key),
        )
        models: Dict[str, ModelInfo] = {}
        for entry in payload_list(payload, "data"):
            try:
                model = OpenRouterModel.model_validate(entry)
            except ValueError as exc:
                raise FetchFailedError(
                    f"failed to decode response: {exc}",
                    cause=exc,
                ) from exc
            models[model.id] = model.to_info()
        return models
