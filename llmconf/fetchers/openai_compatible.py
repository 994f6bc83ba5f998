# -*- coding: utf-8 -*-
"""Model list from any endpoint that speaks the OpenAI ``/v1/models`` API.

The endpoint returns bare ids, so window sizes, prices and image support
are filled in from per-host tables (Groq, OpenAI) or a generic table.
"""

from __future__ import annotations

from typing import Dict, NamedTuple, Optional, Sequence

from ..providers.models import ModelInfo
from .base import ModelFetcher, bearer_headers, payload_list

DEFAULT_OPENAI_URL = "https://api.openai.com"


class _Hint(NamedTuple):
    needle: str
    context_window: int
    max_tokens: int
    description: Optional[str] = None
    input_price: float = 0.0
    output_price: float = 0.0
    supports_images: bool = False


GROQ_HINTS: Sequence[_Hint] = (
    _Hint("llama-3.3-70b", 128000, 32768, "Meta Llama 3.3 70B", 0.59, 0.79),
    _Hint("llama-3.1-8b", 128000, 8000, "Meta Llama 3.1 8B", 0.05, 0.08),
    _Hint("mixtral-8x7b", 32768, 32768, "Mixtral 8x7B", 0.24, 0.24),
    _Hint("gemma2-9b", 8192, 8192, "Google Gemma 2 9B", 0.20, 0.20),
)

OPENAI_HINTS: Sequence[_Hint] = (
    _Hint("gpt-4o", 128000, 16384, "GPT-4 Optimized", 2.50, 10.00, True),
    _Hint("gpt-4-turbo", 128000, 4096, "GPT-4 Turbo", 10.00, 30.00, True),
    _Hint("gpt-4", 8192, 4096, "GPT-4", 30.00, 60.00),
    _Hint("gpt-3.5-turbo", 16385, 4096, "GPT-3.5 Turbo", 0.50, 1.50),
    _Hint("o1", 200000, 100000, "OpenAI o1", 15.00, 60.00),
)

# Matched against the lower-cased id.
GENERIC_HINTS: Sequence[_Hint] = (
    _Hint("gpt-4", 128000, 4096, "GPT-4 compatible model"),
    _Hint("gpt-3.5", 16385, 4096, "GPT-3.5 compatible model"),
    _Hint("claude", 200000, 8192, "Claude compatible model"),
    _Hint("llama", 8192, 4096, "Llama compatible model"),
    _Hint("mistral", 32768, 8192, "Mistral compatible model"),
    _Hint("mixtral", 32768, 8192, "Mistral compatible model"),
)

_FALLBACK_WINDOW = 8192
_FALLBACK_MAX_TOKENS = 4096


def _apply(hints: Sequence[_Hint], model_id: str, default_desc: str) -> ModelInfo:
    for hint in hints:
        if hint.needle in model_id:
            return ModelInfo(
                context_window=hint.context_window,
                max_tokens=hint.max_tokens,
                description=hint.description or default_desc,
                input_price=hint.input_price,
                output_price=hint.output_price,
                supports_images=hint.supports_images,
            )
    return ModelInfo(
        context_window=_FALLBACK_WINDOW,
        max_tokens=_FALLBACK_MAX_TOKENS,
        description=default_desc,
    )


def enrich_model(model_id: str, base_url: str) -> ModelInfo:
    """Infer ModelInfo for *model_id* from the host and the id itself."""
    if "groq" in base_url:
        return _apply(GROQ_HINTS, model_id, f"Model: {model_id}")
    if "openai" in base_url:
        return _apply(OPENAI_HINTS, model_id, f"Model: {model_id}")
    return _apply(
        GENERIC_HINTS,
        model_id.lower(),
        f"OpenAI-compatible model: {model_id}",
    )


class OpenAICompatibleFetcher(ModelFetcher):
    """GET ``{base_url}/v1/models`` with optional Bearer authorization."""

    def fetch_models(
        self,
        api_key: str = "",
        base_url: str = "",
    ) -> Dict[str, ModelInfo]:
        root = (base_url or DEFAULT_OPENAI_URL).rstrip("/")
        payload = self._get_json(
            f"{root}/v1/models",
            headers=bearer_headers(api_key),
        )
        models: Dict[str, ModelInfo] = {}
        for entry in payload_list(payload, "data"):
            model_id = entry.get("id") if isinstance(entry, dict) else None
            if model_id:
                models[model_id] = enrich_model(model_id, root)
        return models
