# -*- coding: utf-8 -*-
"""Model list from a local Ollama server."""

from __future__ import annotations

from typing import Dict, Sequence, Tuple

from ..providers.models import ModelInfo
from .base import ModelFetcher, payload_list

DEFAULT_OLLAMA_URL = "http://localhost:11434"

DEFAULT_CONTEXT_WINDOW = 4096
DEFAULT_MAX_TOKENS = 2048

# Explicit size hints in the tag win over family defaults.
_SIZE_HINTS: Sequence[Tuple[Tuple[str, ...], int]] = (
    (("32k", "32000"), 32768),
    (("16k", "16000"), 16384),
    (("8k", "8000"), 8192),
)

# First match wins; codellama is listed ahead of the llama families.
_FAMILY_WINDOWS: Sequence[Tuple[Tuple[str, ...], int]] = (
    (("codellama",), 16384),
    (("llama3", "llama-3"), 8192),
    (("llama2", "llama-2"), 4096),
    (("mistral",), 8192),
    (("mixtral",), 32768),
    (("phi",), 2048),
    (("gemma",), 8192),
    (("qwen",), 32768),
    (("deepseek",), 16384),
)


def infer_context_window(model_name: str) -> int:
    """Guess a context window from an Ollama model name."""
    lowered = model_name.lower()
    for table in (_SIZE_HINTS, _FAMILY_WINDOWS):
        for needles, window in table:
            if any(needle in lowered for needle in needles):
                return window
    return DEFAULT_CONTEXT_WINDOW


class OllamaFetcher(ModelFetcher):
    """GET ``{base_url}/api/tags``; no authorization."""

    def fetch_models(
        self,
        api_key: str = "",
        base_url: str = "",
    ) -> Dict[str, ModelInfo]:
        root = (base_url or DEFAULT_OLLAMA_URL).rstrip("/")
        payload = self._get_json(f"{root}/api/tags")
        models: Dict[str, ModelInfo] = {}
        for entry in payload_list(payload, "models"):
            name = entry.get("name") if isinstance(entry, dict) else None
            if not name or name in models:
                continue
            models[name] = ModelInfo(
                description=f"Ollama model: {name}",
                context_window=infer_context_window(name),
                max_tokens=DEFAULT_MAX_TOKENS,
            )
        return models
