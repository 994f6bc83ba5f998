# -*- coding: utf-8 -*-
"""Error kinds raised by the configuration engine."""

from __future__ import annotations

from typing import Optional


class LLMConfError(Exception):
    """Base class for every configuration-engine error."""


class UnknownProviderError(LLMConfError):
    """A provider id is not in the catalog."""

    def __init__(self, provider_id: str) -> None:
        super().__init__(f"provider '{provider_id}' not found")
        self.provider_id = provider_id


class MissingRequiredFieldError(LLMConfError):
    """A required slot is absent or empty."""

    def __init__(self, field_name: str, provider_id: str = "") -> None:
        message = f"required field '{field_name}' is missing or empty"
        if provider_id:
            message += f" for provider {provider_id}"
        super().__init__(message)
        self.field_name = field_name
        self.provider_id = provider_id


class InvalidModelError(LLMConfError):
    """The chosen model id is not in the provider's catalog."""

    def __init__(self, model_id: str, provider_id: str) -> None:
        super().__init__(f"model {model_id} not found for provider {provider_id}")
        self.model_id = model_id
        self.provider_id = provider_id


class CorruptCiphertextError(LLMConfError):
    """Ciphertext could not be decoded or authenticated."""


class KeyMismatchError(LLMConfError):
    """The stored key does not have the expected length."""

    def __init__(self, length: int, expected: int = 32) -> None:
        super().__init__(
            f"invalid key length: expected {expected}, got {length}",
        )
        self.length = length


class IOFailureError(LLMConfError):
    """Reading or writing the config or key file failed."""


class ConfigValidationError(LLMConfError):
    """The configuration document breaks one of its invariants."""


class NoMatchError(LLMConfError):
    """No provider scores above zero for the requested criteria."""


class ProviderNotConfiguredError(LLMConfError):
    """The provider id is not present in the loaded configuration."""

    def __init__(self, provider_id: str) -> None:
        super().__init__(f"provider {provider_id} not found")
        self.provider_id = provider_id


class FetchFailedError(LLMConfError):
    """A live model-list fetch failed. Always recoverable."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class FetchTimeoutError(FetchFailedError):
    """The live model-list fetch exceeded its deadline."""
