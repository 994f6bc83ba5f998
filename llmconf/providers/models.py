# -*- coding: utf-8 -*-
"""Pydantic data models for the provider catalog and the saved config."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..constant import CONFIG_VERSION, ENCRYPTION_NOTE

FieldType = Literal["password", "select", "url", "text", "number"]


class FieldDescriptor(BaseModel):
    """One input slot required or allowed by a provider."""

    model_config = {"frozen": True}

    name: str = Field(..., description="Stable field identifier")
    field_type: FieldType = Field(default="text", description="Input kind")
    required: bool = Field(default=False)
    placeholder: str = Field(default="", description="Default shown in UI")
    comment: str = Field(default="", description="Short hint for the user")
    category: str = Field(
        default="general",
        description="Provider id the field belongs to, or 'general'",
    )


class ModelSpec(BaseModel):
    """Static description of a known model (catalog side)."""

    model_config = {"frozen": True}

    max_tokens: int = 0
    context_window: int = 0
    supports_images: bool = False
    supports_prompt_cache: bool = False
    input_price: float = Field(default=0.0, description="USD per 1M tokens")
    output_price: float = Field(default=0.0, description="USD per 1M tokens")
    description: str = ""

    def to_info(self) -> "ModelInfo":
        """Snapshot this spec into the persisted model_info shape."""
        return ModelInfo(
            max_tokens=self.max_tokens,
            context_window=self.context_window,
            supports_images=self.supports_images,
            input_price=self.input_price,
            output_price=self.output_price,
            description=self.description,
        )


class ProviderDefinition(BaseModel):
    """Static definition of a provider, part of the compiled catalog."""

    model_config = {"frozen": True}

    id: str = Field(..., description="Provider identifier")
    name: str = Field(..., description="Human-readable provider name")
    required_fields: List[FieldDescriptor] = Field(default_factory=list)
    optional_fields: List[FieldDescriptor] = Field(default_factory=list)
    has_dynamic_models: bool = Field(
        default=False,
        description="Whether a live model-list endpoint may be consulted",
    )
    supports_model_listing: bool = Field(
        default=False,
        description="Whether the live list is offered in the UI",
    )
    models: Dict[str, ModelSpec] = Field(
        default_factory=dict,
        description="Built-in model catalog",
    )
    default_model_id: str = Field(default="")
    default_base_url: str = Field(default="", description="Default API URL")
    setup_instructions: str = Field(default="")


class ModelInfo(BaseModel):
    """Snapshot of the chosen model stored with a provider config."""

    max_tokens: int = 0
    context_window: int = 0
    supports_images: bool = False
    input_price: float = 0.0
    output_price: float = 0.0
    description: str = ""


class ProviderConfig(BaseModel):
    """A user's saved credentials and model choice for one provider."""

    model_config = {"protected_namespaces": ()}

    id: str = Field(..., description="Provider identifier")
    name: str = Field(default="", description="Provider display name")
    api_key: str = Field(default="", description="Plaintext in memory")
    base_url: str = Field(default="", description="Custom endpoint")
    model_id: str = Field(default="")
    model_info: ModelInfo = Field(default_factory=ModelInfo)
    extra_config: Dict[str, str] = Field(default_factory=dict)


class CLIConfig(BaseModel):
    """Top-level structure of the configuration document."""

    version: str = Field(default=CONFIG_VERSION)
    encryption_note: str = Field(default=ENCRYPTION_NOTE)
    default_provider: str = Field(default="")
    providers: Dict[str, ProviderConfig] = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
