# -*- coding: utf-8 -*-
"""Provider catalog, field routing, encryption and the config store."""

from .encryption import (
    Encryptor,
    encryption_info,
    generate_key_fingerprint,
    is_encrypted,
    validate_encryption,
)
from .field_mapper import (
    destination_for,
    is_api_key_field,
    map_field_to_config,
    validate_required_fields,
)
from .models import (
    CLIConfig,
    FieldDescriptor,
    ModelInfo,
    ModelSpec,
    ProviderConfig,
    ProviderDefinition,
)
from .registry import (
    PROVIDERS,
    compare_providers,
    config_fields,
    default_model,
    display_name,
    fields_for_provider,
    get_provider,
    is_valid_provider,
    list_provider_ids,
    list_providers,
    models_by_capability,
    optional_fields,
    popular_providers,
    provider_models,
    provider_stats,
    providers_by_category,
    recommend_provider,
    required_fields,
    search_providers,
    validate_provider_config,
)
from .store import ConfigStore, mask_api_key

__all__ = [
    # encryption
    "Encryptor",
    "encryption_info",
    "generate_key_fingerprint",
    "is_encrypted",
    "validate_encryption",
    # field_mapper
    "destination_for",
    "is_api_key_field",
    "map_field_to_config",
    "validate_required_fields",
    # models
    "CLIConfig",
    "FieldDescriptor",
    "ModelInfo",
    "ModelSpec",
    "ProviderConfig",
    "ProviderDefinition",
    # registry
    "PROVIDERS",
    "compare_providers",
    "config_fields",
    "default_model",
    "display_name",
    "fields_for_provider",
    "get_provider",
    "is_valid_provider",
    "list_provider_ids",
    "list_providers",
    "models_by_capability",
    "optional_fields",
    "popular_providers",
    "provider_models",
    "provider_stats",
    "providers_by_category",
    "recommend_provider",
    "required_fields",
    "search_providers",
    "validate_provider_config",
    # store
    "ConfigStore",
    "mask_api_key",
]
