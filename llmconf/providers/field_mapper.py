# -*- coding: utf-8 -*-
"""Route named input fields into the three slots of a ProviderConfig.

Dozens of catalog field names collapse onto ``api_key``, ``base_url`` and
entries of ``extra_config``. The routing table below is shared by the
prompter, fast setup and the validator.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

from ..exceptions import MissingRequiredFieldError
from .models import FieldDescriptor, ProviderConfig

API_KEY_SLOT = "api_key"
BASE_URL_SLOT = "base_url"
EXTRA_SLOT = "extra_config"


class FieldDestination(NamedTuple):
    slot: str
    key: str = ""


_EXPLICIT_ROUTES = {
    "apiKey": FieldDestination(API_KEY_SLOT),
    "awsAccessKey": FieldDestination(EXTRA_SLOT, "aws_access_key"),
    "awsSecretKey": FieldDestination(EXTRA_SLOT, "aws_secret_key"),
    "awsSessionToken": FieldDestination(EXTRA_SLOT, "aws_session_token"),
    "awsRegion": FieldDestination(EXTRA_SLOT, "aws_region"),
    "vertexProjectId": FieldDestination(EXTRA_SLOT, "vertex_project_id"),
    "vertexRegion": FieldDestination(EXTRA_SLOT, "vertex_region"),
}

# extra_config keys that hold credentials (masked when displayed)
SECRET_EXTRA_KEYS = frozenset(
    {"aws_access_key", "aws_secret_key", "aws_session_token"},
)


def destination_for(field_name: str) -> FieldDestination:
    """Return where a field value is stored.

    ``apiKey`` and any ``*ApiKey`` name go to ``api_key``; AWS and Vertex
    fields go to fixed ``extra_config`` keys; ``*BaseUrl`` names go to
    ``base_url``; everything else is kept verbatim in ``extra_config``.
    """
    route = _EXPLICIT_ROUTES.get(field_name)
    if route is not None:
        return route
    if field_name.endswith("ApiKey"):
        return FieldDestination(API_KEY_SLOT)
    if field_name.endswith("BaseUrl"):
        return FieldDestination(BASE_URL_SLOT)
    return FieldDestination(EXTRA_SLOT, field_name)


def routes_to_api_key(field_name: str) -> bool:
    return destination_for(field_name).slot == API_KEY_SLOT


def is_api_key_field(field_name: str) -> bool:
    """Loose "looks like an API key" check used by fast setup."""
    lowered = field_name.lower()
    return "apikey" in lowered or "api_key" in lowered or lowered == "key"


def map_field_to_config(
    field_name: str,
    value: str,
    config: ProviderConfig,
) -> ProviderConfig:
    """Return a copy of *config* with *value* stored in the field's slot.

    The input config is left untouched and no other slot is cleared.
    """
    dest = destination_for(field_name)
    if dest.slot == API_KEY_SLOT:
        return config.model_copy(update={"api_key": value})
    if dest.slot == BASE_URL_SLOT:
        return config.model_copy(update={"base_url": value})
    extra = dict(config.extra_config)
    extra[dest.key] = value
    return config.model_copy(update={"extra_config": extra})


def read_field(field_name: str, config: ProviderConfig) -> str:
    """Return the value currently stored for *field_name* ("" if unset)."""
    dest = destination_for(field_name)
    if dest.slot == API_KEY_SLOT:
        return config.api_key
    if dest.slot == BASE_URL_SLOT:
        return config.base_url
    return config.extra_config.get(dest.key, "")


def validate_required_fields(
    provider_id: str,
    config: ProviderConfig,
    fields: Iterable[FieldDescriptor],
) -> None:
    """Raise ``MissingRequiredFieldError`` for the first empty slot."""
    for field in fields:
        if not read_field(field.name, config):
            raise MissingRequiredFieldError(field.name, provider_id)
