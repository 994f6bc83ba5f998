# -*- coding: utf-8 -*-
"""Provider registry: lookups and derived views over the built-in catalog."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from ..exceptions import InvalidModelError, NoMatchError, UnknownProviderError
from .catalog_data import (
    ALL_PROVIDERS,
    CATEGORY_ASSIGNMENTS,
    GENERAL_FIELDS,
    LOCAL_PROVIDERS,
    OTHER_CATEGORY,
    POPULAR_PROVIDERS,
    PROVIDERS,
)
from .field_mapper import validate_required_fields
from .models import FieldDescriptor, ModelSpec, ProviderConfig, ProviderDefinition

logger = logging.getLogger(__name__)

LARGE_CONTEXT_THRESHOLD = 100_000

CAPABILITIES = ("images", "prompt_cache", "large_context", "free")


def _is_free(spec: ModelSpec) -> bool:
    return spec.input_price == 0 and spec.output_price == 0


def _has_capability(spec: ModelSpec, capability: str) -> bool:
    if capability == "images":
        return spec.supports_images
    if capability == "prompt_cache":
        return spec.supports_prompt_cache
    if capability == "large_context":
        return spec.context_window >= LARGE_CONTEXT_THRESHOLD
    if capability == "free":
        return _is_free(spec)
    return False


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_provider(provider_id: str) -> ProviderDefinition:
    """Return a provider definition by id.

    Raises ``UnknownProviderError`` if the id is not in the catalog.
    """
    defn = PROVIDERS.get(provider_id)
    if defn is None:
        raise UnknownProviderError(provider_id)
    return defn


def is_valid_provider(provider_id: str) -> bool:
    return provider_id in PROVIDERS


def display_name(provider_id: str) -> str:
    """Return the provider's display name, or the id itself if unknown."""
    defn = PROVIDERS.get(provider_id)
    return defn.name if defn is not None else provider_id


def list_provider_ids() -> List[str]:
    """Return every provider id, sorted."""
    return list(ALL_PROVIDERS)


def list_providers() -> List[ProviderDefinition]:
    """Return all registered provider definitions, sorted by id."""
    return [PROVIDERS[pid] for pid in ALL_PROVIDERS]


# ---------------------------------------------------------------------------
# Grouping & search
# ---------------------------------------------------------------------------


def providers_by_category() -> Dict[str, List[str]]:
    """Group provider ids into named categories.

    Ids missing from the assignment table land in ``Other``; empty
    categories are dropped. Each list is sorted.
    """
    assigned = set()
    groups: Dict[str, List[str]] = {}
    for category, ids in CATEGORY_ASSIGNMENTS.items():
        present = sorted(pid for pid in ids if pid in PROVIDERS)
        assigned.update(ids)
        if present:
            groups[category] = present
    other = [pid for pid in ALL_PROVIDERS if pid not in assigned]
    if other:
        groups[OTHER_CATEGORY] = other
    return groups


def popular_providers() -> List[str]:
    """Return the curated short list, in display order."""
    return [pid for pid in POPULAR_PROVIDERS if pid in PROVIDERS]


def search_providers(query: str) -> List[str]:
    """Case-insensitive substring search over id, name and setup hint."""
    needle = query.strip().lower()
    if not needle:
        return []
    matches = []
    for pid in ALL_PROVIDERS:
        defn = PROVIDERS[pid]
        haystacks = (pid, defn.name, defn.setup_instructions)
        if any(needle in text.lower() for text in haystacks):
            matches.append(pid)
    return matches


# ---------------------------------------------------------------------------
# Per-provider queries
# ---------------------------------------------------------------------------


def required_fields(provider_id: str) -> List[FieldDescriptor]:
    return list(get_provider(provider_id).required_fields)


def optional_fields(provider_id: str) -> List[FieldDescriptor]:
    return list(get_provider(provider_id).optional_fields)


def provider_models(provider_id: str) -> Dict[str, ModelSpec]:
    return dict(get_provider(provider_id).models)


def default_model(provider_id: str) -> str:
    return get_provider(provider_id).default_model_id


def config_fields() -> List[FieldDescriptor]:
    """Every field descriptor across the catalog, deduplicated by name."""
    seen: Dict[str, FieldDescriptor] = {}
    for defn in list_providers():
        for field in [*defn.required_fields, *defn.optional_fields]:
            seen.setdefault(field.name, field)
    for field in GENERAL_FIELDS:
        seen.setdefault(field.name, field)
    return list(seen.values())


def fields_for_provider(
    provider_id: str,
    required: bool = True,
) -> List[FieldDescriptor]:
    """Return the provider's fields scoped to its own category.

    Only fields whose category is the provider id or ``general`` are
    returned.
    """
    defn = get_provider(provider_id)
    pool = defn.required_fields if required else defn.optional_fields
    return [
        field
        for field in pool
        if field.category in (provider_id, "general")
    ]


def models_by_capability(provider_id: str, capability: str) -> List[str]:
    """Return sorted model ids of the provider that have *capability*.

    Known capabilities: ``images``, ``prompt_cache``, ``large_context``,
    ``free``. Anything else matches nothing.
    """
    models = get_provider(provider_id).models
    return sorted(
        model_id
        for model_id, spec in models.items()
        if _has_capability(spec, capability)
    )


def validate_provider_config(config: ProviderConfig) -> None:
    """Check a provider config against its catalog definition.

    Required slots must be filled, and a model id must come from the
    built-in catalog unless the provider lists models dynamically.
    """
    defn = get_provider(config.id)
    validate_required_fields(config.id, config, defn.required_fields)
    if (
        config.model_id
        and defn.models
        and config.model_id not in defn.models
        and not defn.has_dynamic_models
    ):
        raise InvalidModelError(config.model_id, config.id)


# ---------------------------------------------------------------------------
# Statistics, comparison, recommendation
# ---------------------------------------------------------------------------


def provider_stats() -> Dict[str, int]:
    defs = list_providers()
    with_models = [d for d in defs if d.models]
    return {
        "total_providers": len(defs),
        "total_models": sum(len(d.models) for d in with_models),
        "providers_with_models": len(with_models),
        "providers_with_dynamic_models": sum(
            1 for d in defs if d.has_dynamic_models
        ),
        "total_config_fields": len(config_fields()),
    }


def compare_providers(provider_ids: Iterable[str]) -> Dict[str, Dict[str, Any]]:
    """Summarise several providers side by side."""
    comparison: Dict[str, Dict[str, Any]] = {}
    for pid in provider_ids:
        defn = get_provider(pid)
        info: Dict[str, Any] = {
            "name": defn.name,
            "setup_instructions": defn.setup_instructions,
            "has_dynamic_models": defn.has_dynamic_models,
            "model_count": len(defn.models),
            "required_fields": len(defn.required_fields),
            "optional_fields": len(defn.optional_fields),
        }
        if defn.models:
            specs = list(defn.models.values())
            info["models_with_images"] = sum(
                1 for s in specs if s.supports_images
            )
            info["models_with_prompt_cache"] = sum(
                1 for s in specs if s.supports_prompt_cache
            )
            info["free_models"] = sum(1 for s in specs if _is_free(s))
            info["large_context_models"] = sum(
                1
                for s in specs
                if s.context_window >= LARGE_CONTEXT_THRESHOLD
            )
        comparison[pid] = info
    return comparison


def recommend_provider(criteria: Mapping[str, bool]) -> str:
    """Return the best-scoring provider id for the given criteria.

    Recognised criteria: ``images``, ``free``, ``large_context`` and
    ``local``. ``local`` restricts the candidates to local servers.
    Popular providers get a one-point bonus. Ties go to the
    alphabetically first id.

    Raises ``NoMatchError`` when nothing scores above zero.
    """
    wants_images = bool(criteria.get("images"))
    wants_free = bool(criteria.get("free"))
    wants_large = bool(criteria.get("large_context"))
    wants_local = bool(criteria.get("local"))
    popular = set(popular_providers())

    best_id, best_score = "", 0
    for pid in ALL_PROVIDERS:
        score = 0
        if wants_local:
            if pid not in LOCAL_PROVIDERS:
                continue
            score += 10
        for spec in PROVIDERS[pid].models.values():
            if wants_images and spec.supports_images:
                score += 3
            if wants_free and _is_free(spec):
                score += 2
            if wants_large and spec.context_window >= LARGE_CONTEXT_THRESHOLD:
                score += 2
        if pid in popular:
            score += 1
        if score > best_score:
            best_id, best_score = pid, score

    if not best_id:
        raise NoMatchError("no provider matches the specified criteria")
    logger.debug("Recommended %s (score %d) for %s", best_id, best_score, criteria)
    return best_id
