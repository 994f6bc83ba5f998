"""Tests for the provider catalog and its derived queries."""

import pytest

from llmconf.exceptions import (
    InvalidModelError,
    MissingRequiredFieldError,
    NoMatchError,
    UnknownProviderError,
)
from llmconf.providers import registry
from llmconf.providers.models import ProviderConfig


def test_catalog_has_about_35_providers():
    ids = registry.list_provider_ids()
    assert len(ids) == 35
    assert ids == sorted(ids)
    assert {"anthropic", "bedrock", "ollama", "openrouter"} <= set(ids)


def test_get_provider_returns_definition():
    defn = registry.get_provider("anthropic")
    assert defn.name == "Anthropic (Claude)"
    assert defn.default_model_id == "claude-sonnet-4-5-20250929"
    assert defn.default_model_id in defn.models


@pytest.mark.parametrize(
    "query",
    [
        registry.get_provider,
        registry.required_fields,
        registry.optional_fields,
        registry.provider_models,
        registry.default_model,
    ],
)
def test_unknown_provider_rejected_everywhere(query):
    with pytest.raises(UnknownProviderError, match="notaprovider"):
        query("notaprovider")


def test_display_name_falls_back_to_id():
    assert registry.display_name("groq") == "Groq"
    assert registry.display_name("nope") == "nope"
    assert registry.is_valid_provider("groq")
    assert not registry.is_valid_provider("nope")


def test_every_default_model_is_in_catalog_or_provider_is_dynamic():
    for defn in registry.list_providers():
        if defn.default_model_id and not defn.has_dynamic_models:
            assert defn.default_model_id in defn.models, defn.id


def test_providers_by_category_covers_every_provider_once():
    groups = registry.providers_by_category()
    flat = [pid for ids in groups.values() for pid in ids]
    assert sorted(flat) == registry.list_provider_ids()
    assert len(flat) == len(set(flat))
    assert groups["Local/Self-Hosted"] == ["lmstudio", "ollama"]
    assert "Other" in groups


def test_popular_providers_keeps_display_order():
    popular = registry.popular_providers()
    assert popular[:3] == ["openrouter", "openai", "anthropic"]
    assert all(registry.is_valid_provider(pid) for pid in popular)


class TestSearch:
    def test_matches_id_name_and_instructions(self):
        assert "anthropic" in registry.search_providers("claude")
        assert "bedrock" in registry.search_providers("Amazon")
        assert registry.search_providers("  GROQ ") == ["groq"]

    def test_empty_query_matches_nothing(self):
        assert registry.search_providers("") == []
        assert registry.search_providers("   ") == []


class TestFields:
    def test_category_scoped_required_fields(self):
        for pid in registry.list_provider_ids():
            for field in registry.fields_for_provider(pid, required=True):
                assert field.category in (pid, "general")

    def test_optional_fields_include_general_timeout(self):
        names = [f.name for f in registry.fields_for_provider("anthropic", False)]
        assert "requestTimeoutMs" in names

    def test_config_fields_are_unique(self):
        names = [f.name for f in registry.config_fields()]
        assert len(names) == len(set(names))
        assert "awsRegion" in names


class TestCapabilities:
    def test_free_models(self):
        assert registry.models_by_capability("openrouter", "free") == [
            "deepseek/deepseek-chat-v3.1:free",
        ]

    def test_prompt_cache(self):
        assert "deepseek-chat" in registry.models_by_capability(
            "deepseek",
            "prompt_cache",
        )

    def test_unknown_capability_matches_nothing(self):
        assert registry.models_by_capability("anthropic", "telepathy") == []


class TestValidateProviderConfig:
    def test_accepts_catalog_model(self):
        config = ProviderConfig(
            id="anthropic",
            name="Anthropic (Claude)",
            api_key="sk-ant-test",
            model_id="claude-sonnet-4-5-20250929",
        )
        registry.validate_provider_config(config)

    def test_rejects_unknown_model_for_static_provider(self):
        config = ProviderConfig(
            id="anthropic",
            api_key="sk-ant-test",
            model_id="gpt-4o",
        )
        with pytest.raises(InvalidModelError, match="gpt-4o"):
            registry.validate_provider_config(config)

    def test_dynamic_provider_accepts_any_model(self):
        config = ProviderConfig(
            id="openrouter",
            api_key="sk-or-test",
            model_id="meta-llama/llama-3.3-70b-instruct",
        )
        registry.validate_provider_config(config)

    def test_missing_field_reported_by_name(self):
        config = ProviderConfig(id="bedrock", model_id="amazon.nova-pro-v1:0")
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            registry.validate_provider_config(config)
        assert exc_info.value.field_name == "awsAccessKey"


def test_provider_stats_counts_catalog():
    stats = registry.provider_stats()
    assert stats["total_providers"] == 35
    assert stats["providers_with_dynamic_models"] >= 5
    assert stats["total_models"] >= stats["providers_with_models"]


def test_compare_providers():
    result = registry.compare_providers(["openrouter", "ollama"])
    assert result["openrouter"]["free_models"] == 1
    assert result["ollama"]["model_count"] == 0
    assert "free_models" not in result["ollama"]
    with pytest.raises(UnknownProviderError):
        registry.compare_providers(["nope"])


class TestRecommend:
    def test_local_prefers_popular_local_server(self):
        assert registry.recommend_provider({"local": True}) == "ollama"

    def test_images(self):
        pid = registry.recommend_provider({"images": True})
        assert any(
            spec.supports_images
            for spec in registry.get_provider(pid).models.values()
        )

    def test_no_criteria_picks_alphabetically_first_popular(self):
        assert registry.recommend_provider({}) == "anthropic"

    def test_no_match(self, monkeypatch):
        monkeypatch.setattr(registry, "LOCAL_PROVIDERS", ())
        with pytest.raises(NoMatchError):
            registry.recommend_provider({"local": True})
