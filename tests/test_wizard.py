"""Tests for the interactive setup wizard menu."""

from llmconf.providers.models import ProviderConfig
from llmconf.setup import SetupWizard

# menu indexes
ADD, REMOVE, LIST, TEST, DEFAULT, SAVE, EXIT = range(7)
# provider selection methods
POPULAR, ALL, CATEGORY, SEARCH = range(4)


def _no_fetch(defn, api_key, base_url):
    raise AssertionError("fetch not expected")


def _seed(store):
    store.add_provider(
        ProviderConfig(
            id="anthropic",
            name="Anthropic (Claude)",
            api_key="sk-ant-test",
            model_id="claude-sonnet-4-5-20250929",
        ),
    )
    store.add_provider(
        ProviderConfig(
            id="groq",
            name="Groq",
            api_key="gsk-test",
            model_id="llama-3.3-70b-versatile",
        ),
    )
    store.get_config().default_provider = "anthropic"
    store.save()


def test_add_popular_provider_and_save(store, config_path, make_prompter):
    prompter = make_prompter(
        selects=[ADD, POPULAR, 2, SAVE],
        texts=["sk-ant-test"],
        confirms=[False, True],
    )
    assert SetupWizard(store, prompter, _no_fetch).run() is True

    config = store.load()
    assert config.default_provider == "anthropic"
    provider = config.providers["anthropic"]
    assert provider.api_key == "sk-ant-test"
    assert provider.model_id == "claude-sonnet-4-5-20250929"
    assert f"Configuration saved to {config_path}" in prompter.output


def test_required_field_is_asked_again(store, config_path, make_prompter):
    prompter = make_prompter(
        selects=[ADD, SEARCH, 0, LIST, EXIT],
        texts=["bedrock", "AKIAEXAMPLE1234", "wJalrXUtnFEMI", "", "eu-west-1"],
        confirms=[False, True],
    )
    assert SetupWizard(store, prompter, _no_fetch).run() is False

    provider = store.get_config().providers["bedrock"]
    assert provider.extra_config["aws_region"] == "eu-west-1"
    assert any("awsRegion" in line for line in prompter.output)

    printed = prompter.printed
    assert "aws_access_key: AKI********1234" in printed
    assert "wJalrXUtnFEMI" not in printed
    assert "aws_region: eu-west-1" in printed
    assert not config_path.exists()


def test_existing_config_can_be_left_alone(store, make_prompter):
    _seed(store)
    prompter = make_prompter(confirms=[False])
    assert SetupWizard(store, prompter, _no_fetch).run() is False
    assert "Setup cancelled." in prompter.output


def test_set_default_remove_test_and_save(store, config_path, make_prompter):
    _seed(store)
    prompter = make_prompter(
        selects=[DEFAULT, 1, REMOVE, 1, TEST, SAVE],
        confirms=[True, True],
    )
    assert SetupWizard(store, prompter, _no_fetch).run() is True

    assert "Set groq as default provider" in prompter.output
    assert "Removed provider groq" in prompter.output
    assert (
        "Anthropic (Claude) (anthropic): Configuration valid" in prompter.output
    )
    config = store.load()
    assert sorted(config.providers) == ["anthropic"]
    assert config.default_provider == ""


def test_remove_can_be_cancelled(store, make_prompter):
    _seed(store)
    prompter = make_prompter(
        selects=[REMOVE, 0, EXIT],
        confirms=[True, False],
    )
    SetupWizard(store, prompter, _no_fetch).run()
    assert "Removal cancelled." in prompter.output
    assert "anthropic" in store.get_config().providers


def test_test_reports_failures(store, make_prompter):
    _seed(store)
    store.get_config().providers["anthropic"].model_id = "not-a-model"
    store.save()
    prompter = make_prompter(selects=[TEST, EXIT], confirms=[True])
    SetupWizard(store, prompter, _no_fetch).run()
    assert any(
        line.startswith("Anthropic (Claude) (anthropic): Failed: model not-a-model")
        for line in prompter.output
    )
    assert "Groq (groq): Configuration valid" in prompter.output


def test_nothing_to_save(store, config_path, make_prompter):
    prompter = make_prompter(selects=[SAVE])
    assert SetupWizard(store, prompter, _no_fetch).run() is False
    assert "No providers configured. Nothing to save." in prompter.output
    assert not config_path.exists()


def test_invalid_config_is_not_saved(store, config_path, make_prompter):
    store.add_provider(
        ProviderConfig(id="openai", name="OpenAI", api_key="sk-openai"),
    )
    prompter = make_prompter(selects=[SAVE, EXIT])
    assert SetupWizard(store, prompter, _no_fetch).run() is False
    assert any(
        line.startswith("Cannot save: provider openai has empty model ID")
        for line in prompter.output
    )
    assert not config_path.exists()


def test_errors_keep_the_menu_running(store, make_prompter):
    prompter = make_prompter(
        selects=[REMOVE, ADD, SEARCH, EXIT],
        texts=["zzzz-nothing"],
    )
    assert SetupWizard(store, prompter, _no_fetch).run() is False
    assert "No providers configured." in prompter.output
    assert "Error: no providers found matching 'zzzz-nothing'" in prompter.output
