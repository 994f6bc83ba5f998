# -*- coding: utf-8 -*-
"""Interactive menu for adding, removing and testing providers."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Sequence, Tuple

from ..exceptions import (
    ConfigValidationError,
    LLMConfError,
    MissingRequiredFieldError,
)
from ..fetchers import fetch_for_provider
from ..providers.field_mapper import (
    SECRET_EXTRA_KEYS,
    map_field_to_config,
    validate_required_fields,
)
from ..providers.models import ProviderConfig, ProviderDefinition
from ..providers.registry import (
    display_name,
    get_provider,
    list_provider_ids,
    popular_providers,
    providers_by_category,
    search_providers,
    validate_provider_config,
)
from ..providers.store import ConfigStore, mask_api_key
from .fields import collect_optional_fields, prompt_for_field
from .model_select import FetchFn, select_model
from .prompter import Prompter

logger = logging.getLogger(__name__)

MENU: Sequence[Tuple[str, str]] = (
    ("add", "Add a new provider"),
    ("remove", "Remove a provider"),
    ("list", "List configured providers"),
    ("test", "Test provider configurations"),
    ("default", "Set default provider"),
    ("save", "Save configuration and exit"),
    ("exit", "Exit without saving"),
)

SELECTION_METHODS: Sequence[str] = (
    "View popular providers",
    "View all providers",
    "Browse by category",
    "Search providers",
)


class SetupWizard:
    """Menu loop over one :class:`ConfigStore`.

    Changes stay in memory until the user picks "save".
    """

    def __init__(
        self,
        store: ConfigStore,
        prompter: Prompter,
        fetch: FetchFn = fetch_for_provider,
    ) -> None:
        self.store = store
        self.prompter = prompter
        self.fetch = fetch

    def run(self) -> bool:
        """Run the menu until save or exit. Returns True if saved."""
        p = self.prompter
        p.echo("Welcome to llmconf setup!")
        p.echo("This wizard configures API providers for your LLM tools.")

        if self.store.exists() and not p.confirm(
            "Configuration already exists. Add more providers or reconfigure?",
            default=True,
        ):
            p.echo("Setup cancelled.")
            return False

        self.store.load()
        handlers: Dict[str, Callable[[], None]] = {
            "add": self.add_provider,
            "remove": self.remove_provider,
            "list": self.list_providers,
            "test": self.test_providers,
            "default": self.set_default_provider,
        }
        labels = [label for _, label in MENU]
        while True:
            action = MENU[p.select("What would you like to do?", labels)][0]
            if action == "save":
                try:
                    return self.save()
                except ConfigValidationError as exc:
                    p.echo(f"Cannot save: {exc}")
                    continue
            if action == "exit":
                return False
            try:
                handlers[action]()
            except LLMConfError as exc:
                logger.debug("Wizard action %s failed: %s", action, exc)
                p.echo(f"Error: {exc}")

    # -----------------------------------------------------------------------
    # Provider selection
    # -----------------------------------------------------------------------

    def _pick(self, message: str, provider_ids: List[str]) -> str:
        labels = [f"{display_name(pid)} ({pid})" for pid in provider_ids]
        return provider_ids[self.prompter.select(message, labels)]

    def select_provider(self) -> str:
        method = SELECTION_METHODS[
            self.prompter.select(
                "How would you like to choose a provider?",
                SELECTION_METHODS,
            )
        ]
        if method == "View popular providers":
            return self._pick("Select a popular provider:", popular_providers())
        if method == "View all providers":
            return self._pick("Select a provider:", list_provider_ids())
        if method == "Browse by category":
            groups = providers_by_category()
            names = sorted(groups)
            category = names[self.prompter.select("Select a category:", names)]
            return self._pick(
                f"Select a provider from {category}:",
                groups[category],
            )

        query = self.prompter.text(
            "Enter search term (provider name, company, etc.)",
        )
        matches = search_providers(query)
        if not matches:
            raise LLMConfError(f"no providers found matching '{query}'")
        return self._pick(
            f"Found {len(matches)} providers matching '{query}':",
            matches,
        )

    # -----------------------------------------------------------------------
    # Actions
    # -----------------------------------------------------------------------

    def collect_required_fields(
        self,
        defn: ProviderDefinition,
        config: ProviderConfig,
    ) -> ProviderConfig:
        """Prompt every required field, re-asking for any left empty."""
        if not defn.required_fields:
            return config
        self.prompter.echo("Required configuration:")
        for field in defn.required_fields:
            value = prompt_for_field(self.prompter, field, required=True)
            config = map_field_to_config(field.name, value, config)

        by_name = {f.name: f for f in defn.required_fields}
        while True:
            try:
                validate_required_fields(defn.id, config, defn.required_fields)
                return config
            except MissingRequiredFieldError as exc:
                self.prompter.echo(f"{exc}, please enter a value.")
                field = by_name[exc.field_name]
                value = prompt_for_field(self.prompter, field, required=True)
                config = map_field_to_config(field.name, value, config)

    def add_provider(self) -> None:
        pid = self.select_provider()
        defn = get_provider(pid)
        self.prompter.echo(f"Configuring {defn.name}")
        self.prompter.echo(f"Setup instructions: {defn.setup_instructions}")

        config = ProviderConfig(id=pid, name=defn.name)
        config = self.collect_required_fields(defn, config)
        config = collect_optional_fields(defn, config, self.prompter)
        config = select_model(
            defn,
            config,
            self.prompter,
            fast=False,
            fetch=self.fetch,
        )
        validate_provider_config(config)

        self.store.add_provider(config)
        cli_config = self.store.get_config()
        if not cli_config.default_provider:
            cli_config.default_provider = pid
        self.prompter.echo(f"Successfully configured {defn.name}!")

    def _configured_ids(self) -> List[str]:
        return sorted(self.store.get_config().providers)

    def remove_provider(self) -> None:
        ids = self._configured_ids()
        if not ids:
            self.prompter.echo("No providers configured.")
            return
        providers = self.store.get_config().providers
        labels = [f"{providers[pid].name} ({pid})" for pid in ids]
        pid = ids[self.prompter.select("Select provider to remove:", labels)]
        if not self.prompter.confirm(
            f"Are you sure you want to remove {pid}?",
            default=False,
        ):
            self.prompter.echo("Removal cancelled.")
            return
        self.store.remove_provider(pid)
        self.prompter.echo(f"Removed provider {pid}")

    def list_providers(self) -> None:
        config = self.store.get_config()
        if not config.providers:
            self.prompter.echo("No providers configured.")
            return
        self.prompter.echo("Configured providers:")
        for pid in self._configured_ids():
            provider = config.providers[pid]
            status = " (default)" if pid == config.default_provider else ""
            self.prompter.echo(f"  - {provider.name} ({pid}){status}")
            if provider.api_key:
                self.prompter.echo(f"    API key: {mask_api_key(provider.api_key)}")
            if provider.model_id:
                self.prompter.echo(f"    Model: {provider.model_id}")
            if provider.base_url:
                self.prompter.echo(f"    Base URL: {provider.base_url}")
            for key in sorted(provider.extra_config):
                value = provider.extra_config[key]
                if key in SECRET_EXTRA_KEYS:
                    value = mask_api_key(value)
                self.prompter.echo(f"    {key}: {value}")

    def test_providers(self) -> None:
        """Check each configured provider against its catalog definition."""
        config = self.store.get_config()
        if not config.providers:
            self.prompter.echo("No providers configured to test.")
            return
        for pid in self._configured_ids():
            provider = config.providers[pid]
            try:
                validate_provider_config(provider)
            except LLMConfError as exc:
                self.prompter.echo(f"{provider.name} ({pid}): Failed: {exc}")
            else:
                self.prompter.echo(
                    f"{provider.name} ({pid}): Configuration valid",
                )

    def set_default_provider(self) -> None:
        config = self.store.get_config()
        ids = self._configured_ids()
        if not ids:
            self.prompter.echo("No providers configured.")
            return
        labels = []
        for pid in ids:
            current = " (current default)" if pid == config.default_provider else ""
            labels.append(f"{config.providers[pid].name} ({pid}){current}")
        pid = ids[self.prompter.select("Select default provider:", labels)]
        self.store.set_default_provider(pid)
        self.prompter.echo(f"Set {pid} as default provider")

    def save(self) -> bool:
        config = self.store.get_config()
        if not config.providers:
            self.prompter.echo("No providers configured. Nothing to save.")
            return False
        self.store.validate(config)
        self.store.save(config)
        self.prompter.echo(f"Configuration saved to {self.store.config_path}")
        self.prompter.echo(
            f"Setup complete with {len(config.providers)} configured "
            "provider(s).",
        )
        return True
