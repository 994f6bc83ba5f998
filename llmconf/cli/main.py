# -*- coding: utf-8 -*-
"""Top-level ``llmconf`` command group."""
from __future__ import annotations

import logging
from typing import Any, Optional

import click

from .. import __version__
from ..exceptions import LLMConfError
from ..providers.store import ConfigStore
from ..setup import SetupWizard, fast_setup
from ..utils.logging import setup_logger
from .config_cmd import config_group
from .key_cmd import key_group
from .providers_cmd import providers_group
from .utils import ClickPrompter

logger = logging.getLogger(__name__)


class LLMConfGroup(click.Group):
    """Reports ``LLMConfError`` as a one-line error with exit code 1."""

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except LLMConfError as exc:
            logger.debug("Command failed: %r", exc)
            raise click.ClickException(str(exc)) from exc


@click.group(cls=LLMConfGroup)
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    default=None,
    help="Log level (debug, info, warning, error). "
    "Defaults to $LLMCONF_LOG_LEVEL or warning.",
)
def cli(log_level: Optional[str]) -> None:
    """Configure LLM providers, credentials and models."""
    setup_logger(log_level)


# ---------------------------------------------------------------------------
# configure
# ---------------------------------------------------------------------------


def run_configure(provider_id: Optional[str], api_key: Optional[str]) -> None:
    store = ConfigStore()
    prompter = ClickPrompter()
    if store.recover_key_rotation():
        click.echo(
            click.style(
                "Recovered encryption key from an interrupted rotation.",
                fg="yellow",
            ),
        )
    if provider_id is None:
        SetupWizard(store, prompter).run()
        return
    fast_setup(provider_id, api_key or "", store=store, prompter=prompter)


@cli.command("configure")
@click.argument("provider_id", required=False, default=None)
@click.argument("api_key", required=False, default=None)
def configure_cmd(provider_id: Optional[str], api_key: Optional[str]) -> None:
    """Set up providers.

    \b
    Examples:
      llmconf configure                        # full wizard
      llmconf configure anthropic              # prompts for the key
      llmconf configure anthropic sk-ant-...   # no prompts
    """
    run_configure(provider_id, api_key)


@cli.command("setup")
def setup_cmd() -> None:
    """Deprecated alias for ``llmconf configure``."""
    click.echo(
        click.style(
            "'llmconf setup' is deprecated, use 'llmconf configure' instead.",
            fg="yellow",
        ),
        err=True,
    )
    run_configure(None, None)


cli.add_command(providers_group)
cli.add_command(key_group)
cli.add_command(config_group)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
