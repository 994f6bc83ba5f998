# -*- coding: utf-8 -*-
"""click-backed prompt helpers shared by the CLI commands."""
from __future__ import annotations

from typing import Optional, Sequence

import click


def prompt_choice(
    prompt_text: str,
    options: Sequence[str],
    default: Optional[str] = None,
) -> str:
    """Show a numbered list and return the chosen option text."""
    if not options:
        raise click.ClickException("Nothing to choose from.")
    click.echo(prompt_text)
    for i, label in enumerate(options, start=1):
        click.echo(f"  {i}. {label}")
    default_num = options.index(default) + 1 if default in options else None
    num = click.prompt(
        "Enter number",
        type=click.IntRange(1, len(options)),
        default=default_num,
        show_default=default_num is not None,
    )
    return options[num - 1]


def prompt_confirm(prompt_text: str, default: bool = False) -> bool:
    return click.confirm(prompt_text, default=default)


class ClickPrompter:
    """Terminal implementation of ``llmconf.setup.Prompter``."""

    def echo(self, message: str = "") -> None:
        click.echo(message)

    def text(
        self,
        message: str,
        default: str = "",
        secret: bool = False,
    ) -> str:
        return click.prompt(
            message,
            default=default,
            hide_input=secret,
            show_default=bool(default) and not secret,
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        return prompt_confirm(message, default=default)

    def select(self, message: str, options: Sequence[str]) -> int:
        return list(options).index(prompt_choice(message, list(options)))
