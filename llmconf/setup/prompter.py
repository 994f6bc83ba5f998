# -*- coding: utf-8 -*-
"""The interface the setup flows use to talk to the user."""

from __future__ import annotations

from typing import Protocol, Sequence


class Prompter(Protocol):
    """Collects input from the user.

    ``llmconf.cli.utils.ClickPrompter`` is the terminal implementation;
    tests drive the flows with a scripted one.
    """

    def echo(self, message: str = "") -> None:
        ...

    def text(
        self,
        message: str,
        default: str = "",
        secret: bool = False,
    ) -> str:
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        ...

    def select(self, message: str, options: Sequence[str]) -> int:
        """Return the index of the chosen option."""
        ...
