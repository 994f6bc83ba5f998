"""Pytest configuration and fixtures for all tests."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, List, Sequence

import pytest

from llmconf import constant
from llmconf.providers.encryption import Encryptor
from llmconf.providers.store import ConfigStore


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point the config and key directories into tmp_path for every test."""
    config_dir = tmp_path / "config"
    key_dir = tmp_path / "keys"
    monkeypatch.setattr(constant, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(constant, "KEY_DIR", key_dir)
    return config_dir, key_dir


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop the handler the CLI attaches so it never outlives a test."""
    yield
    logger = logging.getLogger("llmconf")
    for handler in list(logger.handlers):
        if getattr(handler, "_llmconf", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def key_path(tmp_path):
    return tmp_path / "keys" / "encryption.key"


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config" / "config.yaml"


@pytest.fixture
def store(config_path, key_path):
    return ConfigStore(config_path, Encryptor(key_path))


class ScriptedPrompter:
    """Prompter fake that replays queued answers and records output.

    ``select`` answers are option indexes. Running out of answers fails the
    test instead of blocking.
    """

    def __init__(
        self,
        texts: Iterable[str] = (),
        confirms: Iterable[bool] = (),
        selects: Iterable[int] = (),
    ) -> None:
        self.texts = deque(texts)
        self.confirms = deque(confirms)
        self.selects = deque(selects)
        self.output: List[str] = []
        self.text_prompts: List[str] = []
        self.secret_prompts: List[str] = []

    def echo(self, message: str = "") -> None:
        self.output.append(message)

    def text(self, message: str, default: str = "", secret: bool = False) -> str:
        self.text_prompts.append(message)
        if secret:
            self.secret_prompts.append(message)
        if not self.texts:
            raise AssertionError(f"unexpected text prompt: {message}")
        return self.texts.popleft()

    def confirm(self, message: str, default: bool = False) -> bool:
        if not self.confirms:
            raise AssertionError(f"unexpected confirm: {message}")
        return self.confirms.popleft()

    def select(self, message: str, options: Sequence[str]) -> int:
        if not self.selects:
            raise AssertionError(f"unexpected select: {message}")
        index = self.selects.popleft()
        assert 0 <= index < len(options)
        return index

    @property
    def printed(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def make_prompter():
    return ScriptedPrompter
