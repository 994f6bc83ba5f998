# -*- coding: utf-8 -*-
import os
from pathlib import Path

CONFIG_DIR = (
    Path(os.environ.get("LLMCONF_CONFIG_DIR", "~/.cline"))
    .expanduser()
    .resolve()
)

CONFIG_FILE = os.environ.get("LLMCONF_CONFIG_FILE", "config.yaml")

KEY_DIR = (
    Path(
        os.environ.get(
            "LLMCONF_KEY_DIR",
            str(Path("~") / "Documents" / "Cline" / "CLI" / ".keys"),
        ),
    )
    .expanduser()
    .resolve()
)

KEY_FILE = os.environ.get("LLMCONF_KEY_FILE", "encryption.key")

KEY_SIZE = 32
NONCE_SIZE = 12

CONFIG_VERSION = "1.0.0"
ENCRYPTION_NOTE = "API keys in this file are encrypted for security"

# Env key for log level (read by the CLI entry point).
LOG_LEVEL_ENV = "LLMCONF_LOG_LEVEL"

# Hard deadline for one live model-list fetch, in seconds.
FETCH_TIMEOUT = float(os.environ.get("LLMCONF_FETCH_TIMEOUT", "10"))

MODEL_PAGE_SIZE = 15


def get_config_path() -> Path:
    """Return the configuration document path."""
    return CONFIG_DIR / CONFIG_FILE


def get_key_path() -> Path:
    """Return the encryption key path."""
    return KEY_DIR / KEY_FILE
