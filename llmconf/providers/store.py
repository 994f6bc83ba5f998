# -*- coding: utf-8 -*-
"""Reading and writing the configuration document (config.yaml)."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from ..constant import ENCRYPTION_NOTE, get_config_path
from ..exceptions import (
    ConfigValidationError,
    CorruptCiphertextError,
    IOFailureError,
    KeyMismatchError,
    LLMConfError,
    ProviderNotConfiguredError,
)
from .catalog_data import PROVIDERS
from .encryption import Encryptor, backup_key_path
from .field_mapper import routes_to_api_key
from .models import CLIConfig, ProviderConfig

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


def _requires_api_key(provider_id: str) -> bool:
    defn = PROVIDERS.get(provider_id)
    if defn is None:
        return True
    return any(routes_to_api_key(f.name) for f in defn.required_fields)


def _atomic_write(path: Path, text: str) -> None:
    """Write *text* to a sibling temp file, then rename it over *path*."""
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.name}.",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, 0o600)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class ConfigStore:
    """Loads, validates, mutates and saves the configuration document.

    API keys are decrypted on load and encrypted on save; in memory they
    are always plaintext.
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        encryptor: Optional[Encryptor] = None,
    ) -> None:
        self.config_path = Path(config_path) if config_path else get_config_path()
        self.encryptor = encryptor or Encryptor()
        self._config: Optional[CLIConfig] = None

    # -----------------------------------------------------------------------
    # Load / Save
    # -----------------------------------------------------------------------

    def exists(self) -> bool:
        return self.config_path.is_file()

    def load(self) -> CLIConfig:
        """Read the document, or return a fresh default if none exists."""
        if not self.config_path.exists():
            self._config = CLIConfig()
            return self._config

        try:
            with open(self.config_path, "r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh) or {}
        except OSError as exc:
            raise IOFailureError(
                f"failed to read config file {self.config_path}: {exc}",
            ) from exc
        except yaml.YAMLError as exc:
            raise IOFailureError(
                f"failed to parse config file {self.config_path}: {exc}",
            ) from exc

        try:
            config = CLIConfig.model_validate(raw)
        except ValidationError as exc:
            raise IOFailureError(
                f"invalid config file {self.config_path}: {exc}",
            ) from exc

        for pid, provider in config.providers.items():
            if not provider.api_key:
                continue
            try:
                provider.api_key = self.encryptor.decrypt(provider.api_key)
            except CorruptCiphertextError as exc:
                raise CorruptCiphertextError(
                    f"failed to decrypt API key for provider {pid}: {exc}",
                ) from exc

        logger.debug(
            "Loaded %d provider(s) from %s",
            len(config.providers),
            self.config_path,
        )
        self._config = config
        return config

    def save(self, config: Optional[CLIConfig] = None) -> None:
        """Encrypt secrets and atomically write the document."""
        config = config or self.get_config()
        out = config.model_copy(deep=True)
        for pid, provider in out.providers.items():
            if provider.api_key:
                provider.api_key = self.encryptor.encrypt(provider.api_key)

        out.updated_at = datetime.now().astimezone()
        if out.created_at is None:
            out.created_at = out.updated_at
        out.encryption_note = ENCRYPTION_NOTE

        text = yaml.safe_dump(
            out.model_dump(mode="json"),
            sort_keys=False,
            allow_unicode=True,
        )
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            _atomic_write(self.config_path, text)
        except OSError as exc:
            raise IOFailureError(
                f"failed to write config file {self.config_path}: {exc}",
            ) from exc

        config.created_at = out.created_at
        config.updated_at = out.updated_at
        self._config = config
        logger.debug("Saved config to %s", self.config_path)

    def get_config(self) -> CLIConfig:
        """Return the loaded document, loading it on first access."""
        if self._config is None:
            return self.load()
        return self._config

    # -----------------------------------------------------------------------
    # Validation
    # -----------------------------------------------------------------------

    def validate(self, config: Optional[CLIConfig] = None) -> None:
        """Raise ``ConfigValidationError`` on the first broken invariant."""
        config = config or self.get_config()
        default = config.default_provider
        if default and default not in config.providers:
            raise ConfigValidationError(
                f"default provider {default} not found in providers",
            )
        for pid, provider in config.providers.items():
            if provider.id != pid:
                raise ConfigValidationError(
                    f"provider ID mismatch: {provider.id} != {pid}",
                )
            if not provider.name:
                raise ConfigValidationError(f"provider {pid} has empty name")
            if not provider.api_key and _requires_api_key(pid):
                raise ConfigValidationError(
                    f"provider {pid} has empty API key",
                )
            if not provider.model_id:
                raise ConfigValidationError(
                    f"provider {pid} has empty model ID",
                )

    # -----------------------------------------------------------------------
    # Mutators (in memory; call save() to persist)
    # -----------------------------------------------------------------------

    def add_provider(self, provider: ProviderConfig) -> None:
        self.get_config().providers[provider.id] = provider

    def remove_provider(self, provider_id: str) -> None:
        config = self.get_config()
        if provider_id not in config.providers:
            raise ProviderNotConfiguredError(provider_id)
        del config.providers[provider_id]
        if config.default_provider == provider_id:
            config.default_provider = ""

    def set_default_provider(self, provider_id: str) -> None:
        config = self.get_config()
        if provider_id not in config.providers:
            raise ProviderNotConfiguredError(provider_id)
        config.default_provider = provider_id

    # -----------------------------------------------------------------------
    # Backup / restore
    # -----------------------------------------------------------------------

    def backup(self) -> Optional[Path]:
        """Copy the current file to a timestamped sibling.

        Returns the backup path, or ``None`` when there is nothing to copy.
        """
        if not self.exists():
            return None
        stamp = datetime.now().strftime(BACKUP_TIMESTAMP_FORMAT)
        target = Path(f"{self.config_path}.backup.{stamp}")
        try:
            shutil.copyfile(self.config_path, target)
            os.chmod(target, 0o600)
        except OSError as exc:
            raise IOFailureError(f"failed to write backup file: {exc}") from exc
        logger.info("Backed up config to %s", target)
        return target

    def restore_from(self, backup_path: Union[str, Path]) -> None:
        """Overwrite the current file with *backup_path*."""
        source = Path(backup_path)
        if not source.is_file():
            raise IOFailureError(f"backup file does not exist: {source}")
        try:
            text = source.read_text(encoding="utf-8")
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            _atomic_write(self.config_path, text)
        except OSError as exc:
            raise IOFailureError(
                f"failed to restore config file: {exc}",
            ) from exc
        self._config = None

    # -----------------------------------------------------------------------
    # Key rotation
    # -----------------------------------------------------------------------

    def rotate_encryption_key(self) -> None:
        """Re-encrypt every API key under a freshly generated key.

        The old key is kept as ``<key>.backup`` until the save succeeds
        and is restored if it fails.
        """
        config = self.load()
        self.encryptor.rotate_key()
        try:
            self.save(config)
        except LLMConfError:
            self.encryptor.restore_backup()
            raise
        self.encryptor.discard_backup()
        logger.info("Re-encrypted %d provider(s)", len(config.providers))

    def recover_key_rotation(self) -> bool:
        """Finish or undo a rotation that was interrupted.

        If a key backup is left behind and the current key cannot read the
        document, the backup is put back. Returns ``True`` when the backup
        key was restored.
        """
        key_path = self.encryptor.key_path
        if not backup_key_path(key_path).exists():
            return False
        if key_path.exists() and self._current_key_reads_config():
            self.encryptor.discard_backup()
            return False
        self.encryptor.restore_backup()
        self.encryptor.discard_backup()
        self._config = None
        return True

    def _current_key_reads_config(self) -> bool:
        try:
            self.load()
        except (CorruptCiphertextError, KeyMismatchError) as exc:
            logger.warning(
                "Current key cannot read %s: %s",
                self.config_path,
                exc,
            )
            return False
        return True


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask a secret for display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-*******hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
