# -*- coding: utf-8 -*-
"""AES-GCM encryption of secret strings with a locally stored key.

The key is 32 random bytes stored base64-encoded in a file readable only
by its owner. Ciphertexts are ``base64(nonce || ciphertext_with_tag)``.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import logging
import os
import shutil
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..constant import KEY_SIZE, NONCE_SIZE, get_key_path
from ..exceptions import CorruptCiphertextError, IOFailureError, KeyMismatchError

logger = logging.getLogger(__name__)

_SELF_TEST_VALUE = "test-api-key-12345"

_MIN_ENCRYPTED_BYTES = 16


def backup_key_path(key_path: Path) -> Path:
    return key_path.with_name(key_path.name + ".backup")


def _write_key_file(key_path: Path, key: bytes) -> None:
    key_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
    encoded = base64.b64encode(key)
    fd = os.open(key_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as fh:
        fh.write(encoded)
    os.chmod(key_path, 0o600)


def load_or_create_key(key_path: Path) -> bytes:
    """Read the key file, generating a fresh key if it does not exist.

    Raises ``KeyMismatchError`` if the stored key is not 32 bytes long.
    """
    if not key_path.exists():
        key = AESGCM.generate_key(bit_length=KEY_SIZE * 8)
        try:
            _write_key_file(key_path, key)
        except OSError as exc:
            raise IOFailureError(
                f"failed to write encryption key {key_path}: {exc}",
            ) from exc
        logger.debug("Generated new encryption key at %s", key_path)
        return key

    try:
        raw = key_path.read_bytes()
    except OSError as exc:
        raise IOFailureError(
            f"failed to read encryption key {key_path}: {exc}",
        ) from exc
    try:
        key = base64.b64decode(raw.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise IOFailureError(
            f"encryption key {key_path} is not valid base64",
        ) from exc
    if len(key) != KEY_SIZE:
        raise KeyMismatchError(len(key), KEY_SIZE)
    return key


class Encryptor:
    """Encrypts and decrypts secret strings with the key at *key_path*.

    The key is read (or generated) on first use.
    """

    def __init__(self, key_path: Optional[Union[str, Path]] = None) -> None:
        self.key_path = Path(key_path) if key_path else get_key_path()
        self._aead: Optional[AESGCM] = None

    def _cipher(self) -> AESGCM:
        if self._aead is None:
            self._aead = AESGCM(load_or_create_key(self.key_path))
        return self._aead

    def reset(self) -> None:
        """Forget the cached key so the next call re-reads the key file."""
        self._aead = None

    def encrypt(self, plaintext: str) -> str:
        if not plaintext:
            return ""
        nonce = os.urandom(NONCE_SIZE)
        sealed = self._cipher().encrypt(nonce, plaintext.encode("utf-8"), None)
        return base64.b64encode(nonce + sealed).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt a value produced by :meth:`encrypt`.

        Raises ``CorruptCiphertextError`` when the value is not base64, is
        shorter than a nonce, or fails authentication.
        """
        if not ciphertext:
            return ""
        try:
            data = base64.b64decode(ciphertext, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CorruptCiphertextError(
                "failed to decode ciphertext: invalid base64",
            ) from exc
        if len(data) < NONCE_SIZE:
            raise CorruptCiphertextError("ciphertext too short")
        nonce, sealed = data[:NONCE_SIZE], data[NONCE_SIZE:]
        try:
            plain = self._cipher().decrypt(nonce, sealed, None)
        except InvalidTag as exc:
            raise CorruptCiphertextError(
                "failed to decrypt: wrong key or tampered data",
            ) from exc
        return plain.decode("utf-8")

    def fingerprint(self) -> str:
        return generate_key_fingerprint(self.key_path)

    def rotate_key(self) -> Path:
        """Back up the current key file and replace it with a fresh key.

        Returns the backup path. The caller re-encrypts its data and then
        calls :meth:`discard_backup` or :meth:`restore_backup`.
        """
        backup = backup_key_path(self.key_path)
        try:
            shutil.copy2(self.key_path, backup)
            os.remove(self.key_path)
        except OSError as exc:
            raise IOFailureError(
                f"failed to back up encryption key: {exc}",
            ) from exc
        self.reset()
        try:
            self._cipher()
        except IOFailureError:
            self.restore_backup()
            raise
        logger.info("Rotated encryption key, backup at %s", backup)
        return backup

    def restore_backup(self) -> None:
        backup = backup_key_path(self.key_path)
        try:
            shutil.copy2(backup, self.key_path)
            os.chmod(self.key_path, 0o600)
        except OSError as exc:
            raise IOFailureError(
                f"failed to restore encryption key from {backup}: {exc}",
            ) from exc
        self.reset()
        logger.warning("Restored encryption key from %s", backup)

    def discard_backup(self) -> None:
        backup_key_path(self.key_path).unlink(missing_ok=True)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------


def generate_key_fingerprint(key_path: Optional[Path] = None) -> str:
    """Hex of the first 8 bytes of SHA-256 over the key file contents."""
    path = key_path or get_key_path()
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise IOFailureError(f"failed to read encryption key: {exc}") from exc
    return hashlib.sha256(data).hexdigest()[:16]


def validate_encryption(encryptor: Optional[Encryptor] = None) -> None:
    """Round-trip a fixed value; raise ``CorruptCiphertextError`` on mismatch."""
    enc = encryptor or Encryptor()
    decrypted = enc.decrypt(enc.encrypt(_SELF_TEST_VALUE))
    if decrypted != _SELF_TEST_VALUE:
        raise CorruptCiphertextError("encryption round-trip test failed")


def is_encrypted(value: str) -> bool:
    """Heuristic: base64 text that decodes to at least 16 bytes."""
    if not value:
        return False
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return len(decoded) >= _MIN_ENCRYPTED_BYTES


def encryption_info(key_path: Optional[Path] = None) -> Dict[str, Any]:
    """Describe the key file and whether encryption currently works.

    Read-only: with no key file yet the self-test is skipped rather than
    generating one.
    """
    path = key_path or get_key_path()
    info: Dict[str, Any] = {"key_path": str(path), "key_exists": path.exists()}
    if not info["key_exists"]:
        info["encryption_working"] = False
        info["encryption_error"] = "no key yet; one is created on first save"
        return info
    stat = path.stat()
    info["key_size"] = stat.st_size
    info["key_modified"] = datetime.fromtimestamp(stat.st_mtime)
    info["key_fingerprint"] = generate_key_fingerprint(path)
    try:
        validate_encryption(Encryptor(path))
        info["encryption_working"] = True
    except (CorruptCiphertextError, KeyMismatchError, IOFailureError) as exc:
        info["encryption_working"] = False
        info["encryption_error"] = str(exc)
    return info
