"""Tests for AES-GCM encryption and the key file lifecycle."""

import base64
import os
import stat

import pytest

from llmconf.exceptions import CorruptCiphertextError, KeyMismatchError
from llmconf.providers.encryption import (
    Encryptor,
    backup_key_path,
    encryption_info,
    generate_key_fingerprint,
    is_encrypted,
    validate_encryption,
)


def test_round_trip(key_path):
    enc = Encryptor(key_path)
    for value in ("sk-ant-test", "ключ", "x" * 500):
        assert enc.decrypt(enc.encrypt(value)) == value


def test_empty_values_pass_through(key_path):
    enc = Encryptor(key_path)
    assert enc.encrypt("") == ""
    assert enc.decrypt("") == ""
    assert not key_path.exists()


def test_nonce_makes_ciphertexts_differ(key_path):
    enc = Encryptor(key_path)
    assert enc.encrypt("same") != enc.encrypt("same")


def test_key_file_created_owner_only(key_path):
    Encryptor(key_path).encrypt("secret")
    assert key_path.exists()
    assert len(base64.b64decode(key_path.read_bytes())) == 32
    if os.name == "posix":
        assert stat.S_IMODE(key_path.stat().st_mode) == 0o600


def test_other_key_cannot_decrypt(tmp_path, key_path):
    ciphertext = Encryptor(key_path).encrypt("secret")
    with pytest.raises(CorruptCiphertextError):
        Encryptor(tmp_path / "other.key").decrypt(ciphertext)


@pytest.mark.parametrize("bad", ["not base64!", base64.b64encode(b"short").decode()])
def test_malformed_ciphertext(key_path, bad):
    with pytest.raises(CorruptCiphertextError):
        Encryptor(key_path).decrypt(bad)


def test_wrong_key_length(key_path):
    key_path.parent.mkdir(parents=True)
    key_path.write_bytes(base64.b64encode(b"k" * 16))
    with pytest.raises(KeyMismatchError, match="expected 32, got 16"):
        Encryptor(key_path).encrypt("secret")


def test_rotate_key_keeps_backup_until_discarded(key_path):
    enc = Encryptor(key_path)
    old_ciphertext = enc.encrypt("secret")
    old_fingerprint = enc.fingerprint()

    backup = enc.rotate_key()
    assert backup == backup_key_path(key_path)
    assert backup.exists()
    assert enc.fingerprint() != old_fingerprint
    with pytest.raises(CorruptCiphertextError):
        enc.decrypt(old_ciphertext)

    enc.restore_backup()
    assert enc.decrypt(old_ciphertext) == "secret"
    enc.discard_backup()
    assert not backup.exists()


def test_fingerprint_is_stable_hex(key_path):
    Encryptor(key_path).encrypt("x")
    fingerprint = generate_key_fingerprint(key_path)
    assert len(fingerprint) == 16
    int(fingerprint, 16)
    assert fingerprint == generate_key_fingerprint(key_path)


def test_diagnostics(key_path):
    enc = Encryptor(key_path)
    validate_encryption(enc)
    assert is_encrypted(enc.encrypt("secret"))
    assert not is_encrypted("sk-ant-plain")
    assert not is_encrypted("")

    info = encryption_info(key_path)
    assert info["key_exists"] is True
    assert info["encryption_working"] is True
    assert info["key_fingerprint"] == enc.fingerprint()


def test_diagnostics_report_bad_key(key_path):
    key_path.parent.mkdir(parents=True)
    key_path.write_bytes(base64.b64encode(b"k" * 8))
    info = encryption_info(key_path)
    assert info["encryption_working"] is False
    assert "expected 32" in info["encryption_error"]


def test_diagnostics_leave_a_fresh_install_untouched(key_path):
    info = encryption_info(key_path)
    assert info["key_exists"] is False
    assert info["encryption_working"] is False
    assert "key_fingerprint" not in info
    assert not key_path.exists()
