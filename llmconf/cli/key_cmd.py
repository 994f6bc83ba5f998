# -*- coding: utf-8 -*-
"""CLI commands for the encryption key."""
from __future__ import annotations

import click

from ..providers import ConfigStore, encryption_info


@click.group("key")
def key_group() -> None:
    """Inspect or rotate the encryption key."""


@key_group.command("info")
def info_cmd() -> None:
    """Show key location, fingerprint and a self-test result."""
    info = encryption_info()
    for name in (
        "key_path",
        "key_exists",
        "key_size",
        "key_modified",
        "key_fingerprint",
        "encryption_working",
        "encryption_error",
    ):
        if name in info:
            click.echo(f"  {name:20s}: {info[name]}")


@key_group.command("rotate")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
def rotate_cmd(yes: bool) -> None:
    """Generate a new key and re-encrypt every stored API key."""
    if not yes and not click.confirm(
        "Rotate the encryption key and re-encrypt all API keys?",
        default=False,
    ):
        click.echo("Rotation cancelled.")
        return
    store = ConfigStore()
    store.recover_key_rotation()
    store.rotate_encryption_key()
    click.echo(f"✓ Key rotated, fingerprint {store.encryptor.fingerprint()}")
