# -*- coding: utf-8 -*-
"""CLI commands for the configuration file."""
from __future__ import annotations

import click

from ..providers import ConfigStore, mask_api_key
from ..providers.field_mapper import SECRET_EXTRA_KEYS


@click.group("config")
def config_group() -> None:
    """Show, back up or restore the configuration file."""


@config_group.command("show")
def show_cmd() -> None:
    """Show configured providers (secrets masked)."""
    store = ConfigStore()
    if not store.exists():
        click.echo(f"No configuration at {store.config_path}.")
        return
    config = store.load()
    click.echo(f"Configuration: {store.config_path}")
    click.echo(f"  {'default':16s}: {config.default_provider or '(not set)'}")
    for pid in sorted(config.providers):
        provider = config.providers[pid]
        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {provider.name} ({pid})")
        click.echo(f"{'─' * 44}")
        click.echo(
            f"  {'api_key':16s}: "
            f"{mask_api_key(provider.api_key) or '(not set)'}",
        )
        click.echo(f"  {'model':16s}: {provider.model_id or '(not set)'}")
        if provider.base_url:
            click.echo(f"  {'base_url':16s}: {provider.base_url}")
        for key in sorted(provider.extra_config):
            value = provider.extra_config[key]
            if key in SECRET_EXTRA_KEYS:
                value = mask_api_key(value)
            click.echo(f"  {key:16s}: {value}")


@config_group.command("backup")
def backup_cmd() -> None:
    """Copy the configuration file to a timestamped backup."""
    target = ConfigStore().backup()
    if target is None:
        click.echo("No configuration to back up.")
        return
    click.echo(f"✓ Backup written to {target}")


@config_group.command("restore")
@click.argument("backup_path", type=click.Path(dir_okay=False))
def restore_cmd(backup_path: str) -> None:
    """Replace the configuration file with BACKUP_PATH."""
    store = ConfigStore()
    store.restore_from(backup_path)
    click.echo(f"✓ Restored {store.config_path} from {backup_path}")
