# -*- coding: utf-8 -*-
"""CLI commands for browsing the provider catalog."""
from __future__ import annotations

from typing import Tuple

import click

from ..fetchers import catalog_models, format_model_list
from ..providers import (
    compare_providers,
    get_provider,
    popular_providers,
    provider_stats,
    providers_by_category,
    recommend_provider,
    search_providers,
)


def _echo_provider_line(pid: str) -> None:
    defn = get_provider(pid)
    flags = " [dynamic models]" if defn.has_dynamic_models else ""
    click.echo(f"  {defn.name} ({pid}){flags}")


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("providers")
def providers_group() -> None:
    """Browse the built-in provider catalog."""


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@providers_group.command("list")
@click.option("--popular", is_flag=True, help="Only show popular providers")
def list_cmd(popular: bool) -> None:
    """List providers grouped by category."""
    if popular:
        click.echo("\n=== Popular providers ===")
        for pid in popular_providers():
            _echo_provider_line(pid)
        return

    for category, ids in providers_by_category().items():
        click.echo(f"\n=== {category} ===")
        for pid in ids:
            _echo_provider_line(pid)

    stats = provider_stats()
    click.echo(
        f"\n{stats['total_providers']} providers, "
        f"{stats['total_models']} built-in models",
    )


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------


@providers_group.command("search")
@click.argument("query")
def search_cmd(query: str) -> None:
    """Search providers by id, name or setup instructions."""
    matches = search_providers(query)
    if not matches:
        click.echo(f"No providers found matching '{query}'.")
        return
    for pid in matches:
        _echo_provider_line(pid)


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@providers_group.command("show")
@click.argument("provider_id")
def show_cmd(provider_id: str) -> None:
    """Show fields and built-in models of one provider."""
    defn = get_provider(provider_id.strip().lower())

    click.echo(f"\n{'─' * 44}")
    click.echo(f"  {defn.name} ({defn.id})")
    click.echo(f"{'─' * 44}")
    click.echo(f"  {defn.setup_instructions}")
    if defn.default_base_url:
        click.echo(f"  {'base_url':16s}: {defn.default_base_url}")
    if defn.default_model_id:
        click.echo(f"  {'default_model':16s}: {defn.default_model_id}")

    click.echo("\n  Required fields:")
    for field in defn.required_fields:
        click.echo(f"    {field.name} ({field.field_type}) {field.comment}")
    click.echo("  Optional fields:")
    for field in defn.optional_fields:
        click.echo(f"    {field.name} ({field.field_type}) {field.comment}")

    if defn.models:
        click.echo("\n  Built-in models:")
        for option in format_model_list(catalog_models(defn)):
            click.echo(f"    {option.number}. {option.display_text}")
    if defn.has_dynamic_models:
        click.echo("\n  More models can be listed live during setup.")


# ---------------------------------------------------------------------------
# recommend
# ---------------------------------------------------------------------------


@providers_group.command("recommend")
@click.option(
    "--need",
    "needs",
    multiple=True,
    type=click.Choice(["images", "free", "large_context", "local"]),
    help="Required capability (repeatable)",
)
def recommend_cmd(needs: Tuple[str, ...]) -> None:
    """Suggest a provider for the given capabilities."""
    pid = recommend_provider({need: True for need in needs})
    click.echo(f"Recommended: {get_provider(pid).name} ({pid})")


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------


@providers_group.command("compare")
@click.argument("provider_ids", nargs=-1, required=True)
def compare_cmd(provider_ids: Tuple[str, ...]) -> None:
    """Compare several providers side by side."""
    comparison = compare_providers(pid.strip().lower() for pid in provider_ids)
    for pid, info in comparison.items():
        click.echo(f"\n{info['name']} ({pid})")
        for key, value in info.items():
            if key == "name":
                continue
            click.echo(f"  {key:24s}: {value}")
