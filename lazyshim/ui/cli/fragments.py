"""
CLI commands for the fragment catalog.

Thin wrappers over ``lazyshim.core.session``.
"""

from __future__ import annotations

import json
import sys

import click

from lazyshim.ui.cli import get_session


@click.group()
def fragments() -> None:
    """Fragments — list and inspect catalog entries."""


@fragments.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_fragments(ctx: click.Context, as_json: bool) -> None:
    """List catalog fragments and whether they are enabled."""
    session = get_session(ctx)

    rows = [
        {
            "name": frag.name,
            "description": frag.description,
            "lazy": frag.lazy,
            "enabled": session.is_enabled(frag.name),
            "wrappers": [w.name for w in frag.wrappers],
        }
        for frag in session.catalog.fragments
    ]

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    if not rows:
        click.secho("⚠️  No fragments in catalog", fg="yellow")
        return

    click.secho("🧩 Fragments:", fg="cyan", bold=True)
    for row in rows:
        state = "enabled" if row["enabled"] else "lazy"
        click.echo(f"   {row['name']:<14} [{state}] {', '.join(row['wrappers'])}")
        if row["description"]:
            click.echo(f"      {row['description']}")


@fragments.command()
@click.argument("name")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, name: str, as_json: bool) -> None:
    """Show the wrappers a fragment declares."""
    session = get_session(ctx)
    frag = session.catalog.get_fragment(name)

    if frag is None:
        click.secho(f"❌ Unknown fragment: {name}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(frag.model_dump(), indent=2))
        return

    click.secho(f"🧩 {frag.name}", fg="cyan", bold=True)
    if frag.description:
        click.echo(f"   {frag.description}")
    for spec in frag.wrappers:
        target = " → ".join(spec.candidates)
        if spec.prefix_args:
            target += f" {' '.join(spec.prefix_args)}"
        aliases = f" (aliases: {', '.join(spec.aliases)})" if spec.aliases else ""
        click.echo(f"   • {spec.name}{aliases}  → {target}")
