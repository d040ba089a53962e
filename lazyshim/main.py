"""
lazyshim — CLI entrypoint.

Usage:
    python -m lazyshim.main --help
    lazyshim run docker ps -a
    lazyshim status
    eval "$(lazyshim init)"
"""

from __future__ import annotations

import json
import os
import re
import shlex
import sys
from pathlib import Path

import click

from lazyshim import __version__
from lazyshim.core.observability.logging_config import (
    FILE_ENV_VAR,
    FILE_LEVEL_ENV_VAR,
    resolve_level,
    setup_logging,
)
from lazyshim.ui.cli import get_session

# POSIX sh only accepts plain identifiers as function names
_FUNCTION_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@click.group()
@click.version_option(version=__version__, prog_name="lazyshim")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress warnings.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to lazyshim.yml (default: auto-detect, then bundled catalog).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """lazyshim — cached, availability-guarded wrappers for CLI tools."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(FILE_ENV_VAR),
        log_file_level=os.environ.get(FILE_LEVEL_ENV_VAR),
    )


@cli.command(
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.argument("name")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def run(ctx: click.Context, name: str, args: tuple[str, ...]) -> None:
    """Run wrapper NAME, forwarding ARGS untouched.

    Exits with the tool's exit code, or 127 when it is not installed.
    """
    session = get_session(ctx)
    sys.exit(session.run(name, list(args)))


@cli.command()
@click.argument("name")
@click.pass_context
def which(ctx: click.Context, name: str) -> None:
    """Print the executable a wrapper (or plain command) resolves to."""
    session = get_session(ctx)

    wrapper = session.wrapper(name)
    path = wrapper.locate() if wrapper else session.cache.resolve(name)

    if path is None:
        click.secho(f"❌ {name} not found", fg="red", err=True)
        sys.exit(1)
    click.echo(path)


@cli.command()
@click.option("--all", "-a", "include_lazy", is_flag=True, help="Include lazy fragments.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def status(ctx: click.Context, include_lazy: bool, as_json: bool) -> None:
    """Show which wrapped tools are installed."""
    session = get_session(ctx)
    if include_lazy:
        session.enable_all()

    result = session.registry.status()

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    if not result:
        click.secho("⚠️  No wrappers registered", fg="yellow")
        return

    available = sum(1 for s in result.values() if s["available"])
    click.secho(f"🔧 Wrappers: {available}/{len(result)} available", fg="cyan", bold=True)
    for name, info in result.items():
        icon = "✅" if info["available"] else "❌"
        target = info["path"] or " | ".join(info["candidates"])
        aliases = f" ({', '.join(info['aliases'])})" if info["aliases"] else ""
        click.echo(f"   {icon} {name:<12}{aliases}  → {target}")


@cli.command()
@click.option(
    "--prog",
    default="lazyshim",
    show_default=True,
    help="Command used to invoke lazyshim from the shell.",
)
@click.pass_context
def init(ctx: click.Context, prog: str) -> None:
    """Print shell functions that route each wrapper through lazyshim.

    Add ``eval "$(lazyshim init)"`` to your shell profile. Wrapper names
    that are not valid sh identifiers (``docker-compose``, ``7z``) are
    emitted as aliases instead of functions.

    Every call from the shell starts a new lazyshim process, so the
    command cache only lives for that one call. Memoization applies
    within a single Session, not across shell invocations.
    """
    session = get_session(ctx)
    config_path = ctx.obj.get("config_path")
    base = shlex.quote(prog)
    if config_path is not None:
        base += f" --config {shlex.quote(str(config_path))}"

    click.echo("# lazyshim wrappers")
    for frag in session.catalog.fragments:
        click.echo(f"# {frag.name}{' (lazy)' if frag.lazy else ''}")
        for spec in frag.wrappers:
            command = f"{base} run {spec.name}"
            if _FUNCTION_NAME_RE.match(spec.name):
                click.echo(f'{spec.name}() {{ {command} "$@"; }}')
                target = spec.name
            else:
                click.echo(f"alias {spec.name}={shlex.quote(command)}")
                target = command
            for alias in spec.aliases:
                click.echo(f"alias {alias}={shlex.quote(target)}")


# ── Sub-command groups ──────────────────────────────────────────

from lazyshim.ui.cli.fragments import fragments  # noqa: E402

cli.add_command(fragments)


if __name__ == "__main__":
    cli()
