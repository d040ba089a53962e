"""
CLI helpers shared by the command modules.
"""

from __future__ import annotations

import sys

import click

from lazyshim.core.session import Session


def get_session(ctx: click.Context) -> Session:
    """Return the session for this invocation, building it on first use.

    A pre-built session can be injected through ``obj={"session": ...}``.
    """
    session: Session | None = ctx.obj.get("session")
    if session is not None:
        return session

    from lazyshim.core.config.loader import ConfigError, load_catalog

    try:
        catalog = load_catalog(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    session = Session(catalog).bootstrap()
    ctx.obj["session"] = session
    return session
