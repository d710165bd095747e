# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

import importlib
import os
import sys
from typing import Any, Optional

import click
import uvicorn

import propcalc as p
import propcalc.deployment as d
from propcalc.utils.redirect import ALLOWED_PATHS, safe_url
from propcalc.utils.routes import unrouted_paths

sys.argv[0] = "propcalc"


def load_app(spec: str) -> Any:
    modname, sep, attr = spec.partition(":")

    if not sep or not modname or not attr:
        raise click.BadParameter("expected 'module:attribute'", param_hint="APP")

    try:
        return getattr(importlib.import_module(modname), attr)
    except ImportError as e:
        raise click.BadParameter(f"cannot import {modname!r}: {e}", param_hint="APP")
    except AttributeError:
        raise click.BadParameter(
            f"module {modname!r} has no attribute {attr!r}", param_hint="APP"
        )


@click.group()
@click.version_option(p.__version__, prog_name="propcalc")
def cli() -> None:
    pass


# fmt: off
@click.command(help="Run the propcalc server")
@click.option("--host", "-h", default="127.0.0.1", show_default="127.0.0.1", help="Host")
@click.option("--port", "-p", default=8000, show_default=8000, help="Port")
@click.pass_context
# fmt: on
def run(ctx: click.Context, host: str, port: int) -> None:
    d.HOST = host
    d.PORT = port

    uvicorn.run(
        "propcalc.server:propcalc_server",
        host=host,
        port=port,
        **d.UVICORN_KWARGS,
    )


# fmt: off
@click.command(help="Show where a post-login redirect would go")
@click.option("--origin", default="", help="Origin to prepend.")
@click.option("--fallback", default=None, help="Fallback path.")
@click.argument("candidate")
@click.pass_context
# fmt: on
def check(
    ctx: click.Context, candidate: str, origin: str, fallback: Optional[str]
) -> None:
    click.echo(safe_url(candidate, origin, fallback or d.DEFAULT_REDIRECT))


# fmt: off
@click.command(help="Check allow-listed redirect targets against a route table")
@click.argument("app", required=False)
@click.pass_context
# fmt: on
def routes(ctx: click.Context, app: Optional[str]) -> None:
    for prefix in ALLOWED_PATHS:
        click.echo(prefix)

    if app is None:
        return

    missing = unrouted_paths([*load_app(app).routes, *d.FRONTEND_ROUTES])

    for prefix in missing:
        click.echo(f"No route serves {prefix}", err=True)

    if missing:
        ctx.exit(1)


# fmt: off
@click.command(help="View deployment")
@click.pass_context
# fmt: on
def deployment(ctx: click.Context) -> None:
    for k, v in os.environ.items():
        if k.startswith("PROPCALC") and not k.endswith("_KEY"):
            click.echo(f"{k}={v}")


cli.add_command(check)
cli.add_command(deployment)
cli.add_command(routes)
cli.add_command(run)
