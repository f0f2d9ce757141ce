"""Console entry point for inspecting and exercising dispatcher configuration.

Purpose
-------
Expose ``python -m lib_log_dispatch`` and the ``lib_log_dispatch`` console
script so operators can check which backend and whitelist the current
environment produces before starting the host.

Contents
--------
* :func:`cli` - Click group with ``--version`` and the ``info``/``emit``
  commands.
* :func:`summary_info` - metadata banner as a string.
* :func:`main` - test-friendly wrapper returning an exit code.
"""

from __future__ import annotations

import os
import sys
from dataclasses import replace
from typing import Optional, Sequence

import click

from . import __init__conf__
from .config import BACKENDS, ENV_BACKEND, ENV_USE_DOTENV, build_dispatcher, enable_dotenv, env_bool, load_settings
from .domain import SeverityLevel


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--version", "-V", is_flag=True, help="Print the installed version and exit.")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Inspect and exercise the configured log dispatcher."""

    if version:
        click.echo(__init__conf__.version)
        return
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info")
def info_command() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("emit")
@click.argument("level")
@click.argument("message", nargs=-1, required=True)
@click.option("--backend", type=click.Choice(BACKENDS), default=None, help="Override LOG_DISPATCH_BACKEND.")
@click.option("--only", "only", multiple=True, help="Whitelist a level (repeatable); overrides LOG_DISPATCH_LEVELS.")
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help="Load a nearby .env before reading the environment (default: LOG_DISPATCH_USE_DOTENV).",
)
def emit_command(level: str, message: tuple[str, ...], backend: Optional[str], only: tuple[str, ...], use_dotenv: Optional[bool]) -> None:
    """Dispatch MESSAGE once at LEVEL through the configured backend.

    The ``stream`` backend writes to stdout here so the result is visible in
    pipelines; the other backends keep their usual targets.
    """

    if use_dotenv is None:
        use_dotenv = env_bool(ENV_USE_DOTENV, False)
    if use_dotenv:
        enable_dotenv()

    environ = dict(os.environ)
    if backend is not None:
        environ[ENV_BACKEND] = backend
    try:
        settings = load_settings(environ)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    try:
        severity = SeverityLevel.from_name(level)
        if only:
            settings = replace(settings, levels=tuple(SeverityLevel.from_name(name) for name in only))
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    dispatcher = build_dispatcher(settings, stream=sys.stdout)
    dispatcher.dispatch(severity, *message)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Click group and return its exit code.

    Examples
    --------
    >>> main(["--version"])  # doctest: +ELLIPSIS
    0...
    0
    """

    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
