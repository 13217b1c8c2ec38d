"""CLI entry point for dok."""

from __future__ import annotations

import typer

from dok import __version__
from dok.commands.registry import CommandContext, registry
from dok.config import get_settings
from dok.dispatch import VERBOSE_FLAG, Dispatcher, parse_global_flags
from dok.docker import Docker
from dok.errors import ToolUnavailableError
from dok.logging_utils import configure_logging
from dok.output import Output
from dok.process import ProcessRunner

# Arguments (a bare `--` included) reach the dispatcher untouched; it owns flag parsing and help.
_PASSTHROUGH = {
    "allow_interspersed_args": False,
    "allow_extra_args": True,
    "ignore_unknown_options": True,
    "help_option_names": [],
}

app = typer.Typer(name="dok", help="Docker CLI toolkit", add_completion=False)


def build_dispatcher(output: Output | None = None) -> Dispatcher:
    """Wire settings, output, process runner and docker client into a dispatcher."""

    settings = get_settings()
    output = output or Output()
    runner = ProcessRunner(output)
    docker = Docker(runner, binary=settings.docker_bin, swarm_label=settings.swarm_label)
    context = CommandContext(output=output, runner=runner, docker=docker, settings=settings)
    return Dispatcher(registry, context, version=__version__)


@app.command(context_settings=_PASSTHROUGH)
def dok(ctx: typer.Context) -> None:
    """Docker CLI toolkit."""

    argv = list(ctx.args)
    dispatcher = build_dispatcher()
    configure_logging(
        dispatcher.context.settings.log_level,
        verbose=parse_global_flags(argv).has(VERBOSE_FLAG),
    )
    try:
        code = dispatcher.dispatch(argv)
    except ToolUnavailableError as exc:
        raise typer.Exit(1) from exc
    raise typer.Exit(code)


def main() -> None:
    app()
