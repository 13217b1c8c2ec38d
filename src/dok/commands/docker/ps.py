"""`dok ps`: running containers."""

from __future__ import annotations

from collections.abc import Sequence

from dok.commands.registry import DOCKER_NAMESPACE, CommandContext, registry
from dok.docker import CONTAINER_COLUMNS
from dok.output import Output
from dok.parsing import Record
from dok.table import print_table, print_title


def get_data(ctx: CommandContext, extra_args: Sequence[str] = ()) -> list[Record]:
    return ctx.docker.containers(extra_args)


def display(output: Output, containers: list[Record]) -> None:
    print_title(output, "Containers")
    print_table(output, containers, CONTAINER_COLUMNS)


@registry.register(
    name="ps",
    description="List running Docker containers",
    usage="dok ps [-a] [-- docker ps options...]",
    namespace=DOCKER_NAMESPACE,
)
def run(ctx: CommandContext, args: list[str]) -> int:
    """Extra arguments (e.g. `-a`, or `--filter ...` after `--`) are forwarded to `docker ps`."""
    display(ctx.output, get_data(ctx, args))
    return 0
