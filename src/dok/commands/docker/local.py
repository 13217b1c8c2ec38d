"""`dok local`: standalone containers."""

from __future__ import annotations

from dok.commands.registry import DOCKER_NAMESPACE, CommandContext, registry
from dok.config import SWARM_SERVICE_LABEL
from dok.docker import CONTAINER_COLUMNS
from dok.output import Output
from dok.parsing import Record
from dok.table import print_table, print_title


def get_data(ctx: CommandContext) -> list[Record]:
    return ctx.docker.standalone_containers()


def display(output: Output, containers: list[Record]) -> None:
    print_title(output, "Standalone containers")
    print_table(output, containers, CONTAINER_COLUMNS)


@registry.register(
    name="local",
    description=f"List only standalone containers (without {SWARM_SERVICE_LABEL} label)",
    usage="dok local",
    namespace=DOCKER_NAMESPACE,
)
def run(ctx: CommandContext, args: list[str]) -> int:
    display(ctx.output, get_data(ctx))
    return 0
