"""`dok svc <service>`: tasks and containers of one Swarm service."""

from __future__ import annotations

from dok.commands.registry import DOCKER_NAMESPACE, CommandContext, registry
from dok.docker import CONTAINER_COLUMNS, TASK_COLUMNS
from dok.errors import MissingArgumentError
from dok.table import print_table, print_title

USAGE = "dok svc <service>"


@registry.register(
    name="svc",
    description="Inspect a Swarm service (tasks + containers)",
    usage=USAGE,
    namespace=DOCKER_NAMESPACE,
)
def run(ctx: CommandContext, args: list[str]) -> int:
    if not args:
        raise MissingArgumentError("Error: service name required", usage=USAGE)

    service = args[0]
    tasks = ctx.docker.service_tasks(service)
    print_title(ctx.output, f"Service: {service} - Tasks")
    print_table(ctx.output, tasks, TASK_COLUMNS)

    containers = ctx.docker.service_containers(service)
    print_title(ctx.output, f"Service: {service} - Containers")
    print_table(ctx.output, containers, CONTAINER_COLUMNS)
    return 0
