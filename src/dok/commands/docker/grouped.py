"""`dok all`: swarm and standalone containers side by side."""

from __future__ import annotations

from dok.commands.docker import local, swarm
from dok.commands.registry import DOCKER_NAMESPACE, CommandContext, registry


@registry.register(
    name="all",
    description="List all containers grouped by type (Swarm and Standalone)",
    usage="dok all",
    namespace=DOCKER_NAMESPACE,
)
def run(ctx: CommandContext, args: list[str]) -> int:
    # One `docker ps` and one label lookup per container serve both sections.
    classification = ctx.docker.classify(ctx.docker.containers())
    swarm.display(ctx.output, classification.swarm)
    local.display(ctx.output, classification.standalone)
    return 0
