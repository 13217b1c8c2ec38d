"""Built-in dok commands.

Importing this package registers every command on `registry`.
"""

from dok.commands import update
from dok.commands.docker import grouped, local, ps, svc, swarm
from dok.commands.registry import CommandContext, CommandDescriptor, CommandRegistry, registry

__all__ = [
    "CommandContext",
    "CommandDescriptor",
    "CommandRegistry",
    "grouped",
    "local",
    "ps",
    "registry",
    "svc",
    "swarm",
    "update",
]
