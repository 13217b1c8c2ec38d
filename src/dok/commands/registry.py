"""Command registry."""

from __future__ import annotations

import builtins
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from dok.config import Settings
from dok.docker import Docker
from dok.output import Output
from dok.process import ProcessRunner

CORE_NAMESPACE = ""
DOCKER_NAMESPACE = "docker"
# Probed in this order when resolving an alias; the first namespace holding it wins.
DEFAULT_NAMESPACES = (CORE_NAMESPACE, DOCKER_NAMESPACE)


@dataclass(frozen=True)
class CommandContext:
    """Collaborators handed to every command invocation."""

    output: Output
    runner: ProcessRunner
    docker: Docker
    settings: Settings


Entrypoint = Callable[[CommandContext, list[str]], int]


@dataclass(frozen=True)
class CommandDescriptor:
    """Command metadata and runtime handle."""

    name: str
    description: str
    entrypoint: Entrypoint
    usage: str | None = None
    requires_docker: bool = True
    namespace: str = CORE_NAMESPACE


class CommandRegistry:
    """Alias to command mapping, grouped into ordered namespaces."""

    def __init__(self, namespaces: tuple[str, ...] = DEFAULT_NAMESPACES) -> None:
        self._namespaces = namespaces
        self._commands: dict[str, dict[str, CommandDescriptor]] = {namespace: {} for namespace in namespaces}

    def add(self, descriptor: CommandDescriptor) -> None:
        if descriptor.namespace not in self._commands:
            raise ValueError(f"Unknown command namespace: {descriptor.namespace!r}")
        self._commands[descriptor.namespace][descriptor.name] = descriptor

    def register(
        self,
        *,
        name: str,
        description: str,
        usage: str | None = None,
        requires_docker: bool = True,
        namespace: str = CORE_NAMESPACE,
    ) -> Callable[[Entrypoint], Entrypoint]:
        """Decorator registering a command entrypoint under `name`."""

        def decorator(entrypoint: Entrypoint) -> Entrypoint:
            self.add(
                CommandDescriptor(
                    name=name,
                    description=description,
                    entrypoint=entrypoint,
                    usage=usage,
                    requires_docker=requires_docker,
                    namespace=namespace,
                )
            )
            return entrypoint

        return decorator

    def resolve(self, alias: str) -> CommandDescriptor | None:
        for namespace in self._namespaces:
            descriptor = self._commands[namespace].get(alias)
            if descriptor is not None:
                logger.debug("command.resolved alias={} namespace={}", alias, namespace or "core")
                return descriptor
        logger.debug("command.not_found alias={}", alias)
        return None

    def descriptors(self) -> builtins.list[CommandDescriptor]:
        """All commands in resolution order; shadowed aliases are left out."""

        seen: set[str] = set()
        result: builtins.list[CommandDescriptor] = []
        for namespace in self._namespaces:
            for name in sorted(self._commands[namespace]):
                if name in seen:
                    continue
                seen.add(name)
                result.append(self._commands[namespace][name])
        return result


registry = CommandRegistry()
