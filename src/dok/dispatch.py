"""Alias dispatch: global flags, help, availability check and command execution."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from loguru import logger

from dok.clipboard import copy_to_clipboard
from dok.commands.registry import CommandContext, CommandDescriptor, CommandRegistry
from dok.errors import CommandNotFoundError, ExternalInvocationError, MissingArgumentError, SpawnError
from dok.output import Output, OutputCapture

FLAG_PREFIX = "--"
# Tokens after a bare `--` are handed to the command untouched.
END_OF_FLAGS = "--"
COPY_FLAG = "copy"
HELP_FLAG = "help"
VERSION_FLAG = "version"
VERBOSE_FLAG = "verbose"
KNOWN_FLAGS = frozenset({COPY_FLAG, HELP_FLAG, VERSION_FLAG, VERBOSE_FLAG})

HELP_TEXT = """
dok - Docker CLI toolkit

Usage:
  dok <command> [args...] [--copy] [-- command options...]
  dok --help
  dok help <command>

Examples:
  dok ps              List running containers
  dok ps -- --filter status=exited
                      Pass long options through to docker ps
  dok swarm           List Swarm containers
  dok local           List standalone containers
  dok all             List all containers (grouped)
  dok svc <service>   Inspect a Swarm service
  dok update          Update dok to the latest version

Global flags:
  --copy              Copy the command output to the clipboard
  --verbose           Log debug details to stderr
  --version           Show the dok version

Run 'dok help <command>' for more information on a specific command.
"""

Clipboard = Callable[[str, Output], bool]


@dataclass(frozen=True)
class GlobalFlags:
    """Flag names (without the `--` marker) and positional tokens in input order."""

    flags: frozenset[str]
    positional: list[str]

    def has(self, name: str) -> bool:
        return name in self.flags


def parse_global_flags(argv: Sequence[str]) -> GlobalFlags:
    flags: set[str] = set()
    positional: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        if token == END_OF_FLAGS:
            positional.extend(tokens)
            break
        if token.startswith(FLAG_PREFIX) and len(token) > len(FLAG_PREFIX):
            flags.add(token[len(FLAG_PREFIX) :])
        else:
            positional.append(token)
    return GlobalFlags(flags=frozenset(flags), positional=positional)


class Dispatcher:
    """Resolves an alias to a command and runs it."""

    def __init__(
        self,
        registry: CommandRegistry,
        context: CommandContext,
        *,
        version: str = "",
        clipboard: Clipboard = copy_to_clipboard,
    ) -> None:
        self.registry = registry
        self.context = context
        self.version = version
        self._clipboard = clipboard

    @property
    def output(self) -> Output:
        return self.context.output

    def dispatch(self, argv: Sequence[str]) -> int:
        """Run one invocation and return its exit code.

        `ToolUnavailableError` is not handled here: it ends the whole process.
        """

        parsed = parse_global_flags(argv)
        unknown = sorted(parsed.flags - KNOWN_FLAGS)
        if unknown:
            self.output.error(f"Error: unknown flag '{FLAG_PREFIX}{unknown[0]}'")
            self.output.error("Run 'dok --help' for available commands.")
            return 1

        if parsed.has(VERSION_FLAG):
            self.output.info(f"dok {self.version}")
            return 0

        positional = parsed.positional
        if not positional:
            return self.show_help([])
        if positional[0] == "help":
            return self.show_help(positional[1:])
        if parsed.has(HELP_FLAG):
            return self.show_help(positional[:1])

        alias, args = positional[0], positional[1:]
        try:
            descriptor = self._resolve(alias)
        except CommandNotFoundError as exc:
            self.output.error(f"Error: {exc}")
            self.output.error("Run 'dok --help' for available commands.")
            return 1

        if descriptor.requires_docker:
            self.context.docker.ensure_available()

        if parsed.has(COPY_FLAG):
            return self._execute_and_copy(descriptor, args)
        return self._execute(descriptor, args)

    def show_help(self, aliases: Sequence[str]) -> int:
        if not aliases:
            self.output.info(HELP_TEXT)
            return 0

        alias = aliases[0]
        try:
            descriptor = self._resolve(alias)
        except CommandNotFoundError as exc:
            self.output.error(f"Error: {exc}")
            return 1

        self.output.info(f"\n{descriptor.name} - {descriptor.description}")
        if descriptor.usage:
            self.output.info(f"\nUsage: {descriptor.usage}")
        self.output.info("")
        return 0

    def _resolve(self, alias: str) -> CommandDescriptor:
        descriptor = self.registry.resolve(alias)
        if descriptor is None:
            raise CommandNotFoundError(alias)
        return descriptor

    def _execute(self, descriptor: CommandDescriptor, args: list[str]) -> int:
        logger.debug("command.start name={} args={}", descriptor.name, args)
        try:
            code = descriptor.entrypoint(self.context, list(args))
        except MissingArgumentError as exc:
            self.output.error(str(exc))
            if exc.usage:
                self.output.error(f"Usage: {exc.usage}")
            code = 1
        except ExternalInvocationError as exc:
            self.output.error(str(exc))
            code = exc.exit_code or 1
        except SpawnError as exc:
            self.output.error(f"Error: {exc}")
            code = 1
        logger.debug("command.end name={} code={}", descriptor.name, code)
        return code

    def _execute_and_copy(self, descriptor: CommandDescriptor, args: list[str]) -> int:
        capture = OutputCapture(self.output)
        capture.start()
        try:
            code = self._execute(descriptor, args)
        finally:
            captured = capture.stop()

        if self._clipboard(captured, self.output):
            self.output.error("Output copied to clipboard")
        else:
            self.output.error("Failed to copy output to clipboard")
        return code
