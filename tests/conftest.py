from __future__ import annotations

import io
from collections.abc import Sequence

import pytest
from rich.console import Console

from dok.commands.registry import CommandContext
from dok.config import Settings
from dok.docker import Docker
from dok.output import Output
from dok.process import ExecResult, ProcessRunner


def _console(*, stderr: bool = False) -> Console:
    return Console(
        file=io.StringIO(),
        stderr=stderr,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
        color_system=None,
    )


class ScriptedRunner(ProcessRunner):
    """Process runner answering from a table of canned results instead of spawning."""

    def __init__(self, output: Output, responses: dict[tuple[str, ...], ExecResult] | None = None) -> None:
        super().__init__(output)
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, ...]] = []
        self.interactive_calls: list[tuple[str, ...]] = []
        self.interactive_code = 0

    def run(self, program: str, args: Sequence[str]) -> ExecResult:
        argv = (program, *args)
        self.calls.append(argv)
        self.output.info(f"Running command: {' '.join(argv)}")
        if argv not in self.responses:
            raise AssertionError(f"unexpected command: {argv}")
        return self.responses[argv]

    def run_interactive(self, program: str, args: Sequence[str]) -> int:
        self.interactive_calls.append((program, *args))
        return self.interactive_code


@pytest.fixture
def output() -> Output:
    return Output(console=_console(), error_console=_console(stderr=True))


@pytest.fixture
def runner(output: Output) -> ScriptedRunner:
    return ScriptedRunner(output)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def context(output: Output, runner: ScriptedRunner, settings: Settings) -> CommandContext:
    docker = Docker(runner, binary=settings.docker_bin, swarm_label=settings.swarm_label)
    return CommandContext(output=output, runner=runner, docker=docker, settings=settings)
