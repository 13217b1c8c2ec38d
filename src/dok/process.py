"""External process execution."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from dok.errors import SpawnError, ToolUnavailableError
from dok.output import Output


@dataclass(frozen=True)
class ExecResult:
    """Outcome of one external invocation."""

    code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.code == 0


def format_command(program: str, args: Sequence[str]) -> str:
    """Render a command line that can be copy-pasted into a POSIX shell."""

    return shlex.join([program, *args])


class ProcessRunner:
    """Runs external programs to completion, echoing each command line first."""

    def __init__(self, output: Output) -> None:
        self.output = output

    def run(self, program: str, args: Sequence[str]) -> ExecResult:
        """Run a program capturing both streams. A non-zero exit code is a normal result."""

        command_line = format_command(program, args)
        self.output.info(f"Running command: {command_line}")
        logger.debug("process.run cmd={}", command_line)
        try:
            # Programs are chosen by dok commands; arguments are never passed through a shell.
            completed = subprocess.run(  # noqa: S603
                [program, *args],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.debug("process.spawn_failed program={} error={}", program, exc)
            raise SpawnError(program, exc.strerror or str(exc)) from exc

        logger.debug("process.exit program={} code={}", program, completed.returncode)
        return ExecResult(
            code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def run_interactive(self, program: str, args: Sequence[str]) -> int:
        """Run a program attached to the current terminal and return its exit code."""

        command_line = format_command(program, args)
        self.output.info(f"Running command: {command_line}")
        logger.debug("process.run_interactive cmd={}", command_line)
        try:
            completed = subprocess.run([program, *args], check=False)  # noqa: S603
        except OSError as exc:
            raise SpawnError(program, exc.strerror or str(exc)) from exc
        return completed.returncode


def ensure_available(
    runner: ProcessRunner,
    program: str,
    probe_args: Sequence[str] = ("--version",),
) -> None:
    """Abort the run unless `program` answers its probe invocation."""

    fallback = f"Error: {program} CLI is not available. Install it or add it to PATH."
    try:
        result = runner.run(program, probe_args)
    except SpawnError as exc:
        runner.output.error(fallback)
        raise ToolUnavailableError(fallback) from exc

    if not result.ok:
        message = result.stderr.strip() or fallback
        runner.output.error(message)
        raise ToolUnavailableError(message)
