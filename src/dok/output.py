"""Terminal output channels and output capture for global flags like --copy."""

from __future__ import annotations

from typing import Callable

from rich.console import Console

Emit = Callable[[str], None]


class Output:
    """Writer shared by every code path that prints.

    `info` and `error` are plain attributes holding the sink callables, so a
    capture session can swap them and put the exact same objects back.
    """

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console: Console = console or Console(highlight=False, markup=False, emoji=False, soft_wrap=True)
        self.error_console: Console = error_console or Console(
            stderr=True, highlight=False, markup=False, emoji=False, soft_wrap=True
        )
        self.info: Emit = self._print_info
        self.error: Emit = self._print_error

    def write_raw(self, data: str) -> None:
        """Write untouched text (escape sequences) straight to stdout."""
        stream = self.console.file
        stream.write(data)
        stream.flush()

    def _print_info(self, message: str) -> None:
        self.console.print(message)

    def _print_error(self, message: str) -> None:
        self.error_console.print(message, style="red")


class OutputCapture:
    """Records everything written through an `Output` while still printing it.

    Only one session per `Output` may be active; starting a second one before
    stopping the first replaces the interceptors.
    """

    def __init__(self, output: Output) -> None:
        self._output = output
        self._captured: list[str] = []
        self._original_info: Emit = output.info
        self._original_error: Emit = output.error
        self.is_capturing = False

    def start(self) -> None:
        """Start capturing output."""
        self.is_capturing = True
        self._captured = []
        self._original_info = self._output.info
        self._original_error = self._output.error

        def capture_info(message: str) -> None:
            self._captured.append(message)
            self._original_info(message)

        def capture_error(message: str) -> None:
            self._captured.append(message)
            self._original_error(message)

        self._output.info = capture_info
        self._output.error = capture_error

    def stop(self) -> str:
        """Stop capturing, restore the original sinks and return the captured text."""
        self.is_capturing = False
        self._output.info = self._original_info
        self._output.error = self._original_error
        return self.getvalue()

    def getvalue(self) -> str:
        """Return captured output without stopping the session."""
        return "\n".join(self._captured)
