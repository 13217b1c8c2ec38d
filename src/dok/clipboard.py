"""Clipboard delivery.

Uses the platform copy command (pbcopy on macOS, xclip on Linux, clip on
Windows). On Linux, when xclip is missing or has no display to talk to, the
text is sent as an OSC 52 escape sequence instead, which lets the terminal
emulator set the local clipboard even over SSH.
"""

from __future__ import annotations

import base64
import subprocess
import sys

from loguru import logger

from dok.output import Output

COPY_COMMANDS: dict[str, list[str]] = {
    "darwin": ["pbcopy"],
    "linux": ["xclip", "-selection", "clipboard"],
    "win32": ["clip"],
}
OSC52_FALLBACK_PLATFORMS = frozenset({"linux"})


def platform_family(platform: str) -> str:
    if platform.startswith("linux"):
        return "linux"
    return platform


def copy_to_clipboard(text: str, output: Output, platform: str | None = None) -> bool:
    """Copy `text` to the clipboard and report whether it worked."""

    family = platform_family(platform or sys.platform)
    command = COPY_COMMANDS.get(family)
    if command is None:
        output.error("Clipboard copy not supported on this platform")
        return False

    try:
        completed = subprocess.run(  # noqa: S603
            command,
            input=text.encode("utf-8"),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        logger.debug("clipboard.spawn_failed command={} error={}", command[0], exc)
        if family in OSC52_FALLBACK_PLATFORMS:
            return copy_using_osc52(text, output)
        output.error(f"Failed to copy to clipboard: {exc.strerror or exc}")
        return False

    if completed.returncode != 0:
        logger.debug("clipboard.command_failed command={} code={}", command[0], completed.returncode)
        if family in OSC52_FALLBACK_PLATFORMS:
            return copy_using_osc52(text, output)
        return False
    return True


def osc52_sequence(text: str) -> str:
    """Build `ESC ] 52 ; c ; <base64> BEL` for the UTF-8 bytes of `text`."""

    encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"\x1b]52;c;{encoded}\x07"


def copy_using_osc52(text: str, output: Output) -> bool:
    try:
        sequence = osc52_sequence(text)
    except UnicodeError as exc:
        output.error(f"Failed to copy using OSC 52. Error: {exc}")
        return False
    output.write_raw(sequence)
    return True
