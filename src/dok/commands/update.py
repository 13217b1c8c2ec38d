"""`dok update`: replace the installed binary with the latest release."""

from __future__ import annotations

import os
import platform
import sys
import tempfile
from http import client as http_client
from pathlib import Path
from urllib import error as urllib_error
from urllib import request as urllib_request

from loguru import logger

from dok.commands.registry import CommandContext, registry
from dok.errors import SpawnError, UpdateError

PACKAGE_DIR = Path(__file__).resolve().parents[1]
BINARY_PREFIX = "dok"
USER_AGENT = "dok-update/1.0"
ARCH_NAMES = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
}


def platform_names() -> tuple[str, str]:
    """Return the (os, arch) pair used in release binary names."""

    os_name = platform.system().lower()
    machine = platform.machine().lower()
    arch = ARCH_NAMES.get(machine)
    if arch is None:
        raise UpdateError(f"unsupported architecture: {machine or 'unknown'}")
    return os_name, arch


def binary_name(os_name: str, arch: str) -> str:
    return f"{BINARY_PREFIX}-{os_name}-{arch}"


def download_url(base_url: str, name: str) -> str:
    return f"{base_url.rstrip('/')}/{name}"


def current_executable(install_path: Path | None) -> Path:
    """Resolve the file to replace: `install_path`, else the running `dok` binary."""

    if install_path is not None:
        return install_path.expanduser().resolve()
    target = Path(sys.argv[0]).resolve()
    if target.suffix == ".py" or target.is_relative_to(PACKAGE_DIR):
        raise UpdateError(f"not running from a dok binary ({target}); set DOK_INSTALL_PATH to the file to replace")
    return target


def download(url: str, timeout: int) -> bytes:
    try:
        request = urllib_request.Request(url, headers={"User-Agent": USER_AGENT})  # noqa: S310 - fixed https base url.
        with urllib_request.urlopen(request, timeout=timeout) as response:  # noqa: S310
            status = getattr(response, "status", 200)
            if status != 200:
                raise UpdateError(f"download returned HTTP {status}")
            return response.read()
    except urllib_error.HTTPError as exc:
        raise UpdateError(f"download returned HTTP {exc.code}") from exc
    except urllib_error.URLError as exc:
        raise UpdateError(f"download failed: {exc.reason}") from exc
    except (ValueError, http_client.HTTPException) as exc:
        raise UpdateError(f"download failed: {exc}") from exc


def stage(data: bytes, directory: Path) -> Path:
    """Write `data` to a new executable file inside `directory`."""

    fd, name = tempfile.mkstemp(prefix=".dok_update_", dir=directory)
    staged = Path(name)
    try:
        with os.fdopen(fd, "wb") as file:
            file.write(data)
        staged.chmod(0o755)
    except OSError:
        staged.unlink(missing_ok=True)
        raise
    return staged


def install(ctx: CommandContext, data: bytes, target: Path) -> bool:
    """Swap `target` for the new binary; fall back to sudo when permissions block it."""

    staged: Path | None = None
    try:
        staged = stage(data, target.parent)
        os.replace(staged, target)
        return True
    except PermissionError:
        if staged is not None:
            staged.unlink(missing_ok=True)
        logger.debug("update.permission_denied target={}", target)

    staged = stage(data, Path(tempfile.gettempdir()))
    ctx.output.info("🔐 Requesting sudo privileges...")
    try:
        code = ctx.runner.run_interactive("sudo", ["mv", str(staged), str(target)])
    except SpawnError:
        staged.unlink(missing_ok=True)
        raise
    if code != 0:
        staged.unlink(missing_ok=True)
        return False
    return True


@registry.register(
    name="update",
    description="Update dok to the latest version",
    usage="dok update",
    requires_docker=False,
)
def run(ctx: CommandContext, args: list[str]) -> int:
    ctx.output.info("🔄 Updating dok to the latest version...\n")
    try:
        os_name, arch = platform_names()
        name = binary_name(os_name, arch)
        target = current_executable(ctx.settings.install_path)
        url = download_url(ctx.settings.update_base_url, name)
        ctx.output.info(f"📦 Downloading: {name}")
        ctx.output.info(f"🔗 From: {url}\n")

        data = download(url, ctx.settings.update_timeout_seconds)
        ctx.output.info(f"📝 Replacing: {target}")
        installed = install(ctx, data, target)
    except (UpdateError, SpawnError, OSError) as exc:
        logger.debug("update.failed error={}", exc)
        ctx.output.error(f"❌ Update failed: {exc}")
        return 1

    if not installed:
        ctx.output.error("\n❌ Update failed")
        return 1
    ctx.output.info("\n✅ Update successful!")
    return 0
