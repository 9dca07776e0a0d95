"""Locate the adb executable.

Discovery is a plain lookup with no caching; callers resolve the path once
at startup and hand it to DeviceBridgeClient.
"""

import logging
import os
import shutil
import sys
from collections.abc import Iterator, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

BRIDGE_NAME = "adb"

_SDK_ENV_VARS: tuple[str, ...] = ("ANDROID_HOME", "ANDROID_SDK_ROOT")

# Default SDK roots relative to the user's home, per platform
_HOME_SDK_ROOTS: dict[str, tuple[str, ...]] = {
    "darwin": ("Library/Android/sdk",),
    "linux": ("Android/Sdk", "Android/sdk"),
    "win32": ("AppData/Local/Android/Sdk",),
}

_SYSTEM_DIRS: tuple[str, ...] = (
    "/opt/homebrew/bin",
    "/usr/local/bin",
    "/opt/android-sdk/platform-tools",
    "/usr/lib/android-sdk/platform-tools",
)


def _executable_name(name: str) -> str:
    return f"{name}.exe" if sys.platform == "win32" else name


def candidate_locations(
    name: str = BRIDGE_NAME,
    *,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> Iterator[Path]:
    """Yield well-known install locations for the bridge binary, in priority order.

    Args:
        name: Executable name without extension.
        env: Environment to read SDK variables from. Defaults to os.environ.
        home: Home directory. Defaults to Path.home().

    Yields:
        Candidate file paths; existence is not checked here.
    """
    env = os.environ if env is None else env
    home = Path.home() if home is None else home
    exe = _executable_name(name)

    for var in _SDK_ENV_VARS:
        sdk_root = env.get(var)
        if sdk_root:
            yield Path(sdk_root) / "platform-tools" / exe

    platform_key = "linux" if sys.platform.startswith("linux") else sys.platform
    for rel in _HOME_SDK_ROOTS.get(platform_key, ()):
        yield home / rel / "platform-tools" / exe

    for directory in _SYSTEM_DIRS:
        yield Path(directory) / exe


def find_bridge_binary(
    name: str = BRIDGE_NAME,
    *,
    env: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> str | None:
    """Find the bridge binary in known locations, then on PATH.

    Args:
        name: Executable name without extension.
        env: Environment to read SDK variables from.
        home: Home directory used for per-user SDK locations.

    Returns:
        Absolute path to the executable, or None if it cannot be found.
    """
    for candidate in candidate_locations(name, env=env, home=home):
        if candidate.is_file() and os.access(candidate, os.X_OK):
            logger.debug("Found %s at %s", name, candidate)
            return str(candidate)

    found = shutil.which(name)
    if found:
        logger.debug("Found %s on PATH at %s", name, found)
        return found

    logger.warning("%s executable not found in any known location", name)
    return None
