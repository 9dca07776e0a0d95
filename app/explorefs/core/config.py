"""Explorer settings.

Configuration is stored in ~/.config/explorefs/config.toml. Every field is
optional; a missing file means defaults everywhere.
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from explorefs.core.paths import get_config_path

DEFAULT_SCHEME = "adb"
DEFAULT_TIMEOUT = 300.0


class ExplorerConfig(BaseModel):
    """Settings for the filesystem layers and the CLI.

    Attributes:
        adb_path: Explicit path to the adb binary. If None, it is discovered.
        scheme: Scheme name marking device paths (``adb`` -> ``adb://``).
        repair_double_prefix: Collapse ``adb://X/adb://X/...`` paths instead
            of rejecting them.
        show_hidden: Include dot-entries in listings by default.
        command_timeout: Seconds to wait for a single bridge command.
    """

    model_config = ConfigDict(extra="forbid")

    adb_path: Annotated[
        str | None,
        Field(description="Path to the adb executable (None = discover)"),
    ] = None
    scheme: Annotated[
        str,
        Field(pattern=r"^[a-z][a-z0-9+.-]*$", description="Device path scheme"),
    ] = DEFAULT_SCHEME
    repair_double_prefix: Annotated[
        bool,
        Field(description="Repair doubly-prefixed device paths"),
    ] = True
    show_hidden: Annotated[
        bool,
        Field(description="List dot-entries by default"),
    ] = False
    command_timeout: Annotated[
        float,
        Field(ge=1, le=3600, description="Bridge command timeout in seconds (1-3600)"),
    ] = DEFAULT_TIMEOUT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> ExplorerConfig:
    """Load settings from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated ExplorerConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return ExplorerConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> ExplorerConfig:
    """Load settings, falling back to defaults when no file exists.

    Raises:
        ConfigParseError: If the file exists but is not valid TOML.
        ConfigError: If the file exists but fails validation.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        return ExplorerConfig()


def save_config(config: ExplorerConfig, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The ExplorerConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: ExplorerConfig) -> dict[str, object]:
    """Convert ExplorerConfig to a dictionary for TOML serialization.

    TOML has no null, so an unset adb_path is left out.
    """
    result: dict[str, object] = {
        "scheme": config.scheme,
        "repair_double_prefix": config.repair_double_prefix,
        "show_hidden": config.show_hidden,
        "command_timeout": config.command_timeout,
    }
    if config.adb_path is not None:
        result["adb_path"] = config.adb_path
    return result
