"""User configuration for fstally.

Defaults for the walk and matching policies can be stored in
~/.config/fstally/config.toml. Command-line flags take precedence
over values from this file.

Example:
    follow_symlinks = false
    case_sensitive = true
    path_style = "any"
"""

import logging
import tomllib
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fstally.core.errors import ConfigError, ConfigNotFoundError, ConfigParseError
from fstally.core.paths import get_config_path
from fstally.filesystem.models import PathStyle

logger = logging.getLogger(__name__)


class TallyConfig(BaseModel):
    """Configuration shared by all fstally commands.

    Attributes:
        follow_symlinks: Follow symbolic links while walking directories.
        case_sensitive: Compare extensions case-sensitively.
        path_style: Which absolute-path pattern marks a manifest line as a target.
    """

    model_config = ConfigDict(extra="forbid")

    follow_symlinks: Annotated[
        bool,
        Field(description="Follow symbolic links during directory walks"),
    ] = False
    case_sensitive: Annotated[
        bool,
        Field(description="Match and group extensions case-sensitively"),
    ] = True
    path_style: Annotated[
        PathStyle,
        Field(description="Manifest path pattern: any, drive, or posix"),
    ] = PathStyle.ANY


def load_config(path: Path | None = None) -> TallyConfig:
    """Load configuration from a TOML file.

    When no path is given the default location is used, and a missing
    file simply yields the defaults. An explicitly given path must exist.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated TallyConfig object.

    Raises:
        ConfigNotFoundError: If an explicitly given config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        if path is not None:
            raise ConfigNotFoundError(f"Config file not found: {config_path}")
        logger.debug("No config file at %s, using defaults", config_path)
        return TallyConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config {config_path}: {e}") from e

    try:
        config = TallyConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e

    logger.debug("Loaded config from %s", config_path)
    return config
