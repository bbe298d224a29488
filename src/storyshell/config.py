"""Shell defaults and their loading from TOML files and the environment."""

import dataclasses
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from storyshell.errors import ConfigError
from storyshell.story.levels import LEVELS

ENV_LOG_LEVEL = "STORYSHELL_LOG_LEVEL"
ENV_ERROR_LOG_LEVEL = "STORYSHELL_ERROR_LOG_LEVEL"
ENV_SHELL = "STORYSHELL_SHELL"


@dataclass(frozen=True)
class ShellConfig:
    """Immutable defaults for shell operations.

    Per-call arguments always win over these values.

    Attributes:
        log_level: Level for command output lines and the per-command story
        error_log_level: Level for stderr lines and failure messages
        command_name_width: Max length of the command name tag on output lines
        strict: Whether cp/mv failures raise (True) or are logged and ignored
        shell_executable: Shell used to run commands (None = platform default)
    """

    log_level: str = "info"
    error_log_level: str = "error"
    command_name_width: int = 10
    strict: bool = True
    shell_executable: str | None = None

    def __post_init__(self) -> None:
        for field_name in ("log_level", "error_log_level"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or value.lower() not in LEVELS:
                raise ConfigError(f"Invalid {field_name}: {value!r}")
            object.__setattr__(self, field_name, value.lower())
        if not isinstance(self.command_name_width, int) or self.command_name_width < 1:
            raise ConfigError(f"Invalid command_name_width: {self.command_name_width!r}")

    def with_env(self, environ: Mapping[str, str] | None = None) -> "ShellConfig":
        """Return a copy with overrides taken from STORYSHELL_* variables."""
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        if env.get(ENV_LOG_LEVEL):
            overrides["log_level"] = env[ENV_LOG_LEVEL]
        if env.get(ENV_ERROR_LOG_LEVEL):
            overrides["error_log_level"] = env[ENV_ERROR_LOG_LEVEL]
        if env.get(ENV_SHELL):
            overrides["shell_executable"] = env[ENV_SHELL]
        if not overrides:
            return self
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ShellConfig":
        return cls().with_env(environ)


def load_config(path: Path) -> ShellConfig:
    """Load shell defaults from a TOML file.

    Keys may sit in a ``[storyshell]`` table or at the top level. A missing
    file yields the defaults.

    Args:
        path: Path to the TOML file

    Returns:
        ShellConfig with the file's values applied

    Raises:
        ConfigError: If the file is not valid TOML or holds invalid values
    """
    if not path.exists():
        return ShellConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    section = data.get("storyshell", data)
    if not isinstance(section, dict):
        raise ConfigError(f"Expected a [storyshell] table in {path}")

    known = {field.name for field in dataclasses.fields(ShellConfig)}
    # Top-level files may carry unrelated keys; a dedicated table may not.
    if "storyshell" in data:
        unknown = sorted(set(section) - known)
        if unknown:
            raise ConfigError(f"Unknown keys in {path}: {', '.join(unknown)}")

    values = {key: value for key, value in section.items() if key in known}
    if "strict" in values and not isinstance(values["strict"], bool):
        raise ConfigError(f"Invalid strict in {path}: {values['strict']!r}")
    try:
        return ShellConfig(**values)
    except ConfigError as e:
        raise ConfigError(f"{e} in {path}") from e
