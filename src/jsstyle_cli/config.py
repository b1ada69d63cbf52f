import tomllib
from pathlib import Path
from typing import Any

from jsstyle_linter.config import RuleConfig
from jsstyle_linter.exceptions import ConfigError

DEFAULT_CONFIG_FILE = Path(".jsstyle.toml")


def load_config(config_path: Path | None = None, required: bool = False) -> RuleConfig:
    """Load a RuleConfig from a TOML file.

    The settings live under `[tool.jsstyle]`, `[jsstyle]`, or at the top level
    of the file. A missing file gives the defaults unless `required` is set.
    """
    if config_path is None or not config_path.exists():
        if required:
            raise ConfigError(f"Config file not found: {config_path}")
        return RuleConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    return RuleConfig.from_mapping(_select_table(data))


def _select_table(data: dict[str, Any]) -> dict[str, Any]:
    if "tool" in data:
        tool = data["tool"]
        if not isinstance(tool, dict):
            raise ConfigError(f"'tool' must be a table, got {type(tool).__name__}")
        return tool.get("jsstyle", {})
    if "jsstyle" in data:
        return data["jsstyle"]
    return data
