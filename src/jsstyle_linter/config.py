"""Rule configuration: which rules run, at which severity, with which options."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .models import Severity


class RuleSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    enabled: bool = True
    severity: Severity | None = None


class LintOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    max_line_length: int = Field(default=80, ge=1, description="Longest compliant line, in columns")
    tab_width: int = Field(default=1, ge=1, description="Columns a tab advances to, for line length")
    indent_size: int = Field(default=4, ge=1, description="Spaces replacing one indentation tab")


class RuleConfig(BaseModel):
    """Immutable per-run configuration.

    Unknown rule ids are not checked here; they are rejected when the config is
    bound to a registry (see RuleRegistry.get_enabled_rules).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    rules: dict[str, RuleSettings] = Field(default_factory=dict)
    options: LintOptions = Field(default_factory=LintOptions)

    @field_validator("rules", mode="before")
    @classmethod
    def _expand_shorthand(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        return {rule_id: _expand_rule_value(setting) for rule_id, setting in value.items()}

    def settings_for(self, rule_id: str) -> RuleSettings:
        return self.rules.get(rule_id, RuleSettings())

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "RuleConfig":
        """Build a config from loosely-typed data (e.g. a TOML table).

        Option keys may use kebab-case. Any validation problem is a ConfigError.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Configuration must be a table, got {type(data).__name__}")
        data = dict(data)
        rules = data.pop("rules", {})
        option_table = data.pop("options", {})
        if not isinstance(option_table, Mapping):
            raise ConfigError(f"'options' must be a table, got {type(option_table).__name__}")
        options = {str(key).replace("-", "_"): value for key, value in option_table.items()}
        for key in list(data):
            options[str(key).replace("-", "_")] = data.pop(key)
        try:
            return cls.model_validate({"rules": rules, "options": options})
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def _expand_rule_value(setting: Any) -> Any:
    if isinstance(setting, bool):
        return {"enabled": setting}
    if isinstance(setting, str):
        value = setting.strip().lower()
        if value == "off":
            return {"enabled": False}
        if value == "on":
            return {"enabled": True}
        return {"severity": value}
    if isinstance(setting, Mapping):
        expanded = dict(setting)
        if isinstance(expanded.get("severity"), str):
            expanded["severity"] = expanded["severity"].strip().lower()
        return expanded
    return setting
