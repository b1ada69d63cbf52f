from .autofix import AutoFixEngine, FixPlan, apply_fixes
from .config import LintOptions, RuleConfig, RuleSettings
from .engine import LinterEngine, evaluate, fix
from .exceptions import ConfigError, JSStyleError, MalformedInputError
from .models import RULE_FAILURE, UNPARSEABLE, Fix, FixResult, LintResult, LintResults, Severity, Violation
from .registry import RuleRegistry, registry

__all__ = [
    "AutoFixEngine",
    "ConfigError",
    "Fix",
    "FixPlan",
    "FixResult",
    "JSStyleError",
    "LintOptions",
    "LintResult",
    "LintResults",
    "LinterEngine",
    "MalformedInputError",
    "RULE_FAILURE",
    "RuleConfig",
    "RuleRegistry",
    "RuleSettings",
    "Severity",
    "UNPARSEABLE",
    "Violation",
    "apply_fixes",
    "evaluate",
    "fix",
    "registry",
]
