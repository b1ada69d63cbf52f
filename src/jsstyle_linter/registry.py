from typing import Dict, List

from .config import RuleConfig
from .exceptions import ConfigError
from .rules.base import BaseRule


class RuleRegistry:
    """Registry for managing and loading style rules"""

    def __init__(self, load_builtins: bool = True):
        self._rules: Dict[str, BaseRule] = {}
        if load_builtins:
            self._load_builtin_rules()

    def register(self, rule: BaseRule):
        if rule.rule_id in self._rules:
            raise ValueError(f"Rule '{rule.rule_id}' is already registered")
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> BaseRule:
        return self._rules[rule_id]

    def get_all_rules(self) -> List[BaseRule]:
        return list(self._rules.values())

    @property
    def rule_ids(self) -> List[str]:
        return sorted(self._rules)

    def validate(self, config: RuleConfig):
        """Reject configuration that names rules this registry does not know"""
        unknown = sorted(set(config.rules) - set(self._rules))
        if unknown:
            raise ConfigError(
                f"Unknown rule id(s) in configuration: {', '.join(unknown)}. "
                f"Known rules: {', '.join(self.rule_ids)}"
            )

    def get_enabled_rules(self, config: RuleConfig) -> List[BaseRule]:
        """Rules that run under `config`, in id order"""
        self.validate(config)
        enabled = []
        for rule_id in self.rule_ids:
            rule = self._rules[rule_id]
            settings = config.rules.get(rule_id)
            if settings is None:
                if rule.enabled_by_default:
                    enabled.append(rule)
            elif settings.enabled:
                enabled.append(rule)
        return enabled

    def _load_builtin_rules(self):
        from .rules.block_rules import BraceStyleRule, CurlyRule
        from .rules.layout_rules import EolLastRule, MaxLineLengthRule, NoTabsRule, TrailingWhitespaceRule
        from .rules.naming_rules import AcronymCaseRule, CamelCaseRule
        from .rules.quote_rules import QuotePropsRule, QuoteStyleRule
        from .rules.spacing_rules import CommaSpacingRule, InfixSpacingRule, KeywordSpacingRule
        from .rules.syntax_rules import SemicolonRule, StrictEqualityRule, TrailingCommaRule

        self.register(MaxLineLengthRule())
        self.register(TrailingWhitespaceRule())
        self.register(NoTabsRule())
        self.register(EolLastRule())
        self.register(QuoteStyleRule())
        self.register(QuotePropsRule())
        self.register(CurlyRule())
        self.register(BraceStyleRule())
        self.register(StrictEqualityRule())
        self.register(SemicolonRule())
        self.register(TrailingCommaRule())
        self.register(CommaSpacingRule())
        self.register(KeywordSpacingRule())
        self.register(InfixSpacingRule())
        self.register(CamelCaseRule())
        self.register(AcronymCaseRule())


registry = RuleRegistry()
