from .base import ASTRule, BaseRule, RuleContext, TextRule, TokenRule
from .block_rules import BraceStyleRule, CurlyRule
from .layout_rules import EolLastRule, MaxLineLengthRule, NoTabsRule, TrailingWhitespaceRule
from .naming_rules import AcronymCaseRule, CamelCaseRule
from .quote_rules import QuotePropsRule, QuoteStyleRule
from .spacing_rules import CommaSpacingRule, InfixSpacingRule, KeywordSpacingRule
from .syntax_rules import SemicolonRule, StrictEqualityRule, TrailingCommaRule

__all__ = [
    "ASTRule",
    "BaseRule",
    "RuleContext",
    "TextRule",
    "TokenRule",
    "AcronymCaseRule",
    "BraceStyleRule",
    "CamelCaseRule",
    "CommaSpacingRule",
    "CurlyRule",
    "EolLastRule",
    "InfixSpacingRule",
    "KeywordSpacingRule",
    "MaxLineLengthRule",
    "NoTabsRule",
    "QuotePropsRule",
    "QuoteStyleRule",
    "SemicolonRule",
    "StrictEqualityRule",
    "TrailingCommaRule",
    "TrailingWhitespaceRule",
]
