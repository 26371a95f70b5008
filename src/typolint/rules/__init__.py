"""Typographic rules.

This package provides the rule contract and the built-in rules:
- Rule: Abstract base with the shared check() behaviour
- StaticRule: Rule with a locale-independent message and pattern
- LocalisedRule: Rule backed by per-locale message and pattern tables
- Punctuation rules, PriceRule and QuotesRule
"""

from typolint.rules.base import (
    NEUTRAL_MESSAGE,
    NEVER_MATCHES,
    LocalisedRule,
    Rule,
    StaticRule,
)
from typolint.rules.price import PriceRule
from typolint.rules.punctuation import (
    CurlyApostropheRule,
    EllipsisSymbolRule,
    NoSpaceBeforeCommaRule,
    SpaceBeforeDoublePunctuationRule,
)
from typolint.rules.quotes import QuotesRule

__all__ = [
    "NEUTRAL_MESSAGE",
    "NEVER_MATCHES",
    "CurlyApostropheRule",
    "EllipsisSymbolRule",
    "LocalisedRule",
    "NoSpaceBeforeCommaRule",
    "PriceRule",
    "QuotesRule",
    "Rule",
    "SpaceBeforeDoublePunctuationRule",
    "StaticRule",
]
