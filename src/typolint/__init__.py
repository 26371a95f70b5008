"""typolint - localised typography linter for prose."""

from typolint.catalog import active_rules, build_catalog
from typolint.configuration import LinterConfiguration
from typolint.errors import RulePatternError, TypolintError
from typolint.linter import Linter
from typolint.rules import LocalisedRule, Rule, StaticRule
from typolint.types import Clean, Finding, FindingsPresent, LintResult

__all__ = [
    "Clean",
    "Finding",
    "FindingsPresent",
    "LintResult",
    "Linter",
    "LinterConfiguration",
    "LocalisedRule",
    "Rule",
    "RulePatternError",
    "StaticRule",
    "TypolintError",
    "active_rules",
    "build_catalog",
]
