"""Error classes for typolint.

This module provides:
- TypolintError: Base exception class for all library errors
- RulePatternError: Raised when a rule's detection pattern cannot be compiled

Lint findings are not errors and never travel through this hierarchy; they
are returned as a FindingsPresent result.
"""


class TypolintError(Exception):
    """Base exception for all typolint errors."""

    pass


class RulePatternError(TypolintError):
    """Raised when a rule's detection pattern is not a valid regex.

    A malformed pattern is a bug in the rule catalog, not a lint outcome.
    """

    def __init__(self, rule_name: str, locale: str, pattern: str) -> None:
        """Initialise the error.

        Args:
            rule_name: Name of the rule owning the pattern
            locale: Locale the pattern was resolved for
            pattern: The pattern source that failed to compile

        """
        self.rule_name = rule_name
        self.locale = locale
        self.pattern = pattern
        super().__init__(
            f"Rule '{rule_name}' has an invalid pattern for locale '{locale}': {pattern!r}"
        )
