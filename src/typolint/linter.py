"""Linter entry point aggregating findings across rules."""

import logging
from typing import Self

from typolint.catalog import active_rules, build_catalog
from typolint.configuration import LinterConfiguration
from typolint.types import Finding, LintResult, result_from_findings

logger = logging.getLogger(__name__)


class Linter:
    """Checks text against the typographic rules of one locale.

    The locale is fixed at construction and accepted as-is; a locale no rule
    knows about simply leaves the locale-independent rules active. Every
    call to check() builds its own rule instances, so a Linter holds no
    mutable state and may be shared between threads.
    """

    def __init__(self, locale: str) -> None:
        """Initialise the linter.

        Args:
            locale: Locale code whose conventions are enforced

        """
        self._locale = locale

    @classmethod
    def from_configuration(cls, config: LinterConfiguration) -> Self:
        """Create a linter from a validated configuration."""
        return cls(config.locale)

    @property
    def locale(self) -> str:
        """Get the locale this linter enforces."""
        return self._locale

    def check(self, text: str) -> LintResult:
        """Run every active rule over text and collect all violations.

        All active rules run, so one call reports every violation. Findings
        are ordered by catalog position of their rule, then by position
        within the text.

        Args:
            text: The text to check

        Returns:
            Clean if no rule matched, otherwise FindingsPresent.

        Raises:
            RulePatternError: If a rule in the catalog has a malformed pattern

        """
        findings: list[Finding] = []

        for rule in active_rules(build_catalog(self._locale), self._locale):
            findings.extend(rule.check(text).findings)

        logger.debug(
            "Checked %d character(s) for locale '%s': %d finding(s)",
            len(text),
            self._locale,
            len(findings),
        )
        return result_from_findings(findings)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(locale={self._locale!r})"
