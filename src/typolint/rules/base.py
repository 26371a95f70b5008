"""Abstract base classes for typographic rules."""

import abc
import logging
import re
from collections.abc import Mapping
from typing import ClassVar, override

from typolint.errors import RulePatternError
from typolint.types import Finding, LintResult, result_from_findings

logger = logging.getLogger(__name__)

# Message used by localised rules for a locale they do not support.
NEUTRAL_MESSAGE = ""

# Empty negative lookahead: compiles, never matches.
NEVER_MATCHES = "(?!)"

# Character class content for the non-breaking spaces accepted by French
# typography (no-break space and narrow no-break space).
NBSP = "\u00a0\u202f"


def _utf8_length(fragment: str) -> int:
    return len(fragment.encode("utf-8", errors="surrogatepass"))


class Rule(abc.ABC):
    """Base class for all typographic rules.

    A rule is bound to the locale it was constructed for and exposes three
    locale-conditioned capabilities. The shared check() behaviour compiles
    the rule's pattern and turns every match into a Finding.

    Each rule must define:
    - name: ClassVar[str] - stable identifier copied onto findings
    - applicable_locales() - locales the rule runs for (empty means all)
    - message_for(locale) - message attached to findings
    - pattern_for(locale) - regex source used for detection
    """

    name: ClassVar[str]

    def __init__(self, locale: str) -> None:
        """Initialise the rule for a locale.

        Args:
            locale: Locale code the rule is evaluated for

        """
        self.locale = locale

    @abc.abstractmethod
    def applicable_locales(self) -> frozenset[str]:
        """Get the locales this rule applies to.

        Returns:
            Locale codes, or an empty set when the rule applies everywhere

        """

    @abc.abstractmethod
    def message_for(self, locale: str) -> str:
        """Get the message reported for a violation in the given locale."""

    @abc.abstractmethod
    def pattern_for(self, locale: str) -> str:
        """Get the detection pattern source for the given locale."""

    def supports(self, locale: str) -> bool:
        """Check whether the rule is active for a locale.

        Args:
            locale: Locale code to test

        Returns:
            True if the rule applies to all locales or lists this one.

        """
        locales = self.applicable_locales()
        return not locales or locale in locales

    def check(self, text: str) -> LintResult:
        """Scan text for violations of this rule.

        Matches are non-overlapping and reported left to right. Offsets are
        UTF-8 byte offsets into text.

        Args:
            text: The text to scan

        Returns:
            Clean if nothing matched, otherwise FindingsPresent.

        Raises:
            RulePatternError: If the rule's pattern is not a valid regex

        """
        pattern = self.pattern_for(self.locale)
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise RulePatternError(self.name, self.locale, pattern) from e

        message = self.message_for(self.locale)
        findings: list[Finding] = []
        char_pos = 0
        byte_pos = 0

        for match in regex.finditer(text):
            byte_pos += _utf8_length(text[char_pos : match.start()])
            start = byte_pos
            byte_pos += _utf8_length(match.group())
            char_pos = match.end()
            findings.append(
                Finding(rule=self.name, message=message, start=start, end=byte_pos)
            )

        logger.debug(
            "Rule %s (%s) matched %d time(s)", self.name, self.locale, len(findings)
        )
        return result_from_findings(findings)


class StaticRule(Rule):
    """Rule whose message and pattern do not depend on the locale.

    Subclasses need only define ClassVars:
        name: Rule identifier
        message: Message reported for every violation
        pattern: Detection regex
        locales: Locales the rule is restricted to (default: all)
    """

    message: ClassVar[str]
    pattern: ClassVar[str]
    locales: ClassVar[frozenset[str]] = frozenset()

    @override
    def applicable_locales(self) -> frozenset[str]:
        return self.locales

    @override
    def message_for(self, locale: str) -> str:
        return self.message

    @override
    def pattern_for(self, locale: str) -> str:
        return self.pattern


class LocalisedRule(Rule):
    """Rule whose message and pattern are looked up per locale.

    Subclasses define two ordered locale tables as ClassVars:
        messages: Locale code to message
        patterns: Locale code to regex source

    The rule applies to exactly the locales listed in `patterns`. Lookups
    for any other locale are total: they return NEUTRAL_MESSAGE and
    NEVER_MATCHES instead of failing, so a rule that is run for an
    unsupported locale reports nothing.
    """

    messages: ClassVar[Mapping[str, str]]
    patterns: ClassVar[Mapping[str, str]]

    @override
    def applicable_locales(self) -> frozenset[str]:
        return frozenset(self.patterns)

    @override
    def message_for(self, locale: str) -> str:
        return self.messages.get(locale, NEUTRAL_MESSAGE)

    @override
    def pattern_for(self, locale: str) -> str:
        return self.patterns.get(locale, NEVER_MATCHES)
