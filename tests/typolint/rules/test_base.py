"""Unit tests for the Rule base classes."""

import pytest

from typolint.errors import RulePatternError
from typolint.rules.base import (
    NEUTRAL_MESSAGE,
    NEVER_MATCHES,
    LocalisedRule,
    Rule,
    StaticRule,
)
from typolint.types import Clean, FindingsPresent


class DigitRule(StaticRule):
    """Static rule flagging runs of digits, for tests."""

    name = "digits"
    message = "No digits."
    pattern = r"\d+"


class BrokenRule(StaticRule):
    """Static rule with an unbalanced group."""

    name = "broken"
    message = "Never reported."
    pattern = "(abc"


class GreetingRule(LocalisedRule):
    """Localised rule flagging a greeting per language."""

    name = "greeting"
    messages = {"en": "Hello found.", "fr": "Bonjour trouvé."}
    patterns = {"en": "hello", "fr": "bonjour"}


class TestRuleContract:
    """Test the abstract Rule contract."""

    def test_rule_cannot_be_instantiated(self) -> None:
        """Test that Rule is abstract."""
        with pytest.raises(TypeError, match="Can't instantiate abstract class"):
            Rule("en")  # type: ignore[abstract]

    def test_rule_keeps_its_locale(self) -> None:
        """Test the constructor stores the locale."""
        assert DigitRule("de").locale == "de"

    def test_rule_without_locales_supports_every_locale(self) -> None:
        """Test an empty locale set means all locales."""
        rule = DigitRule("en")

        assert rule.applicable_locales() == frozenset()
        assert rule.supports("en")
        assert rule.supports("xx")

    def test_rule_with_locales_supports_only_those(self) -> None:
        """Test a restricted rule rejects other locales."""
        rule = GreetingRule("en")

        assert rule.supports("fr")
        assert not rule.supports("de")


class TestRuleCheck:
    """Test the shared check() behaviour."""

    def test_no_match_returns_clean(self) -> None:
        """Test text without matches is clean."""
        assert DigitRule("en").check("no numbers here") == Clean()

    def test_empty_text_returns_clean(self) -> None:
        """Test empty text is clean."""
        assert DigitRule("en").check("") == Clean()

    def test_match_produces_finding_with_rule_message(self) -> None:
        """Test a match becomes a finding carrying the rule's message."""
        result = DigitRule("en").check("call 555 now")

        assert isinstance(result, FindingsPresent)
        assert len(result.findings) == 1
        finding = result.findings[0]
        assert finding.rule == "digits"
        assert finding.message == "No digits."
        assert (finding.start, finding.end) == (5, 8)

    def test_matches_are_reported_left_to_right(self) -> None:
        """Test discovery order within one rule."""
        result = DigitRule("en").check("1 and 22 and 333")

        assert [(f.start, f.end) for f in result.findings] == [
            (0, 1),
            (6, 8),
            (13, 16),
        ]

    def test_offsets_are_utf8_byte_offsets(self) -> None:
        """Test multi-byte characters shift offsets by their encoded length."""
        # "é" is 2 bytes and "€" is 3 bytes in UTF-8
        result = DigitRule("en").check("é€42 é7")

        assert [(f.start, f.end) for f in result.findings] == [(5, 7), (10, 11)]

    def test_offsets_cover_multibyte_matches(self) -> None:
        """Test the end offset includes every byte of the matched text."""

        class EuroRule(StaticRule):
            name = "euro"
            message = "Euro."
            pattern = "€+"

        result = EuroRule("en").check("a€€b")

        assert [(f.start, f.end) for f in result.findings] == [(1, 7)]

    def test_malformed_pattern_raises(self) -> None:
        """Test an invalid pattern is a fatal configuration error."""
        with pytest.raises(RulePatternError) as exc_info:
            BrokenRule("en").check("abc")

        assert exc_info.value.rule_name == "broken"
        assert exc_info.value.locale == "en"
        assert exc_info.value.pattern == "(abc"
        assert exc_info.value.__cause__ is not None

    def test_repeated_checks_are_identical(self) -> None:
        """Test check() is a pure function of the text."""
        rule = DigitRule("en")

        assert rule.check("a1b22") == rule.check("a1b22")


class TestLocalisedRule:
    """Test table-driven localised rules."""

    def test_applicable_locales_come_from_pattern_table(self) -> None:
        """Test the supported locales are the pattern table keys."""
        assert GreetingRule("en").applicable_locales() == frozenset({"en", "fr"})

    def test_message_and_pattern_follow_locale(self) -> None:
        """Test per-locale lookups."""
        rule = GreetingRule("fr")

        assert rule.message_for("fr") == "Bonjour trouvé."
        assert rule.pattern_for("en") == "hello"

    def test_check_uses_constructed_locale(self) -> None:
        """Test check() resolves the table entry for its own locale."""
        result = GreetingRule("fr").check("hello bonjour")

        assert [(f.message, f.start, f.end) for f in result.findings] == [
            ("Bonjour trouvé.", 6, 13)
        ]

    def test_unsupported_locale_resolves_to_neutral_values(self) -> None:
        """Test lookups for an unknown locale are total."""
        rule = GreetingRule("xx")

        assert rule.message_for("xx") == NEUTRAL_MESSAGE
        assert rule.pattern_for("xx") == NEVER_MATCHES

    def test_unsupported_locale_never_matches(self) -> None:
        """Test a rule run for an unknown locale reports nothing."""
        assert GreetingRule("xx").check("hello bonjour") == Clean()

    def test_never_matches_pattern_matches_nothing_even_in_empty_text(self) -> None:
        """Test the fallback pattern yields no zero-width matches."""

        class NothingRule(LocalisedRule):
            name = "nothing"
            messages = {}
            patterns = {}

        assert NothingRule("en").check("") == Clean()
        assert NothingRule("en").check("anything at all") == Clean()
