"""Rule catalog and locale gate.

The catalog is rebuilt on every call; there is no registry to populate or
invalidate. Adding a rule means appending one construction to
build_catalog().
"""

import logging
from collections.abc import Iterable

from typolint.rules import (
    CurlyApostropheRule,
    EllipsisSymbolRule,
    NoSpaceBeforeCommaRule,
    PriceRule,
    QuotesRule,
    Rule,
    SpaceBeforeDoublePunctuationRule,
)

logger = logging.getLogger(__name__)


def build_catalog(locale: str) -> tuple[Rule, ...]:
    """Build one instance of every known rule for a locale.

    The order of the returned tuple governs the order of findings across
    rules.

    Args:
        locale: Locale code passed to every rule

    Returns:
        Fresh rule instances in catalog order

    """
    return (
        CurlyApostropheRule(locale),
        EllipsisSymbolRule(locale),
        NoSpaceBeforeCommaRule(locale),
        PriceRule(locale),
        QuotesRule(locale),
        SpaceBeforeDoublePunctuationRule(locale),
    )


def active_rules(catalog: Iterable[Rule], locale: str) -> tuple[Rule, ...]:
    """Select the rules that apply to a locale, keeping catalog order.

    Args:
        catalog: Rules to filter
        locale: Target locale code

    Returns:
        Rules whose applicable locales are empty or contain the locale

    """
    active = tuple(rule for rule in catalog if rule.supports(locale))
    logger.debug(
        "Active rules for locale '%s': %s",
        locale,
        ", ".join(rule.name for rule in active) or "none",
    )
    return active
