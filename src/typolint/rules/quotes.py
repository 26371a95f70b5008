"""Quotation mark rule."""

from typolint.rules.base import NBSP, LocalisedRule

_FRENCH_WITHOUT_SPACES = "Please use french quotation marks without spaces."


class QuotesRule(LocalisedRule):
    """Flags quotation marks that do not follow the locale's convention.

    Each pattern is the union of every quotation style that is wrong for the
    locale: straight quotes always, foreign guillemets or curly quotes, and
    the local style when it is padded incorrectly.
    """

    name = "quotes"
    messages = {
        "de": "Please use german quotation marks without spaces.",
        "en": "Please use english double quotation marks without spaces.",
        "es": _FRENCH_WITHOUT_SPACES,
        "fr": "Please use french quotation marks with non-breaking spaces.",
        "it": _FRENCH_WITHOUT_SPACES,
    }
    patterns = {
        "de": r'".+"|«.+»|“.+”|„\s.+\s“',
        "en": r'".+"|«.+»|“\s.+\s”|„.+“',
        "es": r'".+"|«\s.+\s»|“.+”|„.+“',
        "fr": rf'".+"|«[^{NBSP}].+[^{NBSP}]»|“.+”|„.+“',
        "it": r'".+"|«\s.+\s»|“.+”|„.+“',
    }
