"""Punctuation rules whose pattern does not vary by locale."""

from typolint.rules.base import NBSP, StaticRule


class CurlyApostropheRule(StaticRule):
    """Flags straight apostrophes (`'`) that should be curly (`’`)."""

    name = "curly-apostrophe"
    message = "Please use curly apostrophes."
    pattern = "'"


class EllipsisSymbolRule(StaticRule):
    """Flags three consecutive dots that should be a single `…`."""

    name = "ellipsis-symbol"
    message = "Please use the ellipsis symbol (`…`) instead of three dots (`...`)."
    pattern = r"\.\.\."


class NoSpaceBeforeCommaRule(StaticRule):
    """Flags whitespace placed before a comma."""

    name = "no-space-before-comma"
    message = "Please do not put a space before a comma."
    pattern = r"\s+,"


class SpaceBeforeDoublePunctuationRule(StaticRule):
    """Flags `;`, `:`, `!` and `?` not preceded by a non-breaking space.

    The finding spans the offending preceding character and the mark.
    """

    name = "space-before-double-punctuation"
    message = (
        "Please use a non-breaking space before “double” ponctuation marks: "
        "`;`, `:`, `!`, `?`."
    )
    pattern = rf"[^{NBSP};:!?][;:!?]"
    locales = frozenset({"fr"})
