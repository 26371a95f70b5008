"""Currency placement rule."""

from typolint.rules.base import NBSP, LocalisedRule

CURRENCIES = "$¢£¤¥֏؋৲৳৻૱௹฿₠₡₢₣₤₥₦₧₨₩₪₫€₭₮₯₰₱₲₳₴₵₶₷₸₹₺₽﹩＄￠￡￥￦"

_AFTER_WITH_NBSP = (
    "The currency sign should be written after the amount and a non-breaking space."
)


class PriceRule(LocalisedRule):
    """Flags currency signs placed on the wrong side of an amount.

    German, Spanish and French write the sign after the amount, separated by
    a non-breaking space (`120 €`). English writes it before the amount with
    no space (`€120`). Italian writes it before the amount, separated by a
    non-breaking space (`€ 120`).
    """

    name = "price"
    messages = {
        "de": _AFTER_WITH_NBSP,
        "en": "The currency sign should be written before the amount without space.",
        "es": _AFTER_WITH_NBSP,
        "fr": _AFTER_WITH_NBSP,
        "it": "The currency sign should be written before the amount and a non-breaking space.",
    }
    patterns = {
        # `120€`, `120 €` (plain space) or a sign before the amount (`€120`, `€ 120`)
        "de": rf"(?<!\d)\d+[^{NBSP}]?[{CURRENCIES}]|[{CURRENCIES}]\s?\d+",
        # a sign after the amount (`120€`, `120 €`) or spaced before it (`€ 120`)
        "en": rf"(?<!\d)\d+\s?[{CURRENCIES}]|[{CURRENCIES}]\s\d+",
        "es": rf"(?<!\d)\d+[^{NBSP}]?[{CURRENCIES}]|[{CURRENCIES}]\s?\d+",
        "fr": rf"(?<!\d)\d+[^{NBSP}]?[{CURRENCIES}]|[{CURRENCIES}]\s?\d+",
        # a sign after the amount (`120€`, `120 €`) or before it without a
        # non-breaking space (`€120`, `€ 120` with a plain space)
        "it": rf"(?<!\d)\d+\s?[{CURRENCIES}]|[{CURRENCIES}][^{NBSP}]?\d+",
    }
