"""Locale-tolerant parsing of price strings."""

import math
import re

from ratings_spine.core.errors import EmptyValueError, InvalidNumberError

_CURRENCY_SYMBOLS = re.compile(r"[$€£¥₹₽₩₺₪₱]")

# No-break spaces act as thousands separators too.
_SPACES = re.compile("[ \u00a0\u202f]")

# Plain ASCII decimal or exponent notation; infinities and NaN are refused later.
_NUMBER = re.compile(
    r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def clean_decimal(raw: str, *, field: str = "value") -> float:
    """Convert a free-form price string to a finite float.

    Currency symbols and space separators are dropped wherever they occur.
    A lone comma in a string with no period is read as a decimal comma
    (``"1 234,56"`` -> ``1234.56``); any other comma is a thousands
    separator (``"$1,234.50"`` -> ``1234.5``).

    Args:
        raw: Value as received.
        field: Field name reported in errors.

    Raises:
        EmptyValueError: Nothing left after cleaning.
        InvalidNumberError: The cleaned string is not a finite number.
    """
    s = _CURRENCY_SYMBOLS.sub("", raw)
    s = _SPACES.sub("", s)

    if s.count(",") == 1 and "." not in s:
        s = s.replace(",", ".")
    else:
        s = s.replace(",", "")

    s = s.strip()
    if not s:
        raise EmptyValueError(field)

    if not _NUMBER.fullmatch(s):
        raise InvalidNumberError(field, raw, ValueError(f"could not convert string to float: {s!r}"))

    value = float(s)
    if not math.isfinite(value):
        raise InvalidNumberError(field, raw, ValueError(f"non-finite value {s!r}"))
    return value
