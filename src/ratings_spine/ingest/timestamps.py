"""Multi-format timestamp parsing.

Feeds disagree on how to write a date, so :func:`parse_timestamp` walks a
fixed list of formats and keeps the first one that parses. The order is
part of the contract: ``"03/04/2025"`` matches month/day/year before
day/month/year is ever tried, so it reads as March 4th. Values such as
``"13/04/2025"`` only fit day/month/year and read as April 13th.

Every numeric component is fixed width: months, days and clock fields need
two digits, so ``"2024-1-5"`` and ``"3/4/2025"`` are rejected. Fractional
seconds may carry any number of digits; past microseconds they are
truncated.
"""

import re
from datetime import datetime

from ratings_spine.core.errors import InvalidTimestampError

TIMESTAMP_FORMATS: tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S%z",  # RFC 3339, offset or Z
    "%Y-%m-%dT%H:%M:%S.%f%z",  # RFC 3339 with fractional seconds
    "%Y-%m-%dT%H:%M:%S",  # ISO without zone
    "%Y-%m-%d %H:%M:%S",  # SQL datetime
    "%Y-%m-%d",
    "%m/%d/%Y",  # US
    "%d/%m/%Y",  # European
    "%Y/%m/%d",
)

_DIRECTIVE_PATTERNS = {
    "%Y": r"\d{4}",
    "%m": r"\d{2}",
    "%d": r"\d{2}",
    "%H": r"\d{2}",
    "%M": r"\d{2}",
    "%S": r"\d{2}",
    "%f": r"\d{1,6}",
    "%z": r"(?:Z|[+-]\d{2}:?\d{2})",
}

# strptime tolerates unpadded fields, so each format is shape-checked first.
_SHAPES = {
    fmt: re.compile(
        re.sub(r"%[A-Za-z]", lambda m: _DIRECTIVE_PATTERNS[m.group()], re.escape(fmt)),
        re.ASCII,
    )
    for fmt in TIMESTAMP_FORMATS
}

# %f stops at microseconds.
_SUB_MICROSECOND = re.compile(r"(\.\d{6})\d+", re.ASCII)


def parse_timestamp(raw: str) -> datetime:
    """Parse ``raw`` with the first matching entry of ``TIMESTAMP_FORMATS``.

    The result is timezone-aware only when the input carries an offset.

    Raises:
        InvalidTimestampError: No format matched; wraps the last parse error.
    """
    value = _SUB_MICROSECOND.sub(r"\1", raw)

    last_error: ValueError | None = None
    for fmt in TIMESTAMP_FORMATS:
        if not _SHAPES[fmt].fullmatch(value):
            last_error = ValueError(f"time data {raw!r} does not match format {fmt!r}")
            continue
        try:
            return datetime.strptime(value, fmt)
        except ValueError as e:
            last_error = e

    raise InvalidTimestampError(raw, last_error) from last_error
