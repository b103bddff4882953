"""
FHIR R4 temporal primitives.

The model layer keeps ``date``, ``dateTime``, ``instant`` and ``time`` values
as their exact lexical strings, so partial precision (``"1974"``,
``"1974-12"``) survives a round trip. The annotated types below enforce the
R4 regular expressions on decode; the helper functions convert to and from
the standard library temporal types when a caller needs to compute with them.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Annotated, Literal

from pydantic import StringConstraints

_YEAR = r"([0-9]([0-9]([0-9][1-9]|[1-9]0)|[1-9]00)|[1-9]000)"
_MONTH = r"(0[1-9]|1[0-2])"
_DAY = r"(0[1-9]|[1-2][0-9]|3[0-1])"
_CLOCK = r"([01][0-9]|2[0-3]):[0-5][0-9]:([0-5][0-9]|60)(\.[0-9]+)?"
_ZONE = r"(Z|(\+|-)((0[0-9]|1[0-3]):[0-5][0-9]|14:00))"

DATE_PATTERN = rf"^{_YEAR}(-{_MONTH}(-{_DAY})?)?$"
DATETIME_PATTERN = rf"^{_YEAR}(-{_MONTH}(-{_DAY}(T{_CLOCK}{_ZONE})?)?)?$"
INSTANT_PATTERN = rf"^{_YEAR}-{_MONTH}-{_DAY}T{_CLOCK}{_ZONE}$"
TIME_PATTERN = rf"^{_CLOCK}$"

Date = Annotated[str, StringConstraints(pattern=DATE_PATTERN)]
DateTime = Annotated[str, StringConstraints(pattern=DATETIME_PATTERN)]
Instant = Annotated[str, StringConstraints(pattern=INSTANT_PATTERN)]
Time = Annotated[str, StringConstraints(pattern=TIME_PATTERN)]

type Precision = Literal["year", "month", "day", "second", "fraction"]

_DATE_RE = re.compile(DATE_PATTERN)
_DATETIME_RE = re.compile(DATETIME_PATTERN)
_INSTANT_RE = re.compile(INSTANT_PATTERN)
_TIME_RE = re.compile(TIME_PATTERN)


def precision(value: str) -> Precision:
    """
    Report how precise a FHIR ``date`` or ``dateTime`` string is.

    :param value: A lexically valid ``date`` or ``dateTime``.
    :returns: ``"year"``, ``"month"``, ``"day"``, ``"second"`` or ``"fraction"``.
    :raises ValueError: If ``value`` is neither a date nor a dateTime.
    """
    if not _DATETIME_RE.match(value):
        raise ValueError(f"Not a FHIR date or dateTime: {value!r}")
    if "T" in value:
        clock = value.split("T", 1)[1]
        return "fraction" if "." in clock else "second"
    return ("year", "month", "day")[value.count("-")]


def parse_date(value: str) -> date:
    """
    Parse a FHIR ``date``; missing month or day default to 1.

    :raises ValueError: If ``value`` does not match the R4 date pattern.
    """
    if not _DATE_RE.match(value):
        raise ValueError(f"Not a FHIR date: {value!r}")
    parts = [int(part) for part in value.split("-")]
    parts.extend([1] * (3 - len(parts)))
    return date(*parts)


def parse_datetime(value: str) -> datetime:
    """
    Parse a FHIR ``dateTime``.

    Date-only values become midnight UTC of the (first) matching day; values
    with a clock always carry their own offset.

    :raises ValueError: If ``value`` does not match the R4 dateTime pattern.
    """
    if not _DATETIME_RE.match(value):
        raise ValueError(f"Not a FHIR dateTime: {value!r}")
    if "T" not in value:
        day = parse_date(value)
        return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return datetime.fromisoformat(value)


def parse_instant(value: str) -> datetime:
    """
    Parse a FHIR ``instant`` into an aware :class:`datetime`.

    :raises ValueError: If ``value`` does not match the R4 instant pattern.
    """
    if not _INSTANT_RE.match(value):
        raise ValueError(f"Not a FHIR instant: {value!r}")
    return datetime.fromisoformat(value)


def parse_time(value: str) -> time:
    """
    Parse a FHIR ``time`` (a time of day without zone).

    :raises ValueError: If ``value`` does not match the R4 time pattern.
    """
    if not _TIME_RE.match(value):
        raise ValueError(f"Not a FHIR time: {value!r}")
    return time.fromisoformat(value)


def format_date(
    value: date, precision: Literal["year", "month", "day"] = "day"
) -> str:
    """Format a :class:`date` as a FHIR ``date`` at the requested precision."""
    if precision == "year":
        return f"{value.year:04d}"
    if precision == "month":
        return f"{value.year:04d}-{value.month:02d}"
    return value.isoformat()


def format_datetime(value: datetime) -> str:
    """
    Format an aware :class:`datetime` as a FHIR ``dateTime``.

    Naive values are assumed to be UTC. UTC is written as ``Z``.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.isoformat(timespec="milliseconds" if value.microsecond else "seconds")
    return text.replace("+00:00", "Z")


def format_instant(value: datetime) -> str:
    """Format an aware :class:`datetime` as a FHIR ``instant``."""
    return format_datetime(value)


def format_time(value: time) -> str:
    """Format a :class:`time` as a FHIR ``time``, dropping any zone."""
    return value.replace(tzinfo=None).isoformat(
        timespec="milliseconds" if value.microsecond else "seconds"
    )
