"""Primitive SQL values such as numbers, strings and intervals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

__all__ = [
    "Number",
    "SingleQuotedString",
    "NationalStringLiteral",
    "HexStringLiteral",
    "DoubleQuotedString",
    "Boolean",
    "Interval",
    "Null",
    "Placeholder",
    "DateTimeField",
    "TrimWhereField",
    "Value",
    "escape_single_quote_string",
]


def escape_single_quote_string(s):
    """Double every single quote in ``s`` for use inside a '...' literal."""
    return s.replace("'", "''")


class DateTimeField(Enum):
    """A date/time unit, valued by its SQL spelling."""

    YEAR = "YEAR"
    MONTH = "MONTH"
    WEEK = "WEEK"
    DAY = "DAY"
    HOUR = "HOUR"
    MINUTE = "MINUTE"
    SECOND = "SECOND"
    CENTURY = "CENTURY"
    DECADE = "DECADE"
    DOW = "DOW"
    DOY = "DOY"
    EPOCH = "EPOCH"
    ISODOW = "ISODOW"
    ISOYEAR = "ISOYEAR"
    JULIAN = "JULIAN"
    MICROSECONDS = "MICROSECONDS"
    MILLENIUM = "MILLENIUM"
    MILLISECONDS = "MILLISECONDS"
    QUARTER = "QUARTER"
    TIMEZONE = "TIMEZONE"
    TIMEZONE_HOUR = "TIMEZONE_HOUR"
    TIMEZONE_MINUTE = "TIMEZONE_MINUTE"

    def __str__(self) -> str:
        return self.value


class TrimWhereField(Enum):
    """Which side ``TRIM`` works on."""

    BOTH = "BOTH"
    LEADING = "LEADING"
    TRAILING = "TRAILING"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number:
    """A numeric literal, kept as written; ``long`` marks a trailing ``L``."""

    value: str
    long: bool = False

    def __str__(self) -> str:
        return f"{self.value}{'L' if self.long else ''}"


@dataclass(frozen=True)
class SingleQuotedString:
    """'string value'"""

    value: str

    def __str__(self) -> str:
        return f"'{escape_single_quote_string(self.value)}'"


@dataclass(frozen=True)
class NationalStringLiteral:
    """N'string value'"""

    value: str

    def __str__(self) -> str:
        return f"N'{self.value}'"


@dataclass(frozen=True)
class HexStringLiteral:
    """X'hex value'"""

    value: str

    def __str__(self) -> str:
        return f"X'{self.value}'"


@dataclass(frozen=True)
class DoubleQuotedString:
    """"string value\""""

    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class Boolean:
    """``true`` or ``false``."""

    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Interval:
    """An INTERVAL literal.

    ``INTERVAL '<value>' [ <leading_field> [ (<leading_precision>) ] ]
    [ TO <last_field> [ (<fractional_seconds_precision>) ] ]``.
    The value and the ordering of the fields are not validated.
    """

    value: str
    leading_field: Optional[DateTimeField] = None
    leading_precision: Optional[int] = None
    last_field: Optional[DateTimeField] = None
    fractional_seconds_precision: Optional[int] = None

    def __str__(self) -> str:
        escaped = escape_single_quote_string(self.value)
        if (
            self.leading_field is DateTimeField.SECOND
            and self.leading_precision is not None
            and self.fractional_seconds_precision is not None
        ):
            if self.last_field is not None:
                raise ValueError("an interval led by SECOND cannot have a last field")
            return (
                f"INTERVAL '{escaped}' SECOND "
                f"({self.leading_precision}, {self.fractional_seconds_precision})"
            )
        parts = [f"INTERVAL '{escaped}'"]
        if self.leading_field is not None:
            parts.append(f" {self.leading_field}")
        if self.leading_precision is not None:
            parts.append(f" ({self.leading_precision})")
        if self.last_field is not None:
            parts.append(f" TO {self.last_field}")
        if self.fractional_seconds_precision is not None:
            parts.append(f" ({self.fractional_seconds_precision})")
        return "".join(parts)


@dataclass(frozen=True)
class Null:
    """The ``NULL`` value."""

    def __str__(self) -> str:
        return "NULL"


@dataclass(frozen=True)
class Placeholder:
    """A prepared-statement placeholder such as ``?`` or ``$1``."""

    value: str

    def __str__(self) -> str:
        return self.value


Value = Union[
    Number,
    SingleQuotedString,
    NationalStringLiteral,
    HexStringLiteral,
    DoubleQuotedString,
    Boolean,
    Interval,
    Null,
    Placeholder,
]