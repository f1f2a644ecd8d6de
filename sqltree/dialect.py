"""SQL dialects: the lexical rules that differ between database engines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

__all__ = [
    "Dialect",
    "AnsiDialect",
    "BigQueryDialect",
    "ClickHouseDialect",
    "GenericDialect",
    "HiveDialect",
    "MsSqlDialect",
    "MySqlDialect",
    "PostgreSqlDialect",
    "RedshiftSqlDialect",
    "SnowflakeDialect",
    "SQLiteDialect",
    "dialect_of",
]


def _is_ascii_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def _is_ascii_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Dialect(ABC):
    """Lexical rules for identifiers in one flavour of SQL."""

    def is_delimited_identifier_start(self, ch: str) -> bool:
        """Whether ``ch`` opens a quoted identifier.

        Accepting "double quoted" identifiers is ANSI-compliant and suits most
        dialects.
        """
        return ch == '"'

    def is_proper_identifier_inside_quotes(self, chars: Iterable[str]) -> bool:
        """Whether the text starting at an opening quote holds an identifier."""
        return True

    @abstractmethod
    def is_identifier_start(self, ch: str) -> bool:
        """Whether ``ch`` may start an unquoted identifier."""

    @abstractmethod
    def is_identifier_part(self, ch: str) -> bool:
        """Whether ``ch`` may appear inside an unquoted identifier."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dialect):
            return NotImplemented
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


def dialect_of(dialect: Dialect, *args: type) -> bool:
    """Whether ``dialect`` is exactly an instance of one of the given dialect classes."""
    return type(dialect) in args


class AnsiDialect(Dialect):
    """ANSI SQL."""

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch)

    def is_identifier_part(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or _is_ascii_digit(ch) or ch == "_"


class BigQueryDialect(Dialect):
    """Google BigQuery: backtick-quoted identifiers, dashes allowed inside names."""

    def is_delimited_identifier_start(self, ch: str) -> bool:
        return ch == "`"

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or ch == "_"

    def is_identifier_part(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or _is_ascii_digit(ch) or ch in "_-"


class ClickHouseDialect(Dialect):
    """ClickHouse."""

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or ch == "_"

    def is_identifier_part(self, ch: str) -> bool:
        return self.is_identifier_start(ch) or _is_ascii_digit(ch)


class GenericDialect(Dialect):
    """A permissive dialect accepting the common superset of syntax."""

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or ch in "_#@"

    def is_identifier_part(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or _is_ascii_digit(ch) or ch in "@$#_"


class HiveDialect(Dialect):
    """Apache Hive."""

    def is_delimited_identifier_start(self, ch: str) -> bool:
        return ch in ('"', "`")

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or _is_ascii_digit(ch) or ch == "$"

    def is_identifier_part(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or _is_ascii_digit(ch) or ch in "_${}"


class MsSqlDialect(Dialect):
    """Microsoft SQL Server (T-SQL); only Latin letters are supported."""

    def is_delimited_identifier_start(self, ch: str) -> bool:
        return ch in ('"', "[")

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or ch in "_#@"

    def is_identifier_part(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or _is_ascii_digit(ch) or ch in "@$#_"


class MySqlDialect(Dialect):
    """MySQL; identifiers starting with digits are not supported."""

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or ch in "_$" or "\u0080" <= ch <= "\uffff"

    def is_identifier_part(self, ch: str) -> bool:
        return self.is_identifier_start(ch) or _is_ascii_digit(ch)

    def is_delimited_identifier_start(self, ch: str) -> bool:
        return ch == "`"


class PostgreSqlDialect(Dialect):
    """PostgreSQL; non-Latin letters are not supported in identifiers."""

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or ch == "_"

    def is_identifier_part(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or _is_ascii_digit(ch) or ch in "$_"


_POSTGRES = PostgreSqlDialect()


class RedshiftSqlDialect(Dialect):
    """Amazon Redshift: PostgreSQL rules plus ``#`` and ``[...]`` identifiers.

    Square brackets are either identifier quotes or a JSON path; they count
    as quotes only when an identifier follows the opening bracket.
    """

    def is_delimited_identifier_start(self, ch: str) -> bool:
        return ch in ('"', "[")

    def is_proper_identifier_inside_quotes(self, chars: Iterable[str]) -> bool:
        rest = iter(chars)
        next(rest, None)
        for ch in rest:
            if not ch.isspace():
                return self.is_identifier_start(ch)
        return False

    def is_identifier_start(self, ch: str) -> bool:
        return _POSTGRES.is_identifier_start(ch) or ch == "#"

    def is_identifier_part(self, ch: str) -> bool:
        return _POSTGRES.is_identifier_part(ch) or ch == "#"


class SnowflakeDialect(Dialect):
    """Snowflake."""

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or ch == "_"

    def is_identifier_part(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or _is_ascii_digit(ch) or ch in "$_"


class SQLiteDialect(Dialect):
    """SQLite: `...`, [...] and "..." all quote identifiers."""

    def is_delimited_identifier_start(self, ch: str) -> bool:
        return ch in ("`", '"', "[")

    def is_identifier_start(self, ch: str) -> bool:
        return _is_ascii_letter(ch) or ch in "_$" or "\u007f" <= ch <= "\uffff"

    def is_identifier_part(self, ch: str) -> bool:
        return self.is_identifier_start(ch) or _is_ascii_digit(ch)