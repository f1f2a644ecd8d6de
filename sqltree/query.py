"""Query syntax tree: SELECT bodies, set operations, joins and their clauses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

__all__ = [
    "Query",
    "NestedQuery",
    "SetOperation",
    "SetOperator",
    "InsertStatement",
    "Select",
    "LateralView",
    "With",
    "Cte",
    "UnnamedExpr",
    "ExprWithAlias",
    "QualifiedWildcard",
    "Wildcard",
    "TableWithJoins",
    "Table",
    "Derived",
    "TableFunction",
    "NestedJoin",
    "TableAlias",
    "Join",
    "JoinOperator",
    "On",
    "Using",
    "Natural",
    "NoConstraint",
    "OrderByExpr",
    "Offset",
    "OffsetRows",
    "Fetch",
    "LockType",
    "Top",
    "Values",
    "SelectInto",
    "SetExpr",
    "SelectItem",
    "TableFactor",
    "JoinConstraint",
    "display_comma_separated",
]


def display_comma_separated(items):
    """Render ``items`` separated by ", "."""
    return ", ".join(str(item) for item in items)


class SetOperator(Enum):
    """The operator joining two query bodies."""

    UNION = "UNION"
    EXCEPT = "EXCEPT"
    INTERSECT = "INTERSECT"

    def __str__(self) -> str:
        return self.value


class OffsetRows(Enum):
    """The keyword after ``OFFSET <number>``; NONE is a MySQL quirk."""

    NONE = ""
    ROW = " ROW"
    ROWS = " ROWS"

    def __str__(self) -> str:
        return self.value


class LockType(Enum):
    """``FOR SHARE`` or ``FOR UPDATE``."""

    SHARE = "FOR SHARE"
    UPDATE = "FOR UPDATE"

    def __str__(self) -> str:
        return self.value


class JoinOperator(Enum):
    """How a joined relation attaches to the tables before it."""

    INNER = "JOIN"
    LEFT_OUTER = "LEFT JOIN"
    RIGHT_OUTER = "RIGHT JOIN"
    FULL_OUTER = "FULL JOIN"
    CROSS_JOIN = "CROSS JOIN"
    CROSS_APPLY = "CROSS APPLY"
    OUTER_APPLY = "OUTER APPLY"

    @property
    def takes_constraint(self) -> bool:
        return self in (
            JoinOperator.INNER,
            JoinOperator.LEFT_OUTER,
            JoinOperator.RIGHT_OUTER,
            JoinOperator.FULL_OUTER,
        )


# ---------------------------------------------------------------- join constraints


@dataclass
class On:
    """``ON <expr>``"""

    expr: Any


@dataclass
class Using:
    """``USING(<columns>)``"""

    columns: list = field(default_factory=list)


@dataclass
class Natural:
    """A ``NATURAL`` join."""


@dataclass
class NoConstraint:
    """A join without any constraint."""


JoinConstraint = Union[On, Using, Natural, NoConstraint]


# ---------------------------------------------------------------- small clauses


@dataclass
class TableAlias:
    """``name [(col1, col2, ...)]``"""

    name: Any
    columns: list = field(default_factory=list)

    def __str__(self) -> str:
        if self.columns:
            return f"{self.name} ({display_comma_separated(self.columns)})"
        return str(self.name)


@dataclass
class OrderByExpr:
    """An ``ORDER BY`` item with optional direction and null ordering."""

    expr: Any
    asc: Optional[bool] = None
    nulls_first: Optional[bool] = None

    def __str__(self) -> str:
        text = str(self.expr)
        if self.asc is True:
            text += " ASC"
        elif self.asc is False:
            text += " DESC"
        if self.nulls_first is True:
            text += " NULLS FIRST"
        elif self.nulls_first is False:
            text += " NULLS LAST"
        return text


@dataclass
class Offset:
    """``OFFSET <N> [ { ROW | ROWS } ]``"""

    value: Any
    rows: OffsetRows = OffsetRows.NONE

    def __str__(self) -> str:
        return f"OFFSET {self.value}{self.rows}"


@dataclass
class Fetch:
    """``FETCH FIRST <N> [ PERCENT ] ROWS { ONLY | WITH TIES }``"""

    quantity: Any = None
    percent: bool = False
    with_ties: bool = False

    def __str__(self) -> str:
        extension = "WITH TIES" if self.with_ties else "ONLY"
        if self.quantity is not None:
            percent = " PERCENT" if self.percent else ""
            return f"FETCH FIRST {self.quantity}{percent} ROWS {extension}"
        return f"FETCH FIRST ROWS {extension}"


@dataclass
class Top:
    """MSSQL ``TOP (<N>) [ PERCENT ] [ WITH TIES ]``."""

    quantity: Any = None
    percent: bool = False
    with_ties: bool = False

    def __str__(self) -> str:
        extension = " WITH TIES" if self.with_ties else ""
        if self.quantity is not None:
            percent = " PERCENT" if self.percent else ""
            return f"TOP ({self.quantity}){percent}{extension}"
        return f"TOP{extension}"


@dataclass
class Values:
    """``VALUES (row), (row), ...``"""

    rows: list = field(default_factory=list)

    def __str__(self) -> str:
        return "VALUES " + ", ".join(f"({display_comma_separated(row)})" for row in self.rows)


@dataclass
class SelectInto:
    """``INTO [TEMPORARY] [UNLOGGED] [TABLE] <name>``"""

    name: Any
    temporary: bool = False
    unlogged: bool = False
    table: bool = False

    def __str__(self) -> str:
        temporary = " TEMPORARY" if self.temporary else ""
        unlogged = " UNLOGGED" if self.unlogged else ""
        table = " TABLE" if self.table else ""
        return f"INTO{temporary}{unlogged}{table} {self.name}"


# ---------------------------------------------------------------- select items


@dataclass
class UnnamedExpr:
    """A projected expression without an alias."""

    expr: Any

    def __str__(self) -> str:
        return str(self.expr)


@dataclass
class ExprWithAlias:
    """A projected expression followed by ``AS alias``."""

    expr: Any
    alias: Any

    def __str__(self) -> str:
        return f"{self.expr} AS {self.alias}"


@dataclass
class QualifiedWildcard:
    """``alias.*`` or ``schema.table.*``."""

    prefix: Any

    def __str__(self) -> str:
        return f"{self.prefix}.*"


@dataclass
class Wildcard:
    """An unqualified ``*``."""

    def __str__(self) -> str:
        return "*"


SelectItem = Union[UnnamedExpr, ExprWithAlias, QualifiedWildcard, Wildcard]


# ---------------------------------------------------------------- table factors


def _alias_suffix(alias) -> str:
    return f" AS {alias}" if alias is not None else ""


@dataclass
class Table:
    """A named table, optionally with table-function args and MSSQL hints."""

    name: Any
    alias: Optional[TableAlias] = None
    args: list = field(default_factory=list)
    with_hints: list = field(default_factory=list)

    def __str__(self) -> str:
        text = str(self.name)
        if self.args:
            text += f"({display_comma_separated(self.args)})"
        text += _alias_suffix(self.alias)
        if self.with_hints:
            text += f" WITH ({display_comma_separated(self.with_hints)})"
        return text


@dataclass
class Derived:
    """A parenthesised subquery, optionally LATERAL and aliased."""

    subquery: "Query"
    alias: Optional[TableAlias] = None
    lateral: bool = False

    def __str__(self) -> str:
        prefix = "LATERAL " if self.lateral else ""
        return f"{prefix}({self.subquery}){_alias_suffix(self.alias)}"


@dataclass
class TableFunction:
    """``TABLE(<expr>)[ AS <alias> ]``"""

    expr: Any
    alias: Optional[TableAlias] = None

    def __str__(self) -> str:
        return f"TABLE({self.expr}){_alias_suffix(self.alias)}"


@dataclass
class NestedJoin:
    """A parenthesised join expression."""

    table_with_joins: "TableWithJoins"

    def __str__(self) -> str:
        return f"({self.table_with_joins})"


TableFactor = Union[Table, Derived, TableFunction, NestedJoin]


@dataclass
class Join:
    """One joined relation with its operator and constraint."""

    relation: Any
    join_operator: JoinOperator = JoinOperator.INNER
    constraint: Any = field(default_factory=NoConstraint)

    def __post_init__(self) -> None:
        if not self.join_operator.takes_constraint and not isinstance(
            self.constraint, NoConstraint
        ):
            raise ValueError(f"{self.join_operator.value} takes no join constraint")

    def __str__(self) -> str:
        if not self.join_operator.takes_constraint:
            return f" {self.join_operator.value} {self.relation}"
        prefix = "NATURAL " if isinstance(self.constraint, Natural) else ""
        if isinstance(self.constraint, On):
            suffix = f" ON {self.constraint.expr}"
        elif isinstance(self.constraint, Using):
            suffix = f" USING({display_comma_separated(self.constraint.columns)})"
        else:
            suffix = ""
        return f" {prefix}{self.join_operator.value} {self.relation}{suffix}"


@dataclass
class TableWithJoins:
    """A relation followed by any number of joins."""

    relation: Any
    joins: list = field(default_factory=list)

    def __str__(self) -> str:
        return str(self.relation) + "".join(str(join) for join in self.joins)


# ---------------------------------------------------------------- select and query


@dataclass
class LateralView:
    """A Hive ``LATERAL VIEW`` with optional column aliases."""

    lateral_view: Any
    lateral_view_name: Any
    lateral_col_alias: list = field(default_factory=list)
    outer: bool = False

    def __str__(self) -> str:
        outer = " OUTER" if self.outer else ""
        text = f" LATERAL VIEW{outer} {self.lateral_view} {self.lateral_view_name}"
        if self.lateral_col_alias:
            text += f" AS {display_comma_separated(self.lateral_col_alias)}"
        return text


@dataclass
class Select:
    """A restricted SELECT without CTEs or ORDER BY."""

    projection: list = field(default_factory=list)
    distinct: bool = False
    top: Optional[Top] = None
    into: Optional[SelectInto] = None
    from_: list = field(default_factory=list)
    lateral_views: list = field(default_factory=list)
    selection: Any = None
    group_by: list = field(default_factory=list)
    cluster_by: list = field(default_factory=list)
    distribute_by: list = field(default_factory=list)
    sort_by: list = field(default_factory=list)
    having: Any = None
    qualify: Any = None

    def __str__(self) -> str:
        parts = ["SELECT DISTINCT" if self.distinct else "SELECT"]
        if self.top is not None:
            parts.append(f" {self.top}")
        parts.append(f" {display_comma_separated(self.projection)}")
        if self.into is not None:
            parts.append(f" {self.into}")
        if self.from_:
            parts.append(f" FROM {display_comma_separated(self.from_)}")
        parts.extend(str(view) for view in self.lateral_views)
        if self.selection is not None:
            parts.append(f" WHERE {self.selection}")
        for keyword, exprs in (
            ("GROUP BY", self.group_by),
            ("CLUSTER BY", self.cluster_by),
            ("DISTRIBUTE BY", self.distribute_by),
            ("SORT BY", self.sort_by),
        ):
            if exprs:
                parts.append(f" {keyword} {display_comma_separated(exprs)}")
        if self.having is not None:
            parts.append(f" HAVING {self.having}")
        if self.qualify is not None:
            parts.append(f" QUALIFY {self.qualify}")
        return "".join(parts)


@dataclass
class NestedQuery:
    """A parenthesised query used as a set-expression operand."""

    query: "Query"

    def __str__(self) -> str:
        return f"({self.query})"


@dataclass
class SetOperation:
    """``left UNION|EXCEPT|INTERSECT [ALL] right``"""

    op: SetOperator
    left: Any
    right: Any
    all: bool = False

    def __str__(self) -> str:
        all_text = " ALL" if self.all else ""
        return f"{self.left} {self.op}{all_text} {self.right}"


@dataclass
class InsertStatement:
    """An INSERT statement standing as a query body."""

    statement: Any

    def __str__(self) -> str:
        return str(self.statement)


SetExpr = Union[Select, NestedQuery, SetOperation, Values, InsertStatement]


@dataclass
class Cte:
    """``alias [(col1, ...)] AS ( query ) [FROM ident]``"""

    alias: TableAlias
    query: "Query"
    from_: Any = None

    def __str__(self) -> str:
        text = f"{self.alias} AS ({self.query})"
        if self.from_ is not None:
            text += f" FROM {self.from_}"
        return text


@dataclass
class With:
    """``WITH [RECURSIVE] cte, ...``"""

    cte_tables: list = field(default_factory=list)
    recursive: bool = False

    def __str__(self) -> str:
        recursive = "RECURSIVE " if self.recursive else ""
        return f"WITH {recursive}{display_comma_separated(self.cte_tables)}"


@dataclass
class Query:
    """A full query: optional WITH, a body, and ORDER BY/LIMIT/OFFSET/FETCH/lock."""

    body: Any
    with_: Optional[With] = None
    order_by: list = field(default_factory=list)
    limit: Any = None
    offset: Optional[Offset] = None
    fetch: Optional[Fetch] = None
    lock: Optional[LockType] = None

    def __str__(self) -> str:
        parts = []
        if self.with_ is not None:
            parts.append(f"{self.with_} ")
        parts.append(str(self.body))
        if self.order_by:
            parts.append(f" ORDER BY {display_comma_separated(self.order_by)}")
        if self.limit is not None:
            parts.append(f" LIMIT {self.limit}")
        for clause in (self.offset, self.fetch, self.lock):
            if clause is not None:
                parts.append(f" {clause}")
        return "".join(parts)