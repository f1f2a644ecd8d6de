# sqltree

Building blocks for working with SQL in Python. The package has no dependencies outside the
standard library.

## Modules

- `sqltree.keywords` holds the SQL keyword table.
  - `Keyword` is a string-valued enum. Each member's value is its upper-case SQL spelling, for
    example `Keyword.END_EXEC` is `"END-EXEC"`. `Keyword.NoKeyword` marks a plain word.
  - `ALL_KEYWORDS` and `ALL_KEYWORDS_INDEX` list every keyword in sorted order.
  - `RESERVED_FOR_TABLE_ALIAS` and `RESERVED_FOR_COLUMN_ALIAS` are frozensets of the keywords
    that cannot be used as an alias in those positions.
  - `lookup_keyword(word)` maps a word, in any letter case, to its keyword, or to
    `Keyword.NoKeyword`.
- `sqltree.dialect` holds the identifier character rules of several SQL dialects.
  - Every `Dialect` answers `is_identifier_start(ch)`, `is_identifier_part(ch)`,
    `is_delimited_identifier_start(ch)` and `is_proper_identifier_inside_quotes(chars)`.
  - The dialects are `AnsiDialect`, `BigQueryDialect`, `ClickHouseDialect`, `GenericDialect`,
    `HiveDialect`, `MsSqlDialect`, `MySqlDialect`, `PostgreSqlDialect`, `RedshiftSqlDialect`,
    `SnowflakeDialect` and `SQLiteDialect`.
  - `dialect_of(dialect, *classes)` tells whether a dialect is exactly one of the given classes.
- `sqltree.value` holds literal values.
  - The value classes are `Number`, `SingleQuotedString`, `NationalStringLiteral`,
    `HexStringLiteral`, `DoubleQuotedString`, `Boolean`, `Interval`, `Null` and `Placeholder`.
  - It also has the `DateTimeField` and `TrimWhereField` enums, and
    `escape_single_quote_string(s)`.
  - Each value renders as SQL with `str()`.
  - An `Interval` led by `SECOND` with both precisions set raises `ValueError` when rendered if
    it also has a last field.
- `sqltree.query` holds query AST nodes that render back to SQL with `str()`.
  - Query and select nodes: `Query`, `Select`, `With`, `Cte`, `SetOperation`/`SetOperator`,
    `NestedQuery`, `InsertStatement` and `Values`.
  - Select items: `UnnamedExpr`, `ExprWithAlias`, `QualifiedWildcard` and `Wildcard`.
  - Tables: `TableWithJoins`, `Table`, `Derived`, `TableFunction`, `NestedJoin` and
    `TableAlias`.
  - Joins: `Join` with `JoinOperator` and the constraints `On`, `Using`, `Natural` and
    `NoConstraint`. Giving a constraint to a `CROSS JOIN` or an `APPLY` raises `ValueError`.
  - Clauses: `OrderByExpr`, `Offset`/`OffsetRows`, `Fetch`, `Top`, `LockType`, `SelectInto`
    and `LateralView`.
  - `display_comma_separated(items)` joins the `str()` of each item with `", "`.

## Installation

```
pip install .
```

## Example

```python
from sqltree.dialect import GenericDialect, PostgreSqlDialect, dialect_of
from sqltree.keywords import Keyword, lookup_keyword
from sqltree.query import (
    Join, JoinOperator, On, OrderByExpr, Query, Select, Table, TableWithJoins, UnnamedExpr,
)
from sqltree.value import DateTimeField, Interval, Number, SingleQuotedString

assert lookup_keyword("select") is Keyword.SELECT

dialect = GenericDialect()
assert dialect.is_identifier_start("@")
assert dialect_of(dialect, GenericDialect, PostgreSqlDialect)

print(SingleQuotedString("it's"))           # 'it''s'
print(Number("10", True))                   # 10L
print(Interval("1", DateTimeField.DAY))     # INTERVAL '1' DAY

select = Select(
    projection=[UnnamedExpr("a")],
    from_=[TableWithJoins(Table("t"), [Join(Table("u"), JoinOperator.LEFT_OUTER, On("t.id = u.id"))])],
)
query = Query(select, order_by=[OrderByExpr("a", asc=False)], limit=Number("10"))
print(query)  # SELECT a FROM t LEFT JOIN u ON t.id = u.id ORDER BY a DESC LIMIT 10
```

## What the package does not do

There is no tokenizer and no parser. SQL text cannot be read into these nodes. The trees are
built by hand and only rendered back to text.

There are no node classes for expressions, identifiers, object names or statements. Wherever a
query node takes one of these, it accepts any object and renders it with `str()`, as in the
example above.

## Running the tests

```
pip install .[test]
pytest
```