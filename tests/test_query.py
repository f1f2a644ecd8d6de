import pytest

from sqltree.query import (
    Cte,
    Derived,
    ExprWithAlias,
    Fetch,
    InsertStatement,
    Join,
    JoinOperator,
    LateralView,
    LockType,
    Natural,
    NestedJoin,
    NestedQuery,
    NoConstraint,
    Offset,
    OffsetRows,
    On,
    OrderByExpr,
    QualifiedWildcard,
    Query,
    Select,
    SelectInto,
    SetOperation,
    SetOperator,
    Table,
    TableAlias,
    TableFunction,
    TableWithJoins,
    Top,
    UnnamedExpr,
    Using,
    Values,
    Wildcard,
    With,
    display_comma_separated,
)
from sqltree.value import Number


def _from(name, **kwargs):
    return [TableWithJoins(Table(name, **kwargs))]


@pytest.mark.parametrize(
    "top, expected",
    [
        (Top(quantity=Number("5")), "SELECT TOP (5) * FROM foo"),
        (Top(quantity=Number("5"), percent=True), "SELECT TOP (5) PERCENT * FROM foo"),
        (Top(quantity=Number("5"), with_ties=True), "SELECT TOP (5) WITH TIES * FROM foo"),
        (
            Top(quantity=Number("10"), percent=True, with_ties=True),
            "SELECT TOP (10) PERCENT WITH TIES * FROM foo",
        ),
    ],
)
def test_select_top(top, expected):
    select = Select(top=top, projection=[Wildcard()], from_=_from("foo"))
    assert str(select) == expected


def test_select_top_with_plain_columns():
    select = Select(
        top=Top(quantity=Number("5")),
        projection=[UnnamedExpr("bar"), UnnamedExpr("baz")],
        from_=_from("foo"),
    )
    assert str(select) == "SELECT TOP (5) bar, baz FROM foo"


def test_top_without_quantity():
    text = str(Top(with_ties=True))
    assert text.startswith("TOP")
    assert text.endswith(" WITH TIES")
    assert "(" not in text


@pytest.mark.parametrize(
    "operator, expected",
    [
        (
            JoinOperator.CROSS_APPLY,
            "SELECT * FROM sys.dm_exec_query_stats AS deqs "
            "CROSS APPLY sys.dm_exec_query_plan(deqs.plan_handle)",
        ),
        (
            JoinOperator.OUTER_APPLY,
            "SELECT * FROM sys.dm_exec_query_stats AS deqs "
            "OUTER APPLY sys.dm_exec_query_plan(deqs.plan_handle)",
        ),
    ],
)
def test_apply_joins(operator, expected):
    table = TableWithJoins(
        Table("sys.dm_exec_query_stats", alias=TableAlias("deqs")),
        joins=[Join(Table("sys.dm_exec_query_plan", args=["deqs.plan_handle"]), operator)],
    )
    select = Select(projection=[Wildcard()], from_=[table])
    assert str(select) == expected


def test_outer_apply_derived_subquery():
    subquery = Query(Select(projection=[UnnamedExpr("foo.x + 1")]))
    table = TableWithJoins(
        Table("foo"),
        joins=[Join(Derived(subquery, alias=TableAlias("bar")), JoinOperator.OUTER_APPLY)],
    )
    select = Select(projection=[Wildcard()], from_=[table])
    assert str(select) == "SELECT * FROM foo OUTER APPLY (SELECT foo.x + 1) AS bar"


def test_delimited_aliases():
    select = Select(
        projection=[ExprWithAlias("[a.b!]", "[FROM]")],
        from_=_from("foo", alias=TableAlias("[WHERE]")),
    )
    assert str(select) == "SELECT [a.b!] AS [FROM] FROM foo AS [WHERE]"


def test_derived_with_group_by():
    subquery = Query(
        Select(
            projection=[UnnamedExpr("name"), UnnamedExpr("id")],
            from_=_from("t1"),
            group_by=["id"],
        )
    )
    derived = Derived(subquery, alias=TableAlias("t2"))
    assert str(derived) == "(SELECT name, id FROM t1 GROUP BY id) AS t2"


def test_derived_lateral_prefix():
    derived = Derived(Query(Select(projection=[Wildcard()])), lateral=True)
    assert str(derived).startswith("LATERAL (")


def test_select_where():
    select = Select(
        projection=[Wildcard()],
        from_=_from("customers"),
        selection="customers.id = a1",
    )
    assert str(Query(select)) == "SELECT * FROM customers WHERE customers.id = a1"


def test_composite_access_round_trip():
    select = Select(
        projection=[UnnamedExpr("(on_hand.item).name")],
        from_=_from("on_hand"),
        selection="(on_hand.item).price > 9",
    )
    assert str(select) == "SELECT (on_hand.item).name FROM on_hand WHERE (on_hand.item).price > 9"


def test_values_single_row():
    values = Values([["a1", "a2", "a3"]])
    assert str(values) == "VALUES (a1, a2, a3)"


def test_values_multiple_rows():
    text = str(Values([["1", "2"], ["3", "4"]]))
    assert text.startswith("VALUES (")
    assert text.count("(") == 2
    assert text.count("), (") == 1


def test_insert_statement_renders_statement():
    statement = "INSERT INTO customers VALUES (a1, a2, a3)"
    assert str(InsertStatement(statement)) == statement


def test_nested_query():
    nested = NestedQuery(Query(Select(projection=[UnnamedExpr("foo.x + 1")])))
    assert str(nested) == "(SELECT foo.x + 1)"


@pytest.mark.parametrize("op", list(SetOperator))
@pytest.mark.parametrize("all_", [True, False])
def test_set_operation_parts(op, all_):
    left = Select(projection=[Wildcard()], from_=_from("a"))
    right = Select(projection=[Wildcard()], from_=_from("b"))
    text = str(SetOperation(op, left, right, all=all_))
    separator = f" {op.value}{' ALL' if all_ else ''} "
    assert text.split(separator) == [str(left), str(right)]


def test_query_clause_order():
    query = Query(
        Select(projection=[Wildcard()], from_=_from("foo")),
        order_by=[OrderByExpr("a", asc=False)],
        limit=Number("10"),
        offset=Offset(Number("5"), OffsetRows.ROWS),
        fetch=Fetch(quantity=Number("3")),
        lock=LockType.UPDATE,
    )
    text = str(query)
    markers = [" ORDER BY ", " LIMIT ", " OFFSET ", " FETCH FIRST ", " FOR UPDATE"]
    positions = [text.index(marker) for marker in markers]
    assert positions == sorted(positions)
    assert text.endswith("FOR UPDATE")


def test_query_with_cte():
    inner = Query(Select(projection=[Wildcard()], from_=_from("t1")))
    cte = Cte(TableAlias("t2", ["a", "b"]), inner)
    query = Query(Select(projection=[Wildcard()], from_=_from("t2")), with_=With([cte], recursive=True))
    text = str(query)
    assert text.startswith("WITH RECURSIVE ")
    assert f"AS ({inner})" in text
    assert text.endswith(str(query.body))


def test_cte_from_suffix():
    cte = Cte(TableAlias("x"), Query(Select(projection=[Wildcard()])), from_="src")
    assert str(cte).endswith(" FROM src")


def test_table_alias_columns():
    alias = TableAlias("t", ["bar", "baz"])
    assert str(alias).endswith("(bar, baz)")
    assert str(TableAlias("t")) == "t"


@pytest.mark.parametrize(
    "asc, nulls_first, suffix",
    [(True, None, " ASC"), (False, None, " DESC"), (None, True, " NULLS FIRST"), (None, False, " NULLS LAST")],
)
def test_order_by_expr(asc, nulls_first, suffix):
    assert str(OrderByExpr("a", asc=asc, nulls_first=nulls_first)) == "a" + suffix


def test_order_by_expr_plain():
    assert str(OrderByExpr("a")) == "a"


def test_offset_rows():
    assert str(OffsetRows.NONE) == ""
    assert str(Offset(Number("5"), OffsetRows.ROW)).endswith(" ROW")
    assert str(Offset(Number("5"))).endswith("5")


def test_fetch_variants():
    assert str(Fetch()) == "FETCH FIRST ROWS ONLY"
    with_percent = str(Fetch(quantity=Number("10"), percent=True, with_ties=True))
    assert " PERCENT" in with_percent
    assert with_percent.endswith("WITH TIES")


def test_lock_types():
    share = Query(Select(projection=[Wildcard()]), lock=LockType.SHARE)
    update = Query(Select(projection=[Wildcard()]), lock=LockType.UPDATE)
    assert str(share) == "SELECT * FOR SHARE"
    assert str(update) == "SELECT * FOR UPDATE"


def test_select_into():
    text = str(SelectInto("t", temporary=True, table=True))
    assert text.startswith("INTO")
    assert " TEMPORARY" in text and " TABLE" in text
    assert " UNLOGGED" not in text
    assert text.endswith(" t")


def test_lateral_view():
    view = LateralView("explode(arr)", "tbl", ["c1", "c2"], outer=True)
    text = str(view)
    assert text.startswith(" LATERAL VIEW OUTER ")
    assert text.endswith(" AS " + display_comma_separated(["c1", "c2"]))
    assert " OUTER" not in str(LateralView("explode(arr)", "tbl"))


def test_select_hive_clauses_order():
    select = Select(
        projection=[Wildcard()],
        from_=_from("t"),
        lateral_views=[LateralView("explode(arr)", "v")],
        selection="a > 1",
        group_by=["a"],
        cluster_by=["b"],
        distribute_by=["c"],
        sort_by=["d"],
        having="count(*) > 1",
        qualify="rn = 1",
        distinct=True,
    )
    text = str(select)
    assert text.startswith("SELECT DISTINCT ")
    markers = [" FROM ", " LATERAL VIEW ", " WHERE ", " GROUP BY ", " CLUSTER BY ",
               " DISTRIBUTE BY ", " SORT BY ", " HAVING ", " QUALIFY "]
    positions = [text.index(marker) for marker in markers]
    assert positions == sorted(positions)


@pytest.mark.parametrize(
    "operator", [JoinOperator.INNER, JoinOperator.LEFT_OUTER, JoinOperator.RIGHT_OUTER, JoinOperator.FULL_OUTER]
)
def test_constrained_joins(operator):
    join = Join(Table("b"), operator, On("a.id = b.id"))
    text = str(join)
    assert text.startswith(f" {operator.value} b")
    assert text.endswith(" ON a.id = b.id")


def test_natural_and_using_joins():
    assert str(Join(Table("b"), JoinOperator.INNER, Natural())).startswith(" NATURAL JOIN")
    assert str(Join(Table("b"), JoinOperator.LEFT_OUTER, Using(["id"]))).endswith("USING(id)")
    assert str(Join(Table("b"))).endswith("JOIN b")


def test_cross_join_rejects_constraint():
    with pytest.raises(ValueError):
        Join(Table("b"), JoinOperator.CROSS_JOIN, On("x"))
    assert str(Join(Table("b"), JoinOperator.CROSS_JOIN, NoConstraint())).endswith("CROSS JOIN b")


def test_table_with_hints_and_function():
    table = Table("foo", alias=TableAlias("f"), with_hints=["NOLOCK"])
    assert str(table).endswith(" WITH (NOLOCK)")
    assert str(TableFunction("gen()", alias=TableAlias("g"))).startswith("TABLE(gen())")


def test_nested_join_wraps():
    inner = TableWithJoins(Table("foo"), [Join(Table("bar"), JoinOperator.CROSS_JOIN)])
    text = str(NestedJoin(inner))
    assert text == f"({inner})"
    assert text.startswith("(foo")


def test_qualified_wildcard():
    assert str(QualifiedWildcard("schema.table")).endswith(".*")
    assert str(Wildcard()) == "*"


def test_display_comma_separated():
    assert display_comma_separated(["bar", "baz"]) == "bar, baz"
    assert display_comma_separated([]) == ""


def test_structural_equality():
    assert Select(projection=[Wildcard()]) == Select(projection=[Wildcard()])
    assert Query(Select()) != Query(Select(distinct=True))