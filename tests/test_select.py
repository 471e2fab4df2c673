from datetime import timedelta

import pytest

from cqlx.qb.cmp import eq, eq_named, eq_tuple, gt, gt_tuple
from cqlx.qb.select import Order, as_, select

T = "cycling.cyclist_name"
W = eq_named("id", "expr")
SECOND = timedelta(seconds=1)


class _RecordingSession:
    def __init__(self):
        self.calls = []

    def query(self, stmt, names):
        self.calls.append((stmt, names))
        return "query"


@pytest.mark.parametrize(
    "builder, stmt, names",
    [
        (select(T), "SELECT * FROM cycling.cyclist_name ", []),
        (
            select(T).columns("id", "user_uuid", "firstname"),
            "SELECT id,user_uuid,firstname FROM cycling.cyclist_name ",
            [],
        ),
        (
            select(T).columns("id", "user_uuid", as_("firstname", "name")),
            "SELECT id,user_uuid,firstname AS name FROM cycling.cyclist_name ",
            [],
        ),
        (
            select(T).columns("id", "user_uuid", "firstname").json(),
            "SELECT JSON id,user_uuid,firstname FROM cycling.cyclist_name ",
            [],
        ),
        (
            select(T).columns("id", "user_uuid", as_("firstname", "name")).json(),
            "SELECT JSON id,user_uuid,firstname AS name FROM cycling.cyclist_name ",
            [],
        ),
        (
            select(T).columns(as_("firstname", "name"), "id", as_("user_uuid", "user")),
            "SELECT firstname AS name,id,user_uuid AS user FROM cycling.cyclist_name ",
            [],
        ),
        (select(T).distinct("id"), "SELECT DISTINCT id FROM cycling.cyclist_name ", []),
        (select(T).from_("Foobar"), "SELECT * FROM Foobar ", []),
        (
            select(T).where(W, gt("firstname")),
            "SELECT * FROM cycling.cyclist_name WHERE id=? AND firstname>? ",
            ["expr", "firstname"],
        ),
        (
            select(T).where(eq_tuple("id", 2), gt("firstname")),
            "SELECT * FROM cycling.cyclist_name WHERE id=(?,?) AND firstname>? ",
            ["id[0]", "id[1]", "firstname"],
        ),
        (
            select(T).where(eq_tuple("id", 2), gt_tuple("firstname", 2)),
            "SELECT * FROM cycling.cyclist_name WHERE id=(?,?) AND firstname>(?,?) ",
            ["id[0]", "id[1]", "firstname[0]", "firstname[1]"],
        ),
        (
            select(T).where(W, gt("firstname")).timeout(SECOND),
            "SELECT * FROM cycling.cyclist_name USING TIMEOUT 1s WHERE id=? AND firstname>? ",
            ["expr", "firstname"],
        ),
        (
            select(T).where(W, gt("firstname")).timeout_named("to"),
            "SELECT * FROM cycling.cyclist_name USING TIMEOUT ? WHERE id=? AND firstname>? ",
            ["to", "expr", "firstname"],
        ),
        (
            select(T).columns("MAX(stars) as max_stars").group_by("id"),
            "SELECT id,MAX(stars) as max_stars FROM cycling.cyclist_name GROUP BY id ",
            [],
        ),
        (
            select(T).group_by("id"),
            "SELECT id FROM cycling.cyclist_name GROUP BY id ",
            [],
        ),
        (
            select(T).group_by("id", "user_uuid"),
            "SELECT id,user_uuid FROM cycling.cyclist_name GROUP BY id,user_uuid ",
            [],
        ),
        (
            select(T).where(W).order_by("firstname", Order.ASC),
            "SELECT * FROM cycling.cyclist_name WHERE id=? ORDER BY firstname ASC ",
            ["expr"],
        ),
        (
            select(T).where(W).order_by("firstname", Order.DESC),
            "SELECT * FROM cycling.cyclist_name WHERE id=? ORDER BY firstname DESC ",
            ["expr"],
        ),
        (
            select(T).where(W).order_by("firstname", Order.ASC).order_by("lastname", Order.DESC),
            "SELECT * FROM cycling.cyclist_name WHERE id=? ORDER BY firstname ASC,lastname DESC ",
            ["expr"],
        ),
        (
            select(T).where(W).limit(10),
            "SELECT * FROM cycling.cyclist_name WHERE id=? LIMIT 10 ",
            ["expr"],
        ),
        (
            select(T).where(W).limit_named("limit"),
            "SELECT * FROM cycling.cyclist_name WHERE id=? LIMIT ? ",
            ["expr", "limit"],
        ),
        (
            select(T).where(W).limit_per_partition(10),
            "SELECT * FROM cycling.cyclist_name WHERE id=? PER PARTITION LIMIT 10 ",
            ["expr"],
        ),
        (
            select(T).where(W).limit_per_partition_named("partition_limit"),
            "SELECT * FROM cycling.cyclist_name WHERE id=? PER PARTITION LIMIT ? ",
            ["expr", "partition_limit"],
        ),
        (
            select(T).where(W).limit_per_partition(2).limit(10),
            "SELECT * FROM cycling.cyclist_name WHERE id=? PER PARTITION LIMIT 2 LIMIT 10 ",
            ["expr"],
        ),
        (
            select(T).where(W).limit_per_partition_named("partition_limit").limit_named("limit"),
            "SELECT * FROM cycling.cyclist_name WHERE id=? PER PARTITION LIMIT ? LIMIT ? ",
            ["expr", "partition_limit", "limit"],
        ),
        (
            select(T).where(W).allow_filtering(),
            "SELECT * FROM cycling.cyclist_name WHERE id=? ALLOW FILTERING ",
            ["expr"],
        ),
        (
            select(T).where(W).allow_filtering().bypass_cache(),
            "SELECT * FROM cycling.cyclist_name WHERE id=? ALLOW FILTERING BYPASS CACHE ",
            ["expr"],
        ),
        (
            select(T).where(W).bypass_cache(),
            "SELECT * FROM cycling.cyclist_name WHERE id=? BYPASS CACHE ",
            ["expr"],
        ),
        (
            select(T).count_all().where(gt("stars")),
            "SELECT count(*) FROM cycling.cyclist_name WHERE stars>? ",
            ["stars"],
        ),
        (
            select(T).count("stars").group_by("id"),
            "SELECT id,count(stars) FROM cycling.cyclist_name GROUP BY id ",
            [],
        ),
        (select(T).min("stars"), "SELECT min(stars) FROM cycling.cyclist_name ", []),
        (select(T).sum("*"), "SELECT sum(*) FROM cycling.cyclist_name ", []),
        (select(T).avg("stars"), "SELECT avg(stars) FROM cycling.cyclist_name ", []),
        (select(T).max("stars"), "SELECT max(stars) FROM cycling.cyclist_name ", []),
    ],
)
def test_select_builder(builder, stmt, names):
    assert builder.to_cql() == (stmt, names)


def test_benchmark_statement():
    builder = (
        select(T)
        .columns("id", "user_uuid", "firstname", "surname", "stars")
        .where(eq("id"))
    )
    assert builder.to_cql() == (
        "SELECT id,user_uuid,firstname,surname,stars FROM cycling.cyclist_name WHERE id=? ",
        ["id"],
    )


def test_to_cql_is_repeatable():
    builder = select(T).where(W).limit(5)
    expected = ("SELECT * FROM cycling.cyclist_name WHERE id=? LIMIT 5 ", ["expr"])
    first = builder.to_cql()
    second = builder.to_cql()
    assert first == expected
    assert second == expected


def test_distinct_replaces_without_where():
    assert select(T).distinct("a").distinct("b").to_cql()[0] == (
        "SELECT DISTINCT b FROM cycling.cyclist_name "
    )


def test_distinct_appends_with_where():
    stmt, names = select(T).where(W).distinct("a").distinct("b").to_cql()
    assert stmt == "SELECT DISTINCT a,b FROM cycling.cyclist_name WHERE id=? "
    assert names == ["expr"]


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        select(T).limit(-1)


def test_query_passes_statement_to_session():
    session = _RecordingSession()
    result = select(T).where(W).query(session)
    assert result == "query"
    assert session.calls == [("SELECT * FROM cycling.cyclist_name WHERE id=? ", ["expr"])]


@pytest.mark.parametrize("order, text", [(Order.ASC, "ASC"), (Order.DESC, "DESC")])
def test_order_str(order, text):
    stmt, _ = select(T).order_by("c", order).to_cql()
    assert stmt == f"SELECT * FROM cycling.cyclist_name ORDER BY c {text} "
    assert str(order) == text