from datetime import timedelta

import pytest

from cqlx.qb.cmp import eq_named, eq_tuple, gt, gt_tuple
from cqlx.qb.select import Order, as_, select

T = "cycling.cyclist_name"


def w():
    return eq_named("id", "expr")


CASES = [
    (lambda b: b, "SELECT * FROM cycling.cyclist_name ", []),
    (
        lambda b: b.columns("id", "user_uuid", "firstname"),
        "SELECT id,user_uuid,firstname FROM cycling.cyclist_name ",
        [],
    ),
    (
        lambda b: b.columns("id", "user_uuid", as_("firstname", "name")),
        "SELECT id,user_uuid,firstname AS name FROM cycling.cyclist_name ",
        [],
    ),
    (
        lambda b: b.columns("id", "user_uuid", "firstname").json(),
        "SELECT JSON id,user_uuid,firstname FROM cycling.cyclist_name ",
        [],
    ),
    (
        lambda b: b.columns("id", "user_uuid", as_("firstname", "name")).json(),
        "SELECT JSON id,user_uuid,firstname AS name FROM cycling.cyclist_name ",
        [],
    ),
    (
        lambda b: b.columns(as_("firstname", "name"), "id", as_("user_uuid", "user")),
        "SELECT firstname AS name,id,user_uuid AS user FROM cycling.cyclist_name ",
        [],
    ),
    (lambda b: b.distinct("id"), "SELECT DISTINCT id FROM cycling.cyclist_name ", []),
    (lambda b: b.from_("Foobar"), "SELECT * FROM Foobar ", []),
    (
        lambda b: b.where(w(), gt("firstname")),
        "SELECT * FROM cycling.cyclist_name WHERE id=? AND firstname>? ",
        ["expr", "firstname"],
    ),
    (
        lambda b: b.where(eq_tuple("id", 2), gt("firstname")),
        "SELECT * FROM cycling.cyclist_name WHERE id=(?,?) AND firstname>? ",
        ["id[0]", "id[1]", "firstname"],
    ),
    (
        lambda b: b.where(eq_tuple("id", 2), gt_tuple("firstname", 2)),
        "SELECT * FROM cycling.cyclist_name WHERE id=(?,?) AND firstname>(?,?) ",
        ["id[0]", "id[1]", "firstname[0]", "firstname[1]"],
    ),
    (
        lambda b: b.where(w(), gt("firstname")).timeout(timedelta(seconds=1)),
        "SELECT * FROM cycling.cyclist_name WHERE id=? AND firstname>? USING TIMEOUT 1s ",
        ["expr", "firstname"],
    ),
    (
        lambda b: b.where(w(), gt("firstname")).timeout_named("to"),
        "SELECT * FROM cycling.cyclist_name WHERE id=? AND firstname>? USING TIMEOUT ? ",
        ["expr", "firstname", "to"],
    ),
    (
        lambda b: b.where(w(), gt("firstname")).service_level("foo"),
        "SELECT * FROM cycling.cyclist_name WHERE id=? AND firstname>? USING SERVICE LEVEL 'foo' ",
        ["expr", "firstname"],
    ),
    (
        lambda b: b.where(w(), gt("firstname"))
        .service_level("foo's")
        .timeout(timedelta(seconds=10)),
        "SELECT * FROM cycling.cyclist_name WHERE id=? AND firstname>? "
        "USING TIMEOUT 10s AND SERVICE LEVEL 'foo''s' ",
        ["expr", "firstname"],
    ),
    (
        lambda b: b.columns("MAX(stars) as max_stars").group_by("id"),
        "SELECT id,MAX(stars) as max_stars FROM cycling.cyclist_name GROUP BY id ",
        [],
    ),
    (
        lambda b: b.group_by("id"),
        "SELECT id FROM cycling.cyclist_name GROUP BY id ",
        [],
    ),
    (
        lambda b: b.group_by("id", "user_uuid"),
        "SELECT id,user_uuid FROM cycling.cyclist_name GROUP BY id,user_uuid ",
        [],
    ),
    (
        lambda b: b.where(w()).order_by("firstname", Order.ASC),
        "SELECT * FROM cycling.cyclist_name WHERE id=? ORDER BY firstname ASC ",
        ["expr"],
    ),
    (
        lambda b: b.where(w()).order_by("firstname", Order.DESC),
        "SELECT * FROM cycling.cyclist_name WHERE id=? ORDER BY firstname DESC ",
        ["expr"],
    ),
    (
        lambda b: b.where(w())
        .order_by("firstname", Order.ASC)
        .order_by("lastname", Order.DESC),
        "SELECT * FROM cycling.cyclist_name WHERE id=? ORDER BY firstname ASC,lastname DESC ",
        ["expr"],
    ),
    (
        lambda b: b.where(w()).limit(10),
        "SELECT * FROM cycling.cyclist_name WHERE id=? LIMIT 10 ",
        ["expr"],
    ),
    (
        lambda b: b.where(w()).limit_named("limit"),
        "SELECT * FROM cycling.cyclist_name WHERE id=? LIMIT ? ",
        ["expr", "limit"],
    ),
    (
        lambda b: b.where(w()).limit_per_partition(10),
        "SELECT * FROM cycling.cyclist_name WHERE id=? PER PARTITION LIMIT 10 ",
        ["expr"],
    ),
    (
        lambda b: b.where(w()).limit_per_partition_named("partition_limit"),
        "SELECT * FROM cycling.cyclist_name WHERE id=? PER PARTITION LIMIT ? ",
        ["expr", "partition_limit"],
    ),
    (
        lambda b: b.where(w()).limit_per_partition(2).limit(10),
        "SELECT * FROM cycling.cyclist_name WHERE id=? PER PARTITION LIMIT 2 LIMIT 10 ",
        ["expr"],
    ),
    (
        lambda b: b.where(w())
        .limit_per_partition_named("partition_limit")
        .limit_named("limit"),
        "SELECT * FROM cycling.cyclist_name WHERE id=? PER PARTITION LIMIT ? LIMIT ? ",
        ["expr", "partition_limit", "limit"],
    ),
    (
        lambda b: b.where(w()).allow_filtering(),
        "SELECT * FROM cycling.cyclist_name WHERE id=? ALLOW FILTERING ",
        ["expr"],
    ),
    (
        lambda b: b.where(w()).allow_filtering().bypass_cache(),
        "SELECT * FROM cycling.cyclist_name WHERE id=? ALLOW FILTERING BYPASS CACHE ",
        ["expr"],
    ),
    (
        lambda b: b.where(w()).bypass_cache(),
        "SELECT * FROM cycling.cyclist_name WHERE id=? BYPASS CACHE ",
        ["expr"],
    ),
    (
        lambda b: b.count_all().where(gt("stars")),
        "SELECT count(*) FROM cycling.cyclist_name WHERE stars>? ",
        ["stars"],
    ),
    (
        lambda b: b.count("stars").group_by("id"),
        "SELECT id,count(stars) FROM cycling.cyclist_name GROUP BY id ",
        [],
    ),
    (lambda b: b.min("stars"), "SELECT min(stars) FROM cycling.cyclist_name ", []),
    (lambda b: b.sum("*"), "SELECT sum(*) FROM cycling.cyclist_name ", []),
    (lambda b: b.avg("stars"), "SELECT avg(stars) FROM cycling.cyclist_name ", []),
    (lambda b: b.max("stars"), "SELECT max(stars) FROM cycling.cyclist_name ", []),
]


@pytest.mark.parametrize("make, stmt, names", CASES)
def test_select_builder(make, stmt, names):
    builder = make(select(T))
    assert builder.to_cql() == (stmt, names)


def test_order_renders_in_order_by():
    stmt, names = select("t").order_by("a", Order.ASC).order_by("b", Order.DESC).to_cql()
    assert stmt == "SELECT * FROM t ORDER BY a ASC,b DESC "
    assert names == []
    assert str(Order.ASC) == "ASC"
    assert str(Order.DESC) == "DESC"


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        select(T).limit(-1)


def test_distinct_replaced_without_where():
    stmt, _ = select(T).distinct("a").distinct("b").to_cql()
    assert stmt == "SELECT DISTINCT b FROM cycling.cyclist_name "


def test_to_cql_is_repeatable():
    b = select(T).where(w()).timeout(timedelta(seconds=1))
    expected = ("SELECT * FROM cycling.cyclist_name WHERE id=? USING TIMEOUT 1s ", ["expr"])
    assert b.to_cql() == expected
    assert b.to_cql() == expected