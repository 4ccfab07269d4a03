from datetime import datetime, timedelta, timezone

import pytest

from cqlx.qb.insert import insert
from cqlx.qb.values import now

T = "cycling.cyclist_name"
TS = datetime(2005, 5, 5, tzinfo=timezone.utc)
BASE = ["id", "user_uuid", "firstname"]


def base(b):
    return b.columns("id", "user_uuid", "firstname")


CASES = [
    (base, "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) ", BASE),
    (lambda b: base(b).json(), "INSERT INTO cycling.cyclist_name JSON ?", []),
    (
        lambda b: base(b).into("Foobar"),
        "INSERT INTO Foobar (id,user_uuid,firstname) VALUES (?,?,?) ",
        BASE,
    ),
    (
        lambda b: base(b).columns("stars"),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname,stars) VALUES (?,?,?,?) ",
        BASE + ["stars"],
    ),
    (
        lambda b: base(b).named_column("stars", "stars_name"),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname,stars) VALUES (?,?,?,?) ",
        BASE + ["stars_name"],
    ),
    (
        lambda b: base(b).lit_column("stars", "stars_lit"),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname,stars) VALUES (?,?,?,stars_lit) ",
        BASE,
    ),
    (
        lambda b: base(b).ttl(timedelta(seconds=1)),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) USING TTL 1 ",
        BASE,
    ),
    (
        lambda b: base(b).ttl_named("ttl"),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) USING TTL ? ",
        BASE + ["ttl"],
    ),
    (
        lambda b: base(b).timestamp(TS),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
        "USING TIMESTAMP 1115251200000000 ",
        BASE,
    ),
    (
        lambda b: base(b).timestamp_named("ts"),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
        "USING TIMESTAMP ? ",
        BASE + ["ts"],
    ),
    (
        lambda b: base(b).timeout(timedelta(seconds=1)),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
        "USING TIMEOUT 1s ",
        BASE,
    ),
    (
        lambda b: base(b).timeout_named("to"),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
        "USING TIMEOUT ? ",
        BASE + ["to"],
    ),
    (
        lambda b: b.tuple_column("id", 2),
        "INSERT INTO cycling.cyclist_name (id) VALUES ((?,?)) ",
        ["id[0]", "id[1]"],
    ),
    (
        lambda b: b.tuple_column("id", 2).columns("user_uuid"),
        "INSERT INTO cycling.cyclist_name (id,user_uuid) VALUES ((?,?),?) ",
        ["id[0]", "id[1]", "user_uuid"],
    ),
    (
        lambda b: base(b).unique(),
        "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) "
        "IF NOT EXISTS ",
        BASE,
    ),
    (
        lambda b: b.func_column("id", now()),
        "INSERT INTO cycling.cyclist_name (id) VALUES (now()) ",
        [],
    ),
    (
        lambda b: b.func_column("id", now()).columns("user_uuid"),
        "INSERT INTO cycling.cyclist_name (id,user_uuid) VALUES (now(),?) ",
        ["user_uuid"],
    ),
]


@pytest.mark.parametrize("make, stmt, names", CASES)
def test_insert_builder(make, stmt, names):
    builder = make(insert(T))
    assert builder.to_cql() == (stmt, names)


def test_unique_precedes_using():
    stmt, names = insert(T).columns("id").unique().ttl_named("ttl").to_cql()
    assert stmt == "INSERT INTO cycling.cyclist_name (id) VALUES (?) IF NOT EXISTS USING TTL ? "
    assert names == ["id", "ttl"]