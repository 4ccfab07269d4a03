# cqlx

Build CQL statements together with the list of named parameters they expect,
and bind values to those names from objects or mappings.

## Installing

```
pip install cqlx
```

For running the test suite:

```
pip install "cqlx[test]"
pytest
```

## Query builders

The builders live in `cqlx.qb`. Each collects clauses through chained calls,
and `to_cql()` returns a `(statement, names)` pair. The names list has one
entry for every `?` placeholder, in order.

```python
from datetime import timedelta

from cqlx.qb.select import select, Order
from cqlx.qb.insert import insert
from cqlx.qb.update import update
from cqlx.qb.delete import delete
from cqlx.qb.batch import batch
from cqlx.qb.cmp import eq, gt, eq_named
from cqlx.qb.token import token

stmt, names = (
    select("cycling.cyclist_name")
    .columns("id", "firstname")
    .where(eq_named("id", "expr"), gt("stars"))
    .order_by("firstname", Order.ASC)
    .limit(10)
    .to_cql()
)
# "SELECT id,firstname FROM cycling.cyclist_name WHERE id=? AND stars>? ORDER BY firstname ASC LIMIT 10 "
# ["expr", "stars"]

stmt, names = (
    insert("cycling.cyclist_name")
    .columns("id", "user_uuid", "firstname")
    .ttl(timedelta(seconds=1))
    .to_cql()
)
# "INSERT INTO cycling.cyclist_name (id,user_uuid,firstname) VALUES (?,?,?) USING TTL 1 "

stmt, names = update("cycling.cyclist_name").add("total").where(eq("id")).to_cql()
# "UPDATE cycling.cyclist_name SET total=total+? WHERE id=? "

stmt, names = delete("cycling.cyclist_name").where(eq("id")).existing().to_cql()
# "DELETE FROM cycling.cyclist_name WHERE id=? IF EXISTS "

stmt, names = (
    batch()
    .add_with_prefix("a", insert("t").columns("id"))
    .add_with_prefix("b", insert("t").columns("id"))
    .to_cql()
)
# "BEGIN BATCH INSERT INTO t (id) VALUES (?) ; INSERT INTO t (id) VALUES (?) ; APPLY BATCH "
# ["a.id", "b.id"]

stmt, names = select("t").where(token("a", "b").gt()).to_cql()
# "SELECT * FROM t WHERE token(a,b)>token(?,?) "
# ["a", "b"]
```

Notes on the pieces:

- `cqlx.qb.cmp` has comparators in plain (`eq`), tuple (`eq_tuple`),
  custom-name (`eq_named`), tuple with custom name (`eq_tuple_named`),
  literal (`eq_lit`) and function (`eq_func`) forms, for `=`, `!=`, `<`,
  `<=`, `>`, `>=`, plus `in_`, `contains`, `contains_key` and `like`
  families. Tuple parameters produce names such as `id[0]`, `id[1]`.
- `cqlx.qb.values` holds the value kinds (`Param`, `TupleParam`, `Lit`,
  `Func`) and the function helpers `fn`, `now`, `min_timeuuid` and
  `max_timeuuid`, e.g. `eq_func("id", fn("someFunc", "a", "b"))` renders
  `id=someFunc(?,?)`.
- `cqlx.qb.token.TokenBuilder` compares against `token(?...)` (`gt()`,
  `lt_named("c", "d")`, ...) or against a single `?` (`gt_value()`, named
  `token` by default, or `gt_value_named(name)`).
- The `USING` options are taken as `datetime.timedelta` (TTL, TIMEOUT) and
  `datetime.datetime` (TIMESTAMP, in microseconds since the epoch; naive
  datetimes count as UTC). A timeout renders like `1m45s123ms`. `select`
  also supports `service_level(name)`, rendered as `SERVICE LEVEL 'name'`
  with single quotes doubled.
- `SelectBuilder.limit` and `limit_per_partition` raise `ValueError` for a
  negative count.

## Tables

`cqlx.table.Table` prepares the common CRUD statements from a `Metadata`
description:

```python
from cqlx.table import Metadata, Table

people = Table(Metadata(
    name="person",
    columns=["first_name", "last_name", "email"],
    part_key=["first_name"],
    sort_key=["last_name"],
))

people.get()            # ("SELECT * FROM person WHERE first_name=? AND last_name=? ", ["first_name", "last_name"])
people.select()         # ("SELECT * FROM person WHERE first_name=? ", ["first_name"])
people.insert()         # ("INSERT INTO person (first_name,last_name,email) VALUES (?,?,?) ", [...])
people.update("email")  # ("UPDATE person SET email=? WHERE first_name=? AND last_name=? ", [...])
people.delete()         # ("DELETE FROM person WHERE first_name=? AND last_name=? ", [...])
```

`get_builder`, `select_builder`, `insert_builder`, `update_builder` and
`delete_builder` return the corresponding builder so more clauses can be
added. `select_all()`, `name()`, `metadata()` and `primary_key_cmp()` are
also available.

## Named queries and binding

```python
from cqlx.queryx import compile_named_query, Queryx

stmt, names = compile_named_query(
    "INSERT INTO person (first_name, email) VALUES (:first_name, :email)"
)
# stmt  == "INSERT INTO person (first_name, email) VALUES (?, ?)"
# names == ["first_name", "email"]
```

Write `::` for a literal colon. A query without any `:`, or a `:` in the
middle of a parameter name, raises `NamedQueryError`. Bytes are accepted
and decoded as UTF-8.

A `Queryx` holds a statement, its names and the values bound to them:

```python
from dataclasses import dataclass

@dataclass
class Person:
    first_name: str
    email: str

q = Queryx(stmt, names).bind_struct(Person("Ann", "ann@example.com"))
q.values  # ["Ann", "ann@example.com"]
```

- `bind_struct(obj)` looks names up among the object's attributes, matched
  by their snake-case form (`snake_case("UserID") == "user_id"`). Dataclass
  fields may give another column name with `field(metadata={"db": "col"})`,
  or be left out with `"db": "-"`. Dotted names reach nested objects.
- `bind_struct_map(obj, mapping)` falls back to the mapping for names the
  object does not have; `bind_map(mapping)` uses only the mapping.
- If a name cannot be found, these methods record a `BindError` that `err()`
  returns; a successful bind clears it. `bind_struct_args` and
  `bind_map_args` return the value list directly and raise `BindError`.
- `bind(*values)` sets the values as given.
- `with_bind_transformer(fn)` runs every value through `fn(name, value)`
  before binding. `cqlx.transformer.unset_empty_transformer` replaces empty
  values (`None`, zero, empty strings and bytes, and dataclasses or tuples
  made only of such) with `UNSET`, the single instance of `Unset`, so that
  they do not produce tombstones.

## What this package does not do

It only produces statement text, parameter names and value lists. It does
not connect to a cluster, execute statements, page through results, scan
rows into objects or encode user-defined types; pass its output to a
database driver for that.