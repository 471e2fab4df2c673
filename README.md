# cqlx

Build CQL statements together with the list of named parameters they need,
then bind values to those names from mappings or objects.

## Installation

    pip install cqlx

The package has no runtime dependencies.

## Query builders

Every builder in `cqlx.qb` has a `to_cql()` method that returns the statement
and the parameter names, in the order their `?` placeholders appear. Builder
methods return the builder, so calls can be chained. Statements end with a
trailing space.

```python
from cqlx.qb.select import select, Order
from cqlx.qb.cmp import eq, gt

stmt, names = (
    select("cycling.cyclist_name")
    .columns("id", "firstname")
    .where(eq("id"), gt("stars"))
    .order_by("firstname", Order.ASC)
    .limit(10)
    .to_cql()
)
# stmt  == "SELECT id,firstname FROM cycling.cyclist_name WHERE id=? AND stars>? ORDER BY firstname ASC LIMIT 10 "
# names == ["id", "stars"]
```

- `cqlx.qb.select` – `select(table)`, with `columns`, `distinct`, `where`,
  `group_by`, `order_by`, `limit`, `limit_per_partition` (and their `_named`
  forms), `allow_filtering`, `bypass_cache`, `json`, and the aggregates
  `count`, `count_all`, `min`, `max`, `avg`, `sum`. `as_(column, name)`
  produces a `column AS name` selector. A negative literal limit raises
  `ValueError`.
- `cqlx.qb.insert` – `insert(table)`, with `columns`, `named_column`,
  `lit_column`, `func_column`, `tuple_column`, `unique` (`IF NOT EXISTS`) and
  `json` (`INSERT INTO t JSON ?`).
- `cqlx.qb.update` – `update(table)`, with `set`, `set_named`, `set_lit`,
  `set_func`, `set_tuple`, `add*` (`col=col+?`), `remove*` (`col=col-?`),
  `where`, `if_` and `existing` (`IF EXISTS`).
- `cqlx.qb.delete` – `delete(table)`, with `columns`, `where`, `if_` and
  `existing`.
- `cqlx.qb.batch` – `batch()`, which collects other builders (`add`,
  `add_with_prefix`) or raw statements (`add_stmt`, `add_stmt_with_prefix`)
  into one `BEGIN ... BATCH ... APPLY BATCH` statement, optionally `unlogged`
  or `counter`. Prefixed names become `prefix.name`.
- `cqlx.qb.cmp` – comparators for WHERE and IF clauses: `eq`, `ne`, `lt`,
  `lt_or_eq`, `gt`, `gt_or_eq`, `in_`, `contains`, `contains_key`, `like`, with
  `_named`, `_tuple`, `_tuple_named`, `_lit` and `_func` variants. Tuple
  comparators name their parameters `name[0]`, `name[1]`, ...
- `cqlx.qb.values` – `fn(name, *params)`, `now()`, `min_timeuuid(name)` and
  `max_timeuuid(name)` for function calls.
- `cqlx.qb.token` – `token(*columns)` for paging by token, e.g.
  `token("a", "b").gt()` gives `token(a,b)>token(?,?)`.
- `cqlx.qb.using` – the USING clause behind the builders' `ttl`, `timestamp`
  and `timeout` methods (and their `_named` forms). TTLs take a `timedelta`,
  timestamps a `datetime` (naive values are read as UTC), timeouts a
  `timedelta` written like `1s` or `1.5ms`.

## Tables

`cqlx.table.Table` turns a `Metadata` description of a table into ready-made
CRUD statements:

```python
from cqlx.table import Metadata, Table

person = Table(Metadata(name="person", columns=["id", "name", "email"],
                        part_key=["id"], sort_key=[]))
stmt, names = person.get()      # "SELECT * FROM person WHERE id=? ", ["id"]
stmt, names = person.insert()   # "INSERT INTO person (id,name,email) VALUES (?,?,?) "
```

`get` and `delete` work by primary key, `select` by partition key, `update`
sets the given columns by primary key. `select_builder`, `insert_builder`,
`update_builder` and `delete_builder` return fresh builders to extend, and the
`*_query` methods pass the statement to a `Session`.

## Named queries and binding

`cqlx.queryx.compile_named_query` turns `:name` parameters into `?`
placeholders and returns the statement and names; write `::` for a literal
colon. It raises `QueryError` for a statement without parameters or a stray
`:` inside a name.

`Session(driver)` wraps any object that has an `execute(stmt, values)`
method. `Session.query(stmt, names)` returns a `Queryx`, whose `bind_map`,
`bind_struct` (attributes, dotted names follow nested attributes) and
`bind_struct_map` (attributes first, then a mapping) pick each value by name,
raising `BindError` when a name cannot be found. `bind(*values)` sets values
directly, and `exec()` passes the statement and values to the driver.
`with_bind_transformer` sets a function applied to each value before binding;
`unset_empty_transformer` replaces `None`, zeros and empty strings or bytes
with `UNSET_VALUE`.

## What this package does not do

It does not talk to a database itself: there is no connection handling, and
queries cannot fetch rows, scan results into objects, page through results or
run lightweight transactions. `Queryx.exec()` only hands the statement and its
values to the wrapped driver object.