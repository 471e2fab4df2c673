from dataclasses import dataclass

import pytest

from cqlx.queryx import (
    UNSET_VALUE,
    BindError,
    QueryError,
    Queryx,
    Session,
    compile_named_query,
    unset_empty_transformer,
)


@pytest.mark.parametrize(
    "query, expected, names",
    [
        (
            "INSERT INTO foo (a,b,c,d) VALUES (:name, :age, :first, :last)",
            "INSERT INTO foo (a,b,c,d) VALUES (?, ?, ?, ?)",
            ["name", "age", "first", "last"],
        ),
        (
            "SELECT * FROM a WHERE first_name=:name1 AND last_name=:name2",
            "SELECT * FROM a WHERE first_name=? AND last_name=?",
            ["name1", "name2"],
        ),
        (
            'SELECT "::foo" FROM a WHERE first_name=:name1 AND last_name=:name2',
            'SELECT ":foo" FROM a WHERE first_name=? AND last_name=?',
            ["name1", "name2"],
        ),
        (
            "SELECT 'a::b::c' || first_name, '::::ABC::_::' FROM person "
            "WHERE first_name=:first_name AND last_name=:last_name",
            "SELECT 'a:b:c' || first_name, '::ABC:_:' FROM person "
            "WHERE first_name=? AND last_name=?",
            ["first_name", "last_name"],
        ),
    ],
)
def test_compile_query(query, expected, names):
    assert compile_named_query(query) == (expected, names)
    assert compile_named_query(query.encode()) == (expected, names)


def test_compile_query_without_names():
    with pytest.raises(QueryError, match="expected a named query"):
        compile_named_query("SELECT * FROM a")


def test_compile_query_colon_inside_name():
    with pytest.raises(QueryError, match="unexpected"):
        compile_named_query("SELECT * FROM a WHERE x=:ab:c")


@dataclass
class Person:
    name: str
    age: int
    first: str
    last: str


PERSON = Person(name="name", age=30, first="first", last="last")


def _age_42(name, val):
    return 42 if name == "age" else val


def test_bind_struct_simple():
    q = Queryx("", ["name", "age", "first", "last"]).bind_struct(PERSON)
    assert q.values == ["name", 30, "first", "last"]


def test_bind_struct_with_transformer():
    q = Queryx("", ["name", "age", "first", "last"]).with_bind_transformer(_age_42)
    assert q.bind_struct(PERSON).values == ["name", 42, "first", "last"]


def test_bind_struct_error():
    q = Queryx("", ["name", "age", "first", "not_found"])
    with pytest.raises(BindError, match="not_found"):
        q.bind_struct(PERSON)


def test_bind_struct_fallback():
    q = Queryx("", ["name", "age", "first", "not_found"])
    q.bind_struct_map(PERSON, {"not_found": "last"})
    assert q.values == ["name", 30, "first", "last"]


def test_bind_struct_fallback_with_transformer():
    def tr(name, val):
        return "map_found" if name == "not_found" else val

    q = Queryx("", ["name", "age", "first", "not_found"]).with_bind_transformer(tr)
    q.bind_struct_map(PERSON, {"not_found": "last"})
    assert q.values == ["name", 30, "first", "map_found"]


def test_bind_struct_fallback_error():
    q = Queryx("", ["name", "age", "first", "not_found", "really_not_found"])
    with pytest.raises(BindError, match="really_not_found"):
        q.bind_struct_map(PERSON, {"not_found": "last"})


def test_bind_struct_dotted_name():
    @dataclass
    class Outer:
        person: Person

    q = Queryx("", ["person.first", "person.age"]).bind_struct(Outer(PERSON))
    assert q.values == ["first", 30]


def test_bind_struct_with_mapper():
    q = Queryx("", ["NAME"], mapper=str.lower).bind_struct(PERSON)
    assert q.values == ["name"]


MAP = {"name": "name", "age": 30, "first": "first", "last": "last"}


def test_bind_map_simple():
    q = Queryx("", ["name", "age", "first", "last"]).bind_map(MAP)
    assert q.values == ["name", 30, "first", "last"]


def test_bind_map_with_transformer():
    q = Queryx("", ["name", "age", "first", "last"]).with_bind_transformer(_age_42)
    assert q.bind_map(MAP).values == ["name", 42, "first", "last"]


def test_bind_map_error():
    with pytest.raises(BindError, match="not_found"):
        Queryx("", ["name", "first", "not_found"]).bind_map(MAP)


def test_bind_replaces_values():
    q = Queryx("", ["a"]).bind(1, 2)
    assert q.bind(3).values == [3]


@pytest.mark.parametrize("empty", [None, "", 0, 0.0, False, b""])
def test_unset_empty_transformer_unsets(empty):
    assert unset_empty_transformer("x", empty) is UNSET_VALUE


@pytest.mark.parametrize("value", ["a", 1, True, [], [1]])
def test_unset_empty_transformer_keeps(value):
    assert unset_empty_transformer("x", value) == value


def test_unset_empty_transformer_on_bind():
    q = Queryx("", ["name", "age"]).with_bind_transformer(unset_empty_transformer)
    assert q.bind_map({"name": "", "age": 3}).values == [UNSET_VALUE, 3]


class FakeSession:
    def __init__(self):
        self.calls = []

    def execute(self, stmt, values):
        self.calls.append((stmt, values))


def test_session_query_exec():
    driver = FakeSession()
    session = Session(driver)
    q = session.query("INSERT INTO t (a,b) VALUES (?,?) ", ["a", "b"])
    assert q.names == ["a", "b"]
    q.bind_map({"a": 1, "b": 2}).exec()
    assert driver.calls == [("INSERT INTO t (a,b) VALUES (?,?) ", [1, 2])]


def test_session_exec_stmt():
    driver = FakeSession()
    Session(driver).exec_stmt("TRUNCATE t")
    assert driver.calls == [("TRUNCATE t", [])]


def test_exec_without_session():
    with pytest.raises(QueryError, match="session"):
        Queryx("SELECT * FROM t ").exec()


def test_session_uses_its_mapper():
    session = Session(FakeSession(), mapper=str.lower)
    q = session.query("", ["AGE"]).bind_struct(PERSON)
    assert q.values == [30]