import logging
import sqlite3

import pytest

from amazingcore.db import SQLiteStore, migrate_base


@pytest.fixture
def store():
    with SQLiteStore(":memory:") as s:
        yield s


def _capture(fn):
    try:
        fn()
    except sqlite3.Error as exc:
        return exc
    raise AssertionError("expected an sqlite3 error")


def test_unique_violation_is_recognised(store):
    store.db.execute("create table t (name text unique);")
    store.db.execute("insert into t values ('a');")
    err = _capture(lambda: store.db.execute("insert into t values ('a');"))
    assert store.is_err_constraint_unique(err) is True
    assert store.is_err_constraint_trigger(err) is False
    assert store.is_err_constraint_foreign_key(err) is False


def test_foreign_keys_are_enforced(store):
    store.db.executescript(
        "create table parent (id integer primary key);"
        "create table child (pid integer references parent(id));"
    )
    err = _capture(lambda: store.db.execute("insert into child values (42);"))
    assert store.is_err_constraint_foreign_key(err) is True
    assert store.is_err_constraint_unique(err) is False


def test_trigger_abort_is_recognised(store):
    store.db.executescript(
        "create table t (v integer);"
        "create trigger no_neg before insert on t when new.v < 0 "
        "begin select raise(abort, 'negative'); end;"
    )
    err = _capture(lambda: store.db.execute("insert into t values (-1);"))
    assert store.is_err_constraint_trigger(err) is True


def test_wrapped_error_is_found_through_cause(store):
    store.db.execute("create table t (name text unique);")
    store.db.execute("insert into t values ('a');")
    inner = _capture(lambda: store.db.execute("insert into t values ('a');"))
    try:
        raise RuntimeError("wrapped") from inner
    except RuntimeError as outer:
        assert store.is_err_constraint_unique(outer) is True


def test_non_sqlite_error_is_not_a_constraint(store):
    assert store.is_err_constraint_unique(ValueError("x")) is False
    assert store.is_err_constraint_unique(None) is False


def test_driver_name(store):
    assert store.driver_name() == "sqlite3"


def test_close_makes_connection_unusable():
    s = SQLiteStore(":memory:")
    s.close()
    with pytest.raises(sqlite3.ProgrammingError):
        s.db.execute("select 1;")


def test_migrate_base_runs_once(tmp_path):
    script = tmp_path / "base.sql"
    script.write_text("create table foo (id integer primary key);\n")
    logger = logging.getLogger("test_db")
    connection = sqlite3.connect(":memory:")
    try:
        assert migrate_base(logger, connection, script) is True
        tables = [r[0] for r in connection.execute(
            "select name from sqlite_master where type='table';")]
        assert tables == ["foo"]
        assert migrate_base(logger, connection, script) is False
    finally:
        connection.close()


def test_migrate_base_missing_file(tmp_path):
    connection = sqlite3.connect(":memory:")
    try:
        with pytest.raises(FileNotFoundError):
            migrate_base(logging.getLogger("test_db"), connection, tmp_path / "nope.sql")
    finally:
        connection.close()