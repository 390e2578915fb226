import sqlite3

import pytest

from amazingcore.cache_analyzer import analyze_blob_db, main


@pytest.fixture
def blob_db(tmp_path):
    path = tmp_path / "blob.db"
    with sqlite3.connect(path) as conn:
        conn.execute(
            "create table asset_file (id integer primary key, cdnid text, blob blob, hash text);"
        )
        conn.execute("insert into asset_file (id, cdnid, blob) values (2, 'second', x'01');")
        conn.execute("insert into asset_file (id, cdnid, blob) values (1, 'first', x'02');")
    return path


def test_analyze_orders_by_id(blob_db, capsys):
    assert analyze_blob_db(blob_db) == ["first", "second"]
    assert capsys.readouterr().out.splitlines() == ["first", "second"]


def test_analyze_missing_table(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        analyze_blob_db(tmp_path / "none.db")


def test_main_success(blob_db, capsys):
    assert main(["-db", str(blob_db)]) == 0
    assert "second" in capsys.readouterr().out


def test_main_without_db_prints_help(capsys):
    assert main([]) == 0
    assert "-db" in capsys.readouterr().out


def test_main_error(tmp_path, capsys):
    assert main(["-db", str(tmp_path / "none.db")]) == 1
    assert "asset_file" in capsys.readouterr().out