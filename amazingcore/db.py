"""SQLite storage, base schema migration and grid query helpers."""

from __future__ import annotations

import logging
import os
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

__all__ = ["GridRequest", "SQLiteStore", "migrate_base"]

# SQLite extended result codes.
_SQLITE_CONSTRAINT_UNIQUE = 2067
_SQLITE_CONSTRAINT_TRIGGER = 1811
_SQLITE_CONSTRAINT_FOREIGNKEY = 787


def _extended_code(err: BaseException | None) -> int | None:
    """Find the SQLite extended result code anywhere in an exception chain."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        if isinstance(err, sqlite3.Error):
            code = getattr(err, "sqlite_errorcode", None)
            if code is not None:
                return code
        err = err.__cause__ or err.__context__
    return None


class SQLiteStore:
    """An SQLite database opened with WAL journaling, foreign keys and a busy timeout."""

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self.db = sqlite3.connect(file_path, timeout=10.0)
        self.db.execute("pragma journal_mode = wal;")
        self.db.execute("pragma foreign_keys = 1;")
        self.db.execute("pragma busy_timeout = 10000;")

    def __enter__(self) -> SQLiteStore:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def driver_name(self) -> str:
        return "sqlite3"

    def is_err_constraint_unique(self, err: BaseException | None) -> bool:
        return _extended_code(err) == _SQLITE_CONSTRAINT_UNIQUE

    def is_err_constraint_trigger(self, err: BaseException | None) -> bool:
        return _extended_code(err) == _SQLITE_CONSTRAINT_TRIGGER

    def is_err_constraint_foreign_key(self, err: BaseException | None) -> bool:
        return _extended_code(err) == _SQLITE_CONSTRAINT_FOREIGNKEY

    def close(self) -> None:
        self.db.close()


def migrate_base(
    logger: logging.Logger,
    connection: sqlite3.Connection,
    sql_file_path: str | os.PathLike[str],
) -> bool:
    """Apply the base schema script to an empty database; return whether it ran."""
    (initialized,) = connection.execute(
        "select exists (select 1 from sqlite_master "
        "where type='table' and name not like 'sqlite_%');"
    ).fetchone()
    if initialized:
        return False

    script = Path(sql_file_path).read_text(encoding="utf-8")
    logger.info(f"applying the base {sql_file_path} migration")
    connection.executescript(script)
    return True


def _condition(column: str, operator: str, value: Any) -> tuple[str, list[Any]]:
    match operator.lower():
        case "is" | "=":
            return f"{column} = ?", [value]
        case "begins":
            return f"{column} like ?", [f"{value}%"]
        case "contains":
            return f"{column} like ?", [f"%{value}%"]
        case "ends":
            return f"{column} like ?", [f"%{value}"]
        case "less":
            return f"{column} < ?", [value]
        case "more":
            return f"{column} > ?", [value]
        case "between":
            low, high = value
            return f"{column} between ? and ?", [low, high]
        case "in" | "not in" as op:
            values = list(value)
            marks = ", ".join("?" for _ in values)
            return f"{column} {op} ({marks})", values
        case _:
            raise ValueError(f"unsupported search operator: {operator!r}")


@dataclass
class GridRequest:
    """Paging, searching and sorting parameters of a data grid request.

    ``search`` holds dicts with ``field``, ``operator`` and ``value``;
    ``sort`` holds dicts with ``field`` and ``direction``.
    """

    limit: int = 0
    offset: int = 0
    search: list[dict[str, Any]] = field(default_factory=list)
    search_logic: str = "AND"
    sort: list[dict[str, str]] = field(default_factory=list)

    def _where(self, fields: dict[str, str]) -> tuple[str, list[Any]]:
        clauses: list[str] = []
        params: list[Any] = []
        for term in self.search:
            column = fields.get(term.get("field", ""))
            if column is None:
                continue
            clause, args = _condition(column, term.get("operator", "is"), term.get("value"))
            clauses.append(clause)
            params.extend(args)
        if not clauses:
            return "", []
        joiner = " or " if self.search_logic.upper() == "OR" else " and "
        return " where " + joiner.join(f"({c})" for c in clauses), params

    def _tail(self, fields: dict[str, str]) -> tuple[str, list[Any]]:
        parts: list[str] = []
        for entry in self.sort:
            column = fields.get(entry.get("field", ""))
            if column is None:
                continue
            direction = "desc" if entry.get("direction", "").lower() == "desc" else "asc"
            parts.append(f"{column} {direction}")
        sql = f" order by {', '.join(parts)}" if parts else ""
        params: list[Any] = []
        if self.limit > 0:
            sql += " limit ?"
            params.append(self.limit)
        elif self.offset > 0:
            sql += " limit -1"
        if self.offset > 0:
            sql += " offset ?"
            params.append(self.offset)
        return sql, params