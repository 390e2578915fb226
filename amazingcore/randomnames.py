"""Random name parts used when registering players."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass

from amazingcore.db import GridRequest, SQLiteStore

__all__ = ["NameExistsError", "NameNotFoundError", "RandomName", "RandomNameService"]

_FIELDS = {"id": "id", "part_type": "part_type", "name": "name"}


class NameNotFoundError(LookupError):
    def __init__(self, detail: str = "") -> None:
        super().__init__("name not found" + (f": {detail}" if detail else ""))


class NameExistsError(Exception):
    def __init__(self, part_type: str, name: str) -> None:
        super().__init__(
            "name with the same type and name already exists: "
            f"type={part_type} name={name}"
        )
        self.part_type = part_type
        self.name = name


@dataclass
class RandomName:
    id: int = 0
    part_type: str = ""
    name: str = ""


class RandomNameService:
    """Manages the random name parts table."""

    def __init__(self, store: SQLiteStore) -> None:
        self._store = store

    def get_n_strings_by_type(self, name_part_type: str, amount: int) -> list[str]:
        """Return up to ``amount`` names of the given part type in random order."""
        rows = self._store.db.execute(
            "select name from random_name where part_type = ? order by random() limit ?;",
            (name_part_type, amount),
        )
        return [name for (name,) in rows]

    def get_by_id(self, id: int) -> RandomName:
        row = self._store.db.execute(
            "select id, part_type, name from random_name where id = ?;", (id,)
        ).fetchone()
        if row is None:
            raise NameNotFoundError()
        return RandomName(*row)

    def insert(self, name: RandomName) -> int:
        """Insert a name and return its new id."""
        try:
            with self._store.db:
                cursor = self._store.db.execute(
                    "insert into random_name (part_type, name) values (?, ?);",
                    (name.part_type, name.name),
                )
        except sqlite3.Error as exc:
            if self._store.is_err_constraint_unique(exc):
                raise NameExistsError(name.part_type, name.name) from exc
            raise
        return int(cursor.lastrowid)

    def update_by_id(self, id: int, name: RandomName) -> None:
        try:
            with self._store.db:
                cursor = self._store.db.execute(
                    "update random_name set part_type = ?, name = ? where id = ?;",
                    (name.part_type, name.name, id),
                )
        except sqlite3.Error as exc:
            if self._store.is_err_constraint_unique(exc):
                raise NameExistsError(name.part_type, name.name) from exc
            raise
        if cursor.rowcount == 0:
            raise NameNotFoundError(f"id={id}")

    def get_list(self, request: GridRequest) -> tuple[list[RandomName], int]:
        """Return the requested page of names and the total number matching the search."""
        db = self._store.db
        where, params = request._where({"part_type": "part_type", "name": "name"})
        (total,) = db.execute(f"select count(*) from random_name{where};", params).fetchone()
        tail, tail_params = request._tail(_FIELDS)
        rows = db.execute(
            f"select id, part_type, name from random_name{where}{tail};",
            [*params, *tail_params],
        )
        return [RandomName(*row) for row in rows], total

    def delete(self, ids: Iterable[int]) -> None:
        ids = list(ids)
        if not ids:
            return
        marks = ", ".join("?" for _ in ids)
        with self._store.db:
            self._store.db.execute(f"delete from random_name where id in ({marks});", ids)