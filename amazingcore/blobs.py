"""Storage of asset files in the blob database."""

from __future__ import annotations

import hashlib
import math
import sqlite3
from collections.abc import Iterable
from dataclasses import dataclass
from typing import BinaryIO
from urllib.parse import quote

import humanize

from amazingcore.db import GridRequest, SQLiteStore
from amazingcore.log import get_logger

__all__ = ["BlobExistsError", "BlobNotFoundError", "BlobService", "FileInfo"]

_TABLE = "blob.asset_file"

_FILTER_FIELDS = {"cdnid": "cdnid", "hash": "hash"}
_SORT_FIELDS = {
    "id": "id",
    "cdnid": "cdnid",
    "url": "cdnid",
    "hash": "hash",
    "size": "length(blob)",
    "size_str": "length(blob)",
}


class BlobNotFoundError(LookupError):
    def __init__(self, cdnid: str = "") -> None:
        super().__init__("file not found")
        self.cdnid = cdnid


class BlobExistsError(Exception):
    def __init__(self, filename: str) -> None:
        super().__init__(f"file with the same name already exists: {filename}")
        self.filename = filename


@dataclass
class FileInfo:
    id: int = 0
    cdnid: str = ""
    hash: str = ""
    size: int = 0
    size_str: str = ""
    url: str = ""


def _format_size(size: int) -> str:
    """Human-readable size in SI units, one decimal below ten."""
    if size < 1000:
        return f"{size} B"
    exponent = min(int(math.floor(math.log(size, 1000))), 6)
    value = math.floor(size / 1000**exponent * 10 + 0.5) / 10
    return humanize.naturalsize(size, format="%.0f" if value >= 10 else "%.1f")


def _join_url(base: str, name: str) -> str:
    if not base:
        return quote(name)
    return f"{base.rstrip('/')}/{quote(name)}"


class BlobService:
    """Reads, lists, stores and deletes asset files."""

    def __init__(self, store: SQLiteStore, asset_delivery_url: str) -> None:
        self._store = store
        self._asset_delivery_url = asset_delivery_url

    def fetch_file_blob(self, cdnid: str) -> bytes:
        row = self._store.db.execute(
            f"select blob from {_TABLE} where cdnid = ?;", (cdnid,)
        ).fetchone()
        if row is None:
            raise BlobNotFoundError(cdnid)
        return bytes(row[0])

    def fetch_files_list(self, request: GridRequest) -> tuple[list[FileInfo], int]:
        """Return the requested page of files and the total number matching the search."""
        db = self._store.db
        where, params = request._where(_FILTER_FIELDS)
        (total,) = db.execute(f"select count(*) from {_TABLE}{where};", params).fetchone()

        tail, tail_params = request._tail(_SORT_FIELDS)
        rows = db.execute(
            f"select id, cdnid, hash, length(blob) as size from {_TABLE}{where}{tail};",
            [*params, *tail_params],
        )
        records = [
            FileInfo(
                id=row_id,
                cdnid=cdnid,
                hash=digest,
                size=size,
                size_str=_format_size(size),
                url=_join_url(self._asset_delivery_url, cdnid),
            )
            for row_id, cdnid, digest, size in rows
        ]
        return records, total

    def save_files(self, files: Iterable[tuple[str, bytes | BinaryIO]]) -> None:
        """Store ``(filename, content)`` pairs in one transaction; all or nothing."""
        files = list(files)
        logger = get_logger()
        if logger is not None:
            logger.debug("blob.save_files", extra={"files": [name for name, _ in files]})

        filename = ""
        try:
            with self._store.db:
                for filename, content in files:
                    data = bytes(content if isinstance(content, (bytes, bytearray, memoryview))
                                 else content.read())
                    self._store.db.execute(
                        f"insert into {_TABLE} (cdnid, blob, hash) values (?, ?, ?);",
                        (filename, data, hashlib.sha1(data).hexdigest()),
                    )
        except sqlite3.Error as exc:
            if self._store.is_err_constraint_unique(exc):
                raise BlobExistsError(filename) from exc
            raise

    def delete_files(self, ids: Iterable[int]) -> None:
        ids = list(ids)
        if not ids:
            return
        marks = ", ".join("?" for _ in ids)
        with self._store.db:
            self._store.db.execute(f"delete from {_TABLE} where id in ({marks});", ids)