"""Import a game client cache directory into the blob database."""

from __future__ import annotations

import argparse
import hashlib
import os
import sqlite3
import sys
from collections.abc import Sequence
from contextlib import closing
from typing import Protocol

__all__ = [
    "HashMismatchError",
    "get_entry_cdnid",
    "import_cache_dir",
    "insert_blob",
    "main",
]

_CDNID_LENGTH = 18


class HashMismatchError(Exception):
    """A stored blob has the same CDN id but different content."""

    def __init__(self) -> None:
        super().__init__("hashes do not match")


class _Entry(Protocol):
    name: str

    def is_dir(self) -> bool: ...


def _extension(name: str) -> str:
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def get_entry_cdnid(entry: _Entry, everything: bool) -> str | None:
    """Return the CDN id for a cache entry, or ``None`` if it is skipped."""
    if entry.is_dir():
        print(f"skipping directory {entry.name} ")
        return None

    if entry.name == ".DS_Store":
        print(f"skipping file {entry.name} (you do not need this) ")
        return None

    if everything:
        return entry.name

    name = entry.name
    cdnid = name[: len(name) - len(_extension(name))]
    if len(cdnid) != _CDNID_LENGTH:
        print(f"skipping file {entry.name} (not an asset) ")
        return None
    return cdnid


def insert_blob(connection: sqlite3.Connection, cdnid: str, blob: bytes, blob_hash: str) -> int:
    """Insert a blob unless already present; return the number of rows added."""
    row = connection.execute(
        "select hash from asset_file where cdnid = ?;", (cdnid,)
    ).fetchone()
    db_hash = (row[0] or "") if row is not None else ""

    if db_hash == blob_hash:
        return 0
    if db_hash:
        raise HashMismatchError()

    cursor = connection.execute(
        "insert into asset_file (cdnid, blob, hash) values (?, ?, ?);",
        (cdnid, blob, blob_hash),
    )
    return cursor.rowcount


def import_cache_dir(cache_dir: str | os.PathLike[str], blob_db: str | os.PathLike[str],
                     everything: bool = False) -> int:
    """Import all asset files from ``cache_dir``; return how many were new."""
    with closing(sqlite3.connect(blob_db)) as connection:
        with os.scandir(cache_dir) as it:
            entries = sorted(it, key=lambda e: e.name)

        inserted = 0
        try:
            for entry in entries:
                cdnid = get_entry_cdnid(entry, everything)
                if cdnid is None:
                    continue
                with open(os.path.join(cache_dir, entry.name), "rb") as handle:
                    blob = handle.read()
                blob_hash = hashlib.sha1(blob).hexdigest()
                try:
                    inserted += insert_blob(connection, cdnid, blob, blob_hash)
                except (sqlite3.Error, HashMismatchError) as exc:
                    raise RuntimeError(f"cdnid: {cdnid}, err: {exc}") from exc
            connection.commit()
        except BaseException:
            connection.rollback()
            raise

    print("Done:")
    print(f"  total files: {len(entries)} ")
    print(f"  new files: {inserted} ")
    print(f"  ignored files: {len(entries) - inserted} ")
    return inserted


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; return the exit status."""
    parser = argparse.ArgumentParser(prog="cache-importer")
    parser.add_argument("-cache-dir", "--cache-dir", dest="cache_dir", default="",
                        help="Path to the directory containing the game client cache.")
    parser.add_argument("-db", "--db", dest="db", default="",
                        help="Path to the target blob.db database.")
    parser.add_argument("-everything", "--everything", dest="everything", action="store_true",
                        help="Do not skip any files. Optional, default: false.")
    args = parser.parse_args(argv)

    if not args.cache_dir or not args.db:
        parser.print_help()
        return 0

    try:
        import_cache_dir(args.cache_dir, args.db, args.everything)
    except (OSError, sqlite3.Error, RuntimeError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())