"""List the assets stored in a blob database."""

from __future__ import annotations

import argparse
import os
import sqlite3
import sys
from collections.abc import Sequence
from contextlib import closing

__all__ = ["analyze_blob_db", "main"]


def _process_row(cdnid: str, blob: bytes) -> None:
    print(cdnid)


def analyze_blob_db(blob_db: str | os.PathLike[str]) -> list[str]:
    """Print every stored CDN id in insertion order and return them."""
    processed: list[str] = []
    with closing(sqlite3.connect(blob_db)) as connection:
        for cdnid, blob in connection.execute(
            "select cdnid, blob from asset_file order by id;"
        ):
            _process_row(cdnid, blob)
            processed.append(cdnid)
    return processed


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; return the exit status."""
    parser = argparse.ArgumentParser(prog="cache-analyzer")
    parser.add_argument("-db", "--db", dest="db", default="",
                        help="Path to the blob.db database.")
    args = parser.parse_args(argv)

    if not args.db:
        parser.print_help()
        return 0

    try:
        analyze_blob_db(args.db)
    except sqlite3.Error as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())