# amazingcore

Core pieces of a game server, as a Python library and three command-line
tools.

## What it provides

- **Wire data types** (`amazingcore.model`). Dataclasses with
  `serialize(writer)` and `deserialize(reader)` methods:
  - `amazingcore.model.base`: `OID`, `Position`, `Dimensions`,
    `ObjectPosition`, `InventoryPosition`, `Qth`, `RaceMode`, `SiteInfo`,
    `Asset`, `AssetContainer`, `AssetPackage`, `SiteFrame`, `Announcement`,
    `Tier`, and the `ProtocolWriter` / `ProtocolReader` pair they are written
    to and read from.
  - `amazingcore.model.villages`: `Village`, `VillageItem`, `VillagePlot`,
    `VillageRolePlayer`.
  - `amazingcore.model.rules`: `RuleProperty`, `RuleContainer`, `Building`,
    `Zone`, `ZoneInstance`, `ItemCategory`, `Item`.
  - `amazingcore.model.inventory`: `PlayerItem`, `NPC`.
  - `amazingcore.model.mazes`: `PlayerMaze`, `PlayerMazePiece`, `PlayerHome`.

  `ProtocolWriter` records values as a list of `(kind, value)` tokens in
  `writer.tokens`; `ProtocolReader` reads them back in order and raises
  `ValueError` when a token of the wrong kind turns up, `EOFError` when the
  stream runs out. Integers are range-checked against their width
  (`OverflowError`), dates are stored in UTC, and unset dates default to
  `ZERO_TIME` (year 1, UTC).

- **Error helpers** (`amazingcore.errors`): `GSFError` (carries
  `result_code` and `app_code`), `HTTPStatusError` (carries `status`),
  `OperationError` (prefixes the message with an operation name),
  `PanicError` (carries the stack trace), and the functions
  `with_gsf_error`, `with_http_status`, `http_status` (searches the cause
  chain, defaulting to 500), `if_err` and `catch_panic`.

- **Application logger** (`amazingcore.log`): `set_logger` and `get_logger`
  hold one process-wide `logging.Logger`.

- **SQLite storage** (`amazingcore.db`): `SQLiteStore` opens a database with
  WAL journaling, foreign keys on and a 10 second busy timeout, exposes the
  connection as `store.db`, and tells unique, trigger and foreign-key
  constraint failures apart (`is_err_constraint_unique` and friends).
  `migrate_base` runs a schema script on a database that has no tables yet
  and returns whether it did. `GridRequest` carries paging (`limit`,
  `offset`), search terms and sort order for list queries.

- **Services**:
  - `amazingcore.blobs.BlobService` stores asset files in the
    `blob.asset_file` table (so a database must be attached under the name
    `blob`): `fetch_file_blob`, `fetch_files_list` (returns `FileInfo`
    records with a human-readable size and a download URL built from the
    asset delivery URL, plus the total count), `save_files` (all in one
    transaction, `BlobExistsError` on a duplicate name) and `delete_files`.
    A missing file raises `BlobNotFoundError`.
  - `amazingcore.randomnames.RandomNameService` manages the `random_name`
    table: `get_n_strings_by_type`, `get_by_id`, `insert`, `update_by_id`,
    `get_list`, `delete`, raising `NameNotFoundError` and `NameExistsError`.
  - `amazingcore.auth.AuthService` checks an `AdminLoginForm` against the
    configured credentials in constant time and records the user in any
    mutable mapping used as a session.

## Installation

```
pip install amazingcore
```

For running the tests:

```
pip install "amazingcore[test]"
pytest
```

## Examples

Round-tripping a data type:

```python
from amazingcore.model.base import OID, ProtocolReader, ProtocolWriter

writer = ProtocolWriter()
writer.write_object(OID(class_=1, type=2, server=3, number=42))

reader = ProtocolReader(writer.tokens)
assert reader.read_object(OID) == OID(1, 2, 3, 42)
```

Tagging an error with an HTTP status:

```python
from amazingcore.errors import http_status, with_http_status

err = with_http_status(ValueError("bad request body"), 400)
assert http_status(err) == 400
assert http_status(RuntimeError("boom")) == 500
```

## Command-line tools

Each prints its options when started without the required ones, or with
`--help`.

- `amazingcore-cache-importer` reads a game client cache directory and stores
  its asset files in a blob database (table `asset_file`), keyed by CDN id,
  with a SHA-1 hash. Without `--everything`, directories, `.DS_Store` and
  files whose name without extension is not 18 characters long are skipped.
  Files already present with the same hash are not added again; a different
  hash for an existing CDN id is an error and nothing is committed.

  ```
  amazingcore-cache-importer --help
  ```

- `amazingcore-cache-analyzer` prints the CDN ids stored in a blob database,
  in insertion order.

  ```
  amazingcore-cache-analyzer --help
  ```

- `amazingcore-depot-downloader` runs the external `depotdownloader` program
  once for every known depot manifest of the game, each into its own
  `<app>/<depot>/<manifest>` directory, and stops at the first failure. It
  needs a Steam user name and password.

  ```
  amazingcore-depot-downloader --help
  ```

## What it does not do

- There is no game server here: no network listener, no message routing and
  no HTTP endpoints. The services are plain classes to be called from one.
- `ProtocolWriter` and `ProtocolReader` work on an in-memory token list; the
  package has no binary encoding of the wire format.
- There are no enumerations of protocol result codes, application codes or
  message types, and no player, avatar or player-settings data types.
- Beyond `migrate_base`, there is no schema versioning or incremental
  migration.