import hashlib
import io

import pytest

from amazingcore.blobs import BlobExistsError, BlobNotFoundError, BlobService
from amazingcore.db import GridRequest, SQLiteStore

BASE_URL = "https://cdn.example.com/assets"


@pytest.fixture
def store():
    s = SQLiteStore(":memory:")
    s.db.execute("attach database ':memory:' as blob;")
    s.db.execute(
        "create table blob.asset_file (id integer primary key, "
        "cdnid text not null unique, blob blob not null, hash text not null);"
    )
    yield s
    s.close()


@pytest.fixture
def service(store):
    return BlobService(store, BASE_URL)


def test_save_and_fetch_round_trip(service):
    service.save_files([("abc", b"hello"), ("def", io.BytesIO(b"world"))])
    assert service.fetch_file_blob("abc") == b"hello"
    assert service.fetch_file_blob("def") == b"world"


def test_fetch_missing_raises(service):
    with pytest.raises(BlobNotFoundError):
        service.fetch_file_blob("missing")


def test_hash_is_sha1_of_content(service, store):
    service.save_files([("abc", b"payload")])
    (digest,) = store.db.execute("select hash from blob.asset_file;").fetchone()
    assert digest == hashlib.sha1(b"payload").hexdigest()


def test_duplicate_name_rolls_back_batch(service):
    service.save_files([("abc", b"1")])
    with pytest.raises(BlobExistsError) as info:
        service.save_files([("new", b"2"), ("abc", b"3")])
    assert info.value.filename == "abc"
    records, total = service.fetch_files_list(GridRequest())
    assert total == 1
    assert [r.cdnid for r in records] == ["abc"]


def test_list_fills_size_and_url(service):
    service.save_files([("small", b"abc"), ("big", b"x" * 1500)])
    records, total = service.fetch_files_list(GridRequest(sort=[{"field": "id"}]))
    assert total == 2
    small, big = records
    assert (small.size, small.size_str) == (3, "3 B")
    assert big.size_str == "1.5 kB"
    assert small.url == f"{BASE_URL}/small"


def test_list_search_sort_and_paging(service):
    service.save_files([(f"file{i}", bytes([i])) for i in range(5)])
    request = GridRequest(
        limit=2, offset=1,
        search=[{"field": "cdnid", "operator": "begins", "value": "file"}],
        sort=[{"field": "cdnid", "direction": "desc"}],
    )
    records, total = service.fetch_files_list(request)
    assert total == 5
    assert [r.cdnid for r in records] == ["file3", "file2"]


def test_list_search_filters_total(service):
    service.save_files([("alpha", b"1"), ("beta", b"2")])
    request = GridRequest(search=[{"field": "cdnid", "operator": "is", "value": "beta"}])
    records, total = service.fetch_files_list(request)
    assert total == 1
    assert records[0].cdnid == "beta"


def test_delete_files(service):
    service.save_files([("a", b"1"), ("b", b"2"), ("c", b"3")])
    records, _ = service.fetch_files_list(GridRequest(sort=[{"field": "id"}]))
    service.delete_files([records[0].id, records[2].id])
    remaining, total = service.fetch_files_list(GridRequest())
    assert total == 1
    assert remaining[0].cdnid == "b"