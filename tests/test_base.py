from datetime import datetime, timedelta, timezone

import pytest

from amazingcore.model.base import (
    OID,
    ZERO_TIME,
    Announcement,
    Asset,
    AssetContainer,
    AssetPackage,
    Dimensions,
    InventoryPosition,
    ObjectPosition,
    Position,
    ProtocolReader,
    ProtocolWriter,
    Qth,
    RaceMode,
    SiteFrame,
    SiteInfo,
    Tier,
)

WHEN = datetime(2012, 5, 17, 10, 30, tzinfo=timezone.utc)


def roundtrip(obj):
    writer = ProtocolWriter()
    obj.serialize(writer)
    reader = ProtocolReader(writer.tokens)
    copy = type(obj)()
    copy.deserialize(reader)
    return copy, reader


def _container():
    asset = Asset(OID(1, 2, 3, 4), "Texture", "abcdefghijklmnopqr", "res", "grp", 1024)
    package = AssetPackage(oid=OID(5, 6, 7, 8), p_tag="pkg", created_date=WHEN)
    return dict(
        oid=OID(9, 9, 9, 9),
        asset_map={"main": [asset], "empty": []},
        asset_packages=[package],
    )


SAMPLES = [
    OID(1, 2, 3, 2**40),
    Position(1, -2, 3, 4),
    Dimensions(1, 2, 3, 4, 5, 6),
    ObjectPosition(7, 8, 9),
    InventoryPosition(ObjectPosition(1, 2, 3), "90"),
    Qth(True, False, True, False, "a", "b", "c"),
    RaceMode(OID(1, 1, 1, 1), "fast"),
    SiteInfo(OID(1, 2, 3, 4), "First", "Last", OID(4, 3, 2, 1)),
    Asset(OID(1, 2, 3, 4), "Texture", "abcdefghijklmnopqr", "res", "grp", 1024),
    AssetContainer(**_container()),
    AssetPackage(**_container(), p_tag="tag", created_date=WHEN),
    SiteFrame(**_container(), type_value=3),
    Announcement(**_container(), create_ts=WHEN, ordinal=2),
    Tier(**_container(), rotation_days=7, rotation_rate=2,
         reporting_level_id=OID(1, 1, 1, 1), paid=True, premium=False, closed=True,
         pricing_info="info", expiry_period=30, ordinal=5, expiry_tier_id=OID(2, 2, 2, 2)),
]


@pytest.mark.parametrize("obj", SAMPLES, ids=lambda o: type(o).__name__)
def test_roundtrip(obj):
    copy, reader = roundtrip(obj)
    assert copy == obj
    assert reader.exhausted


@pytest.mark.parametrize("cls", [OID, Qth, Tier, AssetContainer, Announcement])
def test_default_roundtrip(cls):
    copy, reader = roundtrip(cls())
    assert copy == cls()
    assert reader.exhausted


def test_oid_tokens():
    writer = ProtocolWriter()
    OID(1, 2, 3, 4).serialize(writer)
    assert writer.tokens == [("int32", 1), ("int32", 2), ("int32", 3), ("int64", 4)]


def test_asset_package_writes_container_first():
    writer = ProtocolWriter()
    AssetPackage(p_tag="tag", created_date=WHEN).serialize(writer)
    assert writer.tokens[0] == ("object", "OID")
    assert writer.tokens[-2:] == [("string", "tag"), ("date", WHEN)]


def test_int32_overflow():
    writer = ProtocolWriter()
    with pytest.raises(OverflowError):
        Position(x=2**31).serialize(writer)


def test_int16_overflow():
    with pytest.raises(OverflowError):
        ProtocolWriter().write_int16(-(2**15) - 1)


def test_char_must_be_single():
    with pytest.raises(ValueError):
        Qth(cx="ab").serialize(ProtocolWriter())


def test_reader_kind_mismatch():
    reader = ProtocolReader([("string", "x")])
    with pytest.raises(ValueError):
        reader.read_int32()


def test_reader_exhausted():
    reader = ProtocolReader([("int32", 1), ("int32", 2)])
    with pytest.raises(EOFError):
        ObjectPosition().deserialize(reader)


def test_read_object_wrong_class():
    writer = ProtocolWriter()
    writer.write_object(Position())
    with pytest.raises(ValueError):
        ProtocolReader(writer.tokens).read_object(OID)


def test_naive_date_is_utc():
    writer = ProtocolWriter()
    writer.write_utc_date(datetime(2012, 5, 17, 10, 30))
    assert ProtocolReader(writer.tokens).read_utc_date() == WHEN


def test_aware_date_converted_to_utc():
    local = WHEN.astimezone(timezone(timedelta(hours=3)))
    writer = ProtocolWriter()
    writer.write_utc_date(local)
    result = ProtocolReader(writer.tokens).read_utc_date()
    assert result == WHEN
    assert result.utcoffset() == timedelta(0)


def test_nullable_roundtrip():
    writer = ProtocolWriter()
    writer.write_nullable(None, writer.write_int32)
    writer.write_nullable(5, writer.write_int32)
    reader = ProtocolReader(writer.tokens)
    assert reader.read_nullable(reader.read_int32) is None
    assert reader.read_nullable(reader.read_int32) == 5
    assert reader.exhausted


def test_map_preserves_order():
    writer = ProtocolWriter()
    writer.write_map({"b": "1", "a": "2"}, writer.write_string)
    reader = ProtocolReader(writer.tokens)
    assert list(reader.read_map(reader.read_string).items()) == [("b", "1"), ("a", "2")]


def test_default_date_is_zero_time():
    assert Announcement().create_ts == ZERO_TIME