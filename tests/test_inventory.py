from datetime import datetime, timedelta, timezone

import pytest

from amazingcore.model.base import (
    OID,
    InventoryPosition,
    ObjectPosition,
    ProtocolReader,
    ProtocolWriter,
)
from amazingcore.model.inventory import NPC, PlayerItem
from amazingcore.model.rules import Item, RuleProperty

WHEN = datetime(2011, 3, 4, 5, 6, 7, tzinfo=timezone.utc)


def roundtrip(obj):
    writer = ProtocolWriter()
    writer.write_object(obj)
    reader = ProtocolReader(writer.tokens)
    result = reader.read_object(type(obj))
    assert reader.exhausted
    return result


def make_player_item():
    return PlayerItem(
        oid=OID(1, 2, 3, 4),
        item=Item(name="flower", quantity=3),
        secret_code="code",
        ordinal=9,
        inventory_position=InventoryPosition(ObjectPosition(1, 2, 3), "north"),
        is_yard=True,
        is_item_used=True,
        sell_price=15,
        create_date=WHEN,
        harvest_date=WHEN,
        attached_items=[PlayerItem(secret_code="child"), PlayerItem()],
        sending_id=OID(7, 7, 7, 7),
        quantity=2,
        units_to_expire=1,
        quality_index=4,
    )


def test_player_item_roundtrip():
    original = make_player_item()
    assert roundtrip(original) == original


def test_player_item_attached_items_preserved():
    result = roundtrip(make_player_item())
    assert [child.secret_code for child in result.attached_items] == ["child", ""]
    assert result.item.name == "flower"


def test_player_item_tail_order():
    writer = ProtocolWriter()
    make_player_item().serialize(writer)
    assert writer.tokens[-3:] == [("int32", 2), ("int32", 1), ("int32", 4)]
    assert writer.tokens[0] == ("object", "OID")


def test_player_item_dates_normalised_to_utc():
    local = datetime(2011, 3, 4, 7, 6, 7, tzinfo=timezone(timedelta(hours=2)))
    result = roundtrip(PlayerItem(create_date=local))
    assert result.create_date == WHEN
    assert result.create_date.utcoffset() == timedelta(0)


def test_player_item_sell_price_overflow():
    with pytest.raises(OverflowError):
        PlayerItem(sell_price=1 << 33).serialize(ProtocolWriter())


def test_npc_roundtrip():
    original = NPC(
        rule_property=RuleProperty(properties={"mood": "happy"}),
        locked=True,
        zone_id=OID(5, 5, 5, 5),
        spawn_point="well",
        start_quest_ids=[OID(1, 1, 1, 1), OID(2, 2, 2, 2)],
        relationship_points=30,
        friend=True,
        ordinal=1,
        pnr_created_date=WHEN,
        player_item=make_player_item(),
    )
    result = roundtrip(original)
    assert result == original
    assert result.rule_property.properties == {"mood": "happy"}


def test_npc_default_roundtrip():
    assert roundtrip(NPC()) == NPC()


def test_npc_read_as_player_item_fails():
    writer = ProtocolWriter()
    writer.write_object(NPC())
    with pytest.raises(ValueError):
        ProtocolReader(writer.tokens).read_object(PlayerItem)


def test_npc_truncated_stream_raises():
    writer = ProtocolWriter()
    NPC(spawn_point="gate").serialize(writer)
    reader = ProtocolReader(writer.tokens[:-5])
    with pytest.raises(EOFError):
        NPC().deserialize(reader)