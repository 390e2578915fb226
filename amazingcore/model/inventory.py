"""Player inventory items and non-player characters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from amazingcore.model.base import (
    OID,
    ZERO_TIME,
    InventoryPosition,
    ProtocolReader,
    ProtocolWriter,
)
from amazingcore.model.rules import Item, RuleContainer

__all__ = ["NPC", "PlayerItem"]


@dataclass
class PlayerItem:
    """An item instance owned by a player, possibly with attached items."""

    oid: OID = field(default_factory=OID)
    item: Item = field(default_factory=Item)
    secret_code: str = ""
    ordinal: int = 0
    parent_pio_id: OID = field(default_factory=OID)
    slot_id: OID = field(default_factory=OID)
    player_avatar_outfit_id: OID = field(default_factory=OID)
    inventory_position: InventoryPosition = field(default_factory=InventoryPosition)
    player_maze_pieces_id: OID = field(default_factory=OID)
    is_yard: bool = False
    player_maze_id: OID = field(default_factory=OID)
    player_avatar_id: OID = field(default_factory=OID)
    player_id: OID = field(default_factory=OID)
    is_item_used: bool = False
    player_container_id: OID = field(default_factory=OID)
    placed_player_container_id: OID = field(default_factory=OID)
    sell_price: int = 0
    store_theme_id: OID = field(default_factory=OID)
    create_date: datetime = ZERO_TIME
    growth_completion_date: datetime = ZERO_TIME
    growth_start_date: datetime = ZERO_TIME
    mature_end_date: datetime = ZERO_TIME
    decay_end_date: datetime = ZERO_TIME
    harvest_date: datetime = ZERO_TIME
    attached_items: list[PlayerItem] = field(default_factory=list)
    sending_id: OID = field(default_factory=OID)
    quantity: int = 0
    units_to_expire: int = 0
    quality_index: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_object(self.item)
        writer.write_string(self.secret_code)
        writer.write_int32(self.ordinal)
        writer.write_object(self.parent_pio_id)
        writer.write_object(self.slot_id)
        writer.write_object(self.player_avatar_outfit_id)
        writer.write_object(self.inventory_position)
        writer.write_object(self.player_maze_pieces_id)
        writer.write_bool(self.is_yard)
        writer.write_object(self.player_maze_id)
        writer.write_object(self.player_avatar_id)
        writer.write_object(self.player_id)
        writer.write_bool(self.is_item_used)
        writer.write_object(self.player_container_id)
        writer.write_object(self.placed_player_container_id)
        writer.write_int32(self.sell_price)
        writer.write_object(self.store_theme_id)
        writer.write_utc_date(self.create_date)
        writer.write_utc_date(self.growth_completion_date)
        writer.write_utc_date(self.growth_start_date)
        writer.write_utc_date(self.mature_end_date)
        writer.write_utc_date(self.decay_end_date)
        writer.write_utc_date(self.harvest_date)
        writer.write_list(self.attached_items, writer.write_object)
        writer.write_object(self.sending_id)
        writer.write_int32(self.quantity)
        writer.write_int32(self.units_to_expire)
        writer.write_int32(self.quality_index)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.item = reader.read_object(Item)
        self.secret_code = reader.read_string()
        self.ordinal = reader.read_int32()
        self.parent_pio_id = reader.read_object(OID)
        self.slot_id = reader.read_object(OID)
        self.player_avatar_outfit_id = reader.read_object(OID)
        self.inventory_position = reader.read_object(InventoryPosition)
        self.player_maze_pieces_id = reader.read_object(OID)
        self.is_yard = reader.read_bool()
        self.player_maze_id = reader.read_object(OID)
        self.player_avatar_id = reader.read_object(OID)
        self.player_id = reader.read_object(OID)
        self.is_item_used = reader.read_bool()
        self.player_container_id = reader.read_object(OID)
        self.placed_player_container_id = reader.read_object(OID)
        self.sell_price = reader.read_int32()
        self.store_theme_id = reader.read_object(OID)
        self.create_date = reader.read_utc_date()
        self.growth_completion_date = reader.read_utc_date()
        self.growth_start_date = reader.read_utc_date()
        self.mature_end_date = reader.read_utc_date()
        self.decay_end_date = reader.read_utc_date()
        self.harvest_date = reader.read_utc_date()
        self.attached_items = reader.read_list(lambda: reader.read_object(PlayerItem))
        self.sending_id = reader.read_object(OID)
        self.quantity = reader.read_int32()
        self.units_to_expire = reader.read_int32()
        self.quality_index = reader.read_int32()


@dataclass
class NPC(RuleContainer):
    """A non-player character placed in a zone."""

    zone_id: OID = field(default_factory=OID)
    spawn_point: str = ""
    start_quest_ids: list[OID] = field(default_factory=list)
    relationship_points: int = 0
    friend: bool = False
    ordinal: int = 0
    pnr_created_date: datetime = ZERO_TIME
    player_item: PlayerItem = field(default_factory=PlayerItem)

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_object(self.zone_id)
        writer.write_string(self.spawn_point)
        writer.write_list(self.start_quest_ids, writer.write_object)
        writer.write_int32(self.relationship_points)
        writer.write_bool(self.friend)
        writer.write_int32(self.ordinal)
        writer.write_utc_date(self.pnr_created_date)
        writer.write_object(self.player_item)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.zone_id = reader.read_object(OID)
        self.spawn_point = reader.read_string()
        self.start_quest_ids = reader.read_list(lambda: reader.read_object(OID))
        self.relationship_points = reader.read_int32()
        self.friend = reader.read_bool()
        self.ordinal = reader.read_int32()
        self.pnr_created_date = reader.read_utc_date()
        self.player_item = reader.read_object(PlayerItem)