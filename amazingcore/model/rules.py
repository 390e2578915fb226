"""Rule-carrying game data types: rule properties, zones, buildings and items."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from amazingcore.model.base import (
    OID,
    ZERO_TIME,
    AssetContainer,
    Dimensions,
    Position,
    ProtocolReader,
    ProtocolWriter,
)

__all__ = [
    "Building",
    "Item",
    "ItemCategory",
    "RuleContainer",
    "RuleProperty",
    "Zone",
    "ZoneInstance",
]


@dataclass
class RuleProperty:
    """A node of rule configuration with properties and grouped children."""

    id: OID = field(default_factory=OID)
    parent_id: OID = field(default_factory=OID)
    components: list[str] = field(default_factory=list)
    parent_components: list[str] = field(default_factory=list)
    create_time: datetime = ZERO_TIME
    modified_time: datetime = ZERO_TIME
    properties: dict[str, str] = field(default_factory=dict)
    children_group: dict[str, list[RuleProperty]] = field(default_factory=dict)

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.id)
        writer.write_object(self.parent_id)
        writer.write_list(self.components, writer.write_string)
        writer.write_list(self.parent_components, writer.write_string)
        writer.write_utc_date(self.create_time)
        writer.write_utc_date(self.modified_time)
        writer.write_map(self.properties, writer.write_string)
        writer.write_map(
            self.children_group,
            lambda children: writer.write_list(children, writer.write_object),
        )

    def deserialize(self, reader: ProtocolReader) -> None:
        self.id = reader.read_object(OID)
        self.parent_id = reader.read_object(OID)
        self.components = reader.read_list(reader.read_string)
        self.parent_components = reader.read_list(reader.read_string)
        self.create_time = reader.read_utc_date()
        self.modified_time = reader.read_utc_date()
        self.properties = reader.read_map(reader.read_string)
        self.children_group = reader.read_map(
            lambda: reader.read_list(lambda: reader.read_object(RuleProperty))
        )


@dataclass
class RuleContainer(AssetContainer):
    """An asset container governed by a rule property."""

    rule_property: RuleProperty = field(default_factory=RuleProperty)
    locked: bool = False
    is_multiplayer: bool = False
    is_player_hosted: bool = False
    is_played_offline: bool = False

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_object(self.rule_property)
        writer.write_bool(self.locked)
        writer.write_bool(self.is_multiplayer)
        writer.write_bool(self.is_player_hosted)
        writer.write_bool(self.is_played_offline)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.rule_property = reader.read_object(RuleProperty)
        self.locked = reader.read_bool()
        self.is_multiplayer = reader.read_bool()
        self.is_player_hosted = reader.read_bool()
        self.is_played_offline = reader.read_bool()


@dataclass
class Building(RuleContainer):
    position: Position = field(default_factory=Position)
    dimensions: Dimensions = field(default_factory=Dimensions)
    spawn_point: str = ""
    zone_id: OID = field(default_factory=OID)

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_object(self.position)
        writer.write_object(self.dimensions)
        writer.write_string(self.spawn_point)
        writer.write_object(self.zone_id)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.position = reader.read_object(Position)
        self.dimensions = reader.read_object(Dimensions)
        self.spawn_point = reader.read_string()
        self.zone_id = reader.read_object(OID)


@dataclass
class Zone(RuleContainer):
    dimensions: Dimensions = field(default_factory=Dimensions)
    buildings: list[Building] = field(default_factory=list)
    p_tag: str = ""
    capacity: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_object(self.dimensions)
        writer.write_list(self.buildings, writer.write_object)
        writer.write_string(self.p_tag)
        writer.write_int32(self.capacity)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.dimensions = reader.read_object(Dimensions)
        self.buildings = reader.read_list(lambda: reader.read_object(Building))
        self.p_tag = reader.read_string()
        self.capacity = reader.read_int32()


@dataclass
class ZoneInstance:
    oid: OID = field(default_factory=OID)
    zone: Zone = field(default_factory=Zone)
    occupancy: int = 0
    ordinal: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_object(self.zone)
        writer.write_int32(self.occupancy)
        writer.write_int32(self.ordinal)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.zone = reader.read_object(Zone)
        self.occupancy = reader.read_int32()
        self.ordinal = reader.read_int32()


@dataclass
class ItemCategory(RuleContainer):
    create_date: datetime = ZERO_TIME
    is_outdoor: bool = False
    is_walkover: bool = False
    parent_id: OID = field(default_factory=OID)
    name: str = ""
    show_in_dock: bool = False

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_utc_date(self.create_date)
        writer.write_bool(self.is_outdoor)
        writer.write_bool(self.is_walkover)
        writer.write_object(self.parent_id)
        writer.write_string(self.name)
        writer.write_bool(self.show_in_dock)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.create_date = reader.read_utc_date()
        self.is_outdoor = reader.read_bool()
        self.is_walkover = reader.read_bool()
        self.parent_id = reader.read_object(OID)
        self.name = reader.read_string()
        self.show_in_dock = reader.read_bool()


@dataclass
class Item(AssetContainer):
    create_date: datetime = ZERO_TIME
    depth: int = 0
    height: int = 0
    width: int = 0
    is_consumable: bool = False
    is_presentable: bool = False
    is_tradeable: bool = False
    is_lighting: bool = False
    is_animated: bool = False
    accepts_presentable: bool = False
    in_container: bool = False
    presentable_slots: str = ""
    quality_index: int = 0
    sell_price: int = 0
    buy_price: int = 0
    name: str = ""
    is_user_sellable: bool = False
    growth_rate: int = 0
    spawn_point: str = ""
    mature_duration: int = 0
    decay_duration: int = 0
    quantity: int = 0
    item_categories: list[ItemCategory] = field(default_factory=list)
    acceptable_slot_ids: list[OID] = field(default_factory=list)

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_utc_date(self.create_date)
        writer.write_int32(self.depth)
        writer.write_int32(self.height)
        writer.write_int32(self.width)
        writer.write_bool(self.is_consumable)
        writer.write_bool(self.is_presentable)
        writer.write_bool(self.is_tradeable)
        writer.write_bool(self.is_lighting)
        writer.write_bool(self.is_animated)
        writer.write_bool(self.accepts_presentable)
        writer.write_bool(self.in_container)
        writer.write_string(self.presentable_slots)
        writer.write_int32(self.quality_index)
        writer.write_int64(self.sell_price)
        writer.write_int64(self.buy_price)
        writer.write_string(self.name)
        writer.write_bool(self.is_user_sellable)
        writer.write_int32(self.growth_rate)
        writer.write_string(self.spawn_point)
        writer.write_int32(self.mature_duration)
        writer.write_int32(self.decay_duration)
        writer.write_int32(self.quantity)
        writer.write_list(self.item_categories, writer.write_object)
        writer.write_list(self.acceptable_slot_ids, writer.write_object)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.create_date = reader.read_utc_date()
        self.depth = reader.read_int32()
        self.height = reader.read_int32()
        self.width = reader.read_int32()
        self.is_consumable = reader.read_bool()
        self.is_presentable = reader.read_bool()
        self.is_tradeable = reader.read_bool()
        self.is_lighting = reader.read_bool()
        self.is_animated = reader.read_bool()
        self.accepts_presentable = reader.read_bool()
        self.in_container = reader.read_bool()
        self.presentable_slots = reader.read_string()
        self.quality_index = reader.read_int32()
        self.sell_price = reader.read_int64()
        self.buy_price = reader.read_int64()
        self.name = reader.read_string()
        self.is_user_sellable = reader.read_bool()
        self.growth_rate = reader.read_int32()
        self.spawn_point = reader.read_string()
        self.mature_duration = reader.read_int32()
        self.decay_duration = reader.read_int32()
        self.quantity = reader.read_int32()
        self.item_categories = reader.read_list(lambda: reader.read_object(ItemCategory))
        self.acceptable_slot_ids = reader.read_list(lambda: reader.read_object(OID))