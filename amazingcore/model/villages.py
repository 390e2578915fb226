"""Village data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from amazingcore.model.base import (
    OID,
    ZERO_TIME,
    AssetContainer,
    ProtocolReader,
    ProtocolWriter,
)

__all__ = ["Village", "VillageItem", "VillagePlot", "VillageRolePlayer"]


@dataclass
class VillageItem:
    oid: OID = field(default_factory=OID)
    player_id: OID = field(default_factory=OID)
    x: int = 0
    y: int = 0
    z: int = 0
    rotation: str = ""
    ordinal: int = 0
    item_id: OID = field(default_factory=OID)
    item_type: int = 0
    village_id: OID = field(default_factory=OID)

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_object(self.player_id)
        writer.write_int32(self.x)
        writer.write_int32(self.y)
        writer.write_int32(self.z)
        writer.write_string(self.rotation)
        writer.write_int32(self.ordinal)
        writer.write_object(self.item_id)
        writer.write_int32(self.item_type)
        writer.write_object(self.village_id)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.player_id = reader.read_object(OID)
        self.x = reader.read_int32()
        self.y = reader.read_int32()
        self.z = reader.read_int32()
        self.rotation = reader.read_string()
        self.ordinal = reader.read_int32()
        self.item_id = reader.read_object(OID)
        self.item_type = reader.read_int32()
        self.village_id = reader.read_object(OID)


@dataclass
class VillagePlot:
    oid: OID = field(default_factory=OID)
    create_date: datetime = ZERO_TIME
    plot_no: int | None = None
    village_id: OID = field(default_factory=OID)
    plot_type_id: OID = field(default_factory=OID)
    player_id: OID = field(default_factory=OID)
    is_store: bool = False

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_utc_date(self.create_date)
        writer.write_nullable(self.plot_no, writer.write_int32)
        writer.write_object(self.village_id)
        writer.write_object(self.plot_type_id)
        writer.write_object(self.player_id)
        writer.write_bool(self.is_store)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.create_date = reader.read_utc_date()
        self.plot_no = reader.read_nullable(reader.read_int32)
        self.village_id = reader.read_object(OID)
        self.plot_type_id = reader.read_object(OID)
        self.player_id = reader.read_object(OID)
        self.is_store = reader.read_bool()


@dataclass
class VillageRolePlayer:
    oid: OID = field(default_factory=OID)
    village_role_id: OID = field(default_factory=OID)
    player_id: OID = field(default_factory=OID)
    village_id: OID = field(default_factory=OID)

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_object(self.village_role_id)
        writer.write_object(self.player_id)
        writer.write_object(self.village_id)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.village_role_id = reader.read_object(OID)
        self.player_id = reader.read_object(OID)
        self.village_id = reader.read_object(OID)


@dataclass
class Village:
    oid: OID = field(default_factory=OID)
    next_village_id: OID = field(default_factory=OID)
    prev_village_id: OID = field(default_factory=OID)
    village_shard_id: OID = field(default_factory=OID)
    village_template_id: OID = field(default_factory=OID)
    village_flag_id: OID = field(default_factory=OID)
    mayor_player_id: OID = field(default_factory=OID)
    village_theme: AssetContainer = field(default_factory=AssetContainer)
    village_plots: list[VillagePlot] = field(default_factory=list)
    village_role_players: list[VillageRolePlayer] = field(default_factory=list)
    village_items: list[VillageItem] = field(default_factory=list)
    is_open: bool = False
    is_public: bool = False
    village_name: str = ""
    shard_no: int | None = None
    rating: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_object(self.next_village_id)
        writer.write_object(self.prev_village_id)
        writer.write_object(self.village_shard_id)
        writer.write_object(self.village_template_id)
        writer.write_object(self.village_flag_id)
        writer.write_object(self.mayor_player_id)
        writer.write_object(self.village_theme)
        writer.write_list(self.village_plots, writer.write_object)
        writer.write_list(self.village_role_players, writer.write_object)
        writer.write_list(self.village_items, writer.write_object)
        writer.write_bool(self.is_open)
        writer.write_bool(self.is_public)
        writer.write_string(self.village_name)
        writer.write_nullable(self.shard_no, writer.write_int32)
        writer.write_int32(self.rating)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.next_village_id = reader.read_object(OID)
        self.prev_village_id = reader.read_object(OID)
        self.village_shard_id = reader.read_object(OID)
        self.village_template_id = reader.read_object(OID)
        self.village_flag_id = reader.read_object(OID)
        self.mayor_player_id = reader.read_object(OID)
        self.village_theme = reader.read_object(AssetContainer)
        self.village_plots = reader.read_list(lambda: reader.read_object(VillagePlot))
        self.village_role_players = reader.read_list(
            lambda: reader.read_object(VillageRolePlayer)
        )
        self.village_items = reader.read_list(lambda: reader.read_object(VillageItem))
        self.is_open = reader.read_bool()
        self.is_public = reader.read_bool()
        self.village_name = reader.read_string()
        self.shard_no = reader.read_nullable(reader.read_int32)
        self.rating = reader.read_int32()