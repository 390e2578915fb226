"""Player maze and home data types."""

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

__all__ = ["PlayerHome", "PlayerMaze", "PlayerMazePiece"]


@dataclass
class PlayerMazePiece:
    oid: OID = field(default_factory=OID)
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotation: str = ""
    ordinal: int = 0
    object_id: OID = field(default_factory=OID)
    player_maze_id: OID = field(default_factory=OID)

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_float64(self.x)
        writer.write_float64(self.y)
        writer.write_float64(self.z)
        writer.write_string(self.rotation)
        writer.write_int16(self.ordinal)
        writer.write_object(self.object_id)
        writer.write_object(self.player_maze_id)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.x = reader.read_float64()
        self.y = reader.read_float64()
        self.z = reader.read_float64()
        self.rotation = reader.read_string()
        self.ordinal = reader.read_int16()
        self.object_id = reader.read_object(OID)
        self.player_maze_id = reader.read_object(OID)


@dataclass
class PlayerMaze:
    oid: OID = field(default_factory=OID)
    name: str = ""
    size: int = 0
    thumbnail: bytes = b""
    publish_timestamp: datetime = ZERO_TIME
    num_rooms: int = 0
    num_tubes: int = 0
    rating: int | None = None
    is_locked: bool = False
    is_home_maze: bool = False
    is_published: bool = False
    is_publish_expired: bool = False
    player_id: OID = field(default_factory=OID)
    maze_pieces: list[PlayerMazePiece] = field(default_factory=list)
    home_theme: AssetContainer = field(default_factory=AssetContainer)
    parent_id: OID = field(default_factory=OID)
    source_id: OID = field(default_factory=OID)

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_string(self.name)
        writer.write_int64(self.size)
        writer.write_bytes(self.thumbnail)
        writer.write_utc_date(self.publish_timestamp)
        writer.write_int16(self.num_rooms)
        writer.write_int16(self.num_tubes)
        writer.write_nullable(self.rating, writer.write_int16)
        writer.write_bool(self.is_locked)
        writer.write_bool(self.is_home_maze)
        writer.write_bool(self.is_published)
        writer.write_bool(self.is_publish_expired)
        writer.write_object(self.player_id)
        writer.write_list(self.maze_pieces, writer.write_object)
        writer.write_object(self.home_theme)
        writer.write_object(self.parent_id)
        writer.write_object(self.source_id)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.name = reader.read_string()
        self.size = reader.read_int64()
        self.thumbnail = reader.read_bytes()
        self.publish_timestamp = reader.read_utc_date()
        self.num_rooms = reader.read_int16()
        self.num_tubes = reader.read_int16()
        self.rating = reader.read_nullable(reader.read_int16)
        self.is_locked = reader.read_bool()
        self.is_home_maze = reader.read_bool()
        self.is_published = reader.read_bool()
        self.is_publish_expired = reader.read_bool()
        self.player_id = reader.read_object(OID)
        self.maze_pieces = reader.read_list(lambda: reader.read_object(PlayerMazePiece))
        self.home_theme = reader.read_object(AssetContainer)
        self.parent_id = reader.read_object(OID)
        self.source_id = reader.read_object(OID)


@dataclass
class PlayerHome:
    player_maze: PlayerMaze = field(default_factory=PlayerMaze)
    player_name: str = ""
    findable: bool = False
    findable_date: datetime = ZERO_TIME
    home_theme: AssetContainer = field(default_factory=AssetContainer)
    player_id: OID = field(default_factory=OID)
    player_mazes: list[PlayerMaze] = field(default_factory=list)

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.player_maze)
        writer.write_string(self.player_name)
        writer.write_bool(self.findable)
        writer.write_utc_date(self.findable_date)
        writer.write_object(self.home_theme)
        writer.write_object(self.player_id)
        writer.write_list(self.player_mazes, writer.write_object)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.player_maze = reader.read_object(PlayerMaze)
        self.player_name = reader.read_string()
        self.findable = reader.read_bool()
        self.findable_date = reader.read_utc_date()
        self.home_theme = reader.read_object(AssetContainer)
        self.player_id = reader.read_object(OID)
        self.player_mazes = reader.read_list(lambda: reader.read_object(PlayerMaze))