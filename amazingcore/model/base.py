"""Protocol value streams and the basic game data types built on them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Protocol, TypeVar

__all__ = [
    "ZERO_TIME",
    "Announcement",
    "Asset",
    "AssetContainer",
    "AssetPackage",
    "Dimensions",
    "InventoryPosition",
    "OID",
    "ObjectPosition",
    "Position",
    "ProtocolReader",
    "ProtocolWriter",
    "Qth",
    "RaceMode",
    "SiteFrame",
    "SiteInfo",
    "Tier",
]

T = TypeVar("T")
S = TypeVar("S", bound="_Serializable")

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
"""The zero date, used as the default for every date field."""

Token = tuple[str, Any]


class _Serializable(Protocol):
    def serialize(self, writer: ProtocolWriter) -> None: ...

    def deserialize(self, reader: ProtocolReader) -> None: ...


def _checked_int(value: int, bits: int) -> int:
    value = int(value)
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in int{bits}")
    return value


def _to_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ProtocolWriter:
    """Collects typed protocol values as a stream of ``(kind, value)`` tokens."""

    def __init__(self) -> None:
        self.tokens: list[Token] = []

    def _put(self, kind: str, value: Any) -> None:
        self.tokens.append((kind, value))

    def write_bool(self, value: bool) -> None:
        self._put("bool", bool(value))

    def write_int16(self, value: int) -> None:
        self._put("int16", _checked_int(value, 16))

    def write_int32(self, value: int) -> None:
        self._put("int32", _checked_int(value, 32))

    def write_int64(self, value: int) -> None:
        self._put("int64", _checked_int(value, 64))

    def write_float64(self, value: float) -> None:
        self._put("float64", float(value))

    def write_char(self, value: str) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"a char must be a single character, got {value!r}")
        self._put("char", value)

    def write_string(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"expected str, got {type(value).__name__}")
        self._put("string", value)

    def write_bytes(self, value: bytes) -> None:
        self._put("bytes", bytes(value))

    def write_utc_date(self, value: datetime) -> None:
        self._put("date", _to_utc(value))

    def write_object(self, obj: _Serializable) -> None:
        self._put("object", type(obj).__name__)
        obj.serialize(self)

    def write_list(self, values: Iterable[T], write: Callable[[T], None]) -> None:
        items = list(values)
        self._put("list", len(items))
        for item in items:
            write(item)

    def write_map(self, mapping: Mapping[str, T], write: Callable[[T], None]) -> None:
        self._put("map", len(mapping))
        for key, value in mapping.items():
            self.write_string(key)
            write(value)

    def write_nullable(self, value: T | None, write: Callable[[T], None]) -> None:
        self._put("null", value is None)
        if value is not None:
            write(value)


class ProtocolReader:
    """Reads typed protocol values back from a token stream."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    @property
    def exhausted(self) -> bool:
        """True when every token has been consumed."""
        return self._pos >= len(self._tokens)

    def _take(self, kind: str) -> Any:
        if self.exhausted:
            raise EOFError(f"expected {kind}, but the stream is exhausted")
        got, value = self._tokens[self._pos]
        if got != kind:
            raise ValueError(f"expected {kind} at position {self._pos}, found {got}")
        self._pos += 1
        return value

    def read_bool(self) -> bool:
        return self._take("bool")

    def read_int16(self) -> int:
        return self._take("int16")

    def read_int32(self) -> int:
        return self._take("int32")

    def read_int64(self) -> int:
        return self._take("int64")

    def read_float64(self) -> float:
        return self._take("float64")

    def read_char(self) -> str:
        return self._take("char")

    def read_string(self) -> str:
        return self._take("string")

    def read_bytes(self) -> bytes:
        return self._take("bytes")

    def read_utc_date(self) -> datetime:
        return self._take("date")

    def read_object(self, cls: type[S]) -> S:
        name = self._take("object")
        if name != cls.__name__:
            raise ValueError(f"expected object {cls.__name__}, found {name}")
        obj = cls()
        obj.deserialize(self)
        return obj

    def read_list(self, read: Callable[[], T]) -> list[T]:
        return [read() for _ in range(self._take("list"))]

    def read_map(self, read: Callable[[], T]) -> dict[str, T]:
        result: dict[str, T] = {}
        for _ in range(self._take("map")):
            key = self.read_string()
            result[key] = read()
        return result

    def read_nullable(self, read: Callable[[], T]) -> T | None:
        if self._take("null"):
            return None
        return read()


@dataclass
class OID:
    """Object identifier."""

    class_: int = 0
    type: int = 0
    server: int = 0
    number: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_int32(self.class_)
        writer.write_int32(self.type)
        writer.write_int32(self.server)
        writer.write_int64(self.number)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.class_ = reader.read_int32()
        self.type = reader.read_int32()
        self.server = reader.read_int32()
        self.number = reader.read_int64()


@dataclass
class Position:
    x: int = 0
    y: int = 0
    z: int = 0
    t: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_int32(self.x)
        writer.write_int32(self.y)
        writer.write_int32(self.z)
        writer.write_int32(self.t)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.x = reader.read_int32()
        self.y = reader.read_int32()
        self.z = reader.read_int32()
        self.t = reader.read_int32()


@dataclass
class Dimensions:
    cx: int = 0
    cy: int = 0
    cz: int = 0
    box: int = 0
    boy: int = 0
    boz: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        for value in (self.cx, self.cy, self.cz, self.box, self.boy, self.boz):
            writer.write_int32(value)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.cx = reader.read_int32()
        self.cy = reader.read_int32()
        self.cz = reader.read_int32()
        self.box = reader.read_int32()
        self.boy = reader.read_int32()
        self.boz = reader.read_int32()


@dataclass
class ObjectPosition:
    x: int = 0
    y: int = 0
    z: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_int32(self.x)
        writer.write_int32(self.y)
        writer.write_int32(self.z)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.x = reader.read_int32()
        self.y = reader.read_int32()
        self.z = reader.read_int32()


@dataclass
class InventoryPosition:
    object_position: ObjectPosition = field(default_factory=ObjectPosition)
    rotation: str = ""

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.object_position)
        writer.write_string(self.rotation)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.object_position = reader.read_object(ObjectPosition)
        self.rotation = reader.read_string()


@dataclass
class Qth:
    sw: bool = False
    sx: bool = False
    sy: bool = False
    sz: bool = False
    cx: str = "\0"
    cy: str = "\0"
    cz: str = "\0"

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_bool(self.sw)
        writer.write_bool(self.sx)
        writer.write_bool(self.sy)
        writer.write_bool(self.sz)
        writer.write_char(self.cx)
        writer.write_char(self.cy)
        writer.write_char(self.cz)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.sw = reader.read_bool()
        self.sx = reader.read_bool()
        self.sy = reader.read_bool()
        self.sz = reader.read_bool()
        self.cx = reader.read_char()
        self.cy = reader.read_char()
        self.cz = reader.read_char()


@dataclass
class RaceMode:
    oid: OID = field(default_factory=OID)
    name: str = ""

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_string(self.name)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.name = reader.read_string()


@dataclass
class SiteInfo:
    site_id: OID = field(default_factory=OID)
    nickname_first: str = ""
    nickname_last: str = ""
    site_user_id: OID = field(default_factory=OID)

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.site_id)
        writer.write_string(self.nickname_first)
        writer.write_string(self.nickname_last)
        writer.write_object(self.site_user_id)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.site_id = reader.read_object(OID)
        self.nickname_first = reader.read_string()
        self.nickname_last = reader.read_string()
        self.site_user_id = reader.read_object(OID)


@dataclass
class Asset:
    oid: OID = field(default_factory=OID)
    asset_type_name: str = ""
    cdnid: str = ""
    res_name: str = ""
    group_name: str = ""
    file_size: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_string(self.asset_type_name)
        writer.write_string(self.cdnid)
        writer.write_string(self.res_name)
        writer.write_string(self.group_name)
        writer.write_int64(self.file_size)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.asset_type_name = reader.read_string()
        self.cdnid = reader.read_string()
        self.res_name = reader.read_string()
        self.group_name = reader.read_string()
        self.file_size = reader.read_int64()


@dataclass
class AssetContainer:
    """An object carrying assets grouped by name, and asset packages."""

    oid: OID = field(default_factory=OID)
    asset_map: dict[str, list[Asset]] = field(default_factory=dict)
    asset_packages: list[AssetPackage] = field(default_factory=list)

    def serialize(self, writer: ProtocolWriter) -> None:
        writer.write_object(self.oid)
        writer.write_map(
            self.asset_map,
            lambda assets: writer.write_list(assets, writer.write_object),
        )
        writer.write_list(self.asset_packages, writer.write_object)

    def deserialize(self, reader: ProtocolReader) -> None:
        self.oid = reader.read_object(OID)
        self.asset_map = reader.read_map(
            lambda: reader.read_list(lambda: reader.read_object(Asset))
        )
        self.asset_packages = reader.read_list(lambda: reader.read_object(AssetPackage))


@dataclass
class AssetPackage(AssetContainer):
    p_tag: str = ""
    created_date: datetime = ZERO_TIME

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_string(self.p_tag)
        writer.write_utc_date(self.created_date)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.p_tag = reader.read_string()
        self.created_date = reader.read_utc_date()


@dataclass
class SiteFrame(AssetContainer):
    type_value: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_int32(self.type_value)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.type_value = reader.read_int32()


@dataclass
class Announcement(AssetContainer):
    create_ts: datetime = ZERO_TIME
    ordinal: int = 0

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_utc_date(self.create_ts)
        writer.write_int32(self.ordinal)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.create_ts = reader.read_utc_date()
        self.ordinal = reader.read_int32()


@dataclass
class Tier(AssetContainer):
    rotation_days: int = 0
    rotation_rate: int = 0
    reporting_level_id: OID = field(default_factory=OID)
    paid: bool = False
    premium: bool = False
    closed: bool = False
    pricing_info: str = ""
    expiry_period: int = 0
    ordinal: int = 0
    expiry_tier_id: OID = field(default_factory=OID)

    def serialize(self, writer: ProtocolWriter) -> None:
        super().serialize(writer)
        writer.write_int16(self.rotation_days)
        writer.write_int16(self.rotation_rate)
        writer.write_object(self.reporting_level_id)
        writer.write_bool(self.paid)
        writer.write_bool(self.premium)
        writer.write_bool(self.closed)
        writer.write_string(self.pricing_info)
        writer.write_int16(self.expiry_period)
        writer.write_int32(self.ordinal)
        writer.write_object(self.expiry_tier_id)

    def deserialize(self, reader: ProtocolReader) -> None:
        super().deserialize(reader)
        self.rotation_days = reader.read_int16()
        self.rotation_rate = reader.read_int16()
        self.reporting_level_id = reader.read_object(OID)
        self.paid = reader.read_bool()
        self.premium = reader.read_bool()
        self.closed = reader.read_bool()
        self.pricing_info = reader.read_string()
        self.expiry_period = reader.read_int16()
        self.ordinal = reader.read_int32()
        self.expiry_tier_id = reader.read_object(OID)