"""Game server core: wire data types, error helpers, SQLite storage services and asset cache tools."""

__version__ = "0.1.0"