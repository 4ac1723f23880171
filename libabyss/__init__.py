"""Readers for classic action-RPG game data formats and supporting helpers."""

__version__ = "0.1.0"

__all__ = [
    "streamreader",
    "ringbuffer",
    "inifile",
    "levels",
    "pngloader",
    "palette",
    "tbl",
    "dc6",
    "dt1",
    "ds1",
]