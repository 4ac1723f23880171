"""DS1 map preset files: tile layers, objects and substitution groups."""

from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO

from libabyss.streamreader import StreamReader

_DIR_LOOKUP = bytes((
    0x00, 0x01, 0x02, 0x01, 0x02, 0x03, 0x03, 0x05, 0x05, 0x06, 0x06, 0x07, 0x07,
    0x08, 0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x0E, 0x0F, 0x10, 0x11, 0x12, 0x14,
))
_MAX_WALLS = 4
_MAX_FLOORS = 2
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_TG1_SUFFIX = re.compile(r".tg1\Z")


class LayerStreamType(IntEnum):
    WALL1 = 0
    WALL2 = 1
    WALL3 = 2
    WALL4 = 3
    ORIENTATION1 = 4
    ORIENTATION2 = 5
    ORIENTATION3 = 6
    ORIENTATION4 = 7
    FLOOR1 = 8
    FLOOR2 = 9
    SHADOW = 10
    SUBSTITUTION = 11


@dataclass
class Ds1Tile:
    """One cell of a layer; which fields matter depends on the layer kind."""

    visible: int = 0
    sequence: int = 0
    unknown1: int = 0
    style: int = 0
    unknown2: int = 0
    hidden_bytes: int = 0
    random_index: int = 0
    substitution: int = 0
    wall_type: int = 0
    wall_zero: int = 0
    animated: bool = False

    def _apply_common(self, dw: int) -> None:
        self.visible = dw & 0xFF
        self.sequence = (dw & 0x3F00) >> 8
        self.unknown1 = (dw & 0xFC000) >> 14
        self.style = (dw & 0x3F00000) >> 20
        self.unknown2 = (dw & 0x7C000000) >> 26
        self.hidden_bytes = (dw & 0x80000000) >> 31


@dataclass
class Layer:
    """A width x height grid of tiles stored row by row."""

    width: int = 0
    height: int = 0
    tiles: list[Ds1Tile] = field(default_factory=list)

    def resize(self, width: int, height: int) -> None:
        """Change the dimensions, keeping existing tiles and adding blank ones."""
        if width < 0 or height < 0:
            raise ValueError(f"invalid layer size {width}x{height}")
        self.width = width
        self.height = height
        size = width * height
        if size < len(self.tiles):
            del self.tiles[size:]
        else:
            self.tiles.extend(Ds1Tile() for _ in range(size - len(self.tiles)))

    def tile(self, x: int, y: int) -> Ds1Tile:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} layer")
        return self.tiles[x + y * self.width]


@dataclass
class Path:
    x: int = 0
    y: int = 0
    action: int = 0


@dataclass
class Ds1Object:
    type: int = 0
    id: int = 0
    x: int = 0
    y: int = 0
    flags: int = 0
    paths: list[Path] = field(default_factory=list)


@dataclass
class SubstitutionGroup:
    tile_x: int = 0
    tile_y: int = 0
    width_in_tiles: int = 0
    height_in_tiles: int = 0
    unknown: int = 0


@dataclass
class DS1:
    version: int = 0
    act: int = 0
    substitution_type: int = 0
    width: int = 0
    height: int = 0
    files: list[str] = field(default_factory=list)
    objects: list[Ds1Object] = field(default_factory=list)
    substitution_groups: list[SubstitutionGroup] = field(default_factory=list)
    floors: list[Layer] = field(default_factory=list)
    walls: list[Layer] = field(default_factory=list)
    shadows: list[Layer] = field(default_factory=list)
    substitutions: list[Layer] = field(default_factory=list)
    unknown1: bytes = bytes(8)
    unknown2: int = 0

    def _layers(self) -> list[Layer]:
        return [*self.floors, *self.shadows, *self.walls, *self.substitutions]

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        for layer in self._layers():
            layer.resize(width, height)

    def layer_stream_types(self) -> list[LayerStreamType]:
        """The order in which layer data is stored in the file."""
        if self.version < 4:
            return [
                LayerStreamType.WALL1,
                LayerStreamType.FLOOR1,
                LayerStreamType.ORIENTATION1,
                LayerStreamType.SUBSTITUTION,
                LayerStreamType.SHADOW,
            ]
        streams: list[LayerStreamType] = []
        for i in range(len(self.walls)):
            streams.append(LayerStreamType(LayerStreamType.WALL1 + i))
            streams.append(LayerStreamType(LayerStreamType.ORIENTATION1 + i))
        streams.extend(
            LayerStreamType(LayerStreamType.FLOOR1 + i) for i in range(len(self.floors))
        )
        if self.shadows:
            streams.append(LayerStreamType.SHADOW)
        if self.substitutions:
            streams.append(LayerStreamType.SUBSTITUTION)
        return streams


def _normalize_path(name: str) -> str:
    path = name.translate(_ASCII_LOWER).replace("\\", "/")
    path = path.replace("/d2/data/", "/data/")
    path = path.replace("c:", "")
    return _TG1_SUFFIX.sub(".dt1", path)


def _count(value: int, what: str, limit: int | None = None) -> int:
    if value < 0 or (limit is not None and value > limit):
        raise ValueError(f"invalid number of {what} in DS1: {value}")
    return value


def _target_layer(ds1: DS1, kind: LayerStreamType) -> Layer | None:
    if kind <= LayerStreamType.WALL4:
        layers, index = ds1.walls, kind - LayerStreamType.WALL1
    elif kind <= LayerStreamType.ORIENTATION4:
        layers, index = ds1.walls, kind - LayerStreamType.ORIENTATION1
    elif kind <= LayerStreamType.FLOOR2:
        layers, index = ds1.floors, kind - LayerStreamType.FLOOR1
    elif kind is LayerStreamType.SHADOW:
        layers, index = ds1.shadows, 0
    else:
        layers, index = ds1.substitutions, 0
    return layers[index] if index < len(layers) else None


def _load_layer_streams(reader: StreamReader, ds1: DS1) -> None:
    for kind in ds1.layer_stream_types():
        layer = _target_layer(ds1, kind)
        for y in range(ds1.height):
            for x in range(ds1.width):
                dw = reader.read_uint32()
                if layer is None:
                    continue
                tile = layer.tile(x, y)
                if LayerStreamType.ORIENTATION1 <= kind <= LayerStreamType.ORIENTATION4:
                    c = dw & 0xFF
                    if ds1.version < 7 and c < len(_DIR_LOOKUP):
                        c = _DIR_LOOKUP[c]
                    tile.wall_type = c
                    tile.wall_zero = (dw & 0xFF00) >> 8
                elif kind is LayerStreamType.SUBSTITUTION:
                    tile.substitution = dw
                else:
                    tile._apply_common(dw)


def _load_objects(reader: StreamReader, ds1: DS1) -> None:
    count = _count(reader.read_int32(), "objects")
    ds1.objects = [
        Ds1Object(
            type=reader.read_int32(),
            id=reader.read_int32(),
            x=reader.read_int32(),
            y=reader.read_int32(),
            flags=reader.read_uint32(),
        )
        for _ in range(count)
    ]


def _load_substitutions(reader: StreamReader, ds1: DS1) -> None:
    if ds1.version >= 18:
        ds1.unknown2 = reader.read_uint32()
    count = _count(reader.read_int32(), "substitution groups")
    ds1.substitution_groups = [
        SubstitutionGroup(
            tile_x=reader.read_int32(),
            tile_y=reader.read_int32(),
            width_in_tiles=reader.read_int32(),
            height_in_tiles=reader.read_int32(),
            unknown=reader.read_int32(),
        )
        for _ in range(count)
    ]


def _skip_npcs(reader: StreamReader, ds1: DS1) -> None:
    count = reader.read_int32()
    step = 3 if ds1.version > 15 else 2
    for _ in range(count):
        num_paths = reader.read_int32()
        reader.read_int32()  # npc x
        reader.read_int32()  # npc y
        reader.seek(num_paths * step, io.SEEK_CUR)


def read_ds1(stream: BinaryIO) -> DS1:
    """Read a DS1 map preset."""
    reader = StreamReader(stream)
    ds1 = DS1(version=reader.read_uint32())
    width = reader.read_int32() + 1
    height = reader.read_int32() + 1
    ds1.act = reader.read_int32() if ds1.version >= 8 else 0

    if ds1.version >= 10:
        ds1.substitution_type = reader.read_int32()
        if ds1.substitution_type >= 1:
            ds1.substitution_groups.append(SubstitutionGroup())

    if ds1.version >= 3:
        file_count = _count(reader.read_int32(), "files")
        ds1.files = [_normalize_path(reader.read_string()) for _ in range(file_count)]

    num_floors = 1
    num_shadows = 1
    num_walls = 0

    if 9 <= ds1.version <= 13:
        ds1.unknown1 = reader.read_bytes(8)

    if ds1.version >= 4:
        num_walls = _count(reader.read_int32(), "walls", _MAX_WALLS)
        if ds1.version >= 16:
            num_floors = _count(reader.read_int32(), "floors", _MAX_FLOORS)

    ds1.walls = [Layer() for _ in range(num_walls)]
    ds1.shadows = [Layer() for _ in range(num_shadows)]
    ds1.floors = [Layer() for _ in range(num_floors)]
    ds1.substitutions = []

    ds1.resize(width, height)
    _load_layer_streams(reader, ds1)

    if ds1.version >= 3:
        _load_objects(reader, ds1)

    if ds1.version >= 12 and ds1.substitution_type in (1, 2):
        _load_substitutions(reader, ds1)

    if ds1.version > 14:
        _skip_npcs(reader, ds1)

    return ds1