"""DT1 tile set files."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import BinaryIO

from libabyss.streamreader import StreamReader

_SUB_TILE_COUNT = 25


class GeneralTileType(Enum):
    FLOOR = "floor"
    SPECIAL = "special"
    SHADOW = "shadow"
    ROOF = "roof"
    LOWER_WALL = "lower_wall"
    NORMAL_WALL = "normal_wall"


class BlockFormat(IntEnum):
    RLE = 0
    ISOMETRIC = 1


@dataclass(frozen=True)
class MaterialFlags:
    other: bool = False
    water: bool = False
    wood_object: bool = False
    inside_stone: bool = False
    outside_stone: bool = False
    dirt: bool = False
    sand: bool = False
    wood: bool = False
    lava: bool = False
    snow: bool = False


@dataclass(frozen=True)
class SubTileFlags:
    block_walk: bool = False
    block_los: bool = False
    block_jump: bool = False
    block_player_walk: bool = False
    unknown1: bool = False
    block_light: bool = False
    unknown2: bool = False
    unknown3: bool = False


def material_flags(flags: int) -> MaterialFlags:
    """Unpack a material bit field."""
    return MaterialFlags(*(bool(flags & (1 << bit)) for bit in range(10)))


def sub_tile_flags(flags: int) -> SubTileFlags:
    """Unpack a sub-tile bit field."""
    return SubTileFlags(*(bool(flags & (1 << bit)) for bit in range(8)))


@dataclass
class Block:
    x: int = 0
    y: int = 0
    grid_x: int = 0
    grid_y: int = 0
    format: BlockFormat = BlockFormat.RLE
    length: int = 0
    file_offset: int = 0
    encoded_bytes: bytes = b""


@dataclass
class Tile:
    direction: int = 0
    roof_height: int = 0
    material: MaterialFlags = field(default_factory=MaterialFlags)
    animated: bool = False
    height: int = 0
    width: int = 0
    type: int = 0
    main_index: int = 0
    sub_index: int = 0
    rarity_frame_index: int = 0
    sub_tile_flags: tuple[SubTileFlags, ...] = field(
        default_factory=lambda: tuple(SubTileFlags() for _ in range(_SUB_TILE_COUNT))
    )
    block_header_pointer: int = 0
    block_header_size: int = 0
    blocks: list[Block] = field(default_factory=list)
    y_adjust: int = 0
    alt_tile: int = -1
    in_use: bool = False

    def general_type(self) -> GeneralTileType:
        if self.type == 0:
            return GeneralTileType.FLOOR
        if self.type in (10, 11):
            return GeneralTileType.SPECIAL
        if self.type == 13:
            return GeneralTileType.SHADOW
        if self.type == 15:
            return GeneralTileType.ROOF
        return GeneralTileType.NORMAL_WALL if self.type < 15 else GeneralTileType.LOWER_WALL

    def calculate_offsets(self) -> None:
        """Set y_adjust, the vertical draw offset for this tile's kind."""
        self.y_adjust = 0
        if not self.blocks or self.width == 0 or self.height == 0:
            return
        kind = self.general_type()
        if kind is GeneralTileType.ROOF:
            self.y_adjust = -self.roof_height
        elif kind is GeneralTileType.LOWER_WALL:
            self.y_adjust = -96 + 80
        elif kind in (GeneralTileType.SHADOW, GeneralTileType.SPECIAL,
                      GeneralTileType.NORMAL_WALL):
            self.y_adjust = self.height + 80


@dataclass
class DT1:
    version_major: int = 0
    version_minor: int = 0
    tiles: list[Tile] = field(default_factory=list)


def _read_tile(reader: StreamReader) -> Tile:
    tile = Tile()
    tile.direction = reader.read_int32()
    tile.roof_height = reader.read_int16()
    tile.material = material_flags(reader.read_uint8())
    tile.animated = reader.read_uint8() == 1
    tile.height = reader.read_int32()
    tile.width = reader.read_int32()
    reader.seek(4, io.SEEK_CUR)
    tile.type = reader.read_uint32()
    tile.main_index = reader.read_uint32()
    tile.sub_index = reader.read_uint32()
    tile.rarity_frame_index = reader.read_int32()
    reader.seek(4, io.SEEK_CUR)
    tile.sub_tile_flags = tuple(sub_tile_flags(b) for b in reader.read_bytes(_SUB_TILE_COUNT))
    reader.seek(7, io.SEEK_CUR)
    tile.block_header_pointer = reader.read_int32()
    tile.block_header_size = reader.read_int32()
    tile.blocks = [Block() for _ in range(reader.read_int32())]
    reader.seek(12, io.SEEK_CUR)
    return tile


def _read_blocks(reader: StreamReader, tile: Tile) -> None:
    reader.seek(tile.block_header_pointer, io.SEEK_SET)
    for block in tile.blocks:
        block.x = reader.read_int16()
        block.y = reader.read_int16()
        reader.seek(2, io.SEEK_CUR)
        block.grid_x = reader.read_byte()
        block.grid_y = reader.read_byte()
        block.format = BlockFormat.ISOMETRIC if reader.read_int16() == 1 else BlockFormat.RLE
        block.length = reader.read_int32()
        reader.seek(2, io.SEEK_CUR)
        block.file_offset = reader.read_int32()
    for block in tile.blocks:
        reader.seek(tile.block_header_pointer + block.file_offset, io.SEEK_SET)
        block.encoded_bytes = reader.read_bytes(block.length)


def read_dt1(stream: BinaryIO) -> DT1:
    """Read a version 7.6 DT1 tile set with its block data."""
    reader = StreamReader(stream)
    dt1 = DT1(version_major=reader.read_int32(), version_minor=reader.read_int32())
    if dt1.version_major != 7 or dt1.version_minor != 6:
        raise ValueError("DT1 version not supported")
    reader.seek(260, io.SEEK_CUR)
    number_of_tiles = reader.read_int32()
    body_position = reader.read_int32()
    reader.seek(body_position, io.SEEK_SET)
    dt1.tiles = [_read_tile(reader) for _ in range(number_of_tiles)]
    for tile in dt1.tiles:
        _read_blocks(reader, tile)
        tile.calculate_offsets()
    return dt1