"""Tile type enumeration and level description records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class TileType(IntEnum):
    FLOOR = 0
    LEFT_WALL = 1
    RIGHT_WALL = 2
    RIGHT_PART_OF_NORTH_CORNER_WALL = 3
    LEFT_PART_OF_NORTH_CORNER_WALL = 4
    LEFT_END_WALL = 5
    RIGHT_END_WALL = 6
    SOUTH_CORNER_WALL = 7
    LEFT_WALL_WITH_DOOR = 8
    RIGHT_WALL_WITH_DOOR = 9
    SPECIAL_TILE_1 = 10
    SPECIAL_TILE_2 = 11
    PILLARS_COLUMNS_AND_STANDALONE_OBJECTS = 12
    SHADOW = 13
    TREE = 14
    ROOF = 15
    LOWER_WALLS_EQUIVALENT_TO_LEFT_WALL = 16
    LOWER_WALLS_EQUIVALENT_TO_RIGHT_WALL = 17
    LOWER_WALLS_EQUIVALENT_TO_RIGHT_LEFT_NORTH_CORNER_WALL = 18
    LOWER_WALLS_EQUIVALENT_TO_SOUTH_CORNER_WALL = 19


@dataclass
class LevelType:
    """A level's tile set: the DT1 files it draws from."""

    files: list[str] = field(default_factory=list)
    name: str = ""
    id: int = 0
    act: int = 0
    beta: bool = False
    expansion: bool = False


@dataclass
class LevelPreset:
    """A preset level definition with its DS1 files and generation flags."""

    files: list[str] = field(default_factory=list)
    name: str = ""
    definition_id: int = 0
    level_id: int = 0
    size_x: int = 0
    size_y: int = 0
    pops: int = 0
    pop_pad: int = 0
    dt1_mask: int = 0
    populate: bool = False
    logicals: bool = False
    outdoors: bool = False
    animate: bool = False
    kill_edge: bool = False
    fill_blanks: bool = False
    auto_map: bool = False
    scan: bool = False
    beta: bool = False
    expansion: bool = False