"""Palette files: base colours plus the colour transform tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

NUM_PALETTE_COLORS = 256
NUM_TEXT_COLORS = 13
LIGHT_LEVEL_VARIATIONS = 32
INV_COLOR_VARIATIONS = 16
ALPHA_BLEND_COARSE = 3
ALPHA_BLEND_FINE = 256
ADDITIVE_BLENDS = 256
MULTIPLY_BLENDS = 256
HUE_VARIATIONS = 111
UNKNOWN_VARIATIONS = 14
COMPONENT_BLENDS = 256
TEXT_SHIFTS = 13


@dataclass
class PaletteColor:
    """An RGBA colour with 8-bit components."""

    red: int = 0
    green: int = 0
    blue: int = 0
    alpha: int = 0

    def packed(self) -> int:
        """Pack as a 32-bit integer with red in the lowest byte."""
        return self.red | (self.green << 8) | (self.blue << 16) | (self.alpha << 24)


@dataclass
class Palette:
    """A base palette and, for full palette files, its transform tables."""

    base_palette: list[PaletteColor]
    light_level_variations: list[bytes] = field(default_factory=list)
    inv_color_variations: list[bytes] = field(default_factory=list)
    selected_unit_shift: bytes = b""
    alpha_blend: list[list[bytes]] = field(default_factory=list)
    additive_blend: list[bytes] = field(default_factory=list)
    multiplicative_blend: list[bytes] = field(default_factory=list)
    hue_variations: list[bytes] = field(default_factory=list)
    red_tones: bytes = b""
    green_tones: bytes = b""
    blue_tones: bytes = b""
    unknown_variations: list[bytes] = field(default_factory=list)
    max_component_blend: list[bytes] = field(default_factory=list)
    darkened_color_shift: bytes = b""
    text_colors: list[PaletteColor] = field(default_factory=list)
    text_color_shifts: list[bytes] = field(default_factory=list)


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise EOFError(f"expected {count} bytes, got {len(data)}")
    return bytes(data)


def _decode_colors(stream: BinaryIO, color_bytes: int, count: int) -> list[PaletteColor]:
    if count < 1:
        raise ValueError(f"Unexpected number of colors: {count}")
    if color_bytes not in (1, 3, 4):
        raise ValueError(f"Invalid number of color bytes: {color_bytes}")
    colors = []
    for _ in range(count):
        raw = _read_exact(stream, color_bytes)
        if color_bytes == 1:
            colors.append(PaletteColor(raw[0], raw[0], raw[0], 0xFF))
        else:
            colors.append(PaletteColor(raw[0], raw[1], raw[2], 0xFF))
    colors[0].alpha = 0
    return colors


def _transform_single(stream: BinaryIO) -> bytes:
    return _read_exact(stream, NUM_PALETTE_COLORS)


def _transform_multi(stream: BinaryIO, variations: int) -> list[bytes]:
    return [_transform_single(stream) for _ in range(variations)]


def read_palette(stream: BinaryIO, is_dat: bool) -> Palette:
    """Read a palette; a .dat palette holds only 256 three-byte colours."""
    if is_dat:
        return Palette(base_palette=_decode_colors(stream, 3, NUM_PALETTE_COLORS))

    base = _decode_colors(stream, 4, NUM_PALETTE_COLORS)
    light = _transform_multi(stream, LIGHT_LEVEL_VARIATIONS)
    inv = _transform_multi(stream, INV_COLOR_VARIATIONS)
    selected = _transform_single(stream)
    alpha = [_transform_multi(stream, ALPHA_BLEND_FINE) for _ in range(ALPHA_BLEND_COARSE)]
    additive = _transform_multi(stream, ADDITIVE_BLENDS)
    multiplicative = _transform_multi(stream, MULTIPLY_BLENDS)
    hue = _transform_multi(stream, HUE_VARIATIONS)
    red = _transform_single(stream)
    green = _transform_single(stream)
    blue = _transform_single(stream)
    unknown = _transform_multi(stream, UNKNOWN_VARIATIONS)
    max_component = _transform_multi(stream, COMPONENT_BLENDS)
    darkened = _transform_single(stream)
    text_colors = _decode_colors(stream, 3, TEXT_SHIFTS)
    text_shifts = _transform_multi(stream, TEXT_SHIFTS)
    return Palette(
        base_palette=base,
        light_level_variations=light,
        inv_color_variations=inv,
        selected_unit_shift=selected,
        alpha_blend=alpha,
        additive_blend=additive,
        multiplicative_blend=multiplicative,
        hue_variations=hue,
        red_tones=red,
        green_tones=green,
        blue_tones=blue,
        unknown_variations=unknown,
        max_component_blend=max_component,
        darkened_color_shift=darkened,
        text_colors=text_colors,
        text_color_shifts=text_shifts,
    )