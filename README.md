# libabyss

Readers for the data formats of a classic isometric action-RPG, plus a few
small helpers that a game engine built on them needs.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is included

- `libabyss.streamreader`: `StreamReader` reads little-endian integers
  (`read_uint8` to `read_int64`), raw bytes and NUL-terminated strings from any
  seekable binary stream, and raises `EOFError` when the stream runs out.
  `stream_size` gives a stream's length without moving its position.
- `libabyss.ringbuffer`: `RingBuffer` is a thread-safe fixed-size byte ring.
  Pushing more than its free space raises `RingBufferOverflow`; `read_data(n)`
  always returns `n` bytes, zero-filled past the data that was available.
- `libabyss.inifile`: `IniFile` reads an INI file with case-insensitive
  categories and names and offers `get_value`, `get_bool`, `get_int`,
  `get_float` and `set_value`. Missing values read as an empty string;
  malformed lines are logged and skipped.
- `libabyss.levels`: the `TileType` enumeration and the `LevelType` and
  `LevelPreset` records.
- `libabyss.pngloader`: `load_png` decodes a PNG that can be expressed as
  8-bit RGBA into a `PngImage` of `0xRRGGBBAA` pixels, bottom row first.
- `libabyss.palette`: `read_palette` reads a `.dat` palette (256 three-byte
  colours) or a full palette with all its transform tables, giving a `Palette`
  of `PaletteColor` entries. `PaletteColor.packed()` packs a colour with red in
  the lowest byte.
- `libabyss.tbl`: `read_tbl` reads a string table into a dictionary; each
  entry appears under its key and under `#<index>`.
- `libabyss.dc6`: `read_dc6` decodes DC6 sprites into `DC6` →
  `DC6Direction` → `DC6Frame`, each frame holding `width * height` palette
  indices in `index_data`.
- `libabyss.dt1`: `read_dt1` reads version 7.6 DT1 tile sets into `DT1`,
  `Tile` and `Block` records, with material and sub-tile flags unpacked.
- `libabyss.ds1`: `read_ds1` reads DS1 map presets: file list, wall, floor
  and shadow layers, objects and substitution groups. NPC path data is skipped.

Malformed data is reported with `ValueError` (or `EOFError` for truncated
streams read directly through `StreamReader`).

## Example

```python
from libabyss.palette import read_palette
from libabyss.dc6 import read_dc6

with open("pal.dat", "rb") as f:
    palette = read_palette(f, True)

with open("cursor.dc6", "rb") as f:
    sprite = read_dc6(f)

frame = sprite.directions[0].frames[0]
colors = [palette.base_palette[i].packed() for i in frame.index_data]
```

```python
from libabyss.inifile import IniFile

ini = IniFile("config.ini")
fullscreen = ini.get_bool("video", "fullscreen")
```

## What it does not do

The package reads individual files; it does not open game archives, play
audio, draw anything, or assemble a playable map from DS1 stamps and DT1
tiles. Those are left to the program that uses it.