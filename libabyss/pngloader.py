"""Loading PNG images into packed RGBA pixel data."""

from __future__ import annotations

import io
import struct
from dataclasses import dataclass
from typing import BinaryIO

from PIL import Image

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@dataclass(frozen=True)
class PngImage:
    """Pixels as 0xRRGGBBAA integers, rows stored bottom-up."""

    width: int
    height: int
    pixels: tuple[int, ...]

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


def _is_rgba_convertible(image: Image.Image) -> bool:
    # Palette and RGB images need a tRNS chunk to provide the fourth channel.
    if image.mode == "RGBA":
        return True
    if image.mode in ("P", "RGB"):
        return "transparency" in image.info
    return False


def load_png(stream: BinaryIO) -> PngImage:
    """Decode a PNG from a binary stream; it must be expressible as 8-bit RGBA."""
    signature = stream.read(len(PNG_SIGNATURE))
    if len(signature) != len(PNG_SIGNATURE):
        raise ValueError("Failed to read stream while loading PNG image.")
    if signature != PNG_SIGNATURE:
        raise ValueError("Invalid signature while reading PNG image.")

    try:
        image = Image.open(io.BytesIO(signature + stream.read()), formats=["PNG"])
        image.load()
    except (OSError, SyntaxError, ValueError) as exc:
        raise ValueError("Failed to load PNG.") from exc

    if not _is_rgba_convertible(image):
        raise ValueError("PNG must convertable to RGBA format.")

    rgba = image.convert("RGBA")
    width, height = rgba.size
    data = rgba.tobytes()
    stride = width * 4
    flipped = b"".join(
        data[row * stride:(row + 1) * stride] for row in reversed(range(height))
    )
    pixels = struct.unpack(f">{width * height}I", flipped)
    return PngImage(width=width, height=height, pixels=pixels)