"""Placeholder PNG images written to temporary files."""

from __future__ import annotations

import struct
import tempfile
import zlib
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, BinaryIO

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_BLACK = (0, 0, 0)
_WHITE = (0xFF, 0xFF, 0xFF)
_GRID_STEP = 4


@dataclass(frozen=True)
class RasterImage:
    """An RGB image stored row by row, three bytes per pixel."""

    width: int
    height: int
    pixels: bytes

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        offset = (y * self.width + x) * 3
        red, green, blue = self.pixels[offset:offset + 3]
        return red, green, blue

    def rows(self) -> list[bytes]:
        """Return the pixel data split into rows."""
        stride = self.width * 3
        return [self.pixels[i:i + stride] for i in range(0, len(self.pixels), stride)]


def create_temp_file(pattern: str) -> BinaryIO:
    """Create a temporary file named after pattern, '*' being the random part."""
    prefix, _, suffix = pattern.rpartition("*")
    if not _:
        prefix, suffix = pattern, ""
    return tempfile.NamedTemporaryFile(
        mode="w+b", prefix=prefix, suffix=suffix, delete=False
    )


def _chunk(kind: bytes, data: bytes) -> bytes:
    crc = zlib.crc32(kind + data) & 0xFFFFFFFF
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", crc)


def encode_png(stream: BinaryIO, image: RasterImage) -> None:
    """Write image to stream as an 8-bit RGB PNG."""
    if image.width <= 0 or image.height <= 0:
        raise ValueError(
            f"png: invalid image size: {image.width}x{image.height}"
        )
    header = struct.pack(">IIBBBBB", image.width, image.height, 8, 2, 0, 0, 0)
    raw = b"".join(b"\x00" + row for row in image.rows())
    stream.write(_PNG_SIGNATURE)
    stream.write(_chunk(b"IHDR", header))
    stream.write(_chunk(b"IDAT", zlib.compress(raw)))
    stream.write(_chunk(b"IEND", b""))


def _grid_colour(x: int, y: int) -> tuple[int, int, int]:
    if y > 0 and x % _GRID_STEP == 0 and y % _GRID_STEP == 0:
        return _BLACK
    return _WHITE


def draw_grid(width: int, height: int) -> RasterImage:
    """Draw a white image dotted with black pixels every four pixels."""
    if width < 0 or height < 0:
        raise ValueError(f"negative image size: {width}x{height}")
    pixels = bytearray()
    for y in range(height):
        for x in range(width):
            pixels.extend(_grid_colour(x, y))
    return RasterImage(width, height, bytes(pixels))


class Image:
    """Produces placeholder PNG image files."""

    def __init__(
        self,
        faker: Any = None,
        temp_file_creator: Callable[[str], BinaryIO] = create_temp_file,
        png_encoder: Callable[[BinaryIO, RasterImage], None] = encode_png,
    ) -> None:
        self.faker = faker
        self.temp_file_creator = temp_file_creator
        self.png_encoder = png_encoder

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.faker!r})"

    def image(self, width: int, height: int) -> BinaryIO:
        """Write a grid image of the given size to a new temporary PNG file.

        The open file is returned; errors from file creation or encoding
        propagate unchanged.
        """
        picture = draw_grid(width, height)
        stream = self.temp_file_creator("fake-img-*.png")
        try:
            self.png_encoder(stream, picture)
        except BaseException:
            stream.close()
            raise
        return stream