"""Decoding of uncompressed and RLE-compressed true-colour TGA images."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass
from typing import Union

_UNCOMPRESSED_HEADER = bytes([0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0])
_COMPRESSED_HEADER = bytes([0, 0, 10, 0, 0, 0, 0, 0, 0, 0, 0, 0])
_INFO_SIZE = 6


class TgaError(ValueError):
    """Raised when TGA data cannot be decoded."""


@dataclass(frozen=True)
class TextureInfo:
    """A decoded TGA image with pixels in RGB or RGBA order, bottom row first."""

    width: int
    height: int
    bpp: int
    image_data: bytes

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def has_alpha(self) -> bool:
        return self.bpp == 32


def _swap_red_blue(pixel: bytes) -> bytes:
    return bytes((pixel[2], pixel[1], pixel[0])) + pixel[3:]


def _read_uncompressed(stream: io.BytesIO, size: int, bytes_per_pixel: int) -> bytes:
    data = bytearray(stream.read(size))
    if len(data) != size:
        raise TgaError("Could not read image data")
    data[0::bytes_per_pixel], data[2::bytes_per_pixel] = (
        data[2::bytes_per_pixel],
        data[0::bytes_per_pixel],
    )
    return bytes(data)


def _read_pixel(stream: io.BytesIO, bytes_per_pixel: int) -> bytes:
    pixel = stream.read(bytes_per_pixel)
    if len(pixel) != bytes_per_pixel:
        raise TgaError("Could not read image data")
    return _swap_red_blue(pixel)


def _read_compressed(stream: io.BytesIO, pixel_count: int, bytes_per_pixel: int) -> bytes:
    out = bytearray()
    written = 0

    def emit(pixel: bytes) -> None:
        nonlocal written
        if written >= pixel_count:
            raise TgaError("Too many pixels read")
        out.extend(pixel)
        written += 1

    while written < pixel_count:
        chunk = stream.read(1)
        if not chunk:
            raise TgaError("Could not read RLE header")
        header = chunk[0]
        if header < 128:
            # Raw packet: header + 1 literal pixels follow.
            for _ in range(header + 1):
                emit(_read_pixel(stream, bytes_per_pixel))
        else:
            # Run packet: one pixel repeated header - 127 times.
            pixel = _read_pixel(stream, bytes_per_pixel)
            for _ in range(header - 127):
                emit(pixel)
    return bytes(out)


def decode_tga(data: bytes) -> TextureInfo:
    """Decode a type 2 (raw) or type 10 (RLE) TGA image of 24 or 32 bits per pixel."""
    stream = io.BytesIO(bytes(data))
    header = stream.read(len(_UNCOMPRESSED_HEADER))
    if len(header) != len(_UNCOMPRESSED_HEADER):
        raise TgaError("Could not read file header")
    if header == _UNCOMPRESSED_HEADER:
        compressed = False
    elif header == _COMPRESSED_HEADER:
        compressed = True
    else:
        raise TgaError("TGA file must be type 2 or type 10")

    info = stream.read(_INFO_SIZE)
    if len(info) != _INFO_SIZE:
        raise TgaError("Could not read info header")
    width = info[1] * 256 + info[0]
    height = info[3] * 256 + info[2]
    bpp = info[4]
    if width <= 0 or height <= 0 or bpp not in (24, 32):
        raise TgaError("Invalid texture information")

    bytes_per_pixel = bpp // 8
    pixel_count = width * height
    if compressed:
        pixels = _read_compressed(stream, pixel_count, bytes_per_pixel)
    else:
        pixels = _read_uncompressed(stream, pixel_count * bytes_per_pixel, bytes_per_pixel)
    return TextureInfo(width, height, bpp, pixels)


def load_tga(path: Union[str, os.PathLike]) -> TextureInfo:
    """Read and decode a TGA file."""
    with open(path, "rb") as handle:
        return decode_tga(handle.read())