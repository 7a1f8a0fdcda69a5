"""Loading of BMP, TGA and PNG images into raw pixel buffers."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass
from typing import Union

from PIL import Image, UnidentifiedImageError

from . import tga

PathLike = Union[str, os.PathLike]

_BMP_SIZE_OFFSET = 18
_BMP_DATA_OFFSET = 54


class ImageError(ValueError):
    """Raised when an image cannot be decoded."""


@dataclass(frozen=True)
class RawImage:
    """Pixel data in RGB or RGBA order, rows from bottom to top."""

    width: int
    height: int
    has_alpha: bool
    data: bytes


def decode_bmp(data: bytes) -> RawImage:
    """Decode an uncompressed 24-bit single-plane bitmap.

    Rows are taken as tightly packed, three bytes per pixel.
    """
    data = bytes(data)
    if len(data) < _BMP_DATA_OFFSET:
        raise ImageError("Truncated bitmap header")
    width, height = struct.unpack_from("<II", data, _BMP_SIZE_OFFSET)
    planes, bpp = struct.unpack_from("<HH", data, _BMP_SIZE_OFFSET + 8)
    if planes != 1:
        raise ImageError(f"Planes is not 1: {planes}")
    if bpp != 24:
        raise ImageError(f"Bpp is not 24: {bpp}")
    size = width * height * 3
    pixels = bytearray(data[_BMP_DATA_OFFSET:_BMP_DATA_OFFSET + size])
    if len(pixels) != size:
        raise ImageError("Error reading image data")
    pixels[0::3], pixels[2::3] = pixels[2::3], pixels[0::3]
    return RawImage(width, height, False, bytes(pixels))


def load_bmp(path: PathLike) -> RawImage:
    """Read and decode a 24-bit bitmap file."""
    with open(path, "rb") as handle:
        return decode_bmp(handle.read())


def load_tga(path: PathLike) -> RawImage:
    """Read a TGA file; fails with ``tga.TgaError`` on bad data."""
    info = tga.load_tga(path)
    return RawImage(info.width, info.height, info.has_alpha, info.image_data)


def load_png(path: PathLike) -> RawImage:
    """Read an RGB or RGBA PNG (palettes expanded), flipped to bottom-up rows."""
    try:
        image = Image.open(path)
    except UnidentifiedImageError as exc:
        raise ImageError(f"Not a PNG image: {path}") from exc
    with image:
        if image.format != "PNG":
            raise ImageError(f"Not a PNG image: {path}")
        mode = image.mode
        if mode in ("P", "PA"):
            has_alpha = mode == "PA" or "transparency" in image.info
            image = image.convert("RGBA" if has_alpha else "RGB")
        elif mode == "RGBA":
            has_alpha = True
        elif mode == "RGB":
            has_alpha = False
        else:
            raise ImageError(f"Color type {mode} not supported.")
        flipped = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        return RawImage(image.width, image.height, has_alpha, flipped.tobytes())