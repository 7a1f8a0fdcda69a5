import struct

import pytest
from PIL import Image

from blitzengine.images import (
    ImageError,
    RawImage,
    decode_bmp,
    load_bmp,
    load_png,
    load_tga,
)
from blitzengine.tga import TgaError


def _bmp(width, height, pixels, planes=1, bpp=24):
    file_header = b"BM" + struct.pack("<IHHI", 54 + len(pixels), 0, 0, 54)
    info_header = struct.pack("<IiiHHIIiiII", 40, width, height, planes, bpp, 0, len(pixels), 0, 0, 0, 0)
    return file_header + info_header + pixels


def test_decode_bmp_swaps_to_rgb():
    image = decode_bmp(_bmp(2, 1, bytes([1, 2, 3, 4, 5, 6])))
    assert image == RawImage(2, 1, False, bytes([3, 2, 1, 6, 5, 4]))


def test_bmp_header_is_54_bytes():
    data = _bmp(1, 1, bytes([9, 8, 7]))
    assert len(data) == 57
    assert decode_bmp(data).data == bytes([7, 8, 9])


def test_decode_bmp_rejects_planes():
    with pytest.raises(ImageError):
        decode_bmp(_bmp(1, 1, bytes(3), planes=2))


def test_decode_bmp_rejects_bpp():
    with pytest.raises(ImageError):
        decode_bmp(_bmp(1, 1, bytes(4), bpp=32))


def test_decode_bmp_truncated_data():
    with pytest.raises(ImageError):
        decode_bmp(_bmp(2, 2, bytes(6)))


def test_decode_bmp_truncated_header():
    with pytest.raises(ImageError):
        decode_bmp(b"BM" + bytes(10))


def test_load_bmp_from_file(tmp_path):
    path = tmp_path / "image.bmp"
    path.write_bytes(_bmp(1, 2, bytes([1, 2, 3, 4, 5, 6])))
    image = load_bmp(path)
    assert (image.width, image.height) == (1, 2)
    assert image.data == bytes([3, 2, 1, 6, 5, 4])


def test_load_bmp_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_bmp(tmp_path / "absent.bmp")


def test_load_tga_wraps_texture(tmp_path):
    header = bytes([0, 0, 2, 0, 0, 0, 0, 0, 0, 0, 0, 0]) + struct.pack("<HHBB", 1, 1, 32, 0)
    path = tmp_path / "image.tga"
    path.write_bytes(header + bytes([1, 2, 3, 4]))
    image = load_tga(path)
    assert image == RawImage(1, 1, True, bytes([3, 2, 1, 4]))


def test_load_tga_bad_file(tmp_path):
    path = tmp_path / "bad.tga"
    path.write_bytes(bytes(20))
    with pytest.raises(TgaError):
        load_tga(path)


def test_load_png_rgb_is_flipped(tmp_path):
    top = (255, 0, 0)
    bottom = (0, 0, 255)
    img = Image.new("RGB", (1, 2))
    img.putpixel((0, 0), top)
    img.putpixel((0, 1), bottom)
    path = tmp_path / "image.png"
    img.save(path)
    image = load_png(path)
    assert (image.width, image.height, image.has_alpha) == (1, 2, False)
    assert image.data == bytes(bottom + top)


def test_load_png_rgba(tmp_path):
    colour = (10, 20, 30, 40)
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (2, 1), colour).save(path)
    image = load_png(path)
    assert image.has_alpha is True
    assert image.data == bytes(colour) * 2


def test_load_png_palette_expanded(tmp_path):
    img = Image.new("P", (1, 1), 0)
    img.putpalette([10, 20, 30] + [0] * 765)
    path = tmp_path / "palette.png"
    img.save(path)
    image = load_png(path)
    assert image.has_alpha is False
    assert image.data == bytes([10, 20, 30])


def test_load_png_grayscale_unsupported(tmp_path):
    path = tmp_path / "gray.png"
    Image.new("L", (1, 1), 128).save(path)
    with pytest.raises(ImageError):
        load_png(path)


def test_load_png_rejects_other_formats(tmp_path):
    path = tmp_path / "image.bmp"
    Image.new("RGB", (1, 1)).save(path, format="BMP")
    with pytest.raises(ImageError):
        load_png(path)


def test_load_png_rejects_garbage(tmp_path):
    path = tmp_path / "garbage.png"
    path.write_bytes(b"not an image at all")
    with pytest.raises(ImageError):
        load_png(path)