#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图片读写测试
"""

import cv2
import numpy as np
import pytest
from PIL import Image

from maze_solver.common.exceptions import BadArgsError, DecodeError, ImageIOError
from maze_solver.core.palette import CellLabel
from maze_solver.core.renderer import render_animation
from maze_solver.utils.image_io import (
    output_kind,
    read_image,
    sniff_format,
    to_rgba,
    write_gif,
    write_png,
)

from conftest import BLOCK, PATH, SOURCE, SPACE, rgba_from_rows


def test_read_png_rgba(maze_png):
    path = maze_png(["S.#", "..D"])

    pixels = read_image(path)

    np.testing.assert_array_equal(pixels, rgba_from_rows(["S.#", "..D"]))


def test_read_png_without_alpha(tmp_path):
    rgb = np.zeros((2, 2, 3), dtype=np.uint8)
    rgb[0, 1] = (10, 20, 30)
    path = tmp_path / "rgb.png"
    cv2.imwrite(str(path), cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR))

    pixels = read_image(path)

    assert pixels.shape == (2, 2, 4)
    assert tuple(pixels[0, 1]) == (10, 20, 30, 255)


def test_read_grayscale_jpeg(tmp_path):
    gray = np.full((8, 8), 200, dtype=np.uint8)
    path = tmp_path / "gray.jpg"
    cv2.imwrite(str(path), gray)

    pixels = read_image(path)

    assert pixels.shape == (8, 8, 4)
    assert np.all(pixels[:, :, 3] == 255)
    assert np.all(pixels[:, :, 0] == pixels[:, :, 1])
    assert np.all(pixels[:, :, 1] == pixels[:, :, 2])


def test_sixteen_bit_png_keeps_high_byte(tmp_path):
    deep = np.zeros((1, 2, 3), dtype=np.uint16)
    deep[0, 0] = (0x1234, 0xFF00, 0x00FF)  # BGR
    path = tmp_path / "deep.png"
    cv2.imwrite(str(path), deep)

    pixels = read_image(path)

    assert pixels.dtype == np.uint8
    assert tuple(pixels[0, 0]) == (0x00, 0xFF, 0x12, 255)


def test_to_rgba_channel_layouts():
    bgra = np.array([[[1, 2, 3, 4]]], dtype=np.uint8)
    assert tuple(to_rgba(bgra)[0, 0]) == (3, 2, 1, 4)
    gray = np.array([[[9]]], dtype=np.uint8)
    assert tuple(to_rgba(gray)[0, 0]) == (9, 9, 9, 255)
    with pytest.raises(DecodeError):
        to_rgba(np.zeros((1, 1, 3), dtype=np.float32))


def test_read_garbage_is_decode_error(tmp_path):
    path = tmp_path / "garbage.png"
    path.write_bytes(b"definitely not an image")
    with pytest.raises(DecodeError):
        read_image(path)


def test_read_empty_file_is_decode_error(tmp_path):
    path = tmp_path / "empty.png"
    path.write_bytes(b"")
    with pytest.raises(DecodeError):
        read_image(path)


def test_read_missing_file_is_io_error(tmp_path):
    with pytest.raises(ImageIOError):
        read_image(tmp_path / "missing.png")


def test_sniff_format():
    assert sniff_format(b"\x89PNG\r\n\x1a\n....") == "png"
    assert sniff_format(b"\xff\xd8\xff\xe0") == "jpeg"
    assert sniff_format(b"hello") == "unknown"


@pytest.mark.parametrize("name, kind", [
    ("out.gif", "animation"),
    ("OUT.GIF", "animation"),
    ("out.png", "still"),
])
def test_output_kind(name, kind):
    assert output_kind(name) == kind


@pytest.mark.parametrize("name", ["out.jpg", "out", "out.gif.txt"])
def test_output_kind_rejects_other_suffix(name):
    with pytest.raises(BadArgsError):
        output_kind(name)


def test_write_png_exact_colors(tmp_path):
    rgb = np.array([[SPACE, BLOCK], [SOURCE, PATH]], dtype=np.uint8)
    path = tmp_path / "out.png"

    write_png(path, rgb)

    decoded = cv2.cvtColor(cv2.imread(str(path), cv2.IMREAD_UNCHANGED), cv2.COLOR_BGR2RGB)
    np.testing.assert_array_equal(decoded, rgb)


def test_write_png_into_missing_directory(tmp_path):
    with pytest.raises(ImageIOError):
        write_png(tmp_path / "nope" / "out.png", np.zeros((1, 1, 3), dtype=np.uint8))


def test_write_gif(tmp_path, palette):
    grid = np.zeros((1, 6), dtype=np.uint8)
    grid[0, 0] = CellLabel.SOURCE
    grid[0, 5] = CellLabel.DESTINATION
    path = [(0, x) for x in range(1, 6)]
    animation = render_animation(grid, path, palette, 4.0)
    out = tmp_path / "out.gif"

    write_gif(out, animation)

    with Image.open(out) as gif:
        assert gif.format == "GIF"
        assert gif.size == (6, 1)
        assert gif.getpalette()[:15] == palette.ToFlatList()
        assert gif.info["duration"] == 40
        assert gif.n_frames == len(animation)

        gif.seek(gif.n_frames - 1)
        last = np.array(gif.convert("RGB"))
    assert tuple(last[0, 0]) == SOURCE
    assert tuple(last[0, 4]) == PATH
    assert tuple(last[0, 5]) == (0, 0, 255)


def test_write_gif_requires_frames(tmp_path, palette):
    from maze_solver.core.renderer import Animation

    with pytest.raises(ImageIOError):
        write_gif(tmp_path / "out.gif", Animation(palette=palette))


def test_write_png_replaces_existing_file(tmp_path):
    out = tmp_path / "out.png"
    out.write_bytes(b"old")

    write_png(out, np.full((2, 2, 3), 7, dtype=np.uint8))

    decoded = cv2.imread(str(out), cv2.IMREAD_UNCHANGED)
    assert decoded.shape == (2, 2, 3)
    assert list(tmp_path.iterdir()) == [out]


def test_failed_write_keeps_existing_file(tmp_path, monkeypatch):
    out = tmp_path / "out.png"
    out.write_bytes(b"previous result")

    def failing_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("maze_solver.utils.image_io.os.replace", failing_replace)
    with pytest.raises(ImageIOError):
        write_png(out, np.zeros((2, 2, 3), dtype=np.uint8))

    assert out.read_bytes() == b"previous result"
    assert not (tmp_path / ".out.png.tmp").exists()
