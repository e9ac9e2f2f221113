#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试公共fixture
"""

from typing import Sequence

import cv2
import numpy as np
import pytest
from loguru import logger

from maze_solver.core.palette import Palette

SPACE = (255, 255, 255)
BLOCK = (0, 0, 0)
SOURCE = (255, 0, 0)
DESTINATION = (0, 0, 255)
PATH = (0, 255, 0)

COLOR_ARGS = ["255,255,255", "0,0,0", "255,0,0", "0,0,255", "0,255,0"]

# 字符地图：. 空地, # 墙, S 起点, D 终点
_CHAR_COLORS = {".": SPACE, "#": BLOCK, "S": SOURCE, "D": DESTINATION}


@pytest.fixture
def palette() -> Palette:
    return Palette([SPACE, BLOCK, SOURCE, DESTINATION, PATH])


def rgba_from_rows(rows: Sequence[str]) -> np.ndarray:
    """由字符地图生成 HxWx4 RGBA 像素"""
    height, width = len(rows), len(rows[0])
    pixels = np.zeros((height, width, 4), dtype=np.uint8)
    pixels[:, :, 3] = 255
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            pixels[y, x, :3] = _CHAR_COLORS[ch]
    return pixels


def write_maze_png(path, rows: Sequence[str]) -> None:
    """由字符地图写出 PNG 文件"""
    rgba = rgba_from_rows(rows)
    assert cv2.imwrite(str(path), cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA))


@pytest.fixture
def maze_png(tmp_path):
    def _make(rows: Sequence[str], name: str = "maze.png"):
        path = tmp_path / name
        write_maze_png(path, rows)
        return path
    return _make


@pytest.fixture(autouse=True)
def _reset_logger():
    """命令行测试会重新配置 loguru，测试结束后移除所有 sink"""
    yield
    logger.remove()
