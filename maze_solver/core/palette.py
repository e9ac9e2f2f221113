#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
颜色模型：语义标签与5色调色板

功能：
- 定义栅格语义标签（空地、墙、起点、终点、路径）
- 解析命令行颜色参数 "R,G,B"
- 调色板按语义标签顺序存放颜色
"""

import re
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from maze_solver.common.constants import PALETTE_SIZE
from maze_solver.common.exceptions import BadColorError, BadPaletteError

RGB = Tuple[int, int, int]

_CHANNEL_PATTERN = re.compile(r"[0-9]+")


class CellLabel(IntEnum):
    """栅格语义标签，数值即调色板索引"""
    SPACE = 0
    BLOCK = 1
    SOURCE = 2
    DESTINATION = 3
    PATH = 4


def parse_color(text: str) -> RGB:
    """
    解析 "R,G,B" 格式的颜色

    Args:
        text: 三个0-255的十进制整数，逗号分隔，不含空格

    Returns:
        (r, g, b)

    Raises:
        BadColorError: 字段数量不对、非整数或超出范围
    """
    fields = text.split(",")
    if len(fields) != 3:
        raise BadColorError(f"invalid RGB format: {text!r}")

    channels = []
    for field in fields:
        if not _CHANNEL_PATTERN.fullmatch(field):
            raise BadColorError(f"invalid RGB format: {text!r}")
        value = int(field)
        if value > 255:
            raise BadColorError(f"invalid RGB values: {text!r}")
        channels.append(value)

    return channels[0], channels[1], channels[2]


class Palette:
    """
    5色调色板

    按 CellLabel 顺序保存 SPACE、BLOCK、SOURCE、DESTINATION、PATH 的颜色。
    对象不可变，动画的所有帧共享同一个调色板。

    示例:
        ```python
        palette = Palette([(255, 255, 255), (0, 0, 0), (255, 0, 0), (0, 0, 255), (0, 255, 0)])
        palette[CellLabel.PATH]  # (0, 255, 0)
        ```
    """

    def __init__(self, colors: Iterable[Sequence[int]]):
        colors = [tuple(int(c) for c in color) for color in colors]
        if len(colors) != PALETTE_SIZE:
            raise BadPaletteError(f"调色板需要{PALETTE_SIZE}个颜色，实际为{len(colors)}个")
        for color in colors:
            if len(color) != 3 or any(c < 0 or c > 255 for c in color):
                raise BadColorError(f"invalid RGB values: {color}")
        self.colors_: Tuple[RGB, ...] = tuple(colors)

    def __getitem__(self, label: int) -> RGB:
        return self.colors_[label]

    def __len__(self) -> int:
        return len(self.colors_)

    def __iter__(self):
        return iter(self.colors_)

    def __eq__(self, other) -> bool:
        return isinstance(other, Palette) and self.colors_ == other.colors_

    def __hash__(self) -> int:
        return hash(self.colors_)

    def __repr__(self) -> str:
        return f"Palette({list(self.colors_)})"

    def ToArray(self) -> np.ndarray:
        """返回 (5, 3) uint8 数组，行号即 CellLabel"""
        return np.array(self.colors_, dtype=np.uint8)

    def ToFlatList(self) -> List[int]:
        """返回 [r0, g0, b0, r1, ...]，用于索引色图片"""
        return [c for color in self.colors_ for c in color]


def parse_palette(texts: Sequence[str]) -> Palette:
    """
    解析颜色参数列表为调色板

    Raises:
        BadPaletteError: 颜色数量不是5个
        BadColorError: 任一颜色格式错误
    """
    if len(texts) != PALETTE_SIZE:
        raise BadPaletteError(f"调色板需要{PALETTE_SIZE}个颜色，实际为{len(texts)}个")
    return Palette(parse_color(text) for text in texts)
