#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图片分类模块：像素 -> 语义栅格

功能：
- 按最小平方颜色距离将每个像素归类为空地/墙/起点/终点
- 全图中与起点颜色最接近的像素作为唯一起点，终点同理
- 其余归类为起点/终点的像素视为空地
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from loguru import logger

from maze_solver.common.constants import PALETTE_SIZE
from maze_solver.common.exceptions import BadPaletteError, DecodeError, EmptyImageError
from maze_solver.core.palette import CellLabel, Palette

Pixel = Tuple[int, int]  # (row, col)

# 参与分类的标签，顺序即平局时的优先级
_CLASSIFY_LABELS = (CellLabel.SPACE, CellLabel.BLOCK, CellLabel.SOURCE, CellLabel.DESTINATION)


@dataclass(frozen=True)
class ClassifiedMaze:
    """分类结果"""
    grid: np.ndarray  # HxW uint8，取值为 CellLabel（不含PATH），只读
    source: Pixel
    destination: Pixel

    @property
    def height(self) -> int:
        return int(self.grid.shape[0])

    @property
    def width(self) -> int:
        return int(self.grid.shape[1])


def color_distances(pixels: np.ndarray, palette: Palette) -> np.ndarray:
    """
    计算每个像素到 SPACE/BLOCK/SOURCE/DESTINATION 的平方颜色距离

    Args:
        pixels: HxWxC uint8，前三个通道为 R,G,B（alpha忽略）
        palette: 调色板

    Returns:
        HxWx4 int32 距离数组，最后一维按 CellLabel 顺序
    """
    height, width = pixels.shape[:2]
    distances = np.zeros((height, width, len(_CLASSIFY_LABELS)), dtype=np.int32)

    # 逐标签、逐通道累加，额外内存只有一个 HxW int32 平面
    for plane, label in enumerate(_CLASSIFY_LABELS):
        ref = palette[label]
        out = distances[:, :, plane]
        for channel in range(3):
            delta = pixels[:, :, channel].astype(np.int32)
            delta -= ref[channel]
            delta *= delta
            out += delta

    return distances


def classify_image(pixels: np.ndarray, palette: Palette) -> ClassifiedMaze:
    """
    将 RGBA 像素缓冲区分类为语义栅格

    Args:
        pixels: HxWxC uint8 直通alpha像素（C >= 3）
        palette: 5色调色板

    Returns:
        ClassifiedMaze

    Raises:
        BadPaletteError: 调色板不是5个颜色
        EmptyImageError: 图片宽或高为0
        DecodeError: 像素缓冲区形状不正确
    """
    if len(palette) != PALETTE_SIZE:
        raise BadPaletteError(f"调色板需要{PALETTE_SIZE}个颜色，实际为{len(palette)}个")
    if pixels.ndim != 3 or pixels.shape[2] < 3:
        raise DecodeError(f"像素缓冲区形状不正确: {pixels.shape}")

    height, width = pixels.shape[:2]
    if height == 0 or width == 0:
        raise EmptyImageError(f"图片尺寸为空: {width}x{height}")

    distances = color_distances(pixels, palette)

    # argmin 平局取第一个，即调色板顺序
    grid = np.argmin(distances, axis=-1).astype(np.uint8)

    # 全局最近的起点/终点像素，平局取行优先扫描顺序的第一个
    source_index = int(np.argmin(distances[:, :, CellLabel.SOURCE]))
    destination_index = int(np.argmin(distances[:, :, CellLabel.DESTINATION]))
    source = divmod(source_index, width)
    destination = divmod(destination_index, width)

    grid[(grid == CellLabel.SOURCE) | (grid == CellLabel.DESTINATION)] = CellLabel.SPACE
    grid[source] = CellLabel.SOURCE
    grid[destination] = CellLabel.DESTINATION
    grid.setflags(write=False)

    logger.debug(
        f"像素分类完成: size=({width}, {height}), "
        f"block={int(np.count_nonzero(grid == CellLabel.BLOCK))}, "
        f"source={source} (d={int(distances[source][CellLabel.SOURCE])}), "
        f"destination={destination} (d={int(distances[destination][CellLabel.DESTINATION])})"
    )

    return ClassifiedMaze(grid=grid, source=source, destination=destination)
