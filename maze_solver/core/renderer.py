#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
渲染模块：路径动画帧序列与静态结果图

功能：
- 动画：固定帧率，按"每帧步数"预算在路径上取快照，每帧为索引色图
- 静态图：按标签上色后用PATH颜色覆盖路径
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np
from loguru import logger

from maze_solver.common.constants import CENTISECONDS_PER_SECOND, DEFAULT_FRAMES_PER_SECOND
from maze_solver.common.exceptions import BadDurationError
from maze_solver.core.palette import CellLabel, Palette

Pixel = Tuple[int, int]  # (row, col)


@dataclass
class AnimationFrame:
    """动画帧：调色板索引数组 + 延时（1/100 秒）"""
    pixels: np.ndarray  # HxW uint8
    delay_cs: int


@dataclass
class Animation:
    """索引色动画，所有帧共享同一个调色板"""
    palette: Palette
    frames: List[AnimationFrame] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def total_delay_cs(self) -> int:
        return sum(frame.delay_cs for frame in self.frames)


def render_animation(
    grid: np.ndarray,
    path: Sequence[Pixel],
    palette: Palette,
    duration: float,
    frames_per_second: int = DEFAULT_FRAMES_PER_SECOND,
) -> Animation:
    """
    生成逐步绘制路径的动画帧序列

    每帧步数 s = len(path) / (fps * duration)。遍历路径时维护剩余预算，
    预算不足1步或到达最后一步时先对当前底图取快照，再绘制该步。
    因此最后一帧不包含终点格。

    Args:
        grid: HxW 语义栅格
        path: 路径（不含起点，含终点）
        palette: 调色板
        duration: 期望动画时长（秒），必须 > 0
        frames_per_second: 帧率，必须整除100

    Returns:
        Animation

    Raises:
        BadDurationError: duration 非正数或非有限值
        ValueError: 路径为空，或帧率不能整除100
    """
    if not math.isfinite(duration) or duration <= 0:
        raise BadDurationError(f"动画时长必须为正数: {duration}")
    if len(path) == 0:
        raise ValueError("路径为空，无法生成动画")
    if frames_per_second <= 0 or CENTISECONDS_PER_SECOND % frames_per_second != 0:
        raise ValueError(f"帧率必须整除{CENTISECONDS_PER_SECOND}: {frames_per_second}")

    delay_per_frame = CENTISECONDS_PER_SECOND // frames_per_second
    steps_per_frame = len(path) / (frames_per_second * duration)
    steps_remaining = steps_per_frame

    base = np.array(grid, dtype=np.uint8, copy=True)
    animation = Animation(palette=palette)

    last_step = len(path) - 1
    for i, (y, x) in enumerate(path):
        if steps_remaining < 1.0 or i == last_step:
            steps_remaining += steps_per_frame
            animation.frames.append(AnimationFrame(pixels=base.copy(), delay_cs=delay_per_frame))

        base[y, x] = CellLabel.PATH
        steps_remaining -= 1.0

    logger.debug(
        f"动画生成完成: 路径长度={len(path)}, 帧数={len(animation)}, "
        f"每帧步数={steps_per_frame:.3f}, 总延时={animation.total_delay_cs / CENTISECONDS_PER_SECOND:.2f}s"
    )
    return animation


def render_still(grid: np.ndarray, path: Sequence[Pixel], palette: Palette) -> np.ndarray:
    """
    生成静态结果图

    先按标签填色，再将路径上的格子覆盖为PATH颜色（终点同样被覆盖，起点保留）。

    Args:
        grid: HxW 语义栅格
        path: 路径
        palette: 调色板

    Returns:
        HxWx3 uint8 RGB 图
    """
    colors = palette.ToArray()
    image = colors[np.asarray(grid, dtype=np.intp)]

    if len(path) > 0:
        rows, cols = zip(*path)
        image[list(rows), list(cols)] = colors[CellLabel.PATH]

    return image
