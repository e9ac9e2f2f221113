#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MazeSolver

中间层：
- 读取并解码输入图片
- 像素分类 → 语义栅格 + 起点/终点
- BFS 求最短路径
- 按输出后缀生成 GIF 动画或 PNG 静态图并写入文件（先写临时文件再替换）
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from loguru import logger

from maze_solver.common.constants import OUTPUT_KIND_ANIMATION
from maze_solver.common.exceptions import BadDurationError
from maze_solver.config.models import SolverConfig
from maze_solver.core.classifier import classify_image
from maze_solver.core.palette import CellLabel, Palette
from maze_solver.core.pathfinder import find_shortest_path
from maze_solver.core.renderer import render_animation, render_still
from maze_solver.utils.image_io import output_kind, read_image, write_gif, write_png


@dataclass
class SolveRequest:
    """一次求解的输入"""
    input_path: Path
    output_path: Path
    duration: float
    palette: Palette


@dataclass
class SolveResult:
    """一次求解的输出摘要"""
    output_path: Path
    output_kind: str
    source: Tuple[int, int]
    destination: Tuple[int, int]
    path_length: int
    frame_count: Optional[int] = None


class MazeSolver:
    """
    迷宫求解服务

    示例:
        ```python
        solver = MazeSolver(SolverConfig())
        result = solver.Solve(SolveRequest(Path("maze.png"), Path("out.gif"), 5.0, palette))
        ```
    """

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.config_ = config if config is not None else SolverConfig()

    def Solve(self, request: SolveRequest) -> SolveResult:
        """
        执行完整流程

        Raises:
            MazeSolverError: 任一步骤失败
        """
        # 先检查输出格式和时长，避免做无用功
        kind = output_kind(request.output_path)
        if not math.isfinite(request.duration) or request.duration <= 0:
            raise BadDurationError(f"动画时长必须为正数: {request.duration}")

        pixels = read_image(request.input_path)

        logger.info("parsing image into graph...")
        maze = classify_image(pixels, request.palette)
        logger.info(f"Source      {maze.source}")
        logger.info(f"Destination {maze.destination}")

        logger.info("calculating shortest path...")
        path = find_shortest_path(maze.grid, maze.source, maze.destination)

        logger.info(f"generating {request.output_path}...")
        frame_count = None
        if kind == OUTPUT_KIND_ANIMATION:
            animation = render_animation(
                maze.grid,
                path,
                request.palette,
                request.duration,
                frames_per_second=self.config_.render.frames_per_second,
            )
            frame_count = len(animation)
            write_gif(request.output_path, animation)
        else:
            write_png(request.output_path, render_still(maze.grid, path, request.palette))

        return SolveResult(
            output_path=request.output_path,
            output_kind=kind,
            source=maze.source,
            destination=maze.destination,
            path_length=len(path),
            frame_count=frame_count,
        )

    @staticmethod
    def DescribePalette(palette: Palette) -> str:
        """调色板的可读描述（用于日志）"""
        names = {
            CellLabel.SPACE: "Blank",
            CellLabel.BLOCK: "Block",
            CellLabel.SOURCE: "Source",
            CellLabel.DESTINATION: "Destination",
            CellLabel.PATH: "Path",
        }
        return "\n".join(f"{names[label]:<11} Color: {palette[label]}" for label in CellLabel)
