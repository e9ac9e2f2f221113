#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
最短路径模块：8邻接栅格上的BFS

功能：
- 固定邻居展开顺序，结果在任何实现间确定
- 每步代价均为1（按步数最短，而非欧氏长度）
- 墙（BLOCK）不可通行，栅格本身不被修改
"""

from collections import deque
from typing import List, Tuple

import numpy as np
from loguru import logger

from maze_solver.common.constants import NEIGHBOR_OFFSETS_8WAY
from maze_solver.common.exceptions import PathNotFoundError
from maze_solver.core.palette import CellLabel

Pixel = Tuple[int, int]  # (row, col)

# 父节点索引为 -1 表示未访问，起点的父节点是它自己
_UNVISITED = -1


def find_shortest_path(grid: np.ndarray, source: Pixel, destination: Pixel) -> List[Pixel]:
    """
    在语义栅格上用BFS求起点到终点的最短路径

    Args:
        grid: HxW 语义栅格（CellLabel）
        source: 起点 (row, col)
        destination: 终点 (row, col)

    Returns:
        路径 [(row, col), ...]，从起点的下一格开始，以终点结束（不含起点）

    Raises:
        PathNotFoundError: 终点不可达，或起点与终点重合
        ValueError: 起点或终点超出栅格范围
    """
    height, width = grid.shape
    for name, (y, x) in (("source", source), ("destination", destination)):
        if not (0 <= y < height and 0 <= x < width):
            raise ValueError(f"{name} 超出栅格范围: {(y, x)}, grid_size=({width}, {height})")

    source = (int(source[0]), int(source[1]))
    destination = (int(destination[0]), int(destination[1]))

    # 扁平列表按 y * width + x 索引，避免在循环中逐个访问 numpy 标量
    passable = (np.asarray(grid) != CellLabel.BLOCK).ravel().tolist()
    parent = [_UNVISITED] * (height * width)
    source_index = source[0] * width + source[1]
    destination_index = destination[0] * width + destination[1]
    parent[source_index] = source_index

    queue = deque([source])
    found = False
    nodes_explored = 0

    while queue and not found:
        cy, cx = queue.popleft()
        current_index = cy * width + cx
        nodes_explored += 1

        for dy, dx in NEIGHBOR_OFFSETS_8WAY:
            ny, nx = cy + dy, cx + dx

            if ny < 0 or ny >= height or nx < 0 or nx >= width:
                continue
            index = ny * width + nx
            if not passable[index] or parent[index] != _UNVISITED:
                continue

            parent[index] = current_index
            if index == destination_index:
                found = True
                break
            queue.append((ny, nx))

    if not found:
        logger.debug(f"BFS未找到路径: source={source}, destination={destination}, 探索节点数={nodes_explored}")
        raise PathNotFoundError(
            "Can not find the solution to the maze\n"
            "Try changing the color\n"
            "Did you mark the source and destination point?"
        )

    # 回溯路径
    path: List[Pixel] = []
    trace = destination_index
    while trace != source_index:
        path.append(divmod(trace, width))
        trace = parent[trace]
    path.reverse()

    logger.debug(f"BFS规划成功: 路径长度={len(path)}, 探索节点数={nodes_explored}")
    return path
