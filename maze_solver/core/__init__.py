#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
核心算法模块

- palette: 语义标签与调色板
- classifier: 像素 -> 语义栅格
- pathfinder: 8邻接BFS最短路径
- renderer: 动画帧序列 / 静态结果图
"""

from .palette import CellLabel, Palette, parse_color, parse_palette
from .classifier import ClassifiedMaze, classify_image
from .pathfinder import find_shortest_path
from .renderer import Animation, AnimationFrame, render_animation, render_still

__all__ = [
    'CellLabel',
    'Palette',
    'parse_color',
    'parse_palette',
    'ClassifiedMaze',
    'classify_image',
    'find_shortest_path',
    'Animation',
    'AnimationFrame',
    'render_animation',
    'render_still',
]
