#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
常量定义：集中管理所有魔法数字和配置常量
"""

# =============================
# 动画相关常量
# =============================

# 默认GIF帧率
DEFAULT_FRAMES_PER_SECOND: int = 25

# GIF帧延时单位：1/100 秒
CENTISECONDS_PER_SECOND: int = 100

# 帧率允许范围：必须整除100，使每帧延时为整数个 1/100 秒
MIN_FRAMES_PER_SECOND: int = 1
MAX_FRAMES_PER_SECOND: int = 100

# =============================
# 路径搜索相关常量
# =============================

# BFS邻居展开顺序 (drow, dcol)：先东南西北，再西北、东北、西南、东南
NEIGHBOR_OFFSETS_8WAY = [
    (0, 1), (1, 0), (0, -1), (-1, 0),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
]

# =============================
# 输入输出相关常量
# =============================

# 调色板颜色数量
PALETTE_SIZE: int = 5

# 输出后缀 -> 输出类型
OUTPUT_KIND_ANIMATION: str = "animation"
OUTPUT_KIND_STILL: str = "still"
OUTPUT_SUFFIXES = {
    ".gif": OUTPUT_KIND_ANIMATION,
    ".png": OUTPUT_KIND_STILL,
}

# 命令行说明
USAGE_EPILOG: str = (
    "duration: gif animation in seconds\n"
    "color: R,G,B from 0 - 255, separated by a comma"
)

# =============================
# 日志相关常量
# =============================

DEFAULT_LOG_LEVEL: str = "INFO"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT_CONSOLE: str = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

LOG_FORMAT_FILE: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
