#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
命令行入口

用法:
    maze-solver [input file] [output file] [duration] [space color] [block color]
                [source color] [destination color] [path color]
"""

import argparse
import math
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from maze_solver.common.constants import LOG_LEVELS, USAGE_EPILOG
from maze_solver.common.exceptions import BadDurationError, MazeSolverError
from maze_solver.config.loader import load_config
from maze_solver.core.palette import parse_palette
from maze_solver.solver_service import MazeSolver, SolveRequest
from maze_solver.utils.logger import SetupLogger


def parse_duration(text: str) -> float:
    """
    解析动画时长（秒）

    Raises:
        BadDurationError: 非数字、非有限值或不为正数
    """
    try:
        duration = float(text)
    except ValueError as e:
        raise BadDurationError(f"invalid duration: {text!r}") from e
    if not math.isfinite(duration) or duration <= 0:
        raise BadDurationError(f"duration must be a positive number of seconds: {text!r}")
    return duration


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="maze-solver",
        description="求解图片中的迷宫，输出 GIF 动画或 PNG 静态图",
        epilog=USAGE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("input", help="input file (PNG / JPEG)")
    parser.add_argument("output", help="output file (.gif animation or .png image)")
    parser.add_argument("duration", help="gif animation duration in seconds")
    parser.add_argument("space_color", help="space color R,G,B")
    parser.add_argument("block_color", help="block color R,G,B")
    parser.add_argument("source_color", help="source color R,G,B")
    parser.add_argument("destination_color", help="destination color R,G,B")
    parser.add_argument("path_color", help="path color R,G,B")
    parser.add_argument("--config", type=str, default=None, help="YAML配置文件路径")
    parser.add_argument("--log-level", type=str.upper, default=None, choices=LOG_LEVELS, help="日志级别，覆盖配置文件")
    return parser


def run(args: argparse.Namespace) -> int:
    """执行一次求解，失败时抛出 MazeSolverError"""
    config = load_config(Path(args.config) if args.config else None)
    level = (args.log_level or config.logging.level).upper()
    SetupLogger(level=level, log_dir=config.logging.log_dir)

    duration = parse_duration(args.duration)
    logger.info(f"GIF duration: {duration} s")

    palette = parse_palette([
        args.space_color,
        args.block_color,
        args.source_color,
        args.destination_color,
        args.path_color,
    ])
    logger.info("\n" + MazeSolver.DescribePalette(palette))

    solver = MazeSolver(config)
    result = solver.Solve(SolveRequest(
        input_path=Path(args.input),
        output_path=Path(args.output),
        duration=duration,
        palette=palette,
    ))

    if result.frame_count is not None:
        logger.info(f"path length: {result.path_length}, frames: {result.frame_count}")
    else:
        logger.info(f"path length: {result.path_length}")
    logger.info("Completed")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    SetupLogger()
    try:
        return run(args)
    except MazeSolverError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
