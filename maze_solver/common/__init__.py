#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
公共模块：常量与异常定义
"""

from .exceptions import (
    MazeSolverError,
    BadArgsError,
    BadColorError,
    BadDurationError,
    ImageIOError,
    DecodeError,
    BadPaletteError,
    EmptyImageError,
    PathNotFoundError,
    ConfigurationError,
)

__all__ = [
    'MazeSolverError',
    'BadArgsError',
    'BadColorError',
    'BadDurationError',
    'ImageIOError',
    'DecodeError',
    'BadPaletteError',
    'EmptyImageError',
    'PathNotFoundError',
    'ConfigurationError',
]
