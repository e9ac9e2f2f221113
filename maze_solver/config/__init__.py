#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
求解器配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    SolverConfig,
    RenderConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    'SolverConfig',
    'RenderConfig',
    'LoggingConfig',
    'load_config'
]
