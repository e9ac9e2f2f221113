#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
求解器配置模型

使用Pydantic定义类型安全的配置模型，所有字段都有默认值，空配置文件即为默认配置。
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from maze_solver.common.constants import (
    CENTISECONDS_PER_SECOND,
    DEFAULT_FRAMES_PER_SECOND,
    MIN_FRAMES_PER_SECOND,
    MAX_FRAMES_PER_SECOND,
    DEFAULT_LOG_LEVEL,
    LOG_LEVELS,
)


class RenderConfig(BaseModel):
    """动画渲染配置"""
    frames_per_second: int = Field(DEFAULT_FRAMES_PER_SECOND, description="GIF动画帧率")

    @field_validator('frames_per_second')
    @classmethod
    def validate_frames_per_second(cls, v: int) -> int:
        """验证帧率：1-100 之间且整除100（帧延时为整数个 1/100 秒）"""
        if not MIN_FRAMES_PER_SECOND <= v <= MAX_FRAMES_PER_SECOND:
            raise ValueError(
                f"帧率必须在{MIN_FRAMES_PER_SECOND}-{MAX_FRAMES_PER_SECOND}之间: {v}"
            )
        if CENTISECONDS_PER_SECOND % v != 0:
            raise ValueError(f"帧率必须整除{CENTISECONDS_PER_SECOND}，否则实际帧率与设定不符: {v}")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field(DEFAULT_LOG_LEVEL, description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志文件目录，为空时只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """验证日志级别"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"未知日志级别: {v}，可选: {', '.join(LOG_LEVELS)}")
        return level

class SolverConfig(BaseModel):
    """求解器总配置"""
    render: RenderConfig = Field(default_factory=RenderConfig, description="渲染配置")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="日志配置")
