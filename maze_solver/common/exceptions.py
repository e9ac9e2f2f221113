#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义迷宫求解器的专用异常
"""


class MazeSolverError(Exception):
    """迷宫求解器基础异常类"""
    pass


class BadArgsError(MazeSolverError):
    """命令行参数错误（参数数量、输出文件后缀）"""
    pass


class BadColorError(MazeSolverError):
    """颜色格式错误或通道值越界"""
    pass


class BadDurationError(MazeSolverError):
    """动画时长非数字或不为正数"""
    pass


class ImageIOError(MazeSolverError):
    """输入读取或输出写入失败"""
    pass


class DecodeError(MazeSolverError):
    """输入内容不是可识别的图片格式"""
    pass


class BadPaletteError(MazeSolverError):
    """调色板颜色数量不是5个"""
    pass


class EmptyImageError(MazeSolverError):
    """输入图片宽或高为0"""
    pass


class PathNotFoundError(MazeSolverError):
    """起点无法到达终点"""
    pass


class ConfigurationError(MazeSolverError):
    """配置错误异常"""
    pass
