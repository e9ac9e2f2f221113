#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
maze_solver 主包
将迷宫图片解析为栅格，计算最短路径并输出结果图片/动画
"""

__version__ = "0.1.0"

__all__ = ['__version__']
