#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图片读写模块

功能：
- 读取 PNG/JPEG 等图片并统一为 HxWx4 uint8 直通alpha RGBA
- 真彩色结果图编码为 PNG（OpenCV）
- 索引色动画编码为 GIF（Pillow）
"""

import io
import os
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from loguru import logger
from PIL import Image

from maze_solver.common.constants import CENTISECONDS_PER_SECOND, OUTPUT_SUFFIXES
from maze_solver.common.exceptions import BadArgsError, DecodeError, ImageIOError
from maze_solver.core.renderer import Animation

PathLike = Union[str, Path]

# 文件头 -> 格式名称
_MAGIC_NUMBERS = (
    (b"\x89PNG\r\n\x1a\n", "png"),
    (b"\xff\xd8\xff", "jpeg"),
    (b"GIF87a", "gif"),
    (b"GIF89a", "gif"),
    (b"BM", "bmp"),
    (b"II*\x00", "tiff"),
    (b"MM\x00*", "tiff"),
)


def sniff_format(data: bytes) -> str:
    """根据文件头判断图片格式，未知时返回 'unknown'"""
    for magic, name in _MAGIC_NUMBERS:
        if data.startswith(magic):
            return name
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "webp"
    return "unknown"


def output_kind(output_path: PathLike) -> str:
    """
    根据输出文件后缀选择渲染方式

    Raises:
        BadArgsError: 后缀不是 .gif 或 .png
    """
    suffix = Path(output_path).suffix.lower()
    if suffix not in OUTPUT_SUFFIXES:
        raise BadArgsError(
            f"不支持的输出格式: {output_path!s}，输出文件后缀必须是 {' / '.join(OUTPUT_SUFFIXES)}"
        )
    return OUTPUT_SUFFIXES[suffix]


def to_rgba(decoded: np.ndarray) -> np.ndarray:
    """
    将 OpenCV 解码结果统一为 8 位 RGBA

    Args:
        decoded: 灰度(HxW / HxWx1)、BGR(HxWx3) 或 BGRA(HxWx4)，8 位或 16 位

    Returns:
        HxWx4 uint8
    """
    if decoded.dtype == np.uint16:
        decoded = (decoded >> 8).astype(np.uint8)
    elif decoded.dtype != np.uint8:
        raise DecodeError(f"不支持的像素位深: {decoded.dtype}")

    if decoded.ndim == 2:
        decoded = decoded[:, :, None]

    channels = decoded.shape[2]
    if channels == 1:
        return cv2.cvtColor(decoded, cv2.COLOR_GRAY2RGBA)
    if channels == 3:
        return cv2.cvtColor(decoded, cv2.COLOR_BGR2RGBA)
    if channels == 4:
        return cv2.cvtColor(decoded, cv2.COLOR_BGRA2RGBA)
    raise DecodeError(f"不支持的通道数: {channels}")


def read_image(input_path: PathLike) -> np.ndarray:
    """
    读取并解码输入图片

    Returns:
        HxWx4 uint8 直通alpha RGBA

    Raises:
        ImageIOError: 读取文件失败
        DecodeError: 无法识别或解码图片
    """
    try:
        data = Path(input_path).read_bytes()
    except OSError as e:
        raise ImageIOError(f"读取输入文件失败: {input_path}: {e}") from e

    fmt = sniff_format(data)
    buffer = np.frombuffer(data, dtype=np.uint8)
    try:
        decoded = cv2.imdecode(buffer, cv2.IMREAD_UNCHANGED) if buffer.size else None
    except cv2.error as e:
        raise DecodeError(f"无法解码图片: {input_path}: {e}") from e
    if decoded is None:
        raise DecodeError(f"无法解码图片: {input_path} (format: {fmt})")

    logger.info(f"Input file: {input_path}, format: {fmt}")
    return to_rgba(decoded)


def _write_bytes(output_path: PathLike, payload: bytes) -> None:
    """先写同目录临时文件再替换，失败时不影响已存在的输出文件"""
    target = Path(output_path)
    temp = target.with_name(f".{target.name}.tmp")
    try:
        temp.write_bytes(payload)
        os.replace(temp, target)
    except OSError as e:
        try:
            temp.unlink(missing_ok=True)
        except OSError as cleanup_error:
            logger.warning(f"删除临时文件失败: {temp}: {cleanup_error}")
        raise ImageIOError(f"写入输出文件失败: {output_path}: {e}") from e


def write_png(output_path: PathLike, rgb: np.ndarray) -> None:
    """
    将 HxWx3 RGB 图编码为 PNG 并写入文件

    Raises:
        ImageIOError: 编码或写入失败
    """
    bgr = cv2.cvtColor(np.ascontiguousarray(rgb, dtype=np.uint8), cv2.COLOR_RGB2BGR)
    ok, encoded = cv2.imencode(".png", bgr)
    if not ok:
        raise ImageIOError(f"PNG编码失败: {output_path}")
    _write_bytes(output_path, encoded.tobytes())


def write_gif(output_path: PathLike, animation: Animation) -> None:
    """
    将索引色动画编码为 GIF 并写入文件

    全局调色板按语义标签顺序排列，每帧都是完整画布。

    Raises:
        ImageIOError: 动画为空、编码或写入失败
    """
    if len(animation) == 0:
        raise ImageIOError(f"动画没有帧: {output_path}")

    flat_palette = animation.palette.ToFlatList()
    images = []
    for frame in animation.frames:
        image = Image.fromarray(np.ascontiguousarray(frame.pixels, dtype=np.uint8))
        image.putpalette(flat_palette)
        images.append(image)

    # GIF 延时单位为 1/100 秒，Pillow 以毫秒为单位
    durations = [frame.delay_cs * (1000 // CENTISECONDS_PER_SECOND) for frame in animation.frames]

    stream = io.BytesIO()
    try:
        images[0].save(
            stream,
            format="GIF",
            save_all=True,
            append_images=images[1:],
            duration=durations,
            loop=0,
            optimize=False,
            disposal=1,
        )
    except (OSError, ValueError) as e:
        raise ImageIOError(f"GIF编码失败: {output_path}: {e}") from e

    _write_bytes(output_path, stream.getvalue())
