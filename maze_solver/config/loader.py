#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载器

从YAML文件加载配置并使用Pydantic验证。
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from loguru import logger
from pydantic import ValidationError

from maze_solver.common.exceptions import ConfigurationError
from maze_solver.config.models import SolverConfig


def load_config(config_path: Optional[Path] = None) -> SolverConfig:
    """
    从YAML文件加载配置

    Args:
        config_path: 配置文件路径，为None时返回默认配置

    Returns:
        验证后的SolverConfig对象

    Raises:
        ConfigurationError: 文件不存在、YAML格式错误或配置验证失败
    """
    if config_path is None:
        return SolverConfig()

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"配置文件不存在: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"YAML格式错误: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"读取配置文件失败: {e}") from e

    # 空文件使用默认配置
    if raw_config is None:
        logger.debug(f"配置文件为空，使用默认配置: {config_path}")
        return SolverConfig()

    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"配置文件顶层必须是映射: {config_path}")

    _apply_relative_paths(raw_config, config_path.resolve().parent)

    try:
        config = SolverConfig(**raw_config)
    except ValidationError as e:
        details = "; ".join(
            f"{' -> '.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigurationError(f"配置验证失败: {details}") from e

    logger.debug(f"配置加载成功: {config_path}")
    return config


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[str]:
    """解析相对路径为绝对路径"""
    if value is None:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path.resolve())


def _apply_relative_paths(raw_config: Dict[str, Any], base_dir: Path) -> None:
    """将配置中的相对路径字段转换为绝对路径"""
    logging_cfg = raw_config.get('logging')
    if isinstance(logging_cfg, dict) and logging_cfg.get('log_dir'):
        logging_cfg['log_dir'] = _resolve_path(logging_cfg['log_dir'], base_dir)
