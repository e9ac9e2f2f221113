#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置加载测试
"""

from pathlib import Path

import pytest

from maze_solver.common.exceptions import ConfigurationError
from maze_solver.config import SolverConfig, load_config


def test_defaults_without_file():
    config = load_config(None)
    assert config == SolverConfig()
    assert config.render.frames_per_second == 25
    assert config.logging.level == "INFO"
    assert config.logging.log_dir is None


def test_load_yaml(tmp_path):
    path = tmp_path / "solver.yaml"
    path.write_text(
        "render:\n"
        "  frames_per_second: 10\n"
        "logging:\n"
        "  level: debug\n"
        "  log_dir: logs\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.render.frames_per_second == 10
    assert config.logging.level == "DEBUG"
    assert Path(config.logging.log_dir) == (tmp_path / "logs").resolve()


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == SolverConfig()


def test_repository_example_config_is_valid():
    example = Path(__file__).resolve().parent.parent / "config" / "maze_solver.yaml"
    assert load_config(example).render.frames_per_second == 25


def test_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize("content", [
    "render:\n  frames_per_second: 0\n",
    "render:\n  frames_per_second: 101\n",
    "render:\n  frames_per_second: 30\n",
    "logging:\n  level: LOUD\n",
    "- just\n- a list\n",
    "render: [unclosed\n",
])
def test_invalid_config(tmp_path, content):
    path = tmp_path / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(path)


@pytest.mark.parametrize("fps", [1, 4, 20, 50, 100])
def test_frame_rate_divisors_of_hundred_accepted(tmp_path, fps):
    path = tmp_path / "fps.yaml"
    path.write_text(f"render:\n  frames_per_second: {fps}\n", encoding="utf-8")
    assert load_config(path).render.frames_per_second == fps
