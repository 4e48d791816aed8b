# Copyright (c) 2025 Ming Yu (yuming@oppo.com)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
配置加载模块

优先级（从低到高）：内置默认值 < settings.yaml < 环境变量 < 构造参数。
"""

import os
from typing import Any, Dict, Optional

import yaml

from .logger import get_logger
from .utils import get_abs_path

DEFAULT_CONFIG: Dict[str, Any] = {
    "model": "resource:TimeExp.m",
    "prefer_future": True,
    "particles": "的",
    "full_to_half": True,
}

_TRUE_VALUES = {"1", "true", "yes", "on"}


def default_config_path() -> str:
    """内置配置文件路径"""
    return get_abs_path("../chinese/config/settings.yaml")


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    加载配置

    Args:
        path: yaml 配置文件路径，为 None 时使用内置 settings.yaml

    Returns:
        Dict[str, Any]: 合并后的配置
    """
    logger = get_logger(__name__)
    config = dict(DEFAULT_CONFIG)
    config_path = path or default_config_path()

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError("配置文件顶层必须是映射")
        config.update({k: v for k, v in loaded.items() if k in DEFAULT_CONFIG})
    except (OSError, ValueError, yaml.YAMLError) as e:
        # 配置文件缺失或损坏时使用默认值
        logger.warning(f"加载配置文件失败，使用默认配置: {config_path}: {e}")

    # 环境变量覆盖
    model = os.environ.get("TIME_NLP_MODEL")
    if model:
        config["model"] = model
    prefer_future = os.environ.get("TIME_NLP_PREFER_FUTURE")
    if prefer_future:
        config["prefer_future"] = prefer_future.strip().lower() in _TRUE_VALUES

    return config
