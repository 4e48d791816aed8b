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
工具函数模块

提供路径处理与基准时间文本的格式化/解析。
"""

import os
import re
import inspect
from datetime import datetime

from .exceptions import InvalidTimeBaseError

# 基准时间文本格式，例如 2016-05-04-10-00-00
TIME_BASE_FORMAT = "%Y-%m-%d-%H-%M-%S"
_TIME_BASE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}-[0-9]{2}-[0-9]{2}-[0-9]{2}")


def get_abs_path(rel_path: str) -> str:
    """
    基于调用文件的位置获取绝对路径。

    Args:
        rel_path: 相对于调用文件的路径

    Returns:
        str: 绝对路径

    Raises:
        ValueError: 如果无法获取调用者信息

    Example:
        >>> # 在 /path/to/module.py 中调用
        >>> abs_path = get_abs_path("config/settings.yaml")
        >>> # 返回: /path/to/config/settings.yaml
    """
    try:
        # 获取调用者的文件路径
        caller_frame = inspect.currentframe().f_back
        if caller_frame is None:
            raise ValueError("无法获取调用者信息")

        caller_file = caller_frame.f_globals["__file__"]
        caller_dir = os.path.dirname(os.path.abspath(caller_file))
        return os.path.join(caller_dir, rel_path)

    except (KeyError, AttributeError) as e:
        raise ValueError(f"无法获取调用者文件信息: {e}")


def parse_time_base(time_base) -> datetime:
    """
    将基准时间转换为 datetime（秒级精度）。

    Args:
        time_base: datetime 或 YYYY-MM-DD-HH-mm-ss 格式的字符串

    Returns:
        datetime: 基准时间

    Raises:
        InvalidTimeBaseError: 字符串格式不符或日期不存在
    """
    if isinstance(time_base, datetime):
        return time_base.replace(microsecond=0, tzinfo=None)
    if not isinstance(time_base, str) or not _TIME_BASE_SHAPE.fullmatch(time_base):
        raise InvalidTimeBaseError(time_base)
    try:
        return datetime.strptime(time_base, TIME_BASE_FORMAT)
    except ValueError:
        raise InvalidTimeBaseError(time_base)


def format_time_base(time_base: datetime) -> str:
    """将 datetime 格式化为基准时间文本"""
    return time_base.strftime(TIME_BASE_FORMAT)
