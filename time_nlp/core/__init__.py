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
核心模块

提供FST文本处理器、中文数字转换、日志、配置与异常定义。

主要组件:
- Processor: FST基础文本处理类，用于构建上下文相关的改写规则
- 中文数字转换: 文本中的中文数字串转为阿拉伯数字
- 工具函数: 路径处理、基准时间格式化等辅助功能

作者: Ming Yu (yuming@oppo.com)
许可证: Apache License 2.0
"""

from .processor import Processor
from .chinese_number_converter import convert_chinese_number, translate_numbers
from .config import load_config
from .exceptions import TimeNlpError, ModelLoadError, InvalidTimeBaseError
from .utils import get_abs_path, parse_time_base, format_time_base
from .logger import get_logger, setup_logging, auto_setup

__all__ = [
    "Processor",
    "convert_chinese_number",
    "translate_numbers",
    "load_config",
    "TimeNlpError",
    "ModelLoadError",
    "InvalidTimeBaseError",
    "get_abs_path",
    "parse_time_base",
    "format_time_base",
    "get_logger",
    "setup_logging",
    "auto_setup",
]
