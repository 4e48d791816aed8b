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
time_nlp: 中文时间表达式识别与归一化

Example:
    >>> import time_nlp
    >>> [r.to_time_str() for r in time_nlp.parse("明天下午3点开会", "2016-05-04-10-00-00")]
    ['2016-05-05 15:00:00']
"""

from typing import List, Optional

from .chinese import (
    PatternSet,
    PatternStore,
    RawSpan,
    ResolvedExpression,
    SENTINEL_TIME,
    TimeNormalizer,
    TimePoint,
    TimeType,
    filter_invalid,
    load_patterns,
)
from .core.exceptions import TimeNlpError, ModelLoadError, InvalidTimeBaseError

__version__ = "1.0.0"
__author__ = "Ming Yu"
__email__ = "yuming@oppo.com"

_default_normalizer: Optional[TimeNormalizer] = None


def parse(text: str, time_base=None) -> List[ResolvedExpression]:
    """
    使用默认配置的 TimeNormalizer 解析文本，首次调用时加载模型

    Args:
        text: 待分析文本
        time_base: 基准时间，缺省时取当前时间

    Returns:
        List[ResolvedExpression]: 有效的解析结果
    """
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = TimeNormalizer()
    return _default_normalizer.parse(text, time_base)


__all__ = [
    "parse",
    "TimeNormalizer",
    "PatternSet",
    "PatternStore",
    "load_patterns",
    "filter_invalid",
    "RawSpan",
    "ResolvedExpression",
    "TimePoint",
    "TimeType",
    "SENTINEL_TIME",
    "TimeNlpError",
    "ModelLoadError",
    "InvalidTimeBaseError",
]
