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
中文时间表达式识别与归一化

流程：预处理 -> 模式扫描并合并相邻匹配 -> 逐个解析（传递上下文）-> 过滤无效结果
"""

from .expression_resolver import ExpressionResolver
from .match_merger import scan
from .pattern_store import PatternSet, PatternStore, load_patterns
from .result_filter import filter_invalid
from .time_normalizer import TimeNormalizer
from .time_unit import RawSpan, ResolvedExpression, TimePoint, TimeType, SENTINEL_TIME

__all__ = [
    "ExpressionResolver",
    "scan",
    "PatternSet",
    "PatternStore",
    "load_patterns",
    "filter_invalid",
    "TimeNormalizer",
    "RawSpan",
    "ResolvedExpression",
    "TimePoint",
    "TimeType",
    "SENTINEL_TIME",
]
