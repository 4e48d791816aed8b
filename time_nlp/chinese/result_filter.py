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

from typing import Iterable, List, Optional

from .time_unit import ResolvedExpression, SENTINEL_TIME


def filter_invalid(results: Optional[Iterable[ResolvedExpression]]) -> List[ResolvedExpression]:
    """
    过滤无法解析的时间表达式

    time 为 None 或等于历史约定的无效时间（1970-01-01 00:00:00）的结果被丢弃，其余保持原顺序。

    Args:
        results: 解析结果，可以为 None

    Returns:
        List[ResolvedExpression]: 有效的解析结果
    """
    if not results:
        return []
    return [r for r in results if r.time is not None and r.time != SENTINEL_TIME]
