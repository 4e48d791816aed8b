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

from typing import List

from .pattern_store import PatternSet
from .time_unit import RawSpan


def scan(text: str, pattern_set: PatternSet) -> List[RawSpan]:
    """
    扫描预处理后的文本，合并首尾相接的匹配

    如 "2016年5月4日下午3点" 会依次匹配 "2016年"、"5月"、"4日"、"下午"、"3点"，
    因首尾相接而合并为一个表达式。

    Args:
        text: 预处理后的文本
        pattern_set: 时间表达式模式集合

    Returns:
        List[RawSpan]: 按出现顺序排列的表达式片段
    """
    spans: List[RawSpan] = []
    if not text:
        return spans

    last_end = -1
    for match in pattern_set.finditer(text):
        start, end = match.span()
        if start == end:
            continue
        if spans and start == last_end:
            spans[-1].extend(match.group(), end)
        else:
            spans.append(RawSpan(match.group(), start, end))
        last_end = end
    return spans
