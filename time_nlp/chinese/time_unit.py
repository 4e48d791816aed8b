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
时间单元数据结构

- TimePoint: 年月日时分秒六个字段，-1 表示未确定；同时作为上下文在相邻表达式间传递
- RawSpan: 预处理文本中被模式匹配（并合并相邻匹配）得到的片段
- ResolvedExpression: 一个时间表达式的解析结果
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

# 历史约定的无效时间：UTC+8 下的纪元时刻（本地时钟 1970-01-01 00:00:00）
SENTINEL_TIME = datetime(1970, 1, 1, 0, 0, 0)

UNIT_NAMES = ["year", "month", "day", "hour", "minute", "second"]
YEAR, MONTH, DAY, HOUR, MINUTE, SECOND = range(6)


class TimeType(Enum):
    """时间表达式类型：单个时间点，或区间的起点/终点"""

    POINT = "point"
    RANGE_START = "range_start"
    RANGE_END = "range_end"


class TimePoint:
    """时间点对象：tunit 依次为年、月、日、时、分、秒，-1 表示未确定"""

    def __init__(self, tunit: Optional[List[int]] = None):
        self.tunit = list(tunit) if tunit is not None else [-1, -1, -1, -1, -1, -1]

    def copy(self) -> "TimePoint":
        return TimePoint(self.tunit)

    def is_empty(self) -> bool:
        return all(v == -1 for v in self.tunit)

    def coarsest(self) -> Optional[int]:
        """最粗粒度的已确定字段下标，全部未确定时返回 None"""
        for i, v in enumerate(self.tunit):
            if v != -1:
                return i
        return None

    def finest(self) -> Optional[int]:
        """最细粒度的已确定字段下标，全部未确定时返回 None"""
        for i in range(5, -1, -1):
            if self.tunit[i] != -1:
                return i
        return None

    def __getitem__(self, idx):
        return self.tunit[idx]

    def __setitem__(self, idx, value):
        self.tunit[idx] = value

    def __eq__(self, other):
        return isinstance(other, TimePoint) and self.tunit == other.tunit

    def __repr__(self):
        return f"TimePoint({self.tunit})"


class RawSpan:
    """预处理文本中的一段时间表达式，start/end 为偏移"""

    def __init__(self, text: str, start: int, end: int):
        self.text = text
        self.start = start
        self.end = end

    def extend(self, text: str, end: int) -> None:
        """追加一个紧邻的匹配"""
        self.text += text
        self.end = end

    def __eq__(self, other):
        return (
            isinstance(other, RawSpan)
            and (self.text, self.start, self.end) == (other.text, other.start, other.end)
        )

    def __repr__(self):
        return f"RawSpan({self.text!r}, {self.start}, {self.end})"


class ResolvedExpression:
    """
    时间表达式解析结果

    Attributes:
        text: 表达式文本
        start/end: 表达式在预处理文本中的偏移
        time: 解析出的绝对时间；无法解析时为 None
        time_type: TimeType
        granularity: 最细粒度的已确定字段名（year/month/.../second）
        is_all_day_time: 未指定时、分、秒
        time_point: 解析后的 TimePoint
    """

    def __init__(
        self,
        text: str,
        time: Optional[datetime],
        time_point: Optional[TimePoint] = None,
        start: int = -1,
        end: int = -1,
        time_type: TimeType = TimeType.POINT,
        is_all_day_time: bool = True,
    ):
        self.text = text
        self.time = time
        self.time_point = time_point if time_point is not None else TimePoint()
        self.start = start
        self.end = end
        self.time_type = time_type
        self.is_all_day_time = is_all_day_time

    @property
    def resolved(self) -> bool:
        return self.time is not None and self.time != SENTINEL_TIME

    @property
    def granularity(self) -> Optional[str]:
        finest = self.time_point.finest()
        return UNIT_NAMES[finest] if finest is not None else None

    def to_time_str(self) -> str:
        if self.time is None:
            return ""
        return self.time.strftime("%Y-%m-%d %H:%M:%S")

    def to_dict(self):
        return {
            "text": self.text,
            "time": self.to_time_str(),
            "type": self.time_type.value,
            "granularity": self.granularity,
            "is_all_day_time": self.is_all_day_time,
        }

    def __repr__(self):
        return f"ResolvedExpression({self.text!r}, {self.to_time_str() or None}, {self.time_type.value})"
