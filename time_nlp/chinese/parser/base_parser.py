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

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, Optional

from ..time_unit import TimePoint, YEAR, MONTH, DAY


class ParseState:
    """
    单个表达式的解析状态

    各字段解析器依次读取 text，写入 tp 中对应的字段。

    Attributes:
        text (str): 表达式文本
        time_base (datetime): 基准时间
        tp (TimePoint): 正在构建的时间点
        period (Optional[str]): 表达式中出现的时段词（如"下午"）
        rollover (Optional[Callable]): 日期由星期或节日推得、且未写明年份/周偏移时，
            给出下一次出现时间的函数，供未来倾向使用
        context (TimePoint): 上一个表达式的解析结果
    """

    def __init__(self, text: str, time_base: datetime, context: Optional[TimePoint] = None):
        self.text = text
        self.time_base = time_base
        self.context = context if context is not None else TimePoint()
        self.tp = TimePoint()
        self.period: Optional[str] = None
        self.rollover: Optional[Callable[[datetime], Optional[datetime]]] = None

    def set_date(self, value) -> None:
        """写入年、月、日"""
        self.tp[YEAR] = value.year
        self.tp[MONTH] = value.month
        self.tp[DAY] = value.day

    def set_until(self, value: datetime, finest: int) -> None:
        """写入从年到 finest 的各字段"""
        fields = [value.year, value.month, value.day, value.hour, value.minute, value.second]
        for i in range(finest + 1):
            self.tp[i] = fields[i]


class BaseParser(ABC):
    """
    时间字段解析器基类

    所有字段解析器都应该继承此类，实现统一的接口和公共功能
    """

    # 年份范围限制
    YEAR_MIN = 1900
    YEAR_MAX = 2100

    @abstractmethod
    def parse(self, state: ParseState) -> None:
        """
        解析表达式并写入 state 的字段

        Args:
            state (ParseState): 解析状态
        """
        pass

    def _normalize_year(self, year: int) -> int:
        """
        归一化两位年份为四位年份

        Args:
            year (int): 年份

        Returns:
            int: 四位年份，40 及以下视为 20xx，其余视为 19xx
        """
        if year < 100:
            return 2000 + year if year <= 40 else 1900 + year
        return year
