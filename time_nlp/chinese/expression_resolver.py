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
时间表达式解析

把一个表达式片段解析为绝对时间：
1. 各字段解析器依次写入年、月、日、时、分、秒
2. 用上一个表达式的结果（上下文）补全更高的字段，如 "周六3点到5点" 中的 "5点"
3. 未来倾向：表达式有歧义时取基准时间之后最近的一次
4. 其余更高的字段取自基准时间，更低的未定字段取最小值
"""

from datetime import datetime
from typing import List, Optional, Tuple

from dateutil.relativedelta import relativedelta

from .parser import (
    ParseState,
    UTCTimeParser,
    DeltaParser,
    RelativeParser,
    WeekParser,
    HolidayParser,
    PeriodParser,
)
from .time_unit import (
    RawSpan,
    ResolvedExpression,
    TimePoint,
    YEAR,
    MONTH,
    DAY,
    HOUR,
    MINUTE,
    SECOND,
)
from ..core.logger import get_logger

# 未确定字段的最小值（年份总会从基准时间或上下文补全）
_MINIMUM = [1, 1, 1, 0, 0, 0]

# 最粗字段 -> 未来倾向下顺延所用的上一级单位
_PARENT_UNIT = {
    MONTH: "years",
    DAY: "months",
    HOUR: "days",
    MINUTE: "hours",
    SECOND: "minutes",
}

# 顺延的最多次数：2月29日最多需要 8 年
_MAX_ADVANCE = 12


def _fields_of(value: datetime) -> List[int]:
    return [value.year, value.month, value.day, value.hour, value.minute, value.second]


def _build(fields: List[int]) -> Optional[datetime]:
    """由六个字段构造时间，未定字段取最小值；日期不存在时返回 None"""
    values = [v if v != -1 else _MINIMUM[i] for i, v in enumerate(fields)]
    try:
        return datetime(*values)
    except (ValueError, OverflowError):
        return None


class ExpressionResolver:
    """
    时间表达式解析器

    Attributes:
        parsers: 按固定顺序执行的字段解析器
    """

    YEAR_MIN = 1900
    YEAR_MAX = 2100

    def __init__(self):
        self.logger = get_logger(__name__)
        # 时段解析器最后执行，在未来倾向判断之前完成12小时制换算
        self.parsers = [
            UTCTimeParser(),
            DeltaParser(),
            RelativeParser(),
            WeekParser(),
            HolidayParser(),
            PeriodParser(),
        ]

    def resolve(
        self,
        span: RawSpan,
        time_base: datetime,
        context: Optional[TimePoint] = None,
        prefer_future: bool = True,
    ) -> Tuple[ResolvedExpression, TimePoint]:
        """
        解析一个表达式片段

        Args:
            span: 表达式片段
            time_base: 基准时间
            context: 上一个表达式的解析结果，为空时不参与补全
            prefer_future: 是否倾向于未来时间

        Returns:
            Tuple[ResolvedExpression, TimePoint]: 解析结果与传给下一个表达式的上下文；
            无法解析时结果的 time 为 None，上下文为空
        """
        context = context if context is not None else TimePoint()
        state = ParseState(span.text, time_base, context)
        try:
            for parser in self.parsers:
                parser.parse(state)
        except (ValueError, OverflowError) as e:
            self.logger.debug(f"表达式 {span.text!r} 字段解析失败: {e}")
            return self._unresolved(span)

        tp = state.tp
        coarsest = tp.coarsest()
        if coarsest is None:
            self.logger.debug(f"表达式 {span.text!r} 没有可识别的时间字段")
            return self._unresolved(span)
        finest = tp.finest()

        if coarsest > YEAR and any(context[i] != -1 for i in range(coarsest)):
            for i in range(coarsest):
                if context[i] != -1:
                    tp[i] = context[i]
            # 上下文是下午、本表达式只有不带时段词的上午小时，如 "下午3点到5点"
            if coarsest == HOUR and state.period is None and tp[HOUR] < 12 <= context[HOUR]:
                tp[HOUR] += 12
        elif prefer_future and (coarsest > YEAR or state.rollover is not None):
            tp = self._prefer_future(tp, coarsest, time_base, state.rollover)
            if tp is None:
                self.logger.debug(f"表达式 {span.text!r} 找不到基准时间之后的合法时间")
                return self._unresolved(span)

        base_fields = _fields_of(time_base)
        for i in range(coarsest):
            if tp[i] == -1:
                tp[i] = base_fields[i]

        value = _build(tp.tunit)
        if value is None or not self.YEAR_MIN <= value.year <= self.YEAR_MAX:
            self.logger.debug(f"表达式 {span.text!r} 的时间不合法: {tp}")
            return self._unresolved(span)

        resolved_fields = _fields_of(value)
        time_point = TimePoint(
            [resolved_fields[i] if i <= finest else -1 for i in range(6)]
        )
        is_all_day_time = all(tp[i] == -1 for i in (HOUR, MINUTE, SECOND))
        result = ResolvedExpression(
            span.text,
            value,
            time_point=time_point,
            start=span.start,
            end=span.end,
            is_all_day_time=is_all_day_time,
        )
        self.logger.debug(f"表达式 {span.text!r} 解析为 {result.to_time_str()}")
        return result, time_point.copy()

    def _prefer_future(self, tp, coarsest, time_base, rollover) -> Optional[TimePoint]:
        """
        取基准时间之后最近的一次

        Args:
            tp (TimePoint): 已解析的字段
            coarsest (int): 最粗的已确定字段
            time_base (datetime): 基准时间
            rollover: 星期或节日的顺延函数

        Returns:
            Optional[TimePoint]: 调整后的字段；找不到合法时间时返回 None
        """
        fields = list(tp.tunit)

        if rollover is not None:
            candidate = _build(fields)
            if candidate is not None and candidate <= time_base:
                candidate = rollover(candidate)
            if candidate is None:
                return None
            return TimePoint(_fields_of(candidate)[:DAY + 1] + fields[DAY + 1:])

        base_fields = _fields_of(time_base)
        anchor = datetime(*(base_fields[:coarsest] + _MINIMUM[coarsest:]))
        candidate = _build(base_fields[:coarsest] + fields[coarsest:])
        step = 0
        while candidate is None or candidate <= time_base:
            step += 1
            if step > _MAX_ADVANCE:
                return None
            try:
                shifted = anchor + relativedelta(**{_PARENT_UNIT[coarsest]: step})
            except (ValueError, OverflowError):
                return None
            candidate = _build(_fields_of(shifted)[:coarsest] + fields[coarsest:])

        return TimePoint(_fields_of(candidate)[:coarsest] + fields[coarsest:])

    def _unresolved(self, span: RawSpan) -> Tuple[ResolvedExpression, TimePoint]:
        return ResolvedExpression(span.text, None, start=span.start, end=span.end), TimePoint()
