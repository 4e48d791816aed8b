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

import re
from datetime import date, timedelta
from typing import Optional

from .base_parser import BaseParser, ParseState
from ..time_unit import YEAR, MONTH, DAY


class WeekParser(BaseParser):
    """
    星期时间解析器

    处理与星期相关的时间表达式，如：
    - 周一、星期三、礼拜天（预处理后为"周7"）
    - 上周五、本周三、下个星期二、下下周
    - 周末（按周六处理）

    一周从周一开始。没有"上/下/本"等前缀的星期几在未来倾向下可顺延一周。
    """

    def __init__(self):
        """初始化星期解析器"""
        super().__init__()
        self.week_offsets = {"上上": -2, "上": -1, "本": 0, "这": 0, "下": 1, "下下": 2}
        self.prefixed_pattern = re.compile(r"(上上|下下|上|下|本|这)个?(?:周|星期|礼拜)([1-7]|末)?")
        self.bare_pattern = re.compile(r"(?:周|星期|礼拜)([1-7]|末)")

    def parse(self, state: ParseState) -> None:
        """
        解析星期相关的时间表达式

        Args:
            state (ParseState): 解析状态
        """
        # 已经写明日期时忽略星期
        if state.tp[DAY] != -1:
            return

        match = self.prefixed_pattern.search(state.text)
        if match:
            week_offset = self.week_offsets[match.group(1)]
            week_day = self._week_day(match.group(2))
            state.set_date(self._calculate_target_date(state.time_base.date(), week_day, week_offset))
            return

        match = self.bare_pattern.search(state.text)
        if match:
            week_day = self._week_day(match.group(1))
            context_date = self._context_date(state)
            if context_date is not None:
                # 紧跟在已确定日期之后，如 "下周一到周三" 中的 "周三"，取该日期所在的周
                state.set_date(self._calculate_target_date(context_date, week_day, 0))
                return
            state.set_date(self._calculate_target_date(state.time_base.date(), week_day, 0))
            state.rollover = lambda candidate: candidate + timedelta(days=7)

    def _context_date(self, state: ParseState) -> Optional[date]:
        context = state.context
        if context[YEAR] == -1 or context[MONTH] == -1 or context[DAY] == -1:
            return None
        try:
            return date(context[YEAR], context[MONTH], context[DAY])
        except ValueError:
            return None

    def _week_day(self, raw) -> int:
        # 周末按周六处理；只说"下周"时取周一
        if not raw:
            return 1
        if raw == "末":
            return 6
        return int(raw)

    def _calculate_target_date(self, base_day, week_day, week_offset) -> date:
        """
        计算目标日期

        Args:
            base_day (date): 基准日期
            week_day (int): 星期几，1-7
            week_offset (int): 周偏移

        Returns:
            date: 目标日期
        """
        monday = base_day - timedelta(days=base_day.weekday())
        return monday + timedelta(weeks=week_offset, days=week_day - 1)
