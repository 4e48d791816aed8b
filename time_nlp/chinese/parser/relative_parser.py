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
from datetime import timedelta

from dateutil.relativedelta import relativedelta

from .base_parser import BaseParser, ParseState
from ..time_unit import YEAR, MONTH, SECOND


class RelativeParser(BaseParser):
    """
    相对时间解析器

    处理以基准时间为参照的相对词，如：
    - 大前天、前天、昨天、今天、明天、后天、大后天（以及今早、明晚等）
    - 前年、去年、今年、明年、后年
    - 上上个月、上个月、本月、下个月、下下个月
    - 现在、此刻
    """

    def __init__(self):
        """初始化相对时间解析器"""
        super().__init__()
        self.day_offsets = {
            "大前天": -3,
            "大后天": 3,
            "前天": -2,
            "昨天": -1,
            "昨日": -1,
            "昨晚": -1,
            "今天": 0,
            "今日": 0,
            "今早": 0,
            "今晚": 0,
            "明天": 1,
            "明日": 1,
            "明早": 1,
            "明晚": 1,
            "后天": 2,
        }
        self.year_offsets = {"前年": -2, "去年": -1, "今年": 0, "明年": 1, "后年": 2}
        self.month_offsets = {"上上": -2, "上": -1, "本": 0, "这": 0, "下": 1, "下下": 2}

        # 长词在前，保证"大前天"不会被识别为"前天"
        self.day_pattern = re.compile("|".join(self.day_offsets))
        self.year_pattern = re.compile("|".join(self.year_offsets))
        self.month_pattern = re.compile(r"(上上|下下|上|下|本|这)个?月")
        self.now_pattern = re.compile(r"现在|此刻|此时|当前")

    def parse(self, state: ParseState) -> None:
        """
        解析相对时间表达式

        Args:
            state (ParseState): 解析状态
        """
        base = state.time_base

        if self.now_pattern.search(state.text):
            state.set_until(base, SECOND)
            return

        match = self.year_pattern.search(state.text)
        if match:
            state.tp[YEAR] = base.year + self.year_offsets[match.group()]

        match = self.month_pattern.search(state.text)
        if match:
            state.set_until(base + relativedelta(months=self.month_offsets[match.group(1)]), MONTH)

        match = self.day_pattern.search(state.text)
        if match:
            state.set_date(base + timedelta(days=self.day_offsets[match.group()]))
