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

from .base_parser import BaseParser, ParseState
from ..time_unit import HOUR


class PeriodParser(BaseParser):
    """
    时段解析器

    处理一天中的时段词，如凌晨、早上、上午、中午、下午、傍晚、晚上、深夜。
    未写明小时时取时段的默认小时；写明小时时按 12 小时制规则换算：
    - 凌晨/早上/上午：12-23 点减 12，0 点视为 12 点
    - 中午：0-10 点视为 12-22 点
    - 下午/傍晚/pm：0-11 点视为 12-23 点
    - 晚上/深夜：1-11 点视为 13-23 点，12 点视为 0 点
    """

    def __init__(self):
        """初始化时段解析器"""
        super().__init__()
        # 时段词 -> (时段类别, 默认小时)
        self.periods = {
            "凌晨": ("morning", 3),
            "早上": ("morning", 8),
            "早晨": ("morning", 8),
            "清晨": ("morning", 8),
            "今早": ("morning", 8),
            "明早": ("morning", 8),
            "上午": ("morning", 10),
            "中午": ("noon", 12),
            "午间": ("noon", 12),
            "下午": ("afternoon", 15),
            "午后": ("afternoon", 15),
            "pm": ("afternoon", 15),
            "PM": ("afternoon", 15),
            "傍晚": ("afternoon", 18),
            "晚上": ("night", 20),
            "夜间": ("night", 20),
            "夜里": ("night", 20),
            "今晚": ("night", 20),
            "明晚": ("night", 20),
            "昨晚": ("night", 20),
            "深夜": ("night", 23),
            "半夜": ("night", 23),
        }
        self.pattern = re.compile("|".join(self.periods))

    def parse(self, state: ParseState) -> None:
        """
        解析时段词并调整小时

        Args:
            state (ParseState): 解析状态
        """
        match = self.pattern.search(state.text)
        if match is None:
            return

        word = match.group()
        kind, default_hour = self.periods[word]
        state.period = word

        hour = state.tp[HOUR]
        if hour == -1:
            state.tp[HOUR] = default_hour
        else:
            state.tp[HOUR] = self._adjust_hour(kind, hour)

    def _adjust_hour(self, kind: str, hour: int) -> int:
        if kind == "morning":
            if 12 <= hour <= 23:
                return hour - 12
            if hour == 0:
                return 12
        elif kind == "noon":
            if 0 <= hour <= 10:
                return hour + 12
        elif kind == "afternoon":
            if 0 <= hour <= 11:
                return hour + 12
        elif kind == "night":
            if 1 <= hour <= 11:
                return hour + 12
            if hour == 12:
                return 0
        return hour
