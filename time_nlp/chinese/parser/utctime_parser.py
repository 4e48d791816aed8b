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
from ..time_unit import YEAR, MONTH, DAY, HOUR, MINUTE, SECOND

# 相对时间标记：如 "3年后"、"5日以前"
_RELATIVE_MARK = r"(?:[以之]?[前后]|过后)"

# 星期词中的数字不参与年月日时的识别
_WEEK_TOKEN = re.compile(r"(?:周|星期|礼拜)[1-7]")

_FULL_DATE = re.compile(r"(?<![0-9])([0-9]{4})[-/.](1[0-2]|0?[1-9])[-/.](3[01]|[12][0-9]|0?[1-9])")
_US_DATE = re.compile(r"(?<![0-9])(1[0-2]|0?[1-9])/(3[01]|[12][0-9]|0?[1-9])/([0-9]{4})")
_CLOCK = re.compile(r"(2[0-3]|[01]?[0-9]):([0-5][0-9])(?::([0-5][0-9]))?")

_YEAR = re.compile(r"(?<![0-9])([0-9]{4}|[0-9]{2})(?=年)(?!年" + _RELATIVE_MARK + ")")
_MONTH_DAY = re.compile(r"(?<![0-9])(1[0-2]|0?[1-9])月(3[01]|[12][0-9]|0?[1-9])(?![0-9日号点时:])")
_MONTH = re.compile(r"(?<![0-9])(1[0-2]|0?[1-9])(?=月)")
_DAY = re.compile(r"(?<![0-9])(3[01]|[12][0-9]|0?[1-9])(?=[日号])(?![日号]" + _RELATIVE_MARK + ")")
_HOUR = re.compile(r"(?<![0-9])(2[0-4]|[01]?[0-9])(?=[点时])")

_MINUTE_HALF = re.compile(r"(?<=[点时])(?<!小时)半")
_MINUTE_QUARTER = re.compile(r"(?<=[点时])(?<!小时)([13])刻")
_MINUTE = re.compile(r"(?<![0-9])([0-5]?[0-9])(?=分)(?!分钟|分" + _RELATIVE_MARK + ")")
_MINUTE_AFTER_HOUR = re.compile(r"(?<=[点时])(?<!小时)([0-5]?[0-9])(?![0-9刻])")

_SECOND = re.compile(r"(?<![0-9])([0-5]?[0-9])(?=秒)(?!秒钟?" + _RELATIVE_MARK + ")")
_SECOND_AFTER_MINUTE = re.compile(r"(?<=分)([0-5]?[0-9])(?![0-9])")


class UTCTimeParser(BaseParser):
    """
    绝对时间字段解析器

    处理直接写明的时间字段，如：
    - 2016年、16年、5月、4日、3号、5月4（省略"日"）
    - 2016-05-04、2016/5/4、2016.5.4、5/4/2016
    - 15:30、15:30:20
    - 3点、3时、3点半、3点1刻、3点20分、20分15秒
    """

    def parse(self, state: ParseState) -> None:
        """
        解析绝对时间字段

        Args:
            state (ParseState): 解析状态
        """
        text = _WEEK_TOKEN.sub(" ", state.text)
        self._parse_date(text, state)
        self._parse_clock(text, state)

    def _parse_date(self, text, state):
        tp = state.tp

        match = _FULL_DATE.search(text)
        if match:
            tp[YEAR], tp[MONTH], tp[DAY] = (int(g) for g in match.groups())
            return
        match = _US_DATE.search(text)
        if match:
            tp[MONTH], tp[DAY], tp[YEAR] = (int(g) for g in match.groups())
            return

        match = _YEAR.search(text)
        if match:
            tp[YEAR] = self._normalize_year(int(match.group(1)))

        match = _MONTH_DAY.search(text)
        if match:
            tp[MONTH], tp[DAY] = int(match.group(1)), int(match.group(2))
            return

        match = _MONTH.search(text)
        if match:
            tp[MONTH] = int(match.group(1))
        match = _DAY.search(text)
        if match:
            tp[DAY] = int(match.group(1))

    def _parse_clock(self, text, state):
        tp = state.tp

        match = _CLOCK.search(text)
        if match:
            tp[HOUR], tp[MINUTE] = int(match.group(1)), int(match.group(2))
            if match.group(3) is not None:
                tp[SECOND] = int(match.group(3))
            return

        match = _HOUR.search(text)
        if match:
            tp[HOUR] = int(match.group(1))

        if _MINUTE_HALF.search(text):
            tp[MINUTE] = 30
        else:
            match = _MINUTE_QUARTER.search(text)
            if match:
                tp[MINUTE] = int(match.group(1)) * 15
            else:
                match = _MINUTE.search(text) or _MINUTE_AFTER_HOUR.search(text)
                if match:
                    tp[MINUTE] = int(match.group(1))

        match = _SECOND.search(text) or _SECOND_AFTER_MINUTE.search(text)
        if match:
            tp[SECOND] = int(match.group(1))
