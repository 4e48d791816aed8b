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

from dateutil.relativedelta import relativedelta

from .base_parser import BaseParser, ParseState
from ..time_unit import YEAR, MONTH, DAY, MINUTE, SECOND

_DELTA = re.compile(
    r"([0-9]+|半)个?(年|月|星期|礼拜|周|天|日|小时|钟头|分钟|分|秒钟|秒)(以前|之前|以后|之后|过后|前|后)"
)

# 单位 -> (relativedelta 参数名, 偏移后确定到的最细字段)
_UNITS = {
    "年": ("years", YEAR),
    "月": ("months", MONTH),
    "星期": ("weeks", DAY),
    "礼拜": ("weeks", DAY),
    "周": ("weeks", DAY),
    "天": ("days", DAY),
    "日": ("days", DAY),
    "小时": ("hours", MINUTE),
    "钟头": ("hours", MINUTE),
    "分钟": ("minutes", MINUTE),
    "分": ("minutes", MINUTE),
    "秒钟": ("seconds", SECOND),
    "秒": ("seconds", SECOND),
}

# "半"个单位 -> 折算为更小单位
_HALF_UNITS = {
    "年": ({"months": 6}, MONTH),
    "月": ({"days": 15}, DAY),
    "小时": ({"minutes": 30}, MINUTE),
    "钟头": ({"minutes": 30}, MINUTE),
}


class DeltaParser(BaseParser):
    """
    时间增量解析器

    处理相对基准时间的偏移表达式，如：
    - 3年后、2个月前、1周后、5天以后
    - 3小时之前、20分钟后、30秒后
    - 半小时后、半个月前、半年后
    """

    def parse(self, state: ParseState) -> None:
        """
        解析时间增量表达式

        Args:
            state (ParseState): 解析状态
        """
        match = _DELTA.search(state.text)
        if match is None:
            return

        amount, unit, direction = match.groups()
        sign = -1 if direction.endswith("前") else 1

        if amount == "半":
            if unit not in _HALF_UNITS:
                return
            offset, finest = _HALF_UNITS[unit]
            delta = relativedelta(**{k: sign * v for k, v in offset.items()})
        else:
            name, finest = _UNITS[unit]
            delta = relativedelta(**{name: sign * int(amount)})

        try:
            target = state.time_base + delta
        except (ValueError, OverflowError):
            # 偏移超出 datetime 可表示的范围，按年份越界处理
            state.tp[YEAR] = 0
            return
        state.set_until(target, finest)
