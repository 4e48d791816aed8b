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
import datetime
from typing import Optional

import zhdate
from lunarcalendar import solarterm

from .base_parser import BaseParser, ParseState
from ..time_unit import YEAR, DAY
from ...core.logger import get_logger


class HolidayParser(BaseParser):
    """
    节假日时间解析器

    处理各种节假日相关的时间表达式，包括：
    - 公历节假日（元旦、情人节、国庆等）
    - 农历节假日（春节、中秋、除夕等），经 zhdate 换算为公历
    - 二十四节气（立春、清明等），由 lunarcalendar 计算

    未写明年份时取基准时间所在年份，未来倾向下可顺延到下一年。
    预处理会把节日名中的数字转成阿拉伯数字，所以"七夕"写作"7夕"、"腊八"写作"腊8"。
    """

    def __init__(self):
        """初始化节假日解析器"""
        super().__init__()
        self.logger = get_logger(__name__)

        # 公历节假日配置
        self.calendar_holiday = {
            "元旦": [1, 1],
            "情人节": [2, 14],
            "妇女节": [3, 8],
            "植树节": [3, 12],
            "愚人节": [4, 1],
            "劳动节": [5, 1],
            "青年节": [5, 4],
            "儿童节": [6, 1],
            "建党节": [7, 1],
            "建军节": [8, 1],
            "教师节": [9, 10],
            "国庆": [10, 1],
            "万圣节": [10, 31],
            "平安夜": [12, 24],
            "圣诞": [12, 25],
        }

        # 农历节假日配置
        self.holiday_lunar = {
            "春节": [1, 1],
            "元宵": [1, 15],
            "龙抬头": [2, 2],
            "端午": [5, 5],
            "7夕": [7, 7],
            "中元节": [7, 15],
            "中秋": [8, 15],
            "重阳": [9, 9],
            "腊8": [12, 8],
            "小年": [12, 23],
        }

        # 二十四节气映射
        self.jieqi_list = {
            "小寒": "XiaoHan",
            "大寒": "DaHan",
            "立春": "LiChun",
            "雨水": "YuShui",
            "惊蛰": "JingZhe",
            "春分": "ChunFen",
            "清明": "QingMing",
            "谷雨": "GuYu",
            "立夏": "LiXia",
            "小满": "XiaoMan",
            "芒种": "MangZhong",
            "夏至": "XiaZhi",
            "小暑": "XiaoShu",
            "大暑": "DaShu",
            "立秋": "LiQiu",
            "处暑": "ChuShu",
            "白露": "BaiLu",
            "秋分": "QiuFen",
            "寒露": "HanLu",
            "霜降": "ShuangJiang",
            "立冬": "LiDong",
            "小雪": "XiaoXue",
            "大雪": "DaXue",
            "冬至": "DongZhi",
        }

        names = list(self.calendar_holiday) + list(self.holiday_lunar) + list(self.jieqi_list) + ["除夕"]
        self.pattern = re.compile("|".join(sorted(names, key=len, reverse=True)))

    def parse(self, state: ParseState) -> None:
        """
        解析节假日表达式

        Args:
            state (ParseState): 解析状态
        """
        if state.tp[DAY] != -1:
            return
        match = self.pattern.search(state.text)
        if match is None:
            return

        name = match.group()
        year_given = state.tp[YEAR] != -1
        year = state.tp[YEAR] if year_given else state.time_base.year

        holiday = self.holiday_date(name, year)
        if holiday is None:
            # 超出历法库支持的年份
            state.tp[YEAR] = 0
            return
        state.set_date(holiday)

        if not year_given:

            def _next_year(candidate):
                following = self.holiday_date(name, candidate.year + 1)
                if following is None:
                    return None
                return datetime.datetime.combine(following, candidate.time())

            state.rollover = _next_year

    def holiday_date(self, name: str, year: int) -> Optional[datetime.date]:
        """
        计算某年节日的公历日期

        Args:
            name (str): 节日名
            year (int): 公历年份

        Returns:
            Optional[datetime.date]: 公历日期；超出历法库范围时返回 None
        """
        try:
            if name in self.calendar_holiday:
                month, day = self.calendar_holiday[name]
                return datetime.date(year, month, day)
            if name in self.jieqi_list:
                return getattr(solarterm, self.jieqi_list[name])(year)
            if name == "除夕":
                # 春节前一天，腊月可能没有三十
                spring = zhdate.ZhDate(year, 1, 1).to_datetime().date()
                return spring - datetime.timedelta(days=1)
            lunar_month, lunar_day = self.holiday_lunar[name]
            # 腊月的节日落在公历次年年初，按公历年份取上一个农历年
            lunar_year = year - 1 if lunar_month == 12 else year
            return zhdate.ZhDate(lunar_year, lunar_month, lunar_day).to_datetime().date()
        except (TypeError, ValueError, IndexError, KeyError) as e:
            self.logger.debug(f"无法计算 {year} 年的 {name}: {e}")
            return None
