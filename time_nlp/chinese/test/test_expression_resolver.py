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
时间表达式解析测试

基准时间 2016-05-04 10:00:00 为周三。
"""

from datetime import datetime

import pytest

from time_nlp.chinese.expression_resolver import ExpressionResolver
from time_nlp.chinese.time_unit import RawSpan, TimePoint

BASE = datetime(2016, 5, 4, 10, 0, 0)


@pytest.fixture(scope="module")
def resolver():
    return ExpressionResolver()


def _resolve(resolver, text, prefer_future=True, context=None):
    return resolver.resolve(RawSpan(text, 0, len(text)), BASE, context, prefer_future)


def test_full_expression(resolver):
    result, context = _resolve(resolver, "2016年5月4日下午3点")
    assert result.time == datetime(2016, 5, 4, 15, 0, 0)
    assert result.granularity == "hour"
    assert not result.is_all_day_time
    assert context == TimePoint([2016, 5, 4, 15, -1, -1])


@pytest.mark.parametrize(
    "text, expected",
    [
        ("明天", datetime(2016, 5, 5)),
        ("大后天", datetime(2016, 5, 7)),
        ("昨天", datetime(2016, 5, 3)),
        ("3天后", datetime(2016, 5, 7)),
        ("2个月前", datetime(2016, 3, 1)),
        ("2小时后", datetime(2016, 5, 4, 12, 0)),
        ("半小时前", datetime(2016, 5, 4, 9, 30)),
        ("下周3", datetime(2016, 5, 11)),
        ("上周", datetime(2016, 4, 25)),
        ("这周7", datetime(2016, 5, 8)),
        ("上个月", datetime(2016, 4, 1)),
        ("去年", datetime(2015, 1, 1)),
        ("16年3月", datetime(2016, 3, 1)),
        ("现在", BASE),
        ("2016-05-04", datetime(2016, 5, 4)),
        ("5/4/2016", datetime(2016, 5, 4)),
        ("今晚", datetime(2016, 5, 4, 20, 0)),
        ("明天下午3点", datetime(2016, 5, 5, 15, 0)),
        ("2016年中秋", datetime(2016, 9, 15)),
        ("2016年端午", datetime(2016, 6, 9)),
        ("2016年清明", datetime(2016, 4, 4)),
        ("明年春节", datetime(2017, 1, 28)),
    ],
)
def test_fixed_expressions(resolver, text, expected):
    for prefer_future in (True, False):
        result, _ = _resolve(resolver, text, prefer_future)
        assert result.time == expected, text


@pytest.mark.parametrize(
    "text, future, past",
    [
        ("周1", datetime(2016, 5, 9), datetime(2016, 5, 2)),
        ("周5", datetime(2016, 5, 6), datetime(2016, 5, 6)),
        ("周末", datetime(2016, 5, 7), datetime(2016, 5, 7)),
        ("3号", datetime(2016, 6, 3), datetime(2016, 5, 3)),
        ("8点", datetime(2016, 5, 5, 8, 0), datetime(2016, 5, 4, 8, 0)),
        ("下午3点", datetime(2016, 5, 4, 15, 0), datetime(2016, 5, 4, 15, 0)),
        ("晚上8点", datetime(2016, 5, 4, 20, 0), datetime(2016, 5, 4, 20, 0)),
        ("下午3点1刻", datetime(2016, 5, 4, 15, 15), datetime(2016, 5, 4, 15, 15)),
        ("3点半", datetime(2016, 5, 5, 3, 30), datetime(2016, 5, 4, 3, 30)),
        ("10:30", datetime(2016, 5, 4, 10, 30), datetime(2016, 5, 4, 10, 30)),
        ("5月1日", datetime(2017, 5, 1), datetime(2016, 5, 1)),
        ("5月4", datetime(2017, 5, 4), datetime(2016, 5, 4)),
        ("春节", datetime(2017, 1, 28), datetime(2016, 2, 8)),
        ("除夕", datetime(2017, 1, 27), datetime(2016, 2, 7)),
    ],
)
def test_prefer_future(resolver, text, future, past):
    result, _ = _resolve(resolver, text, prefer_future=True)
    assert result.time == future
    assert result.time > BASE or future == past
    result, _ = _resolve(resolver, text, prefer_future=False)
    assert result.time == past


def test_day_of_month_skips_short_months(resolver):
    base = datetime(2016, 1, 31, 12, 0, 0)
    result, _ = resolver.resolve(RawSpan("30号", 0, 3), base, None, True)
    assert result.time == datetime(2016, 3, 30)


def test_context_fills_higher_fields(resolver):
    context = TimePoint([2016, 5, 7, 3, -1, -1])
    result, context_out = _resolve(resolver, "5点", context=context)
    assert result.time == datetime(2016, 5, 7, 5, 0)
    assert context_out == TimePoint([2016, 5, 7, 5, -1, -1])


def test_context_afternoon_propagates(resolver):
    context = TimePoint([2016, 5, 7, 15, -1, -1])
    result, _ = _resolve(resolver, "5点", context=context)
    assert result.time == datetime(2016, 5, 7, 17, 0)

    # 写明时段词时不再顺延到下午
    result, _ = _resolve(resolver, "上午9点", context=context)
    assert result.time == datetime(2016, 5, 7, 9, 0)


def test_context_ignored_for_complete_dates(resolver):
    context = TimePoint([2010, 1, 1, -1, -1, -1])
    result, _ = _resolve(resolver, "明天", context=context)
    assert result.time == datetime(2016, 5, 5)


def test_context_week_for_bare_weekday(resolver):
    context = TimePoint([2016, 4, 25, -1, -1, -1])
    result, context_out = _resolve(resolver, "周3", context=context)
    assert result.time == datetime(2016, 4, 27)
    assert context_out == TimePoint([2016, 4, 27, -1, -1, -1])

    result, _ = _resolve(resolver, "下周3", context=context)
    assert result.time == datetime(2016, 5, 11)


@pytest.mark.parametrize("text", ["2月30日", "99999年后", "1800年", "你好"])
def test_unresolved(resolver, text):
    for prefer_future in (True, False):
        result, context = _resolve(resolver, text, prefer_future)
        assert result.time is None
        assert not result.resolved
        assert context.is_empty()


def test_all_day_flag(resolver):
    result, _ = _resolve(resolver, "明天")
    assert result.is_all_day_time
    assert result.granularity == "day"
    assert result.to_time_str() == "2016-05-05 00:00:00"
