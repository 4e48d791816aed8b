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
# !/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
TimeNormalizer 端到端测试
"""

from datetime import datetime

import pytest

import time_nlp
from time_nlp import InvalidTimeBaseError, ModelLoadError, TimeNormalizer, TimeType
from time_nlp.chinese.pattern_store import PatternSet

BASE = "2016-05-04-10-00-00"


@pytest.fixture(scope="module")
def normalizer():
    return TimeNormalizer(config={"prefer_future": True})


@pytest.mark.parametrize("prefer_future", [True, False])
def test_round_trip_scenario(normalizer, prefer_future):
    normalizer.set_prefer_future(prefer_future)
    try:
        results = normalizer.parse("2016年5月4日 下午3点", BASE)
    finally:
        normalizer.set_prefer_future(True)
    assert len(results) == 1
    assert results[0].text == "2016年5月4日下午3点"
    assert results[0].to_time_str() == "2016-05-04 15:00:00"
    assert results[0].time_type == TimeType.POINT


def test_chinese_numerals_and_particles(normalizer):
    results = normalizer.parse("二零一六年五月四日的下午三点开会", BASE)
    assert [r.to_time_str() for r in results] == ["2016-05-04 15:00:00"]


def test_empty_and_no_match(normalizer):
    assert normalizer.parse("", BASE) == []
    assert normalizer.parse("你好世界", BASE) == []


def test_invalid_time_base(normalizer):
    for bad in ["2016-5-4", "2016-05-04 10:00:00", "2016-02-30-10-00-00", 20160504]:
        with pytest.raises(InvalidTimeBaseError):
            normalizer.parse("明天", bad)
    with pytest.raises(ValueError):
        normalizer.set_time_base("yesterday")


def test_datetime_time_base(normalizer):
    results = normalizer.parse("明天", datetime(2016, 5, 4, 10, 0, 0, 123))
    assert results[0].time == datetime(2016, 5, 5)


def test_time_base_accessors(normalizer):
    normalizer.parse("明天下午3点", BASE)
    assert normalizer.get_original_time_base() == BASE
    assert normalizer.get_time_base() == "2016-05-05-15-00-00"

    normalizer.reset_time_base()
    assert normalizer.get_time_base() == BASE

    normalizer.set_time_base("2017-01-01-08-30-00")
    assert normalizer.get_time_base() == "2017-01-01-08-30-00"
    assert normalizer.get_original_time_base() == BASE


def test_range_classification(normalizer):
    results = normalizer.parse("周六三点到五点", BASE)
    assert [r.to_time_str() for r in results] == ["2016-05-07 03:00:00", "2016-05-07 05:00:00"]
    assert [r.time_type for r in results] == [TimeType.RANGE_START, TimeType.RANGE_END]


def test_range_afternoon_propagation(normalizer):
    results = normalizer.parse("下午3点-5点", BASE)
    assert [r.to_time_str() for r in results] == ["2016-05-04 15:00:00", "2016-05-04 17:00:00"]
    assert results[1].time_type == TimeType.RANGE_END


def test_range_weekday_follows_previous_week(normalizer):
    results = normalizer.parse("下周一到周三", "2016-05-02-10-00-00")
    assert [r.text for r in results] == ["下周1", "周3"]
    assert [r.time for r in results] == [datetime(2016, 5, 9), datetime(2016, 5, 11)]
    assert [r.time_type for r in results] == [TimeType.RANGE_START, TimeType.RANGE_END]


def test_range_weekday_with_hours(normalizer):
    results = normalizer.parse("周六3点到周日5点", BASE)
    assert [r.to_time_str() for r in results] == ["2016-05-07 03:00:00", "2016-05-08 05:00:00"]


def test_range_day_follows_previous_month(normalizer):
    results = normalizer.parse("下个月5号到10号", BASE)
    assert [r.time for r in results] == [datetime(2016, 6, 5), datetime(2016, 6, 10)]
    assert [r.time_type for r in results] == [TimeType.RANGE_START, TimeType.RANGE_END]


def test_range_with_unresolved_side_is_point(normalizer):
    results = normalizer.parse("2月30日到3月2日", BASE)
    assert [r.text for r in results] == ["3月2日"]
    assert results[0].time_type == TimeType.POINT


def test_time_base_keeps_last_resolved_expression(normalizer):
    normalizer.parse("明天3点和2月30日", BASE)
    assert normalizer.get_time_base() == "2016-05-05-03-00-00"
    assert normalizer.get_original_time_base() == BASE


def test_separate_points(normalizer):
    results = normalizer.parse("明天上午开会，后天晚上聚餐", BASE)
    assert [r.to_time_str() for r in results] == ["2016-05-05 10:00:00", "2016-05-06 20:00:00"]
    assert all(r.time_type == TimeType.POINT for r in results)


def test_prefer_future_toggle(normalizer):
    assert normalizer.is_prefer_future()
    assert normalizer.parse("周一", BASE)[0].time == datetime(2016, 5, 9)
    assert normalizer.parse("3号", BASE)[0].time == datetime(2016, 6, 3)

    normalizer.set_prefer_future(False)
    try:
        assert not normalizer.is_prefer_future()
        assert normalizer.parse("周一", BASE)[0].time == datetime(2016, 5, 2)
        assert normalizer.parse("3号", BASE)[0].time == datetime(2016, 5, 3)
    finally:
        normalizer.set_prefer_future(True)


def test_unresolved_dropped(normalizer):
    results = normalizer.parse("2月30日和明天", BASE)
    assert [r.text for r in results] == ["明天"]


def test_get_patterns(normalizer):
    assert isinstance(normalizer.get_patterns(), PatternSet)


def test_model_load_error():
    with pytest.raises(ModelLoadError):
        TimeNormalizer(model="/nonexistent/TimeExp.m")


def test_constructor_overrides_config():
    assert not TimeNormalizer(prefer_future=False).is_prefer_future()
    assert not TimeNormalizer(config={"prefer_future": False}).is_prefer_future()


def test_module_level_parse():
    results = time_nlp.parse("明天下午3点开会", BASE)
    assert [r.to_time_str() for r in results] == ["2016-05-05 15:00:00"]
    assert results[0].to_dict()["granularity"] == "hour"
