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
预处理与中文数字转换测试
"""

import pytest

from time_nlp.chinese.rules import PreProcessor
from time_nlp.core.chinese_number_converter import convert_chinese_number, translate_numbers


@pytest.fixture(scope="module")
def preprocessor():
    return PreProcessor()


def test_remove_whitespace_and_particles(preprocessor):
    assert preprocessor.clean("2016年 5月4日 的 下午\t三点") == "2016年5月4日下午3点"
    assert preprocessor.clean("明天\r\n下午　三点") == "明天下午3点"


def test_chinese_numerals(preprocessor):
    assert preprocessor.clean("二零一六年五月四日") == "2016年5月4日"
    assert preprocessor.clean("十二点三十分") == "12点30分"
    assert preprocessor.clean("三点一刻") == "3点1刻"


def test_sunday(preprocessor):
    assert preprocessor.clean("周日") == "周7"
    assert preprocessor.clean("星期天下午") == "星期7下午"
    assert preprocessor.clean("礼拜日") == "礼拜7"


def test_full_width(preprocessor):
    assert preprocessor.clean("１０：３０") == "10:30"


def test_custom_particles():
    cleaner = PreProcessor(particles="了的")
    assert cleaner.clean("明天的下午三点了") == "明天下午3点"


def test_empty(preprocessor):
    assert preprocessor.clean("") == ""
    assert preprocessor.clean(None) == ""


@pytest.mark.parametrize(
    "text",
    ["2016年 5月4日 下午三点", "周日上午十点半", "两万二千", "１２：０５开会的", "今天天气不错"],
)
def test_idempotent(preprocessor, text):
    once = preprocessor.clean(text)
    assert preprocessor.clean(once) == once


def test_convert_chinese_number():
    assert convert_chinese_number("七二") == 72
    assert convert_chinese_number("七十二") == 72
    assert convert_chinese_number("十一") == 11
    assert convert_chinese_number("两万二") == 22000
    assert convert_chinese_number("三百五") == 350
    assert convert_chinese_number("一亿二万三千四百五十六") == 100023456
    assert convert_chinese_number("") is None


def test_translate_numbers_keeps_leading_zero():
    assert translate_numbers("零五年") == "05年"
    assert translate_numbers("没有数字") == "没有数字"
