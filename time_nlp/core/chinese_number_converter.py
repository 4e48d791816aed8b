# Copyright (c) 2025 Ming Yu
# Licensed under the Apache License, Version 2.0

import re
from typing import Optional


_DIGIT_MAP = {
    "零": 0,
    "〇": 0,
    "一": 1,
    "二": 2,
    "两": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
    "壹": 1,
    "贰": 2,
    "貳": 2,
    "叁": 3,
    "參": 3,
    "肆": 4,
    "伍": 5,
    "陆": 6,
    "陸": 6,
    "柒": 7,
    "捌": 8,
    "玖": 9,
}

_UNIT_MAP = {
    "十": 10,
    "拾": 10,
    "百": 100,
    "佰": 100,
    "千": 1000,
    "仟": 1000,
    "万": 10000,
    "萬": 10000,
    "亿": 100000000,
    "億": 100000000,
}

# 口语省略写法："两万二" 即 22000，"三百五" 即 350
_NEXT_LOWER_UNIT = {
    "万": "千",
    "萬": "千",
    "千": "百",
    "仟": "百",
    "百": "十",
    "佰": "十",
}

_DIGIT_CHARS = "".join(_DIGIT_MAP)
_NUMBER_CHARS = _DIGIT_CHARS + "".join(_UNIT_MAP)

# 以数字或"十/拾"开头的中文数字串；单独的"万/百/千"等不转换
_NUMBER_RUN = re.compile(f"[{_DIGIT_CHARS}十拾][{_NUMBER_CHARS}]*")
# 周日/星期天/礼拜天 统一为 7
_SUNDAY = re.compile(r"(?:(?<=周)|(?<=星期)|(?<=礼拜))[日天]")


def convert_chinese_number(text: str) -> Optional[int]:
    """将中文数字转换为整数。

    目标：
    - "七二" -> 72（逐字拼接）
    - "七十二" -> 72（单位解析）
    - "两万二" -> 22000（末位省略单位）
    - 支持 十/百/千/万/亿 与繁体数字
    - 不处理“半”等小数场景（返回None由调用方自行兜底）
    """
    if not text:
        return None

    # 若包含不支持的字符，直接走简单拼接尝试
    if any(ch not in _DIGIT_MAP and ch not in _UNIT_MAP for ch in text):
        return _convert_simple_digits(text)

    # 如果包含单位，用单位算法；否则用简单拼接
    if any(ch in _UNIT_MAP for ch in text):
        val = _convert_with_units(text)
        if val is not None:
            return val
    return _convert_simple_digits(text)


def translate_numbers(text: str) -> str:
    """
    将文本中的中文数字串替换为阿拉伯数字。

    例如："二零一六年五月四日下午三点" -> "2016年5月4日下午3点"，
    "周日" -> "周7"。无法转换的片段保持原样。
    """
    if not text:
        return text
    text = _SUNDAY.sub("7", text)

    def _replace(match):
        value = convert_chinese_number(match.group())
        if value is None:
            return match.group()
        # 逐字拼接保留前导零，如"零五" -> "05"
        if not any(ch in _UNIT_MAP for ch in match.group()):
            return "".join(str(_DIGIT_MAP[ch]) for ch in match.group())
        return str(value)

    return _NUMBER_RUN.sub(_replace, text)


def _convert_simple_digits(text: str) -> Optional[int]:
    # 逐字映射：七二 -> 72, 一二三 -> 123；忽略无法识别的字符
    buf = []
    for ch in text:
        if ch in _DIGIT_MAP:
            buf.append(str(_DIGIT_MAP[ch]))
        elif ch in _UNIT_MAP:
            # 简单模式下遇到单位，直接失败，交由带单位解析
            return None
        else:
            # 非数字字符：终止
            break
    if not buf:
        return None
    return int("".join(buf))


def _convert_with_units(text: str) -> Optional[int]:
    # 分段算法：先按 亿/万 切分到块，再在块内按 千/百/十 乘加
    if len(text) >= 2 and text[-1] in _DIGIT_MAP and text[-2] in _NEXT_LOWER_UNIT:
        text = text + _NEXT_LOWER_UNIT[text[-2]]
    total = 0
    for part, unit_base in _split_by_large_units(text):
        part_val = _eval_small_units(part) if part else 1
        total += part_val * unit_base
    return total


def _split_by_large_units(text: str):
    # 返回 (段文本, 基数) 列表，从左到右消费：如 "一亿二万三千四百五十六" ->
    # [("一", 100000000), ("二", 10000), ("三千四百五十六", 1)]
    result = []
    cur = text
    for markers, base in [(("亿", "億"), 100000000), (("万", "萬"), 10000)]:
        for marker in markers:
            if marker in cur:
                idx = cur.index(marker)
                result.append((cur[:idx], base))
                cur = cur[idx + 1 :]
                break
    # 剩余部分基数为 1
    if cur:
        result.append((cur, 1))
    return result


def _eval_small_units(part: str) -> int:
    # 计算不含 万/亿 的片段：按 千/百/十 组合
    val = 0
    tmp = 0
    unit_order = {
        "千": 1000,
        "仟": 1000,
        "百": 100,
        "佰": 100,
        "十": 10,
        "拾": 10,
    }

    for ch in part:
        if ch in _DIGIT_MAP:
            tmp = _DIGIT_MAP[ch]
        elif ch in unit_order:
            if tmp == 0:
                tmp = 1
            val += tmp * unit_order[ch]
            tmp = 0
    val += tmp
    return val
