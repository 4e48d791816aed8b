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
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .expression_resolver import ExpressionResolver
from .match_merger import scan
from .pattern_store import PatternSet, PatternStore
from .result_filter import filter_invalid
from .rules import PreProcessor
from .time_unit import ResolvedExpression, TimePoint, TimeType
from ..core.config import DEFAULT_CONFIG, load_config
from ..core.logger import get_logger
from ..core.utils import format_time_base, parse_time_base

# 两个表达式之间只隔着这些连接符时视为一个区间
_RANGE_CONNECTOR = re.compile(r"到|至|~|～|-|—")


class TimeNormalizer:
    """
    中文时间表达式识别与归一化

    Example:
        >>> normalizer = TimeNormalizer()
        >>> [r.to_time_str() for r in normalizer.parse("2016年5月4日下午3点", "2016-05-04-10-00-00")]
        ['2016-05-04 15:00:00']
    """

    def __init__(
        self,
        model: Optional[str] = None,
        prefer_future: Optional[bool] = None,
        particles: Optional[str] = None,
        config: Union[str, Dict[str, Any], None] = None,
    ):
        """
        初始化时间归一化器

        Args:
            model: 模型位置，缺省时取配置
            prefer_future: 是否倾向于未来时间，缺省时取配置
            particles: 预处理时删除的语气助词，缺省时取配置
            config: 配置文件路径或配置字典

        Raises:
            ModelLoadError: 模型无法加载
        """
        self.logger = get_logger(__name__)
        if isinstance(config, dict):
            settings = dict(DEFAULT_CONFIG)
            settings.update({k: v for k, v in config.items() if k in DEFAULT_CONFIG})
        else:
            settings = load_config(config)
        if model is not None:
            settings["model"] = model
        if prefer_future is not None:
            settings["prefer_future"] = prefer_future
        if particles is not None:
            settings["particles"] = particles
        self.config = settings

        self.patterns = PatternStore().load(settings["model"])
        self.preprocessor = PreProcessor(
            particles=settings["particles"], full_to_half=settings["full_to_half"]
        )
        self.resolver = ExpressionResolver()
        self._prefer_future = bool(settings["prefer_future"])

        now = datetime.now().replace(microsecond=0)
        self._time_base = now
        self._original_time_base = now

    def parse(self, text: str, time_base: Union[str, datetime, None] = None) -> List[ResolvedExpression]:
        """
        识别并解析文本中的时间表达式

        Args:
            text: 待分析文本
            time_base: 基准时间，YYYY-MM-DD-HH-mm-ss 格式的字符串或 datetime，缺省时取当前时间

        Returns:
            List[ResolvedExpression]: 按出现顺序排列的有效解析结果

        Raises:
            InvalidTimeBaseError: 基准时间格式错误
        """
        if time_base is None:
            base = datetime.now().replace(microsecond=0)
        else:
            base = parse_time_base(time_base)
        self._time_base = base
        self._original_time_base = base

        if not text:
            return []

        cleaned = self.preprocessor.clean(text)
        spans = scan(cleaned, self.patterns)
        self.logger.debug(f"预处理: {cleaned!r}, 表达式: {[s.text for s in spans]}")

        results = []
        context = TimePoint()
        current = base
        for span in spans:
            result, context = self.resolver.resolve(span, base, context, self._prefer_future)
            results.append(result)
            if result.resolved:
                current = self._overlay(current, context)

        self._classify_ranges(cleaned, results)
        self._time_base = current
        return filter_invalid(results)

    def _classify_ranges(self, text: str, results: List[ResolvedExpression]) -> None:
        # 区间的两端都必须解析成功
        i = 0
        while i + 1 < len(results):
            left, right = results[i], results[i + 1]
            gap = text[left.end:right.start]
            if left.resolved and right.resolved and _RANGE_CONNECTOR.fullmatch(gap):
                left.time_type = TimeType.RANGE_START
                right.time_type = TimeType.RANGE_END
                i += 2
            else:
                i += 1

    def _overlay(self, base: datetime, context: TimePoint) -> datetime:
        # 用表达式的结果覆盖基准时间中对应的字段
        fields = [base.year, base.month, base.day, base.hour, base.minute, base.second]
        for i, value in enumerate(context.tunit):
            if value != -1:
                fields[i] = value
        try:
            return datetime(*fields)
        except ValueError:
            return base

    def get_patterns(self) -> PatternSet:
        return self.patterns

    def get_time_base(self) -> str:
        return format_time_base(self._time_base)

    def get_original_time_base(self) -> str:
        return format_time_base(self._original_time_base)

    def set_time_base(self, time_base: Union[str, datetime]) -> None:
        """
        设置当前基准时间

        Raises:
            InvalidTimeBaseError: 基准时间格式错误
        """
        self._time_base = parse_time_base(time_base)

    def reset_time_base(self) -> None:
        """把当前基准时间恢复为最近一次解析时传入的基准时间"""
        self._time_base = self._original_time_base

    def is_prefer_future(self) -> bool:
        return self._prefer_future

    def set_prefer_future(self, prefer_future: bool) -> None:
        self._prefer_future = bool(prefer_future)
