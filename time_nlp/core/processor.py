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
FST基础文本处理器模块

提供基于有限状态转换器(FST)的文本改写功能。
"""

from typing import Any, Optional

from pynini import (
    cdrewrite,
    cross,
    escape,
    Fst,
    shortestpath,
    union,
)
from pynini.lib import byte, utf8
from pynini.lib.pynutil import delete

from .logger import get_logger


class Processor:
    """
    FST基础文本处理类，用于构建和执行上下文相关的改写规则。

    Attributes:
        name (str): 处理器名称
        processor (Optional[Fst]): 组合后的改写FST
        SPACE: 空白字符集（含不间断空格与全角空格）
        VCHAR: 有效UTF-8字符集
        VSIGMA: 任意字符序列
    """

    def __init__(self, name: str) -> None:
        """
        初始化处理器。

        Args:
            name: 处理器名称，用于标识和日志记录
        """
        self.logger = get_logger(__name__)
        self.SPACE = union(byte.SPACE, " ", "　").optimize()
        self.VCHAR = utf8.VALID_UTF8_CHAR
        self.VSIGMA = self.VCHAR.star

        self.DELETE_SPACE = delete(self.SPACE)

        self.name = name
        self.processor: Optional[Fst] = None

    def build_rule(self, fst: Fst, left_context: str = "", r: str = "") -> Any:
        """
        构建上下文相关的重写规则。

        Args:
            fst: 输入FST转换器
            left_context: 左上下文（默认为空字符串）
            r: 右上下文（默认为空字符串）

        Returns:
            Fst: 上下文相关的重写规则
        """
        return cdrewrite(fst, left_context, r, self.VSIGMA)

    def build_map(self, pairs) -> Fst:
        """由 (输入, 输出) 字符对构建映射FST"""
        return union(*[cross(src, dst) for src, dst in pairs]).optimize()

    def rewrite(self, text: str) -> str:
        """
        用已构建的改写FST处理文本。

        Args:
            text: 输入文本

        Returns:
            str: 改写后的文本；FST无法处理时原样返回
        """
        if not text:
            return ""
        if self.processor is None:
            raise ValueError(f"处理器 {self.name} 尚未构建")
        try:
            lattice = escape(text) @ self.processor
            return shortestpath(lattice, nshortest=1).string()
        except Exception as e:
            self.logger.warning(f"FST改写失败: {e}, 文本: {text[:50]}")
            return text
