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

from pynini import union
from pynini.lib.pynutil import delete

from ...core.processor import Processor
from ...core.chinese_number_converter import translate_numbers

# 全角数字与常用分隔符 -> 半角
FULL_TO_HALF = [(chr(ord("０") + i), str(i)) for i in range(10)] + [
    ("：", ":"),
    ("－", "-"),
    ("～", "~"),
    ("／", "/"),
    ("．", "."),
]


class PreProcessor(Processor):
    """预处理器：清理空白符和语气助词，并把全角/中文数字转为阿拉伯数字"""

    def __init__(self, particles: str = "的", full_to_half: bool = True):
        super().__init__(name="preprocessor")
        self.particles = particles or ""

        processor = self.build_rule(self.DELETE_SPACE)
        if self.particles:
            processor @= self.build_rule(delete(union(*self.particles)))
        if full_to_half:
            processor @= self.build_rule(self.build_map(FULL_TO_HALF))

        self.processor = processor.optimize()

    def clean(self, text: str) -> str:
        """
        待匹配字符串的预处理

        依次执行：删除空白符、删除语气助词、全角数字转半角、中文数字转阿拉伯数字。

        Args:
            text: 原始文本

        Returns:
            str: 预处理后的文本
        """
        if not text:
            return ""
        return translate_numbers(self.rewrite(text))
