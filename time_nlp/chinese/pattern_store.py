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
时间表达式模型的加载与写出

模型文件为 gzip 压缩的 JSON：{"version": "...", "patterns": ["...", ...]}。
加载时每条模式都从文本重新编译，并合并为一个交替正则用于扫描。
"""

from __future__ import annotations

import gzip
import json
import os
import re
import zlib
from typing import Iterable, List, Tuple, Union
from urllib.error import URLError
from urllib.request import urlopen

from importlib_resources import files

from ..core.exceptions import ModelLoadError
from ..core.logger import get_logger

RESOURCE_PREFIX = "resource:"
RESOURCE_PACKAGE = "time_nlp.chinese.data"
DEFAULT_MODEL = RESOURCE_PREFIX + "TimeExp.m"


class PatternSet:
    """
    不可变的时间表达式模式集合

    Attributes:
        version (str): 模型版本
        patterns (Tuple[str, ...]): 模式源文本，按优先级排列
        regex (re.Pattern): 合并后的交替正则 (?:p1)|(?:p2)|...
    """

    __slots__ = ("_version", "_patterns", "_regex")

    def __init__(self, patterns: Iterable[str], version: str = "1.0.0"):
        self._patterns: Tuple[str, ...] = tuple(patterns)
        self._version = version
        self._regex = re.compile("|".join(f"(?:{p})" for p in self._patterns))

    @property
    def version(self) -> str:
        return self._version

    @property
    def patterns(self) -> Tuple[str, ...]:
        return self._patterns

    @property
    def regex(self) -> re.Pattern:
        return self._regex

    def finditer(self, text: str):
        return self._regex.finditer(text)

    def __len__(self):
        return len(self._patterns)

    def __repr__(self):
        return f"PatternSet(version={self._version!r}, patterns={len(self._patterns)})"


class PatternStore:
    """模型存取：支持本地路径、file:/http(s): URL 以及 resource:<名称> 包内资源"""

    def __init__(self):
        self.logger = get_logger(__name__)

    def load(self, source: str = DEFAULT_MODEL) -> PatternSet:
        """
        加载并校验时间表达式模型

        Args:
            source: 模型位置

        Returns:
            PatternSet: 编译好的模式集合

        Raises:
            ModelLoadError: 模型不存在、不是 gzip、不是合法 JSON、结构不对或模式无法编译
        """
        if not source:
            raise ModelLoadError(source, "模型位置为空")

        try:
            raw = self._read_bytes(source)
            payload = json.loads(gzip.decompress(raw).decode("utf-8"))
        except ModelLoadError:
            raise
        except (OSError, URLError) as e:
            self.logger.error(f"读取模型失败: {source}: {e}")
            raise ModelLoadError(source, f"无法读取: {e}") from e
        except (EOFError, zlib.error) as e:
            self.logger.error(f"模型不是合法的 gzip 数据: {source}: {e}")
            raise ModelLoadError(source, f"无法解压: {e}") from e
        except (UnicodeDecodeError, ValueError) as e:
            self.logger.error(f"模型反序列化失败: {source}: {e}")
            raise ModelLoadError(source, f"无法反序列化: {e}") from e

        version, patterns = self._validate(source, payload)
        try:
            pattern_set = PatternSet(patterns, version=version)
        except re.error as e:
            self.logger.error(f"模型中的正则无法编译: {source}: {e}")
            raise ModelLoadError(source, f"正则无法编译: {e}") from e

        self.logger.info(f"已加载时间表达式模型 {source}，版本 {version}，共 {len(pattern_set)} 条模式")
        return pattern_set

    def write(
        self,
        patterns: Union[PatternSet, Iterable[str]],
        path: str,
        version: str = None,
    ) -> None:
        """
        将模式集合写成 gzip JSON 模型文件

        Args:
            patterns: PatternSet 或模式源文本序列
            path: 输出文件路径
            version: 模型版本，缺省时沿用 PatternSet 的版本
        """
        if isinstance(patterns, PatternSet):
            version = version or patterns.version
            patterns = patterns.patterns
        patterns = list(patterns)
        # 写出前先确认每条模式都能编译
        for p in patterns:
            re.compile(p)

        payload = {"version": version or "1.0.0", "patterns": patterns}
        data = json.dumps(payload, ensure_ascii=False, indent=2).encode("utf-8")
        with gzip.open(path, "wb") as f:
            f.write(data)
        self.logger.info(f"已写出时间表达式模型 {path}，共 {len(patterns)} 条模式")

    def _read_bytes(self, source: str) -> bytes:
        if source.startswith(RESOURCE_PREFIX):
            name = source[len(RESOURCE_PREFIX):]
            resource = files(RESOURCE_PACKAGE).joinpath(name)
            if not resource.is_file():
                self.logger.error(f"包内模型资源不存在: {name}")
                raise ModelLoadError(source, "包内资源不存在")
            return resource.read_bytes()

        if re.match(r"(?:file|https?):", source, re.I):
            with urlopen(source) as resp:
                return resp.read()

        if not os.path.isfile(source):
            self.logger.error(f"模型文件不存在: {source}")
            raise ModelLoadError(source, "文件不存在")
        with open(source, "rb") as f:
            return f.read()

    def _validate(self, source, payload) -> Tuple[str, List[str]]:
        if not isinstance(payload, dict):
            raise ModelLoadError(source, "模型顶层必须是对象")
        version = payload.get("version")
        patterns = payload.get("patterns")
        if not isinstance(version, str):
            raise ModelLoadError(source, "缺少字符串类型的 version")
        if not isinstance(patterns, list) or not patterns:
            raise ModelLoadError(source, "patterns 必须是非空列表")
        if not all(isinstance(p, str) and p for p in patterns):
            raise ModelLoadError(source, "patterns 中存在非字符串或空模式")
        return version, patterns


def load_patterns(source: str = DEFAULT_MODEL) -> PatternSet:
    """加载时间表达式模型的便捷函数"""
    return PatternStore().load(source)
