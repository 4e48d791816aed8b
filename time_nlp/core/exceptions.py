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
异常定义模块

时间表达式无法解析不是异常：解析失败的表达式以未解析值返回，并被结果过滤器丢弃。
这里只定义需要上抛给调用方的错误。
"""


class TimeNlpError(Exception):
    """time_nlp 所有异常的基类"""


class ModelLoadError(TimeNlpError):
    """时间表达式模型不存在、无法解压、无法反序列化或内容非法"""

    def __init__(self, source, reason):
        self.source = source
        self.reason = reason
        super().__init__(f"无法加载时间表达式模型 {source!r}: {reason}")


class InvalidTimeBaseError(TimeNlpError, ValueError):
    """基准时间文本不符合 YYYY-MM-DD-HH-mm-ss 格式"""

    def __init__(self, time_base):
        self.time_base = time_base
        super().__init__(f"基准时间格式错误，应为 YYYY-MM-DD-HH-mm-ss: {time_base!r}")
