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
配置与日志测试
"""

import logging

from time_nlp.core.config import DEFAULT_CONFIG, load_config
from time_nlp.core.logger import get_logger, set_module_log_level, setup_logging


def test_bundled_config():
    config = load_config()
    assert config["model"] == "resource:TimeExp.m"
    assert config["prefer_future"] is True
    assert config["particles"] == "的"


def test_custom_config_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("prefer_future: false\nparticles: 了\nunknown: 1\n", encoding="utf-8")
    config = load_config(str(path))
    assert config["prefer_future"] is False
    assert config["particles"] == "了"
    assert "unknown" not in config


def test_broken_config_falls_back(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("prefer_future: [unclosed\n", encoding="utf-8")
    assert load_config(str(path)) == DEFAULT_CONFIG
    assert load_config(str(tmp_path / "missing.yaml")) == DEFAULT_CONFIG


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TIME_NLP_PREFER_FUTURE", "false")
    monkeypatch.setenv("TIME_NLP_MODEL", "/tmp/model.m")
    config = load_config()
    assert config["prefer_future"] is False
    assert config["model"] == "/tmp/model.m"


def test_logger():
    setup_logging()
    setup_logging(level="DEBUG")
    logger = get_logger("time_nlp.chinese.time_normalizer")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "time_nlp.chinese.time_normalizer"

    set_module_log_level("time_nlp.chinese.pattern_store", "error")
    assert logging.getLogger("time_nlp.chinese.pattern_store").level == logging.ERROR


def test_auto_setup_reads_environment(monkeypatch):
    from time_nlp.core import logger as logger_module

    monkeypatch.setattr(logger_module, "_configured", False)
    monkeypatch.setenv("TIME_NLP_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("TIME_NLP_LOG_FORMAT", "simple")
    logger_module.auto_setup()
    assert logging.getLogger("time_nlp").level == logging.ERROR
