"""
日志配置模块

只配置包级日志器 time_nlp，宿主程序的根日志器保持不变。
各模块通过 get_logger(__name__) 取得 time_nlp.* 下的子日志器。

环境变量:
    TIME_NLP_LOG_LEVEL: 日志级别 (DEBUG, INFO, WARNING, ERROR, CRITICAL)，默认 WARNING
    TIME_NLP_LOG_FILE: 日志文件路径
    TIME_NLP_LOG_FORMAT: 日志格式 (default, simple)
"""

import logging
import os
import sys
from typing import List, Optional

PACKAGE_LOGGER = "time_nlp"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

LOG_FORMATS = {
    "default": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    # 简化格式（用于生产环境）
    "simple": "%(levelname)s - %(name)s - %(message)s",
}
DEFAULT_FORMAT = LOG_FORMATS["default"]

_configured = False


def _level_of(level: Optional[str]) -> int:
    if level is None:
        level = os.environ.get("TIME_NLP_LOG_LEVEL", "WARNING")
    return LOG_LEVELS.get(str(level).upper(), logging.WARNING)


def _build_handlers(level: int, log_file: Optional[str], format_string: str, console_output: bool) -> List[logging.Handler]:
    formatter = logging.Formatter(format_string)
    handlers: List[logging.Handler] = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level: str = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    console_output: bool = True,
    force: bool = False,
):
    """
    配置 time_nlp 包级日志器，重复调用不生效，除非 force=True

    Args:
        level: 日志级别，为 None 时读取 TIME_NLP_LOG_LEVEL，默认为 WARNING
        log_file: 日志文件路径，提供时同时写入文件
        format_string: 日志格式字符串
        console_output: 是否输出到标准输出
        force: 已配置过时是否重新配置
    """
    global _configured
    if _configured and not force:
        return

    log_level = _level_of(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(log_level, log_file, format_string, console_output):
        package_logger.addHandler(handler)
    # 日志只由本包的处理器输出一次
    package_logger.propagate = False

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    获取指定名称的日志器，首次调用时按环境变量完成默认配置

    Args:
        name: 日志器名称，通常使用 __name__

    Returns:
        logging.Logger: 日志器实例
    """
    if not _configured:
        setup_logging()
    return logging.getLogger(name)


def set_module_log_level(module_name: str, level: str):
    """
    为特定模块设置日志级别，如 set_module_log_level("time_nlp.chinese.pattern_store", "DEBUG")
    """
    logging.getLogger(module_name).setLevel(_level_of(level))


def auto_setup():
    """根据环境变量 TIME_NLP_LOG_LEVEL / TIME_NLP_LOG_FILE / TIME_NLP_LOG_FORMAT 配置日志系统"""
    log_format = os.environ.get("TIME_NLP_LOG_FORMAT", "default")
    setup_logging(
        level=os.environ.get("TIME_NLP_LOG_LEVEL", "WARNING"),
        log_file=os.environ.get("TIME_NLP_LOG_FILE"),
        format_string=LOG_FORMATS.get(log_format, DEFAULT_FORMAT),
    )
