"""日志配置"""

import logging
from pathlib import Path

ROOT_LOGGER_NAME = "fray"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: str = "INFO",
    log_file: Path | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """配置根 logger，可重复调用（后一次调用覆盖级别与 handler）

    Args:
        level: 日志级别名称
        log_file: 可选的日志文件路径
        format_string: 自定义格式

    Returns:
        fray 包的 logger
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    for handler in list(root_logger.handlers):
        if getattr(handler, "_fray_handler", False):
            root_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._fray_handler = True  # type: ignore[attr-defined]
        root_logger.addHandler(handler)

    return logging.getLogger(ROOT_LOGGER_NAME)


def get_logger(name: str) -> logging.Logger:
    """获取 fray 命名空间下的 logger"""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
