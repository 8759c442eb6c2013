"""配置管理：config/fray.yml + 环境变量覆盖"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "fray.yml"

# Message bodies are bounded before scanning.
DEFAULT_MAX_BODY_LENGTH = 65536

_ENV_OVERRIDES = {
    "agents_dir": "FRAY_AGENTS_DIR",
    "log_level": "FRAY_LOG_LEVEL",
    "log_file": "FRAY_LOG_FILE",
    "max_body_length": "FRAY_MAX_BODY_LENGTH",
}


@dataclass
class Config:
    """运行配置

    Attributes:
        agents_dir: agent 注册目录（不存在时进入无注册表的启发式模式）
        log_level: 日志级别
        log_file: 日志文件（可选）
        max_body_length: 单条消息允许解析的最大长度
    """

    agents_dir: Path = Path("agents")
    log_level: str = "INFO"
    log_file: Path | None = None
    max_body_length: int = DEFAULT_MAX_BODY_LENGTH

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> "Config":
        config = cls()
        known = {f.name for f in fields(cls)}
        for key, value in values.items():
            if key not in known:
                logger.warning("[WARN] unknown config key: %s", key)
                continue
            if value is None or value == "":
                continue
            if key == "agents_dir":
                value = Path(value)
            elif key == "log_file":
                value = Path(value)
            elif key == "max_body_length":
                value = int(value)
            elif key == "log_level":
                value = str(value).upper()
            setattr(config, key, value)
        return config


def find_config_file(search_dirs: list[Path] | None = None) -> Path | None:
    """在候选目录的 config/ 下查找 fray.yml"""
    candidates = search_dirs or [
        Path(__file__).parent.parent.parent,  # 项目根目录
        Path.cwd(),  # 当前工作目录
    ]
    for directory in candidates:
        path = directory / "config" / CONFIG_FILENAME
        if path.exists():
            return path
    return None


def _read_config_file(config_file: Path) -> dict[str, Any]:
    try:
        with open(config_file, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("[ERROR] 加载配置文件失败: %s，使用默认配置", e)
        return {}

    if not isinstance(document, dict) or not isinstance(document.get("fray"), dict):
        logger.warning("[WARN] %s 格式错误，使用默认配置", config_file)
        return {}
    return document["fray"]


def load_config(config_file: Path | None = None, environ: dict[str, str] | None = None) -> Config:
    """加载配置：默认值 <- 配置文件 <- 环境变量

    Args:
        config_file: 显式指定的配置文件（None 则自动查找）
        environ: 环境变量映射（None 则使用 os.environ）

    Returns:
        Config
    """
    env = os.environ if environ is None else environ

    values: dict[str, Any] = {}
    path = config_file or find_config_file()
    if path is None:
        logger.info("[INFO] 未找到 %s，使用默认配置", CONFIG_FILENAME)
    else:
        values.update(_read_config_file(path))

    for key, env_name in _ENV_OVERRIDES.items():
        if env.get(env_name):
            values[key] = env[env_name]

    try:
        return Config.from_mapping(values)
    except (TypeError, ValueError) as e:
        logger.error("[ERROR] 配置值无效: %s，使用默认配置", e)
        return Config()
