"""配置管理模块。

支持从环境变量、.env 以及 config.yaml 加载配置，全部字段都有默认值，
未提供任何配置时程序行为与内置默认一致。
"""

import logging
import os
import warnings
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _load_config_from_yaml() -> Dict[str, Any]:
    """从 config.yaml 加载配置（若存在）。"""
    explicit = os.getenv("CHAT_CORE_CONFIG_FILE")
    path = Path(explicit).expanduser() if explicit else Path.cwd() / "config.yaml"
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(f"Failed to read config file {path}: {exc}")
        return {}
    if not isinstance(data, dict):
        warnings.warn(f"Config file {path} is not a mapping, ignored")
        return {}
    return data


class ChatSettings(BaseSettings):
    """配置设置（使用 Pydantic）。"""

    # ---- Dispatcher ----
    queue_capacity: int = Field(default=100, ge=1, description="Dispatcher 队列容量")
    poll_interval: float = Field(
        default=0.1,
        gt=0,
        description="后台线程检查停止信号的轮询间隔（秒）",
    )

    # ---- 展示 ----
    timestamp_format: str = Field(default="%Y-%m-%d %H:%M:%S", description="时间戳输出格式")
    welcome_message: str = Field(
        default="Welcome to the chat. Simulated users: Alice, Bob, Eve.",
        description="启动时由 System 发送的欢迎语",
    )

    # ---- 模拟 ----
    simulation_enabled: bool = Field(default=True, description="是否启动模拟用户")
    demo_delay_scale: float = Field(default=1.0, ge=0, description="演示模式等待时间的缩放系数")

    # ---- 日志 ----
    log_dir: str = Field(default="logs", description="日志目录")
    log_level: str = Field(default="INFO", description="日志级别")

    model_config = SettingsConfigDict(
        env_prefix="CHAT_CORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def _config_source() -> Dict[str, Any]:
        return _load_config_from_yaml()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {v}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            cls._config_source,
            file_secret_settings,
        )


settings = ChatSettings()
