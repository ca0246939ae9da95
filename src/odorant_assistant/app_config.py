from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from odorant_assistant.chatbot_client import DEFAULT_CHATBOT_URL

API_KEY_ENV_VAR = "CHATBOT_API_KEY"


@dataclass
class RuntimeEnv:
    chatbot_api_key: str
    chatbot_api_key_env_var: str


@dataclass
class AppConfig:
    chatbot_url: str
    chatbot_name: str
    username: str
    request_timeout_seconds: float
    log_level: str
    console_log_level: str
    log_file: str | None
    log_consumers: list | None


def load_json_config() -> dict:
    config_path = Path.cwd() / "config.json"
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            return json.load(f)
    return {}


def _to_timeout(value: object) -> float:
    try:
        timeout = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"RequestTimeoutSeconds must be a number, got {value!r}") from None
    if timeout <= 0:
        raise ValueError(f"RequestTimeoutSeconds must be positive, got {value!r}")
    return timeout


def parse_app_config(config: dict) -> AppConfig:
    """Raises ValueError when a setting cannot be interpreted."""
    log_file = config.get("LogFile", "odorant.log")
    return AppConfig(
        chatbot_url=str(config.get("ChatbotUrl", DEFAULT_CHATBOT_URL)).strip(),
        chatbot_name=str(config.get("ChatbotName", "sto")).strip(),
        username=str(config.get("Username", "alexsey")).strip(),
        request_timeout_seconds=_to_timeout(config.get("RequestTimeoutSeconds", 30)),
        log_level=str(config.get("LogLevel", "INFO")).upper(),
        console_log_level=str(config.get("ConsoleLogLevel", "WARNING")).upper(),
        log_file=(str(log_file).strip() or None) if log_file else None,
        log_consumers=config.get("LogConsumers"),
    )


def resolve_runtime_env() -> RuntimeEnv:
    return RuntimeEnv(
        chatbot_api_key=os.environ.get(API_KEY_ENV_VAR, ""),
        chatbot_api_key_env_var=API_KEY_ENV_VAR,
    )
