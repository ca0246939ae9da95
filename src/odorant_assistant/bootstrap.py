from __future__ import annotations

from dataclasses import dataclass

import httpx

from odorant_assistant.app_config import AppConfig, RuntimeEnv
from odorant_assistant.assistant import Assistant
from odorant_assistant.assistant_config import AssistantConfig
from odorant_assistant.chatbot_client import ChatbotClient
from odorant_assistant.logging_config import setup_logging


@dataclass
class AppRuntime:
    assistant: Assistant
    chatbot_client: ChatbotClient
    log_descriptions: list[str]


def bootstrap_runtime(app: AppConfig, env: RuntimeEnv) -> AppRuntime:
    log_descriptions = setup_logging(app)

    if not env.chatbot_api_key:
        raise ValueError(f"{env.chatbot_api_key_env_var} environment variable is required.")

    chatbot_client = ChatbotClient(
        url=app.chatbot_url,
        api_key=env.chatbot_api_key,
        chatbot_name=app.chatbot_name,
        username=app.username,
        timeout_seconds=app.request_timeout_seconds,
        http_client=httpx.AsyncClient(timeout=app.request_timeout_seconds),
    )

    assistant = Assistant(AssistantConfig(sender=chatbot_client))

    return AppRuntime(
        assistant=assistant,
        chatbot_client=chatbot_client,
        log_descriptions=log_descriptions,
    )
