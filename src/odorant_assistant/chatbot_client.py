from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx
from loguru import logger
from pydantic import BaseModel, ValidationError

DEFAULT_CHATBOT_URL = "https://api.vectorshift.ai/api/chatbots/run"
_TIMEOUT_SECONDS = 30


class ChatbotError(Exception):
    """Any failure to obtain a reply from the remote chatbot."""


class ChatbotRequest(BaseModel):
    input: str
    chatbot_name: str
    username: str
    conversation_id: None = None


class ChatbotReply(BaseModel):
    output: str


@runtime_checkable
class ChatSender(Protocol):
    async def send(self, text: str) -> str:
        """Return the bot's reply text. Raises on errors (caller handles fallback)."""
        ...


class ChatbotClient:
    def __init__(
        self,
        *,
        url: str = DEFAULT_CHATBOT_URL,
        api_key: str,
        chatbot_name: str,
        username: str,
        timeout_seconds: float = _TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._api_key = api_key
        self._chatbot_name = chatbot_name
        self._username = username
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client

    @property
    def chatbot_name(self) -> str:
        return self._chatbot_name

    async def send(self, text: str) -> str:
        payload = ChatbotRequest(
            input=text,
            chatbot_name=self._chatbot_name,
            username=self._username,
        ).model_dump(mode="json")
        headers = {
            "Api-Key": self._api_key,
            "Content-Type": "application/json",
        }

        logger.debug(f"Chatbot request: chatbot={self._chatbot_name}, chars={len(text)}")
        try:
            if self._http_client is not None:
                response = await self._http_client.post(self._url, json=payload, headers=headers)
            else:
                async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
                    response = await client.post(self._url, json=payload, headers=headers)
        except httpx.TimeoutException as ex:
            raise ChatbotError(f"Request timed out after {self._timeout_seconds} seconds") from ex
        except httpx.HTTPError as ex:
            raise ChatbotError(f"Request failed: {type(ex).__name__}: {ex}") from ex

        if not response.is_success:
            raise ChatbotError(f"HTTP {response.status_code} from chatbot API")

        try:
            reply = ChatbotReply.model_validate(response.json())
        except (ValueError, ValidationError) as ex:
            raise ChatbotError(f"Malformed chatbot response: {ex}") from ex

        logger.debug(f"Chatbot response: status={response.status_code}, chars={len(reply.output)}")
        return reply.output

    async def aclose(self) -> None:
        if self._http_client is not None:
            await self._http_client.aclose()
