from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from odorant_assistant.chatbot_client import ChatSender
from odorant_assistant.messages import Message, Sender, SessionStatus

FALLBACK_ERROR_TEXT = "Ошибка при получении ответа от бота."


class ChatSession:
    """One linear request/response exchange at a time against a chat sender.

    The transcript is append-only and only ever mutated here. A submission made
    while a reply is pending is rejected rather than interleaved.
    """

    def __init__(
        self,
        sender: ChatSender,
        *,
        on_input_cleared: Callable[[], None] | None = None,
        on_status_changed: Callable[[SessionStatus], None] | None = None,
        error_text: str = FALLBACK_ERROR_TEXT,
    ) -> None:
        self._sender = sender
        self._on_input_cleared = on_input_cleared
        self._on_status_changed = on_status_changed
        self._error_text = error_text
        self._transcript: list[Message] = []
        self._status = SessionStatus.IDLE

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._transcript)

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def is_busy(self) -> bool:
        return self._status is SessionStatus.AWAITING_RESPONSE

    async def submit(self, text: str) -> bool:
        """Run one exchange. Returns False when the text was ignored or rejected."""
        if not text.strip():
            return False

        # Check-and-set happens before the first await, so it is atomic under asyncio.
        if self.is_busy:
            logger.warning("Chat submission rejected: a reply is still pending")
            return False

        self._append(Message(text=text, sender=Sender.USER))
        try:
            self._notify(self._on_input_cleared)
            self._set_status(SessionStatus.AWAITING_RESPONSE)
            output = await self._sender.send(text)
            self._append(Message(text=output, sender=Sender.BOT))
        except Exception as ex:
            logger.warning(f"Error sending request: {type(ex).__name__}: {ex}")
            self._append(Message(text=self._error_text, sender=Sender.BOT))
        finally:
            self._set_status(SessionStatus.IDLE)
        return True

    def _append(self, message: Message) -> None:
        self._transcript.append(message)

    def _set_status(self, status: SessionStatus) -> None:
        self._status = status
        self._notify(self._on_status_changed, status)

    def _notify(self, callback: Callable[..., None] | None, *args: object) -> None:
        # Observer failures must not leave the session busy or drop the exchange.
        if callback is None:
            return
        try:
            callback(*args)
        except Exception as ex:
            logger.warning(f"Chat session callback failed: {type(ex).__name__}: {ex}")
