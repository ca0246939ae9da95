from __future__ import annotations

from collections.abc import Awaitable, Callable


class CommandRouter:
    def __init__(
        self,
        *,
        on_help: Callable[[], Awaitable[None]],
        on_calc: Callable[[str], Awaitable[None]],
        on_transcript: Callable[[], Awaitable[None]],
        on_status: Callable[[], Awaitable[None]],
        on_unknown: Callable[[str], None],
    ) -> None:
        self._on_help = on_help
        self._on_calc = on_calc
        self._on_transcript = on_transcript
        self._on_status = on_status
        self._on_unknown = on_unknown

    async def try_handle(self, user_message: str) -> bool:
        trimmed = user_message.strip()
        if not trimmed.startswith("/"):
            return False

        if trimmed == "/help":
            await self._on_help()
            return True
        if trimmed == "/calc" or trimmed.startswith("/calc "):
            await self._on_calc(trimmed.partition("/calc")[2].strip())
            return True
        if trimmed == "/transcript":
            await self._on_transcript()
            return True
        if trimmed == "/status":
            await self._on_status()
            return True

        self._on_unknown(trimmed)
        return True
