from __future__ import annotations

from loguru import logger

from odorant_assistant.assistant_config import AssistantConfig
from odorant_assistant.calculator import EMPTY_RESULT, CalculationResult, compute, format_result
from odorant_assistant.chat_session import ChatSession
from odorant_assistant.commands.router import CommandRouter
from odorant_assistant.messages import Message, Sender
from odorant_assistant.spinner import StatusSpinner


class Assistant:
    _LINE_PREFIX = "бот> "
    _CALC_PREFIX = "calc> "
    _USER_LABEL = "you> "

    def __init__(self, config: AssistantConfig):
        self._bot_title = config.bot_title
        self._spinner: StatusSpinner | None = None
        if config.show_spinner:
            self._spinner = StatusSpinner(
                prefix=self._LINE_PREFIX,
                label=config.spinner_label,
                frames=config.spinner_frames,
            )
        self._pending_input = ""
        self._last_input = ""
        self._last_result: CalculationResult = EMPTY_RESULT

        self._chat_session = ChatSession(
            config.sender,
            on_input_cleared=self._clear_pending_input,
            on_status_changed=self._spinner.on_status if self._spinner is not None else None,
        )

        self._command_router = CommandRouter(
            on_help=self._on_help,
            on_calc=self._handle_calc_command,
            on_transcript=self._on_transcript,
            on_status=self._on_status,
            on_unknown=self._on_unknown_command,
        )

    @property
    def chat_session(self) -> ChatSession:
        return self._chat_session

    @property
    def last_result(self) -> CalculationResult:
        return self._last_result

    @property
    def last_input(self) -> str:
        return self._last_input

    @property
    def pending_input(self) -> str:
        return self._pending_input

    async def run(self, user_message: str) -> None:
        if await self._command_router.try_handle(user_message):
            return

        self._pending_input = user_message
        before = len(self._chat_session.transcript)
        if not await self._chat_session.submit(user_message):
            return
        for message in self._chat_session.transcript[before:]:
            if message.sender is Sender.BOT:
                print(self._format_message(message))

    def calculate(self, raw_input: str | None) -> CalculationResult:
        self._last_input = raw_input or ""
        self._last_result = compute(raw_input)
        logger.debug(f"Calculated {self._last_result} for input {self._last_input!r}")
        return self._last_result

    def _clear_pending_input(self) -> None:
        self._pending_input = ""

    async def _handle_calc_command(self, argument: str) -> None:
        result = self.calculate(argument)
        for line in format_result(result):
            print(f"{self._CALC_PREFIX}{line}")

    async def _on_help(self) -> None:
        print(f"{self._LINE_PREFIX}Available commands:")
        print(f"{self._LINE_PREFIX}- /help")
        print(f"{self._LINE_PREFIX}- /calc <gas consumption, m³>  (empty value resets the result)")
        print(f"{self._LINE_PREFIX}- /transcript")
        print(f"{self._LINE_PREFIX}- /status")
        print(f"{self._LINE_PREFIX}Any other text is sent to {self._bot_title}.")

    async def _on_transcript(self) -> None:
        transcript = self._chat_session.transcript
        if not transcript:
            print(f"{self._LINE_PREFIX}No messages yet.")
            return
        for message in transcript:
            print(self._format_message(message))

    async def _on_status(self) -> None:
        print(
            f"{self._LINE_PREFIX}Status: {self._chat_session.status.value} "
            f"({len(self._chat_session.transcript)} messages)"
        )

    def _on_unknown_command(self, trimmed: str) -> None:
        print(f"{self._LINE_PREFIX}Unknown local command: {trimmed}")

    def _format_message(self, message: Message) -> str:
        prefix = self._USER_LABEL if message.sender is Sender.USER else self._LINE_PREFIX
        return f"{prefix}{message.text}"
