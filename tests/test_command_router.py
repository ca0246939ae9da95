import asyncio
import unittest

from odorant_assistant.commands.router import CommandRouter


class CommandRouterTests(unittest.TestCase):
    def setUp(self) -> None:
        self.calls: list[tuple[str, str]] = []

        async def on_help() -> None:
            self.calls.append(("help", ""))

        async def on_calc(argument: str) -> None:
            self.calls.append(("calc", argument))

        async def on_transcript() -> None:
            self.calls.append(("transcript", ""))

        async def on_status() -> None:
            self.calls.append(("status", ""))

        def on_unknown(command: str) -> None:
            self.calls.append(("unknown", command))

        self.router = CommandRouter(
            on_help=on_help,
            on_calc=on_calc,
            on_transcript=on_transcript,
            on_status=on_status,
            on_unknown=on_unknown,
        )

    def _handle(self, line: str) -> bool:
        return asyncio.run(self.router.try_handle(line))

    def test_plain_text_is_not_a_command(self) -> None:
        self.assertFalse(self._handle("hello /calc"))
        self.assertEqual(self.calls, [])

    def test_help(self) -> None:
        self.assertTrue(self._handle("  /help "))
        self.assertEqual(self.calls, [("help", "")])

    def test_calc_with_argument(self) -> None:
        self.assertTrue(self._handle("/calc  1000 "))
        self.assertEqual(self.calls, [("calc", "1000")])

    def test_calc_without_argument(self) -> None:
        self.assertTrue(self._handle("/calc"))
        self.assertEqual(self.calls, [("calc", "")])

    def test_transcript_and_status(self) -> None:
        self._handle("/transcript")
        self._handle("/status")
        self.assertEqual(self.calls, [("transcript", ""), ("status", "")])

    def test_unknown_command(self) -> None:
        self.assertTrue(self._handle("/calculate 5"))
        self.assertEqual(self.calls, [("unknown", "/calculate 5")])


if __name__ == "__main__":
    unittest.main()
