import json
import os
import shutil
import unittest
from pathlib import Path
from unittest.mock import patch
from uuid import uuid4

from odorant_assistant.app_config import (
    API_KEY_ENV_VAR,
    load_json_config,
    parse_app_config,
    resolve_runtime_env,
)
from odorant_assistant.chatbot_client import DEFAULT_CHATBOT_URL

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class ParseAppConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        app = parse_app_config({})
        self.assertEqual(app.chatbot_url, DEFAULT_CHATBOT_URL)
        self.assertEqual(app.chatbot_name, "sto")
        self.assertEqual(app.username, "alexsey")
        self.assertEqual(app.request_timeout_seconds, 30.0)
        self.assertEqual(app.log_level, "INFO")
        self.assertEqual(app.console_log_level, "WARNING")
        self.assertEqual(app.log_file, "odorant.log")
        self.assertIsNone(app.log_consumers)

    def test_malformed_timeout_raises_value_error(self) -> None:
        for value in ("soon", None, [], 0, -5):
            with self.subTest(value=value):
                with self.assertRaises(ValueError) as ctx:
                    parse_app_config({"RequestTimeoutSeconds": value})
                self.assertIn("RequestTimeoutSeconds", str(ctx.exception))

    def test_blank_log_file_disables_file_logging(self) -> None:
        self.assertIsNone(parse_app_config({"LogFile": "  "}).log_file)
        self.assertIsNone(parse_app_config({"LogFile": None}).log_file)

    def test_overrides(self) -> None:
        app = parse_app_config(
            {
                "ChatbotUrl": " https://example.test/run ",
                "ChatbotName": "grs",
                "Username": "operator",
                "RequestTimeoutSeconds": "12.5",
                "LogLevel": "DEBUG",
                "LogConsumers": [{"type": "console"}],
            }
        )
        self.assertEqual(app.chatbot_url, "https://example.test/run")
        self.assertEqual(app.chatbot_name, "grs")
        self.assertEqual(app.username, "operator")
        self.assertEqual(app.request_timeout_seconds, 12.5)
        self.assertEqual(app.log_level, "DEBUG")
        self.assertEqual(app.log_consumers, [{"type": "console"}])


class RuntimeEnvTests(unittest.TestCase):
    def test_reads_api_key_from_environment(self) -> None:
        with patch.dict(os.environ, {API_KEY_ENV_VAR: "sk-env"}):
            env = resolve_runtime_env()
        self.assertEqual(env.chatbot_api_key, "sk-env")
        self.assertEqual(env.chatbot_api_key_env_var, API_KEY_ENV_VAR)

    def test_missing_api_key_is_empty(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            env = resolve_runtime_env()
        self.assertEqual(env.chatbot_api_key, "")


class LoadJsonConfigTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = PROJECT_ROOT / ".test-artifacts" / f"config-{uuid4().hex}"
        self._tmp_dir.mkdir(parents=True, exist_ok=True)
        self._old_cwd = Path.cwd()
        os.chdir(self._tmp_dir)

    def tearDown(self) -> None:
        os.chdir(self._old_cwd)
        shutil.rmtree(self._tmp_dir, ignore_errors=True)

    def test_missing_file_returns_empty_dict(self) -> None:
        self.assertEqual(load_json_config(), {})

    def test_reads_config_from_cwd(self) -> None:
        (self._tmp_dir / "config.json").write_text(
            json.dumps({"ChatbotName": "grs"}), encoding="utf-8"
        )
        self.assertEqual(load_json_config(), {"ChatbotName": "grs"})


if __name__ == "__main__":
    unittest.main()
