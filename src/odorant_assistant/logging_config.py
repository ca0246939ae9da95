from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from loguru import logger

from odorant_assistant.app_config import AppConfig

_CONSOLE_FORMAT = "<level>{level:<8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} - {message}"


@dataclass(frozen=True)
class LogSink:
    kind: str
    level: str
    path: str | None = None
    rotation: str = "5 MB"
    retention: int = 3

    def describe(self) -> str:
        if self.kind == "file":
            return f"file ({self.path}, {self.level})"
        return f"console (stderr, {self.level})"


def sinks_for(app: AppConfig) -> list[LogSink]:
    """Resolve the sinks for an app config.

    An explicit LogConsumers list wins. Otherwise the console gets
    ConsoleLogLevel (quiet by default, so log lines stay out of the chat) and
    LogFile, when set, receives everything at LogLevel.
    """
    if app.log_consumers is not None:
        return [s for s in (_sink_from_entry(e, app) for e in app.log_consumers) if s is not None]

    sinks = [LogSink(kind="console", level=app.console_log_level)]
    if app.log_file:
        sinks.append(LogSink(kind="file", level=app.log_level, path=app.log_file))
    return sinks


def _sink_from_entry(entry: dict[str, Any], app: AppConfig) -> LogSink | None:
    kind = entry.get("type", "")
    level = str(entry.get("level", app.log_level)).upper()
    if kind == "console":
        return LogSink(kind="console", level=level)
    if kind == "file":
        return LogSink(
            kind="file",
            level=level,
            path=entry.get("path") or app.log_file or "odorant.log",
            rotation=entry.get("rotation", "5 MB"),
            retention=int(entry.get("retention", 3)),
        )
    logger.warning(f"Unknown log consumer type: {kind!r}")
    return None


def _register(sink: LogSink) -> None:
    if sink.kind == "file":
        assert sink.path is not None
        Path(sink.path).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            sink.path,
            level=sink.level,
            format=_FILE_FORMAT,
            rotation=sink.rotation,
            retention=sink.retention,
            encoding="utf-8",
        )
    else:
        logger.add(sys.stderr, level=sink.level, format=_CONSOLE_FORMAT)


def setup_logging(app: AppConfig) -> list[str]:
    """Replace loguru's sinks with the app's. Returns a description of each sink."""
    sinks = sinks_for(app)
    logger.remove()
    for sink in sinks:
        _register(sink)
    return [sink.describe() for sink in sinks]
