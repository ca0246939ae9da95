from dataclasses import dataclass
from enum import Enum


class Sender(Enum):
    USER = "user"
    BOT = "bot"


class SessionStatus(Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


@dataclass(frozen=True)
class Message:
    text: str
    sender: Sender
