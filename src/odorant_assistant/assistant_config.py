from dataclasses import dataclass

from odorant_assistant.chatbot_client import ChatSender


@dataclass
class AssistantConfig:
    sender: ChatSender
    bot_title: str = "ГРС бот"
    show_spinner: bool = True
    spinner_label: str = "Генерация ответа..."
    spinner_frames: str = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
