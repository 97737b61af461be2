"""Feedback messages returned by services instead of raising."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class MessageLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ServiceMessage:
    level: MessageLevel
    text: str

    @classmethod
    def warning(cls, text: str) -> "ServiceMessage":
        return cls(MessageLevel.WARNING, text)

    @classmethod
    def error(cls, text: str) -> "ServiceMessage":
        return cls(MessageLevel.ERROR, text)


def has_errors(messages: Iterable[ServiceMessage]) -> bool:
    return any(message.level == MessageLevel.ERROR for message in messages)
