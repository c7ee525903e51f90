"""User-visible notifications."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List


class NotificationLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class Notification:
    level: NotificationLevel
    message: str
    created: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"[{self.level.value}] {self.message}"


class NotificationCenter:
    """Queue of notifications waiting to be shown to the user."""

    def __init__(self):
        self._pending: List[Notification] = []
        self.logger = logging.getLogger(__name__)

    def push(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self._pending.append(notification)
        self.logger.debug(f"Notification queued: {notification}")
        return notification

    def info(self, message: str) -> Notification:
        return self.push(NotificationLevel.INFO, message)

    def warning(self, message: str) -> Notification:
        return self.push(NotificationLevel.WARNING, message)

    def error(self, message: str) -> Notification:
        return self.push(NotificationLevel.ERROR, message)

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def drain(self) -> List[Notification]:
        """Return and clear pending notifications."""
        drained, self._pending = self._pending, []
        return drained

    def __len__(self) -> int:
        return len(self._pending)
