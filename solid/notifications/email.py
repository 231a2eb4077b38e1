from __future__ import annotations

from solid.core.models import Result
from solid.notifications.base_notifier import Notifier


class EmailNotifier(Notifier):
    channel = "email"

    def send(self, message: str) -> Result:
        return self.emit(f"Sending email: {message}")
