from __future__ import annotations

from solid.core.models import Result
from solid.notifications.base_notifier import Notifier


class SmsNotifier(Notifier):
    channel = "sms"

    def send(self, message: str) -> Result:
        return self.emit(f"Sending sms: {message}")
