"""Notifications: base abstractions.

A notifier delivers one message over one channel. Callers depend on the
`Notifier` contract only; which channel runs is decided by whoever composes
them (see `registry.NotifierRegistry` and `order_notifier.OrderNotifier`).
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO

from solid.contracts.conformance import declares
from solid.core.models import ERROR, OK, DeliveryError, Result


logger = logging.getLogger(__name__)

SINK_UNAVAILABLE = "sink unavailable"


class Notifier(ABC):
    """Contract: deliver a message, report success or a DeliveryError."""

    channel: str = ""

    def __init__(self, *, sink: Optional[TextIO] = None) -> None:
        self._sink = sink

    @property
    def sink(self) -> TextIO:
        # Resolved per call, not at construction.
        return self._sink if self._sink is not None else sys.stdout

    @abstractmethod
    @declares(OK, ERROR)
    def send(self, message: str) -> Result:
        """Deliver `message`; never raises for delivery problems."""

    def emit(self, line: str) -> Result:
        """Write one line to the sink, mapping sink failures to DeliveryError."""

        sink = self.sink
        if getattr(sink, "closed", False):
            return self._delivery_failed(SINK_UNAVAILABLE)
        try:
            sink.write(f"{line}\n")
            sink.flush()
        except (OSError, ValueError) as e:
            logger.debug("sink_write_error", extra={"channel": self.channel, "error": str(e)})
            return self._delivery_failed(SINK_UNAVAILABLE)
        return Result.success()

    def _delivery_failed(self, reason: str) -> Result:
        logger.warning("delivery_failed", extra={"channel": self.channel, "reason": reason})
        return Result.failure(DeliveryError(reason=reason))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(channel={self.channel!r})"
