"""Order confirmation dispatcher.

Builds the confirmation message for an order and hands it to exactly one
notifier: the one the caller picked, or the registry default. The notifier's
result is returned as-is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Union

from solid.core.models import Result, UnknownImplementation
from solid.notifications.registry import NotifierRegistry, Selector


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Order:
    id: Any
    amount: float = 0.0


OrderLike = Union[Order, Mapping[str, Any]]


def order_id(order: OrderLike) -> Any:
    if isinstance(order, Mapping):
        oid = order.get("id")
    else:
        oid = getattr(order, "id", None)
    if oid is None:
        raise ValueError("order must carry a non-null id")
    return oid


def confirmation_message(order: OrderLike) -> str:
    return f"Order #{order_id(order)} confirmed!"


class OrderNotifier:
    def __init__(self, *, registry: NotifierRegistry) -> None:
        self.registry = registry

    def notify(self, order: OrderLike, notifier: Selector = None) -> Result:
        """Send the confirmation; raises ValueError if `order` has no id."""

        message = confirmation_message(order)

        target = self.registry.resolve(notifier)
        if isinstance(target, UnknownImplementation):
            # Never falls back to the default.
            logger.warning("unknown_notifier", extra={"notifier": target.name})
            return Result.failure(target)

        return target.send(message)
