"""Order notifications: the Dependency Inversion example.

`OrderNotifier` depends on the `Notifier` contract, never on a concrete
channel. Channels are registered in a `NotifierRegistry` at startup.
"""

from solid.notifications.base_notifier import Notifier
from solid.notifications.email import EmailNotifier
from solid.notifications.order_notifier import Order, OrderNotifier
from solid.notifications.registry import NotifierRegistry, build_registry
from solid.notifications.sms import SmsNotifier

__all__ = [
    "EmailNotifier",
    "Notifier",
    "NotifierRegistry",
    "Order",
    "OrderNotifier",
    "SmsNotifier",
    "build_registry",
]
