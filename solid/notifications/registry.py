"""Notifier registry.

Holds the named notifiers available to dispatchers. It is populated once at
startup, then frozen; after that it is only read.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, TextIO, Union

from solid.contracts.conformance import check_conformance
from solid.core.models import UnknownImplementation
from solid.core.settings import Settings
from solid.notifications.base_notifier import Notifier
from solid.notifications.email import EmailNotifier
from solid.notifications.sms import SmsNotifier


logger = logging.getLogger(__name__)

NOTIFIER_TYPES: dict[str, type[Notifier]] = {
    EmailNotifier.channel: EmailNotifier,
    SmsNotifier.channel: SmsNotifier,
}

Selector = Union[str, Notifier, None]


class NotifierRegistry:
    def __init__(self, *, default: str = "email") -> None:
        if not default:
            raise ValueError("default notifier name must be non-empty")
        self._default_name = default
        self._by_name: dict[str, Notifier] = {}
        self._frozen = False
        self._lock = threading.Lock()

    @property
    def default_name(self) -> str:
        return self._default_name

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, name: str, notifier: Notifier) -> Notifier:
        """Register `notifier` under `name`.

        Re-registering the same instance under the same name is a no-op; any
        other notifier under a taken name is rejected.
        """

        if not isinstance(name, str) or not name.strip():
            raise ValueError("notifier name must be non-empty string")
        check_conformance(Notifier, notifier)

        with self._lock:
            if self._frozen:
                raise RuntimeError(f"registry is frozen; cannot register {name!r}")
            existing = self._by_name.get(name)
            if existing is notifier:
                return notifier
            if existing is not None:
                raise ValueError(f"notifier {name!r} already registered as {existing!r}")
            self._by_name[name] = notifier

        logger.info("notifier_registered", extra={"notifier": name, "channel": getattr(notifier, "channel", name)})
        return notifier

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    def get(self, name: str) -> Optional[Notifier]:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return sorted(self._by_name)

    def resolve(self, selector: Selector = None) -> Union[Notifier, UnknownImplementation]:
        """Map a selector (None, a name, or a registered instance) to a notifier."""

        if selector is None:
            selector = self._default_name

        if isinstance(selector, str):
            found = self._by_name.get(selector)
            return found if found is not None else UnknownImplementation(name=selector)

        for registered in self._by_name.values():
            if registered is selector:
                return registered
        return UnknownImplementation(name=repr(selector))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return item in self._by_name
        return any(n is item for n in self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)


def build_registry(settings: Settings, *, sink: Optional[TextIO] = None) -> NotifierRegistry:
    """Register the configured channels and freeze the registry."""

    settings.validate()
    registry = NotifierRegistry(default=settings.default_notifier)
    for channel in settings.notifier_channels:
        registry.register(channel, NOTIFIER_TYPES[channel](sink=sink))
    registry.freeze()
    return registry
