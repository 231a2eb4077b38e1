from __future__ import annotations

import logging
from typing import Any, Mapping

from solid.contracts.conformance import check_conformance
from solid.core.models import Result
from solid.notifications.base_notifier import Notifier
from solid.users.creator import User, UserCreator


logger = logging.getLogger(__name__)


def welcome_message(user: User) -> str:
    return f"Welcome, {user.name}!"


class WelcomeNotifier:
    """Sends the welcome message over whichever notifier it was given."""

    def __init__(self, notifier: Notifier) -> None:
        check_conformance(Notifier, notifier)
        self.notifier = notifier

    def send_welcome(self, user: User) -> Result:
        return self.notifier.send(welcome_message(user))


def register_user(
    attrs: Mapping[str, Any],
    *,
    creator: UserCreator,
    welcome: WelcomeNotifier,
) -> tuple[User, Result]:
    """Create a user, then welcome them. A failed welcome does not undo creation."""

    user = creator.create(attrs)
    logger.info("user_created", extra={"user_id": user.id})
    return user, welcome.send_welcome(user)
