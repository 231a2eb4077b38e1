from __future__ import annotations

import io

import pytest

from solid.core.models import DeliveryError
from solid.contracts.conformance import ContractViolation
from solid.notifications.email import EmailNotifier
from solid.notifications.sms import SmsNotifier
from solid.users.creator import InMemoryUserRepository, User, UserCreator
from solid.users.welcome import WelcomeNotifier, register_user, welcome_message


def test_creator_only_persists(capsys) -> None:
    repo = InMemoryUserRepository()
    user = UserCreator(repo).create({"name": "Ada", "email": "ada@example.com"})

    assert user == User(id=1, name="Ada", email="ada@example.com")
    assert repo.get(1) == user
    assert len(repo) == 1
    assert capsys.readouterr().out == ""


def test_creator_assigns_sequential_ids() -> None:
    creator = UserCreator(InMemoryUserRepository())
    ids = [creator.create({"name": n, "email": f"{n}@example.com"}).id for n in ("a", "b", "c")]
    assert ids == [1, 2, 3]


@pytest.mark.parametrize("attrs", [{}, {"name": "Ada"}, {"name": "", "email": "x@y"}, {"name": "Ada", "email": 3}])
def test_creator_rejects_incomplete_attrs(attrs) -> None:
    repo = InMemoryUserRepository()
    with pytest.raises(ValueError):
        UserCreator(repo).create(attrs)
    assert len(repo) == 0


def test_welcome_goes_through_any_notifier() -> None:
    user = User(id=1, name="Ada", email="ada@example.com")
    for cls, channel in ((EmailNotifier, "email"), (SmsNotifier, "sms")):
        sink = io.StringIO()
        result = WelcomeNotifier(cls(sink=sink)).send_welcome(user)
        assert result.ok
        assert sink.getvalue() == f"Sending {channel}: {welcome_message(user)}\n"


def test_welcome_rejects_non_notifier() -> None:
    with pytest.raises(ContractViolation):
        WelcomeNotifier(object())  # type: ignore[arg-type]


def test_register_user_keeps_user_when_welcome_fails() -> None:
    sink = io.StringIO()
    sink.close()
    repo = InMemoryUserRepository()

    user, result = register_user(
        {"name": "Ada", "email": "ada@example.com"},
        creator=UserCreator(repo),
        welcome=WelcomeNotifier(EmailNotifier(sink=sink)),
    )
    assert repo.get(user.id) == user
    assert result.error == DeliveryError(reason="sink unavailable")
