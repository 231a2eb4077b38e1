from __future__ import annotations

import pytest

from solid.contracts.conformance import ContractViolation, declares
from solid.core.models import ERROR, DeliveryError, Result, UnknownImplementation
from solid.core.settings import Settings
from solid.notifications.base_notifier import Notifier
from solid.notifications.email import EmailNotifier
from solid.notifications.registry import NotifierRegistry, build_registry
from solid.notifications.sms import SmsNotifier


class AlwaysFailingNotifier(Notifier):
    channel = "void"

    @declares(ERROR)
    def send(self, message: str) -> Result:
        return Result.failure(DeliveryError(reason="never delivers"))


class UrgentOnlyNotifier(Notifier):
    channel = "pager"

    def send(self, message: str, urgent: bool) -> Result:  # type: ignore[override]
        return Result.success()


class BoolNotifier(Notifier):
    channel = "bool"

    def send(self, message: str) -> bool:  # type: ignore[override]
        return True


class DuckNotifier:
    def send(self, message: str) -> Result:
        return Result.success()


def test_register_same_instance_twice_is_noop() -> None:
    registry = NotifierRegistry()
    email = EmailNotifier()

    assert registry.register("email", email) is email
    assert registry.register("email", email) is email
    assert len(registry) == 1
    assert registry.names() == ["email"]


def test_register_different_instance_under_taken_name_rejected() -> None:
    registry = NotifierRegistry()
    first = EmailNotifier()
    registry.register("email", first)

    with pytest.raises(ValueError):
        registry.register("email", EmailNotifier())
    assert registry.get("email") is first


def test_same_instance_may_serve_two_names() -> None:
    registry = NotifierRegistry()
    sms = SmsNotifier()
    registry.register("sms", sms)
    registry.register("text", sms)

    assert registry.resolve("sms") is registry.resolve("text")


@pytest.mark.parametrize("impl", [AlwaysFailingNotifier(), UrgentOnlyNotifier(), BoolNotifier()])
def test_non_substitutable_notifiers_rejected_at_registration(impl) -> None:
    registry = NotifierRegistry()
    with pytest.raises(ContractViolation):
        registry.register(impl.channel, impl)
    assert len(registry) == 0


def test_structural_notifier_is_accepted() -> None:
    registry = NotifierRegistry(default="duck")
    duck = DuckNotifier()
    registry.register("duck", duck)  # type: ignore[arg-type]

    assert registry.resolve() is duck
    assert "duck" in registry
    assert duck in registry


def test_frozen_registry_rejects_registration() -> None:
    registry = build_registry(Settings.defaults())
    assert registry.frozen is True
    with pytest.raises(RuntimeError):
        registry.register("email2", EmailNotifier())


def test_resolve_selectors() -> None:
    registry = build_registry(Settings.defaults())

    assert isinstance(registry.resolve(), EmailNotifier)
    assert isinstance(registry.resolve("sms"), SmsNotifier)
    assert registry.resolve("fax") == UnknownImplementation(name="fax")
    assert isinstance(registry.resolve(SmsNotifier()), UnknownImplementation)


def test_build_registry_only_registers_configured_channels() -> None:
    registry = build_registry(Settings(env="test", default_notifier="sms", notifier_channels=("sms",)))

    assert registry.names() == ["sms"]
    assert registry.default_name == "sms"
    assert "email" not in registry


def test_build_registry_rejects_default_outside_channels() -> None:
    with pytest.raises(ValueError):
        build_registry(Settings(env="test", default_notifier="email", notifier_channels=("sms",)))


@pytest.mark.parametrize("name", ["", "   "])
def test_register_blank_name_rejected(name: str) -> None:
    with pytest.raises(ValueError):
        NotifierRegistry().register(name, EmailNotifier())
