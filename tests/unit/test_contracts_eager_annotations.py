# Deliberately no `from __future__ import annotations`: annotations here are
# real objects while the contracts' are strings.
import io

import pytest

from solid.contracts.conformance import ContractViolation, check_conformance
from solid.core.models import Result
from solid.notifications.base_notifier import Notifier
from solid.notifications.order_notifier import Order, OrderNotifier
from solid.notifications.registry import NotifierRegistry


class PagerNotifier(Notifier):
    channel = "pager"

    def send(self, message: str) -> Result:
        return self.emit(f"Sending pager: {message}")


class CountingNotifier(Notifier):
    channel = "count"

    def send(self, message: str) -> int:  # type: ignore[override]
        return len(message)


def test_eagerly_annotated_notifier_is_registered_and_used() -> None:
    sink = io.StringIO()
    registry = NotifierRegistry(default="pager")
    registry.register("pager", PagerNotifier(sink=sink))

    result = OrderNotifier(registry=registry).notify(Order(id=101))
    assert result.ok
    assert sink.getvalue() == "Sending pager: Order #101 confirmed!\n"


def test_eagerly_annotated_wrong_return_type_still_rejected() -> None:
    with pytest.raises(ContractViolation):
        check_conformance(Notifier, CountingNotifier())
