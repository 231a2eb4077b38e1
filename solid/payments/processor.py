"""Payment processing: the Open/Closed example.

`PaymentProcessor.process` is closed for modification; new tax rules are
added by passing a different `TaxCalculator`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Union

from solid.core.models import Result


@dataclass(frozen=True)
class PaymentOrder:
    amount: float
    id: Any = None


PaymentOrderLike = Union[PaymentOrder, Mapping[str, Any]]

TaxCalculator = Callable[[PaymentOrder], float]


@dataclass(frozen=True)
class PaymentReceipt:
    total: float
    tax: float
    order: PaymentOrder


def _as_payment_order(order: PaymentOrderLike) -> PaymentOrder:
    if isinstance(order, PaymentOrder):
        return order
    amount = order.get("amount")
    if not isinstance(amount, (int, float)) or isinstance(amount, bool):
        raise ValueError("order.amount must be number")
    return PaymentOrder(amount=float(amount), id=order.get("id"))


def flat_rate(rate: float) -> TaxCalculator:
    if rate < 0:
        raise ValueError("tax rate must be >= 0")

    def calculate(order: PaymentOrder) -> float:
        return order.amount * rate

    return calculate


def no_tax(order: PaymentOrder) -> float:
    return 0.0


class PaymentProcessor:
    def process(self, order: PaymentOrderLike, tax_calculator: TaxCalculator) -> Result:
        o = _as_payment_order(order)
        tax = float(tax_calculator(o))
        return Result.success(PaymentReceipt(total=o.amount + tax, tax=tax, order=o))
