from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

# Allow running from repo root without installing as a package.
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from solid.core.settings import Settings, load_settings
from solid.database.behaviours import InMemoryDatabase, ReadOnlyReplica, fetch_all
from solid.notifications.email import EmailNotifier
from solid.notifications.order_notifier import Order, OrderNotifier
from solid.notifications.registry import build_registry
from solid.payments.processor import PaymentProcessor, flat_rate
from solid.users.creator import InMemoryUserRepository, UserCreator
from solid.users.welcome import WelcomeNotifier, register_user
from solid.vehicles.cars import Byd, Gol, drive_all, start_engines


EXAMPLES = ("srp", "ocp", "lsp", "isp", "dip")


def run_srp(settings: Settings) -> None:
    registry = build_registry(settings)
    user, result = register_user(
        {"name": "Ada", "email": "ada@example.com"},
        creator=UserCreator(InMemoryUserRepository()),
        welcome=WelcomeNotifier(registry.get(settings.default_notifier) or EmailNotifier()),
    )
    print(user, result)


def run_ocp(settings: Settings) -> None:
    processor = PaymentProcessor()
    print(processor.process({"amount": 100}, flat_rate(settings.tax_rate)))
    print(processor.process({"amount": 100}, flat_rate(0.2)))


def run_lsp(settings: Settings) -> None:
    print(drive_all([Gol(), Byd()]))
    print(start_engines([Gol()]))


def run_isp(settings: Settings) -> None:
    db = InMemoryDatabase({"orders": [{"id": 101, "amount": 100}]})
    conn = db.connect().value
    print(fetch_all(db, conn, "orders"))
    print(fetch_all(ReadOnlyReplica(db.snapshot()), 0, "orders"))
    print(db.disconnect(conn))


def run_dip(settings: Settings) -> None:
    notifier = OrderNotifier(registry=build_registry(settings))
    # Default channel, then a different one picked at call time.
    print(notifier.notify(Order(id=101)))
    print(notifier.notify(Order(id=101), "sms"))


def main(argv: Optional[Sequence[str]] = None) -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("examples", nargs="*", help=f"Examples to run, any of {list(EXAMPLES)} (default: all).")
    ap.add_argument("--settings", default=None, help="Path to settings.yaml; defaults are used when omitted.")
    args = ap.parse_args(argv)

    unknown = [name for name in args.examples if name not in EXAMPLES]
    if unknown:
        ap.error(f"unknown examples {unknown}; choose from {list(EXAMPLES)}")

    settings = load_settings(args.settings) if args.settings else Settings.defaults()
    runners = {"srp": run_srp, "ocp": run_ocp, "lsp": run_lsp, "isp": run_isp, "dip": run_dip}
    for name in args.examples or EXAMPLES:
        print(f"== {name}")
        runners[name](settings)


if __name__ == "__main__":
    main()
