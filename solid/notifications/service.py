"""Notification service - sends one order confirmation from the command line.

Usage:
    solid-notify --order-id 101
    solid-notify --order-id 101 --channel sms
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Optional, Sequence

from solid.core.settings import Settings, load_settings
from solid.notifications.order_notifier import Order, OrderNotifier
from solid.notifications.registry import build_registry


logger = logging.getLogger(__name__)


def create_order_notifier(settings_path: Optional[str] = None) -> OrderNotifier:
    """Build the dispatcher from a settings file, or from defaults when there is none."""
    path = settings_path or os.getenv("SOLID_SETTINGS_PATH", "config/settings.yaml")
    if os.path.exists(path):
        settings = load_settings(path)
    else:
        logger.info(f"Settings file {path} not found, using defaults")
        settings = Settings.defaults()
    return OrderNotifier(registry=build_registry(settings))


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO)

    ap = argparse.ArgumentParser(description="Send an order confirmation.")
    ap.add_argument("--order-id", required=True)
    ap.add_argument("--channel", default=None, help="Registered notifier name; defaults to the configured one.")
    ap.add_argument("--settings", default=None, help="Path to settings.yaml")
    args = ap.parse_args(argv)

    notifier = create_order_notifier(args.settings)
    result = notifier.notify(Order(id=args.order_id), args.channel)
    if not result.ok:
        logger.error(f"Notification failed: {result.error}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
