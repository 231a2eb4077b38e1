from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import os


KNOWN_CHANNELS = ("email", "sms")


@dataclass(frozen=True)
class Settings:
    env: str
    default_notifier: str
    notifier_channels: tuple[str, ...]
    tax_rate: float = 0.1

    @staticmethod
    def defaults() -> "Settings":
        return Settings(env="dev", default_notifier="email", notifier_channels=KNOWN_CHANNELS)

    def validate(self) -> None:
        unknown = [c for c in self.notifier_channels if c not in KNOWN_CHANNELS]
        if unknown:
            raise ValueError(f"unknown notifier channels: {sorted(unknown)}")
        if self.default_notifier not in self.notifier_channels:
            raise ValueError(
                f"default notifier {self.default_notifier!r} is not one of {list(self.notifier_channels)}"
            )
        if self.tax_rate < 0:
            raise ValueError("payments.tax_rate must be >= 0")


def load_settings(path: str | Path = "config/settings.yaml") -> Settings:
    p = Path(path)

    # Keep imports optional at module import time (tests/tools may not need YAML).
    try:
        import yaml  # type: ignore
    except ModuleNotFoundError as e:  # pragma: no cover
        raise ModuleNotFoundError(
            "PyYAML is required to load config/settings.yaml. Install with: pip install pyyaml"
        ) from e

    data: Dict[str, Any] = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    # Env overrides (used to switch the default channel without editing the file).
    env_name = os.getenv("SOLID_ENV")
    env_default_notifier = os.getenv("SOLID_DEFAULT_NOTIFIER")

    defaults = Settings.defaults()
    notifications = data.get("notifications") or {}
    channels = notifications.get("channels") or list(defaults.notifier_channels)
    if not isinstance(channels, list) or not all(isinstance(c, str) for c in channels):
        raise ValueError("notifications.channels must be a list of strings")

    settings = Settings(
        env=env_name or data.get("env", defaults.env),
        default_notifier=env_default_notifier or notifications.get("default", defaults.default_notifier),
        notifier_channels=tuple(channels),
        tax_rate=float((data.get("payments") or {}).get("tax_rate", defaults.tax_rate)),
    )
    settings.validate()
    return settings
