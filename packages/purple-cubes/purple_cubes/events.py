"""Bus subscriber that turns game signals into log records."""
from __future__ import annotations

import logging
from typing import Any

from cubetick_signal import SignalBus

logger = logging.getLogger(__name__)


def _fmt(value: Any) -> str:
    name = getattr(value, "name", None)
    return name if isinstance(name, str) else repr(value)


def _log_signal(signal_name: str, data: dict[str, Any]) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        fields = " ".join(f"{k}={_fmt(v)}" for k, v in sorted(data.items()))
        logger.debug("signal %s %s", signal_name, fields)


def attach_logging(bus: SignalBus) -> None:
    bus.subscribe_all(_log_signal)


def detach_logging(bus: SignalBus) -> None:
    bus.unsubscribe_all(_log_signal)
