"""cubetick-signal - In-process event bus for the tick engine."""
from __future__ import annotations

from cubetick_signal.bus import SignalBus, make_signal_system

__all__ = ["SignalBus", "make_signal_system"]
