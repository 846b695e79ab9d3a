"""cubetick-schedule - Delta-time timer primitives for the tick engine."""
from __future__ import annotations

from cubetick_schedule.components import Timer, TimerMode
from cubetick_schedule.systems import make_timer_system

__all__ = ["Timer", "TimerMode", "make_timer_system"]
