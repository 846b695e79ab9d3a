"""cubetick-fsm - Finite state machine primitives for the tick engine."""
from __future__ import annotations

from cubetick_fsm.components import FSM
from cubetick_fsm.guards import FSMGuards
from cubetick_fsm.hooks import StateHooks
from cubetick_fsm.systems import make_fsm_system

__all__ = ["FSM", "FSMGuards", "StateHooks", "make_fsm_system"]
