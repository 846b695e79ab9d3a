"""FSM component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FSM:
    """Finite state machine. Transition table maps states to guard/target pairs.

    Edges are checked in order and the first guard that passes wins.
    """

    state: str
    transitions: dict[str, list[list[str]]]
