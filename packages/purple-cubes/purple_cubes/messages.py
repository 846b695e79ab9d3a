"""End-of-round messages, picked by score tier."""
from __future__ import annotations

import random

from purple_cubes import constants as C

LOW_MESSAGES = (
    "The cubes won this round.",
    "Were your eyes open?",
    "Purple is the one with the colour in it.",
)
MID_MESSAGES = (
    "Not bad, you're getting the hang of it.",
    "Decent reflexes.",
    "Solid round. Keep practising.",
)
HIGH_MESSAGES = (
    "Lightning reflexes!",
    "Purple cube master.",
    "Are you sure you're human?",
)


def tier_for(score: int) -> tuple[str, ...]:
    if score < C.LOW_TIER:
        return LOW_MESSAGES
    if score < C.HIGH_TIER:
        return MID_MESSAGES
    return HIGH_MESSAGES


def pick_message(score: int, rng: random.Random) -> str:
    return rng.choice(tier_for(score))
