"""Short-lived hit/miss notices fed by bus signals."""
from __future__ import annotations

from collections import deque

import pygame

from cubetick_signal import SignalBus

from purple_cubes.constants import BAD_COLOR, HIT_COLOR, TEXT_DIM

_NOTICE_SECONDS = 0.8

_TEXT = {
    "cube_hit": ("+1", HIT_COLOR),
    "cube_wrong": ("Wrong colour!", BAD_COLOR),
    "cube_missed": ("Missed!", BAD_COLOR),
}


class FeedbackStrip:
    """Recent scoring notices, newest last, each fading after a moment."""

    def __init__(self, max_entries: int = 4) -> None:
        self.entries: deque[list] = deque(maxlen=max_entries)

    def subscribe(self, bus: SignalBus) -> None:
        for signal_name in _TEXT:
            bus.subscribe(signal_name, self._on_signal)
        bus.subscribe("round_started", lambda s, d: self.entries.clear())

    def _on_signal(self, signal_name: str, data: dict) -> None:
        text, color = _TEXT[signal_name]
        self.entries.append([text, color, _NOTICE_SECONDS])

    def update(self, dt: float) -> None:
        for entry in self.entries:
            entry[2] -= dt
        while self.entries and self.entries[0][2] <= 0:
            self.entries.popleft()

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, x: int, y: int) -> None:
        line_h = font.get_linesize()
        for text, color, left in self.entries:
            shade = color if left > _NOTICE_SECONDS / 3 else TEXT_DIM
            surface.blit(font.render(text, True, shade), (x, y))
            y += line_h
