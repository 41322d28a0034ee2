"""Keyboard state tracking and mouse button queries."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

import pygame

MAX_SCANCODES = 512


class KeyboardState:
    """Per-scancode key state for the current and the previous frame."""

    def __init__(self) -> None:
        self._current = [False] * MAX_SCANCODES
        self._previous = [False] * MAX_SCANCODES

    def update(self, pressed: Iterable) -> None:
        """Move the current state to the previous one and read ``pressed``.

        ``pressed`` is indexed by scancode, as returned by
        ``pygame.key.get_pressed()``. Only the first ``MAX_SCANCODES``
        entries are read; entries past the end of a shorter sequence keep
        their value.
        """
        self._previous = list(self._current)
        values = [bool(v) for v in islice(pressed, MAX_SCANCODES)]
        self._current[: len(values)] = values

    @staticmethod
    def _valid(scancode: int) -> bool:
        return 0 <= scancode < MAX_SCANCODES

    def is_just_pressed(self, scancode: int) -> bool:
        """True if the key is down now but was up in the previous frame."""
        if not self._valid(scancode):
            return False
        return self._current[scancode] and not self._previous[scancode]

    def is_just_released(self, scancode: int) -> bool:
        """True if the key is up now but was down in the previous frame."""
        if not self._valid(scancode):
            return False
        return not self._current[scancode] and self._previous[scancode]

    def is_held(self, scancode: int) -> bool:
        """True if the key is down now."""
        if not self._valid(scancode):
            return False
        return self._current[scancode]


def is_mouse_pressed(event: pygame.event.Event, button: int) -> bool:
    """True if ``event`` is a press of the given mouse button."""
    return event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == button


def get_mouse_pressed(event: pygame.event.Event) -> int:
    """Return the mouse button carried by ``event``, or 0 if it has none."""
    return getattr(event, "button", 0)