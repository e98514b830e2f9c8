"""logic/input_manager.py — Keyboard → discrete input events.

Sits between raw pygame events and the player state machine.  The
scene feeds in raw events; the handler turns arrow-key presses and
releases into one of a small closed set of event strings and remembers
the most recent one.  The player reads ``last_key`` every tick.

Usage (in play_scene):

    self.input = InputHandler()
    for event in events:
        self.input.feed(event)
    self.player.update(self.input.last_key)

Only the arrow keys are bound.  Releasing the up arrow produces nothing:
jumps run to completion on their own, so no state listens for it.
"""

from __future__ import annotations
from enum import Enum
import pygame


# ── Events ──────────────────────────────────────────────────────────

class InputEvent(str, Enum):
    """The closed set of events the state machine reacts to.

    Members compare equal to their plain string values, so callers may
    pass either ``InputEvent.PRESS_LEFT`` or ``"PRESS left"``.
    """
    PRESS_LEFT    = "PRESS left"
    PRESS_RIGHT   = "PRESS right"
    PRESS_UP      = "PRESS up"
    PRESS_DOWN    = "PRESS down"
    RELEASE_LEFT  = "RELEASE left"
    RELEASE_RIGHT = "RELEASE right"
    RELEASE_DOWN  = "RELEASE down"

    def __str__(self) -> str:
        return self.value


# ── Default key bindings ────────────────────────────────────────────

_PRESS_BINDS: dict[int, InputEvent] = {
    pygame.K_LEFT:  InputEvent.PRESS_LEFT,
    pygame.K_RIGHT: InputEvent.PRESS_RIGHT,
    pygame.K_UP:    InputEvent.PRESS_UP,
    pygame.K_DOWN:  InputEvent.PRESS_DOWN,
}

_RELEASE_BINDS: dict[int, InputEvent] = {
    pygame.K_LEFT:  InputEvent.RELEASE_LEFT,
    pygame.K_RIGHT: InputEvent.RELEASE_RIGHT,
    pygame.K_DOWN:  InputEvent.RELEASE_DOWN,
}


# ── InputHandler ────────────────────────────────────────────────────

class InputHandler:
    """Tracks the last arrow-key event.

    ``last_key`` is sticky: it keeps its value across frames until a new
    bound key event arrives.  An empty string means nothing yet.
    """

    def __init__(self):
        self.last_key: str = ""
        # Events mapped this frame, oldest first
        self.frame_events: list[InputEvent] = []

    def begin_frame(self):
        """Drop last frame's events.  ``last_key`` is kept."""
        self.frame_events.clear()

    def feed(self, event: pygame.event.Event) -> InputEvent | None:
        """Feed a raw pygame event.  Returns the mapped event, if any."""
        mapped = None
        if event.type == pygame.KEYDOWN:
            mapped = _PRESS_BINDS.get(event.key)
        elif event.type == pygame.KEYUP:
            mapped = _RELEASE_BINDS.get(event.key)
        if mapped is not None:
            self.last_key = mapped.value
            self.frame_events.append(mapped)
        return mapped
