"""logic/states.py — Player animation state machine.

Ten mutually exclusive states, one per (pose, facing) pair:

    standing ─┬─ right/left ──→ running ─── down ──→ sitting
              ├─ down ────────→ sitting ─── release down ──→ standing
              └─ up ──────────→ jumping ─── vy > 0 ──→ falling
                                   └──── on ground ──→ standing

Each state is a stateless behaviour object with two hooks:

``enter(player)``
    Runs once, right after the state becomes active.  Picks the sprite
    row, resets speed, sets the strip length and (for jumps) kicks
    ``vy`` upward if the dog is on the ground.

``handle_input(player, input)``
    Runs every tick while active.  Guards are checked top to bottom and
    only the first match fires, so there is at most one transition per
    tick.  Anything that isn't one of the known event strings falls
    through every input guard untouched.

The player is always passed in explicitly; states never keep a
reference to it, so a single table of state objects could drive any
number of players.
"""

from __future__ import annotations
from enum import IntEnum
from typing import TYPE_CHECKING

from core.constants import (
    ROW_STANDING_RIGHT, ROW_STANDING_LEFT,
    ROW_SITTING_RIGHT, ROW_SITTING_LEFT,
    ROW_RUNNING_RIGHT, ROW_RUNNING_LEFT,
    ROW_JUMPING_RIGHT, ROW_JUMPING_LEFT,
    ROW_FALLING_RIGHT, ROW_FALLING_LEFT,
    MAX_FRAME_STANDING, MAX_FRAME_SITTING, MAX_FRAME_RUNNING, MAX_FRAME_AIR,
)
from logic.input_manager import InputEvent

if TYPE_CHECKING:
    from logic.player import Player


class StateId(IntEnum):
    """Index of each state in the player's state table."""
    STANDING_LEFT = 0
    STANDING_RIGHT = 1
    SITTING_LEFT = 2
    SITTING_RIGHT = 3
    RUNNING_LEFT = 4
    RUNNING_RIGHT = 5
    JUMPING_LEFT = 6
    JUMPING_RIGHT = 7
    FALLING_LEFT = 8
    FALLING_RIGHT = 9


class State:
    """Base for all player states.  Holds only the display label."""

    state_id: StateId

    def __init__(self, label: str):
        self.label = label

    def enter(self, player: Player) -> None:
        pass

    def handle_input(self, player: Player, input: str | None) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"


# ── Standing ─────────────────────────────────────────────────────────

class StandingLeft(State):
    state_id = StateId.STANDING_LEFT

    def __init__(self):
        super().__init__("STANDING LEFT")

    def enter(self, player):
        player.frame_y = ROW_STANDING_LEFT
        player.speed = 0.0
        player.max_frame = MAX_FRAME_STANDING

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_RIGHT:
            player.set_state(StateId.RUNNING_RIGHT)
        elif input == InputEvent.PRESS_LEFT:
            player.set_state(StateId.RUNNING_LEFT)
        elif input == InputEvent.PRESS_DOWN:
            player.set_state(StateId.SITTING_LEFT)
        elif input == InputEvent.PRESS_UP:
            player.set_state(StateId.JUMPING_LEFT)


class StandingRight(State):
    state_id = StateId.STANDING_RIGHT

    def __init__(self):
        super().__init__("STANDING RIGHT")

    def enter(self, player):
        player.frame_y = ROW_STANDING_RIGHT
        player.speed = 0.0
        player.max_frame = MAX_FRAME_STANDING

    def handle_input(self, player, input):
        # Left is checked before right here (mirror of StandingLeft),
        # but each press still runs toward the key that was pressed.
        if input == InputEvent.PRESS_LEFT:
            player.set_state(StateId.RUNNING_LEFT)
        elif input == InputEvent.PRESS_RIGHT:
            player.set_state(StateId.RUNNING_RIGHT)
        elif input == InputEvent.PRESS_DOWN:
            player.set_state(StateId.SITTING_RIGHT)
        elif input == InputEvent.PRESS_UP:
            player.set_state(StateId.JUMPING_RIGHT)


# ── Sitting ──────────────────────────────────────────────────────────

class SittingLeft(State):
    state_id = StateId.SITTING_LEFT

    def __init__(self):
        super().__init__("SITTING LEFT")

    def enter(self, player):
        player.frame_y = ROW_SITTING_LEFT
        player.speed = 0.0
        player.max_frame = MAX_FRAME_SITTING

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_RIGHT:
            player.set_state(StateId.SITTING_RIGHT)
        elif input == InputEvent.RELEASE_DOWN:
            player.set_state(StateId.STANDING_LEFT)


class SittingRight(State):
    state_id = StateId.SITTING_RIGHT

    def __init__(self):
        super().__init__("SITTING RIGHT")

    def enter(self, player):
        player.frame_y = ROW_SITTING_RIGHT
        player.speed = 0.0
        player.max_frame = MAX_FRAME_SITTING

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_LEFT:
            player.set_state(StateId.SITTING_LEFT)
        elif input == InputEvent.RELEASE_DOWN:
            player.set_state(StateId.STANDING_RIGHT)


# ── Running ──────────────────────────────────────────────────────────

class RunningLeft(State):
    state_id = StateId.RUNNING_LEFT

    def __init__(self):
        super().__init__("RUNNING LEFT")

    def enter(self, player):
        player.frame_y = ROW_RUNNING_LEFT
        player.speed = -player.max_speed
        player.max_frame = MAX_FRAME_RUNNING

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_RIGHT:
            player.set_state(StateId.RUNNING_RIGHT)
        elif input == InputEvent.RELEASE_LEFT:
            player.set_state(StateId.STANDING_LEFT)
        elif input == InputEvent.PRESS_DOWN:
            player.set_state(StateId.SITTING_LEFT)


class RunningRight(State):
    state_id = StateId.RUNNING_RIGHT

    def __init__(self):
        super().__init__("RUNNING RIGHT")

    def enter(self, player):
        player.frame_y = ROW_RUNNING_RIGHT
        player.speed = player.max_speed
        player.max_frame = MAX_FRAME_RUNNING

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_LEFT:
            player.set_state(StateId.RUNNING_LEFT)
        elif input == InputEvent.RELEASE_RIGHT:
            player.set_state(StateId.STANDING_RIGHT)
        elif input == InputEvent.PRESS_DOWN:
            player.set_state(StateId.SITTING_RIGHT)


# ── Jumping ──────────────────────────────────────────────────────────

class JumpingLeft(State):
    state_id = StateId.JUMPING_LEFT

    def __init__(self):
        super().__init__("JUMPING LEFT")

    def enter(self, player):
        player.frame_y = ROW_JUMPING_LEFT
        # Only a grounded dog can push off; re-entering mid-air keeps vy
        if player.on_ground():
            player.vy -= player.jump_impulse
        player.max_frame = MAX_FRAME_AIR

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_RIGHT:
            player.set_state(StateId.JUMPING_RIGHT)
        elif player.on_ground():
            player.set_state(StateId.STANDING_LEFT)
        # vy climbs -20, -19.5, ... 0, 0.5 — positive means coming down
        elif player.vy > 0:
            player.set_state(StateId.FALLING_LEFT)
        elif input == InputEvent.PRESS_LEFT:
            player.speed = -player.max_speed * 0.5


class JumpingRight(State):
    state_id = StateId.JUMPING_RIGHT

    def __init__(self):
        super().__init__("JUMPING RIGHT")

    def enter(self, player):
        player.frame_y = ROW_JUMPING_RIGHT
        if player.on_ground():
            player.vy -= player.jump_impulse
        player.max_frame = MAX_FRAME_AIR

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_LEFT:
            player.set_state(StateId.JUMPING_LEFT)
        elif player.on_ground():
            player.set_state(StateId.STANDING_RIGHT)
        elif player.vy > 0:
            player.set_state(StateId.FALLING_RIGHT)
        elif input == InputEvent.PRESS_RIGHT:
            player.speed = player.max_speed * 0.5


# ── Falling ──────────────────────────────────────────────────────────

class FallingLeft(State):
    state_id = StateId.FALLING_LEFT

    def __init__(self):
        super().__init__("FALLING LEFT")

    def enter(self, player):
        player.frame_y = ROW_FALLING_LEFT
        player.max_frame = MAX_FRAME_AIR

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_RIGHT:
            player.set_state(StateId.FALLING_RIGHT)
        elif player.on_ground():
            player.set_state(StateId.STANDING_LEFT)
        elif input == InputEvent.PRESS_LEFT:
            player.speed = -player.max_speed * 0.5


class FallingRight(State):
    state_id = StateId.FALLING_RIGHT

    def __init__(self):
        super().__init__("FALLING RIGHT")

    def enter(self, player):
        player.frame_y = ROW_FALLING_RIGHT
        player.max_frame = MAX_FRAME_AIR

    def handle_input(self, player, input):
        if input == InputEvent.PRESS_LEFT:
            player.set_state(StateId.FALLING_LEFT)
        elif player.on_ground():
            player.set_state(StateId.STANDING_RIGHT)
        # Unreachable: PRESS left is taken by the first guard
        elif input == InputEvent.PRESS_LEFT:
            player.speed = -player.max_speed * 0.5


# ── State table ──────────────────────────────────────────────────────

_STATE_CLASSES: tuple[type[State], ...] = (
    StandingLeft, StandingRight,
    SittingLeft, SittingRight,
    RunningLeft, RunningRight,
    JumpingLeft, JumpingRight,
    FallingLeft, FallingRight,
)


def build_states() -> dict[StateId, State]:
    """Create one instance of every state, keyed by its ``StateId``."""
    return {cls.state_id: cls() for cls in _STATE_CLASSES}
