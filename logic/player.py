"""logic/player.py — The dog: position, physics and sprite animation.

The player owns everything that changes over time (position, vertical
velocity, frame counters) and hands behaviour selection to whichever
state is active.  Each frame the scene calls, in order:

    player.update(input.last_key)    # state logic + motion
    player.draw(surface, dt_ms)      # frame timer + one blit

Physics is per tick, not per second: ``speed`` is added to ``x`` and
``vy`` to ``y`` once per ``update``.  Animation is time based and uses
only the delta the caller passes in, so it stays deterministic under a
variable frame rate.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from core.constants import (
    FRAME_WIDTH, FRAME_HEIGHT,
    PLAYER_WEIGHT, PLAYER_MAX_SPEED, PLAYER_JUMP_IMPULSE, PLAYER_ANIM_FPS,
)
from core.tuning import get as _tun
from logic.states import State, StateId, build_states

if TYPE_CHECKING:
    import pygame
    from core.dev_log import DevLog


class Player:
    def __init__(self, game_width: float, game_height: float,
                 image: pygame.Surface | None = None,
                 log: DevLog | None = None):
        self.game_width = game_width
        self.game_height = game_height
        self.image = image
        self.log = log

        self.states: dict[StateId, State] = build_states()

        # One cell of the sprite sheet
        self.width = FRAME_WIDTH
        self.height = FRAME_HEIGHT
        self.x = self.game_width / 2 - self.width / 2
        self.y = self.game_height - self.height
        self.vy = 0.0
        self.speed = 0.0

        self.frame_x = 0
        self.frame_y = 0
        self.max_frame = 0
        self.frame_timer = 0.0

        self.apply_tuning()

        # Game clock for log timestamps (ms of animation time seen so far)
        self.elapsed_ms = 0.0

        self.current_state: State = self.states[StateId.STANDING_RIGHT]
        self.current_state.enter(self)

    def apply_tuning(self) -> None:
        """(Re)read physics and animation numbers from the tuning file."""
        self.weight = float(_tun("player", "weight", PLAYER_WEIGHT))
        self.max_speed = float(_tun("player", "max_speed", PLAYER_MAX_SPEED))
        self.jump_impulse = float(_tun("player", "jump_impulse",
                                       PLAYER_JUMP_IMPULSE))
        self.fps = int(_tun("player", "fps", PLAYER_ANIM_FPS))
        self.frame_interval = 1000.0 / self.fps

    # -- State machine --

    @property
    def state_name(self) -> str:
        return self.current_state.label

    @property
    def state_id(self) -> StateId:
        return self.current_state.state_id

    def set_state(self, state: StateId) -> None:
        """Make *state* active and run its entry effect."""
        prev = self.current_state
        self.current_state = self.states[StateId(state)]
        if self.log is not None:
            self.log.record("state", f"{prev.label} → {self.current_state.label}",
                            t=self.elapsed_ms / 1000.0,
                            details={"x": round(self.x, 1), "y": round(self.y, 1),
                                     "vy": self.vy})
        self.current_state.enter(self)

    def on_ground(self) -> bool:
        return self.y >= self.game_height - self.height

    # -- Simulation --

    def update(self, input: str | None) -> None:
        """Advance one tick: react to *input*, then move."""
        self.current_state.handle_input(self, input)

        # Horizontal movement
        self.x += self.speed
        if self.x <= 0:
            self.x = 0.0
        elif self.x >= self.game_width - self.width:
            self.x = self.game_width - self.width

        # Vertical movement
        self.y += self.vy
        if not self.on_ground():
            self.vy += self.weight
        else:
            self.vy = 0.0
        if self.y > self.game_height - self.height:
            self.y = self.game_height - self.height

    # -- Animation / rendering --

    def advance_frame(self, delta_ms: float) -> None:
        """Step ``frame_x`` once for every ``frame_interval`` accumulated."""
        self.elapsed_ms += delta_ms
        self.frame_timer += delta_ms
        # A longer strip may have left frame_x past the new strip's end
        if self.frame_x > self.max_frame:
            self.frame_x = 0
        while self.frame_timer >= self.frame_interval:
            self.frame_timer -= self.frame_interval
            if self.frame_x < self.max_frame:
                self.frame_x += 1
            else:
                self.frame_x = 0

    def source_rect(self) -> tuple[float, float, float, float]:
        """Sheet rectangle of the current frame."""
        return (self.frame_x * self.width, self.frame_y * self.height,
                self.width, self.height)

    def dest_rect(self) -> tuple[float, float, float, float]:
        """Screen rectangle the frame is drawn to."""
        return (self.x, self.y, self.width, self.height)

    def draw(self, surface: pygame.Surface, delta_ms: float):
        """Advance the animation and blit the current frame.

        Returns whatever ``surface.blit`` returns (the dirty rect), or
        ``None`` when no sheet is attached; the animation still advances.
        """
        self.advance_frame(delta_ms)
        if self.image is None:
            return None
        sx, sy, w, h = self.source_rect()
        dx, dy, _, _ = self.dest_rect()
        area = (int(sx), int(sy), int(w), int(h))
        return surface.blit(self.image, (int(dx), int(dy)), area)

    def __repr__(self) -> str:
        return (f"Player(state={self.state_name!r}, x={self.x:.1f}, "
                f"y={self.y:.1f}, vy={self.vy:.1f}, frame=({self.frame_x},"
                f"{self.frame_y}))")
