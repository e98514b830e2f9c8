"""
scenes/play_scene.py — The only gameplay screen.

Wires the keyboard tracker to the player and draws the result:

    events  → InputHandler.feed   (last_key updated)
    update  → frame events into the DevLog, Player.update(last_key),
              InputHandler.begin_frame
    draw    → background, Player.draw(dt_ms), status text, log panel

Controls:
    Arrows  move / sit / jump
    F3      toggle event log panel
    F4      reload data/tuning.toml
    Escape  quit
"""

from __future__ import annotations
import pygame

from core import tuning
from core.app import App
from core.assets import load_sprite_sheet
from core.constants import BG_COLOR, DEFAULT_SHEET_PATH
from core.dev_log import DevLog
from core.scene import Scene
from logic.input_manager import InputHandler
from logic.player import Player
from ui.helpers import draw_status_text, draw_log_panel


class PlayScene(Scene):
    def __init__(self, image: pygame.Surface | None = None):
        self._image = image
        self.input = InputHandler()
        self.log = DevLog()
        self.player: Player | None = None
        self.show_log = False
        self._clock_s = 0.0

    def on_enter(self, app: App):
        if self.player is not None:
            return
        if self._image is None:
            self._image = load_sprite_sheet(
                tuning.get("sprite", "path", DEFAULT_SHEET_PATH))
        self.player = Player(app.width, app.height, image=self._image,
                             log=self.log)
        self.log.record("system", f"spawned in {self.player.state_name}")

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                app.pop_scene()
                return
            if event.key == pygame.K_F3:
                self.show_log = not self.show_log
                return
            if event.key == pygame.K_F4:
                tuning.reload()
                self.player.apply_tuning()
                self.log.record("system", "tuning reloaded", t=self._clock_s)
                return
        self.input.feed(event)

    def update(self, dt: float, app: App):
        self._clock_s += dt
        for mapped in self.input.frame_events:
            self.log.record("input", mapped.value, t=self._clock_s)
        self.player.update(self.input.last_key)
        # Events for the next frame arrive before the next update
        self.input.begin_frame()

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill(BG_COLOR)
        self.player.draw(surface, app.dt * 1000.0)
        draw_status_text(surface, app, self.input.last_key,
                         self.player.state_name)
        if self.show_log:
            w = surface.get_width() - 40
            draw_log_panel(surface, app, self.log.recent(12), 20, 140, w)
