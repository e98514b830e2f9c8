"""
core/scene.py — Scene interface

A Scene is one screen of the game.  ``App`` keeps a stack of them and
drives the top one with exactly one ``update`` followed by one ``draw``
per frame; scenes underneath are frozen until revealed.

    class PlayScene(Scene):
        def handle_event(self, event, app):
            self.input.feed(event)          # raw pygame event

        def update(self, dt, app):
            self.player.update(self.input.last_key)

        def draw(self, surface, app):
            self.player.draw(surface, app.dt * 1000.0)
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Scene became the top of the stack (pushed or revealed)."""

    def on_exit(self, app: App):
        """Scene was popped or covered by another one."""

    def handle_event(self, event: pygame.event.Event, app: App):
        """One raw pygame event, delivered before ``update``."""

    def update(self, dt: float, app: App):
        """Advance one tick.  *dt* is the frame time in seconds."""

    def draw(self, surface: pygame.Surface, app: App):
        """Render the frame onto *surface*."""
