"""
core/app.py — Pygame application shell

Handles the window, main loop, and scene stack.
You don't edit this file to build your game.
You write Scenes and push/pop them.

    app = App(title="Shadow Dog", width=800, height=720)
    app.push_scene(MyScene())
    app.run()
"""

from __future__ import annotations
import pygame
from core.scene import Scene


class App:
    def __init__(self, title: str = "Shadow Dog", width: int = 800,
                 height: int = 720, fps: int = 60):
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height), pygame.SCALED)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = fps
        self.dt = 0.0

        # Scene stack — only the top scene is active
        self._scenes: list[Scene] = []

        self.font = pygame.font.SysFont("helvetica", 28)
        self.font_sm = pygame.font.SysFont("monospace", 14)

    # -- Scene management --

    @property
    def scene(self) -> Scene | None:
        return self._scenes[-1] if self._scenes else None

    def push_scene(self, scene: Scene):
        if self._scenes:
            self._scenes[-1].on_exit(self)
        self._scenes.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        if self._scenes:
            self._scenes[-1].on_exit(self)
            self._scenes.pop()
        if self._scenes:
            self._scenes[-1].on_enter(self)
        else:
            self.running = False

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0

            # Events
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif self.scene:
                    self.scene.handle_event(event, self)

            # One update, then one draw, per frame
            if self.scene:
                self.scene.update(self.dt, self)
            if self.scene:
                self.scene.draw(self.screen, self)

            pygame.display.flip()

        pygame.quit()

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(0, 0, 0), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        rect = surface.blit(img, (x, y))
        return rect
