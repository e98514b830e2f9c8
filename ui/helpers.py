"""ui.helpers — Text overlays drawn on top of the play field."""

from __future__ import annotations
import pygame

from core.constants import TEXT_COLOR


def draw_status_text(surface: pygame.Surface, app, last_key: str,
                     state_name: str) -> None:
    """Top-left readout of the last input event and the active state."""
    app.draw_text(surface, "Last input: " + last_key, 20, 50, TEXT_COLOR)
    app.draw_text(surface, "Active state: " + state_name, 20, 90, TEXT_COLOR)


def draw_overlay(surface: pygame.Surface, rect: pygame.Rect,
                 alpha: int = 160) -> None:
    """Semi-transparent dark box behind a panel."""
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, rect.topleft)


# ── debug log panel ───────────────────────────────────────────────

ROW_H = 16  # pixel height of one log row

_CAT_COLORS: dict[str, tuple[int, int, int]] = {
    "state":  (120, 200, 255),
    "input":  (100, 255, 160),
    "system": (180, 180, 180),
}


def format_entry(entry: dict) -> str:
    """One log entry as ``[  1.25s] state  STANDING RIGHT → RUNNING RIGHT``."""
    return f"[{entry['t']:6.2f}s] {entry['cat']:<6} {entry['msg']}"


def draw_log_panel(surface: pygame.Surface, app, entries: list[dict],
                   x: int, y: int, w: int) -> pygame.Rect:
    """Draw *entries* (newest last) in a box.  Returns the panel rect."""
    h = ROW_H * max(len(entries), 1) + 12
    rect = pygame.Rect(x, y, w, h)
    draw_overlay(surface, rect)
    if not entries:
        app.draw_text(surface, "(no events)", x + 6, y + 6,
                      (150, 150, 150), font=app.font_sm)
        return rect
    for i, entry in enumerate(entries):
        color = _CAT_COLORS.get(entry["cat"], (220, 220, 220))
        app.draw_text(surface, format_entry(entry), x + 6, y + 6 + i * ROW_H,
                      color, font=app.font_sm)
    return rect
