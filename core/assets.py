"""core/assets.py — Sprite sheet loading.

The dog sheet is expected at ``assets/shadow_dog.png`` (path overridable
through ``[sprite] path`` in the tuning file).  When the file is missing
a placeholder sheet of the same geometry is generated so the game still
runs: every row gets its own tint and every cell a frame tick mark, which
is enough to see the state machine and frame timer at work.
"""

from __future__ import annotations
from pathlib import Path
import pygame

from core.constants import (
    SHEET_WIDTH, SHEET_HEIGHT, SHEET_COLUMNS, SHEET_ROWS,
    FRAME_WIDTH, FRAME_HEIGHT, DEFAULT_SHEET_PATH,
)


def load_sprite_sheet(path: str | Path | None = None) -> pygame.Surface:
    """Load the dog sheet, or build a placeholder if it isn't on disk.

    Relative paths resolve against the project root.
    """
    if path is None:
        path = DEFAULT_SHEET_PATH
    path = Path(path)
    if not path.is_absolute():
        path = Path(__file__).resolve().parent.parent / path

    if not path.exists():
        print(f"[ASSETS] {path} not found — using placeholder sheet")
        return placeholder_sheet()

    image = pygame.image.load(str(path))
    if image.get_size() != (SHEET_WIDTH, SHEET_HEIGHT):
        print(f"[ASSETS] {path.name} is {image.get_size()}, "
              f"expected {(SHEET_WIDTH, SHEET_HEIGHT)} — frames may be misaligned")
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def placeholder_sheet() -> pygame.Surface:
    """Generate a sheet with one tinted strip per row and a marker per frame."""
    sheet = pygame.Surface((SHEET_WIDTH, SHEET_HEIGHT), pygame.SRCALPHA)
    for row in range(SHEET_ROWS):
        hue = (row * 360 // SHEET_ROWS) % 360
        color = pygame.Color(0)
        color.hsva = (hue, 55, 85, 100)
        top = int(row * FRAME_HEIGHT)
        for col in range(SHEET_COLUMNS):
            left = int(col * FRAME_WIDTH)
            body = pygame.Rect(left + 30, top + 60, int(FRAME_WIDTH) - 60,
                               int(FRAME_HEIGHT) - 80)
            pygame.draw.rect(sheet, color, body, border_radius=18)
            # Tick mark moves across the body as the frame index grows
            mx = body.left + 8 + col * (body.width - 16) // max(SHEET_COLUMNS - 1, 1)
            pygame.draw.line(sheet, (30, 30, 30), (mx, body.top + 6),
                             (mx, body.bottom - 6), 4)
    return sheet
