"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.

Unit System
-----------
Everything in this game is measured in **pixels** and **ticks**:

    Distance / position     px
    Speed                   px / tick   (one tick = one update call)
    Gravity                 px / tick²
    Animation time          ms          (host-supplied delta, not wall clock)

Sprite Sheet
~~~~~~~~~~~~
The dog sheet is 1800 × 2182 px, laid out as 9 columns × 12 rows.
Each row is one animation strip; each column one frame of it.
Rows used by the player states:

    0  standing right     6  running right
    1  standing left      7  running left
    2  jumping right      8  sitting right
    3  jumping left       9  sitting left
    4  falling right
    5  falling left
"""

# ── Sprite sheet ────────────────────────────────────────────────────
SHEET_WIDTH = 1800
SHEET_HEIGHT = 2182
SHEET_COLUMNS = 9
SHEET_ROWS = 12

FRAME_WIDTH: float = SHEET_WIDTH / SHEET_COLUMNS     # 200.0
FRAME_HEIGHT: float = SHEET_HEIGHT / SHEET_ROWS      # ~181.83

DEFAULT_SHEET_PATH = "assets/shadow_dog.png"

# Sprite rows  (must match the sheet layout above)
ROW_STANDING_RIGHT = 0
ROW_STANDING_LEFT  = 1
ROW_JUMPING_RIGHT  = 2
ROW_JUMPING_LEFT   = 3
ROW_FALLING_RIGHT  = 4
ROW_FALLING_LEFT   = 5
ROW_RUNNING_RIGHT  = 6
ROW_RUNNING_LEFT   = 7
ROW_SITTING_RIGHT  = 8
ROW_SITTING_LEFT   = 9

# Animation strip lengths — highest frame index, inclusive
MAX_FRAME_STANDING = 6
MAX_FRAME_SITTING  = 4
MAX_FRAME_RUNNING  = 8
MAX_FRAME_AIR      = 6

# ── Player physics defaults (overridable in data/tuning.toml) ───────
PLAYER_WEIGHT = 0.5
PLAYER_MAX_SPEED = 10.0
PLAYER_JUMP_IMPULSE = 20.0
PLAYER_ANIM_FPS = 25

# ── Window ──────────────────────────────────────────────────────────
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 720
WINDOW_FPS = 60
WINDOW_TITLE = "Shadow Dog"

BG_COLOR = (255, 255, 255)
TEXT_COLOR = (0, 0, 0)
