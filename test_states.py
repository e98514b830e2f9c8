"""test_states.py — Guard-by-guard tests for the player state machine.

Every transition in every state is driven from a known position
(grounded, rising, or falling) and checked against the expected next
state.  Also covers the no-op behaviour for unknown inputs, the jump
impulse rule and the StandingRight key order.

Run:  python test_states.py
"""
from __future__ import annotations
import sys, traceback

from core import tuning
tuning.reset()

from logic.input_manager import InputEvent
from logic.player import Player
from logic.states import StateId, build_states, State


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


# ── Helpers ──────────────────────────────────────────────────────────

GAME_W, GAME_H = 800, 720

GROUND = "ground"
RISING = "rising"     # airborne, vy < 0
FALLING = "falling"   # airborne, vy > 0


def _player() -> Player:
    return Player(GAME_W, GAME_H)


def _put(p: Player, sid: StateId, where: str = GROUND) -> Player:
    """Activate *sid* with the dog grounded or mid-air."""
    if where != GROUND:
        p.y = p.game_height - p.height - 150
    p.set_state(sid)
    if where == RISING:
        p.vy = -5.0
    elif where == FALLING:
        p.vy = 1.0
    else:
        p.vy = 0.0
    return p


S = StateId
E = InputEvent

# (start state, position, input, expected state)
_TRANSITIONS = [
    # Standing
    (S.STANDING_LEFT,  GROUND, E.PRESS_RIGHT, S.RUNNING_RIGHT),
    (S.STANDING_LEFT,  GROUND, E.PRESS_LEFT,  S.RUNNING_LEFT),
    (S.STANDING_LEFT,  GROUND, E.PRESS_DOWN,  S.SITTING_LEFT),
    (S.STANDING_LEFT,  GROUND, E.PRESS_UP,    S.JUMPING_LEFT),
    (S.STANDING_RIGHT, GROUND, E.PRESS_LEFT,  S.RUNNING_LEFT),
    (S.STANDING_RIGHT, GROUND, E.PRESS_RIGHT, S.RUNNING_RIGHT),
    (S.STANDING_RIGHT, GROUND, E.PRESS_DOWN,  S.SITTING_RIGHT),
    (S.STANDING_RIGHT, GROUND, E.PRESS_UP,    S.JUMPING_RIGHT),
    # Sitting
    (S.SITTING_LEFT,   GROUND, E.PRESS_RIGHT,  S.SITTING_RIGHT),
    (S.SITTING_LEFT,   GROUND, E.RELEASE_DOWN, S.STANDING_LEFT),
    (S.SITTING_LEFT,   GROUND, E.PRESS_UP,     S.SITTING_LEFT),
    (S.SITTING_RIGHT,  GROUND, E.PRESS_LEFT,   S.SITTING_LEFT),
    (S.SITTING_RIGHT,  GROUND, E.RELEASE_DOWN, S.STANDING_RIGHT),
    (S.SITTING_RIGHT,  GROUND, E.PRESS_UP,     S.SITTING_RIGHT),
    # Running
    (S.RUNNING_LEFT,   GROUND, E.PRESS_RIGHT,   S.RUNNING_RIGHT),
    (S.RUNNING_LEFT,   GROUND, E.RELEASE_LEFT,  S.STANDING_LEFT),
    (S.RUNNING_LEFT,   GROUND, E.PRESS_DOWN,    S.SITTING_LEFT),
    (S.RUNNING_LEFT,   GROUND, E.PRESS_UP,      S.RUNNING_LEFT),
    (S.RUNNING_RIGHT,  GROUND, E.PRESS_LEFT,    S.RUNNING_LEFT),
    (S.RUNNING_RIGHT,  GROUND, E.RELEASE_RIGHT, S.STANDING_RIGHT),
    (S.RUNNING_RIGHT,  GROUND, E.PRESS_DOWN,    S.SITTING_RIGHT),
    (S.RUNNING_RIGHT,  GROUND, E.RELEASE_LEFT,  S.RUNNING_RIGHT),
    # Jumping
    (S.JUMPING_LEFT,   RISING,  E.PRESS_RIGHT, S.JUMPING_RIGHT),
    (S.JUMPING_LEFT,   GROUND,  "",            S.STANDING_LEFT),
    (S.JUMPING_LEFT,   FALLING, "",            S.FALLING_LEFT),
    (S.JUMPING_LEFT,   RISING,  E.PRESS_LEFT,  S.JUMPING_LEFT),
    (S.JUMPING_RIGHT,  RISING,  E.PRESS_LEFT,  S.JUMPING_LEFT),
    (S.JUMPING_RIGHT,  GROUND,  "",            S.STANDING_RIGHT),
    (S.JUMPING_RIGHT,  FALLING, "",            S.FALLING_RIGHT),
    (S.JUMPING_RIGHT,  RISING,  E.PRESS_RIGHT, S.JUMPING_RIGHT),
    # Falling
    (S.FALLING_LEFT,   FALLING, E.PRESS_RIGHT, S.FALLING_RIGHT),
    (S.FALLING_LEFT,   GROUND,  "",            S.STANDING_LEFT),
    (S.FALLING_LEFT,   FALLING, E.PRESS_LEFT,  S.FALLING_LEFT),
    (S.FALLING_RIGHT,  FALLING, E.PRESS_LEFT,  S.FALLING_LEFT),
    (S.FALLING_RIGHT,  GROUND,  "",            S.STANDING_RIGHT),
    (S.FALLING_RIGHT,  FALLING, E.PRESS_RIGHT, S.FALLING_RIGHT),
]


# ═══════════════════════════════════════════════════════════════════════
#  Tests
# ═══════════════════════════════════════════════════════════════════════

def test_state_table():
    states = build_states()
    assert set(states) == set(StateId), "every StateId needs a state object"
    for sid, st in states.items():
        assert isinstance(st, State)
        assert st.state_id == sid, f"{st!r} keyed under {sid}"
    assert states[S.FALLING_RIGHT].label == "FALLING RIGHT"
    ok("10 states built, keyed by their own StateId")

    p = _player()
    before = dict(p.states)
    p.set_state(S.RUNNING_LEFT)
    p.set_state(S.STANDING_LEFT)
    p.set_state(S.RUNNING_LEFT)
    assert all(p.states[k] is before[k] for k in before)
    assert p.current_state is before[S.RUNNING_LEFT]
    ok("Switching reuses the same state objects")


def test_entry_effects():
    expect = {
        S.STANDING_LEFT:  (1, 0.0, 6),
        S.STANDING_RIGHT: (0, 0.0, 6),
        S.SITTING_LEFT:   (9, 0.0, 4),
        S.SITTING_RIGHT:  (8, 0.0, 4),
        S.RUNNING_LEFT:   (7, -10.0, 8),
        S.RUNNING_RIGHT:  (6, 10.0, 8),
    }
    for sid, (row, speed, max_frame) in expect.items():
        p = _player()
        p.speed = 3.0
        p.set_state(sid)
        assert (p.frame_y, p.speed, p.max_frame) == (row, speed, max_frame), \
            f"{sid.name}: got {(p.frame_y, p.speed, p.max_frame)}"
    ok("Ground states set row, speed and strip length")

    air = {
        S.JUMPING_LEFT: 3, S.JUMPING_RIGHT: 2,
        S.FALLING_LEFT: 5, S.FALLING_RIGHT: 4,
    }
    for sid, row in air.items():
        p = _player()
        p.y -= 100
        p.speed = 3.0
        p.set_state(sid)
        assert p.frame_y == row and p.max_frame == 6, sid.name
        assert p.speed == 3.0, f"{sid.name} should keep horizontal speed"
    ok("Air states set row and strip length, keep speed")


def test_transitions():
    for start, where, event, expected in _TRANSITIONS:
        p = _put(_player(), start, where)
        p.current_state.handle_input(p, event)
        got = p.state_id
        assert got == expected, \
            f"{start.name} [{where}] + {event!r}: expected {expected.name}, got {got.name}"
    ok(f"{len(_TRANSITIONS)} guarded transitions land where expected")


def test_first_guard_wins():
    # Rising in JumpingLeft but also on the ground: PRESS right is checked first
    p = _put(_player(), S.JUMPING_LEFT, RISING)
    p.y = p.game_height - p.height
    p.current_state.handle_input(p, E.PRESS_RIGHT)
    assert p.state_id == S.JUMPING_RIGHT
    ok("Direction switch beats the landing check")

    # Grounded with vy > 0: landing beats falling
    p = _put(_player(), S.JUMPING_RIGHT, GROUND)
    p.vy = 2.0
    p.current_state.handle_input(p, "")
    assert p.state_id == S.STANDING_RIGHT
    ok("Landing check beats the falling check")


def test_unknown_inputs_are_noops():
    junk = [None, "", "PRESS space", "press left", "RELEASE up",
            "PRESS  left", "left", "RELEASE"]
    for sid in StateId:
        where = RISING if sid in (S.JUMPING_LEFT, S.JUMPING_RIGHT,
                                  S.FALLING_LEFT, S.FALLING_RIGHT) else GROUND
        for event in junk:
            p = _put(_player(), sid, where)
            speed, vy = p.speed, p.vy
            p.current_state.handle_input(p, event)
            assert p.state_id == sid, f"{sid.name} moved on {event!r}"
            assert (p.speed, p.vy) == (speed, vy), f"{sid.name} changed on {event!r}"
    ok("Unknown inputs leave every state and its physics untouched")


def test_plain_strings_match_enum():
    p = _put(_player(), S.STANDING_LEFT)
    p.current_state.handle_input(p, "PRESS right")
    assert p.state_id == S.RUNNING_RIGHT
    ok("Raw event strings work the same as InputEvent members")


def test_standing_right_key_order():
    p = _player()
    assert p.state_id == S.STANDING_RIGHT
    p.update("PRESS left")
    assert p.state_id == S.RUNNING_LEFT, p.state_name
    assert p.speed == -p.max_speed
    ok("StandingRight + PRESS left → RunningLeft (left checked first, not swapped)")


def test_air_steering():
    p = _put(_player(), S.JUMPING_LEFT, RISING)
    p.speed = 0.0
    p.current_state.handle_input(p, E.PRESS_LEFT)
    assert p.speed == -5.0 and p.state_id == S.JUMPING_LEFT
    ok("JumpingLeft + PRESS left → half speed leftward")

    p = _put(_player(), S.JUMPING_RIGHT, RISING)
    p.speed = 0.0
    p.current_state.handle_input(p, E.PRESS_RIGHT)
    assert p.speed == 5.0 and p.state_id == S.JUMPING_RIGHT
    ok("JumpingRight + PRESS right → half speed rightward")

    p = _put(_player(), S.FALLING_LEFT, FALLING)
    p.speed = 0.0
    p.current_state.handle_input(p, E.PRESS_LEFT)
    assert p.speed == -5.0 and p.state_id == S.FALLING_LEFT
    ok("FallingLeft + PRESS left → half speed leftward")

    p = _put(_player(), S.FALLING_RIGHT, FALLING)
    p.speed = 0.0
    p.current_state.handle_input(p, E.PRESS_RIGHT)
    assert p.speed == 0.0 and p.state_id == S.FALLING_RIGHT
    p.current_state.handle_input(p, E.PRESS_LEFT)
    assert p.state_id == S.FALLING_LEFT and p.speed == 0.0
    ok("FallingRight has no steering; PRESS left only flips facing")


def test_jump_impulse_only_when_grounded():
    p = _player()
    assert p.on_ground()
    p.set_state(S.JUMPING_RIGHT)
    assert p.vy == -20.0, p.vy
    ok("Grounded jump entry kicks vy by -20")

    p = _player()
    p.update("PRESS up")          # jump and leave the ground
    assert p.state_id == S.JUMPING_RIGHT
    assert not p.on_ground()
    vy = p.vy
    p.set_state(S.JUMPING_RIGHT)
    p.set_state(S.JUMPING_LEFT)
    assert p.vy == vy, f"re-entering mid-air changed vy {vy} → {p.vy}"
    ok("Re-entering a jump mid-air does not stack impulse")

    # Flip facing mid-jump through the state machine
    p = _player()
    p.update("PRESS up")
    assert p.state_id == S.JUMPING_RIGHT and p.vy == -19.5
    p.update("PRESS left")
    assert p.state_id == S.JUMPING_LEFT
    assert p.vy == -19.0, p.vy
    ok("Facing flip mid-jump keeps the rising arc")


# ═══════════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("State table", test_state_table),
        ("Entry effects", test_entry_effects),
        ("Transitions", test_transitions),
        ("Guard priority", test_first_guard_wins),
        ("Unknown inputs", test_unknown_inputs_are_noops),
        ("String inputs", test_plain_strings_match_enum),
        ("StandingRight key order", test_standing_right_key_order),
        ("Air steering", test_air_steering),
        ("Jump impulse", test_jump_impulse_only_when_grounded),
    ]

    for name, fn in sections:
        print(f"\n=== {name} ===")
        try:
            fn()
        except Exception:
            fail(name, traceback.format_exc())

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  State Machine Tests: {_passed} passed, {_failed} failed  "
          f"(total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
