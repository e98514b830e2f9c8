"""core/dev_log.py — Structured gameplay event log.

A ring buffer that records timestamped state transitions, input events
and system messages.  The play scene draws the tail of it when the F3
overlay is on, so you can watch the state machine react to the keys.

Usage:
    log = DevLog()
    player = Player(800, 720, log=log)
    log.record("state", "STANDING RIGHT → RUNNING RIGHT", t=elapsed)

Each entry is a dict:
    {"t": float, "cat": str, "msg": str, "details": dict | None}
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class DevLog:
    """Ring buffer of gameplay events for the debug overlay."""

    entries: list[dict] = field(default_factory=list)
    max_entries: int = 200

    def record(self, cat: str, msg: str, *,
               t: float = 0.0, details: dict | None = None) -> None:
        entry = {
            "t": t,
            "cat": cat,
            "msg": msg,
            "details": details,
        }
        self.entries.append(entry)
        if len(self.entries) > self.max_entries:
            self.entries = self.entries[-self.max_entries:]

    def recent(self, n: int = 20) -> list[dict]:
        """Return the *n* most recent entries (newest last)."""
        return self.entries[-n:]
