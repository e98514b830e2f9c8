"""ui — On-screen text overlays.

Status readout (last input + active state) and the F3 event log panel.
"""

from ui.helpers import draw_status_text, draw_log_panel, draw_overlay

__all__ = ["draw_status_text", "draw_log_panel", "draw_overlay"]
