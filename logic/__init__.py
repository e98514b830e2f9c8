"""logic — Gameplay package.

Modules
-------
states          — the ten player states and the StateId enum
player          — position, physics, frame timer, sprite blit
input_manager   — arrow keys → discrete input event strings
"""
