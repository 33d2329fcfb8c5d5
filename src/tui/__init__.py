"""
Terminal front end for Minesweeper.

Key translation, text rendering and the curses session loop.
"""
from .app import AppConfig, play, replay
from .keys import command_for_key, parse_script
from .render import render_lines, render_text

__all__ = [
    "AppConfig",
    "play",
    "replay",
    "command_for_key",
    "parse_script",
    "render_lines",
    "render_text",
]
