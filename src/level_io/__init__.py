"""
Level I/O Module for the block puzzle solver

Reads level files into Level objects and renders levels back out, as
bordered text transcripts or as PNG images.

Usage:
    from src.level_io import load_level, format_transcript

    level = load_level("levels/example.txt")
    print(format_transcript([level]), end="")
"""

from .loader import LevelLoadError, load_level, parse_level, read_level
from .text_render import format_transcript, render_level
from .image_render import RENDER_DIR, render_level_image, save_solution_images

__all__ = [
    # Loading
    "LevelLoadError",
    "load_level",
    "parse_level",
    "read_level",
    # Text output
    "format_transcript",
    "render_level",
    # Images
    "RENDER_DIR",
    "render_level_image",
    "save_solution_images",
]
