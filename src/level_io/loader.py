"""
Level Loader

Level files hold a block of equal-length rows:

    '#'      wall
    ' '      open space
    '1'-'9'  colored block
    '0'      neutral block

The block ends at the first blank line or at end of file. The loader
surrounds it with a wall border.
"""

import io
import logging
from pathlib import Path
from typing import List, Optional, TextIO, Union

from src.solver import Level

logger = logging.getLogger(__name__)


class LevelLoadError(Exception):
    """Level file could not be opened or does not hold a valid level."""


def read_level(stream: TextIO) -> Optional[Level]:
    """
    Read one level from a text stream.

    Args:
        stream: Open text stream positioned at the first row

    Returns:
        Level, or None if the rows are empty or ragged
    """
    lines: List[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if not line:
            break
        lines.append(line)
    return Level.from_lines(lines)


def parse_level(text: str) -> Optional[Level]:
    """Read a level from a string. See read_level()."""
    return read_level(io.StringIO(text))


def load_level(path: Union[str, Path]) -> Level:
    """
    Load a level file.

    Args:
        path: Path to the level file

    Returns:
        Parsed Level

    Raises:
        LevelLoadError: If the file cannot be read or is malformed
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            level = read_level(f)
    except OSError as e:
        logger.debug(f"Cannot open {path}: {e}")
        raise LevelLoadError(f"Failed to open input file ({path})!") from e
    except UnicodeDecodeError as e:
        logger.debug(f"Cannot decode {path}: {e}")
        raise LevelLoadError("Failed to read level!") from e

    if level is None:
        raise LevelLoadError("Failed to read level!")

    logger.debug(f"Loaded {path}: {level.cols}x{level.rows}, {level.groups} groups")
    return level
