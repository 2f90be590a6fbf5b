"""
Image Rendering

Saves levels as PNG images, one per solution step, for inspecting long
solutions more comfortably than the text transcript.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from src.solver import Cell, CellType, Level

logger = logging.getLogger(__name__)

# Default output location
RENDER_DIR = Path("./render")

# Pixel size of one grid cell
CELL_SIZE = 32

Color = Tuple[int, int, int]

WALL_COLOR: Color = (90, 90, 90)
OPEN_COLOR: Color = (245, 245, 245)
BORDER_COLOR: Color = (0, 0, 0)
CAPTION_COLOR: Color = (255, 255, 255)

# Block colors by digit; 0 is the neutral block
BLOCK_COLORS: Dict[int, Color] = {
    0: (30, 30, 30),
    1: (230, 57, 70),
    2: (69, 123, 157),
    3: (42, 157, 143),
    4: (233, 196, 106),
    5: (244, 162, 97),
    6: (131, 56, 236),
    7: (255, 0, 110),
    8: (58, 134, 255),
    9: (128, 185, 24),
}


def cell_color(cell: Cell) -> Color:
    """Fill color for a cell."""
    if cell.type == CellType.WALL:
        return WALL_COLOR
    if cell.type == CellType.OPEN:
        return OPEN_COLOR
    return BLOCK_COLORS[cell.color]


def level_to_pixels(level: Level, cell_size: int = CELL_SIZE) -> np.ndarray:
    """
    Paint cell fills into an RGB array.

    Returns:
        uint8 array of shape (height * cell_size, width * cell_size, 3)
    """
    colors = np.array(
        [[cell_color(cell) for cell in row] for row in level.grid],
        dtype=np.uint8
    )
    return np.repeat(np.repeat(colors, cell_size, axis=0), cell_size, axis=1)


def render_level_image(
    level: Level,
    cell_size: int = CELL_SIZE,
    caption: Optional[str] = None
) -> Image.Image:
    """
    Draw a level as an image.

    Edges between cells that do not belong together (different kind or
    different group) are outlined, so fused groups read as one shape.

    Args:
        level: Level to draw
        cell_size: Pixel size of one cell
        caption: Optional text drawn over the top border

    Returns:
        RGB PIL Image
    """
    image = Image.fromarray(level_to_pixels(level, cell_size))
    draw = ImageDraw.Draw(image)
    grid = level.grid

    for r in range(level.height):
        for c in range(level.width):
            cell = grid[r][c]
            x = c * cell_size
            y = r * cell_size
            if c + 1 < level.width and not cell.joins(grid[r][c + 1]):
                draw.line([(x + cell_size, y), (x + cell_size, y + cell_size)],
                          fill=BORDER_COLOR, width=2)
            if r + 1 < level.height and not cell.joins(grid[r + 1][c]):
                draw.line([(x, y + cell_size), (x + cell_size, y + cell_size)],
                          fill=BORDER_COLOR, width=2)

    if caption:
        draw.text((4, 2), caption, fill=CAPTION_COLOR, font=ImageFont.load_default())

    return image


def save_solution_images(
    steps: Sequence[Level],
    directory: Union[str, Path] = RENDER_DIR,
    cell_size: int = CELL_SIZE
) -> List[Path]:
    """
    Save one PNG per solution step.

    Files are named step_000.png, step_001.png, ... in path order.

    Args:
        steps: Levels from start to solved
        directory: Output directory, created if missing
        cell_size: Pixel size of one cell

    Returns:
        Paths of the written files
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    paths: List[Path] = []
    for i, level in enumerate(steps):
        path = directory / f"step_{i:03d}.png"
        image = render_level_image(level, cell_size, caption=f"Step {i}")
        image.save(path, "PNG")
        paths.append(path)

    logger.info(f"Saved {len(paths)} step images to {directory}")
    return paths
