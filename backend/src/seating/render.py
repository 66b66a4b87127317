from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional

from PIL import Image, ImageDraw, ImageFont

from .grid import Cell, SeatGrid
from .vars import (
    CELL_LABEL_WIDTH,
    IMAGE_CELL_PX,
    IMAGE_OCCUPIED_COLOR,
    IMAGE_EMPTY_COLOR,
    IMAGE_GRID_COLOR,
    IMAGE_TEXT_COLOR,
    IMAGE_VIOLATION_COLOR,
)


def format_grid(grid: SeatGrid, width: int = CELL_LABEL_WIDTH) -> str:
    lines = ["Seating Arrangement:"]
    for r in range(grid.rows):
        row = ""
        for c in range(grid.cols):
            person = grid.get((r, c))
            label = person.name if person is not None else f"Empty {r},{c}"
            row += f"{label:<{width}}"
        lines.append(row)
    return "\n".join(lines)


def render_grid_image(
    grid: SeatGrid,
    *,
    cell_px: int = IMAGE_CELL_PX,
    highlight: Optional[Iterable[Cell]] = None,
) -> Image.Image:
    """Draw the grid as tiles; seats in `highlight` get a thick violation outline."""
    img = Image.new("RGB", (grid.cols * cell_px, grid.rows * cell_px), IMAGE_EMPTY_COLOR)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()
    marked = set(highlight or [])

    for (r, c) in grid.scan():
        x0, y0 = c * cell_px, r * cell_px
        box = (x0, y0, x0 + cell_px - 1, y0 + cell_px - 1)
        person = grid.get((r, c))
        fill = IMAGE_OCCUPIED_COLOR if person is not None else IMAGE_EMPTY_COLOR
        draw.rectangle(box, fill=fill, outline=IMAGE_GRID_COLOR)
        if person is not None:
            draw.text((x0 + 6, y0 + cell_px // 2 - 6), person.name, fill=IMAGE_TEXT_COLOR, font=font)
        if (r, c) in marked:
            draw.rectangle(box, outline=IMAGE_VIOLATION_COLOR, width=max(2, cell_px // 24))
    return img


def save_grid_image(grid: SeatGrid, path: Path, *, highlight: Optional[Iterable[Cell]] = None) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_grid_image(grid, highlight=highlight).save(path)
    return path
