from PIL import Image

from backend.src.seating.grid import SeatGrid
from backend.src.seating.render import format_grid, render_grid_image, save_grid_image
from backend.src.seating.roster import Person
from backend.src.seating.vars import (
    IMAGE_OCCUPIED_COLOR,
    IMAGE_EMPTY_COLOR,
    IMAGE_VIOLATION_COLOR,
)


def _grid():
    grid = SeatGrid(2, 2)
    grid.place((0, 0), Person("Alice"))
    grid.place((1, 1), Person("Bob"))
    return grid


def test_format_grid():
    text = format_grid(_grid())
    assert text.splitlines() == [
        "Seating Arrangement:",
        "Alice     Empty 0,1 ",
        "Empty 1,0 Bob       ",
    ]


def test_format_grid_long_names_are_not_truncated():
    grid = SeatGrid(1, 2)
    grid.place((0, 0), Person("Bartholomew"))
    assert format_grid(grid).splitlines()[1] == "BartholomewEmpty 0,1 "


def test_render_grid_image_tiles():
    img = render_grid_image(_grid(), cell_px=40)
    assert img.size == (80, 80)
    assert img.mode == "RGB"
    assert img.getpixel((3, 3)) == IMAGE_OCCUPIED_COLOR
    assert img.getpixel((43, 3)) == IMAGE_EMPTY_COLOR
    assert img.getpixel((3, 43)) == IMAGE_EMPTY_COLOR
    assert img.getpixel((43, 43)) == IMAGE_OCCUPIED_COLOR


def test_render_grid_image_highlight():
    img = render_grid_image(_grid(), cell_px=48, highlight=[(1, 1)])
    assert img.getpixel((49, 49)) == IMAGE_VIOLATION_COLOR
    assert img.getpixel((1 + 2, 1 + 2)) != IMAGE_VIOLATION_COLOR


def test_save_grid_image(tmp_path):
    path = save_grid_image(_grid(), tmp_path / "out" / "grid.png")
    assert path.exists()
    with Image.open(path) as img:
        assert img.size[0] == img.size[1]
