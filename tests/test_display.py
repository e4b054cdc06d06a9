import io
import logging

import numpy as np
from PIL import Image

from common import Colors
from display import Display, RenderMessage
from display.render_game_of_life import render_grid_image


def test_render_grid_image_scales_cells():
    grid = np.array([[1, 0],
                     [0, 0]], dtype=np.uint8)
    image = render_grid_image(grid, 4)
    assert image.size == (8, 8)
    assert image.getpixel((0, 0)) == Colors.WHITE
    assert image.getpixel((3, 3)) == Colors.WHITE
    assert image.getpixel((4, 0)) == Colors.BLACK
    assert image.getpixel((0, 4)) == Colors.BLACK


def test_display_keeps_latest_frame():
    display = Display(3, 2, 1)
    assert display.latest_frame_png() is None

    grid = np.array([[0, 1, 0],
                     [0, 1, 0]], dtype=np.uint8)
    display.render(RenderMessage.GameOfLife(grid=grid, generation=5))
    assert display.generation == 5

    frame = Image.open(io.BytesIO(display.latest_frame_png()))
    assert frame.size == (3, 2)
    assert frame.convert("RGB").getpixel((1, 1)) == Colors.WHITE


def test_display_clear_blanks_the_frame():
    display = Display(2, 2, 2)
    display.render(RenderMessage.GameOfLife(
        grid=np.ones((2, 2), dtype=np.uint8), generation=1))
    display.render(RenderMessage.Clear())
    frame = display.latest_frame()
    assert frame.size == (4, 4)
    assert frame.getextrema() == ((0, 0), (0, 0), (0, 0))
    assert display.generation is None


def test_display_logs_text_dump(caplog):
    display = Display(2, 1, 1)
    with caplog.at_level(logging.DEBUG, logger="display.display"):
        display.render(RenderMessage.GameOfLife(
            grid=np.array([[1, 0]], dtype=np.uint8), generation=3))
    assert "Generation 3:\n1 0" in caplog.text
