from PIL import Image
from common import Colors
from .types import RenderMessage
import numpy as np


def render_grid_image(grid: np.ndarray, cell_size: int) -> Image.Image:
    grid_height, grid_width = grid.shape

    # alive cells = white, dead cells = black
    rgb_array = np.zeros((grid_height, grid_width, 3), dtype=np.uint8)
    rgb_array[grid.astype(bool)] = Colors.WHITE
    game_img = Image.fromarray(rgb_array)

    if cell_size == 1:
        return game_img
    # Nearest keeps every cell a crisp square
    return game_img.resize(
        (grid_width * cell_size, grid_height * cell_size),
        Image.Resampling.NEAREST)


def render_game_of_life_content(
    message: RenderMessage.GameOfLife, cell_size: int
) -> Image.Image:
    return render_grid_image(message.grid, cell_size)


def render_blank_content(width: int, height: int, cell_size: int) -> Image.Image:
    return Image.new(
        "RGB", (width * cell_size, height * cell_size), Colors.BLACK)
