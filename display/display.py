import io
import logging
import threading
from typing import Optional
from PIL import Image
from .render_game_of_life import render_game_of_life_content, render_blank_content
from .types import RenderMessage, BaseRenderMessage

logger = logging.getLogger(__name__)


class Display:
    """Keeps the most recent frame produced from render messages."""

    def __init__(self, width: int, height: int, cell_size: int) -> None:
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.generation: Optional[int] = None
        self._frame: Optional[Image.Image] = None
        self.frame_lock = threading.Lock()

    def render(self, message: BaseRenderMessage) -> None:
        if isinstance(message, RenderMessage.Clear):
            self.clear()
        elif isinstance(message, RenderMessage.GameOfLife):
            self.render_game_of_life(message)
        else:
            logger.warning(f"Ignoring unknown render message: {message!r}")

    def clear(self) -> None:
        self._update_frame(
            render_blank_content(self.width, self.height, self.cell_size), None)

    def render_game_of_life(self, message: RenderMessage.GameOfLife) -> None:
        self.height, self.width = message.grid.shape
        image = render_game_of_life_content(message, self.cell_size)
        self._update_frame(image, message.generation)
        if logger.isEnabledFor(logging.DEBUG):
            dump = "\n".join(
                " ".join(str(int(cell)) for cell in row) for row in message.grid)
            logger.debug(f"Generation {message.generation}:\n{dump}")

    def latest_frame(self) -> Optional[Image.Image]:
        with self.frame_lock:
            return None if self._frame is None else self._frame.copy()

    def latest_frame_png(self) -> Optional[bytes]:
        frame = self.latest_frame()
        if frame is None:
            return None
        buffer = io.BytesIO()
        frame.save(buffer, format="PNG")
        return buffer.getvalue()

    def _update_frame(self, image: Image.Image, generation: Optional[int]):
        with self.frame_lock:
            self._frame = image
            self.generation = generation
