import logging
import threading
from queue import Queue
from typing import Any, Dict, List, Optional, Sequence
from common import CellState
from common.broadcaster import StatusBroadcaster
from common.scheduler import RepeatingTask
from providers.game_of_life import Board, ShapeError, clone_grid
from .types import RenderMessage

logger = logging.getLogger(__name__)


class LifeView:
    """Square checkbox matrix driving one Board per play session.

    Editing any cell stops the session; the next tick starts a new Board from
    whatever the checkboxes hold at that moment.
    """

    def __init__(self, size: int, interval: float,
                 render_queue: Optional[Queue] = None,
                 state_broadcaster: Optional[StatusBroadcaster] = None) -> None:
        if size < 1:
            raise ShapeError(f"Grid size must be at least 1, got {size}")
        self.size = size
        self.render_queue = render_queue
        self.state_broadcaster = state_broadcaster
        self.checkboxes: List[List[CellState]] = [
            [CellState.DEAD] * size for _ in range(size)]
        self.started = False
        self.autoplay = False
        self.game: Optional[Board] = None
        self.scheduler = RepeatingTask(interval, self.next, name="life-autoplay")
        self.lock = threading.RLock()
        self._autoplay_lock = threading.Lock()
        self._publish_state()

    @property
    def board_array(self) -> List[List[int]]:
        with self.lock:
            return [[int(cell) for cell in row] for row in self.checkboxes]

    def set_cell(self, x: int, y: int, state: CellState) -> None:
        with self.lock:
            self._check_bounds(x, y)
            self.checkboxes[y][x] = CellState(state)
            self.started = False
            self._publish_state()

    def toggle(self, x: int, y: int) -> CellState:
        with self.lock:
            self._check_bounds(x, y)
            new_state = (CellState.DEAD if self.checkboxes[y][x] == CellState.ALIVE
                         else CellState.ALIVE)
            self.set_cell(x, y, new_state)
            return new_state

    def load(self, seed: Sequence[Sequence[Any]]) -> None:
        grid = clone_grid(seed)
        if grid.shape != (self.size, self.size):
            raise ShapeError(
                f"Expected a {self.size}x{self.size} grid, got "
                f"{grid.shape[1]}x{grid.shape[0]}")
        with self.lock:
            self.checkboxes = [[CellState(int(cell)) for cell in row]
                               for row in grid]
            self.started = False
            self._publish_state()

    def play(self) -> Board:
        """Start a new session from the checkboxes, replacing any old Board."""
        with self.lock:
            self.game = Board(self.board_array)
            self.started = True
            logger.info(
                f"New session: {self.size}x{self.size}, "
                f"population {self.game.population}")
            return self.game

    def next(self) -> None:
        with self.lock:
            if not self.started or self.game is None:
                self.play()

            self.game.advance()

            board = self.game.current
            for y in range(self.size):
                for x in range(self.size):
                    self.checkboxes[y][x] = CellState(int(board[y, x]))

            if self.render_queue is not None:
                self.render_queue.put(RenderMessage.GameOfLife(
                    grid=board.copy(),
                    generation=self.game.generation))
            self._publish_state()

    def set_autoplay(self, enabled: bool) -> None:
        # The scheduler is driven outside self.lock: its worker may be
        # waiting on that lock inside next() while we join it.
        with self._autoplay_lock:
            with self.lock:
                self.autoplay = enabled
            if enabled:
                self.scheduler.start()
            else:
                self.scheduler.cancel()
            logger.info(f"Autoplay {'on' if enabled else 'off'}")
            with self.lock:
                self._publish_state()

    def clear(self) -> None:
        self.set_autoplay(False)
        with self.lock:
            self.checkboxes = [
                [CellState.DEAD] * self.size for _ in range(self.size)]
            self.started = False
            self.game = None
            if self.render_queue is not None:
                self.render_queue.put(RenderMessage.Clear())
            self._publish_state()

    def stop(self) -> None:
        self.scheduler.cancel()

    def snapshot(self) -> Dict[str, Any]:
        with self.lock:
            cells = self.board_array
            return {
                "size": self.size,
                "generation": 0 if self.game is None else self.game.generation,
                "started": self.started,
                "autoplay": self.autoplay,
                "population": sum(map(sum, cells)),
                "cells": cells,
            }

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(
                f"Cell ({x}, {y}) is outside the {self.size}x{self.size} grid")

    def _publish_state(self) -> None:
        if self.state_broadcaster is not None:
            self.state_broadcaster.set_status(self.snapshot())
