import logging
import numpy as np
from scipy.ndimage import convolve
from numpy.typing import NDArray
from typing import Any, List, Optional, Sequence, Tuple
from common import CellState

logger = logging.getLogger(__name__)

NEIGHBOR_KERNEL = np.array([[1, 1, 1],
                            [1, 0, 1],
                            [1, 1, 1]], dtype=np.uint8)


class BoardError(ValueError):
    pass


class ShapeError(BoardError):
    """Seed or matrix is empty, not two-dimensional, or not rectangular."""


class CellValueError(BoardError):
    """A cell holds something other than 0/1, True/False or a CellState."""


def _cell_value(value: Any, x: int, y: int) -> int:
    # bool and CellState members are ints too
    if isinstance(value, (bool, np.bool_)):
        return int(value)
    if isinstance(value, (int, np.integer)) and value in (0, 1):
        return int(value)
    raise CellValueError(f"Invalid cell value {value!r} at ({x}, {y})")


def clone_grid(grid: Sequence[Sequence[Any]]) -> NDArray[np.uint8]:
    """Return a fully independent 0/1 copy of a rectangular grid.

    Both the outer sequence and every row are copied, so the result shares no
    memory with ``grid``. Raises ShapeError for empty or ragged input and
    CellValueError for cells that are not strictly 0/1.
    """
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise ShapeError(f"Expected a 2D grid, got {grid.ndim} dimensions")
        rows = grid.tolist()
    else:
        if isinstance(grid, (str, bytes)):
            raise ShapeError("Expected a sequence of rows")
        rows = list(grid)

    if len(rows) == 0:
        raise ShapeError("Grid must have at least one row")

    width: Optional[int] = None
    cloned: List[List[int]] = []
    for y, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not hasattr(row, "__len__"):
            raise ShapeError(f"Row {y} is not a sequence")
        if width is None:
            width = len(row)
            if width == 0:
                raise ShapeError("Grid must have at least one column")
        elif len(row) != width:
            raise ShapeError(
                f"Row {y} has length {len(row)}, expected {width}")
        cloned.append([_cell_value(value, x, y) for x, value in enumerate(row)])

    return np.array(cloned, dtype=np.uint8)


def neighbor_counts(grid: NDArray[np.uint8]) -> NDArray[np.int_]:
    """Count live neighbors for every cell. Cells off the grid count as dead."""
    return convolve(grid.astype(int), NEIGHBOR_KERNEL, mode="constant", cval=0)


class Board:
    def __init__(self, seed: Sequence[Sequence[Any]]) -> None:
        self.current: NDArray[np.uint8] = clone_grid(seed)
        self.previous: Optional[NDArray[np.uint8]] = None
        self.height, self.width = self.current.shape
        self.generation = 0

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    @property
    def population(self) -> int:
        return int(self.current.sum())

    def advance(self) -> None:
        """Advance the board by one generation, in place."""
        self.previous = self.current.copy()
        neighbors = neighbor_counts(self.previous)
        alive = self.previous == CellState.ALIVE.value

        # Counts come from the frozen snapshot, so the order of writes below
        # can never leak into another cell's count.
        dies = alive & ((neighbors < 2) | (neighbors > 3))
        born = ~alive & (neighbors == 3)
        self.current[dies] = CellState.DEAD.value
        self.current[born] = CellState.ALIVE.value

        self.generation += 1
        logger.debug(
            f"Generation {self.generation}: {int(born.sum())} born, "
            f"{int(dies.sum())} died, population {self.population}")

    def alive_neighbors(self, x: int, y: int) -> int:
        """Count live neighbors of (x, y) in the current snapshot."""
        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                ny, nx = y + dy, x + dx
                if 0 <= ny < self.height and 0 <= nx < self.width:
                    count += int(self.current[ny, nx])
        return count

    def cell(self, x: int, y: int) -> CellState:
        return CellState(int(self.current[y, x]))

    def is_stable(self) -> bool:
        """True once the last advance left the board unchanged."""
        return self.previous is not None and np.array_equal(
            self.previous, self.current)

    def to_list(self) -> List[List[int]]:
        return self.current.tolist()

    def to_text(self) -> str:
        return "\n".join(
            " ".join(str(int(cell)) for cell in row) for row in self.current)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return (f"Board(width={self.width}, height={self.height}, "
                f"generation={self.generation})")
