import numpy as np
from numpy.typing import NDArray
from typing import Callable, Dict, Optional
from .game_of_life import ShapeError


class GameOfLifePatterns:
    """Small well-known seeds, as 0/1 arrays indexed [y, x]."""

    @staticmethod
    def block() -> NDArray[np.uint8]:
        return np.array([[1, 1],
                         [1, 1]], dtype=np.uint8)

    @staticmethod
    def blinker() -> NDArray[np.uint8]:
        return np.array([[1, 1, 1]], dtype=np.uint8)

    @staticmethod
    def toad() -> NDArray[np.uint8]:
        return np.array([[0, 1, 1, 1],
                         [1, 1, 1, 0]], dtype=np.uint8)

    @staticmethod
    def beacon() -> NDArray[np.uint8]:
        return np.array([[1, 1, 0, 0],
                         [1, 1, 0, 0],
                         [0, 0, 1, 1],
                         [0, 0, 1, 1]], dtype=np.uint8)

    @staticmethod
    def glider() -> NDArray[np.uint8]:
        return np.array([[0, 1, 0],
                         [0, 0, 1],
                         [1, 1, 1]], dtype=np.uint8)

    @staticmethod
    def r_pentomino() -> NDArray[np.uint8]:
        return np.array([[0, 1, 1],
                         [1, 1, 0],
                         [0, 1, 0]], dtype=np.uint8)


PATTERNS: Dict[str, Callable[[], NDArray[np.uint8]]] = {
    "block": GameOfLifePatterns.block,
    "blinker": GameOfLifePatterns.blinker,
    "toad": GameOfLifePatterns.toad,
    "beacon": GameOfLifePatterns.beacon,
    "glider": GameOfLifePatterns.glider,
    "r_pentomino": GameOfLifePatterns.r_pentomino,
}


def pattern_by_name(name: str) -> NDArray[np.uint8]:
    try:
        return PATTERNS[name]()
    except KeyError:
        raise KeyError(f"Unknown pattern: {name}") from None


def empty_seed(width: int, height: int) -> NDArray[np.uint8]:
    if width < 1 or height < 1:
        raise ShapeError(f"Seed must be at least 1x1, got {width}x{height}")
    return np.zeros((height, width), dtype=np.uint8)


def seed_with_pattern(width: int, height: int, pattern: NDArray[np.uint8],
                      x: int = 0, y: int = 0) -> NDArray[np.uint8]:
    """Place ``pattern`` with its top-left corner at (x, y) on an empty seed."""
    seed = empty_seed(width, height)
    pattern_height, pattern_width = pattern.shape
    if (x < 0 or y < 0 or x + pattern_width > width
            or y + pattern_height > height):
        raise ShapeError(
            f"Pattern of size {pattern_width}x{pattern_height} does not fit "
            f"at ({x}, {y}) on a {width}x{height} grid")
    seed[y:y + pattern_height, x:x + pattern_width] = pattern
    return seed


def centered_seed(width: int, height: int,
                  pattern: NDArray[np.uint8]) -> NDArray[np.uint8]:
    pattern_height, pattern_width = pattern.shape
    return seed_with_pattern(width, height, pattern,
                             (width - pattern_width) // 2,
                             (height - pattern_height) // 2)


def random_seed(width: int, height: int, density: float = 0.3,
                rng: Optional[np.random.Generator] = None) -> NDArray[np.uint8]:
    """Each cell is alive with probability ``density``."""
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Density must be between 0 and 1, got {density}")
    empty_seed(width, height)
    if rng is None:
        rng = np.random.default_rng()
    return (rng.random((height, width)) < density).astype(np.uint8)
