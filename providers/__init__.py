from .game_of_life import (
    Board, BoardError, ShapeError, CellValueError, clone_grid, neighbor_counts)
from .patterns import (
    GameOfLifePatterns, PATTERNS, pattern_by_name, empty_seed,
    seed_with_pattern, centered_seed, random_seed)
