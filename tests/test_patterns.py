import numpy as np
import pytest

from providers.game_of_life import Board, ShapeError
from providers.patterns import (
    GameOfLifePatterns, PATTERNS, centered_seed, empty_seed, pattern_by_name,
    random_seed, seed_with_pattern)


def test_seed_with_pattern_places_top_left_corner():
    seed = seed_with_pattern(5, 4, GameOfLifePatterns.block(), 2, 1)
    assert seed.shape == (4, 5)
    assert seed.sum() == 4
    assert np.array_equal(seed[1:3, 2:4], np.ones((2, 2)))


def test_seed_with_pattern_rejects_overflow():
    with pytest.raises(ShapeError):
        seed_with_pattern(3, 3, GameOfLifePatterns.beacon(), 0, 0)
    with pytest.raises(ShapeError):
        seed_with_pattern(5, 5, GameOfLifePatterns.block(), -1, 0)


def test_empty_seed_rejects_zero_size():
    with pytest.raises(ShapeError):
        empty_seed(0, 3)


def test_toad_and_beacon_have_period_two():
    for pattern in (GameOfLifePatterns.toad(), GameOfLifePatterns.beacon()):
        seed = centered_seed(6, 6, pattern)
        board = Board(seed)
        board.advance()
        assert not np.array_equal(board.current, seed)
        board.advance()
        assert np.array_equal(board.current, seed)


def test_glider_keeps_its_population_while_in_bounds():
    board = Board(seed_with_pattern(10, 10, GameOfLifePatterns.glider()))
    for _ in range(8):
        board.advance()
        assert board.population == 5


def test_pattern_by_name():
    assert set(PATTERNS) == {
        "block", "blinker", "toad", "beacon", "glider", "r_pentomino"}
    assert np.array_equal(pattern_by_name("blinker"), [[1, 1, 1]])
    with pytest.raises(KeyError):
        pattern_by_name("spaceship")


def test_random_seed_is_reproducible_with_rng():
    first = random_seed(8, 5, 0.5, np.random.default_rng(7))
    second = random_seed(8, 5, 0.5, np.random.default_rng(7))
    assert first.shape == (5, 8)
    assert np.array_equal(first, second)
    assert set(np.unique(first)) <= {0, 1}


def test_random_seed_density_bounds():
    assert random_seed(4, 4, 0.0).sum() == 0
    assert random_seed(4, 4, 1.0).sum() == 16
    with pytest.raises(ValueError):
        random_seed(4, 4, 1.5)
