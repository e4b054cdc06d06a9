import numpy as np
import pytest

from common import CellState, UIMessageType
from display import LifeView
from main import handle_ui_message, initial_seed, parse_args


@pytest.fixture
def view():
    view = LifeView(5, 1.0)
    yield view
    view.stop()


def test_ui_messages_drive_the_view(view):
    handle_ui_message(view, {"type": UIMessageType.LOAD_PATTERN,
                             "name": "blinker"}, 0.3)
    assert view.board_array[2] == [0, 1, 1, 1, 0]

    handle_ui_message(view, {"type": UIMessageType.NEXT}, 0.3)
    assert [row[2] for row in view.board_array] == [0, 1, 1, 1, 0]

    handle_ui_message(view, {"type": UIMessageType.TOGGLE_CELL,
                             "x": 0, "y": 0}, 0.3)
    assert view.board_array[0][0] == 1
    assert not view.started

    handle_ui_message(view, {"type": UIMessageType.SET_CELL, "x": 0, "y": 0,
                             "state": CellState.DEAD}, 0.3)
    assert view.board_array[0][0] == 0

    handle_ui_message(view, {"type": UIMessageType.CLEAR}, 0.3)
    assert view.snapshot()["population"] == 0


def test_autoplay_message(view):
    handle_ui_message(view, {"type": UIMessageType.SET_AUTOPLAY,
                             "enabled": True}, 0.3)
    assert view.autoplay
    assert view.scheduler.active
    handle_ui_message(view, {"type": UIMessageType.SET_AUTOPLAY,
                             "enabled": False}, 0.3)
    assert not view.scheduler.active


def test_random_message_uses_density(view):
    handle_ui_message(view, {"type": UIMessageType.LOAD_RANDOM}, 1.0)
    assert view.snapshot()["population"] == 25


def test_pattern_too_large_for_grid_is_rejected():
    view = LifeView(2, 1.0)
    with pytest.raises(ValueError):
        handle_ui_message(view, {"type": UIMessageType.LOAD_PATTERN,
                                 "name": "glider"}, 0.3)


def test_parse_args_and_initial_seed():
    args = parse_args(['--size', '6', '--pattern', 'block'])
    assert args.size == 6
    seed = initial_seed(args)
    assert seed.shape == (6, 6)
    assert np.array_equal(seed[2:4, 2:4], np.ones((2, 2)))

    args = parse_args(['--size', '4', '--random', '--density', '1.0'])
    assert initial_seed(args).sum() == 16

    args = parse_args([])
    assert initial_seed(args) is None
