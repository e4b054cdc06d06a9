from enum import Enum, IntEnum


class CellState(IntEnum):
    DEAD = 0
    ALIVE = 1


class UIMessageType(Enum):
    NEXT = 0
    PLAY = 1
    CLEAR = 2
    SET_CELL = 3
    TOGGLE_CELL = 4
    SET_AUTOPLAY = 5
    LOAD_PATTERN = 6
    LOAD_RANDOM = 7


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class Colors:
    BLACK = (0, 0, 0)
    WHITE = (255, 255, 255)
    GRID_LINE = hex_to_rgb("#202020")
