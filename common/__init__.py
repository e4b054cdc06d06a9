from .common import CellState, UIMessageType, Colors, hex_to_rgb

__all__ = ["CellState", "UIMessageType", "Colors", "hex_to_rgb"]
