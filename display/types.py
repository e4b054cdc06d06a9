from dataclasses import dataclass
import numpy as np


@dataclass
class BaseRenderMessage:
    pass


class RenderMessage:

    @dataclass
    class Clear(BaseRenderMessage):
        pass

    @dataclass
    class GameOfLife(BaseRenderMessage):
        grid: np.ndarray
        generation: int
