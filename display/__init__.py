from .display import Display
from .types import RenderMessage, BaseRenderMessage
from .view import LifeView
