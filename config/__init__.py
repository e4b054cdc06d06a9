from .defaults import *

try:
    from .config import *
except ImportError:
    # No local overrides; config/config.example.py shows the format
    pass
