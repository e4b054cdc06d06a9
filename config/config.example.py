# Copy this file to config/config.py and edit it to override the defaults
# in config/defaults.py.

GRID_SIZE = 24
TICK_INTERVAL = 0.5
DEFAULT_PATTERN = "glider"
