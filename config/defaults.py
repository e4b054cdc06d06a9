# Side length of the square checkbox grid
GRID_SIZE = 12
# Seconds between autoplay ticks
TICK_INTERVAL = 1.0
# Pixels per cell in rendered frames
CELL_SIZE = 16
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 5000
LOG_LEVEL = "INFO"
# Name of a pattern from providers.patterns to seed the grid with, or None
DEFAULT_PATTERN = None
RANDOM_DENSITY = 0.3
