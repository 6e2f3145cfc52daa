
GRID_WIDTH, GRID_HEIGHT = 10, 20
SPAWN_X, SPAWN_Y = 4, 0

TICK_RATE_MS = 500
TICK_RATE_MULTIPLIER = 10
ROWS_PER_LEVEL = 5

CONFIG = {
    "CELL_SIZE": 20,
    "MIN_TICK_MS": 60,
    "ROTATION_ENABLED": True,
    "RESTART_WHILE_PLAYING": False,
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
