import logging

# --- Maze driver ---
ROWS = 20
COLUMNS = 30
DEFAULT_ALGORITHM = "iterative"
MAZE_SEED = None  # None = unseeded random.Random
COLOUR_OUTPUT = False

# --- N-queens driver ---
NQUEENS_DEFAULT_N = 8

# --- Top-K driver ---
TOPK_DEFAULT_N = 100
TOPK_DEFAULT_K = 10

# --- Logging ---
LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s: %(message)s"
