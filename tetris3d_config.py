"""Tunable gameplay and host settings"""

CONFIG = {
    # Well dimensions (cells)
    "WIDTH": 5,
    "DEPTH": 5,
    "HEIGHT": 10,
    # Ticks between automatic one-unit drops
    "GRAVITY_TICKS": 120,
    "POINTS_PER_LEVEL": 10,
    "FPS": 60,
    # Layer view
    "CELL_SIZE": 24,
    "LAYERS_PER_ROW": 5,
    # None => seeded from OS entropy; set int for reproducible piece order
    "SEED": None,
    "HIGHSCORE_PATH": "highscore.json",
    "LOG_LEVEL": "INFO",
}
