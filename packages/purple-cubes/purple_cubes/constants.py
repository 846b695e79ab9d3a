"""Gameplay tuning, window defaults, and colours."""

# Timing
FPS = 60
TPS = 60

# Round
ROUND_SECONDS = 30.0

# Spawner
FIRST_SPAWN_INTERVAL = 2.0
SPAWN_INTERVAL_RANGE = (1.0, 1.5)  # seconds, [low, high)
PURPLE_CHANCE = 0.8

# Cubes
CUBE_LIFETIME = 1.0  # seconds
SIZE_FRACTION = 0.05  # of the longer screen side
SPEED_RANGE = (2.0, 3.0)  # cube sizes per second, [low, high)

# Scoring
HIT_REWARD = 1
MISS_PENALTY = 5

# Results tiers: score < LOW_TIER, LOW_TIER <= score < HIGH_TIER, score >= HIGH_TIER
LOW_TIER = 5
HIGH_TIER = 20

# Window
SCREEN_W = 1280
SCREEN_H = 720
TITLE = "Purple Cubes"

# Colours
BG_COLOR = (18, 18, 26)
PURPLE = (150, 60, 220)
NON_PURPLE = (90, 200, 120)
TEXT_COLOR = (225, 225, 235)
TEXT_DIM = (130, 130, 150)
HIT_COLOR = (120, 230, 140)
BAD_COLOR = (235, 90, 90)
TIMER_BAR_BG = (40, 40, 56)
TIMER_BAR_FG = (150, 60, 220)

INSTRUCTIONS = "Press R to play again or M to return to the menu"
MENU_HINT = "Press Space to start"
