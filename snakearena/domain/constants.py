"""
Game constants for SnakeArena.
"""

# Board
DEFAULT_GRID_SIZE = 20
MIN_GRID_SIZE = 5

# Snakes
INITIAL_LENGTH = 5
PLAYER_ID = "player"
AI_ID = "ai"

# Cadence (seconds between moves)
PLAYER_MOVE_INTERVAL = 0.12
AI_MOVE_INTERVAL = 0.15

# Food placement
MAX_FOOD_ATTEMPTS = 100

# Optional speed-up rule for the human snake
SPEEDUP_STEP = 0.005
MIN_MOVE_INTERVAL = 0.05

# Collision reasons
WALL = "wall"
SELF = "self"
OPPONENT = "opponent"
