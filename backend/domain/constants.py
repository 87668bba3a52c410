"""
Game constants for the Snake core.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Reversal pairs
OPPOSITE_DIRECTION = {
    LEFT: RIGHT,
    RIGHT: LEFT,
    UP: DOWN,
    DOWN: UP,
}

# Board settings
MAX_X = 10
MAX_Y = 10

# Tick intervals in milliseconds
MIN_SPEED = 650
SPEED_FLOOR = 50
SPEED_STEP = 20

# Display
SNAKE_COLOR = "#00ff00"
BITE_COLOR = "#4C0062"
GAME_OVER_MESSAGE = "game over"
WIN_MESSAGE = "you win"

# Game states
INACTIVE = "INACTIVE"
ACTIVE = "ACTIVE"
PAUSED = "PAUSED"
TERMINAL = "TERMINAL"

# Tick outcomes
CONTINUE = "CONTINUE"
FOOD_EATEN = "FOOD_EATEN"
GAME_OVER = "GAME_OVER"
WON = "WON"

# Death reasons
DEATH_WALL = "wall"
DEATH_SELF = "self"

# Lifecycle commands
START = "start"
PAUSE = "pause"
PLAY = "play"

# Keyboard keys (KeyboardEvent.key names) -> direction
KEY_BINDINGS = {
    "ArrowUp": UP,
    "ArrowDown": DOWN,
    "ArrowLeft": LEFT,
    "ArrowRight": RIGHT,
}
