BOARD_SIZE = 10
MOVE_LIMIT = 30
# Redraws allowed per refilled dot before a degenerate color is accepted.
REROLL_LIMIT = 3

DOT_RGB = {
    'red': (255, 0, 0),        # #FF0000
    'blue': (0, 170, 255),     # #00AAFF
    'green': (0, 255, 0),      # #00FF00
    'yellow': (255, 255, 0),   # #FFFF00
    'empty': (0, 0, 0),        # #000000
}

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Dot Loop"
TILE_SIZE = 40
BOTTOM_MARGIN = 20

# Board maximum footprint relative to window (percentage of window width/height).
BOARD_MAX_WIDTH_PCT = 0.85
BOARD_MAX_HEIGHT_PCT = 0.80

# Score label and reset button sit below the board.
STATUS_BAR_HEIGHT = 28
RESET_BUTTON_WIDTH = 90
RESET_BUTTON_HEIGHT = 30
