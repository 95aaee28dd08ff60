"""Layout constants and color definitions."""

# Timing
FPS = 60
TPS = 20

# Layout dimensions
SCREEN_W = 900
SCREEN_H = 640
HEADER_H = 96
INPUT_W = 80
INPUT_H = 30
GO_W = 60

# Tile buttons
TILE_MIN_W = 120
TILE_MIN_H = 60
TILE_PAD_X = 40
TILE_PAD_Y = 20
TILE_BORDER = 2

# Colors
BG_COLOR = (20, 20, 30)
HEADER_BG = (30, 30, 45)
HEADER_BORDER = (50, 50, 70)
INPUT_BG = (15, 15, 25)
INPUT_BORDER = (90, 90, 120)
INPUT_FOCUS = (140, 140, 200)
GO_BG = (60, 120, 220)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
TITLE_COLOR = (230, 230, 240)
ERROR_COLOR = (255, 110, 110)
SUCCESS_COLOR = (110, 230, 130)
TILE_TEXT = (20, 20, 20)
TILE_DISABLED_BORDER = (60, 60, 70)
TILE_ENABLED_BORDER = (240, 240, 240)
