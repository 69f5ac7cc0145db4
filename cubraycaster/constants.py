"""Fixed values shared by the scene loader, the player and the renderer."""

import math

# Wall sides, used to pick a texture.
NO = 0
EA = 1
SO = 2
WE = 3

# Colours as 0xRRGGBB integers.
RED = 0x00CC5803
GREEN = 0x00E2711D
BLUE = 0x00FF9505
YELLOW = 0x00FFB627
LINE_COLOR = 0x00FF0000
LINE_GREEN_COLOR = 0x0000FF00
WALL_COLOR = 0x00FFFFFF
FLOOR_COLOR = 0x0000FFFF
PLAYER_COLOR = 0x00FF0000
BLACK = 0x00000000

# World geometry.
TILE_SIZE = 100
SCALE_SIZE = 0.07
PI = math.pi
ONE_DEGREE = 0.0174533

# Movement.
PLAYER_SPEED = 20
TURN_SPEED = 2

# Window.
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FIELD_OF_VIEW = 60.0
WINDOW_TITLE = "cub3d"

# Key codes of the original keyboard layout.
KEY_UP = 13
KEY_UP_ARROW = 126
KEY_DOWN = 1
KEY_DOWN_ARROW = 125
KEY_RIGHT = 2
KEY_LEFT = 0
KEY_ESC = 53
KEY_RIGHT_ARROW = 124
KEY_LEFT_ARROW = 123

# Scene file layout.
INFO_IDS = ("NO", "EA", "SO", "WE", "F", "C")
TEXTURE_IDS = ("NO", "EA", "SO", "WE")
INFO_COUNT = 6
MAP_TOKENS = "NWES01"
PLAYER_TOKENS = "NWES"
SPACE_CHARS = "\f\n\r\t\v "
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1