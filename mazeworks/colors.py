import math

import numpy as np

WHITE = '#FFFFFF'
BLACK = '#000000'
LIGHT_GRAY = '#DCDCDC'
ELECTRIC_BLUE = '#19B2FF'
LIGHT_YELLOW = '#FFFBBD'

BG_COLOR = WHITE
MAZE_WALL_COLOR = BLACK
GRID_WALL_COLOR = LIGHT_GRAY
OPEN_FILL_COLOR = WHITE
WALL_FILL_COLOR = BLACK
GENERATION_WALL_COLOR = ELECTRIC_BLUE
GENERATION_FILL_COLOR = ELECTRIC_BLUE
INITIAL_SEARCH_FILL_COLOR = ELECTRIC_BLUE
FINAL_SEARCH_FILL_COLOR = LIGHT_YELLOW
SOLVE_FILL_COLOR = ELECTRIC_BLUE

SEARCH_INCREMENT = 10
SOLVE_INCREMENT = 10


def hex_to_rgb(hex_color):
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def color_buffer(color):
    # int16 so a step past 255 or below 0 never wraps before it is snapped
    if isinstance(color, str):
        color = hex_to_rgb(color)
    return np.array(color, dtype=np.int16)


def increment_color(current, destination, amount):
    """Move every channel of ``current`` towards ``destination`` in place.

    Channels closer than ``amount`` snap to the destination, so the last
    frame never overshoots. Returns True once both colors match.
    """
    diff = destination - current
    close = np.abs(diff) < amount
    current[close] = destination[close]
    far = ~close
    current[far] += (np.sign(diff[far]) * amount).astype(current.dtype)
    return not far.any()


def generation_increment(dimensions):
    return math.ceil(dimensions / 10)
