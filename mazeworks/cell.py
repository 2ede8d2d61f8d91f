from .colors import (
    color_buffer,
    GRID_WALL_COLOR,
    MAZE_WALL_COLOR,
    OPEN_FILL_COLOR,
    WALL_FILL_COLOR,
)

OPEN = 'open'
WALL = 'wall'

OPPOSITE = {'N': 'S', 'E': 'W', 'S': 'N', 'W': 'E'}


class Cell:
    __slots__ = (
        'col', 'row', 'walls', 'type', 'is_newly_placed',
        'generation_visited', 'search_visited', 'search_visited2',
        'solve_parent', 'solve_parent2',
        'default_wall_color', 'current_wall_color', 'current_fill_color',
        'animating',
    )

    def __init__(self, col, row, variant='maze'):
        self.col = col
        self.row = row
        self.walls = {'N': True, 'E': True, 'S': True, 'W': True}
        self.type = OPEN
        self.is_newly_placed = False

        self.generation_visited = False
        self.search_visited = False
        self.search_visited2 = False
        self.solve_parent = None
        self.solve_parent2 = None

        wall_color = MAZE_WALL_COLOR if variant == 'maze' else GRID_WALL_COLOR
        self.default_wall_color = color_buffer(wall_color)
        self.current_wall_color = color_buffer(wall_color)
        self.current_fill_color = color_buffer(OPEN_FILL_COLOR)
        # animation kind that currently owns the color buffers
        self.animating = None

    @property
    def position(self):
        return (self.col, self.row)

    def default_fill_color(self):
        return color_buffer(WALL_FILL_COLOR if self.type == WALL else OPEN_FILL_COLOR)

    def clear_search(self):
        self.search_visited = False
        self.search_visited2 = False
        self.solve_parent = None
        self.solve_parent2 = None
        self.animating = None
        self.current_fill_color = self.default_fill_color()

    def __repr__(self):
        return f"Cell({self.col}, {self.row}, {self.type})"
