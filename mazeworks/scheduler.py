import random
from enum import Enum

from .animation import AnimationQueue, begin_generation, begin_search, begin_solve, run_step
from .colors import BG_COLOR, INITIAL_SEARCH_FILL_COLOR, color_buffer
from .config import ConfigurationError, GridOptions, normalize_search_type
from .generator import RecursiveBacktracker
from .grid import Grid
from .search import SearchStatus, create_search

NO_SOLUTION_NOTICE = "No solution found!"


class Phase(Enum):
    WAITING = 'waiting'
    GENERATING = 'generating'
    SEARCHING = 'searching'
    SOLVING = 'solving'
    COMPLETE = 'complete'
    NO_SOLUTION = 'no_solution'


# phases in which the user may edit walls or start a new search
IDLE_PHASES = (Phase.WAITING, Phase.COMPLETE, Phase.NO_SOLUTION)


def check_canvas(canvas):
    if canvas is None:
        raise ConfigurationError("A canvas is required to draw the grid")
    for attribute in ('width', 'height', 'fill_rect', 'stroke_path'):
        if not hasattr(canvas, attribute):
            raise ConfigurationError(f"Canvas {canvas!r} has no {attribute!r}; a 2D drawing surface is required")
    if canvas.width < 1 or canvas.height < 1:
        raise ConfigurationError(f"Canvas must be at least 1x1, got {canvas.width}x{canvas.height}")


class MazeAnimation:
    """Frame scheduler for generating, searching and solving one grid.

    Nothing here loops on its own: whoever owns the render loop calls
    ``tick`` once per frame. A tick does at most one phase's budget of
    work and then drains the animation queue once.
    """

    def __init__(self, canvas, options=None):
        self.canvas = canvas
        self.options = None
        self.init(options)

    def init(self, options=None):
        check_canvas(self.canvas)
        if options is None and self.options is not None:
            options = self.options
        self.options = GridOptions.from_dict(options)
        options = self.options

        self.dimensions = options.dimensions
        self.variant = options.variant
        self.search_type = options.search_type
        self.generations_per_frame = options.generations
        self.searches_per_frame = options.searches
        self.solve_paths_per_frame = options.solve_paths

        self.rng = random.Random(options.seed)
        self.animation_queue = AnimationQueue()
        self.search = None
        self.solve_path = []
        self.playback = []
        self.frame_count = 0
        self.is_waiting_for_animation = False
        self.notice = None
        self.mouse = (0, 0)
        self.is_mouse_down = False

        self.canvas.fill_rect(0, 0, self.canvas.width, self.canvas.height, BG_COLOR)
        self.grid = Grid(options.dimensions, options.variant, self.canvas,
                         padding=options.padding, line_width=options.line_width)
        self.grid.draw()

        if self.variant == 'maze':
            self.generator = RecursiveBacktracker(self.grid, self.rng)
            self.phase = Phase.GENERATING
        else:
            self.generator = None
            self.phase = Phase.WAITING
        return self

    def reset(self, options=None):
        return self.init(options)

    @property
    def no_solution(self):
        return self.phase is Phase.NO_SOLUTION

    @property
    def settled(self):
        return self.phase in (Phase.COMPLETE, Phase.NO_SOLUTION) and not self.animation_queue

    # user input

    def on_mouse_move(self, x, y):
        cell = self.grid.cell_at(x, y)
        if cell is not None:
            self.mouse = cell.position
        if self.is_mouse_down:
            self.make_wall(self.mouse)

    def on_mouse_down(self, pressed):
        self.is_mouse_down = pressed
        if pressed:
            self.make_wall(self.mouse)
        else:
            for cell in self.grid:
                cell.is_newly_placed = False

    def make_wall(self, position):
        if self.phase not in IDLE_PHASES:
            return False
        cell = self.grid.get(*position)
        if not self.grid.can_toggle(cell) or cell.is_newly_placed:
            return False
        if self.phase is not Phase.WAITING:
            self._clear_search()
            self.phase = Phase.WAITING
        self.grid.toggle_wall(*position)
        cell.is_newly_placed = True
        return True

    def on_solve(self):
        if self.phase not in IDLE_PHASES:
            return False
        if self.phase is not Phase.WAITING:
            self._clear_search()
        self.phase = Phase.SEARCHING
        return True

    def on_search_selection(self, search_type):
        search_type = normalize_search_type(search_type)
        if self.search is not None and self.phase not in IDLE_PHASES:
            return False
        self.search_type = search_type
        return True

    # phases

    def generate(self):
        for _ in range(self.generations_per_frame):
            if self.generator.done:
                break
            carved = self.generator.step()
            if carved is None:
                continue
            for cell in carved:
                self.grid.draw_cell(cell)
                begin_generation(self.animation_queue, cell)
        if self.generator.done:
            self.phase = Phase.SEARCHING
            self.is_waiting_for_animation = True

    def _discover(self, cell):
        cell.current_fill_color = color_buffer(INITIAL_SEARCH_FILL_COLOR)
        self.grid.draw_cell(cell)

    def _expand(self, cell):
        begin_search(self.animation_queue, cell)

    def _clear_search(self):
        self.search = None
        self.solve_path = []
        self.playback = []
        self.notice = None
        self.grid.clear_search()

    def search_step(self):
        if self.search is None:
            self.search = create_search(self.search_type, self.grid,
                                        on_expand=self._expand, on_discover=self._discover)
        for _ in range(self.searches_per_frame):
            status = self.search.step()
            if status is SearchStatus.FOUND:
                self.solve_path = list(self.search.path)
                self.playback = list(self.solve_path)
                self.phase = Phase.SOLVING
                self.is_waiting_for_animation = True
                return
            if status is SearchStatus.NO_SOLUTION:
                self.phase = Phase.NO_SOLUTION
                self.notice = NO_SOLUTION_NOTICE
                return

    def solve(self):
        for _ in range(self.solve_paths_per_frame):
            if not self.playback:
                break
            begin_solve(self.animation_queue, self.playback.pop())
        if not self.playback:
            self.is_waiting_for_animation = True

    def run_animation_queue(self):
        self.animation_queue.drain(lambda step: run_step(self.grid, step))
        if self.is_waiting_for_animation and not self.animation_queue:
            self.is_waiting_for_animation = False
            if self.phase is Phase.SOLVING and not self.playback:
                self.phase = Phase.COMPLETE

    def tick(self):
        self.frame_count += 1
        if not self.is_waiting_for_animation:
            if self.phase is Phase.GENERATING:
                self.generate()
            elif self.phase is Phase.SEARCHING:
                self.search_step()
            elif self.phase is Phase.SOLVING:
                self.solve()
        self.run_animation_queue()
        return self.phase

    def run(self, max_ticks=None):
        """Tick until the grid is solved or proven unsolvable."""
        ticks = 0
        while not self.settled and not (self.phase is Phase.WAITING and not self.animation_queue):
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.tick()
            ticks += 1
        return ticks
