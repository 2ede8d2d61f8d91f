from collections import deque, namedtuple

from .colors import (
    color_buffer,
    generation_increment,
    hex_to_rgb,
    increment_color,
    FINAL_SEARCH_FILL_COLOR,
    GENERATION_FILL_COLOR,
    GENERATION_WALL_COLOR,
    SEARCH_INCREMENT,
    SOLVE_FILL_COLOR,
    SOLVE_INCREMENT,
)

GENERATION = 'generation'
SEARCH = 'search'
SOLVE = 'solve'

AnimationStep = namedtuple('AnimationStep', ['position', 'kind', 'target'])


class AnimationQueue:
    """FIFO of pending color transitions.

    ``drain`` runs every step that was queued before it started exactly
    once. Steps that are not finished go back in and run on the next
    drain, which spreads each transition over several frames.
    """

    def __init__(self):
        self.steps = deque()

    def __len__(self):
        return len(self.steps)

    def __bool__(self):
        return bool(self.steps)

    def __iter__(self):
        return iter(self.steps)

    def add(self, step):
        self.steps.append(step)

    def clear(self):
        self.steps.clear()

    def drain(self, dispatch):
        for _ in range(len(self.steps)):
            step = self.steps.popleft()
            if not dispatch(step):
                self.steps.append(step)


def begin_generation(queue, cell):
    cell.current_wall_color = color_buffer(GENERATION_WALL_COLOR)
    cell.current_fill_color = color_buffer(GENERATION_FILL_COLOR)
    cell.animating = GENERATION
    queue.add(AnimationStep(cell.position, GENERATION, tuple(int(c) for c in cell.default_fill_color())))


def begin_search(queue, cell):
    cell.animating = SEARCH
    queue.add(AnimationStep(cell.position, SEARCH, hex_to_rgb(FINAL_SEARCH_FILL_COLOR)))


def begin_solve(queue, cell):
    cell.animating = SOLVE
    queue.add(AnimationStep(cell.position, SOLVE, hex_to_rgb(SOLVE_FILL_COLOR)))


def run_step(grid, step):
    """Advance one animation step on ``grid``; True when it is finished.

    A step whose kind no longer owns the cell is dropped so that an older
    transition never fights a newer one over the same color buffers.
    """
    cell = grid.get(*step.position)
    if cell is None or cell.animating != step.kind:
        return True

    target = color_buffer(step.target)
    if step.kind == GENERATION:
        amount = generation_increment(grid.dimensions)
        wall_done = increment_color(cell.current_wall_color, cell.default_wall_color, amount)
        fill_done = increment_color(cell.current_fill_color, target, amount)
        done = wall_done and fill_done
    elif step.kind == SEARCH:
        done = increment_color(cell.current_fill_color, target, SEARCH_INCREMENT)
    elif step.kind == SOLVE:
        done = increment_color(cell.current_fill_color, target, SOLVE_INCREMENT)
    else:
        raise ValueError(f"Unknown animation kind {step.kind!r}")

    grid.draw_cell(cell)
    if done:
        cell.animating = None
    return done
