import random


class RecursiveBacktracker:
    """Randomized depth-first carve over a maze grid.

    Each call to ``step`` is one iteration: either carve into a random
    unvisited neighbor of the cell on top of the stack, or pop that cell
    when it has none left. ``rng`` may be a seed or any object with
    ``randrange`` and ``choice`` so tests can pin every decision.
    """

    def __init__(self, grid, rng=None):
        self.grid = grid
        if rng is None or isinstance(rng, int):
            rng = random.Random(rng)
        self.rng = rng
        self.iterations = 0
        self.carved = []

        start_col = self.rng.randrange(grid.dimensions)
        start_row = self.rng.randrange(grid.dimensions)
        self.first_cell = grid.cells[start_col][start_row]
        self.first_cell.generation_visited = True
        self.stack = [self.first_cell]

    @property
    def done(self):
        return not self.stack

    def step(self):
        if not self.stack:
            return None
        self.iterations += 1
        current = self.stack[-1]
        unvisited_neighbors = self.grid.unvisited_neighbors(current)
        if not unvisited_neighbors:
            self.stack.pop()
            return None
        neighbor, direction = self.rng.choice(unvisited_neighbors)
        self.grid.carve(current, direction)
        neighbor.generation_visited = True
        self.stack.append(neighbor)
        self.carved.append((current.position, neighbor.position))
        return current, neighbor

    def run(self):
        while self.stack:
            self.step()
        return self.grid
