from .cell import Cell, OPEN, OPPOSITE, WALL

DIRECTIONS = [('N', 0, -1), ('E', 1, 0), ('S', 0, 1), ('W', -1, 0)]


class Grid:
    """Column-major arena of cells, ``cells[col][row]``.

    Cells never point at each other: neighbors are found by index
    arithmetic, and search parents are stored as ``(col, row)`` tuples.
    Two flavours share the structure. In a ``maze`` the edges between
    cells carry the walls and the generator carves them away. In a
    ``grid`` every edge is open and whole cells are toggled into walls.
    """

    def __init__(self, dimensions, variant='maze', canvas=None, padding=0, line_width=1):
        self.dimensions = dimensions
        self.variant = variant
        self.canvas = canvas
        self.padding = padding
        self.line_width = line_width
        self.cells = [[Cell(col, row, variant) for row in range(dimensions)] for col in range(dimensions)]

        # entrance on the north side of the top left cell, exit on the south side of the bottom right
        self.start = self.cells[0][0]
        self.end = self.cells[dimensions - 1][dimensions - 1]
        self.start.walls['N'] = False
        self.end.walls['S'] = False

    def __iter__(self):
        for column in self.cells:
            yield from column

    def __len__(self):
        return self.dimensions * self.dimensions

    def in_bounds(self, col, row):
        return 0 <= col < self.dimensions and 0 <= row < self.dimensions

    def get(self, col, row):
        if self.in_bounds(col, row):
            return self.cells[col][row]
        return None

    def __getitem__(self, position):
        col, row = position
        cell = self.get(col, row)
        if cell is None:
            raise IndexError(f"({col}, {row}) is outside a {self.dimensions}x{self.dimensions} grid")
        return cell

    def neighbors(self, cell):
        return [(self.get(cell.col + dx, cell.row + dy), direction) for direction, dx, dy in DIRECTIONS]

    def unvisited_neighbors(self, cell):
        return [(neighbor, direction) for neighbor, direction in self.neighbors(cell)
                if neighbor is not None and not neighbor.generation_visited]

    def traversable_neighbors(self, cell):
        traversable = []
        for neighbor, direction in self.neighbors(cell):
            if neighbor is None:
                continue
            if self.variant == 'maze':
                if not cell.walls[direction]:
                    traversable.append(neighbor)
            elif neighbor.type != WALL:
                traversable.append(neighbor)
        return traversable

    def carve(self, cell, direction):
        for name, dx, dy in DIRECTIONS:
            if name == direction:
                neighbor = self.get(cell.col + dx, cell.row + dy)
                break
        else:
            raise ValueError(f"Unknown direction {direction!r}")
        if neighbor is None:
            raise ValueError(f"{cell!r} has no neighbor to the {direction}")
        cell.walls[direction] = False
        neighbor.walls[OPPOSITE[direction]] = False
        return neighbor

    def carved_passages(self):
        passages = 0
        for cell in self:
            if cell.col + 1 < self.dimensions and not cell.walls['E']:
                passages += 1
            if cell.row + 1 < self.dimensions and not cell.walls['S']:
                passages += 1
        return passages

    def can_toggle(self, cell):
        return self.variant == 'grid' and cell is not None and cell is not self.start and cell is not self.end

    def toggle_wall(self, col, row):
        cell = self.get(col, row)
        if not self.can_toggle(cell):
            return None
        cell.type = OPEN if cell.type == WALL else WALL
        cell.clear_search()
        self.draw_cell(cell)
        return cell

    def clear_search(self):
        for cell in self:
            cell.clear_search()
        self.draw()

    # geometry

    @property
    def cell_width(self):
        return (self.canvas.width - self.padding) / self.dimensions

    def cell_rect(self, cell):
        width = self.cell_width
        left = self.padding / 2 + cell.col * width
        top = self.padding / 2 + cell.row * width
        return left, top, width, width

    def cell_at(self, x, y):
        if self.canvas is None:
            return None
        col = int(x // (self.canvas.width / self.dimensions))
        row = int(y // (self.canvas.height / self.dimensions))
        return self.get(col, row)

    def draw_cell(self, cell):
        if self.canvas is None:
            return
        left, top, width, height = self.cell_rect(cell)
        right, bottom = left + width, top + height
        self.canvas.fill_rect(left, top, width, height, cell.current_fill_color)
        if self.variant == 'maze':
            edges = {
                'N': ((left, top), (right, top)),
                'E': ((right, top), (right, bottom)),
                'S': ((right, bottom), (left, bottom)),
                'W': ((left, bottom), (left, top)),
            }
            segments = [edges[direction] for direction, present in cell.walls.items() if present]
        else:
            segments = [((left, top), (right, top)), ((right, top), (right, bottom)),
                        ((right, bottom), (left, bottom)), ((left, bottom), (left, top))]
        if segments:
            self.canvas.stroke_path(segments, cell.current_wall_color, self.line_width)

    def draw(self):
        for cell in self:
            self.draw_cell(cell)
