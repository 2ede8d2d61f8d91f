from collections import deque
from enum import Enum

from .config import normalize_search_type


class SearchStatus(Enum):
    RUNNING = 'running'
    FOUND = 'found'
    NO_SOLUTION = 'no_solution'


def _ignore(cell):
    pass


class SearchStrategy:
    """One frontier expansion per ``step``.

    Cells are marked visited and given a parent the first time they are
    discovered, so a parent is never overwritten and every run traces
    exactly one path. ``on_expand`` fires when a cell leaves the frontier,
    ``on_discover`` when it enters it.
    """

    name = None

    def __init__(self, grid, start=None, end=None, on_expand=None, on_discover=None):
        self.grid = grid
        self.start = start if start is not None else grid.start
        self.end = end if end is not None else grid.end
        self.on_expand = on_expand or _ignore
        self.on_discover = on_discover or _ignore
        self.status = SearchStatus.RUNNING
        self.path = []
        self.expansions = 0

    @property
    def finished(self):
        return self.status is not SearchStatus.RUNNING

    def trace(self, cell, parent_attr='solve_parent'):
        chain = [cell]
        while getattr(cell, parent_attr) is not None:
            cell = self.grid[getattr(cell, parent_attr)]
            chain.append(cell)
        return chain

    def step(self):
        raise NotImplementedError

    def run(self):
        while self.status is SearchStatus.RUNNING:
            self.step()
        return self.status


class BreadthFirstSearch(SearchStrategy):
    name = 'bfs'

    def __init__(self, grid, start=None, end=None, on_expand=None, on_discover=None):
        super().__init__(grid, start, end, on_expand, on_discover)
        self.frontier = self._new_frontier()
        self.frontier.append(self.start)
        self.start.search_visited = True

    def _new_frontier(self):
        return deque()

    def _take(self):
        return self.frontier.popleft()

    def step(self):
        if self.status is not SearchStatus.RUNNING:
            return self.status
        if not self.frontier:
            self.status = SearchStatus.NO_SOLUTION
            return self.status

        cell = self._take()
        self.expansions += 1
        self.on_expand(cell)

        if cell is self.end:
            path = self.trace(cell)
            path.reverse()
            self.path = path
            self.status = SearchStatus.FOUND
            return self.status

        for neighbor in self.grid.traversable_neighbors(cell):
            if not neighbor.search_visited:
                neighbor.search_visited = True
                neighbor.solve_parent = cell.position
                self.frontier.append(neighbor)
                self.on_discover(neighbor)
        return self.status


class DepthFirstSearch(BreadthFirstSearch):
    """Same loop with a LIFO frontier; the path follows exploration order."""

    name = 'dfs'

    def _new_frontier(self):
        return []

    def _take(self):
        return self.frontier.pop()


class BidirectionalSearch(SearchStrategy):
    """Two breadth-first trees grown in lockstep from start and end.

    The forward tree uses ``search_visited``/``solve_parent``, the backward
    tree ``search_visited2``/``solve_parent2``. The trees meet as soon as
    either one discovers or dequeues a cell the other already owns.
    """

    name = 'bibfs'

    def __init__(self, grid, start=None, end=None, on_expand=None, on_discover=None):
        super().__init__(grid, start, end, on_expand, on_discover)
        self.forward = deque([self.start])
        self.backward = deque([self.end])
        self.start.search_visited = True
        self.end.search_visited2 = True
        self.meeting_cell = None

    def _expand(self, frontier, visited, parent, other_visited):
        if not frontier:
            return None
        cell = frontier.popleft()
        self.expansions += 1
        self.on_expand(cell)
        if getattr(cell, other_visited):
            return cell
        for neighbor in self.grid.traversable_neighbors(cell):
            if getattr(neighbor, visited):
                continue
            setattr(neighbor, visited, True)
            setattr(neighbor, parent, cell.position)
            frontier.append(neighbor)
            self.on_discover(neighbor)
            if getattr(neighbor, other_visited):
                return neighbor
        return None

    def step(self):
        if self.status is not SearchStatus.RUNNING:
            return self.status
        if not self.forward and not self.backward:
            self.status = SearchStatus.NO_SOLUTION
            return self.status

        meeting = self._expand(self.forward, 'search_visited', 'solve_parent', 'search_visited2')
        if meeting is None:
            meeting = self._expand(self.backward, 'search_visited2', 'solve_parent2', 'search_visited')
        if meeting is not None:
            self.meeting_cell = meeting
            forward = self.trace(meeting, 'solve_parent')
            forward.reverse()
            backward = self.trace(meeting, 'solve_parent2')
            self.path = forward + backward[1:]
            self.status = SearchStatus.FOUND
        return self.status


SEARCHES = {
    BreadthFirstSearch.name: BreadthFirstSearch,
    DepthFirstSearch.name: DepthFirstSearch,
    BidirectionalSearch.name: BidirectionalSearch,
}


def create_search(search_type, grid, start=None, end=None, on_expand=None, on_discover=None):
    search_class = SEARCHES[normalize_search_type(search_type)]
    return search_class(grid, start, end, on_expand=on_expand, on_discover=on_discover)
