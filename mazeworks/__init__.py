from .config import ConfigurationError, GridOptions
from .grid import Grid
from .generator import RecursiveBacktracker
from .search import SearchStatus, BreadthFirstSearch, DepthFirstSearch, BidirectionalSearch, create_search
from .scheduler import MazeAnimation, Phase
from .canvas import RasterCanvas

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "GridOptions",
    "Grid",
    "RecursiveBacktracker",
    "SearchStatus",
    "BreadthFirstSearch",
    "DepthFirstSearch",
    "BidirectionalSearch",
    "create_search",
    "MazeAnimation",
    "Phase",
    "RasterCanvas",
]
