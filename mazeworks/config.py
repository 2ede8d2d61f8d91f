import math
from dataclasses import dataclass
from typing import Optional

DEFAULT_DIMENSIONS = 10
DEFAULT_PADDING = 4
DEFAULT_LINE_WIDTH = 2

GENERATION_GAIN = 3
SEARCH_GAIN = 1
SOLVE_PATH_GAIN = 0.5

SEARCH_TYPES = ('bfs', 'dfs', 'bibfs')
SEARCH_ALIASES = {'biBfs': 'bibfs', 'bi_bfs': 'bibfs', 'bidirectional': 'bibfs'}
VARIANTS = ('maze', 'grid')

# camelCase keys sent by the UI layer
OPTION_KEYS = {
    'dimensions': 'dimensions',
    'padding': 'padding',
    'lineWidth': 'line_width',
    'line_width': 'line_width',
    'generationsPerFrame': 'generations_per_frame',
    'generations_per_frame': 'generations_per_frame',
    'searchesPerFrame': 'searches_per_frame',
    'searches_per_frame': 'searches_per_frame',
    'solvePathsPerFrame': 'solve_paths_per_frame',
    'solve_paths_per_frame': 'solve_paths_per_frame',
    'searchType': 'search_type',
    'search_type': 'search_type',
    'variant': 'variant',
    'seed': 'seed',
}


class ConfigurationError(ValueError):
    pass


def normalize_search_type(search_type):
    name = SEARCH_ALIASES.get(search_type, search_type)
    if isinstance(name, str):
        name = name.lower()
    if name not in SEARCH_TYPES:
        raise ConfigurationError(
            f"Unknown search type {search_type!r}, expected one of {', '.join(SEARCH_TYPES)}")
    return name


def calls_per_frame(explicit, dimensions, gain=1):
    """Work budget for one tick.

    An explicit value wins; otherwise the budget grows with the number of
    cells so that large grids finish in a similar number of frames.
    """
    if explicit is not None:
        return explicit
    return max(math.ceil(dimensions ** 2 / 1000 * gain), 1)


def _to_int(name, value):
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if isinstance(value, int):
        return value
    try:
        return math.floor(float(str(value).strip()))
    except (ValueError, OverflowError):
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from None


@dataclass(frozen=True)
class GridOptions:
    dimensions: int = DEFAULT_DIMENSIONS
    padding: int = DEFAULT_PADDING
    line_width: int = DEFAULT_LINE_WIDTH
    generations_per_frame: Optional[int] = None
    searches_per_frame: Optional[int] = None
    solve_paths_per_frame: Optional[int] = None
    search_type: str = 'bfs'
    variant: str = 'maze'
    seed: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.dimensions, int) or self.dimensions < 1:
            raise ConfigurationError(f"dimensions must be a positive integer, got {self.dimensions!r}")
        if self.padding < 0:
            raise ConfigurationError(f"padding must not be negative, got {self.padding!r}")
        if self.line_width < 1:
            raise ConfigurationError(f"line_width must be at least 1, got {self.line_width!r}")
        for name in ('generations_per_frame', 'searches_per_frame', 'solve_paths_per_frame'):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ConfigurationError(f"{name} must be at least 1, got {value!r}")
        if self.variant not in VARIANTS:
            raise ConfigurationError(f"Unknown variant {self.variant!r}, expected 'maze' or 'grid'")
        object.__setattr__(self, 'search_type', normalize_search_type(self.search_type))

    @classmethod
    def from_dict(cls, options=None):
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        values = {}
        for key, value in options.items():
            if key not in OPTION_KEYS:
                raise ConfigurationError(f"Unknown option {key!r}")
            field = OPTION_KEYS[key]
            if value is None:
                continue
            if field in ('search_type', 'variant'):
                values[field] = value
            else:
                values[field] = _to_int(key, value)
        return cls(**values)

    @property
    def generations(self):
        return calls_per_frame(self.generations_per_frame, self.dimensions, GENERATION_GAIN)

    @property
    def searches(self):
        return calls_per_frame(self.searches_per_frame, self.dimensions, SEARCH_GAIN)

    @property
    def solve_paths(self):
        return calls_per_frame(self.solve_paths_per_frame, self.dimensions, SOLVE_PATH_GAIN)
