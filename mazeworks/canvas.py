import math

import numpy as np
import matplotlib
import matplotlib.pyplot as plt

from .colors import BG_COLOR, hex_to_rgb

FIG_SIZE = 8
DPI = 125


class RasterCanvas:
    """Pixel buffer with the two drawing primitives the cells use.

    Coordinates are canvas pixels with the origin in the top left corner,
    matching the row/column layout of the grid.
    """

    def __init__(self, width=1000, height=1000, background=BG_COLOR):
        if width < 1 or height < 1:
            raise ValueError(f"canvas must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self.pixels[:, :] = self._rgb(background)
        self.fill_count = 0
        self.stroke_count = 0

    def _rgb(self, color):
        if isinstance(color, str):
            color = hex_to_rgb(color)
        return np.clip(np.asarray(color), 0, 255).astype(np.uint8)

    def _paint(self, left, top, right, bottom, color):
        left = max(int(math.floor(left)), 0)
        top = max(int(math.floor(top)), 0)
        right = min(int(math.ceil(right)), self.width)
        bottom = min(int(math.ceil(bottom)), self.height)
        if left < right and top < bottom:
            self.pixels[top:bottom, left:right] = color

    def fill_rect(self, x, y, width, height, color):
        self.fill_count += 1
        self._paint(x, y, x + width, y + height, self._rgb(color))

    def stroke_path(self, segments, color, line_width=1):
        self.stroke_count += 1
        rgb = self._rgb(color)
        half = line_width / 2
        for (x0, y0), (x1, y1) in segments:
            if x0 == x1 or y0 == y1:
                self._paint(min(x0, x1) - half, min(y0, y1) - half,
                            max(x0, x1) + half, max(y0, y1) + half, rgb)
                continue
            steps = int(max(abs(x1 - x0), abs(y1 - y0))) + 1
            for x, y in zip(np.linspace(x0, x1, steps), np.linspace(y0, y1, steps)):
                self._paint(x - half, y - half, x + half, y + half, rgb)

    def pixel(self, x, y):
        return tuple(int(c) for c in self.pixels[y, x])

    def to_figure(self, title=None):
        fig, axes = plt.subplots(figsize=(FIG_SIZE, FIG_SIZE), dpi=DPI)
        fig.patch.set_facecolor(BG_COLOR)
        axes.axis('off')
        image = axes.imshow(self.pixels, interpolation='nearest')
        if title:
            axes.set_title(title)
        return fig, axes, image

    def save(self, path):
        plt.imsave(path, self.pixels)


def use_headless_backend():
    matplotlib.use('Agg')
