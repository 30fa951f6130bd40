from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, Union

import numpy as np
from matplotlib.colors import to_rgb
from matplotlib.path import Path

Point = tuple[float, float]


@dataclass(frozen=True)
class LinearGradient:
    """
    A two-point linear gradient, painted like a canvas gradient.

    Attributes:
        x0 (float): Horizontal start of the gradient axis.
        y0 (float): Vertical start of the gradient axis.
        x1 (float): Horizontal end of the gradient axis.
        y1 (float): Vertical end of the gradient axis.
        stops (tuple): (offset, colour) pairs with offsets ascending in [0, 1].
    """
    x0: float
    y0: float
    x1: float
    y1: float
    stops: tuple[tuple[float, str], ...]

    def colours_at(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        """
        Sample the gradient at the given coordinates.

        Each point is projected onto the gradient axis and the resulting fraction, clamped to
        [0, 1], is interpolated between the colour stops.

        Args:
            x (np.ndarray): Horizontal sample positions.
            y (np.ndarray): Vertical sample positions, same shape as x.

        Returns:
            np.ndarray: RGB values in [0, 1] with shape x.shape + (3,).
        """
        x = np.asarray(x, dtype=float)
        y = np.asarray(y, dtype=float)
        dx = self.x1 - self.x0
        dy = self.y1 - self.y0
        length_sq = dx * dx + dy * dy
        if length_sq == 0:
            t = np.zeros_like(x)
        else:
            t = np.clip(((x - self.x0) * dx + (y - self.y0) * dy) / length_sq, 0.0, 1.0)

        offsets = [offset for offset, _ in self.stops]
        rgb = np.array([to_rgb(colour) for _, colour in self.stops])
        return np.stack([np.interp(t, offsets, rgb[:, k]) for k in range(3)], axis=-1)


Paint = Union[str, LinearGradient]


class DrawingSurface(Protocol):
    """What the scene renderer needs from a drawing surface."""

    width: int
    height: int

    def fill_rect(self, x: float, y: float, w: float, h: float, paint: Paint,
                  alpha: float = 1.0) -> None: ...

    def fill_polygon(self, points: Sequence[Point], paint: Paint) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float, paint: Paint) -> None: ...


class RasterSurface:
    """
    Drawing surface backed by a numpy RGB buffer.

    A pixel is covered by a shape when its centre lies inside the shape. Polygon masks are cached
    per vertex list since the house geometry never moves.

    Attributes:
        width (int): Surface width in pixels.
        height (int): Surface height in pixels.
        pixels (np.ndarray): Float RGB buffer of shape (height, width, 3) with values in [0, 1].
    """
    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"surface size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=float)

        # Pixel centre coordinates, reused by every fill
        self._xs, self._ys = np.meshgrid(np.arange(width) + 0.5, np.arange(height) + 0.5)
        self._centres = np.column_stack((self._xs.ravel(), self._ys.ravel()))
        self._polygon_masks: dict[tuple[Point, ...], np.ndarray] = {}

    def _paint(self, paint: Paint, mask: np.ndarray) -> np.ndarray:
        """Colours for the covered pixels, either one RGB triple or one per pixel."""
        if isinstance(paint, LinearGradient):
            return paint.colours_at(self._xs[mask], self._ys[mask])
        return np.array(to_rgb(paint))

    def _fill(self, mask: np.ndarray, paint: Paint, alpha: float = 1.0) -> None:
        if not mask.any():
            return
        colour = self._paint(paint, mask)
        if alpha >= 1.0:
            self.pixels[mask] = colour
        else:
            self.pixels[mask] = self.pixels[mask] * (1.0 - alpha) + colour * alpha

    def fill_rect(self, x: float, y: float, w: float, h: float, paint: Paint,
                  alpha: float = 1.0) -> None:
        """
        Fills an axis-aligned rectangle, optionally blending it over the existing pixels.

        Args:
            x (float): Left edge.
            y (float): Top edge.
            w (float): Width.
            h (float): Height.
            paint (Paint): Colour or gradient.
            alpha (float, optional): Opacity in [0, 1]. Defaults to 1.0.
        """
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"alpha must be within [0, 1], got {alpha}")
        if alpha == 0.0:
            return
        mask = (self._xs >= x) & (self._xs < x + w) & (self._ys >= y) & (self._ys < y + h)
        self._fill(mask, paint, alpha)

    def fill_polygon(self, points: Sequence[Point], paint: Paint) -> None:
        """Fills a closed polygon given by its vertices."""
        key = tuple((float(px), float(py)) for px, py in points)
        mask = self._polygon_masks.get(key)
        if mask is None:
            inside = Path(key).contains_points(self._centres)
            mask = inside.reshape(self.height, self.width)
            self._polygon_masks[key] = mask
        self._fill(mask, paint)

    def fill_circle(self, x: float, y: float, radius: float, paint: Paint) -> None:
        """Fills a disc; a radius of zero or less draws nothing."""
        if radius <= 0:
            return
        mask = (self._xs - x) ** 2 + (self._ys - y) ** 2 <= radius * radius
        self._fill(mask, paint)

    def to_rgb_array(self) -> np.ndarray:
        """Returns the buffer as 8-bit RGB."""
        return (np.clip(self.pixels, 0.0, 1.0) * 255 + 0.5).astype(np.uint8)

    def to_ppm(self) -> bytes:
        """Returns the buffer as binary PPM data, the format tkinter's PhotoImage reads."""
        header = f'P6 {self.width} {self.height} 255 '.encode('ascii')
        return header + self.to_rgb_array().tobytes()
