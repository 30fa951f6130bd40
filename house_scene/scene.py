from __future__ import annotations

import math

from house_scene import geometry
from house_scene.constants import X_OFFSET, Y_OFFSET
from house_scene.daynight import is_night, lights_on, overlay_alpha
from house_scene.smoke import SmokePlume
from house_scene.surface import DrawingSurface, LinearGradient


def offset_polygon(points, dx: float = X_OFFSET, dy: float = Y_OFFSET):
    return [(x + dx, y + dy) for x, y in points]


def shutter_polygons(window, shutter_width: float = geometry.SHUTTER_WIDTH):
    """
    Computes the two shutters framing a window.

    The shutters follow the slope of the window's top edge, so windows on walls seen at an angle
    get skewed shutters.

    Args:
        window (tuple): Four corners, clockwise from the top left.
        shutter_width (float, optional): Shutter width along the top edge.

    Returns:
        list: Left and right shutter polygons, in the window's own coordinates.
    """
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = window
    x_diff = x1 - x0
    y_diff = y1 - y0
    ratio = math.hypot(x_diff, y_diff) / shutter_width
    x_off = x_diff / ratio
    y_off = y_diff / ratio
    window_height = y3 - y0

    left_x, left_y = x0 + x_off, y0 - y_off
    right_x, right_y = x1 - x_off, y1 + y_off
    return [
        [(x0, y0), (left_x, left_y), (left_x, left_y + window_height), (x3, y3)],
        [(right_x, right_y), (x1, y1), (x2, y2), (right_x, right_y + window_height)],
    ]


def glass_stops(night: bool, lights: bool):
    if not night:
        return geometry.DAY_GLASS
    return geometry.LIT_GLASS if lights else geometry.DARK_GLASS


class SceneRenderer:
    """
    Paints the whole house scene for a given time of day.

    Attributes:
        surface (DrawingSurface): Surface painted on every frame; fully redrawn each time.
    """
    def __init__(self, surface: DrawingSurface) -> None:
        self.surface = surface

    def draw_scene(self, time_of_day: float, plume: SmokePlume) -> None:
        """
        Redraws the scene back to front.

        Args:
            time_of_day (float): 0 is noon, 1 is midnight.
            plume (SmokePlume): Smoke to draw between the roof and the chimney.
        """
        night = is_night(time_of_day)
        lights = lights_on(time_of_day)

        self.draw_background()
        self.fill_layers(geometry.WALLS)
        self.draw_windows(night, lights)
        self.fill_layers(geometry.DOOR)
        self.fill_layers(geometry.ROOF)
        self.fill_layers(geometry.ROOF_TRIM)
        plume.render(self.surface)
        self.fill_layers(geometry.CHIMNEY)
        self.fill_layers(geometry.FOLIAGE)
        self.draw_overlay(time_of_day)

    def fill_layers(self, layers) -> None:
        for colour, polygons in layers:
            for polygon in polygons:
                self.surface.fill_polygon(offset_polygon(polygon), colour)

    def draw_background(self) -> None:
        width, height = self.surface.width, self.surface.height
        sky = LinearGradient(0, 0, width, height,
                             ((0.0, geometry.SKY_TOP), (1.0, geometry.SKY_BOTTOM)))
        self.surface.fill_rect(0, 0, width, height, sky)
        self.surface.fill_rect(0, geometry.GROUND_LEVEL, width, height, geometry.GROUND_COLOUR)

    def draw_windows(self, night: bool, lights: bool) -> None:
        """Draws every window's glass, then its shutters."""
        stops = glass_stops(night, lights)
        for window in geometry.WINDOWS:
            corners = offset_polygon(window)
            (gx0, gy0), (gx1, gy1) = corners[0], corners[2]
            self.surface.fill_polygon(corners, LinearGradient(gx0, gy0, gx1, gy1, stops))
            for shutter in shutter_polygons(window):
                self.surface.fill_polygon(offset_polygon(shutter), geometry.SHUTTER_COLOUR)

    def draw_overlay(self, time_of_day: float) -> None:
        """Darkens the whole scene with translucent black as night falls."""
        self.surface.fill_rect(0, 0, self.surface.width, self.surface.height, 'black',
                               alpha=overlay_alpha(time_of_day))
