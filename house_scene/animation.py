from __future__ import annotations

import logging
import random

from house_scene.constants import FRAME_DELAY, HEIGHT, TIME_SPEED, WIDTH
from house_scene.daynight import DayNightCycle
from house_scene.scene import SceneRenderer
from house_scene.smoke import SmokePlume
from house_scene.surface import RasterSurface

_logger = logging.getLogger(__name__)


class HouseAnimation:
    """
    Owns the animated state of the house scene and redraws it once per tick.

    Attributes:
        period_ms (int): Delay between ticks when driven by a timer, in milliseconds.
        seed (int | None): Seed of the random source, when one was given.
        plume (SmokePlume): Chimney smoke.
        cycle (DayNightCycle): Time of day oscillator.
        surface (RasterSurface): Surface the scene is painted on.
        renderer (SceneRenderer): Paints the scene onto the surface.
        ticks (int): Number of ticks performed so far.
    """
    def __init__(self, period_ms: int = FRAME_DELAY, seed: int | None = None, rng=None,
                 time_speed: float = TIME_SPEED, surface: RasterSurface | None = None) -> None:
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")
        self.period_ms = period_ms
        self.seed = seed
        if rng is None:
            rng = random.Random(seed)

        self.plume = SmokePlume(rng)
        self.cycle = DayNightCycle(time_speed)
        self.surface = surface if surface is not None else RasterSurface(WIDTH, HEIGHT)
        self.renderer = SceneRenderer(self.surface)
        self.ticks = 0
        self.draw()

    @property
    def time_of_day(self) -> float:
        return self.cycle.time

    def draw(self) -> None:
        self.renderer.draw_scene(self.cycle.time, self.plume)

    def tick(self) -> None:
        """Advances the smoke and the time of day, then redraws the full scene."""
        self.plume.step()
        self.cycle.step()
        self.draw()
        self.ticks += 1

    def run(self, n: int) -> None:
        """
        Performs n ticks back to back, without any pacing.

        Args:
            n (int): Number of ticks to perform.
        """
        for _ in range(n):
            self.tick()
        _logger.debug("Ran %d ticks (time of day %.2f, %d puffs)", n, self.cycle.time, len(self.plume))
