from __future__ import annotations

import logging
import random
from typing import Iterator

import numpy as np

from house_scene.constants import (
    SMOKE_BAND,
    SMOKE_EXTRA_POINTS,
    SMOKE_GRADIENT_END,
    SMOKE_POINTS,
    SMOKE_RADIUS,
    SMOKE_RANDOMNESS,
    SMOKE_RETIRE_X,
    SMOKE_RISE,
    SMOKE_SPAWN_X,
    SMOKE_VEL_X,
    SMOKE_VEL_Y,
    SMOKE_VISIBILITY_STEP,
)
from house_scene.surface import DrawingSurface, LinearGradient

_logger = logging.getLogger(__name__)

SMOKE_GRADIENT = LinearGradient(0, 0, SMOKE_GRADIENT_END, 0, ((0.0, 'grey'), (1.0, 'white')))


class Puff:
    """
    One emitted unit of smoke: a small cluster of points drifting together.

    Attributes:
        points (np.ndarray): Horizontal offsets of the cluster's points; 3 or 5 values, fixed at spawn.
        band (np.ndarray): Pair of vertical offsets shared by all points.
        age (int): Number of ticks since the puff was spawned.
    """
    def __init__(self, points, band) -> None:
        self.points = np.array(points, dtype=float)
        self.band = np.array(band, dtype=float)
        self.age = 0

    def is_visible(self, index: int) -> bool:
        """Points appear one after another as the puff ages."""
        return self.age > index * SMOKE_VISIBILITY_STEP

    def radius(self, base_radius: float = SMOKE_RADIUS) -> float:
        return self.age / base_radius


class SmokePlume:
    """
    Spawns, drifts and retires the puffs leaving the chimney.

    Puffs are kept oldest first. The plume is seeded with one puff and can never run empty, since a
    puff is only retired long after it has triggered the spawn of its successor.

    Attributes:
        rng (random.Random): Source of the per-puff jitter and the puff size coin flip.
        puffs (list[Puff]): Live puffs, oldest first.
        velocity_x (float): Horizontal drift per tick.
        velocity_y (float): Vertical drift per tick.
        randomness (float): Magnitude of the per-puff jitter.
        base_radius (float): Divisor turning a puff's age into its radius.
        spawn_x (float): A new puff is spawned once the newest puff's first point passes this x.
        retire_x (float): The oldest puff is removed once its first point passes this x.
    """
    def __init__(self, rng=None, velocity_x: float = SMOKE_VEL_X, velocity_y: float = SMOKE_VEL_Y,
                 randomness: float = SMOKE_RANDOMNESS, base_radius: float = SMOKE_RADIUS,
                 spawn_x: float = SMOKE_SPAWN_X, retire_x: float = SMOKE_RETIRE_X) -> None:
        if retire_x <= spawn_x:
            raise ValueError(f"retire_x ({retire_x}) must be greater than spawn_x ({spawn_x})")
        if base_radius <= 0:
            raise ValueError(f"base_radius must be positive, got {base_radius}")

        self.rng = rng if rng is not None else random.Random()
        self.velocity_x = velocity_x
        self.velocity_y = velocity_y
        self.randomness = randomness
        self.base_radius = base_radius
        self.spawn_x = spawn_x
        self.retire_x = retire_x

        self.puffs: list[Puff] = []
        self.spawn_puff()

    def __len__(self) -> int:
        return len(self.puffs)

    def jitter(self) -> float:
        """Draws one random displacement in [-randomness, randomness)."""
        return (self.rng.random() % (self.randomness * 2)) - self.randomness

    def spawn_puff(self) -> Puff:
        """
        Appends a fresh puff at the chimney mouth.

        Half of the puffs are wider, carrying two extra points.

        Returns:
            Puff: The newly spawned puff.
        """
        points = list(SMOKE_POINTS)
        if self.rng.random() > 0.5:
            points.extend(SMOKE_EXTRA_POINTS)
        puff = Puff(points, SMOKE_BAND)
        self.puffs.append(puff)
        _logger.debug("Spawned puff with %d points (%d live)", len(points), len(self.puffs))
        return puff

    def retire_puff(self) -> Puff:
        """Removes and returns the oldest puff."""
        puff = self.puffs.pop(0)
        _logger.debug("Retired puff aged %d (%d live)", puff.age, len(self.puffs))
        return puff

    def step(self) -> None:
        """
        Advances every puff by one tick, then spawns and retires puffs.

        Each puff draws a single jitter value per tick, shared by all its points so the cluster
        stays together while separate puffs wander independently.
        """
        assert self.puffs, "smoke plume has no puffs"

        for puff in self.puffs:
            jitter = self.jitter()
            puff.points += self.velocity_x + jitter
            puff.band += self.velocity_y + jitter
            puff.age += 1

        if self.puffs[-1].points[0] > self.spawn_x:
            self.spawn_puff()

        if self.puffs[0].points[0] > self.retire_x:
            self.retire_puff()

    def circles(self) -> Iterator[tuple[float, float, float]]:
        """
        Yields the visible smoke circles as (x, y, radius).

        Visible points of a puff alternate between the two band offsets, starting with the first,
        and each point sits a little higher than the one before it.
        """
        for puff in self.puffs:
            radius = puff.radius(self.base_radius)
            band_index = 0
            for i, x in enumerate(puff.points):
                if puff.is_visible(i):
                    yield float(x), float(puff.band[band_index] - i * SMOKE_RISE), radius
                    band_index = 1 - band_index

    def render(self, surface: DrawingSurface) -> None:
        """
        Draws every visible smoke circle.

        Args:
            surface (DrawingSurface): Surface to draw on.
        """
        assert self.puffs, "smoke plume has no puffs"
        for x, y, radius in self.circles():
            surface.fill_circle(x, y, radius, SMOKE_GRADIENT)
