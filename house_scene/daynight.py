from __future__ import annotations

import logging

from house_scene.constants import LIGHTS_OUT, NIGHT_START, OVERLAY_DIVISOR, TIME_SPEED

_logger = logging.getLogger(__name__)


def is_night(time_of_day: float) -> bool:
    return time_of_day > NIGHT_START


def lights_on(time_of_day: float) -> bool:
    """The house lights burn through the evening and go out late at night."""
    return is_night(time_of_day) and time_of_day < LIGHTS_OUT


def overlay_alpha(time_of_day: float) -> float:
    """Opacity of the black overlay darkening the scene; 0 at noon, 2/3 at midnight."""
    return time_of_day / OVERLAY_DIVISOR


class DayNightCycle:
    """
    Swings the time of day back and forth between noon (0) and midnight (1).

    Overshooting either end reflects the excess back into range and reverses direction, so the
    time of day follows a triangle wave with no jump at the turning points.

    Attributes:
        time (float): Current time of day in [0, 1].
        increasing (bool): True while the time of day moves towards midnight.
        step_size (float): Time of day travelled per tick.
    """
    def __init__(self, step_size: float = TIME_SPEED, time: float = 0.0,
                 increasing: bool = True) -> None:
        if not 0.0 < step_size <= 1.0:
            raise ValueError(f"step_size must be within (0, 1], got {step_size}")
        if not 0.0 <= time <= 1.0:
            raise ValueError(f"time must be within [0, 1], got {time}")
        self.step_size = step_size
        self.time = time
        self.increasing = increasing

    def step(self) -> float:
        """
        Advances the time of day by one tick.

        Returns:
            float: The new time of day.
        """
        if self.increasing:
            ahead = self.time + self.step_size
            if ahead > 1:
                self.time = 1 - (ahead - 1)
                self.increasing = False
                _logger.debug("Midnight passed, heading back towards noon")
            else:
                self.time = ahead
        else:
            ahead = self.time - self.step_size
            if ahead < 0:
                self.time = -ahead
                self.increasing = True
                _logger.debug("Noon passed, heading towards midnight")
            else:
                self.time = ahead
        return self.time

    @property
    def is_night(self) -> bool:
        return is_night(self.time)

    @property
    def lights_on(self) -> bool:
        return lights_on(self.time)

    @property
    def overlay_alpha(self) -> float:
        return overlay_alpha(self.time)
