"""house_scene - A house with a smoking chimney under a swinging day/night sky."""

from house_scene.animation import HouseAnimation
from house_scene.daynight import DayNightCycle, is_night, lights_on, overlay_alpha
from house_scene.scene import SceneRenderer
from house_scene.smoke import Puff, SmokePlume
from house_scene.surface import DrawingSurface, LinearGradient, RasterSurface

__all__ = [
    "HouseAnimation",
    "DayNightCycle",
    "is_night",
    "lights_on",
    "overlay_alpha",
    "SceneRenderer",
    "Puff",
    "SmokePlume",
    "DrawingSurface",
    "LinearGradient",
    "RasterSurface",
]
