from __future__ import annotations

import logging

from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from house_scene.animation import HouseAnimation

_logger = logging.getLogger(__name__)

DPI = 100                               # Figure resolution; the figure is sized to one pixel per scene unit


def export_gif(animation: HouseAnimation, path, frames: int, fps: int | None = None) -> None:
    """
    Renders the next frames of an animation into an animated GIF.

    Args:
        animation (HouseAnimation): Animation to advance; it is ticked once per frame.
        path (str | os.PathLike): Destination file.
        frames (int): Number of frames to write.
        fps (int, optional): Playback rate. Defaults to the rate implied by the animation's period.
    """
    if frames <= 0:
        raise ValueError(f"frames must be positive, got {frames}")
    if fps is None:
        fps = max(1, round(1000 / animation.period_ms))

    surface = animation.surface
    fig = Figure(figsize=(surface.width / DPI, surface.height / DPI), dpi=DPI)
    FigureCanvasAgg(fig)
    ax = fig.add_axes((0, 0, 1, 1))
    ax.set_axis_off()
    image = ax.imshow(surface.to_rgb_array(), interpolation='nearest')

    def init():
        return [image]

    def update(frame):
        animation.tick()
        image.set_data(surface.to_rgb_array())
        return [image]

    ani = FuncAnimation(fig, update, frames=frames, init_func=init,
                        interval=animation.period_ms, cache_frame_data=False)
    ani.save(str(path), writer=PillowWriter(fps=fps), dpi=DPI)
    _logger.info("Wrote %d frames to %s at %d fps", frames, path, fps)
