from __future__ import annotations

import logging
import tkinter as tk

from house_scene.animation import HouseAnimation

_logger = logging.getLogger(__name__)


class HouseSceneApp:
    """
    Shows the animated house in a Tkinter window, one tick per timer callback.

    Attributes:
        root (tk.Tk): The root Tkinter window.
        animation (HouseAnimation): Scene state advanced by the timer.
        canvas (tk.Canvas): Canvas displaying the rendered frame.
        photo (tk.PhotoImage): Most recent frame; referenced here so Tkinter does not discard it.
        image_id (int): Canvas item ID of the frame image.
        after_id (str | None): Pending timer callback, None when stopped.
    """
    def __init__(self, root, animation: HouseAnimation) -> None:
        self.root = root
        self.animation = animation
        surface = animation.surface
        self.canvas = tk.Canvas(self.root, width=surface.width, height=surface.height,
                                highlightthickness=0)
        self.canvas.pack()
        self.photo = self._frame()
        self.image_id = self.canvas.create_image(0, 0, anchor='nw', image=self.photo)
        self.after_id = None

    def _frame(self):
        surface = self.animation.surface
        return tk.PhotoImage(width=surface.width, height=surface.height, data=surface.to_ppm(),
                             format='PPM')

    def start(self) -> None:
        """Schedules the first tick."""
        if self.after_id is None:
            _logger.info("Animating every %d ms", self.animation.period_ms)
            self.after_id = self.root.after(self.animation.period_ms, self.update)

    def stop(self) -> None:
        """Cancels the pending tick; the scene stays on its last frame."""
        if self.after_id is not None:
            self.root.after_cancel(self.after_id)
            self.after_id = None
            _logger.info("Stopped after %d ticks", self.animation.ticks)

    def close(self) -> None:
        self.stop()
        self.root.destroy()

    def update(self) -> None:
        """Executes a single tick, shows the new frame, then schedules the next tick."""
        self.animation.tick()
        self.photo = self._frame()
        self.canvas.itemconfig(self.image_id, image=self.photo)
        self.after_id = self.root.after(self.animation.period_ms, self.update)


def run_window(animation: HouseAnimation) -> None:  # pragma: no cover - visual
    root = tk.Tk()
    root.title("House Scene")
    app = HouseSceneApp(root, animation)
    root.protocol('WM_DELETE_WINDOW', app.close)
    app.start()
    root.mainloop()
