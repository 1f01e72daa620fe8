"""2D renderer using matplotlib."""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from typing import Optional, Tuple
from nbody_sim.physics import constants
from nbody_sim.render.base import Renderer


class Renderer2D(Renderer):
    """2D scatter-plot renderer with fixed, symmetric axis bounds."""

    def __init__(
        self,
        extent: float = 4.0 * constants.AU,
        figsize: Tuple[int, int] = (10, 8),
        dpi: int = 100,
        marker_size: float = 25.0,
        interactive: bool = True,
        title: str = "N-Body"
    ):
        """Initialize 2D renderer.

        Args:
            extent: Half-width of the visible square, in meters
            figsize: Figure size (width, height)
            dpi: Dots per inch
            marker_size: Scatter marker area in points^2
            interactive: Open a window; if False, draw off-screen only
            title: Window/axes title
        """
        self.extent = extent
        self.figsize = figsize
        self.dpi = dpi
        self.marker_size = marker_size
        self.interactive = interactive
        self.title = title

        self.fig: Optional[Figure] = None
        self.ax = None
        self.scatter = None
        self.initialized = False
        self._closed = False

    def _initialize(self):
        """Create the figure on first render."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.ax.set_aspect('equal')
        self.ax.set_xlim(-self.extent, self.extent)
        self.ax.set_ylim(-self.extent, self.extent)
        self.ax.set_xlabel('x (m)')
        self.ax.set_ylabel('y (m)')
        self.ax.set_title(self.title)
        self.ax.grid(True, alpha=0.3)

        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)  # Give it time to appear

        self.initialized = True

    def is_open(self) -> bool:
        """Check whether the figure window is still open."""
        if self._closed:
            return False
        if not self.initialized or not self.interactive:
            return True
        if not plt.fignum_exists(self.fig.number):
            self._closed = True
            return False
        return True

    def render(self, positions: np.ndarray, velocities: Optional[np.ndarray] = None, masses: Optional[np.ndarray] = None):
        """Render current frame."""
        if not self.is_open():
            return
        self._initialize()

        pos_2d = np.asarray(positions, dtype=np.float64)[:, :2]
        if self.scatter is None:
            self.scatter = self.ax.scatter(
                pos_2d[:, 0], pos_2d[:, 1],
                s=self.marker_size, c='tab:blue', edgecolors='black', linewidths=0.5
            )
        else:
            self.scatter.set_offsets(pos_2d)

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return rgba[:, :, :3].copy()

    def clear(self):
        """Remove plotted bodies, keeping axes and bounds."""
        if self.scatter is not None:
            self.scatter.remove()
            self.scatter = None

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.scatter = None
            self.initialized = False
        self._closed = True
