"""2D renderer using matplotlib."""

import time
from typing import Optional, Sequence, Tuple
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from galaxy_collision.astro import Galaxy
from galaxy_collision.render.base import Renderer, project_stars


# One colour per galaxy, cycled by galaxy index
DEFAULT_PALETTE = ('#ffadad', '#a0c4ff', '#fdffb6', '#caffbf', '#bdb2ff', '#ffc6ff')


class Renderer2D(Renderer):
    """Top-down view of the stars, projected onto the x/y plane.

    Colours live in the renderer's own palette, indexed by each galaxy's
    position in the collection; galaxies and stars are never modified.
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        view_extent: float = 10.0,
        palette: Sequence[str] = DEFAULT_PALETTE,
        point_size: float = 1.0,
        interactive: bool = True,
        target_fps: float = 30.0
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            view_extent: Half-width of the visible square, in simulation units
            palette: Colours assigned to galaxies by index
            point_size: Marker size for stars
            interactive: Show a window and pump its event loop on each render
            target_fps: Renders closer together than 1/target_fps are skipped
        """
        self.figsize = figsize
        self.dpi = dpi
        self.view_extent = view_extent
        self.palette = tuple(palette)
        self.point_size = point_size
        self.interactive = interactive

        self.fig: Optional[Figure] = None
        self.ax = None
        self.scatter = None
        self.initialized = False

        # Frame rate limiting
        self.frame_time = 1.0 / target_fps if target_fps else 0.0
        self.last_render_time = 0.0

    def colors_for(self, galaxy_index: np.ndarray) -> list:
        """Palette colour for each entry of galaxy_index."""
        return [self.palette[i % len(self.palette)] for i in galaxy_index]

    def _initialize(self):
        """Create the figure if not already done."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.fig.patch.set_facecolor('black')
        self.ax.set_facecolor('black')
        self.ax.set_aspect('equal')
        self.ax.set_xlim(-self.view_extent, self.view_extent)
        self.ax.set_ylim(-self.view_extent, self.view_extent)
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        self.ax.set_title('Galaxy Collision', color='white')
        self.scatter = self.ax.scatter([], [], s=self.point_size, linewidths=0)

        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)

        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            self.scatter = None
            return False
        return True

    def render(self, galaxies: Sequence[Galaxy]):
        """Render current frame."""
        # Window closed by the user: stop drawing
        if self.initialized and not self._is_figure_open():
            return

        current_time = time.time()
        if self.initialized and (current_time - self.last_render_time) < self.frame_time:
            return
        self.last_render_time = current_time

        self._initialize()

        positions, owners = project_stars(galaxies)
        self.scatter.set_offsets(positions[:, :2])
        self.scatter.set_facecolors(self.colors_for(owners))

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")

        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return np.ascontiguousarray(rgba[:, :, :3])

    def clear(self):
        """Clear the renderer."""
        if self.scatter is not None:
            self.scatter.set_offsets(np.empty((0, 2)))

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.scatter = None
            self.initialized = False
