"""Render manager for creating renderers by mode."""

from typing import Optional, Sequence
import numpy as np
from galaxy_collision.astro import Galaxy
from galaxy_collision.render.base import Renderer
from galaxy_collision.render.renderer_2d import Renderer2D


class RenderManager:
    """Owns the active renderer."""

    def __init__(self, mode: str = "2d", **renderer_kwargs):
        """Initialize render manager.

        Args:
            mode: Rendering mode (only '2d' is available)
            **renderer_kwargs: Additional arguments for renderer
        """
        self.mode = mode
        self.renderer: Optional[Renderer] = None
        self.renderer_kwargs = renderer_kwargs
        self._create_renderer()

    def _create_renderer(self):
        """Create appropriate renderer based on mode."""
        if self.renderer is not None:
            self.renderer.close()

        if self.mode == "2d":
            self.renderer = Renderer2D(**self.renderer_kwargs)
        else:
            raise ValueError(f"Unknown mode: {self.mode}")

    def render(self, galaxies: Sequence[Galaxy]):
        """Render current frame."""
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        self.renderer.render(galaxies)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame."""
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        return self.renderer.capture_frame()

    def close(self):
        """Close renderer."""
        if self.renderer is not None:
            self.renderer.close()
            self.renderer = None
