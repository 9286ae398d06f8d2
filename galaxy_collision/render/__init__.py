"""Rendering for 2D visualization."""

from galaxy_collision.render.base import Renderer, project_stars
from galaxy_collision.render.renderer_2d import Renderer2D
from galaxy_collision.render.manager import RenderManager

__all__ = ["Renderer", "Renderer2D", "RenderManager", "project_stars"]
