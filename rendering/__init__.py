"""Rendering components for the galaxy viewer."""

from .points import GpuPointBuffers, PointsRenderer
from .sprite import SpriteTexture
from .text import TextRenderer

__all__ = ["GpuPointBuffers", "PointsRenderer", "SpriteTexture", "TextRenderer"]
