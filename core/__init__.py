"""Core application components."""

from .camera import Camera
from .parameter_panel import ParameterPanel
from .viewport import Viewport

# Application is imported from core.application directly; it needs an OpenGL context.
__all__ = ["Camera", "ParameterPanel", "Viewport"]
