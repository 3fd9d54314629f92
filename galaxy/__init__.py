"""Procedural galaxy and star field generation."""

from .parameters import GalaxyParameters, ParameterCommitted
from .point_cloud import Blending, PointCloud, RenderHints
from .random_source import NumpyRandomSource, RandomSource
from .scene import Scene
from .generator import GalaxyGenerator, GeneratorState
from .starfield import StarFieldGenerator
from .session import GalaxySession

__all__ = [
    "GalaxyParameters",
    "ParameterCommitted",
    "Blending",
    "PointCloud",
    "RenderHints",
    "NumpyRandomSource",
    "RandomSource",
    "Scene",
    "GalaxyGenerator",
    "GeneratorState",
    "StarFieldGenerator",
    "GalaxySession",
]
