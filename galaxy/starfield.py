"""Static background star field."""

from typing import Optional

import numpy as np

from config import galaxy as config
from .point_cloud import Blending, PointCloud, RenderHints
from .random_source import NumpyRandomSource, RandomSource


class StarFieldGenerator:
    """Uniform points in a cube centered at the origin, drawn with the star sprite."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = random_source or NumpyRandomSource()
        self.count = int(config.STARS["count"])
        self.extent = float(config.STARS["extent"])

    def generate(self) -> PointCloud:
        draws = self.random_source.uniform_array(self.count * 3)
        positions = (np.asarray(draws, dtype=np.float64).reshape(self.count, 3) - 0.5) * self.extent

        color = tuple(config.STARS["color"])
        colors = np.tile(np.asarray(color, dtype=np.float32), (self.count, 1))

        hints = RenderHints(
            point_size=float(config.STARS["size"]),
            size_attenuation=bool(config.STARS["size_attenuation"]),
            blending=Blending.ADDITIVE,
            depth_write=False,
            vertex_colors=False,
            color=color,
            alpha_map=True,
        )
        print(f"[Stars] Generated {self.count} background stars")
        return PointCloud(positions, colors, hints, name="stars")
