"""
Spiral galaxy point cloud generation.

Each particle gets a uniform radius inside the galaxy radius, is assigned to
a branch round-robin by index, twisted by ``spin`` proportionally to its
radius, and pushed off the arm by a signed per-axis noise term shaped by
``randomness_power``. Color is a linear blend from the inside color at the
center to the outside color at the rim.

The per-particle loop is a Numba kernel fed with a pre-drawn block of
uniforms, so the random source stays swappable while the math runs compiled.
"""

import math
import time
from enum import Enum
from typing import Optional

import numpy as np
from numba import njit

from .parameters import GalaxyParameters
from .point_cloud import Blending, PointCloud, RenderHints
from .random_source import NumpyRandomSource, RandomSource
from .scene import Scene

# Uniforms consumed per particle: radius, then (base, sign) for x, y, z
DRAWS_PER_PARTICLE = 7


@njit(cache=True)
def safe_pow(base: float, exponent: float) -> float:
    """
    ``base ** exponent`` for noise magnitudes that never yields NaN or inf.

    A zero base maps to zero regardless of the exponent.
    """
    if base <= 0.0:
        return 0.0
    value = base ** exponent
    if not math.isfinite(value):
        return 0.0
    return value


@njit(cache=True)
def noise_offset(base: float, sign_draw: float, power: float,
                 randomness: float, radius: float) -> float:
    """Signed displacement from the arm, scaled by the particle radius."""
    sign = 1.0 if sign_draw < 0.5 else -1.0
    return sign * safe_pow(base, power) * randomness * radius


@njit(cache=True)
def build_galaxy(
    draws: np.ndarray,         # (count, 7) uniforms
    galaxy_radius: float,
    branches: int,
    spin: float,
    randomness: float,
    randomness_power: float,
    inside: np.ndarray,        # (3,)
    outside: np.ndarray,       # (3,)
    positions: np.ndarray,     # (count, 3) output
    colors: np.ndarray,        # (count, 3) output
):
    """Fill ``positions`` and ``colors`` for every particle."""
    count = draws.shape[0]
    two_pi = 2.0 * math.pi

    for i in range(count):
        radius = draws[i, 0] * galaxy_radius
        branch_angle = (i % branches) / branches * two_pi
        spin_angle = radius * spin
        angle = branch_angle + spin_angle

        # Same envelope on every axis, including height
        offset_x = noise_offset(draws[i, 1], draws[i, 2], randomness_power, randomness, radius)
        offset_y = noise_offset(draws[i, 3], draws[i, 4], randomness_power, randomness, radius)
        offset_z = noise_offset(draws[i, 5], draws[i, 6], randomness_power, randomness, radius)

        positions[i, 0] = math.cos(angle) * radius + offset_x
        positions[i, 1] = offset_y
        positions[i, 2] = math.sin(angle) * radius + offset_z

        t = radius / galaxy_radius if galaxy_radius > 0.0 else 0.0
        for c in range(3):
            colors[i, c] = (1.0 - t) * inside[c] + t * outside[c]


class GeneratorState(Enum):
    EMPTY = "empty"
    POPULATED = "populated"


class GalaxyGenerator:
    """
    Builds galaxy clouds and owns the one currently shown in the scene.

    ``generate`` is side-effect free. ``regenerate`` replaces the live cloud:
    dispose the old one, detach it, generate the new one, attach it.
    """

    def __init__(self, scene: Scene, random_source: Optional[RandomSource] = None):
        self.scene = scene
        self.random_source = random_source or NumpyRandomSource()
        self._current: Optional[PointCloud] = None
        self.generation = 0

    @property
    def current(self) -> Optional[PointCloud]:
        return self._current

    @property
    def state(self) -> GeneratorState:
        return GeneratorState.EMPTY if self._current is None else GeneratorState.POPULATED

    def generate(self, params: GalaxyParameters) -> PointCloud:
        """Create a new cloud from ``params``. Does not touch the scene."""
        count = int(params.count)
        draws = self.random_source.uniform_array(count * DRAWS_PER_PARTICLE)
        draws = np.asarray(draws, dtype=np.float64).reshape(count, DRAWS_PER_PARTICLE)

        positions = np.empty((count, 3), dtype=np.float64)
        colors = np.empty((count, 3), dtype=np.float64)
        build_galaxy(
            draws,
            float(params.radius),
            int(params.branches),
            float(params.spin),
            float(params.randomness),
            float(params.randomness_power),
            np.asarray(params.inside_color, dtype=np.float64),
            np.asarray(params.outside_color, dtype=np.float64),
            positions,
            colors,
        )

        hints = RenderHints(
            point_size=float(params.size),
            size_attenuation=bool(params.size_attenuation),
            blending=Blending.ADDITIVE,
            depth_write=False,
            vertex_colors=True,
        )
        return PointCloud(positions, colors, hints, name="galaxy")

    def regenerate(self, params: GalaxyParameters) -> PointCloud:
        """
        Replace the live cloud with one generated from ``params``.

        If disposing the old cloud fails the error propagates and the old
        cloud stays attached. If generation fails the old cloud is already
        released and the generator is left empty.
        """
        start = time.perf_counter()

        previous = self._current
        if previous is not None:
            previous.dispose()
            self.scene.detach(previous)
            self._current = None

        cloud = self.generate(params)
        self.scene.attach(cloud)
        self._current = cloud
        self.generation += 1

        elapsed_ms = (time.perf_counter() - start) * 1000.0
        print(f"[Galaxy] Generated {cloud.count:,} particles "
              f"({params.branches} branches, radius {params.radius:g}) in {elapsed_ms:.1f} ms")
        return cloud
