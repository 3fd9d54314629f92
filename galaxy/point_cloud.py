"""Generated point clouds and the rendering hints carried with them."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class Blending(Enum):
    NORMAL = "normal"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class RenderHints:
    """
    How the host should draw a cloud.

    Attributes:
        point_size: Point size in world units (pixels when not attenuated)
        size_attenuation: Shrink points with distance from the camera
        blending: Framebuffer blending mode
        depth_write: Whether points write to the depth buffer
        vertex_colors: Use the per-vertex color buffer instead of ``color``
        color: Uniform color when ``vertex_colors`` is off
        alpha_map: Mask each point with the sprite texture
    """
    point_size: float
    size_attenuation: bool = True
    blending: Blending = Blending.ADDITIVE
    depth_write: bool = False
    vertex_colors: bool = True
    color: Tuple[float, float, float] = (1.0, 1.0, 1.0)
    alpha_map: bool = False


class PointCloud:
    """
    Immutable position and color buffers plus the GPU handle made from them.

    The generator that created a cloud decides when it is disposed. The only
    mutable state is ``rotation_y``, a transform applied by the host.
    """

    def __init__(self, positions: np.ndarray, colors: np.ndarray,
                 hints: RenderHints, name: str = "points"):
        positions = np.ascontiguousarray(positions, dtype=np.float32)
        colors = np.ascontiguousarray(colors, dtype=np.float32)
        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f"positions must be (n, 3), got {positions.shape}")
        if colors.shape != positions.shape:
            raise ValueError(f"colors shape {colors.shape} does not match positions {positions.shape}")
        positions.setflags(write=False)
        colors.setflags(write=False)

        self.name = name
        self.hints = hints
        self.rotation_y = 0.0
        self._positions: Optional[np.ndarray] = positions
        self._colors: Optional[np.ndarray] = colors
        self._count = len(positions)
        self._gpu = None
        self._disposed = False

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else f"{self._count} points"
        return f"<PointCloud {self.name}: {state}>"

    @property
    def count(self) -> int:
        return self._count

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def positions(self) -> np.ndarray:
        self._check_alive()
        return self._positions

    @property
    def colors(self) -> np.ndarray:
        self._check_alive()
        return self._colors

    @property
    def gpu(self):
        """GPU-resident copy of the buffers, or None until the renderer uploads it."""
        return self._gpu

    def bind_gpu(self, handle):
        """Attach the GPU handle created from this cloud. It must provide ``delete()``."""
        self._check_alive()
        if self._gpu is not None:
            raise RuntimeError(f"{self!r} already owns a GPU handle")
        self._gpu = handle

    def dispose(self):
        """
        Release the GPU handle, then the CPU buffers.

        An error while deleting the GPU handle propagates and leaves the
        cloud undisposed. Disposing twice is a no-op.
        """
        if self._disposed:
            return
        if self._gpu is not None:
            self._gpu.delete()
            self._gpu = None
        self._positions = None
        self._colors = None
        self._disposed = True

    def _check_alive(self):
        if self._disposed:
            raise RuntimeError(f"{self!r} has been disposed")
