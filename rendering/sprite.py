"""Soft circular sprite used as the alpha map of the star points."""

import numpy as np
import pygame
from OpenGL.GL import *

from config import galaxy as config


def make_soft_sprite(resolution: int) -> np.ndarray:
    """Radial falloff from opaque center to transparent edge, as uint8 alpha."""
    coords = (np.arange(resolution) + 0.5) / resolution * 2.0 - 1.0
    xx, yy = np.meshgrid(coords, coords)
    dist = np.sqrt(xx * xx + yy * yy)
    alpha = np.clip(1.0 - dist, 0.0, 1.0) ** 2
    return (alpha * 255).astype(np.uint8)


def load_sprite(path: str) -> np.ndarray:
    """Alpha from the green channel of an image file."""
    surface = pygame.image.load(path)
    green = pygame.surfarray.array3d(surface)[:, :, 1]
    return np.ascontiguousarray(green.T, dtype=np.uint8)


class SpriteTexture:
    """GL alpha texture applied to points with point sprites enabled."""

    def __init__(self, alpha: np.ndarray):
        height, width = alpha.shape
        self.texture_id = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, self.texture_id)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
        glPixelStorei(GL_UNPACK_ALIGNMENT, 1)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_ALPHA, width, height, 0,
                     GL_ALPHA, GL_UNSIGNED_BYTE, alpha.tobytes())
        glBindTexture(GL_TEXTURE_2D, 0)

    @classmethod
    def from_config(cls) -> "SpriteTexture":
        path = config.STARS["texture_path"]
        if path:
            print(f"[Render] Loading star sprite from {path}")
            return cls(load_sprite(path))
        return cls(make_soft_sprite(config.STARS["sprite_resolution"]))

    def bind(self):
        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, self.texture_id)
        glTexEnvi(GL_TEXTURE_ENV, GL_TEXTURE_ENV_MODE, GL_MODULATE)
        glEnable(GL_POINT_SPRITE)
        glTexEnvi(GL_POINT_SPRITE, GL_COORD_REPLACE, GL_TRUE)

    def unbind(self):
        glTexEnvi(GL_POINT_SPRITE, GL_COORD_REPLACE, GL_FALSE)
        glDisable(GL_POINT_SPRITE)
        glBindTexture(GL_TEXTURE_2D, 0)
        glDisable(GL_TEXTURE_2D)
