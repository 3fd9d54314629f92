"""Point cloud rendering with VBOs and point sprites."""

import math
import numpy as np
from OpenGL.GL import *
from OpenGL.arrays import vbo

from galaxy.point_cloud import Blending, PointCloud


class GpuPointBuffers:
    """VBO copies of a cloud's buffers. Owned by the cloud once bound."""

    def __init__(self, positions: np.ndarray, colors: np.ndarray = None):
        self.count = len(positions)
        self.deleted = False
        self.positions = vbo.VBO(np.ascontiguousarray(positions, dtype=np.float32), usage=GL_STATIC_DRAW)
        self.colors = None
        if colors is not None:
            self.colors = vbo.VBO(np.ascontiguousarray(colors, dtype=np.float32), usage=GL_STATIC_DRAW)

    def delete(self):
        """Release both VBOs. The handle is dead from the first call on."""
        self.deleted = True
        try:
            if self.positions is not None:
                self.positions.delete()
                self.positions = None
        finally:
            if self.colors is not None:
                self.colors.delete()
                self.colors = None
        print(f"[Render] Released GPU buffers for {self.count:,} points")


class PointsRenderer:
    """Draws every cloud in a scene according to its render hints."""

    def __init__(self, sprite=None):
        self.sprite = sprite

    def draw_scene(self, scene, viewport):
        for cloud in scene:
            self.draw(cloud, viewport)

    def _upload(self, cloud: PointCloud) -> GpuPointBuffers:
        if cloud.gpu is None:
            colors = cloud.colors if cloud.hints.vertex_colors else None
            cloud.bind_gpu(GpuPointBuffers(cloud.positions, colors))
        return cloud.gpu

    def draw(self, cloud: PointCloud, viewport):
        """Render one cloud as points, rotated by its Y transform."""
        if cloud.disposed or cloud.count == 0:
            return
        hints = cloud.hints
        buffers = self._upload(cloud)
        if buffers.deleted:
            # A failed release leaves no buffer safe to bind
            return

        glPushMatrix()
        glRotatef(math.degrees(cloud.rotation_y), 0.0, 1.0, 0.0)

        glEnable(GL_BLEND)
        if hints.blending == Blending.ADDITIVE:
            glBlendFunc(GL_SRC_ALPHA, GL_ONE)  # Additive blending for glow effect
        else:
            glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glDepthMask(GL_TRUE if hints.depth_write else GL_FALSE)

        glPointSize(max(1.0, viewport.point_size(hints.point_size, hints.size_attenuation)))
        if hints.size_attenuation:
            glPointParameterfv(GL_POINT_DISTANCE_ATTENUATION, (0.0, 0.0, 1.0))
        else:
            glPointParameterfv(GL_POINT_DISTANCE_ATTENUATION, (1.0, 0.0, 0.0))

        use_sprite = hints.alpha_map and self.sprite is not None
        if use_sprite:
            self.sprite.bind()
        else:
            glEnable(GL_POINT_SMOOTH)

        buffers.positions.bind()
        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, 0, None)

        if buffers.colors is not None:
            buffers.colors.bind()
            glEnableClientState(GL_COLOR_ARRAY)
            glColorPointer(3, GL_FLOAT, 0, None)
        else:
            glColor3f(*hints.color)

        glDrawArrays(GL_POINTS, 0, buffers.count)

        buffers.positions.unbind()
        glDisableClientState(GL_VERTEX_ARRAY)
        if buffers.colors is not None:
            buffers.colors.unbind()
            glDisableClientState(GL_COLOR_ARRAY)

        if use_sprite:
            self.sprite.unbind()
        else:
            glDisable(GL_POINT_SMOOTH)

        glDepthMask(GL_TRUE)
        glDisable(GL_BLEND)
        glPopMatrix()
