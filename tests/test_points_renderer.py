"""Tests for GPU buffer release and the renderer's handling of dead buffers."""

import numpy as np
import pytest

pytest.importorskip("OpenGL.GL")
points = pytest.importorskip("rendering.points")

from galaxy.point_cloud import PointCloud, RenderHints


class FakeVbo:
    """Stands in for ``OpenGL.arrays.vbo.VBO``; can fail its first delete."""

    def __init__(self, failures=0):
        self.failures = failures
        self.delete_calls = 0

    def delete(self):
        self.delete_calls += 1
        if self.failures:
            self.failures -= 1
            raise RuntimeError("glDeleteBuffers failed")


def make_buffers(colors_failures=0):
    buffers = points.GpuPointBuffers.__new__(points.GpuPointBuffers)
    buffers.count = 4
    buffers.deleted = False
    buffers.positions = FakeVbo()
    buffers.colors = FakeVbo(failures=colors_failures)
    return buffers


def test_delete_releases_both_buffers():
    buffers = make_buffers()
    positions, colors = buffers.positions, buffers.colors

    buffers.delete()

    assert buffers.deleted
    assert positions.delete_calls == colors.delete_calls == 1
    assert buffers.positions is None and buffers.colors is None


def test_partial_delete_failure_marks_buffers_dead():
    buffers = make_buffers(colors_failures=1)
    positions, colors = buffers.positions, buffers.colors

    with pytest.raises(RuntimeError, match="glDeleteBuffers failed"):
        buffers.delete()

    assert buffers.deleted
    assert buffers.positions is None
    assert buffers.colors is colors

    # Retrying only releases what is left
    buffers.delete()
    assert positions.delete_calls == 1
    assert colors.delete_calls == 2
    assert buffers.colors is None


def test_renderer_skips_cloud_with_dead_buffers(monkeypatch):
    gl_calls = []
    monkeypatch.setattr(points, "glPushMatrix", lambda: gl_calls.append("push"))

    cloud = PointCloud(np.zeros((4, 3)), np.ones((4, 3)), RenderHints(point_size=0.1))
    buffers = make_buffers(colors_failures=1)
    cloud.bind_gpu(buffers)

    with pytest.raises(RuntimeError):
        cloud.dispose()
    assert not cloud.disposed

    points.PointsRenderer().draw(cloud, viewport=None)
    assert gl_calls == []

    cloud.dispose()
    assert cloud.disposed
    assert cloud.gpu is None
