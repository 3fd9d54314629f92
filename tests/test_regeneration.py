"""Tests for the regenerate lifecycle and point cloud disposal."""

import numpy as np
import pytest

from galaxy import (
    GalaxyGenerator, GalaxyParameters, GalaxySession, GeneratorState, NumpyRandomSource,
    ParameterCommitted, Scene,
)
from galaxy.point_cloud import PointCloud, RenderHints


def make_generator():
    return GalaxyGenerator(Scene(), NumpyRandomSource(seed=7))


def test_first_regenerate_populates_and_attaches():
    generator = make_generator()
    assert generator.state == GeneratorState.EMPTY

    cloud = generator.regenerate(GalaxyParameters(count=500))

    assert generator.state == GeneratorState.POPULATED
    assert generator.current is cloud
    assert cloud in generator.scene
    assert len(generator.scene) == 1


def test_regenerate_disposes_and_detaches_previous():
    generator = make_generator()
    params = GalaxyParameters(count=500)
    first = generator.regenerate(params)
    second = generator.regenerate(params)

    assert first.disposed
    assert first not in generator.scene
    assert second in generator.scene
    assert len(generator.scene) == 1
    assert first.count == second.count == params.count


class RecordingScene(Scene):
    """Scene that logs attach/detach calls with the state seen at call time."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def attach(self, cloud):
        self.calls.append(("attach", cloud, cloud.disposed, len(self)))
        super().attach(cloud)

    def detach(self, cloud):
        self.calls.append(("detach", cloud, cloud.disposed, len(self)))
        super().detach(cloud)


def test_regenerate_disposes_then_detaches_before_attaching_new_cloud():
    scene = RecordingScene()
    generator = GalaxyGenerator(scene, NumpyRandomSource(seed=7))
    params = GalaxyParameters(count=50)

    first = generator.regenerate(params)
    second = generator.regenerate(params)

    # Old cloud is released, then removed, and only then is the new one added
    assert scene.calls == [
        ("attach", first, False, 0),
        ("detach", first, True, 1),
        ("attach", second, False, 0),
    ]


def test_repeated_regenerate_does_not_accumulate_resources(fake_gpu):
    generator = make_generator()
    params = GalaxyParameters(count=200)
    previous = []

    for _ in range(25):
        cloud = generator.regenerate(params)
        # What the renderer does on the next draw
        cloud.bind_gpu(fake_gpu())
        previous.append(cloud)
        assert fake_gpu.live == 1
        assert len(generator.scene) == 1

    assert all(c.disposed for c in previous[:-1])
    assert not previous[-1].disposed
    assert generator.generation == 25


def test_count_change_mid_session():
    generator = make_generator()
    old = generator.regenerate(GalaxyParameters(count=1000))
    new = generator.regenerate(GalaxyParameters(count=50_000))

    assert old.disposed
    assert new.count == 50_000
    assert new.positions.shape == (50_000, 3)
    assert list(generator.scene) == [new]


def test_dispose_failure_keeps_last_cloud_attached(fake_gpu):
    generator = make_generator()
    cloud = generator.regenerate(GalaxyParameters(count=100))
    cloud.bind_gpu(fake_gpu(fail_on_delete=True))

    with pytest.raises(RuntimeError, match="GPU release failed"):
        generator.regenerate(GalaxyParameters(count=200))

    assert generator.current is cloud
    assert cloud in generator.scene
    assert not cloud.disposed
    assert cloud.positions.shape == (100, 3)


def test_failed_commit_keeps_session_params_in_sync(fake_gpu):
    session = GalaxySession(GalaxyParameters(count=100), random_source=NumpyRandomSource(seed=5))
    session.start()
    session.galaxy.bind_gpu(fake_gpu(fail_on_delete=True))

    with pytest.raises(RuntimeError, match="GPU release failed"):
        session.commit(ParameterCommitted("count", 500))

    assert session.params.count == session.galaxy.count == 100

    # A later edit must not carry the failed one along
    session.galaxy.gpu.fail_on_delete = False
    cloud = session.commit(ParameterCommitted("branches", 5))
    assert session.params.count == cloud.count == 100
    assert session.params.branches == 5


def test_generation_failure_leaves_generator_empty():
    class FailingSource(NumpyRandomSource):
        fail = False

        def uniform_array(self, n):
            if self.fail:
                raise MemoryError("out of memory")
            return super().uniform_array(n)

    source = FailingSource(seed=3)
    generator = GalaxyGenerator(Scene(), source)
    old = generator.regenerate(GalaxyParameters(count=100))

    source.fail = True
    with pytest.raises(MemoryError):
        generator.regenerate(GalaxyParameters(count=100))

    assert old.disposed
    assert generator.state == GeneratorState.EMPTY
    assert len(generator.scene) == 0


def test_disposed_cloud_rejects_buffer_access(fake_gpu):
    cloud = PointCloud(np.zeros((3, 3)), np.ones((3, 3)), RenderHints(point_size=0.1))
    handle = fake_gpu()
    cloud.bind_gpu(handle)

    cloud.dispose()
    cloud.dispose()

    assert handle.deleted
    assert cloud.gpu is None
    assert len(cloud) == 3
    with pytest.raises(RuntimeError):
        cloud.positions
    with pytest.raises(RuntimeError):
        cloud.bind_gpu(fake_gpu())


def test_cloud_accepts_only_one_gpu_handle(fake_gpu):
    cloud = PointCloud(np.zeros((2, 3)), np.zeros((2, 3)), RenderHints(point_size=0.1))
    cloud.bind_gpu(fake_gpu())
    with pytest.raises(RuntimeError):
        cloud.bind_gpu(fake_gpu())


def test_cloud_rejects_mismatched_buffers():
    with pytest.raises(ValueError):
        PointCloud(np.zeros((4, 3)), np.zeros((3, 3)), RenderHints(point_size=0.1))
    with pytest.raises(ValueError):
        PointCloud(np.zeros((4, 2)), np.zeros((4, 2)), RenderHints(point_size=0.1))


def test_scene_attach_detach_rules():
    scene = Scene()
    cloud = PointCloud(np.zeros((1, 3)), np.zeros((1, 3)), RenderHints(point_size=0.1))
    scene.attach(cloud)
    with pytest.raises(ValueError):
        scene.attach(cloud)
    scene.detach(cloud)
    with pytest.raises(ValueError):
        scene.detach(cloud)
    cloud.dispose()
    with pytest.raises(ValueError):
        scene.attach(cloud)
