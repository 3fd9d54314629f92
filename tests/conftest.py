import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from galaxy.random_source import RandomSource


class ScriptedRandomSource(RandomSource):
    """Replays a fixed list of values, cycling when it runs out."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next_uniform(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class FakeGpuHandle:
    """Stands in for GPU buffers; counts how many are alive."""

    live = 0

    def __init__(self, fail_on_delete=False):
        self.fail_on_delete = fail_on_delete
        self.deleted = False
        FakeGpuHandle.live += 1

    def delete(self):
        if self.fail_on_delete:
            raise RuntimeError("GPU release failed")
        self.deleted = True
        FakeGpuHandle.live -= 1


@pytest.fixture
def scripted():
    return ScriptedRandomSource


@pytest.fixture
def fake_gpu():
    FakeGpuHandle.live = 0
    yield FakeGpuHandle
    FakeGpuHandle.live = 0


def particle_draws(radius_fraction, base=0.5, sign=0.25):
    """One particle's worth of uniforms: radius, then (base, sign) per axis."""
    return [radius_fraction, base, sign, base, sign, base, sign]
