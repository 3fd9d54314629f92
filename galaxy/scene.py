"""Minimal scene graph: the ordered set of clouds the renderer draws."""

from typing import Iterator, List

from .point_cloud import PointCloud


class Scene:
    """Clouds are drawn in attach order."""

    def __init__(self):
        self._clouds: List[PointCloud] = []

    def __len__(self) -> int:
        return len(self._clouds)

    def __iter__(self) -> Iterator[PointCloud]:
        return iter(list(self._clouds))

    def __contains__(self, cloud: PointCloud) -> bool:
        return any(c is cloud for c in self._clouds)

    def attach(self, cloud: PointCloud):
        if cloud in self:
            raise ValueError(f"{cloud!r} is already attached")
        if cloud.disposed:
            raise ValueError(f"Cannot attach disposed cloud {cloud!r}")
        self._clouds.append(cloud)

    def detach(self, cloud: PointCloud):
        for idx, existing in enumerate(self._clouds):
            if existing is cloud:
                del self._clouds[idx]
                return
        raise ValueError(f"{cloud!r} is not attached")
