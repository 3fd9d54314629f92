"""Startup sequence and edit handling shared by the app and the tests."""

from typing import Optional

from config import galaxy as config
from .generator import GalaxyGenerator
from .parameters import GalaxyParameters, ParameterCommitted
from .point_cloud import PointCloud
from .random_source import RandomSource
from .scene import Scene
from .starfield import StarFieldGenerator


class GalaxySession:
    """
    Owns the scene, the current parameters and both generators.

    ``start`` seeds the star field once and builds the first galaxy;
    ``commit`` applies one panel edit and regenerates.
    """

    def __init__(self, params: Optional[GalaxyParameters] = None,
                 random_source: Optional[RandomSource] = None,
                 galaxy_generator: Optional[GalaxyGenerator] = None,
                 star_generator: Optional[StarFieldGenerator] = None):
        self.params = params or GalaxyParameters()
        self.scene = galaxy_generator.scene if galaxy_generator else Scene()
        self.galaxy_generator = galaxy_generator or GalaxyGenerator(self.scene, random_source)
        self.star_generator = star_generator or StarFieldGenerator(random_source)
        self.rotation_speed = float(config.ANIMATION["rotation_speed"])
        self.stars: Optional[PointCloud] = None
        self.started = False

    @property
    def galaxy(self) -> Optional[PointCloud]:
        return self.galaxy_generator.current

    def start(self):
        if self.started:
            raise RuntimeError("Session already started")
        self.started = True

        self.stars = self.star_generator.generate()
        self.scene.attach(self.stars)
        self.galaxy_generator.regenerate(self.params)

    def commit(self, event: ParameterCommitted) -> PointCloud:
        """
        Apply a finished edit and rebuild the galaxy.

        ``params`` only takes the edit once the rebuild succeeds, so it keeps
        describing the cloud on screen when regeneration raises.
        """
        new_params = self.params.apply(event)
        print(f"[Galaxy] {event.field} = {getattr(new_params, event.field)!r}")
        cloud = self.galaxy_generator.regenerate(new_params)
        self.params = new_params
        return cloud

    def tick(self, elapsed: float):
        """Advance the galaxy rotation to ``elapsed`` seconds since start."""
        galaxy = self.galaxy
        if galaxy is not None:
            galaxy.rotation_y = elapsed * self.rotation_speed
