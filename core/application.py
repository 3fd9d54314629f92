"""Main application class: window, render loop and HUD."""

import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import galaxy as config
from galaxy import GalaxyParameters, GalaxySession, NumpyRandomSource
from rendering import PointsRenderer, SpriteTexture, TextRenderer
from .camera import Camera
from .input_handler import InputHandler
from .parameter_panel import ParameterPanel
from .viewport import Viewport, capped_pixel_ratio


class Application:
    """Hosts the galaxy session: owns the window, camera, panel and draw loop."""

    def __init__(self, params: GalaxyParameters, seed: int = None,
                 width: int = None, height: int = None):
        pygame.init()
        size = (width or config.WINDOW["width"], height or config.WINDOW["height"])
        pygame.display.set_mode(size, DOUBLEBUF | OPENGL | RESIZABLE)
        pygame.display.set_caption(config.WINDOW["title"])
        pygame.key.set_repeat(config.PANEL["key_repeat_delay"], config.PANEL["key_repeat_interval"])

        self.viewport = Viewport(*size, pixel_ratio=self._device_pixel_ratio())

        # Core components
        self.session = GalaxySession(params, random_source=NumpyRandomSource(seed))
        self.camera = Camera()
        self.panel = ParameterPanel(params, on_commit=self.session.commit, on_reset_camera=self.camera.reset)
        self.input_handler = InputHandler(self.camera, self.panel)

        # Rendering components
        self.text_renderer = TextRenderer()
        self.points_renderer = None

        # State
        self.clock = pygame.time.Clock()
        self.start_ticks = 0
        self.running = True
        self.fps = 0

        self._setup_gl()
        self.points_renderer = PointsRenderer(SpriteTexture.from_config())

        print("[App] Generating scene...")
        self.session.start()
        print("[App] Ready!")

    @staticmethod
    def _device_pixel_ratio() -> float:
        """
        Framebuffer pixels per window pixel, capped.

        pygame reports the same size for an OPENGL surface and its window,
        so the drawable size comes from the default viewport SDL gives a
        fresh context. Must run before anything calls glViewport.
        """
        _, _, drawable_w, drawable_h = (int(v) for v in glGetIntegerv(GL_VIEWPORT))
        return capped_pixel_ratio(pygame.display.get_window_size(), (drawable_w, drawable_h))

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        glDepthFunc(GL_LEQUAL)
        self._update_projection()

    def _update_projection(self):
        fb_w, fb_h = self.viewport.framebuffer_size
        glViewport(0, 0, fb_w, fb_h)
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(
            config.CAMERA["fov"],
            self.viewport.aspect,
            config.CAMERA["near_clip"],
            config.CAMERA["far_clip"]
        )
        glMatrixMode(GL_MODELVIEW)

    def _on_resize(self, width: int, height: int):
        # Display density does not change with window size
        self.viewport.resize(width, height)
        self._update_projection()

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == VIDEORESIZE:
                self._on_resize(event.w, event.h)
            elif not self.input_handler.handle_event(event):
                self.running = False

    def _update(self, dt: float):
        """Advance camera and animation."""
        dt = min(dt, 0.05)
        self.input_handler.handle_continuous_input(dt)
        self.camera.update(dt)

        elapsed = (pygame.time.get_ticks() - self.start_ticks) / 1000.0
        self.session.tick(elapsed)

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self.camera.apply()

        self.points_renderer.draw_scene(self.session.scene, self.viewport)

        # Draw HUD
        screen_size = self.viewport.framebuffer_size
        galaxy = self.session.galaxy
        count = galaxy.count if galaxy is not None else 0
        self.text_renderer.draw_text(
            f"Particles: {count:,}  |  FPS: {self.fps:.0f}",
            10, 10, screen_size
        )
        self.text_renderer.draw_text(
            "Arrows: edit | TAB: panel | Drag/WASD: orbit | Wheel/QE: zoom",
            10, 35, screen_size
        )
        self.panel.draw(self.text_renderer, screen_size, 10, 70)

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        print("[App] Starting main loop...")
        self.start_ticks = pygame.time.get_ticks()

        while self.running:
            dt = self.clock.tick() / 1000.0
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
        print("[App] Shutdown complete")
