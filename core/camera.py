"""Orbit camera with damping, clamped zoom and a saved reset state."""

import math
import numpy as np
from config import galaxy as config


class Camera:
    """
    Orbits the origin. Rotation requests are damped: each update applies a
    fraction of the pending rotation and keeps the rest for later frames.
    Zoom eases toward a target distance clamped to the controls' limits.
    """

    def __init__(self):
        self.min_distance = config.CONTROLS["min_distance"]
        self.max_distance = config.CONTROLS["max_distance"]
        self.enable_damping = config.CONTROLS["enable_damping"]
        self.damping_factor = config.CONTROLS["damping_factor"]
        self.zoom_smoothing = config.CONTROLS["zoom_smoothing"]
        self.target = np.array([0.0, 0.0, 0.0])

        x, y, z = config.CAMERA["initial_position"]
        radius = math.sqrt(x * x + y * y + z * z)
        self._saved_state = (
            radius,
            math.degrees(math.atan2(z, x)) % 360,
            math.degrees(math.asin(y / radius)),
        )
        self.reset()

    def reset(self):
        """Return to the saved initial position and drop any pending motion."""
        self.radius, self.theta, self.phi = self._saved_state
        self.target_radius = self.radius
        self._pending_theta = 0.0
        self._pending_phi = 0.0

    def get_direction(self) -> np.ndarray:
        """Get the normalized direction vector from target to camera."""
        theta_rad = math.radians(self.theta)
        phi_rad = math.radians(self.phi)
        x = math.cos(phi_rad) * math.cos(theta_rad)
        y = math.sin(phi_rad)
        z = math.cos(phi_rad) * math.sin(theta_rad)
        return np.array([x, y, z])

    def get_position(self) -> np.ndarray:
        """Get the camera's world position."""
        return self.target + self.radius * self.get_direction()

    def rotate(self, d_theta: float, d_phi: float):
        """Request a rotation by the given angles in degrees."""
        if self.enable_damping:
            self._pending_theta += d_theta
            self._pending_phi += d_phi
        else:
            self._apply_rotation(d_theta, d_phi)

    def _apply_rotation(self, d_theta: float, d_phi: float):
        self.theta = (self.theta + d_theta) % 360
        self.phi = max(
            config.CAMERA["min_phi"],
            min(config.CAMERA["max_phi"], self.phi + d_phi)
        )

    def _clamp_distance(self, distance: float) -> float:
        return max(self.min_distance, min(self.max_distance, distance))

    def zoom(self, delta: float):
        """Immediately zoom by the given amount."""
        self.radius = self._clamp_distance(self.radius + delta)
        self.target_radius = self.radius

    def zoom_smooth(self, delta: float):
        """Smoothly zoom by the given amount."""
        self.target_radius = self._clamp_distance(self.target_radius + delta)

    def update(self, dt: float):
        """Update camera state (called each frame)."""
        if self.enable_damping:
            self._apply_rotation(
                self._pending_theta * self.damping_factor,
                self._pending_phi * self.damping_factor
            )
            self._pending_theta *= 1.0 - self.damping_factor
            self._pending_phi *= 1.0 - self.damping_factor

        self.radius += (self.target_radius - self.radius) * min(1.0, self.zoom_smoothing * dt)
        self.radius = self._clamp_distance(self.radius)

    def apply(self):
        """Apply the camera transformation to the OpenGL modelview matrix."""
        from OpenGL.GL import glLoadIdentity
        from OpenGL.GLU import gluLookAt

        pos = self.get_position()
        glLoadIdentity()
        gluLookAt(
            pos[0], pos[1], pos[2],
            self.target[0], self.target[1], self.target[2],
            0, 1, 0
        )
