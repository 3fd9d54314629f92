"""Window size bookkeeping: aspect ratio, pixel density and point sizes."""

from config import galaxy as config


def capped_pixel_ratio(window_size: tuple, drawable_size: tuple,
                       cap: float = config.VIEWPORT["max_pixel_ratio"]) -> float:
    """Ratio of framebuffer pixels to window pixels, never above ``cap``."""
    window_w, window_h = window_size
    drawable_w, drawable_h = drawable_size
    if window_w <= 0 or window_h <= 0:
        return 1.0
    ratio = max(drawable_w / window_w, drawable_h / window_h, 1.0)
    return min(ratio, cap)


class Viewport:
    """Current output size of the renderer."""

    def __init__(self, width: int, height: int, pixel_ratio: float = 1.0):
        self.width = width
        self.height = height
        self.pixel_ratio = pixel_ratio

    def resize(self, width: int, height: int, pixel_ratio: float = None):
        self.width = max(1, int(width))
        self.height = max(1, int(height))
        if pixel_ratio is not None:
            self.pixel_ratio = pixel_ratio

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def framebuffer_size(self) -> tuple:
        return (int(self.width * self.pixel_ratio), int(self.height * self.pixel_ratio))

    def point_size(self, size: float, size_attenuation: bool) -> float:
        """
        Base point size in framebuffer pixels.

        Attenuated sizes are world units and still need dividing by the
        eye distance, which GL does through the distance attenuation factors.
        """
        pixels = size * self.pixel_ratio
        if size_attenuation:
            # Window height: pixel_ratio is already in ``pixels``
            pixels *= self.height * 0.5
        return pixels
