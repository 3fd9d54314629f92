"""Configuration for the procedural galaxy generator."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Galaxy Generator"
}

CAMERA = {
    "fov": 75.0,
    "near_clip": 0.1,
    "far_clip": 100.0,
    "initial_position": (0.0, 9.0, 10.0),
    "min_phi": -89.0,
    "max_phi": 89.0,
    "keyboard_rotate_speed": 60.0,
    "keyboard_zoom_speed": 6.0,
    "mouse_sensitivity": 0.3
}

# Orbit controls
CONTROLS = {
    "enable_damping": True,
    "damping_factor": 0.05,        # Fraction of pending rotation applied per frame
    "min_distance": 2.0,
    "max_distance": 20.0,
    "zoom_smoothing": 8.0,
}

VIEWPORT = {
    "max_pixel_ratio": 2.0,
}

# Initial galaxy parameters
GALAXY = {
    "count": 100_000,
    "size": 0.01,
    "radius": 6.0,
    "branches": 4,
    "spin": 1.2,
    "randomness": 0.45,
    "randomness_power": 0.144,
    "inside_color": "#ff6030",
    "outside_color": "#1b3984",
    "size_attenuation": True,
}

# Editable fields, in panel order. Colors and booleans have no numeric bounds.
PARAMETER_FIELDS = [
    {"field": "count", "label": "count", "kind": "int", "min": 100, "max": 200_000, "step": 100},
    {"field": "size", "label": "size", "kind": "float", "min": 0.001, "max": 0.1, "step": 0.001},
    {"field": "size_attenuation", "label": "Attenuation", "kind": "bool"},
    {"field": "radius", "label": "radius", "kind": "float", "min": 0.01, "max": 20.0, "step": 0.01},
    {"field": "branches", "label": "branches", "kind": "int", "min": 2, "max": 20, "step": 1},
    {"field": "spin", "label": "spin", "kind": "float", "min": -5.0, "max": 5.0, "step": 0.1},
    {"field": "randomness", "label": "noise", "kind": "float", "min": 0.01, "max": 2.0, "step": 0.01},
    {"field": "randomness_power", "label": "power", "kind": "float", "min": -1.0, "max": 10.0, "step": 0.001},
    {"field": "inside_color", "label": "insideColor", "kind": "color"},
    {"field": "outside_color", "label": "outsideColor", "kind": "color"},
]

PANEL = {
    "hue_step": 5.0,               # Degrees per arrow press
    "brightness_step": 5.0,        # HSV value percent per SHIFT+arrow press
    "coarse_multiplier": 10,
    "key_repeat_delay": 250,       # ms
    "key_repeat_interval": 25,     # ms
}

# Background star field
STARS = {
    "count": 800,
    "extent": 40.0,                # Side of the cube centered at the origin
    "size": 0.3,
    "size_attenuation": True,
    "color": (1.0, 1.0, 1.0),
    "texture_path": None,          # Image used as alpha map; None = procedural sprite
    "sprite_resolution": 64,
}

ANIMATION = {
    "rotation_speed": 1.0 / 3.0,   # Radians per second around the Y axis
}

COLORS = {
    "background": (0.0, 0.0, 0.0, 1.0),
    "text": (0.9, 0.9, 0.9),
    "highlight": (255, 200, 90),
}

# =============================================================================
# PRESETS - partial overrides of GALAXY
# =============================================================================

PRESETS = {
    "classic": {},
    "pinwheel": {
        "branches": 6,
        "spin": 2.5,
        "randomness": 0.2,
        "randomness_power": 3.0,
    },
    "nebula": {
        "count": 150_000,
        "radius": 10.0,
        "branches": 3,
        "spin": -0.8,
        "randomness": 1.2,
        "randomness_power": 1.5,
        "inside_color": "#ffd27f",
        "outside_color": "#5a1d8f",
    },
    "tight": {
        "count": 50_000,
        "radius": 4.0,
        "branches": 2,
        "spin": 4.0,
        "randomness": 0.1,
        "randomness_power": 5.0,
        "size": 0.02,
    },
}
