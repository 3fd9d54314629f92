"""Galaxy parameter set, commit events and color helpers."""

from dataclasses import dataclass, fields, replace
from typing import Tuple

import pygame

from config import galaxy as config

RGB = Tuple[float, float, float]

FIELD_SPECS = {spec["field"]: spec for spec in config.PARAMETER_FIELDS}


def parse_color(value) -> RGB:
    """
    Convert a color description to an RGB triple in the 0-1 range.

    Accepts "#rrggbb" strings, pygame color names, RGB triples of floats
    (0-1) or ints (0-255), and pygame.Color instances. No gamma conversion
    is applied.
    """
    if isinstance(value, pygame.Color):
        return (value.r / 255.0, value.g / 255.0, value.b / 255.0)
    if isinstance(value, str):
        return parse_color(pygame.Color(value))
    components = tuple(value)
    if len(components) != 3:
        raise ValueError(f"Expected an RGB triple, got {value!r}")
    if all(isinstance(c, int) and not isinstance(c, bool) for c in components):
        return tuple(max(0, min(255, c)) / 255.0 for c in components)
    return tuple(max(0.0, min(1.0, float(c))) for c in components)


def to_hex(rgb: RGB) -> str:
    """Format an RGB triple as #rrggbb."""
    r, g, b = (int(round(max(0.0, min(1.0, c)) * 255)) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def shift_hue(rgb: RGB, degrees: float) -> RGB:
    """Rotate the hue of a color, keeping saturation and brightness."""
    color = pygame.Color(*(int(round(c * 255)) for c in rgb))
    h, s, v, a = color.hsva
    color.hsva = ((h + degrees) % 360.0, s, v, a)
    return parse_color(color)


def shift_brightness(rgb: RGB, percent: float) -> RGB:
    """Raise or lower the HSV value of a color, clamped to 0-100%."""
    color = pygame.Color(*(int(round(c * 255)) for c in rgb))
    h, s, v, a = color.hsva
    color.hsva = (h, s, max(0.0, min(100.0, v + percent)), a)
    return parse_color(color)


@dataclass(frozen=True)
class ParameterCommitted:
    """A single finished edit coming from the parameter panel."""
    field: str
    value: object


@dataclass(frozen=True)
class GalaxyParameters:
    """
    Inputs of the galaxy generator.

    Values are not validated here: the panel and the CLI clamp them, the
    generator trusts them.
    """
    count: int = config.GALAXY["count"]
    size: float = config.GALAXY["size"]
    radius: float = config.GALAXY["radius"]
    branches: int = config.GALAXY["branches"]
    spin: float = config.GALAXY["spin"]
    randomness: float = config.GALAXY["randomness"]
    randomness_power: float = config.GALAXY["randomness_power"]
    inside_color: RGB = parse_color(config.GALAXY["inside_color"])
    outside_color: RGB = parse_color(config.GALAXY["outside_color"])
    size_attenuation: bool = config.GALAXY["size_attenuation"]

    @classmethod
    def from_dict(cls, values: dict) -> "GalaxyParameters":
        """Build parameters from defaults overridden by ``values``."""
        params = cls()
        for name, value in values.items():
            params = params.with_value(name, value)
        return params

    @classmethod
    def from_preset(cls, name: str) -> "GalaxyParameters":
        if name not in config.PRESETS:
            raise ValueError(f"Unknown preset: {name!r} (available: {', '.join(config.PRESETS)})")
        return cls.from_dict(config.PRESETS[name])

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def with_value(self, name: str, value) -> "GalaxyParameters":
        """Return a copy with one field replaced, coercing the value to the field's type."""
        spec = FIELD_SPECS.get(name)
        if spec is None:
            raise ValueError(f"Unknown galaxy parameter: {name!r}")

        kind = spec["kind"]
        if kind == "int":
            coerced = max(0, int(round(float(value))))
        elif kind == "float":
            coerced = float(value)
        elif kind == "bool":
            coerced = bool(value)
        else:
            coerced = parse_color(value)
        return replace(self, **{name: coerced})

    def apply(self, event: ParameterCommitted) -> "GalaxyParameters":
        return self.with_value(event.field, event.value)

    def clamped(self) -> "GalaxyParameters":
        """Return a copy with every bounded field clamped to its panel range."""
        changes = {}
        for name, spec in FIELD_SPECS.items():
            if "min" not in spec:
                continue
            value = getattr(self, name)
            changes[name] = type(value)(max(spec["min"], min(spec["max"], value)))
        return replace(self, **changes)
