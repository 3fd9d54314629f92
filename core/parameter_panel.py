"""Keyboard-driven editor for the galaxy parameters."""

from decimal import Decimal
from typing import Callable, Optional

import pygame
from pygame.locals import *

from config import galaxy as config
from galaxy.parameters import (
    GalaxyParameters,
    ParameterCommitted,
    shift_brightness,
    shift_hue,
    to_hex,
)

RESET_CAMERA = "reset_camera"


def _decimals(step) -> int:
    return max(0, -Decimal(str(step)).as_tuple().exponent)


def snap(value: float, spec: dict):
    """Round ``value`` to the field's step and clamp it to the field's bounds."""
    step = spec["step"]
    snapped = round(round(value / step) * step, _decimals(step))
    snapped = max(spec["min"], min(spec["max"], snapped))
    if spec["kind"] == "int":
        return int(snapped)
    return float(snapped)


class ParameterPanel:
    """
    One row per galaxy parameter plus a "Reset Camera" action.

    UP/DOWN select a row, LEFT/RIGHT change the value while held (SHIFT for
    coarse steps, or brightness on color rows). The change is committed when
    the arrow key is released, so holding a key produces a single
    regeneration. SPACE/ENTER toggle booleans and run the reset action; TAB
    hides the panel.
    """

    def __init__(self, params: GalaxyParameters,
                 on_commit: Callable[[ParameterCommitted], None],
                 on_reset_camera: Callable[[], None]):
        self.on_commit = on_commit
        self.on_reset_camera = on_reset_camera
        self.values = params.as_dict()
        self.rows = [dict(spec) for spec in config.PARAMETER_FIELDS]
        self.rows.append({"field": RESET_CAMERA, "label": "Reset Camera", "kind": "action"})
        self.selected = 0
        self.visible = True
        self._pending: Optional[str] = None

    @property
    def selected_row(self) -> dict:
        return self.rows[self.selected]

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Returns True if the panel consumed the event."""
        if event.type == KEYDOWN:
            if event.key == K_TAB:
                self.visible = not self.visible
                return True
            if not self.visible:
                return False
            coarse = bool(getattr(event, "mod", 0) & KMOD_SHIFT)
            if event.key == K_UP:
                self.select(self.selected - 1)
            elif event.key == K_DOWN:
                self.select(self.selected + 1)
            elif event.key == K_LEFT:
                self.adjust(-1, coarse)
            elif event.key == K_RIGHT:
                self.adjust(1, coarse)
            elif event.key in (K_RETURN, K_KP_ENTER, K_SPACE):
                self.activate()
            else:
                return False
            return True
        elif event.type == KEYUP and event.key in (K_LEFT, K_RIGHT):
            self.commit_pending()
            return self.visible
        return False

    def select(self, index: int):
        self.commit_pending()
        self.selected = index % len(self.rows)

    def adjust(self, direction: int, coarse: bool = False):
        """Change the selected value by one step without committing it."""
        row = self.selected_row
        kind = row["kind"]
        name = row["field"]

        if kind in ("int", "float"):
            multiplier = config.PANEL["coarse_multiplier"] if coarse else 1
            self.values[name] = snap(self.values[name] + direction * row["step"] * multiplier, row)
        elif kind == "color":
            if coarse:
                self.values[name] = shift_brightness(self.values[name], direction * config.PANEL["brightness_step"])
            else:
                self.values[name] = shift_hue(self.values[name], direction * config.PANEL["hue_step"])
        elif kind == "bool":
            self.values[name] = not self.values[name]
            self._emit(name)
            return
        else:
            return
        self._pending = name

    def activate(self):
        row = self.selected_row
        if row["kind"] == "action":
            self.commit_pending()
            self.on_reset_camera()
        elif row["kind"] == "bool":
            self.adjust(1)

    def commit_pending(self):
        """Emit the edit in progress, if any."""
        if self._pending is not None:
            name = self._pending
            self._pending = None
            self._emit(name)

    def _emit(self, name: str):
        self.on_commit(ParameterCommitted(name, self.values[name]))

    def format_value(self, row: dict) -> str:
        kind = row["kind"]
        if kind == "action":
            return ""
        value = self.values[row["field"]]
        if kind == "color":
            return to_hex(value)
        if kind == "bool":
            return "on" if value else "off"
        if kind == "int":
            return f"{value:,}"
        return f"{value:.{_decimals(row['step'])}f}"

    def lines(self) -> list:
        """Text rows as (text, is_selected) pairs."""
        out = []
        for idx, row in enumerate(self.rows):
            value = self.format_value(row)
            text = f"{row['label']:<13}{value}" if value else f"[ {row['label']} ]"
            out.append((text, idx == self.selected))
        return out

    def draw(self, text_renderer, screen_size: tuple, x: int, y: int, line_height: int = 22):
        if not self.visible:
            return
        for idx, (text, selected) in enumerate(self.lines()):
            color = config.COLORS["highlight"] if selected else None
            prefix = "> " if selected else "  "
            text_renderer.draw_text(prefix + text, x, y + idx * line_height, screen_size, color)
