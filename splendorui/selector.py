"""Check boxes and radio marks that toggle on a left click."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple

from splendorui import colors
from splendorui.colors import Color
from splendorui.panel import Event


class SelectorType(Enum):
    CHECK = auto()
    RADIO = auto()


@dataclass(frozen=True)
class Design:
    fill_color: Color
    outline_color: Color


UNCHECKED_DESIGN = Design(colors.DARK_BLUE, colors.GOLD_YELLOW)
CHECKED_DESIGN = Design(colors.GOLD_YELLOW, Color(255, 255, 255))

_MARK_TEXTURES = {
    SelectorType.CHECK: "checkmark.png",
    SelectorType.RADIO: "radiomark.png",
}


class Rect(NamedTuple):
    left: int
    top: int
    width: int
    height: int

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.left + self.width and self.top <= y < self.top + self.height


class Selector:
    """A named on/off option."""

    def __init__(
        self,
        name: str,
        position: tuple[float, float] = (0.0, 0.0),
        size: tuple[float, float] = (100.0, 100.0),
        checked: bool = False,
    ) -> None:
        self.name = name
        self.position = (float(position[0]), float(position[1]))
        self.size = (float(size[0]), float(size[1]))
        self.checked = checked

    def set_state(self, state: bool) -> None:
        self.checked = bool(state)

    def change_state(self) -> None:
        self.set_state(not self.checked)


class SelectorBox(Selector):
    """A selector drawn as a small box that toggles when left-clicked."""

    def __init__(
        self,
        name: str,
        type: SelectorType = SelectorType.CHECK,
        position: tuple[float, float] = (0.0, 0.0),
        size: tuple[float, float] = (100.0, 100.0),
        unchecked_design: Design = UNCHECKED_DESIGN,
        checked_design: Design = CHECKED_DESIGN,
    ) -> None:
        super().__init__(name, position, size, False)
        self.type = type
        self.unchecked_design = unchecked_design
        self.checked_design = checked_design
        x, y = self.position
        width, height = self.size
        side = int(0.3 * height)
        self.rect = Rect(
            int(x + (width / 2.0 - 0.15 * height)),
            int(y + (0.6 * height / 2.0 + 0.15 * height)),
            side,
            side,
        )
        self.outline_thickness = self.rect.width / 8.0
        self.mark_texture = _MARK_TEXTURES[type]
        self.design = unchecked_design
        self.mark_color = colors.TRANSPARENT
        self._update_design()

    def contains(self, x: float, y: float) -> bool:
        return self.rect.contains(x, y)

    def handle_event(self, event: Event) -> None:
        if event.is_left_press and self.contains(event.x, event.y):
            self.change_state()

    def set_state(self, state: bool) -> None:
        self.checked = bool(state)
        self._update_design()

    def change_state(self) -> None:
        self.set_state(not self.checked)

    def _update_design(self) -> None:
        self.design = self.checked_design if self.checked else self.unchecked_design
        self.mark_color = colors.OPAQUE_WHITE if self.checked else colors.TRANSPARENT