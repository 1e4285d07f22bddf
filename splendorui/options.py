"""A row of check boxes or radio options under one title."""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from splendorui.panel import Event, Panel
from splendorui.selector import SelectorBox, SelectorType

OPTION_WIDTH = 200.0


class OptionsType(Enum):
    CHECK = auto()
    RADIO = auto()


class OptionsPanel(Panel):
    """A titled row of options; radio panels keep exactly one option checked."""

    def __init__(
        self,
        title: str,
        type: OptionsType,
        position: tuple[float, float] = (0.0, 0.0),
        size: tuple[float, float] = (500.0, 150.0),
        active: bool = True,
        title_width: Optional[float] = None,
    ) -> None:
        super().__init__(title, size, position, active)
        self.type = type
        self.font_size = 0.4 * self.size[1]
        # Without a font at hand the title's width is estimated from its length.
        self.title_width = (
            float(title_width) if title_width is not None else 0.5 * self.font_size * len(title)
        )
        self._last_checked = 0
        self.add_drawable(title)

    @property
    def options(self) -> tuple[SelectorBox, ...]:
        return tuple(self.colliders)  # type: ignore[arg-type]

    def add_option(self, name: str) -> SelectorBox:
        """Append an option to the right of the previous one and return it."""
        existing = self.options
        if existing:
            last = existing[-1].rect
            x = last.left + last.width
        else:
            x = self.position[0] + self.title_width
        box = SelectorBox(
            name,
            SelectorType[self.type.name],
            (x, self.position[1]),
            (OPTION_WIDTH, self.size[1]),
        )
        if not existing and self.type is OptionsType.RADIO:
            box.change_state()
            self._last_checked = 0
        self.add_item(box)
        return box

    def handle_event(self, event: Event) -> None:
        for option in self.options:
            option.handle_event(event)
        if event.is_left_press:
            self._update_options()

    def is_checked(self, name: str) -> bool:
        for option in self.options:
            if option.name == name:
                return option.checked
        raise ValueError("Invalid option name")

    def first_checked(self) -> str:
        """Return the name of the first checked option, or an empty string."""
        return next((option.name for option in self.options if option.checked), "")

    def _update_options(self) -> None:
        if self.type is not OptionsType.RADIO:
            return
        options = self.options
        for index, option in enumerate(options):
            if option.checked:
                if index != self._last_checked:
                    options[self._last_checked].change_state()
                    self._last_checked = index
            elif index == self._last_checked:
                options[self._last_checked].set_state(True)