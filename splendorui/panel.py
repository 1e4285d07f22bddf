"""Input events and the panel container that groups drawables and colliders."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Protocol


class EventType(Enum):
    MOUSE_MOVED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    KEY_PRESSED = auto()
    CLOSED = auto()


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()


@dataclass(frozen=True)
class Event:
    """A window event with the mouse position and button where relevant."""

    type: EventType
    x: float = 0.0
    y: float = 0.0
    button: Optional[MouseButton] = None

    @property
    def is_left_press(self) -> bool:
        return self.type is EventType.MOUSE_BUTTON_PRESSED and self.button is MouseButton.LEFT


class Collider(Protocol):
    def handle_event(self, event: Event) -> None: ...


class RenderTarget(Protocol):
    def draw(self, drawable: Any) -> None: ...


class Panel:
    """A titled rectangle holding content that is drawn and receives events."""

    def __init__(
        self,
        title: str,
        size: tuple[float, float] = (0.0, 0.0),
        position: tuple[float, float] = (0.0, 0.0),
        active: bool = True,
        interactable: bool = True,
    ) -> None:
        self.title = title
        self.size = (float(size[0]), float(size[1]))
        self.position = (float(position[0]), float(position[1]))
        self.active = active
        self.interactable = interactable
        self._colliders: list[Collider] = []
        self._drawables: list[Any] = []

    @property
    def colliders(self) -> tuple[Collider, ...]:
        return tuple(self._colliders)

    @property
    def drawables(self) -> tuple[Any, ...]:
        return tuple(self._drawables)

    def add_drawable(self, item: Any) -> None:
        self._drawables.append(item)

    def add_collider(self, item: Collider) -> None:
        self._colliders.append(item)

    def add_item(self, item: Any) -> None:
        """Add an item that is both drawn and receives events."""
        self._colliders.append(item)
        self._drawables.append(item)

    def collider(self, index: int) -> Optional[Collider]:
        """Return the collider at ``index``, or None when out of range."""
        if 0 <= index < len(self._colliders):
            return self._colliders[index]
        return None

    def drawable(self, index: int) -> Optional[Any]:
        """Return the drawable at ``index``, or None when out of range."""
        if 0 <= index < len(self._drawables):
            return self._drawables[index]
        return None

    def draw(self, target: RenderTarget) -> None:
        if self.active:
            for item in self._drawables:
                target.draw(item)

    def handle_event(self, event: Event) -> None:
        if self.active and self.interactable:
            for item in self._colliders:
                item.handle_event(event)