"""Side panels showing each player's name, prestige and profile icon."""

from __future__ import annotations

import random
from typing import Any, Callable, Collection, Optional, Sequence

from splendorui import colors
from splendorui.panel import Event, EventType, MouseButton, Panel

PADDING = 0.1
FONT_SIZE = 30
PROFILE_SHARE = 0.40
ICONS_DIR = "../external/Resources/Textures/UI"
USER_ICON_COUNT = 4
COMPUTER_ICON = f"{ICONS_DIR}/computer.png"
DEFAULT_USER_ICONS = tuple(f"{ICONS_DIR}/user{i}.png" for i in range(1, USER_ICON_COUNT + 1))
PRESTIGE_PREFIX = "Prestige Points:"
CLICK_TO_VIEW = "(Click to view hand)"

OVER_SFX = "OverSFX"
BUTTON_SFX = "ButtonSFX"

MAX_PLAYERS = 4
PANEL_PADDING_SHARE = 0.04
PANEL_SHARE = 0.2
POINTER_FILE = f"{ICONS_DIR}/pointer.png"
POINTER_PADDING = 0.2


class PlayerPanel(Panel):
    """One player's panel; clicking it asks for that player's hand to be shown."""

    def __init__(
        self,
        name: str,
        computer: bool = False,
        position: tuple[float, float] = (0.0, 0.0),
        size: tuple[float, float] = (1024.0, 100.0),
        active: bool = True,
        player: Any = None,
        user_icons: Sequence[str] = DEFAULT_USER_ICONS,
        play_sfx: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__("PlayerPanel", size, position, active)
        self.name = name
        self.computer = computer
        self.player = player
        self.triggered = False
        self.prestige = 0
        self.click_to_view = CLICK_TO_VIEW
        self._user_icons = tuple(user_icons)
        self._play_sfx = play_sfx
        self._hovered = False
        self._pressed = False

        x, y = self.position
        width, height = self.size
        self.profile_radius = (height - 2 * PADDING * height) / 2
        self.profile_center = (x + width * PROFILE_SHARE / 2, y + height / 2)
        self.texture: Optional[str] = COMPUTER_ICON if computer else None

        self.fill_color = colors.NEUTRAL_GRAY
        self.outline_color = colors.GOLD_YELLOW
        self.outline_thickness = 3

        for item in ("background", "profile", self.name, "prestige", self.click_to_view):
            self.add_drawable(item)

    @property
    def prestige_label(self) -> str:
        return f"{PRESTIGE_PREFIX} {self.prestige}"

    def add_prestige_points(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"prestige points cannot be negative: {points}")
        self.prestige += points

    def set_prestige_points(self, points: int) -> None:
        if points < 0:
            raise ValueError(f"prestige points cannot be negative: {points}")
        self.prestige = points

    def set_user_texture(self, texture_id: int) -> None:
        """Give a human player one of the user icons; computers keep theirs."""
        if not self.computer and 0 <= texture_id < min(len(self._user_icons), USER_ICON_COUNT):
            self.texture = self._user_icons[texture_id]

    def contains(self, x: float, y: float) -> bool:
        left, top = self.position
        width, height = self.size
        return left <= x < left + width and top <= y < top + height

    def handle_event(self, event: Event) -> None:
        inside = self.contains(event.x, event.y)
        if event.type is EventType.MOUSE_MOVED:
            if inside and not self._hovered:
                self._hovered = True
                self.on_mouse_enter()
            elif not inside and self._hovered:
                self._hovered = False
                self._pressed = False
                self.on_mouse_leave()
        elif event.type is EventType.MOUSE_BUTTON_PRESSED and event.button is MouseButton.LEFT:
            if inside:
                self._hovered = True
                self._pressed = True
                self.on_mouse_left_click()
        elif event.type is EventType.MOUSE_BUTTON_RELEASED and event.button is MouseButton.LEFT:
            if inside and self._pressed:
                self.on_mouse_left_release()
            self._pressed = False

    def on_mouse_enter(self) -> None:
        self.fill_color = colors.LIGHT_GRAY
        self.outline_color = colors.NEUTRAL_WHITE
        self._sound(OVER_SFX)

    def on_mouse_leave(self) -> None:
        self.fill_color = colors.NEUTRAL_GRAY
        self.outline_color = colors.GOLD_YELLOW

    def on_mouse_left_click(self) -> None:
        self.fill_color = colors.DARK_GRAY
        self.outline_color = colors.LIGHT_GRAY
        self._sound(BUTTON_SFX)

    def on_mouse_left_release(self) -> None:
        self.fill_color = colors.LIGHT_GRAY
        self.outline_color = colors.NEUTRAL_WHITE
        self.triggered = True

    def _sound(self, effect: str) -> None:
        if self._play_sfx is not None:
            self._play_sfx(effect)


class PlayersPanel(Panel):
    """A column of player panels with a pointer at the player whose turn it is."""

    def __init__(
        self,
        names: Sequence[str],
        position: tuple[float, float] = (0.0, 0.0),
        size: tuple[float, float] = (1024.0, 100.0),
        active: bool = True,
        computers: Collection[str] = (),
        rng: Optional[random.Random] = None,
        play_sfx: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__("PlayersPanel", size, position, active)
        if not 1 <= len(names) <= MAX_PLAYERS:
            raise ValueError(f"between 1 and {MAX_PLAYERS} players are needed, got {len(names)}")
        icons = list(DEFAULT_USER_ICONS)
        (rng or random.Random()).shuffle(icons)
        self.user_icons = tuple(icons)

        x, y = self.position
        width, height = self.size
        self._panels: list[PlayerPanel] = []
        for index, name in enumerate(names):
            panel = PlayerPanel(
                name,
                name in computers,
                (x, y + (index + 1) * PANEL_PADDING_SHARE * height + index * PANEL_SHARE * height),
                (width, PANEL_SHARE * height),
                player=name,
                user_icons=self.user_icons,
                play_sfx=play_sfx,
            )
            panel.set_user_texture(index)
            self._panels.append(panel)

        panel_height = self._panels[0].size[1]
        side = panel_height - 2 * POINTER_PADDING * panel_height
        self.pointer_texture = POINTER_FILE
        self.pointer_size = (side, side)
        self.pointer_positions = tuple(
            panel.position[1] + POINTER_PADDING * panel.size[1] for panel in self._panels
        )
        self.current_index = 0

        for panel in self._panels:
            self.add_drawable(panel)
        self.add_drawable("pointer")
        for panel in self._panels:
            self.add_collider(panel)

    @property
    def panels(self) -> tuple[PlayerPanel, ...]:
        return tuple(self._panels)

    @property
    def current(self) -> PlayerPanel:
        return self._panels[self.current_index]

    @property
    def current_player_name(self) -> str:
        return self.current.name

    @property
    def pointer_position(self) -> tuple[float, float]:
        return (self.position[0], self.pointer_positions[self.current_index])

    def point_to_next_player(self) -> None:
        self.current_index = (self.current_index + 1) % len(self._panels)

    def take_triggered(self) -> Optional[PlayerPanel]:
        """Return the last clicked panel, if any, and clear every trigger."""
        triggered = None
        for panel in self._panels:
            if panel.triggered:
                triggered = panel
            panel.triggered = False
        return triggered

    def add_prestige_points_to_current(self, points: int) -> None:
        self.current.add_prestige_points(points)

    def sync_adversary_prestige_points(self, points: int) -> None:
        """Set the prestige of the opponent in a two-player game."""
        adversary = 1 if self.current_index == 0 else 0
        if adversary >= len(self._panels):
            raise IndexError("there is no adversary to update")
        self._panels[adversary].set_prestige_points(points)