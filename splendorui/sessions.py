"""The new-game setup form and the sound settings screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional

from splendorui.options import OptionsPanel, OptionsType
from splendorui.panel import Event

GAME_MODES = ("Offline", "Client", "Server")
PLAYER_COUNTS = ("2", "3", "4")
TIMER_OPTION = "Timer"
AI_OPTION = "A.I."
SOUND_ON = "Sound On"
MUTE = "Mute"


class GameMode(Enum):
    OFFLINE = auto()
    CLIENT = auto()
    SERVER = auto()


_MODE_BY_NAME = {
    "Offline": GameMode.OFFLINE,
    "Client": GameMode.CLIENT,
    "Server": GameMode.SERVER,
}


@dataclass(frozen=True)
class PregameSetup:
    player_count: int
    game_mode: GameMode
    with_timer: bool
    with_ai: bool


def _row(
    title: str,
    type: OptionsType,
    window_size: tuple[float, float],
    top_ratio: float,
    offset: float,
) -> OptionsPanel:
    width, height = window_size
    return OptionsPanel(
        title,
        type,
        (50.0, top_ratio * height + offset),
        (width - 50.0, 0.15 * height),
    )


class PregameForm:
    """The choices made before a new game starts."""

    def __init__(self, window_size: tuple[float, float] = (1280.0, 720.0)) -> None:
        self.title = "New Game Setup"
        self.game_mode_panel = _row("Game Mode: ", OptionsType.RADIO, window_size, 0.2, 30.0)
        self.players_panel = _row("Players: ", OptionsType.RADIO, window_size, 0.4, 50.0)
        self.other_panel = _row("Other: ", OptionsType.CHECK, window_size, 0.6, 70.0)
        for name in GAME_MODES:
            self.game_mode_panel.add_option(name)
        for name in PLAYER_COUNTS:
            self.players_panel.add_option(name)
        for name in (TIMER_OPTION, AI_OPTION):
            self.other_panel.add_option(name)

    @property
    def panels(self) -> tuple[OptionsPanel, ...]:
        return (self.game_mode_panel, self.players_panel, self.other_panel)

    def handle_event(self, event: Event) -> None:
        for panel in self.panels:
            panel.handle_event(event)

    def setup(self) -> PregameSetup:
        """Read the checked options; raise ValueError if a required one is missing."""
        player_count = int(self.players_panel.first_checked())
        mode = _MODE_BY_NAME.get(self.game_mode_panel.first_checked())
        if mode is None:
            raise ValueError("Invalid game mode")
        return PregameSetup(
            player_count,
            mode,
            self.other_panel.is_checked(TIMER_OPTION),
            self.other_panel.is_checked(AI_OPTION),
        )


class SoundSettings:
    """Music and sound-effect switches."""

    def __init__(
        self,
        window_size: tuple[float, float] = (1280.0, 720.0),
        play_music: Optional[Callable[[], None]] = None,
        pause_music: Optional[Callable[[], None]] = None,
    ) -> None:
        self.title = "Settings"
        self.music_panel = _row("Music", OptionsType.CHECK, window_size, 0.2, 30.0)
        self.sfx_panel = _row("SFX", OptionsType.CHECK, window_size, 0.4, 50.0)
        for panel in (self.music_panel, self.sfx_panel):
            panel.add_option(SOUND_ON)
            panel.add_option(MUTE)
        self.active_sound = True
        self.active_sfx = True
        self._play_music = play_music
        self._pause_music = pause_music

    def handle_event(self, event: Event) -> None:
        self.music_panel.handle_event(event)
        self.sfx_panel.handle_event(event)

    def update(self) -> None:
        """Apply the first checked option of each panel; with none checked nothing changes."""
        music = self.music_panel.first_checked()
        if music == MUTE:
            self.active_sound = False
            if self._pause_music is not None:
                self._pause_music()
        elif music == SOUND_ON:
            self.active_sound = True
            if self._play_music is not None:
                self._play_music()

        sfx = self.sfx_panel.first_checked()
        if sfx == MUTE:
            self.active_sfx = False
        elif sfx == SOUND_ON:
            self.active_sfx = True