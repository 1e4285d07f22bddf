"""Win counts per player, gathered from the game's log file."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional, Union

LOG_FILE = "../Logging/LogFileStream.log"
PLAYERS = ("Adrian", "Bogdan", "Eugen", "Teodor")
PLACEHOLDER_PLAYER = "?"
NO_DATE = "None"
WIN_MARKER = "[Win]"
_DATE_START = 9
_DATE_LENGTH = 21


def is_win_line(line: str) -> bool:
    """Return whether a log line records a win."""
    return WIN_MARKER in line


def player_in_line(line: str) -> Optional[str]:
    """Return the first known player named in ``line``, or None."""
    return next((name for name in PLAYERS if name in line), None)


@dataclass(frozen=True)
class LeaderboardEntry:
    name: str
    wins: int = 0
    last_win: str = NO_DATE


class Leaderboard:
    """Win records for the known players, keyed by name."""

    def __init__(self, entries: Optional[Mapping[str, LeaderboardEntry]] = None) -> None:
        if entries is None:
            entries = {
                name: LeaderboardEntry(name) for name in (*PLAYERS, PLACEHOLDER_PLAYER)
            }
        self._entries = dict(sorted(entries.items()))

    def __getitem__(self, name: str) -> LeaderboardEntry:
        return self._entries[name]

    def __iter__(self) -> Iterator[LeaderboardEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Leaderboard:
        """Count the wins recorded in the given log lines."""
        board = cls()
        for line in lines:
            line = line.rstrip("\r\n")
            if not is_win_line(line):
                continue
            if len(line) < _DATE_START:
                raise ValueError(f"win line too short to hold a date: {line!r}")
            date = line[_DATE_START:_DATE_START + _DATE_LENGTH]
            name = player_in_line(line)
            entry = board._entries.get(name) if name is not None else None
            if entry is not None:
                board._entries[name] = replace(entry, wins=entry.wins + 1, last_win=date)
        return board

    @classmethod
    def load(cls, path: Union[str, Path] = LOG_FILE) -> Leaderboard:
        """Read a log file; a missing file yields an empty record."""
        try:
            with open(path, encoding="utf-8") as handle:
                return cls.from_lines(handle)
        except FileNotFoundError:
            return cls()

    def ranked(self) -> list[LeaderboardEntry]:
        """Entries by wins, most first; ties keep name order."""
        return sorted(self._entries.values(), key=lambda entry: -entry.wins)