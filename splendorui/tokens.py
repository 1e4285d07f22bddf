"""Choosing gem tokens to take from the board and to hand back when over the limit."""

from __future__ import annotations

from collections import Counter
from typing import Hashable, Mapping, Optional

HELD_TOKENS_LIMIT = 10
PICK_SLOTS = 3
SAME_TYPE_MINIMUM = 3


class TokenPicker:
    """Collects the tokens a player takes from the board in one turn.

    A player takes up to three tokens of different types, or two of the same
    type when enough of that type are left on the board.
    """

    def __init__(self) -> None:
        self._slots: list[Optional[Hashable]] = [None] * PICK_SLOTS
        self.has_picked = False
        self.last_picked: Optional[Hashable] = None

    @property
    def picked(self) -> tuple[Optional[Hashable], ...]:
        """The three pick slots, empty ones as None."""
        return tuple(self._slots)

    def pick(self, token: Hashable, available: int) -> bool:
        """Try to take ``token`` when ``available`` are left; return whether it was taken."""
        if available <= 0:
            return False
        first, second, third = self._slots
        if third is not None:
            return False
        if first is None:
            self._slots[0] = token
            self.has_picked = True
        elif second is None:
            if token == first and available < SAME_TYPE_MINIMUM:
                return False
            self._slots[1] = token
        elif token not in (first, second) and first != second:
            self._slots[2] = token
        else:
            return False
        self.last_picked = token
        return True

    def clear(self) -> None:
        """Empty every slot and forget the last pick."""
        self._slots = [None] * PICK_SLOTS
        self.has_picked = False
        self.last_picked = None


class TokenReturnSelection:
    """Tracks which tokens a player hands back to get down to the held-token limit."""

    def __init__(self, limit: int = HELD_TOKENS_LIMIT) -> None:
        self.limit = limit
        self.confirmed = False
        self.warning = False
        self._initial: Counter = Counter()
        self._remaining: Counter = Counter()
        self._to_return: Counter = Counter()
        self.initial_count = 0
        self.count = 0

    @property
    def remaining(self) -> dict[Hashable, int]:
        return {token: n for token, n in self._remaining.items() if n}

    @property
    def to_return(self) -> dict[Hashable, int]:
        return {token: n for token, n in self._to_return.items() if n}

    @property
    def locked(self) -> bool:
        """True once the held count is down to the limit and no more may be handed back."""
        return self.count == self.limit

    def set_initial(self, tokens: Mapping[Hashable, int]) -> None:
        """Start a new selection from the tokens the player holds."""
        if any(n < 0 for n in tokens.values()):
            raise ValueError("token counts cannot be negative")
        self._initial = Counter(dict(tokens))
        self.reset()

    def pick_to_return(self, token: Hashable) -> None:
        """Move one ``token`` from the held tokens to those handed back."""
        if self.locked:
            raise ValueError("no more tokens need to be returned")
        if self._remaining[token] <= 0:
            raise ValueError(f"no {token!r} token left to return")
        self._remaining[token] -= 1
        self._to_return[token] += 1
        self.count -= 1
        self._check_count()

    def put_back(self, token: Hashable) -> None:
        """Move one ``token`` from those handed back to the held tokens."""
        if self._to_return[token] <= 0:
            raise ValueError(f"no {token!r} token chosen to return")
        self._to_return[token] -= 1
        self._remaining[token] += 1
        self.count += 1
        self._check_count()

    def reset(self) -> None:
        """Undo every choice made since the initial tokens were set."""
        self._remaining = Counter(self._initial)
        self._to_return = Counter()
        self.initial_count = sum(self._initial.values())
        self.count = self.initial_count
        self._check_count()

    def confirm(self) -> bool:
        """Accept the selection if it reaches the limit; otherwise raise the warning."""
        if self.locked:
            self.confirmed = True
            return True
        self.warning = True
        return False

    def _check_count(self) -> None:
        if self.locked:
            self.warning = False