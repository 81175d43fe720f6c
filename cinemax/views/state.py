"""Finite fetch states for the pages and the token guard that drives them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union


@dataclass(frozen=True)
class Idle:
    status: ClassVar[str] = "idle"


@dataclass(frozen=True)
class Loading:
    status: ClassVar[str] = "loading"


@dataclass(frozen=True)
class Loaded:
    data: Any
    status: ClassVar[str] = "loaded"


@dataclass(frozen=True)
class Failed:
    message: str
    status: ClassVar[str] = "failed"


ViewState = Union[Idle, Loading, Loaded, Failed]


class FetchTracker:
    """Holds a page's current state and ignores results from superseded fetches.

    Every ``begin()`` issues a new token; only the most recent token may
    ``settle()`` the state, so a slow response never overwrites a newer one.
    """

    def __init__(self, initial: ViewState | None = None) -> None:
        self.state: ViewState = initial or Idle()
        self._latest = 0

    def begin(self) -> int:
        self._latest += 1
        self.state = Loading()
        return self._latest

    def settle(self, token: int, state: ViewState) -> bool:
        if token != self._latest:
            return False
        self.state = state
        return True

    def reset(self) -> None:
        """Drop any in-flight fetch and go back to idle."""

        self._latest += 1
        self.state = Idle()
