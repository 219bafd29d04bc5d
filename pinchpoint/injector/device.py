from __future__ import annotations

import logging
from typing import Protocol

log = logging.getLogger(__name__)


class PointerDevice(Protocol):
    """What the kill switch needs from an OS injector."""

    def move_to(self, x: int, y: int) -> None: ...
    def click(self, button: str) -> None: ...
    def double_click(self) -> None: ...
    def scroll(self, ticks: int) -> None: ...
    def key_tap(self, key: str) -> None: ...
    def release_all(self) -> None: ...
    def close(self) -> None: ...


class LogPointer:
    """Dry-run device: logs what would have been injected."""

    def move_to(self, x: int, y: int) -> None:
        log.debug("move (%d, %d)", x, y)

    def click(self, button: str) -> None:
        log.info("click %s", button)

    def double_click(self) -> None:
        log.info("double click")

    def scroll(self, ticks: int) -> None:
        log.info("scroll %+d", ticks)

    def key_tap(self, key: str) -> None:
        log.info("key %s", key)

    def release_all(self) -> None:
        log.info("release all")

    def close(self) -> None:
        pass
