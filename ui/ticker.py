"""Tick source backed by pygame's timer events."""

from typing import Optional

import pygame

from garden.scheduler import TickCallback


class PygameTicker:
    """pygame.time.set_timer posts TICK_EVENT every interval; handle_event runs the callback."""

    def __init__(self) -> None:
        self.event_type = pygame.event.custom_type()
        self._callback: Optional[TickCallback] = None

    def start(self, interval_ms: int, callback: TickCallback) -> None:
        self._callback = callback
        pygame.time.set_timer(self.event_type, int(interval_ms))

    def cancel(self) -> None:
        pygame.time.set_timer(self.event_type, 0)
        self._callback = None

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != self.event_type or self._callback is None:
            return False
        self._callback()
        return True
