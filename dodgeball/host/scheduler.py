"""
Frame Scheduler - Cooperative periodic timers driven by a frame counter.

There is no real parallelism: advance() fires every due callback
on the caller's thread, in the order the timers were started.
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import count

from .adapter import TimerCallback


@dataclass
class PeriodicEntry:
    """A registered repeating timer."""
    handle: int
    interval: int
    callback: TimerCallback
    remaining: int


class FrameScheduler:
    """
    Named repeating timers with a tick interval in frames.

    Usage:
        scheduler = FrameScheduler()
        handle = scheduler.start(60, enemy_move)
        scheduler.advance(120)   # enemy_move fires twice
        scheduler.stop(handle)
    """

    def __init__(self):
        self._entries: dict[int, PeriodicEntry] = {}
        self._handles = count(1)
        self.frame = 0

    def start(self, interval: int, callback: TimerCallback) -> int:
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        handle = next(self._handles)
        self._entries[handle] = PeriodicEntry(
            handle=handle, interval=interval, callback=callback, remaining=interval
        )
        return handle

    def stop(self, handle: int) -> None:
        self._entries.pop(handle, None)

    def is_active(self, handle: int | None) -> bool:
        return handle is not None and handle in self._entries

    @property
    def active_count(self) -> int:
        return len(self._entries)

    def advance(self, frames: int = 1) -> None:
        """Run the clock forward, firing due callbacks frame by frame."""
        for _ in range(frames):
            self.frame += 1
            # Snapshot: callbacks may start or stop timers
            for entry in list(self._entries.values()):
                if entry.handle not in self._entries:
                    continue
                entry.remaining -= 1
                if entry.remaining <= 0:
                    entry.remaining = entry.interval
                    entry.callback()
