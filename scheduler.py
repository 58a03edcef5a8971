"""Display-synchronised callback scheduling.

The runtime calls :meth:`FrameScheduler.run_frame` once per rendered frame.
Frame callbacks behave like ``requestAnimationFrame``: one requested while a
frame is running fires on the *next* frame. Timers behave like ``setTimeout``.
"""

import itertools
import time

from logging_utils import log_debug


class FrameScheduler:
    def __init__(self, clock=time.time):
        self.clock = clock
        self._ids = itertools.count(1)
        self._frames = {}
        self._timers = {}

    def request_frame(self, callback):
        handle = next(self._ids)
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle):
        if handle is not None:
            self._frames.pop(handle, None)

    def call_later(self, delay, callback):
        handle = next(self._ids)
        self._timers[handle] = (self.clock() + delay, callback)
        return handle

    def cancel_timer(self, handle):
        if handle is not None:
            self._timers.pop(handle, None)

    @property
    def pending_frames(self):
        return len(self._frames)

    @property
    def pending_timers(self):
        return len(self._timers)

    def run_frame(self, now=None):
        now = self.clock() if now is None else now
        due = sorted((at, handle) for handle, (at, _) in self._timers.items() if at <= now)
        for _, handle in due:
            entry = self._timers.pop(handle, None)
            if entry is not None:
                self._invoke(entry[1], now)

        frames, self._frames = self._frames, {}
        for callback in frames.values():
            self._invoke(callback, now)

    @staticmethod
    def _invoke(callback, now):
        try:
            callback(now)
        except Exception as exc:
            log_debug(f"FrameScheduler callback {callback!r} failed: {exc!r}")
