from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

import numpy as np


class FakeCapture:
    """
    Replays a fixed list of frames (None entries simulate "no frame ready"),
    then keeps returning None. Keys are replayed the same way.
    """

    def __init__(self, frames: Iterable[Optional[np.ndarray]] = (), keys: Iterable[Optional[int]] = ()):
        self._frames = list(frames)
        self._keys = list(keys)
        self.frames_served = 0
        self.key_polls: List[int] = []

    def next_frame(self) -> Optional[np.ndarray]:
        if not self._frames:
            return None
        self.frames_served += 1
        frame = self._frames.pop(0)
        return None if frame is None else frame.copy()

    def wait_key(self, ms: int) -> Optional[int]:
        self.key_polls.append(ms)
        if not self._keys:
            return None
        return self._keys.pop(0)


class FakeDisplay:
    """Records what would have been shown."""

    def __init__(self):
        self.shown: List[Tuple[str, np.ndarray]] = []
        self.destroyed: List[str] = []

    def show(self, window_name: str, frame: np.ndarray) -> None:
        self.shown.append((window_name, frame.copy()))

    def destroy_window(self, window_name: str) -> None:
        self.destroyed.append(window_name)
