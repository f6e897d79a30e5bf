from __future__ import annotations
from typing import Optional, Protocol

import numpy as np


class CapturePort(Protocol):
    def next_frame(self) -> Optional[np.ndarray]: ...   # None when no frame is ready
    def wait_key(self, ms: int) -> Optional[int]: ...   # None on timeout


class DisplayPort(Protocol):
    def show(self, window_name: str, frame: np.ndarray) -> None: ...
    def destroy_window(self, window_name: str) -> None: ...
