from __future__ import annotations
import sys
import cv2
import numpy as np
from typing import Tuple, Optional


class Camera:
    """OpenCV webcam; implements CapturePort."""

    def __init__(self, index: int, target_size: Tuple[int, int], fps: int = 30):
        self.index = index
        self.target_size = target_size
        self.fps = fps
        self.cap: Optional[cv2.VideoCapture] = None

    def open(self) -> bool:
        backend = cv2.CAP_DSHOW if sys.platform.startswith("win") else 0
        self.cap = cv2.VideoCapture(self.index, backend)
        w, h = self.target_size
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, w)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, h)
        self.cap.set(cv2.CAP_PROP_FPS, self.fps)
        if not self.cap.isOpened():
            return False
        return True

    def read(self):
        if self.cap is None:
            return False, None
        return self.cap.read()

    def next_frame(self) -> Optional[np.ndarray]:
        ok, frame = self.read()
        return frame if ok else None

    def wait_key(self, ms: int) -> Optional[int]:
        key = cv2.waitKey(ms)
        if key < 0:
            return None
        return key & 0xFF

    def close(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None
