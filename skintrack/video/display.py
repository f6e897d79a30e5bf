from __future__ import annotations
import cv2
import numpy as np


class WindowDisplay:
    """OpenCV HighGUI windows; implements DisplayPort."""

    def __init__(self, width: int = 640, height: int = 480):
        self.size = (width, height)
        self._open: set[str] = set()

    def show(self, window_name: str, frame: np.ndarray) -> None:
        if window_name not in self._open:
            cv2.namedWindow(window_name, cv2.WINDOW_NORMAL)
            cv2.resizeWindow(window_name, *self.size)
            self._open.add(window_name)
        cv2.imshow(window_name, frame)

    def destroy_window(self, window_name: str) -> None:
        if window_name in self._open:
            cv2.destroyWindow(window_name)
            self._open.discard(window_name)

    def teardown(self) -> None:
        self._open.clear()
        cv2.destroyAllWindows()
