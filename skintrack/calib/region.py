from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from skintrack.api.frame_data import channel_count
from skintrack.errors import UsageError


@dataclass(frozen=True)
class Region:
    """
    Box around a center point. `width` / `height` are the distances from the
    center to the left/right and top/bottom edges, not the full extents.
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise UsageError(
                f"region half-extents must be non-negative, got {self.width}x{self.height}")

    @classmethod
    def centered_in(cls, frame_width: int, frame_height: int, divisor: int = 20) -> "Region":
        return cls(
            x=frame_width // 2,
            y=frame_height // 2,
            width=frame_width // divisor,
            height=frame_height // divisor,
        )

    @property
    def empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, px, py):
        """
        Strict containment on every edge. Works on scalars or on numpy
        coordinate grids (then returns a boolean array).
        """
        return ((px > self.x - self.width) & (px < self.x + self.width)
                & (py > self.y - self.height) & (py < self.y + self.height))

    def sample_bounds(self) -> Tuple[int, int, int, int]:
        """Half-open sampling rectangle (x0, y0, x1, y1)."""
        return (self.x - self.width, self.y - self.height,
                self.x + self.width, self.y + self.height)


def sample(frame: np.ndarray, region: Region) -> Tuple[bytearray, bytearray, bytearray]:
    """
    Collect channel 0, 1 and 2 of every pixel in the region's sampling
    rectangle, row-major (top to bottom, left to right).
    """
    channels = channel_count(frame)
    if channels != 3:
        raise UsageError(f"sample was called with {channels} channels, but needs 3 channels.")

    h, w = frame.shape[:2]
    x0, y0, x1, y1 = region.sample_bounds()
    if x0 < 0 or y0 < 0 or x1 > w or y1 > h:
        raise UsageError(f"region {region} does not fit inside a {w}x{h} frame")

    patch = frame[y0:y1, x0:x1]
    return tuple(bytearray(patch[:, :, c].tobytes()) for c in range(3))  # type: ignore[return-value]
