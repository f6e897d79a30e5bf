from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class Point:
    x: float
    y: float
    area: float


@dataclass
class FrameData:
    timestamp: float
    # tracked blob in camera pixels, None when nothing matched the band
    point: Optional[Point]


def channel_count(frame: np.ndarray) -> int:
    """Number of 8-bit channels per pixel; (H, W) arrays are single-channel."""
    if frame.ndim == 2:
        return 1
    return int(frame.shape[2])
