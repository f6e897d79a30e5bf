from __future__ import annotations

import numpy as np

from skintrack.api.frame_data import channel_count
from skintrack.const import BLUR_RADIUS
from skintrack.errors import UsageError
from skintrack.filters.order_stats import median


def median_blur(frame: np.ndarray, buffered: bool = False) -> np.ndarray:
    """
    Replace every interior pixel of a single-channel frame with the median of
    the (2 * BLUR_RADIUS + 1)^2 window centered on it. Pixels closer than
    BLUR_RADIUS to an edge are left as they are.

    The frame is rewritten in raster order while it is being read, so windows
    further down/right already contain filtered values. Pass buffered=True to
    read every window from an untouched copy of the input instead; the two
    modes do not give the same output.
    """
    channels = channel_count(frame)
    if channels != 1:
        raise UsageError(
            f"median_blur was called with {channels} channels, but only supports 1 channel."
        )
    if frame.dtype != np.uint8:
        raise UsageError(f"median_blur needs an 8-bit frame, got {frame.dtype}")

    plane = frame if frame.ndim == 2 else frame[:, :, 0]
    source = plane.copy() if buffered else plane
    h, w = plane.shape[:2]
    r = BLUR_RADIUS

    for y in range(r, h - r):
        for x in range(r, w - r):
            # row-major window, copied so the partition can reorder it
            window = bytearray(source[y - r:y + r + 1, x - r:x + r + 1].tobytes())
            lo = min(window)
            if lo == max(window):
                plane[y, x] = lo
                continue
            plane[y, x] = median(window)

    return frame
