from __future__ import annotations

import numpy as np

from skintrack.calib.region import Region


def outside_mask(shape: tuple, region: Region) -> np.ndarray:
    """Boolean (H, W) mask of the pixels not strictly inside the region."""
    h, w = shape[:2]
    ys, xs = np.ogrid[:h, :w]
    return ~region.contains(xs, ys)


def overlay_frame(frame: np.ndarray, region: Region) -> None:
    """
    Darken everything outside the region (each channel // 4) in place, so the
    user can see where to hold their hand. Applying it twice darkens twice.
    """
    frame[outside_mask(frame.shape, region)] //= 4
