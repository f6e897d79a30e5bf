from __future__ import annotations
from typing import Optional, Tuple
import cv2
import numpy as np

from skintrack import const
from skintrack.api.calibration_data import Calibration
from skintrack.api.frame_data import Point
from skintrack.errors import UsageError
from skintrack.filters.median_blur import median_blur


class SkinTracker:
    """
    Thresholds frames against a finished calibration band and reports the
    largest matching blob. The mask is built on a downscaled copy of the frame
    and cleaned with median_blur before contours are searched.
    """

    def __init__(
        self,
        calibration: Calibration,
        work_size: Tuple[int, int] = const.TRACK_WORK_SIZE,
        min_blob_area: int = const.MIN_BLOB_AREA,
    ):
        self.calibration = calibration
        self.work_size = work_size
        self.min_blob_area = min_blob_area

    def mask(self, frame_bgr: np.ndarray) -> np.ndarray:
        if not self.calibration.done:
            raise UsageError("SkinTracker needs a finished calibration")

        small = cv2.resize(frame_bgr, self.work_size, interpolation=cv2.INTER_AREA)
        hsv = cv2.cvtColor(small, cv2.COLOR_BGR2HSV)
        lower = np.array(self.calibration.lower, dtype=np.uint8)
        upper = np.array(self.calibration.upper, dtype=np.uint8)
        mask = cv2.inRange(hsv, lower, upper)
        return median_blur(mask)

    def detect(self, frame_bgr: np.ndarray) -> Optional[Point]:
        """
        Returns the centroid of the largest blob in input-frame pixels, or None.
        """
        return self.locate(self.mask(frame_bgr), frame_bgr.shape)

    def locate(self, mask: np.ndarray, frame_shape: tuple) -> Optional[Point]:
        cnts, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
        if not cnts:
            return None

        best = max(cnts, key=cv2.contourArea)
        area = cv2.contourArea(best)
        if area < self.min_blob_area:
            return None

        M = cv2.moments(best)
        if M["m00"] <= 0:
            return None

        # scale from work size back to the camera frame
        sx = frame_shape[1] / float(self.work_size[0])
        sy = frame_shape[0] / float(self.work_size[1])
        cx = M["m10"] / M["m00"] * sx
        cy = M["m01"] / M["m00"] * sy
        return Point(cx, cy, area * sx * sy)
