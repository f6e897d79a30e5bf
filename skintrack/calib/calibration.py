from __future__ import annotations
from typing import Dict, Optional, Tuple

import cv2
import numpy as np

from skintrack.api.calibration_data import Calibration, ChannelStats
from skintrack.api.config import CalibrationSettings
from skintrack.api.ports import CapturePort, DisplayPort
from skintrack.calib.overlay import overlay_frame
from skintrack.calib.region import Region, sample
from skintrack.errors import AcquisitionFailure, UsageError
from skintrack.filters.order_stats import mean, standard_deviation


# products such as 90 * 1.4 come out just below the integer
_EPS = 1e-9


def _band(centre: float, tolerance: float) -> Tuple[int, int]:
    # 8-bit bounds: clamp at 255 instead of wrapping
    top = min(int(centre), 255)
    lo = int(top * (1 - tolerance) + _EPS)
    hi = min(int(top * (1 + tolerance) + _EPS), 255)
    return lo, hi


def generic_calibration(calibration: Calibration, settings: Optional[CalibrationSettings] = None) -> None:
    """Use a pre-tuned skin band instead of sampling the camera."""
    settings = settings or CalibrationSettings()
    calibration.set_band(settings.generic_h, settings.generic_s, settings.generic_v)


def final_calibration(
    hsv_frame: np.ndarray,
    calibration: Calibration,
    region: Region,
    tolerance: float = 0.4,
) -> Dict[str, ChannelStats]:
    """
    Derive the band from the HSV pixels inside `region`: each channel gets
    [mean * (1 - tolerance), mean * (1 + tolerance)].

    The standard deviation is reported alongside the mean but does not widen
    or narrow the band.
    """
    if region.empty:
        raise UsageError(f"calibration region {region} is empty")

    stats: Dict[str, ChannelStats] = {}
    bands = []
    for name, values in zip("hsv", sample(hsv_frame, region)):
        st = ChannelStats(mean=mean(values), std=standard_deviation(values))
        stats[name] = st
        bands.append(_band(st.mean, tolerance))

    calibration.set_band(*bands)

    for name, value in calibration.bounds():
        print(f"{name}: {float(value):f}")
    return stats


def calibrate(
    capture: CapturePort,
    calibration: Calibration,
    display: Optional[DisplayPort] = None,
    settings: Optional[CalibrationSettings] = None,
) -> Dict[str, ChannelStats]:
    """
    Show the live feed with everything but the centre box darkened, then
    calibrate on the last frame. Ends after `max_frames` iterations or when
    the confirm key is pressed.
    """
    settings = settings or CalibrationSettings()
    calibration.done = False
    confirm = ord(settings.confirm_key)

    region: Optional[Region] = None
    frame: Optional[np.ndarray] = None
    timer = 0

    try:
        while timer < settings.max_frames and capture.wait_key(settings.wait_ms) != confirm:
            current = capture.next_frame()

            if current is not None:
                h, w = current.shape[:2]
                if region is None and w > 0:
                    region = Region.centered_in(w, h, settings.region_divisor)

                if settings.mirror:
                    current = cv2.flip(current, 1)
                frame = current

                if display is not None and region is not None:
                    shown = frame.copy()
                    overlay_frame(shown, region)
                    display.show(settings.window_name, shown)

            timer += 1

        if frame is None or region is None:
            raise AcquisitionFailure(
                f"no frame acquired from the camera after {timer} iterations")

        hsv = cv2.cvtColor(frame, cv2.COLOR_BGR2HSV)
        print(f"{region.x} {region.y} {region.height} {region.width}")
        return final_calibration(hsv, calibration, region, settings.tolerance)
    finally:
        if display is not None:
            display.destroy_window(settings.window_name)
