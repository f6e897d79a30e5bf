from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from skintrack import const

CALIBRATION_MODES = ("interactive", "generic")


@dataclass
class CalibrationSettings:
    max_frames: int = const.CALIB_MAX_FRAMES
    wait_ms: int = const.CALIB_WAIT_MS
    confirm_key: str = const.CALIB_CONFIRM_KEY
    region_divisor: int = const.CALIB_REGION_DIVISOR
    tolerance: float = const.CALIB_TOLERANCE
    mirror: bool = const.CALIB_MIRROR
    window_name: str = const.CALIB_WINDOW
    # generic band, (min, max) per channel
    generic_h: Tuple[int, int] = const.GENERIC_H
    generic_s: Tuple[int, int] = const.GENERIC_S
    generic_v: Tuple[int, int] = const.GENERIC_V


@dataclass
class AppConfig:
    screen_size: Tuple[int, int] = (const.SCREEN_W, const.SCREEN_H)
    cam_index: int = const.CAM_INDEX
    cam_size: Tuple[int, int] = (const.CAM_WIDTH, const.CAM_HEIGHT)
    mode: str = "interactive"
    mirror: bool = const.CALIB_MIRROR
    work_size: Tuple[int, int] = const.TRACK_WORK_SIZE
    min_blob_area: int = const.MIN_BLOB_AREA
    calibration: CalibrationSettings = field(default_factory=CalibrationSettings)
