from .calibration_data import Calibration, ChannelStats
from .frame_data import FrameData, Point, channel_count
from .config import AppConfig, CalibrationSettings
from .ports import CapturePort, DisplayPort

__all__ = [
    "Calibration",
    "ChannelStats",
    "FrameData",
    "Point",
    "channel_count",
    "AppConfig",
    "CalibrationSettings",
    "CapturePort",
    "DisplayPort",
]
