from .region import Region, sample
from .overlay import overlay_frame
from .calibration import calibrate, final_calibration, generic_calibration

__all__ = [
    "Region",
    "sample",
    "overlay_frame",
    "calibrate",
    "final_calibration",
    "generic_calibration",
]
