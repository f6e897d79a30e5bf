from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

HSV = Tuple[int, int, int]


@dataclass
class Calibration:
    """
    HSV acceptance band of the calibrated skin colour.

    Filled once per session by generic or interactive calibration, then only
    read (the tracker feeds `lower` / `upper` to cv2.inRange).
    """

    h_max: int = 0
    h_min: int = 0
    s_max: int = 0
    s_min: int = 0
    v_max: int = 0
    v_min: int = 0
    done: bool = False
    # same bounds as vectors, for rendering / inRange
    upper: HSV = field(default=(0, 0, 0))
    lower: HSV = field(default=(0, 0, 0))

    def set_band(self, h: Tuple[int, int], s: Tuple[int, int], v: Tuple[int, int]) -> None:
        self.h_min, self.h_max = h
        self.s_min, self.s_max = s
        self.v_min, self.v_max = v
        self.lower = (self.h_min, self.s_min, self.v_min)
        self.upper = (self.h_max, self.s_max, self.v_max)
        self.done = True

    def bounds(self) -> list[tuple[str, int]]:
        """Bounds in diagnostic order: h_max, h_min, s_max, s_min, v_max, v_min."""
        return [
            ("h_max", self.h_max),
            ("h_min", self.h_min),
            ("s_max", self.s_max),
            ("s_min", self.s_min),
            ("v_max", self.v_max),
            ("v_min", self.v_min),
        ]


@dataclass(frozen=True)
class ChannelStats:
    mean: float
    std: float
