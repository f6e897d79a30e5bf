from __future__ import annotations
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from skintrack.api.config import CALIBRATION_MODES, AppConfig, CalibrationSettings
from skintrack.errors import ConfigError

DEFAULT_CONFIG = Path(__file__).resolve().parents[2] / "configs" / "default.yaml"


def read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Missing config file {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config YAML: {path}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def _pair(value: Any, key: str) -> Tuple[int, int]:
    try:
        lo, hi = (int(v) for v in value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be a [min, max] pair, got {value!r}") from e
    if not 0 <= lo <= hi <= 255:
        raise ConfigError(f"{key} must satisfy 0 <= min <= max <= 255, got {value!r}")
    return lo, hi


def _coerce(section: Dict[str, Any], key: str, kind: type, minimum: Optional[int] = None) -> None:
    if key not in section:
        return
    raw = section[key]
    # bools are ints to Python but never a valid count here
    if isinstance(raw, bool) or (kind is str and not isinstance(raw, str)):
        raise ConfigError(f"calibration.{key} must be a {kind.__name__}, got {raw!r}")
    try:
        value = kind(raw)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"calibration.{key} must be a {kind.__name__}, got {raw!r}") from e
    if minimum is not None and value < minimum:
        raise ConfigError(f"calibration.{key} must be >= {minimum}, got {value!r}")
    section[key] = value


def _calibration_settings(section: Dict[str, Any], mirror: bool) -> CalibrationSettings:
    known = {f.name for f in fields(CalibrationSettings)} - {"mirror"}
    generic = section.pop("generic", None) or {}
    unknown = set(section) - known
    if unknown:
        hint = " (mirror is set at the top level)" if "mirror" in unknown else ""
        raise ConfigError(f"Unknown calibration keys: {sorted(unknown)}{hint}")

    _coerce(section, "max_frames", int, minimum=1)
    _coerce(section, "wait_ms", int, minimum=1)
    _coerce(section, "region_divisor", int, minimum=1)
    _coerce(section, "tolerance", float)
    _coerce(section, "confirm_key", str)
    _coerce(section, "window_name", str)

    settings = CalibrationSettings(**section, mirror=mirror)
    for channel in ("h", "s", "v"):
        if channel in generic:
            setattr(settings, f"generic_{channel}", _pair(generic[channel], f"generic.{channel}"))
    if len(settings.confirm_key) != 1:
        raise ConfigError(f"confirm_key must be a single character, got {settings.confirm_key!r}")
    if not 0 <= settings.tolerance < 1:
        raise ConfigError(f"tolerance must be in [0, 1), got {settings.tolerance}")
    return settings


def load_config(path: Optional[Path] = None) -> AppConfig:
    """
    Build an AppConfig from a YAML file. Missing keys keep their defaults;
    with no path, the bundled configs/default.yaml is used when present.
    """
    if path is None:
        if not DEFAULT_CONFIG.exists():
            return AppConfig()
        path = DEFAULT_CONFIG
    data = read_yaml(Path(path))

    cfg = AppConfig()
    cam = data.get("camera", {}) or {}
    cfg.cam_index = int(cam.get("index", cfg.cam_index))
    cfg.cam_size = (int(cam.get("width", cfg.cam_size[0])), int(cam.get("height", cfg.cam_size[1])))

    screen = data.get("screen", {}) or {}
    cfg.screen_size = (int(screen.get("width", cfg.screen_size[0])),
                       int(screen.get("height", cfg.screen_size[1])))

    cfg.mode = str(data.get("mode", cfg.mode)).lower()
    if cfg.mode not in CALIBRATION_MODES:
        raise ConfigError(f"mode must be one of {CALIBRATION_MODES}, got {cfg.mode!r}")
    cfg.mirror = bool(data.get("mirror", cfg.mirror))

    track = data.get("tracking", {}) or {}
    cfg.work_size = (int(track.get("work_width", cfg.work_size[0])),
                     int(track.get("work_height", cfg.work_size[1])))
    cfg.min_blob_area = int(track.get("min_blob_area", cfg.min_blob_area))

    cfg.calibration = _calibration_settings(dict(data.get("calibration", {}) or {}), cfg.mirror)
    return cfg
