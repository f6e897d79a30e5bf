from __future__ import annotations


class SkinTrackError(Exception):
    """Base class for every error raised by skintrack."""


class UsageError(SkinTrackError, ValueError):
    """A caller broke an operation's contract (wrong channel count, empty sample, ...)."""


class AcquisitionFailure(SkinTrackError, RuntimeError):
    """The capture stream never produced a frame during calibration."""


class ConfigError(SkinTrackError, ValueError):
    """The configuration file is missing or malformed."""
