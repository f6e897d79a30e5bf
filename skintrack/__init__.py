"""Skin colour calibration and mask cleanup for camera-driven games."""

__version__ = "0.1.0"
