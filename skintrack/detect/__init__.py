from .skin_tracker import SkinTracker

__all__ = ["SkinTracker"]
