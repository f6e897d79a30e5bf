from .camera import Camera
from .display import WindowDisplay

__all__ = ["Camera", "WindowDisplay"]
