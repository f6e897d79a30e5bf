import cv2
import numpy as np
import pygame
from typing import Tuple


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def cv2_to_pygame_surface(img: np.ndarray) -> pygame.Surface:
    """Convert a BGR (or single-channel) OpenCV image to a PyGame Surface."""
    if img.ndim == 2:
        img_rgb = cv2.cvtColor(img, cv2.COLOR_GRAY2RGB)
    else:
        img_rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    # make_surface wants (W, H, 3)
    return pygame.surfarray.make_surface(img_rgb.swapaxes(0, 1))
