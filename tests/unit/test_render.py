from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import numpy as np
import pygame
import pytest

from skintrack.api.frame_data import channel_count
from skintrack.render.shapes import cv2_to_pygame_surface, draw_text


@pytest.fixture(autouse=True)
def _pygame():
    pygame.init()
    yield
    pygame.quit()


def test_channel_count():
    assert channel_count(np.zeros((4, 5), dtype=np.uint8)) == 1
    assert channel_count(np.zeros((4, 5, 1), dtype=np.uint8)) == 1
    assert channel_count(np.zeros((4, 5, 3), dtype=np.uint8)) == 3


def test_color_frame_to_surface():
    img = np.zeros((30, 40, 3), dtype=np.uint8)
    img[5, 10] = (255, 0, 0)  # blue in BGR
    surf = cv2_to_pygame_surface(img)
    assert surf.get_size() == (40, 30)
    assert tuple(surf.get_at((10, 5)))[:3] == (0, 0, 255)


def test_mask_to_surface():
    mask = np.zeros((30, 40), dtype=np.uint8)
    mask[2, 3] = 255
    surf = cv2_to_pygame_surface(mask)
    assert surf.get_size() == (40, 30)
    assert tuple(surf.get_at((3, 2)))[:3] == (255, 255, 255)


def test_draw_text_paints_something():
    surface = pygame.Surface((200, 40))
    surface.fill((0, 0, 0))
    draw_text(surface, "H 0-25", (4, 4))
    assert pygame.transform.average_color(surface)[:3] != (0, 0, 0)
