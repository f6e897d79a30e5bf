from __future__ import annotations
import sys
import time

import cv2
import pygame

from skintrack.api.calibration_data import Calibration
from skintrack.api.config import AppConfig
from skintrack.api.frame_data import FrameData
from skintrack.calib.calibration import calibrate, generic_calibration
from skintrack.detect.skin_tracker import SkinTracker
from skintrack.errors import SkinTrackError
from skintrack.render.shapes import cv2_to_pygame_surface, draw_text
from skintrack.video.camera import Camera
from skintrack.video.display import WindowDisplay


def run_calibration(cfg: AppConfig, cam: Camera, calibration: Calibration) -> None:
    if cfg.mode == "generic":
        generic_calibration(calibration, cfg.calibration)
        print("[calib] using generic skin band")
        return

    display = WindowDisplay(*cfg.cam_size)
    try:
        stats = calibrate(cam, calibration, display=display, settings=cfg.calibration)
    finally:
        display.teardown()
    for name, st in stats.items():
        print(f"[calib] {name}: mean={st.mean:.1f} std={st.std:.1f}")


def run_preview(cfg: AppConfig) -> int:
    """
    Calibrate, then show the live camera feed next to the cleaned skin mask
    with the tracked blob marked. Esc quits, C recalibrates.
    Returns a process exit status.
    """
    cam = Camera(index=cfg.cam_index, target_size=cfg.cam_size)
    if not cam.open():
        print("ERROR: could not open camera", file=sys.stderr)
        return 1

    calibration = Calibration()
    try:
        run_calibration(cfg, cam, calibration)
    except SkinTrackError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        cam.close()
        return 1

    pygame.init()
    pygame.display.set_caption("Skin Tracker (Recalibrate with C, Quit with Esc)")
    screen = pygame.display.set_mode(cfg.screen_size)
    clock = pygame.time.Clock()
    tracker = SkinTracker(calibration, work_size=cfg.work_size, min_blob_area=cfg.min_blob_area)

    sw, sh = cfg.screen_size
    pane_w, pane_h = sw // 2, sh - 60
    status = 0
    running = True
    try:
        while running:
            clock.tick(30)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_c:
                        run_calibration(cfg, cam, calibration)

            frame_bgr = cam.next_frame()
            if frame_bgr is None:
                continue
            if cfg.mirror:
                frame_bgr = cv2.flip(frame_bgr, 1)

            mask = tracker.mask(frame_bgr)
            frame = FrameData(timestamp=time.time(), point=tracker.locate(mask, frame_bgr.shape))

            screen.fill((15, 18, 22))
            cam_view = cv2.resize(frame_bgr, (pane_w, pane_h), interpolation=cv2.INTER_AREA)
            mask_view = cv2.resize(mask, (pane_w, pane_h), interpolation=cv2.INTER_NEAREST)
            screen.blit(cv2_to_pygame_surface(cam_view), (0, 60))
            screen.blit(cv2_to_pygame_surface(mask_view), (pane_w, 60))

            if frame.point is not None:
                sx = pane_w / float(frame_bgr.shape[1])
                sy = pane_h / float(frame_bgr.shape[0])
                px, py = int(frame.point.x * sx), int(frame.point.y * sy)
                pygame.draw.circle(screen, (255, 80, 80), (px, 60 + py), 8)
                pygame.draw.circle(screen, (255, 80, 80), (pane_w + px, 60 + py), 8, width=2)

            c = calibration
            draw_text(screen, f"H {c.h_min}-{c.h_max}  S {c.s_min}-{c.s_max}  V {c.v_min}-{c.v_max}",
                      (16, 12), size=26)
            tracked = "no skin blob" if frame.point is None else f"blob at ({frame.point.x:.0f}, {frame.point.y:.0f})"
            draw_text(screen, tracked, (16, 36), size=20)

            pygame.display.flip()
    except SkinTrackError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        status = 1
    finally:
        cam.close()
        pygame.quit()
    return status
