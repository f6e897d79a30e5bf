# -----------------------------
# Configuration (tweak as needed)
# -----------------------------

CAM_INDEX = 0                      # Webcam index
CAM_WIDTH, CAM_HEIGHT = 640, 480   # Request these from the camera (best effort)
SCREEN_W, SCREEN_H = 960, 540      # Preview window size

# Median blur window: (2 * BLUR_RADIUS + 1) squared samples
BLUR_RADIUS = 5

# Interactive calibration
CALIB_WINDOW = "Calibrate"
CALIB_MAX_FRAMES = 90              # iteration budget before sampling
CALIB_WAIT_MS = 10                 # key poll per iteration
CALIB_CONFIRM_KEY = "q"
CALIB_REGION_DIVISOR = 20          # half-extent = frame size / divisor
CALIB_TOLERANCE = 0.4              # band = mean * (1 -/+ tolerance)
CALIB_MIRROR = True

# Generic skin band (HSV, OpenCV ranges)
GENERIC_H = (0, 25)
GENERIC_S = (10, 150)
GENERIC_V = (60, 255)

# Tracking: the mask is built on a downscaled frame
TRACK_WORK_SIZE = (160, 120)
MIN_BLOB_AREA = 20
