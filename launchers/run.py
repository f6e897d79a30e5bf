import argparse
import sys
from pathlib import Path
import os
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

# Ensure repo root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from skintrack.app.loader import load_config
from skintrack.app.loop import run_preview
from skintrack.errors import ConfigError


def main():
    parser = argparse.ArgumentParser(description="Skin colour calibration and tracking preview")
    parser.add_argument("--config", type=Path, default=None, help="YAML config (default: configs/default.yaml)")
    parser.add_argument("--generic", action="store_true", help="Skip interactive calibration, use the generic skin band")
    parser.add_argument("--cam-index", type=int, default=None, help="OpenCV camera index")
    parser.add_argument("--no-mirror", action="store_true", help="Do not mirror the camera image")
    args = parser.parse_args()

    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    if args.generic:
        cfg.mode = "generic"
    if args.cam_index is not None:
        cfg.cam_index = args.cam_index
    if args.no_mirror:
        cfg.mirror = False
        cfg.calibration.mirror = False

    sys.exit(run_preview(cfg))


if __name__ == "__main__":
    main()
