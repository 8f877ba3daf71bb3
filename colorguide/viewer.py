# colorguide/viewer.py

import argparse
import logging

import cv2

from .analyzer import ColorAnalyzer
from .config import (
    ANALYZER_FPS,
    CAMERA_INDEX,
    CROSSHAIR_RATIO,
    FRAME_HEIGHT,
    FRAME_WIDTH,
    SAMPLE_POINT,
    AnalyzerConfig,
)
from .sample import PlanarSample

logger = logging.getLogger("colorguide")


def crosshair_box(w, h, ratio=CROSSHAIR_RATIO):
    side = max(4, int(min(w, h) * ratio))
    cx, cy = w // 2, h // 2
    return cx - side // 2, cy - side // 2, cx + side // 2, cy + side // 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Name the color in the middle of the camera image.")
    parser.add_argument("--camera", type=int, default=CAMERA_INDEX, help="camera index")
    parser.add_argument("--fps", type=float, default=ANALYZER_FPS,
                        help="analysed frames per second, 0 analyses every frame")
    parser.add_argument("--sample-point", choices=("center", "legacy"), default=SAMPLE_POINT,
                        help="pixel to sample")
    parser.add_argument("--no-hue-wrap", action="store_true",
                        help="plain absolute hue distance (359 deg is not near red)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = AnalyzerConfig(
        fps=args.fps if args.fps > 0 else None,
        sample_point=args.sample_point,
        wrap_hue=not args.no_hue_wrap,
    )
    analyzer = ColorAnalyzer(config)

    cap = cv2.VideoCapture(args.camera)
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, FRAME_WIDTH)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, FRAME_HEIGHT)

    color_name = ""

    while True:
        ret, frame = cap.read()
        if not ret:
            logger.error("camera %d returned no frame", args.camera)
            break

        result = analyzer.analyze(PlanarSample.from_bgr_frame(frame))
        if result is not None:
            if result != color_name:
                logger.info("Color: %s", result)
            color_name = result

        h, w = frame.shape[:2]
        x1, y1, x2, y2 = crosshair_box(w, h)
        cv2.rectangle(frame, (x1, y1), (x2, y2), (255, 255, 255), 2)
        cv2.putText(frame, color_name, (10, 50),
                    cv2.FONT_HERSHEY_SIMPLEX, 1.2, (255, 255, 255), 3)

        cv2.imshow("Color Guide (press q to quit)", frame)
        if cv2.waitKey(1) & 0xFF == ord("q"):
            break

    cap.release()
    cv2.destroyAllWindows()


if __name__ == "__main__":
    main()
