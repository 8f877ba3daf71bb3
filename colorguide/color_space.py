# colorguide/color_space.py

import logging
import math

import cv2
import numpy as np

from .sample import PlanarSample

logger = logging.getLogger(__name__)


def clamp(v, lo, hi):
    return max(lo, min(hi, v))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def sample_point(sample: PlanarSample, mode: str = "center") -> tuple[int, int]:
    """
    Luma coordinate (x, y) that represents the frame.

    "center" is the true middle of the image. "legacy" uses (width, height)
    together with the halved/quartered index arithmetic of read_yuv, which
    lands near the middle for tightly packed planes.
    """
    if mode == "center":
        return sample.width // 2, sample.height // 2
    if mode == "legacy":
        return sample.width, sample.height
    raise ValueError(f"unknown sample point: {mode!r}")


def read_yuv(sample: PlanarSample, mode: str = "center") -> tuple[int, int, int]:
    """Read one pixel's luma and centered chroma values (U, V in [-128, 127])."""
    x, y = sample_point(sample, mode)
    yp, up, vp = sample.y, sample.u, sample.v

    if mode == "legacy":
        y_idx = (y * yp.row_stride + x * yp.pixel_stride) // 2
        u_idx = (y * up.row_stride + x * up.pixel_stride) // 4
        v_idx = (y * vp.row_stride + x * vp.pixel_stride) // 4
    else:
        y_idx = y * yp.row_stride + x * yp.pixel_stride
        u_idx = (y // 2) * up.row_stride + (x // 2) * up.pixel_stride
        v_idx = (y // 2) * vp.row_stride + (x // 2) * vp.pixel_stride

    luma = yp.byte_at(y_idx)
    u = up.byte_at(u_idx) - 128
    v = vp.byte_at(v_idx) - 128
    return luma, u, v


def yuv_to_rgb(y: int, u: int, v: int) -> tuple[int, int, int]:
    """BT.601 YUV -> RGB, rounded half up and clamped to [0, 255]."""
    r = _round_half_up(y + 1.370705 * v)
    g = _round_half_up(y - 0.698001 * v - 0.337633 * u)
    b = _round_half_up(y + 1.732446 * u)
    return clamp(r, 0, 255), clamp(g, 0, 255), clamp(b, 0, 255)


def rgb_to_hsv(rgb: tuple[int, int, int]) -> tuple[float, float, float]:
    """RGB (0-255) -> HSV with hue in degrees [0, 360), S and V in [0, 1]."""
    rgb_arr = np.float32([[list(rgb)]]) / 255.0
    # float input: OpenCV returns H in [0, 360)
    h, s, v = cv2.cvtColor(rgb_arr, cv2.COLOR_RGB2HSV)[0, 0]
    h = float(h)
    if h >= 360.0:
        h -= 360.0
    return h, float(s), float(v)


def hsv_to_hsl(hsv: tuple[float, float, float]) -> tuple[float, float, float]:
    h, s, v = hsv
    l = (2 - s) * v / 2

    if l != 0:
        if l == 1:
            s = 0.0
        elif l < 0.5:
            s = s * v / (l * 2)
        else:
            s = s * v / (2 - l * 2)

    return h, s, l


def hsl_to_hsv(hsl: tuple[float, float, float]) -> tuple[float, float, float]:
    h, s, l = hsl
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return h, s_v, v


def sample_hsv(sample: PlanarSample, mode: str = "center") -> tuple[float, float, float]:
    """Extract the representative pixel of a planar sample as HSV."""
    y, u, v = read_yuv(sample, mode)
    rgb = yuv_to_rgb(y, u, v)
    hsv = rgb_to_hsv(rgb)
    logger.debug("yuv=(%d, %d, %d) rgb=%s hsv=(%.1f, %.3f, %.3f)", y, u, v, rgb, *hsv)
    return hsv
