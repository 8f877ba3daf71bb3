# colorguide/sample.py

from __future__ import annotations

from dataclasses import dataclass

import cv2
import numpy as np


class InvalidSample(ValueError):
    """The planar sample cannot be read (missing planes, bad strides, index out of range)."""


@dataclass(frozen=True)
class Plane:
    buffer: np.ndarray  # flat uint8
    pixel_stride: int   # bytes between horizontally adjacent samples
    row_stride: int     # bytes between rows

    def byte_at(self, index: int) -> int:
        if index < 0 or index >= self.buffer.size:
            raise InvalidSample(f"index {index} outside plane of {self.buffer.size} bytes")
        return int(self.buffer[index]) & 0xFF


@dataclass(frozen=True)
class PlanarSample:
    """Y, U, V planes of one frame, chroma subsampled 4:2:0."""

    planes: tuple[Plane, ...]
    width: int
    height: int

    def __post_init__(self):
        if len(self.planes) < 3:
            raise InvalidSample(f"expected 3 planes, got {len(self.planes)}")
        if self.width <= 0 or self.height <= 0:
            raise InvalidSample(f"bad sample size {self.width}x{self.height}")
        for plane in self.planes[:3]:
            if plane.pixel_stride <= 0 or plane.row_stride <= 0:
                raise InvalidSample(
                    f"bad strides pixel={plane.pixel_stride} row={plane.row_stride}"
                )

    @property
    def y(self) -> Plane:
        return self.planes[0]

    @property
    def u(self) -> Plane:
        return self.planes[1]

    @property
    def v(self) -> Plane:
        return self.planes[2]

    @classmethod
    def from_bgr_frame(cls, frame: np.ndarray) -> "PlanarSample":
        """
        Build an I420 sample from an OpenCV BGR frame.

        Odd trailing rows/columns are dropped since I420 needs even dimensions.
        """
        if frame is None or frame.ndim != 3 or frame.shape[2] != 3 or frame.dtype != np.uint8:
            raise InvalidSample("expected a (h, w, 3) uint8 BGR frame")

        h, w = frame.shape[:2]
        h, w = h - h % 2, w - w % 2
        if h < 2 or w < 2:
            raise InvalidSample(f"frame too small: {frame.shape[1]}x{frame.shape[0]}")

        yuv = cv2.cvtColor(np.ascontiguousarray(frame[:h, :w]), cv2.COLOR_BGR2YUV_I420)
        flat = yuv.reshape(-1)

        y_size = h * w
        c_size = (h // 2) * (w // 2)
        y_buf = flat[:y_size]
        u_buf = flat[y_size:y_size + c_size]
        v_buf = flat[y_size + c_size:y_size + 2 * c_size]

        return cls(
            planes=(
                Plane(y_buf, 1, w),
                Plane(u_buf, 1, w // 2),
                Plane(v_buf, 1, w // 2),
            ),
            width=w,
            height=h,
        )
