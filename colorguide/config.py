# colorguide/config.py

from dataclasses import dataclass, field
from typing import Optional

ANALYZER_FPS = 1.0          # analysed frames per second, None = every frame
SAMPLE_POINT = "center"     # "center" | "legacy"
WRAP_HUE = True             # circular hue distance

CAMERA_INDEX = 0
FRAME_WIDTH = 1280
FRAME_HEIGHT = 720
CROSSHAIR_RATIO = 0.1       # crosshair side relative to the shorter frame side


@dataclass(frozen=True)
class ClassifierThresholds:
    """Lightness/saturation cut-offs used by the classifier (all in [0, 1])."""

    white: float = 0.7
    black: float = 0.1
    grey_saturation: float = 0.1
    brown_min: float = 0.1
    brown_max: float = 0.6
    dark: float = 0.2
    light: float = 0.7
    very_light: float = 0.8
    greyish_saturation: float = 0.2


@dataclass(frozen=True)
class AnalyzerConfig:
    fps: Optional[float] = ANALYZER_FPS
    sample_point: str = SAMPLE_POINT
    wrap_hue: bool = WRAP_HUE
    thresholds: ClassifierThresholds = field(default_factory=ClassifierThresholds)

    def __post_init__(self):
        if self.sample_point not in ("center", "legacy"):
            raise ValueError(f"unknown sample point: {self.sample_point!r}")
        if self.fps is not None and self.fps <= 0:
            raise ValueError(f"fps must be positive or None, got {self.fps}")
