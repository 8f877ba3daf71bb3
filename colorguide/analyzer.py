# colorguide/analyzer.py

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Mapping, Optional

from .classifier import ColorClassifier
from .color_space import hsv_to_hsl, sample_hsv
from .config import AnalyzerConfig
from .sample import PlanarSample

logger = logging.getLogger(__name__)


def classify_frame(sample: PlanarSample, config: Optional[AnalyzerConfig] = None) -> str:
    """Name the color at the sample point of one frame."""
    config = config or AnalyzerConfig()
    hsv = sample_hsv(sample, config.sample_point)
    hsl = hsv_to_hsl(hsv)
    return ColorClassifier(config.thresholds, config.wrap_hue).classify(hsl)


class Throttle:
    """
    Accepts at most `fps` events per second.

    The first call is always accepted. fps=None accepts everything.
    """

    def __init__(self, fps: Optional[float], clock: Callable[[], float] = time.monotonic):
        self.interval = 0.0 if fps is None else 1.0 / fps
        self._clock = clock
        self._last: Optional[float] = None
        self._lock = threading.Lock()

    def now(self) -> float:
        return self._clock()

    def due(self, now: float) -> bool:
        with self._lock:
            return self._last is None or now - self._last >= self.interval

    def mark(self, now: float) -> None:
        with self._lock:
            self._last = now

    def ready(self) -> bool:
        now = self.now()
        if not self.due(now):
            return False
        self.mark(now)
        return True

    def reset(self) -> None:
        with self._lock:
            self._last = None


class ColorAnalyzer:
    """Classifies frames from one source, skipping those that arrive too soon."""

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        labels: Optional[Mapping[str, str]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or AnalyzerConfig()
        self.classifier = ColorClassifier(self.config.thresholds, self.config.wrap_hue, labels)
        self.throttle = Throttle(self.config.fps, clock)

    def analyze(self, sample: PlanarSample) -> Optional[str]:
        """
        Color name for the frame, or None if the frame was skipped.

        Only a successfully classified frame starts a new throttle interval.
        """
        now = self.throttle.now()
        if not self.throttle.due(now):
            logger.debug("frame skipped by throttle")
            return None

        hsv = sample_hsv(sample, self.config.sample_point)
        color_name = self.classifier.classify(hsv_to_hsl(hsv))
        self.throttle.mark(now)
        return color_name
