# colorguide/classifier.py

import logging
import math
from typing import Mapping, Optional

from .config import ClassifierThresholds, WRAP_HUE
from .palette import (
    BLACK,
    BROWN,
    GREY,
    HUE_PALETTE,
    ORANGE,
    PREFIX_DARK,
    PREFIX_GREYISH,
    PREFIX_LIGHT,
    PREFIX_VERY_LIGHT,
    WHITE,
)

logger = logging.getLogger(__name__)

_DEFAULT_THRESHOLDS = ClassifierThresholds()


def hue_distance(a: float, b: float, wrap: bool = True) -> float:
    d = abs(a - b)
    if wrap:
        return min(d, 360.0 - d)
    return d


def nearest_hue_name(hue: float, wrap: bool = True) -> tuple[str, float]:
    """
    Palette entry closest to `hue` (degrees).
    Ties go to the entry listed first in HUE_PALETTE.
    """
    best_name, best_d = "", 360.0

    for name, ref_hue in HUE_PALETTE:
        d = hue_distance(ref_hue, hue, wrap)
        if d < best_d:
            best_d, best_name = d, name

    return best_name, best_d


def _sanitize(hsl: tuple[float, float, float]) -> tuple[float, float, float]:
    h, s, l = hsl
    h = float(h)
    if not math.isfinite(h):
        h = 0.0
    return h % 360.0, min(1.0, max(0.0, float(s))), min(1.0, max(0.0, float(l)))


def classify_hsl(
    hsl: tuple[float, float, float],
    thresholds: Optional[ClassifierThresholds] = None,
    wrap_hue: bool = WRAP_HUE,
    labels: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Name the color of an HSL triple.

    Precedence:
    1) White / Black / Grey by lightness and saturation
    2) nearest palette hue
    3) Orange at mid lightness -> Brown, otherwise one lightness prefix
    4) "greyish" for low saturation, on top of any lightness prefix
    """
    t = thresholds or _DEFAULT_THRESHOLDS
    hue, saturation, lightness = _sanitize(hsl)

    def label(key: str) -> str:
        if labels is None:
            return key
        return labels.get(key, key)

    if lightness > t.white:
        name = label(WHITE)
    elif lightness < t.black:
        name = label(BLACK)
    elif saturation < t.grey_saturation:
        name = label(GREY)
    else:
        nearest, dist = nearest_hue_name(hue, wrap_hue)
        logger.debug("Nearest color: %s with distance: %.2f, hue: %.2f", nearest, dist, hue)

        prefixes = []
        if nearest == ORANGE and t.brown_min < lightness < t.brown_max:
            nearest = BROWN
        elif lightness < t.dark:
            prefixes.append(label(PREFIX_DARK))
        elif lightness > t.very_light:
            prefixes.append(label(PREFIX_VERY_LIGHT))
        elif lightness > t.light:
            prefixes.append(label(PREFIX_LIGHT))

        if saturation < t.greyish_saturation:
            prefixes.append(label(PREFIX_GREYISH))

        name = " ".join(prefixes + [label(nearest)])

    logger.debug("Color: %s, hsl: %.2f %.3f %.3f", name, hue, saturation, lightness)
    return name


class ColorClassifier:
    """classify_hsl with fixed thresholds, hue-wrap mode and display labels."""

    def __init__(
        self,
        thresholds: Optional[ClassifierThresholds] = None,
        wrap_hue: bool = WRAP_HUE,
        labels: Optional[Mapping[str, str]] = None,
    ):
        self.thresholds = thresholds or _DEFAULT_THRESHOLDS
        self.wrap_hue = wrap_hue
        self.labels = dict(labels) if labels else None

    def classify(self, hsl: tuple[float, float, float]) -> str:
        return classify_hsl(hsl, self.thresholds, self.wrap_hue, self.labels)
