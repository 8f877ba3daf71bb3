from .analyzer import ColorAnalyzer, Throttle, classify_frame
from .classifier import ColorClassifier, classify_hsl, nearest_hue_name
from .color_space import hsl_to_hsv, hsv_to_hsl, read_yuv, rgb_to_hsv, sample_hsv, yuv_to_rgb
from .config import AnalyzerConfig, ClassifierThresholds
from .sample import InvalidSample, PlanarSample, Plane

__all__ = [
    "AnalyzerConfig",
    "ClassifierThresholds",
    "ColorAnalyzer",
    "ColorClassifier",
    "InvalidSample",
    "PlanarSample",
    "Plane",
    "Throttle",
    "classify_frame",
    "classify_hsl",
    "hsl_to_hsv",
    "hsv_to_hsl",
    "nearest_hue_name",
    "read_yuv",
    "rgb_to_hsv",
    "sample_hsv",
    "yuv_to_rgb",
]
