"""
Point capture, interpolation and roughness for drawn curves.
"""

from curve_series.curves.capture import (
    PointCapture,
    default_region,
    normalize_position,
)
from curve_series.curves.interpolation import (
    drawn_range,
    interpolate_value,
    sample_curve,
)
from curve_series.curves.roughness import (
    apply_roughness,
    export_seed,
    max_variation,
    seeded_random,
)

__all__ = [
    # Capture
    "PointCapture",
    "default_region",
    "normalize_position",
    # Interpolation
    "drawn_range",
    "interpolate_value",
    "sample_curve",
    # Roughness
    "apply_roughness",
    "export_seed",
    "max_variation",
    "seeded_random",
]
