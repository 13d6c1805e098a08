"""
Deterministic roughness applied to exported values.

The perturbation is a pure function of a numeric seed so repeated
exports of an unchanged curve produce identical tables. Do not replace
``seeded_random`` with the ``random`` module.
"""

import math

MAX_VARIATION_FRACTION = 0.1


def seeded_random(seed: float) -> float:
    """Map a seed to a reproducible pseudorandom value in [0, 1)."""
    x = math.sin(seed * 9999) * 10000
    return x - math.floor(x)


def max_variation(
    roughness: int,
    value_range: float,
    fraction: float = MAX_VARIATION_FRACTION,
) -> float:
    """Largest offset allowed for a roughness setting (10% of range at 100)."""
    return (roughness / 100) * fraction * value_range


def apply_roughness(
    value: float,
    roughness: int,
    seed: float,
    value_range: float,
    fraction: float = MAX_VARIATION_FRACTION,
) -> float:
    """
    Nudge a value by a bounded, seed-determined amount.

    Args:
        value: Value to perturb.
        roughness: Roughness setting, 0 (smooth) to 100 (rough).
        seed: Seed for the pseudorandom offset.
        value_range: Axis range the bound is relative to.
        fraction: Fraction of the range reachable at roughness 100.

    Returns:
        The perturbed value; unchanged when roughness is 0.
    """
    if roughness == 0:
        return value

    variation = (seeded_random(seed) - 0.5) * 2 * max_variation(roughness, value_range, fraction)
    return value + variation


def export_seed(day_index: int, curve_index: int) -> int:
    """Seed used for a curve's cell on a given day of the export grid."""
    return day_index * 1000 + curve_index
