# core/logic/scoring.py
from __future__ import annotations
import math

from core.emissions import MODE_KG_PER_KM, Mode, mode_key

MIN_SCORE = 1.0
MAX_SCORE = 10.0
# ratio 1.0 (exactly as expected for the mode) maps to the middle of the scale
RATIO_SCALE = 5.0


def _round_half_up(value: float, digits: int = 1) -> float:
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def eco_score(co2_kg: float, distance_km: float, mode: Mode) -> float:
    """
    Relative desirability in [1.0, 10.0].

    Zero emissions always score 10. Otherwise the actual emission is compared
    with the per-mode expectation for the same distance:
    ``clamp(expected / actual * 5, 1, 10)`` rounded to one decimal. A
    zero-length trip with nonzero emissions yields ratio 0 and so the minimum.
    """
    if co2_kg == 0:
        return MAX_SCORE

    baseline = MODE_KG_PER_KM.get(mode_key(mode), MODE_KG_PER_KM["driving"])
    expected = baseline * float(distance_km)
    ratio = expected / float(co2_kg)
    # clamp first so tiny co2 values cannot leak huge ratios into rounding
    score = min(MAX_SCORE, max(MIN_SCORE, ratio * RATIO_SCALE))
    return _round_half_up(score, 1)
