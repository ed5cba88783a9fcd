from dataclasses import dataclass
from typing import Optional

import numpy as np

from diagrams import BeamResult
from reactions import Reactions
from si_prefix import convert

NO_STRESS_SAFETY_FACTOR = 999.0


@dataclass(frozen=True)
class BeamSummary:
    reactions: Reactions
    max_shear: float  # [kN]
    max_moment: float  # [kN*m]
    max_deflection: float  # [result.deflection_unit]
    max_stress: float  # [MPa]
    safety_factor: float
    is_safe: bool


def _peak(values: np.ndarray) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.max(np.abs(values)))


def bending_stress(moment: float, section_modulus: Optional[float]) -> float:
    """Extreme fibre stress [MPa] for a moment [kN*m] and W [cm^3]."""
    if not section_modulus:
        return 0.0
    moment_nm = moment * 1e3
    w_m3 = convert(section_modulus, "cm", "m", "m", power=3)
    return convert(moment_nm / w_m3, "Pa", "MPa", "Pa")


def summarize(
    result: BeamResult,
    reactions: Reactions,
    section_modulus: Optional[float] = None,
    yield_strength: Optional[float] = None,
) -> BeamSummary:
    max_moment = _peak(result.moment)
    max_stress = bending_stress(max_moment, section_modulus)
    if max_stress > 0 and yield_strength is not None:
        safety_factor = yield_strength / max_stress
    else:
        safety_factor = NO_STRESS_SAFETY_FACTOR
    return BeamSummary(
        reactions=reactions,
        max_shear=_peak(result.shear),
        max_moment=max_moment,
        max_deflection=_peak(result.deflection),
        max_stress=max_stress,
        safety_factor=safety_factor,
        is_safe=yield_strength is None or max_stress <= yield_strength,
    )
