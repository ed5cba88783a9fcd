from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

from beam_model import BeamModel
from deflection import slope_deflection
from reactions import Reactions, compute_reactions
from shear_moment import POINTS, sample_positions, shear_moment
from si_prefix import prefix_multiplier

# Magnitudes below these are integration noise and are reported as exact zeros
SNAP_TOLERANCE = 1e-5
SLOPE_SNAP_TOLERANCE = 1e-9


@dataclass(frozen=True)
class Sample:
    position: float
    shear: float
    moment: float
    slope: float
    deflection: float


@dataclass(frozen=True)
class BeamResult:
    """Response curves sampled at uniform spacing from x = 0 to x = L.

    Shear in kN, moment in kN*m, slope in rad, deflection in
    ``deflection_unit``.
    """

    x: np.ndarray
    shear: np.ndarray
    moment: np.ndarray
    slope: np.ndarray
    deflection: np.ndarray
    deflection_unit: str = "mm"

    def __len__(self) -> int:
        return len(self.x)

    def __getitem__(self, i: int) -> Sample:
        return Sample(
            position=float(self.x[i]),
            shear=float(self.shear[i]),
            moment=float(self.moment[i]),
            slope=float(self.slope[i]),
            deflection=float(self.deflection[i]),
        )

    def samples(self) -> Iterator[Sample]:
        for i in range(len(self)):
            yield self[i]


def _snap(values: np.ndarray, tolerance: float) -> np.ndarray:
    return np.where(np.abs(values) < tolerance, 0.0, values)


def compute_diagrams(
    model: BeamModel,
    n: int = POINTS,
    reactions: Optional[Reactions] = None,
    deflection_unit: str = "mm",
) -> BeamResult:
    if reactions is None:
        reactions = compute_reactions(model)
    x = sample_positions(model, n)
    shear, moment = shear_moment(model, reactions, x)
    slope, deflection = slope_deflection(model, x, moment)
    deflection = deflection / prefix_multiplier(deflection_unit, "m")

    return BeamResult(
        x=x,
        shear=_snap(shear, SNAP_TOLERANCE),
        moment=_snap(moment, SNAP_TOLERANCE),
        slope=_snap(slope, SLOPE_SNAP_TOLERANCE),
        deflection=_snap(deflection, SNAP_TOLERANCE),
        deflection_unit=deflection_unit,
    )
