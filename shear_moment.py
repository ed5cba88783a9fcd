from typing import Tuple

import numpy as np

from beam_model import BeamModel, Load
from concentrated_moment import ConcentratedMoment
from distributed_load import DistributedLoad
from point_load import PointLoad
from reactions import Reactions

POINTS = 200  # default number of intervals along the span


def sample_positions(model: BeamModel, n: int = POINTS) -> np.ndarray:
    if n < 1:
        raise ValueError(f"Need at least one interval, got n={n}")
    return np.linspace(0.0, model.length, n + 1)


def _add_force(shear: np.ndarray, moment: np.ndarray, x: np.ndarray, mask: np.ndarray,
               force, position) -> None:
    """Upward ``force`` at ``position`` acting on the free body left of each cut in ``mask``."""
    shear += np.where(mask, force, 0.0)
    moment += np.where(mask, force * (x - position), 0.0)


def _add_load(shear: np.ndarray, moment: np.ndarray, x: np.ndarray, load: Load) -> None:
    passed = load.position < x
    if isinstance(load, PointLoad):
        _add_force(shear, moment, x, passed, -load.magnitude, load.position)
    elif isinstance(load, DistributedLoad):
        overlap = np.minimum(x, load.end) - load.position
        active = passed & (overlap > 0)
        overlap = np.where(active, overlap, 0.0)
        _add_force(shear, moment, x, active, -load.intensity * overlap, load.position + overlap / 2)
    elif isinstance(load, ConcentratedMoment):
        # Sagging positive: a counter-clockwise couple on the left body lowers M.
        # so a +100 wall reaction under a tip load shows as M = -100, magnitude 100.
        moment -= np.where(passed, load.magnitude, 0.0)
    else:
        raise TypeError(f"Unsupported load: {load!r}")


def shear_moment(model: BeamModel, reactions: Reactions, x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Shear and bending moment at each cut in ``x`` by the method of sections.

    Loads count once the cut is strictly past them, so a concentrated load
    shows up as a jump at the next sample. Support forces enter the shear the
    same way; support couples count from their own position on.
    """
    shear = np.zeros_like(x, dtype=float)
    moment = np.zeros_like(x, dtype=float)

    for position, force, couple in reactions.support_actions(model):
        _add_force(shear, moment, x, position < x, force, position)
        moment -= np.where(position <= x, couple, 0.0)

    for load in model.loads:
        _add_load(shear, moment, x, load)

    return shear, moment
