import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from beam_model import BeamModel, Load, SupportKind
from concentrated_moment import ConcentratedMoment
from distributed_load import DistributedLoad
from point_load import PointLoad

logger = logging.getLogger(__name__)

# Supports closer than this are treated as coincident [m]
SUPPORT_TOLERANCE = 1e-4

SupportAction = Tuple[float, float, float]  # (position, upward force, ccw couple)


@dataclass(frozen=True)
class Reactions:
    """Support reactions, tagged with the configuration that produced them.

    Forces are upward positive, couples counter-clockwise positive.
    ``moment_a`` is the reaction couple of the fixed end, which sits at
    ``support_a`` for a left cantilever and at the beam end for a right one.
    """

    support_kind: SupportKind
    vertical_a: float = 0.0
    vertical_b: float = 0.0
    moment_a: float = 0.0

    def fixed_end_position(self, model: BeamModel) -> Optional[float]:
        if self.support_kind is SupportKind.CANTILEVER_LEFT:
            return model.support_a
        if self.support_kind is SupportKind.CANTILEVER_RIGHT:
            return model.length
        return None

    def support_actions(self, model: BeamModel) -> List[SupportAction]:
        """Support actions picked up by a left-to-right section sweep.

        The right cantilever's wall closes the sweep at x = L, so nothing
        from it enters the free body left of any cut.
        """
        if self.support_kind is SupportKind.SIMPLE:
            return [
                (model.support_a, self.vertical_a, 0.0),
                (model.support_b, self.vertical_b, 0.0),
            ]
        if self.support_kind is SupportKind.CANTILEVER_LEFT:
            return [(model.support_a, self.vertical_a, self.moment_a)]
        return []


def _moment_about(load: Load, pivot: float) -> float:
    """Counter-clockwise moment of a load about ``pivot``."""
    if isinstance(load, PointLoad):
        return -load.magnitude * (load.position - pivot)
    if isinstance(load, DistributedLoad):
        return -load.total_force * (load.centroid - pivot)
    if isinstance(load, ConcentratedMoment):
        return load.magnitude
    raise TypeError(f"Unsupported load: {load!r}")


def load_moment_sum(model: BeamModel, pivot: float) -> float:
    return sum(_moment_about(load, pivot) for load in model.loads)


def compute_reactions(model: BeamModel) -> Reactions:
    kind = model.support_kind
    total = model.total_load

    if kind is SupportKind.SIMPLE:
        span = model.support_b - model.support_a
        if abs(span) < SUPPORT_TOLERANCE:
            logger.debug("Coincident supports at x=%s; returning zero reactions", model.support_a)
            return Reactions(kind)
        # Sum M_A = 0: R_B * span + S = 0
        s = load_moment_sum(model, model.support_a)
        r_b = -s / span
        return Reactions(kind, vertical_a=total - r_b, vertical_b=r_b)

    if kind is SupportKind.CANTILEVER_LEFT:
        s = load_moment_sum(model, model.support_a)
        return Reactions(kind, vertical_a=total, moment_a=-s)

    # Fixed at x = L: downward loads to the left turn the beam counter-clockwise
    s = load_moment_sum(model, model.length)
    return Reactions(kind, vertical_b=total, moment_a=-s)
