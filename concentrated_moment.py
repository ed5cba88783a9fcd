from dataclasses import dataclass


@dataclass(frozen=True)
class ConcentratedMoment:
    position: float  # [m]
    magnitude: float  # counter-clockwise positive [kN*m]
