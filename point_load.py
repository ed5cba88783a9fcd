from dataclasses import dataclass


@dataclass(frozen=True)
class PointLoad:
    position: float  # distance from left end [m]
    magnitude: float  # downward positive [kN]
