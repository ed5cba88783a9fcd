from dataclasses import dataclass


@dataclass(frozen=True)
class DistributedLoad:
    position: float  # Start position along beam [m]
    span_length: float  # Loaded length [m]
    intensity: float  # Downward force per length [kN/m]

    @property
    def end(self) -> float:
        return self.position + self.span_length

    @property
    def total_force(self) -> float:
        return self.intensity * self.span_length

    @property
    def centroid(self) -> float:
        return self.position + self.span_length / 2
