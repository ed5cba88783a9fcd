from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from beam_model import BeamModel, Load, SupportKind
from catalog import DEFAULT_BEAM_LENGTH, MATERIALS, PROFILES, material_by_name, profile_by_name
from concentrated_moment import ConcentratedMoment
from distributed_load import DistributedLoad
from point_load import PointLoad
from shear_moment import POINTS

NEW_LOAD_MAGNITUDE = 10.0
NEW_DISTRIBUTED_SPAN = 2.0


def _default_loads() -> List[Load]:
    return [
        PointLoad(position=DEFAULT_BEAM_LENGTH / 2, magnitude=10.0),
        DistributedLoad(position=1.0, span_length=3.0, intensity=5.0),
    ]


@dataclass
class BeamUIState:
    length: float = DEFAULT_BEAM_LENGTH
    support_kind: SupportKind = SupportKind.SIMPLE
    support_a: float = 0.0
    support_b: float = DEFAULT_BEAM_LENGTH
    material_name: str = MATERIALS[0].name
    profile_name: str = PROFILES[2].name
    custom_inertia: Optional[float] = None  # [cm^4]
    custom_section_modulus: Optional[float] = None  # [cm^3]
    loads: List[Load] = field(default_factory=_default_loads)
    points: int = POINTS

    @property
    def inertia(self) -> float:
        return self.custom_inertia or profile_by_name(self.profile_name).inertia

    @property
    def section_modulus(self) -> float:
        return self.custom_section_modulus or profile_by_name(self.profile_name).section_modulus

    @property
    def yield_strength(self) -> float:
        return material_by_name(self.material_name).yield_strength

    def to_model(self) -> BeamModel:
        return BeamModel(
            length=self.length,
            support_kind=self.support_kind,
            support_a=self.support_a,
            support_b=self.support_b,
            elastic_modulus=material_by_name(self.material_name).elastic_modulus,
            inertia=self.inertia,
            loads=list(self.loads),
        )

    def set_length(self, length: float) -> None:
        self.length = length
        self.support_a = max(0.0, min(length, self.support_a))
        self.support_b = max(0.0, min(length, self.support_b))
        self._clamp_loads()

    def add_load(
        self,
        kind: str,
        position: Optional[float] = None,
        value: float = NEW_LOAD_MAGNITUDE,
        span_length: float = NEW_DISTRIBUTED_SPAN,
    ) -> Load:
        """Append a load of ``kind`` kept on the beam; defaults to mid-span."""
        if position is None:
            position = self.length / 2
        position = max(0.0, min(self.length, position))
        if kind == "point":
            load = PointLoad(position=position, magnitude=value)
        elif kind == "distributed":
            span = min(span_length, self.length - position)
            load = DistributedLoad(position=position, span_length=span, intensity=value)
        elif kind == "moment":
            load = ConcentratedMoment(position=position, magnitude=value)
        else:
            raise ValueError(f"Unknown load kind: {kind}")
        self.loads.append(load)
        return load

    def remove_load(self, index: int) -> None:
        del self.loads[index]

    def _clamp_loads(self) -> None:
        clamped = []
        for load in self.loads:
            position = max(0.0, min(self.length, load.position))
            clamped.append(replace(load, position=position))
        self.loads = clamped
