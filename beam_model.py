from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from concentrated_moment import ConcentratedMoment
from distributed_load import DistributedLoad
from point_load import PointLoad
from si_prefix import prefix_multiplier

Load = Union[PointLoad, DistributedLoad, ConcentratedMoment]


class SupportKind(Enum):
    SIMPLE = "simple"
    CANTILEVER_LEFT = "cantilever-left"
    CANTILEVER_RIGHT = "cantilever-right"


@dataclass
class BeamModel:
    length: float
    support_kind: SupportKind = SupportKind.SIMPLE
    support_a: float = 0.0
    support_b: Optional[float] = None
    elastic_modulus: float = 200.0  # [GPa]
    inertia: float = 0.0  # [cm^4]
    loads: List[Load] = field(default_factory=list)

    def __post_init__(self):
        if self.support_b is None:
            self.support_b = self.length

    @property
    def flexural_stiffness(self) -> float:
        """EI in kN*m^2 from E [GPa] and I [cm^4]."""
        e_kpa = self.elastic_modulus * prefix_multiplier("GPa", "Pa") / prefix_multiplier("kPa", "Pa")
        i_m4 = self.inertia * prefix_multiplier("cm", "m", power=4)
        return e_kpa * i_m4

    @property
    def total_load(self) -> float:
        """Sum of downward forces; couples do not count."""
        total = 0.0
        for load in self.loads:
            if isinstance(load, PointLoad):
                total += load.magnitude
            elif isinstance(load, DistributedLoad):
                total += load.total_force
        return total
