from dataclasses import dataclass
from typing import List

DEFAULT_BEAM_LENGTH = 10.0


@dataclass(frozen=True)
class Material:
    name: str
    elastic_modulus: float  # [GPa]
    yield_strength: float  # [MPa]


@dataclass(frozen=True)
class Profile:
    name: str
    inertia: float  # second moment of area [cm^4]
    section_modulus: float  # [cm^3]


MATERIALS: List[Material] = [
    Material("Steel (Structure)", 200.0, 240.0),
    Material("Steel (High Strength)", 210.0, 345.0),
    Material("Aluminum 6061", 69.0, 276.0),
    Material("Timber (Pine)", 11.0, 40.0),
    Material("Concrete (C25/30)", 30.0, 25.0),
]

# "Custom" carries no section data; the user supplies I and W directly.
PROFILES: List[Profile] = [
    Profile("Custom", 0.0, 0.0),
    Profile("IPE 100", 171.0, 34.2),
    Profile("IPE 160", 869.0, 109.0),
    Profile("IPE 200", 1943.0, 194.0),
    Profile("IPE 240", 3892.0, 324.0),
    Profile("IPE 300", 8356.0, 557.0),
    Profile("HEA 100", 349.0, 72.8),
    Profile("HEA 200", 3692.0, 389.0),
]


def material_by_name(name: str) -> Material:
    for material in MATERIALS:
        if material.name == name:
            return material
    raise KeyError(f"Unknown material: {name}")


def profile_by_name(name: str) -> Profile:
    for profile in PROFILES:
        if profile.name == name:
            return profile
    raise KeyError(f"Unknown profile: {name}")
