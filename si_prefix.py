SI_PREFIXES = [
    ("n", 1e-9),
    ("u", 1e-6),
    ("m", 1e-3),
    ("c", 1e-2),
    ("", 1.0),
    ("k", 1e3),
    ("M", 1e6),
    ("G", 1e9),
]


def prefix_labels(unit: str) -> list[str]:
    return [f"{prefix}{unit}" if prefix else unit for prefix, _ in SI_PREFIXES]


def prefix_multiplier(label: str, unit: str, power: int = 1) -> float:
    """Factor taking a value in ``label`` to the base ``unit``.

    ``power`` raises the prefix for area moments and volumes, so
    ``prefix_multiplier("cm", "m", 4)`` converts cm^4 to m^4.
    """
    for prefix, multiplier in SI_PREFIXES:
        expected = f"{prefix}{unit}" if prefix else unit
        if label == expected:
            return multiplier**power
    raise ValueError(f"Unknown unit {label!r} for base unit {unit!r}")


def convert(value: float, from_label: str, to_label: str, unit: str, power: int = 1) -> float:
    return value * prefix_multiplier(from_label, unit, power) / prefix_multiplier(to_label, unit, power)
