from dataclasses import dataclass


@dataclass(frozen=True)
class Breakdown:
    """
    One conversion step: units of a larger denomination broken into the next smaller one.
    Value is conserved: source * units_broken == target * units_produced.
    """
    source: int
    units_broken: int
    target: int
    units_produced: int
