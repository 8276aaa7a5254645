from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from src.teller.domain.exceptions import InvalidDenominationSet


@dataclass(frozen=True)
class DenominationSet:
    """
    Fixed, strictly descending chain of supported denominations.
    Each value must evenly divide the next larger one so that breaking
    a unit never leaves a remainder.
    """
    values: Tuple[int, ...]

    def __post_init__(self):
        if not self.values:
            raise InvalidDenominationSet("At least one denomination is required")
        for value in self.values:
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise InvalidDenominationSet(f"Denominations must be positive integers: {value!r}")
        for larger, smaller in zip(self.values, self.values[1:]):
            if larger <= smaller:
                raise InvalidDenominationSet(
                    f"Denominations must be strictly descending: {larger} before {smaller}"
                )
            if larger % smaller != 0:
                raise InvalidDenominationSet(
                    f"{smaller} does not evenly divide {larger}"
                )

    @classmethod
    def of(cls, values: Iterable[int]) -> 'DenominationSet':
        return cls(tuple(values))

    @classmethod
    def reference(cls) -> 'DenominationSet':
        return cls((20, 10, 5, 1))

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __contains__(self, denomination: object) -> bool:
        return denomination in self.values

    def index_of(self, denomination: int) -> int:
        return self.values.index(denomination)

    def at(self, index: int) -> Optional[int]:
        """Denomination at index, or None outside the chain (including negative indexes)."""
        if 0 <= index < len(self.values):
            return self.values[index]
        return None
