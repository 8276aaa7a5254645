from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from src.teller.domain.denomination_set import DenominationSet
from src.teller.domain.exceptions import MalformedRequest, NegativeQuantity, UnsupportedDenomination


@dataclass(frozen=True)
class RequestLine:
    denomination: int
    quantity: int

    @property
    def value(self) -> int:
        return self.denomination * self.quantity


@dataclass(frozen=True)
class CashRequest:
    """
    Validated (denomination, quantity) pairs supplied in a single call.
    Lines keep caller order; a denomination may appear more than once.
    """
    lines: Tuple[RequestLine, ...]

    @classmethod
    def parse(cls, values: Sequence[int], denominations: DenominationSet) -> 'CashRequest':
        """
        Pairs up a flat parameter sequence and validates the whole of it.
        Checks run in order over the entire sequence: pairing and integer
        types, then denominations, then quantities. Nothing is applied here.
        """
        if len(values) % 2 != 0:
            raise MalformedRequest("Cannot have odd number of parameters")
        for value in values:
            if not isinstance(value, int) or isinstance(value, bool):
                raise MalformedRequest(f"Parameters must be integers: {value!r}")

        lines = tuple(
            RequestLine(values[i], values[i + 1]) for i in range(0, len(values), 2)
        )
        for line in lines:
            if line.denomination not in denominations:
                raise UnsupportedDenomination(line.denomination)
        for line in lines:
            if line.quantity < 0:
                raise NegativeQuantity(line.denomination, line.quantity)
        return cls(lines)

    def is_empty(self) -> bool:
        return not self.lines

    def aggregate(self) -> Dict[int, int]:
        """Total requested units per denomination; repeated denominations accumulate."""
        totals: Dict[int, int] = {}
        for line in self.lines:
            totals[line.denomination] = totals.get(line.denomination, 0) + line.quantity
        return totals

    def total_value(self) -> int:
        return sum(line.value for line in self.lines)
