from typing import Dict, Optional

from src.teller.domain.denomination_set import DenominationSet
from src.teller.domain.exceptions import LedgerInvariantViolation


class DenominationLedger:
    """
    Authoritative count of units held per supported denomination.
    Every supported denomination always has an entry; counts never go negative.
    """

    def __init__(self, denominations: DenominationSet, counts: Optional[Dict[int, int]] = None):
        self.denominations = denominations
        self._counts: Dict[int, int] = {denomination: 0 for denomination in denominations}
        if counts:
            for denomination, count in counts.items():
                self.apply(denomination, count)

    def quantity(self, denomination: int) -> int:
        return self._counts.get(denomination, 0)

    def apply(self, denomination: int, delta: int) -> None:
        if denomination not in self._counts:
            raise LedgerInvariantViolation(f"Unknown denomination: {denomination}")
        updated = self._counts[denomination] + delta
        if updated < 0:
            raise LedgerInvariantViolation(
                f"Count for {denomination} would become negative ({updated})"
            )
        self._counts[denomination] = updated

    def copy(self) -> 'DenominationLedger':
        """Scratch copy used to simulate a transaction before committing it."""
        return DenominationLedger(self.denominations, dict(self._counts))

    def replace_with(self, other: 'DenominationLedger') -> None:
        if other.denominations != self.denominations:
            raise LedgerInvariantViolation("Cannot commit a ledger over different denominations")
        self._counts = dict(other._counts)

    def counts(self) -> Dict[int, int]:
        return dict(self._counts)

    def total_value(self) -> int:
        return sum(denomination * count for denomination, count in self._counts.items())
