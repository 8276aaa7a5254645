import logging
from typing import Dict, List

from src.teller.domain.breakdown import Breakdown
from src.teller.domain.denomination_ledger import DenominationLedger
from src.teller.domain.exceptions import InsufficientSupply, LedgerInvariantViolation

logger = logging.getLogger(__name__)


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


class DenominationConversionEngine:
    """
    Produces missing units of a denomination by breaking larger ones.
    Operates on a scratch ledger only. It adds supply at the target
    denomination but never deducts the requester's consumption.
    """

    def convert(self, denomination: int, shortfall: int, scratch: DenominationLedger) -> List[Breakdown]:
        """
        Covers `shortfall` (a monetary amount, multiple of `denomination`) at `denomination`.
        Returns the breakdowns applied to `scratch`, largest first.
        Raises InsufficientSupply when no chain of larger denominations can cover it;
        `scratch` may be partially modified in that case and must be discarded.
        """
        if shortfall <= 0:
            raise InsufficientSupply(f"Conversion requested for non-positive shortfall {shortfall}")

        needed = self._propagate_requirements(denomination, shortfall, scratch)
        return self._cascade(needed, scratch)

    def _propagate_requirements(
            self, denomination: int, shortfall: int, scratch: DenominationLedger
    ) -> Dict[int, int]:
        denominations = scratch.denominations
        needed: Dict[int, int] = {denomination: shortfall // denomination}

        for index in range(denominations.index_of(denomination), -1, -1):
            current = denominations.at(index)
            bigger = denominations.at(index - 1)
            if bigger is None:
                raise InsufficientSupply(
                    f"No denomination larger than {current} left to cover {shortfall} at {denomination}"
                )

            needed_value = needed[current] * current
            available_value = scratch.quantity(bigger) * bigger
            if available_value >= needed_value:
                break
            needed[bigger] = _ceil_div(needed_value - available_value, bigger)

        return needed

    def _cascade(self, needed: Dict[int, int], scratch: DenominationLedger) -> List[Breakdown]:
        denominations = scratch.denominations
        breakdowns: List[Breakdown] = []

        for index in range(len(denominations) - 1):
            current = denominations.at(index)
            smaller = denominations.at(index + 1)
            amount = needed.get(smaller, 0) * smaller
            if amount <= 0:
                continue

            units_broken = _ceil_div(amount, current)
            units_produced = (current // smaller) * units_broken
            try:
                scratch.apply(current, -units_broken)
            except LedgerInvariantViolation as e:
                raise InsufficientSupply(str(e)) from e
            scratch.apply(smaller, units_produced)

            breakdown = Breakdown(current, units_broken, smaller, units_produced)
            logger.debug(f"Broke {units_broken} x {current} into {units_produced} x {smaller}")
            breakdowns.append(breakdown)

        return breakdowns
