import logging
from typing import List, Optional, Sequence

from src.teller.domain.breakdown import Breakdown
from src.teller.domain.cash_request import CashRequest
from src.teller.domain.denomination_ledger import DenominationLedger
from src.teller.domain.exceptions import (
    InsufficientSupply,
    MalformedRequest,
    NegativeQuantity,
    UnsupportedDenomination,
)
from src.teller.domain.withdrawal_result import WithdrawalOutcome, WithdrawalResult
from src.teller.services.conversion_engine import DenominationConversionEngine

logger = logging.getLogger(__name__)


class WithdrawalTransaction:
    """
    Runs a multi-denomination withdrawal against a scratch copy of the ledger.
    The ledger is only replaced when every denomination in the request succeeds.
    """

    def __init__(self, engine: Optional[DenominationConversionEngine] = None):
        self.engine = engine or DenominationConversionEngine()

    def execute(self, ledger: DenominationLedger, values: Sequence[int]) -> WithdrawalResult:
        # 1-2. Validate the whole request before touching anything
        try:
            request = CashRequest.parse(values, ledger.denominations)
        except MalformedRequest as e:
            return WithdrawalResult(WithdrawalOutcome.MALFORMED_REQUEST, str(e))
        except UnsupportedDenomination as e:
            return WithdrawalResult(WithdrawalOutcome.UNSUPPORTED_DENOMINATION, str(e))
        except NegativeQuantity as e:
            return WithdrawalResult(WithdrawalOutcome.NEGATIVE_QUANTITY, str(e))

        if request.is_empty():
            return WithdrawalResult(WithdrawalOutcome.EMPTY_REQUEST)

        # 3. Aggregate
        requested = request.aggregate()

        # 4. Scratch copy
        scratch = ledger.copy()
        breakdowns: List[Breakdown] = []

        # 5. Largest denomination first
        for denomination in ledger.denominations:
            quantity = requested.get(denomination, 0)
            if quantity <= 0:
                continue
            try:
                breakdowns.extend(self._withdraw_denomination(denomination, quantity, scratch))
            except InsufficientSupply as e:
                logger.debug(f"Withdrawal of {quantity} x {denomination} cannot be covered: {e}")
                return WithdrawalResult(WithdrawalOutcome.INSUFFICIENT_SUPPLY, str(e))

        # 6. Commit
        ledger.replace_with(scratch)
        dispensed = {d: q for d, q in requested.items() if q > 0}
        return WithdrawalResult(WithdrawalOutcome.FULFILLED, dispensed=dispensed, breakdowns=tuple(breakdowns))

    def _withdraw_denomination(
            self, denomination: int, quantity: int, scratch: DenominationLedger
    ) -> List[Breakdown]:
        available = scratch.quantity(denomination)
        if available >= quantity:
            scratch.apply(denomination, -quantity)
            return []

        shortfall = denomination * (quantity - available)
        breakdowns = self.engine.convert(denomination, shortfall, scratch)
        scratch.apply(denomination, -quantity)
        return breakdowns
