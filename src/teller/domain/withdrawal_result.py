from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple

from src.teller.domain.breakdown import Breakdown


class WithdrawalOutcome(Enum):
    FULFILLED = "FULFILLED"
    EMPTY_REQUEST = "EMPTY_REQUEST"
    MALFORMED_REQUEST = "MALFORMED_REQUEST"
    UNSUPPORTED_DENOMINATION = "UNSUPPORTED_DENOMINATION"
    NEGATIVE_QUANTITY = "NEGATIVE_QUANTITY"
    INSUFFICIENT_SUPPLY = "INSUFFICIENT_SUPPLY"


@dataclass(frozen=True)
class WithdrawalResult:
    """
    Outcome of one withdrawal transaction.
    Only fulfilled results carry dispensed quantities and breakdowns.
    """
    outcome: WithdrawalOutcome
    detail: str = ""
    dispensed: Dict[int, int] = field(default_factory=dict)
    breakdowns: Tuple[Breakdown, ...] = ()

    @property
    def fulfilled(self) -> bool:
        return self.outcome in (WithdrawalOutcome.FULFILLED, WithdrawalOutcome.EMPTY_REQUEST)
