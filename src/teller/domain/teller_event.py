from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Tuple
from uuid import UUID

from src.teller.domain.breakdown import Breakdown
from src.teller.domain.cash_request import RequestLine


class TellerEventKind(Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


@dataclass(frozen=True)
class TellerEvent:
    """
    Immutable record of a committed deposit or withdrawal.
    Failed operations never produce an event.
    """
    id: UUID
    timestamp: datetime
    kind: TellerEventKind
    lines: Tuple[RequestLine, ...]
    breakdowns: Tuple[Breakdown, ...] = ()

    @property
    def value(self) -> int:
        return sum(line.value for line in self.lines)
