import logging
from threading import Lock
from typing import Dict, List, Optional, Tuple

from src.config.settings import Settings
from src.teller.domain.breakdown import Breakdown
from src.teller.domain.cash_request import CashRequest, RequestLine
from src.teller.domain.denomination_ledger import DenominationLedger
from src.teller.domain.denomination_set import DenominationSet
from src.teller.domain.exceptions import TellerRequestError
from src.teller.domain.teller_event import TellerEvent, TellerEventKind
from src.teller.domain.withdrawal_result import WithdrawalOutcome, WithdrawalResult
from src.teller.interfaces.teller_id_source import SystemTellerIdSource, TellerIdSource
from src.teller.interfaces.teller_machine import TellerMachine
from src.teller.interfaces.teller_time_source import SystemTellerTimeSource, TellerTimeSource
from src.teller.observability.structured_teller_logger import StructuredTellerLogger
from src.teller.services.withdrawal_transaction import WithdrawalTransaction
from src.teller.store.teller_journal import TellerJournal

logger = logging.getLogger(__name__)


class LimitedTellerMachine(TellerMachine):
    """
    Teller machine that only accepts a fixed chain of denominations
    (by default 20, 10, 5 and 1).
    Each deposit, withdrawal and lookup runs as a single critical section.
    """

    def __init__(
            self,
            denominations: Optional[DenominationSet] = None,
            transaction: Optional[WithdrawalTransaction] = None,
            journal: Optional[TellerJournal] = None,
            structured_logger: Optional[StructuredTellerLogger] = None,
            time_source: Optional[TellerTimeSource] = None,
            id_source: Optional[TellerIdSource] = None,
            journal_enabled: bool = True,
    ):
        self.denominations = denominations or DenominationSet.reference()
        self.transaction = transaction or WithdrawalTransaction()
        self.journal = (journal or TellerJournal()) if journal_enabled else None
        self.structured_logger = structured_logger or StructuredTellerLogger()
        self.time_source = time_source or SystemTellerTimeSource()
        self.id_source = id_source or SystemTellerIdSource()
        self._ledger = DenominationLedger(self.denominations)
        self._lock = Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> 'LimitedTellerMachine':
        return cls(
            denominations=DenominationSet.of(settings.TELLER_DENOMINATIONS),
            structured_logger=StructuredTellerLogger(enabled=settings.TELLER_EVENT_LOGGING),
            journal_enabled=settings.TELLER_JOURNAL_ENABLED,
        )

    def deposit(self, *pairs: int) -> None:
        with self._lock:
            try:
                request = CashRequest.parse(pairs, self.denominations)
            except TellerRequestError as e:
                self.structured_logger.emit(
                    "TELLER_DEPOSIT_REJECTED", reason=type(e).__name__, detail=str(e)
                )
                raise

            for line in request.lines:
                self._ledger.apply(line.denomination, line.quantity)

            if request.total_value() == 0:
                return
            self._record(TellerEventKind.DEPOSIT, request.aggregate(), ())
            self.structured_logger.emit(
                "TELLER_DEPOSIT", deposited=request.aggregate(), counts=self._ledger.counts()
            )

    def withdraw(self, *pairs: int) -> bool:
        return self.withdraw_detailed(*pairs).fulfilled

    def withdraw_detailed(self, *pairs: int) -> WithdrawalResult:
        """Same as withdraw() but returns the full outcome, including breakdowns applied."""
        with self._lock:
            result = self.transaction.execute(self._ledger, pairs)

            if not result.fulfilled:
                logger.warning(f"Withdrawal rejected ({result.outcome.value}): {result.detail}")
                self.structured_logger.emit(
                    "TELLER_WITHDRAWAL_REJECTED", reason=result.outcome.value, detail=result.detail
                )
                return result

            if result.outcome == WithdrawalOutcome.FULFILLED and result.dispensed:
                self._record(TellerEventKind.WITHDRAWAL, result.dispensed, result.breakdowns)
                self.structured_logger.emit(
                    "TELLER_WITHDRAWAL",
                    dispensed=result.dispensed,
                    breakdowns=len(result.breakdowns),
                    counts=self._ledger.counts(),
                )
            return result

    def quantity(self, denomination: int) -> int:
        with self._lock:
            return self._ledger.quantity(denomination)

    def counts(self) -> Dict[int, int]:
        with self._lock:
            return self._ledger.counts()

    def total_value(self) -> int:
        with self._lock:
            return self._ledger.total_value()

    def history(self) -> List[TellerEvent]:
        with self._lock:
            if self.journal is None:
                return []
            return self.journal.get_history()

    def _record(self, kind: TellerEventKind, quantities: Dict[int, int], breakdowns: Tuple[Breakdown, ...]) -> None:
        if self.journal is None:
            return
        lines = tuple(
            RequestLine(denomination, quantities[denomination])
            for denomination in self.denominations
            if quantities.get(denomination, 0) > 0
        )
        self.journal.append(TellerEvent(
            id=self.id_source.new_id(),
            timestamp=self.time_source.now(),
            kind=kind,
            lines=lines,
            breakdowns=breakdowns,
        ))
