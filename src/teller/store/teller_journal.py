from typing import List

from src.teller.domain.teller_event import TellerEvent, TellerEventKind


class TellerJournal:
    """
    Append-only in-memory log of committed teller operations.
    """
    def __init__(self):
        self._log: List[TellerEvent] = []

    def append(self, event: TellerEvent) -> None:
        self._log.append(event)

    def get_history(self) -> List[TellerEvent]:
        return list(self._log)

    def net_value(self) -> int:
        """Deposited value minus withdrawn value across the whole history."""
        total = 0
        for event in self._log:
            if event.kind == TellerEventKind.DEPOSIT:
                total += event.value
            else:
                total -= event.value
        return total
