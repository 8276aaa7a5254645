from abc import ABC, abstractmethod
from datetime import datetime, timezone

class TellerTimeSource(ABC):
    """
    Abstract source of time for journaled teller events.
    All timestamps are UTC-aware.
    """
    @abstractmethod
    def now(self) -> datetime:
        pass

class SystemTellerTimeSource(TellerTimeSource):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
