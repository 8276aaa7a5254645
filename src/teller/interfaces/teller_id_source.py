from abc import ABC, abstractmethod
from uuid import UUID, uuid4

class TellerIdSource(ABC):
    """
    Abstract source of IDs for journaled teller events.
    Injected so tests can pin identifiers.
    """
    @abstractmethod
    def new_id(self) -> UUID:
        pass

class SystemTellerIdSource(TellerIdSource):
    def new_id(self) -> UUID:
        return uuid4()
