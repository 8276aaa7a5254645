from abc import ABC, abstractmethod

class TellerMachine(ABC):
    """
    Operations of a teller machine holding notes/coins of fixed denominations.
    Requests are flat sequences of (denomination, quantity) pairs in any order,
    e.g. deposit(1, 10, 20, 2) adds ten 1s and two 20s.
    """
    @abstractmethod
    def deposit(self, *pairs: int) -> None:
        """
        Adds every pair to the inventory, or nothing at all.
        Raises MalformedRequest on an odd number of values,
        UnsupportedDenomination for an unknown denomination,
        NegativeQuantity for a negative quantity.
        """
        pass

    @abstractmethod
    def withdraw(self, *pairs: int) -> bool:
        """
        Removes the requested units, making change from larger denominations
        when a denomination runs short. Returns False and leaves the inventory
        untouched when any part of the request cannot be fulfilled.
        """
        pass

    @abstractmethod
    def quantity(self, denomination: int) -> int:
        """Units held of `denomination`; 0 when it is not supported."""
        pass
