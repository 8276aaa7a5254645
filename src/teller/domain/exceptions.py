class TellerRequestError(ValueError):
    """Raised when a caller submits a request the machine cannot interpret."""
    pass

class MalformedRequest(TellerRequestError):
    """Raised when request parameters do not pair into (denomination, quantity)."""
    pass

class UnsupportedDenomination(TellerRequestError):
    """Raised when a request names a denomination the machine does not hold."""

    def __init__(self, denomination: int):
        super().__init__(f"Invalid denomination: {denomination}")
        self.denomination = denomination

class NegativeQuantity(TellerRequestError):
    """Raised when a request asks for a negative number of units."""

    def __init__(self, denomination: int, quantity: int):
        super().__init__(f"Cannot be negative quantity: {quantity}")
        self.denomination = denomination
        self.quantity = quantity

class InsufficientSupply(Exception):
    """Raised when larger denominations cannot be broken down to cover a shortfall."""
    pass

class LedgerInvariantViolation(Exception):
    """Raised when a ledger mutation would leave a negative or unknown count."""
    pass

class InvalidDenominationSet(ValueError):
    """Raised when configured denominations are not a valid descending chain."""
    pass
