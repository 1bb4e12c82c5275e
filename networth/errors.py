class NetWorthError(Exception):
    """Base class for net-worth report failures."""


class InvalidTransaction(NetWorthError):
    """Raised when a transaction has a missing or ill-typed date or amount.

    ``error`` holds the mapping produced by ``validate_transaction`` so callers
    can show which record broke the computation.
    """

    def __init__(self, error: dict):
        self.error = error
        super().__init__(error.get("message", "invalid transaction"))
