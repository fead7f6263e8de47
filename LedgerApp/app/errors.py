from decimal import Decimal


class LedgerError(Exception):
    """Base class for every error raised by the ledger engine."""


class BalanceViolation(LedgerError):
    """The amounts of a candidate line set do not sum to zero."""

    def __init__(self, total, expected=Decimal("0")):
        self.total = total
        self.expected = expected
        super().__init__(
            f"The sum of all transaction-line amounts must equal {expected}, but is {total}."
        )


class ReferentialViolation(LedgerError):
    """
    A line refers to an account/company that does not exist, or an
    account/company that is still referenced by lines was asked to be deleted.
    """

    def __init__(self, message, entity=None, entity_id=None):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(message)


class PersistenceError(LedgerError):
    """The store failed; the session has been rolled back."""
