from decimal import Decimal

from LedgerApp.app.errors import BalanceViolation
from LedgerApp.app.utils.money import to_amount
import LedgerApp.app.common as common

ZERO = Decimal("0")


def line_sum(lines):
    """Exact sum of the amounts of the given lines."""
    return sum((to_amount(line.amount) for line in lines), ZERO)


def verify_line_sum(lines):
    """
    Verifies that the sum of all transaction-line amounts equals zero.

    No tolerance is applied: amounts are Decimals, so a balanced set sums to
    exactly zero. Raises BalanceViolation carrying the computed sum otherwise.
    """
    total = line_sum(lines)

    if total != ZERO:
        error = BalanceViolation(total, ZERO)
        common.logger.error(str(error))
        raise error
