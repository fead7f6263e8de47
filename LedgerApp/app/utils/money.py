from decimal import Decimal, InvalidOperation

from sqlalchemy import Numeric, String
from sqlalchemy.types import TypeDecorator

# amounts fit Numeric(19, 4): 15 integer digits and 4 decimal places
AMOUNT_SCALE = 4
AMOUNT_INTEGER_DIGITS = 15


def to_amount(value):
    """
    Normalize a monetary value to an exact Decimal suitable for balancing.

    - Accepts int, str, Decimal and float (floats go through str() so 0.1 stays 0.1)
    - Rejects None, NaN, infinities, more than AMOUNT_SCALE decimal places
      and more than AMOUNT_INTEGER_DIGITS integer digits
    """

    if value is None or isinstance(value, bool):
        raise ValueError(f"Invalid amount: {value!r}")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {value!r}") from e

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {value!r}")

    if amount.as_tuple().exponent < -AMOUNT_SCALE:
        raise ValueError(f"Amount {value!r} has more than {AMOUNT_SCALE} decimal places")

    if amount and amount.adjusted() >= AMOUNT_INTEGER_DIGITS:
        raise ValueError(f"Amount {value!r} has more than {AMOUNT_INTEGER_DIGITS} integer digits")

    return amount


class Amount(TypeDecorator):
    """
    Exact amount column. Numeric(19, 4) where the database has a real decimal
    type; on SQLite, whose NUMERIC is a binary float, the Decimal is stored as text.
    """

    impl = Numeric(AMOUNT_INTEGER_DIGITS + AMOUNT_SCALE, AMOUNT_SCALE, asdecimal=True)
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(AMOUNT_INTEGER_DIGITS + AMOUNT_SCALE + 3))
        return dialect.type_descriptor(self.impl)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        amount = to_amount(value)
        if dialect.name == "sqlite":
            return str(amount)
        return amount

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, Decimal):
            return value
        return Decimal(str(value))
