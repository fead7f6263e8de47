# LedgerApp/app/services/transaction_mapper.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date as date_cls
from typing import Any, Callable, Dict, Iterable, List, Optional

from LedgerApp.app.errors import ReferentialViolation
from LedgerApp.app.models.transaction import Transaction
from LedgerApp.app.models.transaction_line import TransactionLine
from LedgerApp.app.services.accounts import get_account
from LedgerApp.app.services.companies import get_company
from LedgerApp.app.services.line_order import number_lines
from LedgerApp.app.utils.money import to_amount
import LedgerApp.app.common as common

Resolver = Callable[[str], Any]


@dataclass
class LineInput:
    """One caller-supplied line; its position in the submitted list becomes its line_id."""

    amount: Any
    account_id: str
    company_id: Optional[str] = None
    memo: Optional[str] = None


def _parse_iso_date(value: Any) -> Optional[date_cls]:
    """Parse an ISO-8601 date (YYYY-MM-DD) into a datetime.date."""
    if value in (None, ""):
        return None
    if isinstance(value, date_cls):
        return value
    if isinstance(value, str):
        try:
            return date_cls.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"Invalid date {value!r} (expected YYYY-MM-DD)") from e
    raise ValueError(f"Invalid date {value!r} (expected YYYY-MM-DD)")


def unresolved_reference(entity: str, entity_id: str) -> ReferentialViolation:
    message = f"Transaction line references unknown {entity} {entity_id!r}."
    common.logger.error(message)
    return ReferentialViolation(message, entity=entity, entity_id=entity_id)


def build_lines(
    inputs: Iterable[LineInput | Mapping],
    resolve_account: Resolver = get_account,
    resolve_company: Resolver = get_company,
) -> List[TransactionLine]:
    """
    Turns line inputs into TransactionLine objects, resolving the account and
    (optional) company references and numbering the lines in submission order.

    The lines are not attached to any transaction. An unknown account, or a
    company id that does not resolve, raises ReferentialViolation.
    """
    lines = []

    for item in inputs:
        if isinstance(item, Mapping):
            item = LineInput(**item)

        account = resolve_account(item.account_id) if item.account_id else None
        if account is None:
            raise unresolved_reference("account", item.account_id)

        company = None
        if item.company_id:
            company = resolve_company(item.company_id)
            if company is None:
                raise unresolved_reference("company", item.company_id)

        lines.append(
            TransactionLine(
                amount=to_amount(item.amount),
                memo=item.memo,
                account=account,
                company=company,
            )
        )

    return number_lines(lines)


def build_transaction(
    user,
    date: Any = None,
    memo: Optional[str] = None,
    lines: Iterable[LineInput | Mapping] = (),
    resolve_account: Resolver = get_account,
    resolve_company: Resolver = get_company,
) -> Transaction:
    """New, unsaved transaction created (and last updated) by user. date defaults to today."""
    transaction = Transaction(
        memo=memo,
        create_user=user,
        update_user=user,
        lines=build_lines(lines, resolve_account, resolve_company),
    )

    parsed = _parse_iso_date(date)
    if parsed is not None:
        transaction.date = parsed

    return transaction


def build_transaction_updates(
    user,
    date: Any = None,
    memo: Optional[str] = None,
    lines: Optional[Iterable[LineInput | Mapping]] = None,
    resolve_account: Resolver = get_account,
    resolve_company: Resolver = get_company,
) -> Dict[str, Any]:
    """
    Sparse update mapping for update_transaction. Only supplied fields are
    included; "lines" is present only when a replacement line set was given.
    """
    updates: Dict[str, Any] = {"update_user": user}

    if date is not None:
        updates["date"] = _parse_iso_date(date)
    if memo is not None:
        updates["memo"] = memo
    if lines is not None:
        updates["lines"] = build_lines(lines, resolve_account, resolve_company)

    return updates


def line_to_dict(line: TransactionLine, with_transaction_id: bool = False) -> Dict[str, Any]:
    result = {
        "id": line.id,
        "line_id": line.line_id,
        "account_id": line.account_id,
        "company_id": line.company_id,
        "amount": str(line.amount),
        "memo": line.memo,
    }
    if with_transaction_id:
        result["transaction_id"] = line.transaction_id
    return result


def transaction_to_dict(transaction: Transaction, with_lines: bool = False) -> Dict[str, Any]:
    result = {
        "id": transaction.id,
        "date": transaction.date.isoformat() if transaction.date else None,
        "memo": transaction.memo,
    }
    if with_lines:
        result["lines"] = [line_to_dict(line) for line in transaction.lines]
    return result
