# LedgerApp/app/services/transactions.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import contains_eager, joinedload, selectinload

from LedgerApp.app.accounting_db import atomic_unit, db
from LedgerApp.app.models.account import Account
from LedgerApp.app.models.company import Company
from LedgerApp.app.models.transaction import Transaction
from LedgerApp.app.models.transaction_line import TransactionLine
from LedgerApp.app.services.balance import verify_line_sum
from LedgerApp.app.services.line_order import number_lines, sort_lines
from LedgerApp.app.services.transaction_mapper import unresolved_reference
from LedgerApp.app.services.transaction_query import FindTransactionLineFilters, build_line_query
import LedgerApp.app.common as common

# Scalar fields a caller may change on an existing transaction ("lines" is handled separately)
UPDATABLE_FIELDS = ("date", "memo", "update_user", "update_user_id")


@dataclass
class FindTransactionOptions:
    """Which relations to load with the transactions returned by a search."""

    with_creator: bool = False
    with_lines: bool = False


def _loader_options(options: FindTransactionOptions) -> list:
    loaders = []

    if options.with_creator:
        loaders.append(joinedload(Transaction.create_user))

    if options.with_lines:
        # selectinload honours the relationship's order_by (line_id ascending)
        loaders.append(selectinload(Transaction.lines).joinedload(TransactionLine.account))
        loaders.append(selectinload(Transaction.lines).joinedload(TransactionLine.company))

    return loaders


def _reference_ids(line: TransactionLine) -> tuple:
    # a line may carry the related objects, the raw ids, or both
    account_id = line.account.id if line.account is not None else line.account_id
    company_id = line.company.id if line.company is not None else line.company_id
    return account_id, company_id


def _verify_references(lines: List[TransactionLine]) -> None:
    """Every line needs an existing account; a company, when given, must exist too."""
    for line in lines:
        account_id, company_id = _reference_ids(line)

        if account_id is None or db.session.get(Account, account_id) is None:
            raise unresolved_reference("account", account_id)

        if company_id is not None and db.session.get(Company, company_id) is None:
            raise unresolved_reference("company", company_id)


def _copy_line(line: TransactionLine) -> TransactionLine:
    account_id, company_id = _reference_ids(line)
    return TransactionLine(amount=line.amount, memo=line.memo, account_id=account_id, company_id=company_id)


def create_transaction(transaction: Transaction) -> Transaction:
    """
    Stores a new transaction together with its lines.

    Every line must reference an existing account (ReferentialViolation
    otherwise) and the line amounts must sum to zero; both are checked only
    when lines are present. Lines are numbered in the order they were
    supplied. Returns the stored transaction with its lines in line_id order.
    """
    if transaction.lines:
        _verify_references(transaction.lines)
        verify_line_sum(transaction.lines)
        number_lines(transaction.lines)

    with atomic_unit("Create transaction"):
        db.session.add(transaction)

    common.logger.debug(f"Created transaction id={transaction.id} with {len(transaction.lines)} lines")

    return sort_lines(transaction)


def find_transactions_by_creator(creator_id: str, options: Optional[FindTransactionOptions] = None) -> List[Transaction]:
    options = options or FindTransactionOptions()

    transactions = (
        db.session.query(Transaction)
        .options(*_loader_options(options))
        .filter(Transaction.create_user_id == creator_id)
        .order_by(Transaction.date.desc(), Transaction.created_at.desc())
        .all()
    )

    if options.with_lines:
        for transaction in transactions:
            sort_lines(transaction)

    return transactions


def find_transaction(transaction_id: str, options: Optional[FindTransactionOptions] = None) -> Optional[Transaction]:
    """
    Return a single Transaction by ID, or None if not found.
    """
    options = options or FindTransactionOptions()

    transaction = (
        db.session.query(Transaction)
        .options(*_loader_options(options))
        .filter(Transaction.id == transaction_id)
        .one_or_none()
    )

    if transaction is not None and options.with_lines:
        sort_lines(transaction)

    return transaction


def find_lines_by_creator(creator_id: str, filters: Optional[FindTransactionLineFilters] = None) -> List[TransactionLine]:
    """
    Returns the lines of every transaction created by the user, most recent
    transaction first. Account and company are loaded, but not their creators.
    """
    return (
        build_line_query(creator_id, filters)
        .options(
            contains_eager(TransactionLine.transaction),
            joinedload(TransactionLine.account),
            joinedload(TransactionLine.company),
        )
        .all()
    )


def _replace_lines(transaction: Transaction, lines: List[TransactionLine]) -> None:
    # (transaction_id, line_id) is unique, so the old rows must be gone before the new ones go in
    transaction.lines.clear()
    db.session.flush()

    transaction.lines.extend(lines)


def update_transaction(transaction_id: str, updates: Dict[str, Any]) -> Optional[Transaction]:
    """
    Applies a sparse set of updates to the identified transaction.

    If updates contains "lines", the whole line set is replaced: the new lines
    must reference existing accounts and balance, the old lines are deleted
    and the new ones inserted, all in the same database transaction as the
    scalar updates. The supplied lines are copied into new rows, so they may
    include the transaction's own current lines. Without "lines" the existing
    lines are left alone and no balance check is made.

    Returns the updated transaction, or None if it does not exist.
    """
    updates = dict(updates)
    updates.pop("id", None)
    lines = updates.pop("lines", None)

    unknown = sorted(set(updates) - set(UPDATABLE_FIELDS))
    if unknown:
        raise ValueError(f"Cannot update transaction field(s): {', '.join(unknown)}")

    if lines is not None:
        lines = [_copy_line(line) for line in lines]
        _verify_references(lines)
        verify_line_sum(lines)
        number_lines(lines)

    transaction = db.session.get(Transaction, transaction_id)
    if transaction is None:
        common.logger.debug(f"Update skipped, no transaction with id={transaction_id}")
        return None

    with atomic_unit(f"Update transaction id={transaction_id}"):
        if lines is not None:
            _replace_lines(transaction, lines)

        for field, value in updates.items():
            setattr(transaction, field, value)

    common.logger.debug(
        f"Updated transaction id={transaction_id} fields={sorted(updates)}"
        + (f" replaced lines with {len(lines)} lines" if lines is not None else "")
    )

    return sort_lines(transaction)


def delete_transaction(transaction_id: str) -> None:
    transaction = db.session.get(Transaction, transaction_id)
    if transaction is None:
        common.logger.debug(f"Delete skipped, no transaction with id={transaction_id}")
        return

    # Transaction.lines uses cascade="all, delete-orphan" and the FK is ON DELETE CASCADE
    with atomic_unit(f"Delete transaction id={transaction_id}"):
        db.session.delete(transaction)

    common.logger.debug(f"Deleted transaction id={transaction_id}")
