from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from LedgerApp.app.accounting_db import db
from LedgerApp.app.models.transaction import Transaction
from LedgerApp.app.models.transaction_line import TransactionLine


@dataclass
class FindTransactionLineFilters:
    """Optional equality filters for a transaction-line search (combined with AND)."""

    account_id: Optional[str] = None
    company_id: Optional[str] = None


def line_filter_criteria(creator_id, filters=None):
    """
    Predicates for "lines whose transaction was created by creator_id",
    narrowed by account and/or company when those filters are given.
    """
    filters = filters or FindTransactionLineFilters()

    criteria = [Transaction.create_user_id == creator_id]

    if filters.account_id:
        criteria.append(TransactionLine.account_id == filters.account_id)

    if filters.company_id:
        criteria.append(TransactionLine.company_id == filters.company_id)

    return criteria


def line_ordering():
    # most recent transaction first; lines sharing a date come back in store order
    return (Transaction.date.desc(),)


def build_line_query(creator_id, filters=None):
    return (
        db.session.query(TransactionLine)
        .join(TransactionLine.transaction)
        .filter(*line_filter_criteria(creator_id, filters))
        .order_by(*line_ordering())
    )
