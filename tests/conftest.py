"""
Shared pytest fixtures.

Every test runs inside an application context against a fresh in-memory
SQLite database (foreign keys enforced), created and dropped per test.
"""

import os

os.environ["FLASK_SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ.setdefault("FLASK_LOG_LEVEL", "WARNING")

from datetime import date

import pytest

from LedgerApp.app import app as flask_app, db
from LedgerApp.app.services.accounts import create_account
from LedgerApp.app.services.companies import create_company
from LedgerApp.app.services.transaction_mapper import LineInput, build_transaction
from LedgerApp.app.services.transactions import create_transaction
from LedgerApp.app.services.users import create_user


@pytest.fixture(autouse=True)
def app():
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def user():
    return create_user("auth0|alice", "alice", "alice@example.com")


@pytest.fixture
def other_user():
    return create_user("auth0|bob", "bob", "bob@example.com")


@pytest.fixture
def cash(user):
    return create_account(user, "1000", "Cash")


@pytest.fixture
def revenue(user):
    return create_account(user, "4000", "Revenue")


@pytest.fixture
def acme(user):
    return create_company(user, "Acme Pty Ltd")


@pytest.fixture
def make_transaction(user):
    """Creates and stores a transaction from (amount, account[, company]) tuples."""

    def _make(*lines, creator=None, on=date(2024, 1, 1), memo=None):
        inputs = [
            LineInput(
                amount=amount,
                account_id=account.id,
                company_id=rest[0].id if rest else None,
            )
            for amount, account, *rest in lines
        ]
        transaction = build_transaction(creator or user, date=on, memo=memo, lines=inputs)
        return create_transaction(transaction)

    return _make
