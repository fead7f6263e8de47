from datetime import date
from decimal import Decimal

import pytest

from LedgerApp.app.errors import ReferentialViolation
from LedgerApp.app.services.transaction_mapper import (
    LineInput,
    build_lines,
    build_transaction,
    build_transaction_updates,
    line_to_dict,
    transaction_to_dict,
)


class TestBuildLines:

    def test_lines_are_numbered_and_resolved(self, cash, acme):
        lines = build_lines([
            LineInput(amount="12.34", account_id=cash.id, company_id=acme.id, memo="invoice 7"),
            {"amount": "-12.34", "account_id": cash.id},
        ])

        assert [line.line_id for line in lines] == [0, 1]
        assert lines[0].account is cash
        assert lines[0].company is acme
        assert lines[0].memo == "invoice 7"
        assert lines[1].company is None
        assert [line.amount for line in lines] == [Decimal("12.34"), Decimal("-12.34")]

    def test_lines_are_not_attached_to_a_transaction(self, cash):
        (line,) = build_lines([LineInput(amount=0, account_id=cash.id)])

        assert line.transaction is None

    def test_unknown_account_is_a_referential_violation(self):
        with pytest.raises(ReferentialViolation) as excinfo:
            build_lines([LineInput(amount=1, account_id="missing")])

        assert excinfo.value.entity == "account"
        assert excinfo.value.entity_id == "missing"

    def test_missing_account_id_is_a_referential_violation(self):
        with pytest.raises(ReferentialViolation):
            build_lines([LineInput(amount=1, account_id=None)])

    def test_unknown_company_is_a_referential_violation(self, cash):
        with pytest.raises(ReferentialViolation) as excinfo:
            build_lines([LineInput(amount=1, account_id=cash.id, company_id="missing")])

        assert excinfo.value.entity == "company"

    def test_resolvers_are_injected(self, cash):
        seen = []

        def resolve_account(account_id):
            seen.append(account_id)
            return cash if account_id == "a" else None

        with pytest.raises(ReferentialViolation) as excinfo:
            build_lines(
                [LineInput(amount=1, account_id="a"), LineInput(amount=-1, account_id="gone")],
                resolve_account=resolve_account,
            )

        assert seen == ["a", "gone"]
        assert excinfo.value.entity_id == "gone"

    def test_bad_amount_is_rejected(self, cash):
        with pytest.raises(ValueError):
            build_lines([LineInput(amount="twelve", account_id=cash.id)])


class TestBuildTransaction:

    def test_creator_is_also_updater(self, user, cash):
        transaction = build_transaction(
            user,
            date="2024-02-29",
            memo="rent",
            lines=[LineInput(amount=1, account_id=cash.id), LineInput(amount=-1, account_id=cash.id)],
        )

        assert transaction.create_user is user
        assert transaction.update_user is user
        assert transaction.date == date(2024, 2, 29)
        assert [line.line_id for line in transaction.lines] == [0, 1]

    def test_invalid_date_is_rejected(self, user):
        with pytest.raises(ValueError):
            build_transaction(user, date="29/02/2024")

    def test_updates_only_contain_supplied_fields(self, user):
        assert build_transaction_updates(user) == {"update_user": user}

        updates = build_transaction_updates(user, memo="new memo")
        assert set(updates) == {"update_user", "memo"}

    def test_updates_with_lines(self, user, cash):
        updates = build_transaction_updates(
            user, date=date(2024, 1, 2), lines=[LineInput(amount=0, account_id=cash.id)]
        )

        assert updates["date"] == date(2024, 1, 2)
        assert [line.line_id for line in updates["lines"]] == [0]


def test_transaction_to_dict(make_transaction, cash, acme):
    transaction = make_transaction((1, cash, acme), ("-1", cash), on=date(2024, 7, 1), memo="sale")

    result = transaction_to_dict(transaction, with_lines=True)

    assert result["id"] == transaction.id
    assert result["date"] == "2024-07-01"
    assert result["memo"] == "sale"
    assert [line["line_id"] for line in result["lines"]] == [0, 1]
    assert result["lines"][0]["company_id"] == acme.id
    assert Decimal(result["lines"][1]["amount"]) == Decimal("-1")
    assert "lines" not in transaction_to_dict(transaction)

    line = line_to_dict(transaction.lines[0], with_transaction_id=True)
    assert line["transaction_id"] == transaction.id
