# LedgerApp/app/models/transaction.py

import uuid
from datetime import date
from LedgerApp.app.accounting_db import db
from LedgerApp.app.models.user import UserHistory


class Transaction(UserHistory, db.Model):
    __tablename__ = "transactions"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    date = db.Column(db.Date, default=date.today, nullable=False, index=True)
    memo = db.Column(db.String(250))

    # Lines are owned outright: removing one from this list deletes its row,
    # and deleting the transaction deletes all of them.
    lines = db.relationship(
        "TransactionLine",
        back_populates="transaction",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TransactionLine.line_id",
    )
