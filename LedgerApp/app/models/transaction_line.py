import uuid
from LedgerApp.app.utils.money import Amount
from LedgerApp.app.accounting_db import db
from LedgerApp.app.models.user import utcnow

class TransactionLine(db.Model):
    __tablename__ = 'transaction_lines'
    __table_args__ = (
        db.UniqueConstraint("transaction_id", "line_id", name="uq_transaction_line_line_id"),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Zero-based position within the parent transaction, assigned by the engine
    line_id = db.Column(db.Integer, nullable=False)

    transaction_id = db.Column(db.String(36), db.ForeignKey('transactions.id', ondelete='CASCADE'), nullable=False, index=True)
    account_id = db.Column(db.String(36), db.ForeignKey('accounts.id', ondelete='RESTRICT'), nullable=False, index=True)
    company_id = db.Column(db.String(36), db.ForeignKey('companies.id', ondelete='RESTRICT'), index=True)

    amount = db.Column(Amount, nullable=False)  # signed: debit > 0, credit < 0
    memo = db.Column(db.Text)

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=utcnow)

    transaction = db.relationship('Transaction', back_populates='lines')
    account = db.relationship('Account')
    company = db.relationship('Company')
