import uuid
from LedgerApp.app.accounting_db import db
from LedgerApp.app.models.user import UserHistory

class Account(UserHistory, db.Model):
    __tablename__ = 'accounts'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    code = db.Column(db.String(50), nullable=False)
    name = db.Column(db.String(100), nullable=False)

    __table_args__ = (
        db.UniqueConstraint("code", "create_user_id", name="uq_account_code_create_user"),
        db.UniqueConstraint("name", "create_user_id", name="uq_account_name_create_user"),
    )
