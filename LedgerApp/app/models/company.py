import uuid
from LedgerApp.app.accounting_db import db
from LedgerApp.app.models.user import UserHistory

class Company(UserHistory, db.Model):
    """A customer and/or vendor that transaction lines can be tagged with."""

    __tablename__ = 'companies'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = db.Column(db.String(150), nullable=False)

    __table_args__ = (
        db.UniqueConstraint("name", "create_user_id", name="uq_company_name_create_user"),
    )
