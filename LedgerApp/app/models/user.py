from datetime import datetime, timezone
from sqlalchemy.orm import declared_attr
from LedgerApp.app.accounting_db import db


def utcnow():
    return datetime.now(timezone.utc)


class User(db.Model):
    __tablename__ = 'users'

    # Issued by the identity provider (the token's subject claim)
    id = db.Column(db.String(128), primary_key=True)

    username = db.Column(db.String(100), nullable=False, unique=True)
    email = db.Column(db.String(250), nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=utcnow)


class UserHistory:
    """Creator/updater audit columns shared by accounts, companies and transactions."""

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), onupdate=utcnow)

    @declared_attr
    def create_user_id(cls):
        return db.Column(db.String(128), db.ForeignKey('users.id'), nullable=False, index=True)

    @declared_attr
    def update_user_id(cls):
        return db.Column(db.String(128), db.ForeignKey('users.id'), nullable=False)

    @declared_attr
    def create_user(cls):
        return db.relationship('User', foreign_keys=f'{cls.__name__}.create_user_id')

    @declared_attr
    def update_user(cls):
        return db.relationship('User', foreign_keys=f'{cls.__name__}.update_user_id')
