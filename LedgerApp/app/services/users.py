from LedgerApp.app.accounting_db import atomic_unit, db
from LedgerApp.app.models.user import User


def create_user(user_id, username, email):
    user = User(id=user_id, username=username, email=email)

    with atomic_unit(f"Create user username={username!r}"):
        db.session.add(user)

    return user


def get_user(user_id):
    return db.session.get(User, user_id)
