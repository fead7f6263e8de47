from sqlalchemy.exc import IntegrityError
from LedgerApp.app.accounting_db import atomic_unit, db
from LedgerApp.app.errors import PersistenceError, ReferentialViolation
from LedgerApp.app.models.account import Account
from LedgerApp.app.models.transaction_line import TransactionLine
import LedgerApp.app.common as common


def create_account(user, code, name):
    account = Account(code=code, name=name, create_user=user, update_user=user)

    with atomic_unit(f"Create account code={code!r}"):
        db.session.add(account)

    return account


def get_account(account_id):
    """
    Return a single Account by ID, or None if not found.
    """
    return (
        db.session.query(Account)
        .filter(Account.id == account_id)
        .one_or_none()
    )


def _in_use(account_id):
    return (
        db.session.query(TransactionLine.id)
        .filter(TransactionLine.account_id == account_id)
        .first()
        is not None
    )


def delete_account(account_id):
    """
    Deletes the identified account. Accounts used by any transaction line
    cannot be deleted (ReferentialViolation); a missing id is ignored.
    """
    account = get_account(account_id)
    if account is None:
        return

    message = f"Account {account_id} is referenced by transaction lines and cannot be deleted."

    if _in_use(account_id):
        common.logger.error(message)
        raise ReferentialViolation(message, entity="account", entity_id=account_id)

    try:
        with atomic_unit(f"Delete account id={account_id}"):
            db.session.delete(account)
    except PersistenceError as e:
        # ON DELETE RESTRICT caught a line committed after the check above
        if isinstance(e.__cause__, IntegrityError):
            raise ReferentialViolation(message, entity="account", entity_id=account_id) from e
        raise

    common.logger.debug(f"Deleted account id={account_id}")
