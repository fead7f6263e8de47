from sqlalchemy.exc import IntegrityError
from LedgerApp.app.accounting_db import atomic_unit, db
from LedgerApp.app.errors import PersistenceError, ReferentialViolation
from LedgerApp.app.models.company import Company
from LedgerApp.app.models.transaction_line import TransactionLine
import LedgerApp.app.common as common


def create_company(user, name):
    company = Company(name=name, create_user=user, update_user=user)

    with atomic_unit(f"Create company name={name!r}"):
        db.session.add(company)

    return company


def get_company(company_id):
    return (
        db.session.query(Company)
        .filter(Company.id == company_id)
        .one_or_none()
    )


def delete_company(company_id):
    """Same restrict rule as delete_account: companies tagged on any line stay."""
    company = get_company(company_id)
    if company is None:
        return

    message = f"Company {company_id} is referenced by transaction lines and cannot be deleted."

    in_use = (
        db.session.query(TransactionLine.id)
        .filter(TransactionLine.company_id == company_id)
        .first()
    )
    if in_use is not None:
        common.logger.error(message)
        raise ReferentialViolation(message, entity="company", entity_id=company_id)

    try:
        with atomic_unit(f"Delete company id={company_id}"):
            db.session.delete(company)
    except PersistenceError as e:
        if isinstance(e.__cause__, IntegrityError):
            raise ReferentialViolation(message, entity="company", entity_id=company_id) from e
        raise

    common.logger.debug(f"Deleted company id={company_id}")
