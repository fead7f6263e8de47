# Creates every ledger table directly, for development databases that do not run migrations:
#
#   (venv) $ export FLASK_SQLALCHEMY_DATABASE_URI=sqlite:///ledger.db
#   (venv) $ python -m LedgerApp.create_ledger_db
#
# Databases managed by Flask-Migrate use `flask --app LedgerApp.app db upgrade` instead.
from LedgerApp.app import app, db
import LedgerApp.app.common as common


def create_all():
    with app.app_context():
        db.create_all()
        common.logger.info(f"Ledger tables created in {app.config['SQLALCHEMY_DATABASE_URI']}")


if __name__ == "__main__":
    create_all()
