import sqlite3
from contextlib import contextmanager

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from LedgerApp.app.errors import PersistenceError
import LedgerApp.app.common as common

db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE / RESTRICT unless this is set per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


@contextmanager
def atomic_unit(action):
    """
    Runs the enclosed session work as one database transaction.

    Commits on exit; on any failure the session is rolled back so nothing
    written inside the block is visible. Store failures are re-raised as
    PersistenceError, everything else propagates unchanged.
    """
    try:
        yield db.session
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        common.logger.error(f"{action} failed, rolled back: {e}")
        raise PersistenceError(f"{action} failed") from e
    except Exception:
        db.session.rollback()
        raise
