from flask import Flask
from flask_migrate import Migrate

app = Flask(__name__)

# Defaults for the ledger DB; anything set in a "FLASK_" environment variable wins
app.config['SQLALCHEMY_DATABASE_URI'] = 'sqlite:///ledger.db'
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
app.config['SQLALCHEMY_ECHO'] = False
app.config['LOG_LEVEL'] = 'DEBUG'
app.config.from_prefixed_env() #get config data from environment variables beginning with "FLASK_"

from LedgerApp.app import common

common.logging_initiate()

from LedgerApp.app.accounting_db import db

db.init_app(app)

# Flask-Migrate setup
migrate = Migrate(app, db)

# Import models so Alembic sees them
from LedgerApp.app.models import user, account, company, transaction, transaction_line
