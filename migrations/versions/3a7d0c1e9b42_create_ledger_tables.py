"""Create ledger tables

Revision ID: 3a7d0c1e9b42
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


revision = "3a7d0c1e9b42"
down_revision = None
branch_labels = None
depends_on = None


def _user_history_columns():
    return [
        sa.Column("create_user_id", sa.String(length=128), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("update_user_id", sa.String(length=128), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("(CURRENT_TIMESTAMP)")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=128), primary_key=True),
        sa.Column("username", sa.String(length=100), nullable=False, unique=True),
        sa.Column("email", sa.String(length=250), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("(CURRENT_TIMESTAMP)")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        *_user_history_columns(),
        sa.UniqueConstraint("code", "create_user_id", name="uq_account_code_create_user"),
        sa.UniqueConstraint("name", "create_user_id", name="uq_account_name_create_user"),
    )
    op.create_index("ix_accounts_create_user_id", "accounts", ["create_user_id"])

    op.create_table(
        "companies",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=150), nullable=False),
        *_user_history_columns(),
        sa.UniqueConstraint("name", "create_user_id", name="uq_company_name_create_user"),
    )
    op.create_index("ix_companies_create_user_id", "companies", ["create_user_id"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("memo", sa.String(length=250), nullable=True),
        *_user_history_columns(),
    )
    op.create_index("ix_transactions_create_user_id", "transactions", ["create_user_id"])
    op.create_index("ix_transactions_date", "transactions", ["date"])

    op.create_table(
        "transaction_lines",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("line_id", sa.Integer(), nullable=False),
        sa.Column("transaction_id", sa.String(length=36), sa.ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False),
        sa.Column("account_id", sa.String(length=36), sa.ForeignKey("accounts.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("company_id", sa.String(length=36), sa.ForeignKey("companies.id", ondelete="RESTRICT"), nullable=True),
        # exact storage: SQLite NUMERIC would round through a binary float
        sa.Column("amount", sa.Numeric(19, 4).with_variant(sa.String(length=22), "sqlite"), nullable=False),
        sa.Column("memo", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("(CURRENT_TIMESTAMP)")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("transaction_id", "line_id", name="uq_transaction_line_line_id"),
    )
    op.create_index("ix_transaction_lines_transaction_id", "transaction_lines", ["transaction_id"])
    op.create_index("ix_transaction_lines_account_id", "transaction_lines", ["account_id"])
    op.create_index("ix_transaction_lines_company_id", "transaction_lines", ["company_id"])


def downgrade():
    op.drop_table("transaction_lines")
    op.drop_table("transactions")
    op.drop_table("companies")
    op.drop_table("accounts")
    op.drop_table("users")
