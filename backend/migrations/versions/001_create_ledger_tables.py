"""Create counters, accounts, transactions tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # ── Counters ──────────────────────────────────────
    op.create_table(
        "counters",
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("seq", sa.Integer(), server_default="0", nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )

    # ── Accounts ──────────────────────────────────────
    op.create_table(
        "accounts",
        sa.Column("_id", sa.String(36), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("full_name", sa.String(255), server_default="", nullable=False),
        sa.Column("first_name", sa.String(255), server_default="", nullable=False),
        sa.Column("last_name", sa.String(255), server_default="", nullable=False),
        sa.Column("balance", sa.Float(), server_default="0", nullable=False),
        sa.Column("currency", sa.String(10), server_default="R$", nullable=False),
        sa.PrimaryKeyConstraint("_id"),
        sa.UniqueConstraint("id"),
    )

    # ── Transactions ──────────────────────────────────
    # user_id carries no foreign key: deleting an account leaves its
    # transactions in place.
    op.create_table(
        "transactions",
        sa.Column("_id", sa.String(36), nullable=False),
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("type", sa.String(50), server_default="defaultType", nullable=False),
        sa.Column("date", sa.String(40), nullable=False),
        sa.Column("value", sa.Float(), server_default="0", nullable=False),
        sa.Column("currency", sa.String(10), server_default="R$", nullable=False),
        sa.Column("file_base64", sa.Text(), server_default="", nullable=False),
        sa.Column("file_name", sa.String(255), server_default="", nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.PrimaryKeyConstraint("_id"),
        sa.UniqueConstraint("id"),
    )
    op.create_index("ix_transactions_user_id", "transactions", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_transactions_user_id", table_name="transactions")
    op.drop_table("transactions")
    op.drop_table("accounts")
    op.drop_table("counters")
