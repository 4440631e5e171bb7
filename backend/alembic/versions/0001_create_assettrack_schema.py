"""create assettrack schema: users, employees, categories, assets, asset_transactions, funds

Revision ID: 0001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_by", sa.String(100), nullable=True),
        sa.Column("created_date", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("modified_date", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("full_name", sa.String(100), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role_id", sa.String(50), nullable=True, server_default="User"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("reset_token", sa.String(10), nullable=True),
        sa.Column("reset_token_expiry", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_password_change", sa.DateTime(timezone=True), nullable=True),
        *_audit_columns(),
    )
    op.create_index("ix_users_email_lower", "users", [sa.text("lower(email)")], unique=True)

    op.create_table(
        "employees",
        sa.Column("employee_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("employee_code", sa.String(30), nullable=False, unique=True),
        sa.Column("full_name", sa.String(100), nullable=False),
        sa.Column("department", sa.String(50), nullable=True),
        sa.Column("position", sa.String(50), nullable=True),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("email", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_audit_columns(),
    )

    op.create_table(
        "categories",
        sa.Column("category_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("category_name", sa.String(100), nullable=False),
        sa.Column("description", sa.String(255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_audit_columns(),
    )

    op.create_table(
        "assets",
        sa.Column("asset_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("asset_code", sa.String(30), nullable=False, unique=True),
        sa.Column("asset_name", sa.String(100), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.category_id"), nullable=False),
        sa.Column("serial_number", sa.String(50), nullable=True),
        sa.Column("purchase_date", sa.Date(), nullable=True),
        sa.Column("purchase_price", sa.Numeric(18, 2), nullable=True),
        sa.Column("condition", sa.String(20), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="Available"),
        sa.Column("current_holder_id", sa.Integer(), sa.ForeignKey("employees.employee_id"), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        *_audit_columns(),
    )
    op.create_index("ix_assets_category_id", "assets", ["category_id"])
    op.create_index("ix_assets_current_holder_id", "assets", ["current_holder_id"])

    op.create_table(
        "asset_transactions",
        sa.Column("asset_transaction_id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("asset_id", sa.Integer(), sa.ForeignKey("assets.asset_id"), nullable=False),
        sa.Column("from_employee_id", sa.Integer(), sa.ForeignKey("employees.employee_id"), nullable=True),
        sa.Column("to_employee_id", sa.Integer(), sa.ForeignKey("employees.employee_id"), nullable=True),
        sa.Column("transaction_date", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="Pending"),
        *_audit_columns(),
    )
    op.create_index(
        "ix_asset_transactions_asset_date",
        "asset_transactions",
        ["asset_id", sa.text("transaction_date DESC")],
    )

    op.create_table(
        "funds",
        sa.Column("fund_pk", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("fund_id", sa.String(50), nullable=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("entry_time", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("update_time", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("funds")
    op.drop_index("ix_asset_transactions_asset_date", table_name="asset_transactions")
    op.drop_table("asset_transactions")
    op.drop_index("ix_assets_current_holder_id", table_name="assets")
    op.drop_index("ix_assets_category_id", table_name="assets")
    op.drop_table("assets")
    op.drop_table("categories")
    op.drop_table("employees")
    op.drop_index("ix_users_email_lower", table_name="users")
    op.drop_table("users")
