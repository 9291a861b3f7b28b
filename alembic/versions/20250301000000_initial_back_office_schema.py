"""Initial back-office schema: users, token ledger and entities with attachments.

Revision ID: 20250301000000
Revises:
Create Date: 2025-03-01

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20250301000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="user"),
        sa.Column("image", sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_deleted_at"), "users", ["deleted_at"], unique=False)

    op.create_table(
        "tokens",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("token", sa.String(length=1024), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tokens_token"), "tokens", ["token"], unique=True)
    op.create_index(op.f("ix_tokens_user_id"), "tokens", ["user_id"], unique=False)

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("image", sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_products_deleted_at"), "products", ["deleted_at"], unique=False)

    op.create_table(
        "fabrics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("width_cm", sa.Numeric(10, 2), nullable=False),
        sa.Column("weight_gm", sa.Numeric(10, 2), nullable=False),
        sa.Column("thickness_mm", sa.Numeric(10, 2), nullable=True),
        sa.Column("status", sa.String(length=64), nullable=False, server_default="available"),
        sa.Column("image", sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_fabrics_deleted_at"), "fabrics", ["deleted_at"], unique=False)

    op.create_table(
        "fabric_rolls",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("roll_code", sa.String(length=64), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("price_per_m", sa.Numeric(10, 2), nullable=False),
        sa.Column("stock_m", sa.Numeric(10, 2), nullable=False),
        sa.Column("image", sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_fabric_rolls_roll_code"), "fabric_rolls", ["roll_code"], unique=True)
    op.create_index(op.f("ix_fabric_rolls_type_id"), "fabric_rolls", ["type_id"], unique=False)
    op.create_index(
        op.f("ix_fabric_rolls_deleted_at"), "fabric_rolls", ["deleted_at"], unique=False
    )

    op.create_table(
        "colors",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("detail", sa.Text(), nullable=True),
        sa.Column("image", sa.String(length=1024), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_colors_deleted_at"), "colors", ["deleted_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_colors_deleted_at"), table_name="colors")
    op.drop_table("colors")
    op.drop_index(op.f("ix_fabric_rolls_deleted_at"), table_name="fabric_rolls")
    op.drop_index(op.f("ix_fabric_rolls_type_id"), table_name="fabric_rolls")
    op.drop_index(op.f("ix_fabric_rolls_roll_code"), table_name="fabric_rolls")
    op.drop_table("fabric_rolls")
    op.drop_index(op.f("ix_fabrics_deleted_at"), table_name="fabrics")
    op.drop_table("fabrics")
    op.drop_index(op.f("ix_products_deleted_at"), table_name="products")
    op.drop_table("products")
    op.drop_index(op.f("ix_tokens_user_id"), table_name="tokens")
    op.drop_index(op.f("ix_tokens_token"), table_name="tokens")
    op.drop_table("tokens")
    op.drop_index(op.f("ix_users_deleted_at"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
