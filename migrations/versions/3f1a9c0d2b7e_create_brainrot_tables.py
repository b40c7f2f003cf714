"""create users, brainrots and inventory_slots

Revision ID: 3f1a9c0d2b7e
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


revision = "3f1a9c0d2b7e"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=64), nullable=False),
        sa.Column("last_farmed_at", sa.DateTime(), nullable=True),
        sa.Column("last_stole_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "brainrots",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False, unique=True),
        sa.Column(
            "rarity",
            sa.String(length=32),
            nullable=False,
            server_default=sa.text("'Common'"),
        ),
    )

    op.create_table(
        "inventory_slots",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("brainrot_id", sa.Integer(), sa.ForeignKey("brainrots.id"), nullable=False),
        sa.Column(
            "is_pending", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("pending_since", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index(op.f("ix_inventory_slots_user_id"), "inventory_slots", ["user_id"])
    # at most one pending slot per user
    op.create_index(
        "uq_inventory_slots_one_pending",
        "inventory_slots",
        ["user_id"],
        unique=True,
        sqlite_where=sa.text("is_pending = 1"),
        postgresql_where=sa.text("is_pending"),
    )


def downgrade() -> None:
    op.drop_index("uq_inventory_slots_one_pending", table_name="inventory_slots")
    op.drop_index(op.f("ix_inventory_slots_user_id"), table_name="inventory_slots")
    op.drop_table("inventory_slots")
    op.drop_table("brainrots")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
