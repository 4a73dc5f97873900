"""Initial schema: users, events, registrations, materials, donations, loans, teams, interactions

Revision ID: 001
Revises: None
Create Date: 2026-05-14 00:00:00.000000+00:00

Creates every table of the community sports backend. Foreign keys to users
use ON DELETE SET NULL, so deleting a member keeps the history they touched;
sign-ups cascade with their event or user.

Rollback: downgrade() drops all tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    )


def _user_fk(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.Integer(),
        sa.ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(64), nullable=False, comment="Login name, unique across users"),
        sa.Column("password_hash", sa.String(255), nullable=False, comment="bcrypt hash of the password"),
        sa.Column("real_name", sa.String(64), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default=sa.text("'VILLAGER'")),
        sa.Column("village_name", sa.String(128), nullable=True),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("exercise_pref", sa.String(255), nullable=True),
        sa.Column(
            "status",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("1"),
            comment="0 pending, 1 active, 2 banned",
        ),
        _created_at(),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "events",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("rules", sa.Text(), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'UPCOMING'")),
        sa.Column("theme", sa.String(255), nullable=True),
        sa.Column("img_url", sa.String(512), nullable=True),
        _user_fk("organizer_id"),
    )
    op.create_index("ix_events_organizer_id", "events", ["organizer_id"])

    op.create_table(
        "event_registrations",
        _id(),
        sa.Column(
            "event_id",
            sa.Integer(),
            sa.ForeignKey("events.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("health_condition", sa.Text(), nullable=True),
        _created_at(),
        sa.UniqueConstraint("event_id", "user_id", name="uq_event_registrations_event_user"),
    )
    op.create_index("ix_event_registrations_event_id", "event_registrations", ["event_id"])

    op.create_table(
        "materials",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.String(64), nullable=True),
        sa.Column("condition_level", sa.Integer(), nullable=True, comment="1-5 stars"),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'PENDING'")),
        _user_fk("donor_id"),
        _user_fk("current_holder_id"),
        sa.Column("due_back_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "donations",
        _id(),
        sa.Column("material_type", sa.String(64), nullable=True),
        sa.Column("condition", sa.String(255), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'PENDING'")),
        _user_fk("donator_id"),
        _created_at(),
    )

    op.create_table(
        "loans",
        _id(),
        sa.Column("material_type", sa.String(64), nullable=True),
        sa.Column("return_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'BORROWED'")),
        _user_fk("borrower_id"),
        _created_at(),
    )
    op.create_index("ix_loans_borrower_id", "loans", ["borrower_id"])

    op.create_table(
        "teams",
        _id(),
        sa.Column("name", sa.String(128), nullable=False),
        sa.Column("sport", sa.String(64), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("village_name", sa.String(128), nullable=True),
        _user_fk("captain_id"),
        _created_at(),
    )

    op.create_table(
        "interactions",
        _id(),
        sa.Column("target_id", sa.Integer(), nullable=True),
        _user_fk("user_id"),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("reply_content", sa.Text(), nullable=True),
        _created_at(),
    )
    op.create_index("idx_interactions_type", "interactions", ["type"])


def downgrade() -> None:
    op.drop_index("idx_interactions_type", table_name="interactions")
    op.drop_table("interactions")
    op.drop_table("teams")
    op.drop_index("ix_loans_borrower_id", table_name="loans")
    op.drop_table("loans")
    op.drop_table("donations")
    op.drop_table("materials")
    op.drop_index("ix_event_registrations_event_id", table_name="event_registrations")
    op.drop_table("event_registrations")
    op.drop_index("ix_events_organizer_id", table_name="events")
    op.drop_table("events")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
