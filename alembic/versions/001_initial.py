"""Initial tables: users, country_progress, questions, reactions, feedback, content, candidates.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("google_id", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("avatar", sa.String(1024), nullable=True),
        sa.Column("role", sa.String(16), nullable=False, server_default="user"),
        sa.Column("admin_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("username", sa.String(64), nullable=True),
        sa.Column("bio", sa.String(500), nullable=True),
        sa.Column("feedback_stamp_collected_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )
    op.create_index(op.f("ix_users_google_id"), "users", ["google_id"], unique=True)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "country_progress",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("country_slug", sa.String(64), nullable=False),
        sa.Column("last_quiz_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("last_quiz_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("highest_score", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_attempts", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("stamp_collected_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "country_slug", name="uq_country_progress_user_country"),
    )
    op.create_index(op.f("ix_country_progress_user_id"), "country_progress", ["user_id"], unique=False)

    op.create_table(
        "questions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("country", sa.String(64), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("option_a", sa.Text(), nullable=False),
        sa.Column("option_b", sa.Text(), nullable=False),
        sa.Column("option_c", sa.Text(), nullable=False),
        sa.Column("option_d", sa.Text(), nullable=False),
        sa.Column("answer", sa.String(1), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("answer IN ('A', 'B', 'C', 'D')", name="ck_questions_answer"),
    )
    op.create_index(op.f("ix_questions_country"), "questions", ["country"], unique=False)

    op.create_table(
        "reactions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("country_slug", sa.String(64), nullable=False),
        sa.Column("funfact_id", sa.String(128), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("reaction_type", sa.String(16), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("funfact_id", "user_id", name="uq_reactions_funfact_user"),
    )
    op.create_index(op.f("ix_reactions_country_slug"), "reactions", ["country_slug"], unique=False)
    op.create_index(op.f("ix_reactions_funfact_id"), "reactions", ["funfact_id"], unique=False)
    op.create_index(op.f("ix_reactions_user_id"), "reactions", ["user_id"], unique=False)
    op.create_index(op.f("ix_reactions_created_at"), "reactions", ["created_at"], unique=False)
    op.create_index("ix_reactions_country_funfact", "reactions", ["country_slug", "funfact_id"], unique=False)

    op.create_table(
        "feedback",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("first_impression", sa.String(16), nullable=False),
        sa.Column("first_impression_other", sa.String(200), nullable=True),
        sa.Column("ease_of_use", sa.Integer(), nullable=False),
        sa.Column("issues_json", sa.Text(), nullable=False),
        sa.Column("issues_other", sa.String(200), nullable=True),
        sa.Column("recommendation", sa.Integer(), nullable=False),
        sa.Column("referral", sa.String(200), nullable=False),
        sa.Column("additional_feedback", sa.String(1000), nullable=True),
        sa.Column("user_agent", sa.String(512), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )

    op.create_table(
        "country_content",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("country", sa.String(64), nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("contents_json", sa.Text(), nullable=False),
        sa.Column("date_updated", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_country_content_country"), "country_content", ["country"], unique=False)
    op.create_index("ix_country_content_country_type", "country_content", ["country", "type"], unique=False)

    op.create_table(
        "simple_funfacts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("country", sa.String(64), nullable=False),
        sa.Column("funfacts_json", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_simple_funfacts_country"), "simple_funfacts", ["country"], unique=False)

    op.create_table(
        "candidates",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("suggested_by_id", sa.Integer(), nullable=False),
        sa.Column("candidate_name", sa.String(255), nullable=False),
        sa.Column("candidate_email", sa.String(255), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("suggested_role", sa.String(16), nullable=False, server_default="admin"),
        sa.Column("status", sa.String(16), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["suggested_by_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_candidates_suggested_by_id"), "candidates", ["suggested_by_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_candidates_suggested_by_id"), table_name="candidates")
    op.drop_table("candidates")
    op.drop_index(op.f("ix_simple_funfacts_country"), table_name="simple_funfacts")
    op.drop_table("simple_funfacts")
    op.drop_index("ix_country_content_country_type", table_name="country_content")
    op.drop_index(op.f("ix_country_content_country"), table_name="country_content")
    op.drop_table("country_content")
    op.drop_table("feedback")
    op.drop_index("ix_reactions_country_funfact", table_name="reactions")
    op.drop_index(op.f("ix_reactions_created_at"), table_name="reactions")
    op.drop_index(op.f("ix_reactions_user_id"), table_name="reactions")
    op.drop_index(op.f("ix_reactions_funfact_id"), table_name="reactions")
    op.drop_index(op.f("ix_reactions_country_slug"), table_name="reactions")
    op.drop_table("reactions")
    op.drop_index(op.f("ix_questions_country"), table_name="questions")
    op.drop_table("questions")
    op.drop_index(op.f("ix_country_progress_user_id"), table_name="country_progress")
    op.drop_table("country_progress")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_google_id"), table_name="users")
    op.drop_table("users")
