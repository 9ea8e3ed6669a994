"""create users, articles and user word data tables

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2026-10-16 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7e2b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    table_names = sa.inspect(bind).get_table_names()

    if "users" not in table_names:
        op.create_table(
            "users",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("username", sa.String(length=50), nullable=False),
            sa.Column("password_hash", sa.String(length=255), nullable=False),
            sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column("study_lang", sa.String(length=10), nullable=False, server_default="en"),
            sa.Column("display_lang", sa.String(length=10), nullable=False, server_default="en"),
            sa.Column("refresh_token_hash", sa.String(length=64), nullable=True),
        )
        op.create_index("ix_users_username", "users", ["username"], unique=True)

    if "articles" not in table_names:
        op.create_table(
            "articles",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("title", sa.String(length=255), nullable=False),
            sa.Column("author", sa.String(length=255), nullable=True),
            sa.Column("content", sa.Text(), nullable=False),
            sa.Column("content_length", sa.Integer(), nullable=False),
            sa.Column("words", sa.JSON(), nullable=False),
            sa.Column("sentences", sa.JSON(), nullable=False),
            sa.Column("unique_words", sa.JSON(), nullable=False),
            sa.Column("page_data", sa.JSON(), nullable=False),
            sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
            sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column("uploader_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
            sa.Column("lang", sa.String(length=10), nullable=False),
            sa.Column("tags", sa.JSON(), nullable=False),
        )
        op.create_index("ix_articles_title", "articles", ["title"])
        op.create_index("ix_articles_created_at", "articles", ["created_at"])
        op.create_index("ix_articles_is_system", "articles", ["is_system"])
        op.create_index("ix_articles_uploader_id", "articles", ["uploader_id"])
        op.create_index("ix_articles_lang", "articles", ["lang"])

    if "user_word_data" not in table_names:
        op.create_table(
            "user_word_data",
            sa.Column("id", sa.Integer(), primary_key=True),
            sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
            sa.Column("lang", sa.String(length=10), nullable=False),
            sa.Column("word_status_data", sa.JSON(), nullable=False),
            sa.Column("word_definition_data", sa.JSON(), nullable=False),
            sa.UniqueConstraint("user_id", "lang", name="uq_user_word_data_user_lang"),
        )
        op.create_index("ix_user_word_data_user_id", "user_word_data", ["user_id"])
        op.create_index("ix_user_word_data_lang", "user_word_data", ["lang"])


def downgrade() -> None:
    op.drop_index("ix_user_word_data_lang", table_name="user_word_data")
    op.drop_index("ix_user_word_data_user_id", table_name="user_word_data")
    op.drop_table("user_word_data")
    op.drop_index("ix_articles_lang", table_name="articles")
    op.drop_index("ix_articles_uploader_id", table_name="articles")
    op.drop_index("ix_articles_is_system", table_name="articles")
    op.drop_index("ix_articles_created_at", table_name="articles")
    op.drop_index("ix_articles_title", table_name="articles")
    op.drop_table("articles")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
