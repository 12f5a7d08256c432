"""Journal entries

Revision ID: 5b1e7c0a9d24
Revises:
Create Date: 2026-10-19 10:12:41.503318

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "5b1e7c0a9d24"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "journal_entries",
        sa.Column("id", sa.Uuid(as_uuid=True), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("content", sa.String(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("TIMEZONE('utc', statement_timestamp())"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "title <> ''", name=op.f("ck_journal_entries_title_not_empty")
        ),
        sa.CheckConstraint(
            "content <> ''", name=op.f("ck_journal_entries_content_not_empty")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_journal_entries")),
        sa.UniqueConstraint("id", name=op.f("uq_journal_entries_id")),
    )
    op.create_index(
        op.f("ix_journal_entries_user_id"), "journal_entries", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_journal_entries_created_at"),
        "journal_entries",
        ["created_at"],
        unique=False,
    )


def downgrade():
    op.drop_index(op.f("ix_journal_entries_created_at"), table_name="journal_entries")
    op.drop_index(op.f("ix_journal_entries_user_id"), table_name="journal_entries")
    op.drop_table("journal_entries")
