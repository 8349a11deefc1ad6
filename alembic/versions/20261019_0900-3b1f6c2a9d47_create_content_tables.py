"""create_content_tables

Revision ID: 3b1f6c2a9d47
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b1f6c2a9d47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    # id and timestamps from BaseMutableModel
    return [
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create streetcodes, images, facts, arts and streetcode_arts tables."""
    op.create_table(
        "streetcodes",
        *_base_columns(),
        sa.Column(
            "index", sa.Integer(), nullable=False, comment="Public streetcode number"
        ),
        sa.Column(
            "title", sa.String(length=100), nullable=False, comment="Display title"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("index"),
    )

    op.create_table(
        "images",
        *_base_columns(),
        sa.Column("blob_name", sa.String(length=255), nullable=False),
        sa.Column("mime_type", sa.String(length=50), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=True),
        sa.Column("alt", sa.String(length=300), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "facts",
        *_base_columns(),
        sa.Column("title", sa.String(length=68), nullable=False),
        sa.Column("fact_content", sa.Text(), nullable=False),
        sa.Column(
            "number",
            sa.Integer(),
            nullable=False,
            comment="1-based position among the facts of the streetcode",
        ),
        sa.Column("streetcode_id", sa.Integer(), nullable=False),
        sa.Column("image_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["streetcode_id"], ["streetcodes.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["image_id"], ["images.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_facts_streetcode_id"), "facts", ["streetcode_id"], unique=False
    )

    op.create_table(
        "arts",
        *_base_columns(),
        sa.Column("title", sa.String(length=150), nullable=True),
        sa.Column("description", sa.String(length=400), nullable=True),
        sa.Column("image_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["image_id"], ["images.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "streetcode_arts",
        sa.Column("art_id", sa.Integer(), nullable=False),
        sa.Column("streetcode_id", sa.Integer(), nullable=False),
        sa.Column(
            "index",
            sa.Integer(),
            nullable=False,
            comment="Position of the art in the streetcode gallery",
        ),
        sa.ForeignKeyConstraint(["art_id"], ["arts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["streetcode_id"], ["streetcodes.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("art_id", "streetcode_id"),
    )
    op.create_index(
        op.f("ix_streetcode_arts_streetcode_id"),
        "streetcode_arts",
        ["streetcode_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop content tables in reverse dependency order."""
    op.drop_index(op.f("ix_streetcode_arts_streetcode_id"), table_name="streetcode_arts")
    op.drop_table("streetcode_arts")
    op.drop_table("arts")
    op.drop_index(op.f("ix_facts_streetcode_id"), table_name="facts")
    op.drop_table("facts")
    op.drop_table("images")
    op.drop_table("streetcodes")
