"""initial schema: songs, gigs, sets, set_songs

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-09-23 12:21:20

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "songs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("artist", sa.String(length=200), nullable=False),
        sa.Column("duration_seconds", sa.Integer(), nullable=False),
        sa.Column("readiness_status", sa.String(length=20), nullable=False),
        sa.Column("genre", sa.String(), nullable=True),
        sa.Column("notes", sa.String(), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("updated_date", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_songs_name", "songs", ["name"])
    op.create_index("ix_songs_readiness_status", "songs", ["readiness_status"])

    op.create_table(
        "gigs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("venue", sa.String(length=200), nullable=True),
        sa.Column("notes", sa.String(length=1000), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("updated_date", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_gigs_date", "gigs", ["date"])

    op.create_table(
        "sets",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("gig_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("notes", sa.String(length=1000), nullable=True),
        sa.Column("created_date", sa.DateTime(), nullable=False),
        sa.Column("updated_date", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["gig_id"], ["gigs.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_sets_gig_id", "sets", ["gig_id"])

    op.create_table(
        "set_songs",
        sa.Column("set_id", sa.Integer(), nullable=False),
        sa.Column("song_id", sa.Integer(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["set_id"], ["sets.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["song_id"], ["songs.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("set_id", "song_id"),
        sa.UniqueConstraint("set_id", "order", name="uq_set_songs_set_id_order"),
    )
    op.create_index("ix_set_songs_song_id", "set_songs", ["song_id"])


def downgrade() -> None:
    op.drop_index("ix_set_songs_song_id", table_name="set_songs")
    op.drop_table("set_songs")
    op.drop_index("ix_sets_gig_id", table_name="sets")
    op.drop_table("sets")
    op.drop_index("ix_gigs_date", table_name="gigs")
    op.drop_table("gigs")
    op.drop_index("ix_songs_readiness_status", table_name="songs")
    op.drop_index("ix_songs_name", table_name="songs")
    op.drop_table("songs")
