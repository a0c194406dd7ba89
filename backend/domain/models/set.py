from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel
from sqlalchemy import UniqueConstraint

from domain.constants import NAME_MAX_LENGTH, NOTES_MAX_LENGTH
from domain.models.timestamps import UTCDateTime, utc_now

class Set(SQLModel, table=True):
    __tablename__ = "sets"
    id: Optional[int] = Field(default=None, primary_key=True)
    # 親の Gig が削除されたらセットも削除
    gig_id: int = Field(foreign_key="gigs.id", ondelete="CASCADE", index=True)
    name: str = Field(max_length=NAME_MAX_LENGTH)
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)

    created_date: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_date: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

class SetSong(SQLModel, table=True):
    """
    セットと曲の中間テーブル。
    (set_id, song_id) が主キー、(set_id, order) も一意。
    """
    __tablename__ = "set_songs"
    __table_args__ = (
        UniqueConstraint("set_id", "order", name="uq_set_songs_set_id_order"),
    )

    set_id: int = Field(foreign_key="sets.id", primary_key=True, ondelete="CASCADE")
    # セットで使用中の曲は削除させない
    song_id: int = Field(foreign_key="songs.id", primary_key=True, ondelete="RESTRICT", index=True)
    order: int
