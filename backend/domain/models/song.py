from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel
from sqlalchemy import Column, Enum as SAEnum

from domain.constants import ReadinessStatus, NAME_MAX_LENGTH
from domain.models.timestamps import UTCDateTime, utc_now

class Song(SQLModel, table=True):
    """レパートリーの曲モデル"""
    __tablename__ = "songs"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=NAME_MAX_LENGTH, index=True)
    artist: str = Field(max_length=NAME_MAX_LENGTH)
    duration_seconds: int

    # Enum は名前ではなく値 ("Ready" 等) で保存する
    readiness_status: ReadinessStatus = Field(
        default=ReadinessStatus.WISH_LIST,
        sa_column=Column(
            SAEnum(
                ReadinessStatus,
                values_callable=lambda enum_cls: [m.value for m in enum_cls],
                native_enum=False,
                length=20,
            ),
            nullable=False,
            index=True,
        ),
    )
    genre: Optional[str] = None
    notes: Optional[str] = None

    created_date: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_date: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
