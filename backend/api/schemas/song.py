from typing import Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from domain.constants import ReadinessStatus, NAME_MAX_LENGTH

class SongCreate(SQLModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    artist: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    duration_seconds: int = Field(gt=0)
    readiness_status: ReadinessStatus = ReadinessStatus.WISH_LIST
    notes: Optional[str] = None
    genre: Optional[str] = None

class SongUpdate(SongCreate):
    pass

class SongRead(SQLModel):
    id: int
    name: str
    artist: str
    duration_seconds: int
    readiness_status: ReadinessStatus
    notes: Optional[str] = None
    genre: Optional[str] = None

    created_date: datetime
    updated_date: datetime
