from typing import List, Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from domain.constants import NAME_MAX_LENGTH, NOTES_MAX_LENGTH

class SetCreate(SQLModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    gig_id: int
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)

class SetUpdate(SQLModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)

class SetSongRead(SQLModel):
    """セット内の曲 (曲の基本情報 + 曲順)"""
    song_id: int
    name: str
    artist: str
    duration_seconds: int
    order: int

class SetSongOrder(SQLModel):
    song_id: int
    order: int

class SetRead(SQLModel):
    id: int
    name: str
    gig_id: int
    notes: Optional[str] = None
    songs: List[SetSongRead] = []

    created_date: datetime
    updated_date: datetime
