from typing import List, Optional
from datetime import datetime
from sqlmodel import SQLModel, Field

from domain.constants import NAME_MAX_LENGTH, VENUE_MAX_LENGTH, NOTES_MAX_LENGTH
from api.schemas.set import SetRead

class GigCreate(SQLModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    date: datetime
    venue: Optional[str] = Field(default=None, max_length=VENUE_MAX_LENGTH)
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)

class GigUpdate(GigCreate):
    pass

class GigRead(SQLModel):
    id: int
    name: str
    date: datetime
    venue: Optional[str] = None
    notes: Optional[str] = None
    sets: List[SetRead] = []

    created_date: datetime
    updated_date: datetime
