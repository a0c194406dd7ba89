from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel

from domain.constants import NAME_MAX_LENGTH, VENUE_MAX_LENGTH, NOTES_MAX_LENGTH
from domain.models.timestamps import UTCDateTime, utc_now

class Gig(SQLModel, table=True):
    __tablename__ = "gigs"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=NAME_MAX_LENGTH)
    date: datetime = Field(sa_type=UTCDateTime, index=True)
    venue: Optional[str] = Field(default=None, max_length=VENUE_MAX_LENGTH)
    notes: Optional[str] = Field(default=None, max_length=NOTES_MAX_LENGTH)

    created_date: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_date: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
