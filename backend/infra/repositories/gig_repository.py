from typing import List, Optional
from sqlmodel import Session, select, desc
from sqlalchemy import func
from datetime import datetime

from domain.models.gig import Gig
from domain.models.set import Set, SetSong
from domain.models.timestamps import utc_now

class GigRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, gig_id: int) -> Optional[Gig]:
        return self.session.get(Gig, gig_id)

    def exists(self, gig_id: int) -> bool:
        return self.get_by_id(gig_id) is not None

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(Gig)).one()

    def find_page(self, offset: int = 0, limit: int = 20) -> List[Gig]:
        query = select(Gig).order_by(desc(Gig.date), desc(Gig.id)).offset(offset).limit(limit)
        return self.session.exec(query).all()

    def find_upcoming(self, now: Optional[datetime] = None) -> List[Gig]:
        now = now or utc_now()
        return self.session.exec(select(Gig).where(Gig.date >= now).order_by(Gig.date)).all()

    def create(self, gig: Gig) -> Gig:
        self.session.add(gig)
        self.session.commit()
        self.session.refresh(gig)
        return gig

    def update(self, gig: Gig) -> Gig:
        gig.updated_date = utc_now()
        self.session.add(gig)
        self.session.commit()
        self.session.refresh(gig)
        return gig

    def delete(self, gig: Gig):
        # Gig -> Set -> SetSong の順に子を明示的に削除してから本体を削除する
        sets = self.session.exec(select(Set).where(Set.gig_id == gig.id)).all()
        for s in sets:
            members = self.session.exec(select(SetSong).where(SetSong.set_id == s.id)).all()
            for m in members:
                self.session.delete(m)
        self.session.flush()

        for s in sets:
            self.session.delete(s)
        self.session.flush()

        self.session.delete(gig)
        self.session.commit()
