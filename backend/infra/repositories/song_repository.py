from typing import List, Optional
from sqlmodel import Session, select, or_, col
from sqlalchemy import func

from domain.models.song import Song
from domain.models.set import SetSong
from domain.models.timestamps import utc_now

LIKE_ESCAPE = "\\"

class SongRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, song_id: int) -> Optional[Song]:
        return self.session.get(Song, song_id)

    @staticmethod
    def _contains_pattern(text: str) -> str:
        # % と _ はワイルドカードではなく文字として扱う
        escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        return f"%{escaped}%"

    def _apply_search(self, query, search: Optional[str] = None):
        """曲名またはアーティスト名の部分一致 (大文字小文字を区別しない)"""
        if search and search.strip():
            pattern = self._contains_pattern(search.strip())
            query = query.where(or_(
                col(Song.name).ilike(pattern, escape=LIKE_ESCAPE),
                col(Song.artist).ilike(pattern, escape=LIKE_ESCAPE),
            ))
        return query

    def count(self, search: Optional[str] = None) -> int:
        query = self._apply_search(select(func.count()).select_from(Song), search)
        return self.session.exec(query).one()

    def find_page(self, offset: int = 0, limit: int = 20, search: Optional[str] = None) -> List[Song]:
        query = self._apply_search(select(Song), search)
        query = query.order_by(Song.artist, Song.name, Song.id).offset(offset).limit(limit)
        return self.session.exec(query).all()

    def find_by_name(self, name: str) -> List[Song]:
        pattern = self._contains_pattern(name)
        return self.session.exec(select(Song).where(col(Song.name).ilike(pattern, escape=LIKE_ESCAPE))).all()

    def is_used_in_sets(self, song_id: int) -> bool:
        return self.session.exec(select(SetSong).where(SetSong.song_id == song_id).limit(1)).first() is not None

    def create(self, song: Song) -> Song:
        self.session.add(song)
        self.session.commit()
        self.session.refresh(song)
        return song

    def update(self, song: Song) -> Song:
        song.updated_date = utc_now()
        self.session.add(song)
        self.session.commit()
        self.session.refresh(song)
        return song

    def delete(self, song: Song):
        self.session.delete(song)
        self.session.commit()
