from typing import Dict, Iterable, List, Optional
from sqlmodel import Session, select, desc, col
from sqlalchemy import func

from domain.models.set import Set, SetSong
from domain.models.song import Song
from domain.models.timestamps import utc_now

class SetRepository:
    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, set_id: int) -> Optional[Set]:
        return self.session.get(Set, set_id)

    def count(self) -> int:
        return self.session.exec(select(func.count()).select_from(Set)).one()

    def find_page(self, offset: int = 0, limit: int = 20) -> List[Set]:
        query = select(Set).order_by(desc(Set.created_date), desc(Set.id)).offset(offset).limit(limit)
        return self.session.exec(query).all()

    def find_by_gig(self, gig_id: int) -> List[Set]:
        return self.session.exec(select(Set).where(Set.gig_id == gig_id).order_by(Set.id)).all()

    def find_by_gigs(self, gig_ids: Iterable[int]) -> Dict[int, List[Set]]:
        """gig_id -> そのGigのセット一覧 の索引を返す"""
        ids = list(gig_ids)
        index: Dict[int, List[Set]] = {gid: [] for gid in ids}
        if not ids:
            return index
        sets = self.session.exec(select(Set).where(col(Set.gig_id).in_(ids)).order_by(Set.id)).all()
        for s in sets:
            index[s.gig_id].append(s)
        return index

    def create(self, set_: Set) -> Set:
        self.session.add(set_)
        self.session.commit()
        self.session.refresh(set_)
        return set_

    def update(self, set_: Set) -> Set:
        set_.updated_date = utc_now()
        self.session.add(set_)
        self.session.commit()
        self.session.refresh(set_)
        return set_

    def delete(self, set_: Set):
        self.clear_members(set_.id)
        self.session.delete(set_)
        self.session.commit()

    def touch(self, set_: Set):
        set_.updated_date = utc_now()
        self.session.add(set_)

    # --- Set Songs ---

    def get_members(self, set_id: int) -> List[SetSong]:
        query = select(SetSong).where(SetSong.set_id == set_id).order_by(SetSong.order)
        return self.session.exec(query).all()

    def get_member_details(self, set_ids: Iterable[int]) -> Dict[int, List[tuple[SetSong, Song]]]:
        """set_id -> [(SetSong, Song), ...] (order 昇順) の索引を返す"""
        ids = list(set_ids)
        index: Dict[int, List[tuple[SetSong, Song]]] = {sid: [] for sid in ids}
        if not ids:
            return index
        query = (
            select(SetSong, Song)
            .where(col(SetSong.set_id).in_(ids))
            .where(SetSong.song_id == Song.id)
            .order_by(SetSong.set_id, SetSong.order)
        )
        for set_song, song in self.session.exec(query).all():
            index[set_song.set_id].append((set_song, song))
        return index

    def clear_members(self, set_id: int):
        for member in self.get_members(set_id):
            self.session.delete(member)
        self.session.flush()

    def add_member(self, set_song: SetSong):
        self.session.add(set_song)
        self.session.flush()

    def remove_member(self, set_song: SetSong):
        self.session.delete(set_song)
        self.session.flush()

    def apply_orders(self, members: List[SetSong], new_orders: Dict[int, int]):
        """
        既存メンバーの order を new_orders (song_id -> order) の値に更新する。
        (set_id, order) の一意制約に途中で衝突しないよう、
        対象行を一度負の仮番号に退避して flush してから最終値を書き込む。
        """
        targets = [m for m in members if m.song_id in new_orders and m.order != new_orders[m.song_id]]
        if not targets:
            return

        floor = min([0] + [m.order for m in members])
        for i, member in enumerate(targets):
            member.order = floor - 1 - i
            self.session.add(member)
        self.session.flush()

        for member in targets:
            member.order = new_orders[member.song_id]
            self.session.add(member)
        self.session.flush()
