from typing import List
from sqlmodel import Session

from domain.models.set import Set, SetSong
from domain.errors import NotFoundError
from domain.services.set_order_planner import SetOrderPlanner
from infra.repositories.set_repository import SetRepository
from infra.repositories.gig_repository import GigRepository
from infra.repositories.song_repository import SongRepository
from api.schemas.common import ApiResponse, PaginatedResult
from api.schemas.set import SetCreate, SetUpdate, SetSongOrder
from app.services.assemblers import to_set_read, to_set_reads
from app.services.responses import failure_response
from utils.logger import get_logger

logger = get_logger(__name__)

class SetAppService:
    def __init__(self, session: Session):
        self.session = session
        self.repository = SetRepository(session)
        self.gig_repository = GigRepository(session)
        self.song_repository = SongRepository(session)
        self.planner = SetOrderPlanner()

    def get_sets(self, page: int = 1, page_size: int = 20) -> ApiResponse:
        try:
            total_count = self.repository.count()
            sets = self.repository.find_page(offset=(page - 1) * page_size, limit=page_size)
            items = to_set_reads(self.repository, sets)
            return ApiResponse.ok(PaginatedResult.build(items, total_count, page, page_size))
        except Exception as e:
            return failure_response(self.session, "retrieving sets", e)

    def get_set(self, set_id: int) -> ApiResponse:
        try:
            set_ = self.repository.get_by_id(set_id)
            return ApiResponse.ok(to_set_read(self.repository, set_) if set_ else None)
        except Exception as e:
            return failure_response(self.session, "retrieving set", e)

    def get_sets_by_gig(self, gig_id: int) -> ApiResponse:
        try:
            sets = self.repository.find_by_gig(gig_id)
            return ApiResponse.ok(to_set_reads(self.repository, sets))
        except Exception as e:
            return failure_response(self.session, "retrieving sets for gig", e)

    def create_set(self, payload: SetCreate) -> ApiResponse:
        try:
            if not self.gig_repository.exists(payload.gig_id):
                raise NotFoundError("Gig not found")

            set_ = self.repository.create(Set(**payload.model_dump()))
            logger.info(f"Created set {set_.id} in gig {set_.gig_id}")
            return ApiResponse.ok(to_set_read(self.repository, set_))
        except Exception as e:
            return failure_response(self.session, "creating set", e)

    def update_set(self, set_id: int, payload: SetUpdate) -> ApiResponse:
        try:
            set_ = self.repository.get_by_id(set_id)
            if not set_:
                raise NotFoundError("Set not found")

            set_.name = payload.name
            set_.notes = payload.notes
            set_ = self.repository.update(set_)
            return ApiResponse.ok(to_set_read(self.repository, set_))
        except Exception as e:
            return failure_response(self.session, "updating set", e)

    def delete_set(self, set_id: int) -> ApiResponse:
        try:
            set_ = self.repository.get_by_id(set_id)
            if not set_:
                raise NotFoundError("Set not found")

            self.repository.delete(set_)
            logger.info(f"Deleted set {set_id}")
            return ApiResponse.ok(True)
        except Exception as e:
            return failure_response(self.session, "deleting set", e)

    # --- Set Songs (曲順の管理) ---

    def add_song_to_set(self, set_id: int, song_id: int, order: int = 1) -> ApiResponse:
        """
        曲をセットの order 番目に挿入する。
        order 以降の既存曲は1つずつ後ろにずれ、N+1 を超える order は末尾扱いになる。
        """
        try:
            set_ = self.repository.get_by_id(set_id)
            if not set_:
                raise NotFoundError("Set not found")
            if not self.song_repository.get_by_id(song_id):
                raise NotFoundError("Song not found")

            members = self.repository.get_members(set_id)
            current = {m.song_id: m.order for m in members}
            plan = self.planner.plan_insert(current, song_id, order)

            self.repository.apply_orders(members, plan)
            self.repository.add_member(SetSong(set_id=set_id, song_id=song_id, order=plan[song_id]))
            self.repository.touch(set_)
            self.session.commit()

            logger.info(f"Added song {song_id} to set {set_id} at position {plan[song_id]}")
            return ApiResponse.ok(to_set_read(self.repository, set_))
        except Exception as e:
            return failure_response(self.session, "adding song to set", e)

    def remove_song_from_set(self, set_id: int, song_id: int) -> ApiResponse:
        """曲をセットから外し、後ろの曲を1つずつ前に詰める"""
        try:
            members = self.repository.get_members(set_id)
            current = {m.song_id: m.order for m in members}
            plan = self.planner.plan_remove(current, song_id)

            removed = next(m for m in members if m.song_id == song_id)
            remaining = [m for m in members if m.song_id != song_id]

            self.repository.remove_member(removed)
            self.repository.apply_orders(remaining, plan)

            set_ = self.repository.get_by_id(set_id)
            if set_:
                self.repository.touch(set_)
            self.session.commit()

            logger.info(f"Removed song {song_id} from set {set_id}")
            return ApiResponse.ok(True)
        except Exception as e:
            return failure_response(self.session, "removing song from set", e)

    def reorder_set_songs(self, set_id: int, song_orders: List[SetSongOrder]) -> ApiResponse:
        """
        指定された曲の order を上書きする。セット外の song_id は無視する。
        結果の連番性は検証せず、重複した order はDBの一意制約違反 (500) になる。
        """
        try:
            set_ = self.repository.get_by_id(set_id)
            if not set_:
                raise NotFoundError("Set not found")

            members = self.repository.get_members(set_id)
            current = {m.song_id: m.order for m in members}
            plan = self.planner.plan_reorder(current, ((o.song_id, o.order) for o in song_orders))

            self.repository.apply_orders(members, plan)
            self.repository.touch(set_)
            self.session.commit()

            logger.info(f"Reordered {len(self.planner.changed_entries(current, plan))} songs in set {set_id}")
            return ApiResponse.ok(to_set_read(self.repository, set_))
        except Exception as e:
            return failure_response(self.session, "reordering set songs", e)
