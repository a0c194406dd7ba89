from datetime import datetime
from typing import Optional
from sqlmodel import Session

from domain.models.gig import Gig
from domain.errors import NotFoundError
from infra.repositories.gig_repository import GigRepository
from infra.repositories.set_repository import SetRepository
from api.schemas.common import ApiResponse, PaginatedResult
from api.schemas.gig import GigCreate, GigUpdate
from app.services.assemblers import to_gig_read, to_gig_reads
from app.services.responses import failure_response
from utils.logger import get_logger

logger = get_logger(__name__)

class GigAppService:
    def __init__(self, session: Session):
        self.session = session
        self.repository = GigRepository(session)
        self.set_repository = SetRepository(session)

    def get_gigs(self, page: int = 1, page_size: int = 20) -> ApiResponse:
        try:
            total_count = self.repository.count()
            gigs = self.repository.find_page(offset=(page - 1) * page_size, limit=page_size)
            items = to_gig_reads(self.set_repository, gigs)
            return ApiResponse.ok(PaginatedResult.build(items, total_count, page, page_size))
        except Exception as e:
            return failure_response(self.session, "retrieving gigs", e)

    def get_gig(self, gig_id: int) -> ApiResponse:
        try:
            gig = self.repository.get_by_id(gig_id)
            return ApiResponse.ok(to_gig_read(self.set_repository, gig) if gig else None)
        except Exception as e:
            return failure_response(self.session, "retrieving gig", e)

    def get_upcoming_gigs(self, now: Optional[datetime] = None) -> ApiResponse:
        try:
            gigs = self.repository.find_upcoming(now)
            return ApiResponse.ok(to_gig_reads(self.set_repository, gigs))
        except Exception as e:
            return failure_response(self.session, "retrieving upcoming gigs", e)

    def create_gig(self, payload: GigCreate) -> ApiResponse:
        try:
            gig = self.repository.create(Gig(**payload.model_dump()))
            logger.info(f"Created gig {gig.id}: {gig.name}")
            return ApiResponse.ok(to_gig_read(self.set_repository, gig))
        except Exception as e:
            return failure_response(self.session, "creating gig", e)

    def update_gig(self, gig_id: int, payload: GigUpdate) -> ApiResponse:
        try:
            gig = self.repository.get_by_id(gig_id)
            if not gig:
                raise NotFoundError("Gig not found")

            for key, value in payload.model_dump().items():
                setattr(gig, key, value)

            gig = self.repository.update(gig)
            return ApiResponse.ok(to_gig_read(self.set_repository, gig))
        except Exception as e:
            return failure_response(self.session, "updating gig", e)

    def delete_gig(self, gig_id: int) -> ApiResponse:
        """Gig を削除する。配下のセットとセット内の曲も一緒に削除される"""
        try:
            gig = self.repository.get_by_id(gig_id)
            if not gig:
                raise NotFoundError("Gig not found")

            self.repository.delete(gig)
            logger.info(f"Deleted gig {gig_id}")
            return ApiResponse.ok(True)
        except Exception as e:
            return failure_response(self.session, "deleting gig", e)
