from typing import Optional
from sqlmodel import Session

from domain.models.song import Song
from domain.errors import NotFoundError, ConflictError
from infra.repositories.song_repository import SongRepository
from api.schemas.common import ApiResponse, PaginatedResult
from api.schemas.song import SongCreate, SongUpdate
from app.services.assemblers import to_song_read
from app.services.responses import failure_response
from utils.logger import get_logger

logger = get_logger(__name__)

class SongAppService:
    def __init__(self, session: Session):
        self.session = session
        self.repository = SongRepository(session)

    def get_songs(self, page: int = 1, page_size: int = 20, search: Optional[str] = None) -> ApiResponse:
        try:
            total_count = self.repository.count(search)
            songs = self.repository.find_page(offset=(page - 1) * page_size, limit=page_size, search=search)
            items = [to_song_read(s) for s in songs]
            return ApiResponse.ok(PaginatedResult.build(items, total_count, page, page_size))
        except Exception as e:
            return failure_response(self.session, "retrieving songs", e)

    def get_song(self, song_id: int) -> ApiResponse:
        """見つからない場合は data=None の成功レスポンスを返す"""
        try:
            song = self.repository.get_by_id(song_id)
            return ApiResponse.ok(to_song_read(song) if song else None)
        except Exception as e:
            return failure_response(self.session, "retrieving song", e)

    def get_songs_by_name(self, name: str) -> ApiResponse:
        try:
            songs = self.repository.find_by_name(name)
            return ApiResponse.ok([to_song_read(s) for s in songs])
        except Exception as e:
            return failure_response(self.session, "retrieving songs by name", e)

    def create_song(self, payload: SongCreate) -> ApiResponse:
        try:
            song = self.repository.create(Song(**payload.model_dump()))
            logger.info(f"Created song {song.id}: {song.artist} - {song.name}")
            return ApiResponse.ok(to_song_read(song))
        except Exception as e:
            return failure_response(self.session, "creating song", e)

    def update_song(self, song_id: int, payload: SongUpdate) -> ApiResponse:
        try:
            song = self.repository.get_by_id(song_id)
            if not song:
                raise NotFoundError("Song not found")

            for key, value in payload.model_dump().items():
                setattr(song, key, value)

            song = self.repository.update(song)
            return ApiResponse.ok(to_song_read(song))
        except Exception as e:
            return failure_response(self.session, "updating song", e)

    def delete_song(self, song_id: int) -> ApiResponse:
        try:
            song = self.repository.get_by_id(song_id)
            if not song:
                raise NotFoundError("Song not found")

            # セットで使用中の曲は削除できない
            if self.repository.is_used_in_sets(song_id):
                raise ConflictError("Cannot delete song that is used in setlists")

            self.repository.delete(song)
            logger.info(f"Deleted song {song_id}")
            return ApiResponse.ok(True)
        except Exception as e:
            return failure_response(self.session, "deleting song", e)
