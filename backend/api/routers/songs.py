from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from typing import Optional

from config import settings
from infra.database.connection import get_session
from api.responses import API_PREFIX, envelope_response, found_response, created_response, no_content_response
from api.schemas.song import SongCreate, SongUpdate
from app.services.song_app_service import SongAppService

router = APIRouter(tags=["Songs"])

@router.get(f"{API_PREFIX}/songs")
def get_songs(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    search: Optional[str] = Query(None, description="曲名またはアーティスト名の部分一致"),
    session: Session = Depends(get_session)
):
    service = SongAppService(session)
    return envelope_response(service.get_songs(page, page_size, search))

@router.get(f"{API_PREFIX}/songs/search/{{name}}")
def get_songs_by_name(name: str, session: Session = Depends(get_session)):
    service = SongAppService(session)
    return envelope_response(service.get_songs_by_name(name))

@router.get(f"{API_PREFIX}/songs/{{song_id}}")
def get_song(song_id: int, session: Session = Depends(get_session)):
    service = SongAppService(session)
    return found_response(service.get_song(song_id), "Song not found")

@router.post(f"{API_PREFIX}/songs")
def create_song(song: SongCreate, session: Session = Depends(get_session)):
    service = SongAppService(session)
    return created_response(service.create_song(song), f"{API_PREFIX}/songs")

@router.put(f"{API_PREFIX}/songs/{{song_id}}")
def update_song(song_id: int, song: SongUpdate, session: Session = Depends(get_session)):
    service = SongAppService(session)
    return envelope_response(service.update_song(song_id, song))

@router.delete(f"{API_PREFIX}/songs/{{song_id}}")
def delete_song(song_id: int, session: Session = Depends(get_session)):
    """セットで使用中の曲は削除できない (400)"""
    service = SongAppService(session)
    return no_content_response(service.delete_song(song_id))
