from fastapi import APIRouter, Depends, Query, Body
from sqlmodel import Session
from typing import List

from config import settings
from infra.database.connection import get_session
from api.responses import API_PREFIX, envelope_response, found_response, created_response, no_content_response
from api.schemas.set import SetCreate, SetUpdate, SetSongOrder
from app.services.set_app_service import SetAppService

router = APIRouter(tags=["Sets"])

@router.get(f"{API_PREFIX}/sets")
def get_sets(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    session: Session = Depends(get_session)
):
    service = SetAppService(session)
    return envelope_response(service.get_sets(page, page_size))

@router.get(f"{API_PREFIX}/sets/gig/{{gig_id}}")
def get_sets_by_gig(gig_id: int, session: Session = Depends(get_session)):
    service = SetAppService(session)
    return envelope_response(service.get_sets_by_gig(gig_id))

@router.get(f"{API_PREFIX}/sets/{{set_id}}")
def get_set(set_id: int, session: Session = Depends(get_session)):
    service = SetAppService(session)
    return found_response(service.get_set(set_id), "Set not found")

@router.post(f"{API_PREFIX}/sets")
def create_set(set_data: SetCreate, session: Session = Depends(get_session)):
    service = SetAppService(session)
    return created_response(service.create_set(set_data), f"{API_PREFIX}/sets")

@router.put(f"{API_PREFIX}/sets/{{set_id}}")
def update_set(set_id: int, set_data: SetUpdate, session: Session = Depends(get_session)):
    service = SetAppService(session)
    return envelope_response(service.update_set(set_id, set_data))

@router.delete(f"{API_PREFIX}/sets/{{set_id}}")
def delete_set(set_id: int, session: Session = Depends(get_session)):
    service = SetAppService(session)
    return no_content_response(service.delete_set(set_id))

@router.post(f"{API_PREFIX}/sets/{{set_id}}/songs/{{song_id}}")
def add_song_to_set(
    set_id: int,
    song_id: int,
    order: int = Query(1, description="挿入位置 (1始まり)。曲数+1を超える値は末尾に追加"),
    session: Session = Depends(get_session)
):
    service = SetAppService(session)
    return envelope_response(service.add_song_to_set(set_id, song_id, order))

@router.delete(f"{API_PREFIX}/sets/{{set_id}}/songs/{{song_id}}")
def remove_song_from_set(set_id: int, song_id: int, session: Session = Depends(get_session)):
    service = SetAppService(session)
    return no_content_response(service.remove_song_from_set(set_id, song_id))

@router.put(f"{API_PREFIX}/sets/{{set_id}}/reorder")
def reorder_set_songs(
    set_id: int,
    song_orders: List[SetSongOrder] = Body(...),
    session: Session = Depends(get_session)
):
    """
    セット内の曲順を一括で更新する。
    セット外の song_id は無視される。order が重複する場合は 500 になる。
    """
    service = SetAppService(session)
    return envelope_response(service.reorder_set_songs(set_id, song_orders))
