from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from config import settings
from infra.database.connection import get_session
from api.responses import API_PREFIX, envelope_response, found_response, created_response, no_content_response
from api.schemas.gig import GigCreate, GigUpdate
from app.services.gig_app_service import GigAppService

router = APIRouter(tags=["Gigs"])

@router.get(f"{API_PREFIX}/gigs")
def get_gigs(
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    session: Session = Depends(get_session)
):
    service = GigAppService(session)
    return envelope_response(service.get_gigs(page, page_size))

# /gigs/{gig_id} より先に登録する
@router.get(f"{API_PREFIX}/gigs/upcoming")
def get_upcoming_gigs(session: Session = Depends(get_session)):
    """本日以降のGigを日付の昇順で返す"""
    service = GigAppService(session)
    return envelope_response(service.get_upcoming_gigs())

@router.get(f"{API_PREFIX}/gigs/{{gig_id}}")
def get_gig(gig_id: int, session: Session = Depends(get_session)):
    service = GigAppService(session)
    return found_response(service.get_gig(gig_id), "Gig not found")

@router.post(f"{API_PREFIX}/gigs")
def create_gig(gig: GigCreate, session: Session = Depends(get_session)):
    service = GigAppService(session)
    return created_response(service.create_gig(gig), f"{API_PREFIX}/gigs")

@router.put(f"{API_PREFIX}/gigs/{{gig_id}}")
def update_gig(gig_id: int, gig: GigUpdate, session: Session = Depends(get_session)):
    service = GigAppService(session)
    return envelope_response(service.update_gig(gig_id, gig))

@router.delete(f"{API_PREFIX}/gigs/{{gig_id}}")
def delete_gig(gig_id: int, session: Session = Depends(get_session)):
    service = GigAppService(session)
    return no_content_response(service.delete_gig(gig_id))
