from datetime import datetime, timezone
from sqlmodel import Session, select
from models import Song
from domain.constants import ReadinessStatus
from utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_SONGS = [
    {"name": "Sweet Child O' Mine", "artist": "Guns N' Roses", "duration_seconds": 356, "readiness_status": ReadinessStatus.READY, "genre": "Rock"},
    {"name": "Wonderwall", "artist": "Oasis", "duration_seconds": 258, "readiness_status": ReadinessStatus.READY, "genre": "Rock"},
    {"name": "Hotel California", "artist": "Eagles", "duration_seconds": 391, "readiness_status": ReadinessStatus.IN_PROGRESS, "genre": "Rock"},
    {"name": "Bohemian Rhapsody", "artist": "Queen", "duration_seconds": 355, "readiness_status": ReadinessStatus.WISH_LIST, "genre": "Rock"},
]

def seed_initial_data(session: Session) -> int:
    """初期データ投入 (曲が1件もない場合のみ開発用のサンプル曲を登録する)"""
    existing = session.exec(select(Song.id).limit(1)).first()
    if existing is not None:
        return 0

    seeded_at = datetime(2025, 1, 1, tzinfo=timezone.utc)
    for data in SAMPLE_SONGS:
        session.add(Song(**data, created_date=seeded_at, updated_date=seeded_at))
    session.commit()

    logger.info(f"Seeded {len(SAMPLE_SONGS)} sample songs")
    return len(SAMPLE_SONGS)
