import os
import pytest
import sys
import tempfile
import uuid
from datetime import datetime, timedelta, timezone
from typing import Generator

# 1. パス解決: backendディレクトリをsys.pathに追加
CURRENT_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.dirname(CURRENT_DIR)
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

# アプリのモジュールを読み込む前に、DB とログの出力先を一時ディレクトリへ向ける
TEST_DATA_DIR = os.path.join(tempfile.gettempdir(), "setlist_test")
os.environ.setdefault("USER_DATA_DIR", TEST_DATA_DIR)
os.environ.setdefault("SETLIST_LOG_DIR", os.path.join(TEST_DATA_DIR, "logs"))
os.environ.setdefault("SEED_SAMPLE_SONGS", "false")

from sqlmodel import Session, create_engine

import infra.database.connection as db_connection
from models import Song, Gig, Set, SetSong
from domain.constants import ReadinessStatus

@pytest.fixture(name="engine", scope="function")
def engine_fixture(mocker):
    """
    テストごとに完全に独立したDB環境（物理ファイル）を構築する。
    スキーマは本番と同じ Alembic マイグレーションで作成する。
    """
    unique_id = str(uuid.uuid4())
    test_db_path = os.path.join(tempfile.gettempdir(), f"setlist_test_{unique_id}.sqlite3")

    engine = create_engine(
        f"sqlite:///{test_db_path}",
        connect_args={"check_same_thread": False}
    )

    db_connection.run_migrations(engine)

    # アプリ起動時の init_db / close_db がテスト中に走らないようモック化
    mocker.patch("infra.database.connection.init_db")
    mocker.patch("infra.database.connection.close_db")

    yield engine

    # テスト終了後のクリーンアップ
    engine.dispose()
    if os.path.exists(test_db_path):
        try:
            os.remove(test_db_path)
        except OSError:
            pass

@pytest.fixture(name="session", scope="function")
def session_fixture(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session

@pytest.fixture(name="client")
def client_fixture(session: Session) -> Generator:
    """FastAPIのTestClientを提供し、DBセッションをDIで差し替える"""
    from fastapi.testclient import TestClient
    from main import app
    from infra.database.connection import get_session

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

# --- Data helpers ---

def make_song(session: Session, name: str, artist: str = "Test Artist", duration_seconds: int = 240,
              readiness_status: ReadinessStatus = ReadinessStatus.READY, **kwargs) -> Song:
    song = Song(name=name, artist=artist, duration_seconds=duration_seconds, readiness_status=readiness_status, **kwargs)
    session.add(song)
    session.commit()
    session.refresh(song)
    return song

def make_gig(session: Session, name: str = "Friday Night", date: datetime = None, **kwargs) -> Gig:
    gig = Gig(name=name, date=date or datetime.now(timezone.utc) + timedelta(days=7), **kwargs)
    session.add(gig)
    session.commit()
    session.refresh(gig)
    return gig

def make_set(session: Session, gig: Gig, name: str = "Main Set", songs=(), **kwargs) -> Set:
    """songs の並び順どおりに order=1.. で曲を登録する"""
    set_ = Set(gig_id=gig.id, name=name, **kwargs)
    session.add(set_)
    session.commit()
    session.refresh(set_)
    for i, song in enumerate(songs, start=1):
        session.add(SetSong(set_id=set_.id, song_id=song.id, order=i))
    session.commit()
    return set_

def member_orders(session: Session, set_id: int) -> dict:
    """song_id -> order をDBから直接読む"""
    from sqlmodel import select
    session.expire_all()
    rows = session.exec(select(SetSong).where(SetSong.set_id == set_id)).all()
    return {r.song_id: r.order for r in rows}

@pytest.fixture
def factory():
    """テストデータ作成ヘルパーをまとめて渡す"""
    class Factory:
        song = staticmethod(make_song)
        gig = staticmethod(make_gig)
        set = staticmethod(make_set)
        orders = staticmethod(member_orders)
    return Factory
