from sqlmodel import create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine
import os
import sqlite3
from config import settings
from utils.logger import get_logger

logger = get_logger(__name__)

# DB接続先設定
DB_PATH = settings.DB_PATH
DATABASE_URL = settings.DATABASE_URL

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
ALEMBIC_INI_PATH = os.path.join(BASE_DIR, "alembic.ini")
ALEMBIC_SCRIPT_LOCATION = os.path.join(BASE_DIR, "alembic")

def _build_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # FastAPI の同期エンドポイントはスレッドプールで実行されるため
        connect_args["check_same_thread"] = False
        if DB_PATH and url == f"sqlite:///{DB_PATH}":
            os.makedirs(os.path.dirname(DB_PATH), exist_ok=True)
    return create_engine(url, echo=settings.SQL_ECHO, connect_args=connect_args)

@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite は接続ごとに外部キー制約を有効化する必要がある
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

engine = _build_engine(DATABASE_URL)

def build_alembic_config():
    from alembic.config import Config

    alembic_cfg = Config(ALEMBIC_INI_PATH)
    alembic_cfg.set_main_option("script_location", ALEMBIC_SCRIPT_LOCATION)
    return alembic_cfg

def run_migrations(conn_engine: Engine):
    """
    Alembic で head までマイグレーションを適用する。
    env.py が新しいエンジンを作らないよう、コネクションを注入して共有する。
    """
    from alembic import command

    alembic_cfg = build_alembic_config()
    with conn_engine.begin() as connection:
        alembic_cfg.attributes["connection"] = connection
        command.upgrade(alembic_cfg, "head")

def init_db():
    """
    アプリケーション起動時のDB初期化フロー。
    1. マイグレーション適用 2. サンプル曲の投入
    """
    from utils.seeding import seed_initial_data

    try:
        logger.info(f"Initializing database: {DATABASE_URL}")
        run_migrations(engine)

        if settings.SEED_SAMPLE_SONGS:
            with Session(engine) as session:
                seed_initial_data(session)
    except Exception as e:
        logger.error(f"Error during database initialization: {e}")
        raise

def close_db():
    """
    データベース接続を終了する。
    main.py の lifespan イベントから呼び出されます。
    """
    engine.dispose()

def get_session():
    with Session(engine) as session:
        yield session
