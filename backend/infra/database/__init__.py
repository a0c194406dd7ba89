# Database module
from .connection import engine, get_session, init_db, close_db, run_migrations, DB_PATH, DATABASE_URL
