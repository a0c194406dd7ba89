import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
import platformdirs

APP_NAME = "Setlist"
APP_AUTHOR = "SetlistDev"

class Settings(BaseSettings):
    # App Info
    APP_NAME: str = APP_NAME
    APP_AUTHOR: str = APP_AUTHOR

    # Paths
    # デフォルトは platformdirs を使用するが、環境変数 DB_PATH があればそれを優先する
    USER_DATA_DIR: str = Field(default_factory=lambda: platformdirs.user_data_dir(APP_NAME, APP_AUTHOR))
    DB_PATH: str | None = None
    DATABASE_URL: str | None = None
    SQL_ECHO: bool = False

    # Network
    SETLIST_PORT: int = 5000
    FRONTEND_PORT: int = 4200

    # Pagination
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # Seed
    SEED_SAMPLE_SONGS: bool = True

    # Logging
    SETLIST_LOG_DIR: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def model_post_init(self, __context):
        # DB_PATHが未設定ならデフォルト値を設定
        if not self.DB_PATH:
            self.DB_PATH = os.path.join(self.USER_DATA_DIR, "setlist.sqlite3")

        if not self.DATABASE_URL:
            self.DATABASE_URL = f"sqlite:///{self.DB_PATH}"

        # ログディレクトリ
        if not self.SETLIST_LOG_DIR:
            self.SETLIST_LOG_DIR = os.path.join(self.USER_DATA_DIR, "logs")

settings = Settings()
