import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "setlist.log"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

def _file_handler(log_dir: str, formatter: logging.Formatter):
    """ログディレクトリに 10MB x 5世代 でローテーションするハンドラを作る。作れなければ None"""
    try:
        os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE_NAME),
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
    except OSError as e:
        # 権限エラーなどでファイル作成できない場合はコンソールのみ
        print(f"Failed to set up file logging: {e}", file=sys.stderr)
        return None
    handler.setFormatter(formatter)
    handler.setLevel(logging.INFO)
    return handler

def get_logger(name: str, log_dir: str | None = None):
    """
    ファイル出力とコンソール出力を併用するロガーを取得する。
    出力先は settings.SETLIST_LOG_DIR (既定は <USER_DATA_DIR>/logs)。
    """
    logger = logging.getLogger(name)

    # ハンドラが重複して追加されないようにチェック
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = _file_handler(log_dir or settings.SETLIST_LOG_DIR, formatter)
    if file_handler:
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    return logger
