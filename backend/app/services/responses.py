from sqlmodel import Session

from api.schemas.common import ApiResponse
from domain.errors import SetlistError
from utils.logger import get_logger

logger = get_logger(__name__)

def failure_response(session: Session, action: str, error: Exception) -> ApiResponse:
    """
    サービス境界で例外をエラーレスポンスに変換する。
    ドメインエラーはそのステータスで、それ以外は 500 として返す。
    いずれの場合もセッションはロールバックする (部分的な更新を残さない)。
    """
    session.rollback()

    if isinstance(error, SetlistError):
        logger.info(f"Rejected {action}: {error.message}")
        return ApiResponse.fail(error.message, error.status_code)

    logger.error(f"Error {action}: {error}")
    return ApiResponse.fail(f"Error {action}: {error}", 500)
