from typing import Dict, Optional
from fastapi import HTTPException, Response
from fastapi.responses import JSONResponse

from api.schemas.common import ApiResponse

API_PREFIX = "/api/v1"

def envelope_response(result: ApiResponse, status_code: int = 200, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """
    サービスのレスポンスエンベロープをHTTPレスポンスに変換する。
    失敗時はエンベロープの status_code をそのままHTTPステータスにする。
    """
    if not result.is_success:
        return JSONResponse(status_code=result.status_code, content=result.model_dump(mode="json"))
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"), headers=headers)

def found_response(result: ApiResponse, detail: str) -> JSONResponse:
    """単一取得用。成功かつ data が空なら 404"""
    if result.is_success and result.data is None:
        raise HTTPException(status_code=404, detail=detail)
    return envelope_response(result)

def created_response(result: ApiResponse, location_base: str) -> JSONResponse:
    if not result.is_success:
        return envelope_response(result)
    return envelope_response(result, status_code=201, headers={"Location": f"{location_base}/{result.data.id}"})

def no_content_response(result: ApiResponse):
    if not result.is_success:
        return envelope_response(result)
    return Response(status_code=204)
