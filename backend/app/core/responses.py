"""AssetTrack — Result-to-HTTP response mapping."""
from fastapi import status
from fastapi.responses import JSONResponse

from app.schemas.common import Result


def envelope(result: Result) -> dict:
    """JSON body for a result: the full envelope with camelCase keys."""
    return result.model_dump(mode="json", by_alias=True)


def handle_result(result: Result, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Success -> ``status_code`` (200 unless the caller created something), failure -> 400."""
    if result.success:
        return JSONResponse(status_code=status_code, content=envelope(result))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=envelope(result))
