"""
Response envelope helpers.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def success(data: Any) -> JSONResponse:
    return JSONResponse({"success": True, "data": jsonable_encoder(data, by_alias=True)})


def failure(message: str, status_code: int = 400, **extra: Any) -> JSONResponse:
    body = {"success": False, "message": message}
    body.update(jsonable_encoder(extra))
    return JSONResponse(body, status_code=status_code)
