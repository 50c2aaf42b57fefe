"""
Response writer producing the ``{code, status, data}`` envelope.
"""
from http import HTTPStatus
from typing import Any, Mapping, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from category_api.schemas.common import WebResponse


def status_text(code: int) -> str:
    """Upper-cased reason phrase, e.g. 404 -> "NOT FOUND"."""
    try:
        return HTTPStatus(code).phrase.upper()
    except ValueError:
        return "UNKNOWN"


def web_response(
    code: int,
    data: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Wrap ``data`` in the envelope and serialize it with the matching status code."""
    envelope = WebResponse(code=code, status=status_text(code), data=data)
    return JSONResponse(status_code=code, content=jsonable_encoder(envelope), headers=headers)
