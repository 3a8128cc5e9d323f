from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

def get_utc_now() -> datetime:
    """Get current UTC datetime"""
    return datetime.now(timezone.utc)

def new_success(data: Any = None, message: str = "") -> Dict[str, Any]:
    """
    Build the success envelope shared by every endpoint

    Args:
        data: Payload; omitted from the envelope when None
        message: Human readable summary

    Returns:
        Dict with status, message and data keys
    """
    body: Dict[str, Any] = {"status": True}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = jsonable_encoder(data)
    return body

def new_error(error: str, code: Optional[int] = None) -> Dict[str, Any]:
    """Build the failure envelope"""
    body: Dict[str, Any] = {"status": False, "error": error}
    if code:
        body["code"] = code
    return body

def success_response(data: Any = None, message: str = "", status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=new_success(data, message))

def escape_like(value: str, escape: str = "\\") -> str:
    """
    Escape LIKE wildcards so user input only matches literally

    Args:
        value: Raw search text
        escape: Escape character passed along to the LIKE clause

    Returns:
        Text safe to wrap in '%...%'
    """
    return (
        value.replace(escape, escape + escape)
        .replace("%", escape + "%")
        .replace("_", escape + "_")
    )
