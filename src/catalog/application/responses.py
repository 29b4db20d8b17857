"""Standard JSON response envelopes.

Every API-facing result is wrapped the same way::

    {"success": bool, "code": int, "data" | "errors": ..., "message"?: str,
     "timestamp": ISO-8601, "request_id": "req_..."}

Paginated listings add a ``pagination`` block.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def _with_metadata(response: dict) -> dict:
    response["timestamp"] = datetime.now(timezone.utc).isoformat(timespec="seconds")
    response["request_id"] = f"req_{uuid.uuid4().hex}"
    return response


def success(data: dict | list, message: str = "", code: int = 200) -> dict:
    response: dict = {"success": True, "code": code, "data": data}
    if message:
        response["message"] = message
    return _with_metadata(response)


def error(errors: list[dict], message: str = "", code: int = 400) -> dict:
    response: dict = {"success": False, "code": code, "errors": errors}
    if message:
        response["message"] = message
    return _with_metadata(response)


def paginated(data: list, pagination: dict, message: str = "") -> dict:
    response: dict = {
        "success": True,
        "code": 200,
        "data": data,
        "pagination": pagination,
    }
    if message:
        response["message"] = message
    return _with_metadata(response)


def created(data: dict, message: str = "Created successfully") -> dict:
    return success(data, message, 201)


def updated(data: dict, message: str = "Updated successfully") -> dict:
    return success(data, message, 200)


def deleted(message: str = "Deleted successfully") -> dict:
    return success({}, message, 200)
