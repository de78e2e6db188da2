from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel


def _serialize(obj: Any) -> Any:
    """Convert *obj* to a JSON-friendly structure.

    * :class:`pydantic.BaseModel` instances are dumped by alias, so history
      records use their storage keys (``from`` / ``to``).
    * Lists and tuples are recursed element-wise; dicts value-wise.
    * Everything else is returned as-is (``json.dumps`` handles the rest via
      *default=str*).
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {key: _serialize(value) for key, value in obj.items()}
    return obj


def _envelope(command: str, ok: bool, **body: Any) -> str:
    envelope: dict[str, Any] = {
        "ok": ok,
        "command": command,
        **body,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return json.dumps(envelope, indent=2, default=str, ensure_ascii=False)


def format_json_response(*, data: Any, command: str) -> str:
    """Return a JSON envelope for a successful response.

    The envelope has the shape::

        {
          "ok": true,
          "command": "<command>",
          "data": <serialised payload>,
          "timestamp": "<ISO-8601 UTC>"
        }
    """
    return _envelope(command, True, data=_serialize(data))


def format_json_error(
    *,
    code: str,
    message: str,
    command: str,
    **extra: Any,
) -> str:
    """Return a JSON envelope for an error response.

    ``error`` carries ``code``, ``message`` and any *extra* fields.
    """
    error_body: dict[str, Any] = {"code": code, "message": message, **_serialize(extra)}
    return _envelope(command, False, error=error_body)
