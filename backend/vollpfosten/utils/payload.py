from __future__ import annotations

from typing import Any, Mapping

from flask import Request


def get_payload(request: Request) -> Mapping[str, Any] | None:
    """JSON object body, or the form for non-JSON requests.

    Returns None for JSON bodies that are not an object.
    """
    data = request.get_json(silent=True)
    if data is None:
        return request.form
    if not isinstance(data, dict):
        return None
    return data


def parse_int(raw: Any) -> int | None:
    """Whole numbers only: ``30`` and ``"30"`` pass, ``30.9`` and ``true`` do not."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise ValueError(f"not an integer: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        return int(raw.strip())
    raise ValueError(f"not an integer: {raw!r}")
