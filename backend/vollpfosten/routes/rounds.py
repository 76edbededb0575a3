from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from ..game import service
from ..state import get_store
from ..utils.payload import get_payload, parse_int

bp = Blueprint("rounds", __name__)


def _parse_bool(raw: Any) -> bool | None:
    if raw is None or isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {raw!r}")


@bp.get("/round")
def get_round():
    return jsonify(service.round_public_state(get_store().read_round_state()))


@bp.post("/round")
def new_round():
    state = service.enter_round(get_store())
    return jsonify(service.round_public_state(state))


@bp.post("/round/roll")
def roll():
    state = service.roll_letter(get_store())
    return jsonify(service.round_public_state(state))


@bp.post("/round/timer")
def timer():
    data = get_payload(request)
    if data is None:
        return jsonify({"error": "invalid_payload"}), 400

    try:
        timeout = parse_int(data.get("timeout"))
        success = _parse_bool(data.get("success"))
    except (TypeError, ValueError):
        return jsonify({"error": "invalid_payload"}), 400

    category = data.get("category")
    if category is not None:
        category = str(category)

    state = service.start_timer(
        get_store(),
        timeout=timeout if timeout is not None else current_app.config["ROUND_DURATION_SEC"],
        success=success,
        category=category,
        card_size=current_app.config["CARD_SIZE"],
    )
    return jsonify(service.round_public_state(state))


@bp.post("/round/result")
def result():
    return jsonify(service.result_public_state(service.show_result(get_store())))
