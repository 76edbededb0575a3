from __future__ import annotations

from flask import Blueprint, jsonify

from ..state import get_ticker

bp = Blueprint("health", __name__)


@bp.get("/health")
def health():
    return jsonify({"ok": True, "ticker": get_ticker().running})
