from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from ..game import service
from ..game.cards import available_collections
from ..state import get_store
from ..utils.payload import get_payload

bp = Blueprint("categories", __name__)


@bp.get("/collections")
def list_collections():
    return jsonify({"collections": available_collections(current_app.config["CATEGORIES_DIR"])})


@bp.get("/categories")
def get_categories():
    return jsonify({"categories": list(get_store().read_collection())})


@bp.post("/categories")
def add_categories():
    data = get_payload(request)
    if data is None:
        return jsonify({"error": "invalid_payload"}), 400
    name = str(data.get("collectionName", "")).strip()
    if not name:
        return jsonify({"error": "invalid_payload"}), 400

    categories = service.add_collection(get_store(), name, current_app.config["CATEGORIES_DIR"])
    return jsonify({"categories": list(categories)})


@bp.delete("/categories")
def clear_categories():
    service.clear_session(get_store())
    return jsonify({"categories": []})
