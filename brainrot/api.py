"""Brainrot HTTP API (Blueprint).

- ``POST /brainrot`` and ``GET /brainrot/<username>/<action>[/<target>]``
  answer every game outcome with 200 plain text for the chat bot.
- ``/inventory``, ``/farm`` and ``/steal`` are the older single-purpose routes.
- 400 on a missing username/action, 500 JSON on store failures.
"""
from __future__ import annotations

import logging

from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import rarity_weight
from .errors import BadRequest, StoreError
from .resolver import resolve
from .services import catalog, idempotency
from .services.users import normalize
from .store import Store

logger = logging.getLogger(__name__)

bp = Blueprint("brainrot_api", __name__)


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def _split_args(args) -> list[str]:
    if isinstance(args, str):
        return args.split()
    if isinstance(args, (list, tuple)):
        return [str(a) for a in args if a is not None and str(a).strip()]
    return []


def _play(username: str | None, verb: str | None, target: str | None = None) -> Response:
    text = resolve(username, verb, target)
    socketio = current_app.extensions.get("socketio")
    if socketio:
        socketio.emit("brainrot", {"username": normalize(username), "action": verb, "text": text})
    return _text(text)


@bp.errorhandler(BadRequest)
def _bad_request(e: BadRequest):
    return _text(e.message, 400)


@bp.errorhandler(StoreError)
def _store_error(e: StoreError):
    logger.exception("store failure: %s", e.message)
    return jsonify({"message": "Error en el servidor", "error": e.message}), 500


@bp.errorhandler(Exception)
def _internal_error(e: Exception):
    if isinstance(e, HTTPException):
        return e
    logger.exception("unhandled error")
    return jsonify({"message": "Error en el servidor", "error": str(e)}), 500


@bp.post("/brainrot")
def play_post():
    data = request.get_json(force=True, silent=True) or {}
    if not isinstance(data, dict):
        data = {}
    username = data.get("username")
    args = _split_args(data.get("args"))
    verb = args[0] if args else data.get("action")
    target = args[1] if len(args) > 1 else data.get("target")
    username, verb, target = (None if v is None else str(v) for v in (username, verb, target))

    request_id = data.get("request_id")
    if request_id and normalize(username):
        prior = idempotency.lookup(normalize(username), str(request_id))
        if prior:
            return _text(prior["text"])

    resp = _play(username, verb, target)
    if request_id and normalize(username):
        idempotency.persist(normalize(username), str(request_id), verb, target, resp.get_data(as_text=True))
    return resp


@bp.get("/brainrot/<username>/<action>")
@bp.get("/brainrot/<username>/<action>/<target>")
def play_get(username: str, action: str, target: str | None = None):
    return _play(username, action, target)


@bp.get("/inventory/<username>")
def legacy_inventory(username: str):
    return _play(username, "inventario")


@bp.get("/farm/<username>")
def legacy_farm(username: str):
    return _play(username, "farmear")


@bp.get("/steal/<thief>/<victim>")
def legacy_steal(thief: str, victim: str):
    return _play(thief, "robar", victim)


@bp.get("/brainrots")
def list_brainrots():
    items = catalog.list_catalog(Store())
    return jsonify([
        {"id": b.id, "name": b.name, "rarity": b.rarity, "weight": rarity_weight(b.rarity)}
        for b in items
    ])
