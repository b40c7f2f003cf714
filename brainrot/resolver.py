"""Action resolver.

Turns ``(username, verb, target)`` into the chat text of the outcome. Every
state-changing action runs the same prologue under the per-user lock(s):
get-or-create the user, sweep the user's expired pending slot, then dispatch
to the registered handler. One action is one store transaction.
"""
from __future__ import annotations

import logging
import random

from flask import current_app

from .actions import Action, ActionContext, get_action, parse_action
from .config import GameRules, rules_from_config
from .errors import BadRequest, GameRuleViolation
from .models import utcnow
from .services import locks
from .services import inventory as inv
from .services.users import get_or_create_user, normalize
from .store import Store

logger = logging.getLogger(__name__)


def resolve(username: str | None, verb: str | None, target: str | None = None, *,
            now=None, rng=None, rules: GameRules | None = None,
            store: Store | None = None) -> str:
    actor = normalize(username)
    if not actor:
        raise BadRequest("E_NO_USER", "Falta el nombre de usuario.")
    if not (verb or "").strip():
        raise BadRequest("E_NO_ACTION", "Falta la acción.")

    verb_enum = parse_action(verb)
    if verb_enum is None:
        logger.warning("unknown verb %r from %s", verb, actor)
        verb_enum = Action.HELP
    handler = get_action(verb_enum)

    store = store or Store()
    rules = rules or rules_from_config(current_app.config)
    now = now or utcnow()
    rng = rng or random
    target = (target or "").strip() or None

    if not handler.needs_user:
        return handler.fn(None)

    extra = handler.participants(store, actor, target, rng) if handler.participants else None

    with locks.hold(actor, extra):
        try:
            user = get_or_create_user(store, actor)
            inv.sweep_expired_pending(store, now, rules.replace_timeout, user=user)
            ctx = ActionContext(
                store=store,
                user=user,
                display_name=(username or "").strip().lstrip("@"),
                target=target,
                now=now,
                rules=rules,
                rng=rng,
                victim_name=extra,
            )
            try:
                text = handler.fn(ctx)
            except GameRuleViolation as e:
                logger.debug("%s %s rejected: %s", actor, verb_enum.value, e.code)
                text = e.message
            store.commit()
        except Exception:
            store.rollback()
            raise
    return text
