"""Action verbs, their aliases and the handler registry."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from ..config import GameRules
from ..models import User
from ..store import Store


class Action(str, Enum):
    FARM = "farmear"
    INVENTORY = "inventario"
    STEAL = "robar"
    DISCARD = "descartar"
    REPLACE = "remplazo"
    HELP = "help"


ALIASES: Dict[str, Action] = {
    "farmear": Action.FARM,
    "farm": Action.FARM,
    "inventario": Action.INVENTORY,
    "inventory": Action.INVENTORY,
    "inv": Action.INVENTORY,
    "robar": Action.STEAL,
    "steal": Action.STEAL,
    "descartar": Action.DISCARD,
    "discard": Action.DISCARD,
    "remplazo": Action.REPLACE,
    "reemplazo": Action.REPLACE,
    "replace": Action.REPLACE,
    "help": Action.HELP,
    "ayuda": Action.HELP,
}


def parse_action(verb: str | None) -> Optional[Action]:
    """Map a chat verb to an :class:`Action`; ``None`` when unknown."""
    return ALIASES.get((verb or "").strip().lower())


@dataclass
class ActionContext:
    store: Store
    user: User
    display_name: str
    target: Optional[str]
    now: dt.datetime
    rules: GameRules
    rng: Any
    # steal only: normalized victim chosen before locking
    victim_name: Optional[str] = None


ActionFn = Callable[[ActionContext], str]
# (store, actor, target, rng) -> extra username to lock, or None
ParticipantsFn = Callable[[Store, str, Optional[str], Any], Optional[str]]


@dataclass(frozen=True)
class Handler:
    fn: ActionFn
    needs_user: bool = True
    participants: Optional[ParticipantsFn] = None


_REGISTRY: Dict[Action, Handler] = {}


def action(verb: Action, *, needs_user: bool = True, participants: ParticipantsFn | None = None):
    """Decorator to register the handler of an action verb."""
    def wrap(fn: ActionFn) -> ActionFn:
        _REGISTRY[verb] = Handler(fn=fn, needs_user=needs_user, participants=participants)
        return fn
    return wrap


def get_action(verb: Action) -> Handler | None:
    return _REGISTRY.get(verb)


def list_actions() -> list[str]:
    return sorted(v.value for v in _REGISTRY)
