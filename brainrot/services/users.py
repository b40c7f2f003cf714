"""User directory: lazy get-or-create keyed by the lower-cased username."""
from __future__ import annotations

import logging
from typing import List

import sqlalchemy as sa

from ..models import InventorySlot, User
from ..store import Store

logger = logging.getLogger(__name__)


def normalize(name: str | None) -> str:
    return (name or "").strip().lstrip("@").lower()


def get_or_create_user(store: Store, name: str) -> User:
    """Fetch the user for ``name``, creating an empty record on first sight."""
    username = normalize(name)
    user = store.find_optional(User, username=username)
    if user is None:
        user = store.insert(User, username=username)
        logger.info("created user %s", username)
    return user


def eligible_victims(store: Store, exclude: str) -> List[User]:
    """Users other than ``exclude`` owning at least one permanent slot."""
    owners = sa.select(InventorySlot.user_id).where(InventorySlot.is_pending.is_(False))
    return store.query(
        User,
        User.id.in_(owners),
        User.username != normalize(exclude),
        order_by=[User.id],
    )
