"""Inventory store: permanent slots in creation order plus one pending slot."""
from __future__ import annotations

import datetime as dt
import logging
from typing import List, Optional

from ..models import InventorySlot, User
from ..store import Store

logger = logging.getLogger(__name__)


def list_slots(store: Store, user: User) -> List[InventorySlot]:
    """Permanent slots, oldest first."""
    return store.query(
        InventorySlot,
        user_id=user.id,
        is_pending=False,
        order_by=[InventorySlot.id],
    )


def count_non_pending(store: Store, user: User) -> int:
    return store.count(InventorySlot, user_id=user.id, is_pending=False)


def get_pending(store: Store, user: User) -> Optional[InventorySlot]:
    return store.find_optional(InventorySlot, user_id=user.id, is_pending=True)


def slot_at(store: Store, user: User, index: int) -> Optional[InventorySlot]:
    """Resolve a 1-based display index to the user's permanent slot."""
    if index < 1:
        return None
    slots = list_slots(store, user)
    if index > len(slots):
        return None
    return slots[index - 1]


def add_slot(store: Store, user: User, brainrot_id: int, pending: bool = False,
             now: dt.datetime | None = None) -> InventorySlot:
    if pending:
        # only one pending slot per user: a new overflow replaces the old one
        store.delete(InventorySlot, user_id=user.id, is_pending=True)
        return store.insert(
            InventorySlot,
            user_id=user.id,
            brainrot_id=brainrot_id,
            is_pending=True,
            pending_since=now,
        )
    return store.insert(InventorySlot, user_id=user.id, brainrot_id=brainrot_id, is_pending=False)


def store_item(store: Store, user: User, brainrot_id: int, capacity: int,
               now: dt.datetime) -> InventorySlot:
    """Add as permanent while under capacity, otherwise as the pending slot."""
    pending = count_non_pending(store, user) >= capacity
    return add_slot(store, user, brainrot_id, pending=pending, now=now)


def remove_slot(store: Store, slot_id: int) -> int:
    return store.delete(InventorySlot, id=slot_id)


def promote_pending(store: Store, user: User, old_slot_id: int) -> InventorySlot:
    """Swap: drop ``old_slot_id`` and make the pending slot permanent."""
    pending = get_pending(store, user)
    store.delete(InventorySlot, id=old_slot_id, user_id=user.id, is_pending=False)
    store.update(
        InventorySlot,
        {"is_pending": False, "pending_since": None},
        id=pending.id,
    )
    return pending


def sweep_expired_pending(store: Store, now: dt.datetime, timeout: int,
                          user: User | None = None) -> int:
    """Delete pending slots older than ``timeout`` seconds (one user or all)."""
    cutoff = now - dt.timedelta(seconds=timeout)
    filters = {"is_pending": True}
    if user is not None:
        filters["user_id"] = user.id
    removed = store.delete(InventorySlot, InventorySlot.pending_since <= cutoff, **filters)
    if removed:
        logger.info("swept %d expired pending slot(s)%s", removed,
                    f" for {user.username}" if user is not None else "")
    return removed
