"""Catalog reads and the rarity-weighted picker."""
from __future__ import annotations

import bisect
import itertools
import logging
import random
from typing import Iterable, List, Sequence

from ..config import rarity_weight
from ..errors import EmptyCatalogError
from ..models import Brainrot
from ..store import Store

logger = logging.getLogger(__name__)


def list_catalog(store: Store) -> List[Brainrot]:
    return store.query(Brainrot, order_by=[Brainrot.id])


def pick_weighted(items: Sequence[Brainrot], rng=random) -> Brainrot:
    """Draw one item with probability proportional to its rarity weight.

    Same distribution as replicating every item ``weight(rarity)`` times and
    choosing uniformly, without materialising the pool.
    """
    if not items:
        raise EmptyCatalogError()
    cumulative = list(itertools.accumulate(rarity_weight(i.rarity) for i in items))
    pick = rng.random() * cumulative[-1]
    idx = bisect.bisect_right(cumulative, pick)
    return items[min(idx, len(items) - 1)]


def draw_random_item(store: Store, rng=random) -> Brainrot:
    item = pick_weighted(list_catalog(store), rng)
    logger.debug("drew %s (%s)", item.name, item.rarity)
    return item


def seed_catalog(store: Store, entries: Iterable[dict]) -> int:
    """Insert catalog entries missing by name. Returns how many were added."""
    known = {b.name for b in list_catalog(store)}
    added = 0
    for entry in entries:
        if entry["name"] in known:
            continue
        store.insert(Brainrot, name=entry["name"], rarity=entry.get("rarity", "Common"))
        known.add(entry["name"])
        added += 1
    return added
