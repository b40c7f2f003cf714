import random
from types import SimpleNamespace

import pytest

from brainrot.config import rarity_weight
from brainrot.errors import EmptyCatalogError
from brainrot.services.catalog import draw_random_item, pick_weighted, seed_catalog
from brainrot.store import Store

from helpers import FixedRng, setup_app


def _item(name, rarity):
    return SimpleNamespace(name=name, rarity=rarity)


def test_rarity_weights():
    assert rarity_weight("Common") == 15
    assert rarity_weight("rare") == 10
    assert rarity_weight("EPIC") == 7
    assert rarity_weight("Legendary") == 4
    assert rarity_weight("Mythic") == 2
    assert rarity_weight("Brainrot God") == 1
    assert rarity_weight(None) == 1


def test_common_vs_legendary_converges_to_15_to_4():
    items = [_item("c", "Common"), _item("l", "Legendary")]
    rng = random.Random(1234)
    counts = {"c": 0, "l": 0}
    for _ in range(19000):
        counts[pick_weighted(items, rng).name] += 1
    ratio = counts["c"] / counts["l"]
    assert 3.4 < ratio < 4.1


def test_pick_uses_cumulative_bands():
    items = [_item("c", "Common"), _item("l", "Legendary")]  # bands [0,15) [15,19)
    assert pick_weighted(items, FixedRng(roll=0.0)).name == "c"
    assert pick_weighted(items, FixedRng(roll=14.9 / 19)).name == "c"
    assert pick_weighted(items, FixedRng(roll=15.1 / 19)).name == "l"
    assert pick_weighted(items, FixedRng(roll=0.9999)).name == "l"


def test_empty_catalog_raises():
    with pytest.raises(EmptyCatalogError):
        pick_weighted([], FixedRng())


def test_draw_and_seed_through_store():
    app = setup_app(catalog=())
    with app.app_context():
        store = Store()
        with pytest.raises(EmptyCatalogError):
            draw_random_item(store, FixedRng())
        added = seed_catalog(store, [
            {"name": "Tralalero Tralala", "rarity": "Common"},
            {"name": "Frigo Camelo", "rarity": "Legendary"},
        ])
        store.commit()
        assert added == 2
        assert seed_catalog(store, [{"name": "Frigo Camelo", "rarity": "Legendary"}]) == 0
        assert draw_random_item(store, FixedRng(roll=0.0)).name == "Tralalero Tralala"
