import datetime as dt

import pytest
from sqlalchemy.exc import IntegrityError

from brainrot.errors import NotFound, StoreError
from brainrot.models import db, Brainrot, InventorySlot, User
from brainrot.services import inventory as inv
from brainrot.services.users import get_or_create_user
from brainrot.store import Store

from helpers import T0, give, setup_app, slots_of

CATALOG = (("A", "Common"), ("B", "Rare"), ("C", "Epic"), ("D", "Mythic"))


def _ids(*names):
    return [Brainrot.query.filter_by(name=n).one().id for n in names]


def test_get_or_create_normalizes_and_reuses():
    app = setup_app(CATALOG)
    with app.app_context():
        store = Store()
        u1 = get_or_create_user(store, "  Alice ")
        u2 = get_or_create_user(store, "@ALICE")
        store.commit()
        assert u1.id == u2.id
        assert u1.username == "alice"
        assert u1.last_farmed_at is None and u1.last_stole_at is None
        assert User.query.count() == 1


def test_slots_keep_creation_order_and_count_only_permanent():
    app = setup_app(CATALOG)
    with app.app_context():
        store = Store()
        user = get_or_create_user(store, "alice")
        a, b, c = _ids("A", "B", "C")
        inv.add_slot(store, user, c)
        inv.add_slot(store, user, a)
        inv.add_slot(store, user, b, pending=True, now=T0)
        store.commit()
        assert [s.brainrot.name for s in inv.list_slots(store, user)] == ["C", "A"]
        assert inv.count_non_pending(store, user) == 2
        assert inv.get_pending(store, user).brainrot.name == "B"
        assert inv.slot_at(store, user, 1).brainrot.name == "C"
        assert inv.slot_at(store, user, 3) is None
        assert inv.slot_at(store, user, 0) is None


def test_new_pending_overwrites_previous():
    app = setup_app(CATALOG)
    with app.app_context():
        store = Store()
        user = get_or_create_user(store, "alice")
        a, b = _ids("A", "B")
        inv.add_slot(store, user, a, pending=True, now=T0)
        inv.add_slot(store, user, b, pending=True, now=T0 + dt.timedelta(minutes=1))
        store.commit()
        pending = InventorySlot.query.filter_by(user_id=user.id, is_pending=True).all()
        assert [p.brainrot.name for p in pending] == ["B"]


def test_store_rejects_second_pending_row():
    app = setup_app(CATALOG)
    with app.app_context():
        uid = give("alice", [], pending_name="A")
        a = _ids("A")[0]
        db.session.add(InventorySlot(user_id=uid, brainrot_id=a, is_pending=True, pending_since=T0))
        with pytest.raises(IntegrityError):
            db.session.commit()
        db.session.rollback()


def test_store_item_goes_pending_at_capacity():
    app = setup_app(CATALOG)
    with app.app_context():
        give("alice", ["A", "B"])
        store = Store()
        user = get_or_create_user(store, "alice")
        slot = inv.store_item(store, user, _ids("C")[0], capacity=2, now=T0)
        store.commit()
        assert slot.is_pending and slot.pending_since == T0
        assert slots_of("alice") == ["A", "B"]


def test_promote_pending_swaps_designated_slot():
    app = setup_app(CATALOG)
    with app.app_context():
        give("alice", ["A", "B"], pending_name="C")
        store = Store()
        user = get_or_create_user(store, "alice")
        old = inv.slot_at(store, user, 1)
        inv.promote_pending(store, user, old.id)
        store.commit()
        assert slots_of("alice") == ["B", "C"]
        assert slots_of("alice", pending=True) == []
        promoted = InventorySlot.query.filter_by(user_id=user.id).order_by(InventorySlot.id.desc()).first()
        assert promoted.pending_since is None


def test_sweep_only_touches_expired_pending_of_the_given_user():
    app = setup_app(CATALOG)
    with app.app_context():
        give("alice", ["A"], pending_name="B", pending_since=T0)
        give("bob", [], pending_name="C", pending_since=T0)
        store = Store()
        alice = get_or_create_user(store, "alice")

        assert inv.sweep_expired_pending(store, T0 + dt.timedelta(minutes=9), 600, user=alice) == 0
        assert inv.sweep_expired_pending(store, T0 + dt.timedelta(minutes=11), 600, user=alice) == 1
        store.commit()
        assert slots_of("alice") == ["A"]
        assert slots_of("alice", pending=True) == []
        assert slots_of("bob", pending=True) == ["C"]

        assert inv.sweep_expired_pending(store, T0 + dt.timedelta(minutes=11), 600) == 1
        store.commit()
        assert slots_of("bob", pending=True) == []


def test_remove_slot():
    app = setup_app(CATALOG)
    with app.app_context():
        give("alice", ["A", "B"])
        store = Store()
        user = get_or_create_user(store, "alice")
        assert inv.remove_slot(store, inv.slot_at(store, user, 2).id) == 1
        store.commit()
        assert slots_of("alice") == ["A"]


def test_store_find_raises_not_found_and_wraps_failures():
    app = setup_app(CATALOG)
    with app.app_context():
        store = Store()
        with pytest.raises(NotFound):
            store.find(User, username="nobody")
        with pytest.raises(StoreError):
            store.insert(Brainrot, name="A", rarity="Common")  # duplicate name
        assert Brainrot.query.count() == 4
