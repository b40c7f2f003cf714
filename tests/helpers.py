"""Shared builders for the test-suite."""
import datetime as dt

from brainrot import create_app
from brainrot.models import db, Brainrot, InventorySlot, User

T0 = dt.datetime(2026, 1, 1, 12, 0, 0)


class FixedRng:
    """Stand-in for ``random``: fixed roll, picks by index."""

    def __init__(self, roll=0.0, pick=0):
        self.roll = roll
        self.pick = pick

    def random(self):
        return self.roll

    def choice(self, seq):
        return seq[self.pick]


def setup_app(catalog=(("Tung Tung Tung Sahur", "Common"),), uri="sqlite://"):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": uri,
        "AUTO_CREATE_TABLES": True,
    })
    with app.app_context():
        db.drop_all(); db.create_all()
        db.session.add_all([Brainrot(name=n, rarity=r) for n, r in catalog])
        db.session.commit()
    return app


def give(username, names, pending_name=None, pending_since=T0):
    """Create ``username`` owning ``names`` (catalog names) as permanent slots."""
    user = User.query.filter_by(username=username).first()
    if user is None:
        user = User(username=username)
        db.session.add(user)
        db.session.flush()
    for name in names:
        item = Brainrot.query.filter_by(name=name).one()
        db.session.add(InventorySlot(user_id=user.id, brainrot_id=item.id))
        db.session.flush()
    if pending_name:
        item = Brainrot.query.filter_by(name=pending_name).one()
        db.session.add(InventorySlot(user_id=user.id, brainrot_id=item.id,
                                     is_pending=True, pending_since=pending_since))
    db.session.commit()
    return user.id


def slots_of(username, pending=False):
    user = User.query.filter_by(username=username).first()
    if user is None:
        return []
    rows = (
        InventorySlot.query.filter_by(user_id=user.id, is_pending=pending)
        .order_by(InventorySlot.id)
        .all()
    )
    return [r.brainrot.name for r in rows]
