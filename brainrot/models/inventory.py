import sqlalchemy as sa

from .base import db, Model
from .users import utcnow


class InventorySlot(Model):
    """One owned brainrot. ``is_pending`` marks the single overflow slot."""

    __tablename__ = "inventory_slots"
    __table_args__ = (
        db.Index(
            "uq_inventory_slots_one_pending",
            "user_id",
            unique=True,
            sqlite_where=sa.text("is_pending = 1"),
            postgresql_where=sa.text("is_pending"),
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    brainrot_id = db.Column(db.Integer, db.ForeignKey("brainrots.id"), nullable=False)
    is_pending = db.Column(db.Boolean, nullable=False, default=False)
    pending_since = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    brainrot = db.relationship("Brainrot", lazy="joined")

    def __repr__(self) -> str:
        flag = " pending" if self.is_pending else ""
        return f"<InventorySlot {self.id} user={self.user_id} item={self.brainrot_id}{flag}>"
