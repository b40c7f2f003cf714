from .base import db, Model


class Brainrot(Model):
    """Collectible catalog entry. Reference data, never owned directly."""

    __tablename__ = "brainrots"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), unique=True, nullable=False)
    rarity = db.Column(db.String(32), nullable=False, default="Common")  # Common..Mythic, secret tiers

    def __repr__(self) -> str:
        return f"<Brainrot {self.name} ({self.rarity})>"
