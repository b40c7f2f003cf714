import datetime as dt

from .base import db, Model


def utcnow() -> dt.datetime:
    """Naive UTC timestamp, matching what the DateTime columns round-trip."""
    return dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)


class User(Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    # always stored lower-cased
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    last_farmed_at = db.Column(db.DateTime)
    last_stole_at = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<User {self.username}>"
