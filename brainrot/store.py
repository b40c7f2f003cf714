"""Data-store collaborator.

Every read and write the game performs goes through :class:`Store`, a thin
CRUD facade over the Flask-SQLAlchemy session. SQL runs immediately (no
deferred unit-of-work ordering) so callers can rely on statement order, and
any ``SQLAlchemyError`` surfaces as :class:`StoreError` after the session has
been rolled back. Committing is left to the caller, which owns the
transaction boundary of one action.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from .errors import NotFound, StoreError
from .models import db

logger = logging.getLogger(__name__)


class Store:
    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def _fail(self, op: str, model, exc: Exception) -> StoreError:
        self.session.rollback()
        table = getattr(model, "__tablename__", str(model))
        logger.error("store %s on %s failed: %s", op, table, exc)
        return StoreError("E_STORE", f"{op} {table}: {exc}")

    def find(self, model, *criteria, **filters):
        """Return exactly one record or raise :class:`NotFound`."""
        row = self.find_optional(model, *criteria, **filters)
        if row is None:
            raise NotFound("E_NOT_FOUND", f"{model.__tablename__} not found")
        return row

    def find_optional(self, model, *criteria, **filters) -> Optional[Any]:
        try:
            return self.session.query(model).filter(*criteria).filter_by(**filters).first()
        except SQLAlchemyError as e:
            raise self._fail("find", model, e) from e

    def insert(self, model, **values):
        row = model(**values)
        try:
            self.session.add(row)
            self.session.flush()
        except SQLAlchemyError as e:
            raise self._fail("insert", model, e) from e
        return row

    def update(self, model, patch: dict, *criteria, **filters) -> int:
        try:
            return (
                self.session.query(model)
                .filter(*criteria)
                .filter_by(**filters)
                .update(patch, synchronize_session="fetch")
            )
        except SQLAlchemyError as e:
            raise self._fail("update", model, e) from e

    def delete(self, model, *criteria, **filters) -> int:
        try:
            return (
                self.session.query(model)
                .filter(*criteria)
                .filter_by(**filters)
                .delete(synchronize_session="fetch")
            )
        except SQLAlchemyError as e:
            raise self._fail("delete", model, e) from e

    def query(self, model, *criteria, order_by: Iterable | None = None, **filters) -> List[Any]:
        try:
            q = self.session.query(model).filter(*criteria).filter_by(**filters)
            if order_by is not None:
                q = q.order_by(*order_by)
            return q.all()
        except SQLAlchemyError as e:
            raise self._fail("query", model, e) from e

    def count(self, model, *criteria, **filters) -> int:
        try:
            return self.session.query(model).filter(*criteria).filter_by(**filters).count()
        except SQLAlchemyError as e:
            raise self._fail("count", model, e) from e

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            raise self._fail("commit", "session", e) from e

    def rollback(self) -> None:
        self.session.rollback()
