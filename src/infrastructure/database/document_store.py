"""SQLAlchemy implementation of the document store.

Every operation runs in its own short session and commits immediately, so
each write is atomic on its own and there is no cross-document transaction.
Timestamps are kept inside document bodies as ``{"__timestamp__": iso}`` so
they read back as ``datetime`` objects.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import ColumnElement, select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import DocumentNotFoundError
from domain.repositories.document_store import (
    DocumentRef,
    DocumentSnapshot,
    FieldFilter,
    Sentinel,
)
from infrastructure.database.models import DocumentModel, utc_now

_TIMESTAMP_KEY = "__timestamp__"


def _encode(value: Any, now: datetime) -> Any:
    if value is Sentinel.SERVER_TIMESTAMP:
        return {_TIMESTAMP_KEY: now.isoformat()}
    if isinstance(value, datetime):
        return {_TIMESTAMP_KEY: value.isoformat()}
    if isinstance(value, dict):
        return {str(k): _encode(v, now) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode(v, now) for v in value]
    return value


def _decode(value: Any) -> Any:
    if isinstance(value, dict):
        if set(value) == {_TIMESTAMP_KEY}:
            return datetime.fromisoformat(value[_TIMESTAMP_KEY])
        return {k: _decode(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_decode(v) for v in value]
    return value


def _field_equals(field_filter: FieldFilter) -> ColumnElement[bool]:
    path = tuple(field_filter.field_path.split("."))
    element = DocumentModel.data[path[0]] if len(path) == 1 else DocumentModel.data[path]
    value = field_filter.value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return element.as_boolean() == value
    if isinstance(value, int):
        return element.as_integer() == value
    if isinstance(value, float):
        return element.as_float() == value
    return element.as_string() == value


class SQLAlchemyDocumentStore:
    """SQLAlchemy implementation of IDocumentStore."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_factory = session_factory
        self._clock = clock

    async def add(self, collection: str, data: dict[str, Any]) -> DocumentSnapshot:
        """Insert a new document under a fresh id."""
        now = self._clock()
        body = _encode(data, now)
        ref = DocumentRef(collection=collection, id=uuid4().hex)

        async with self._session_factory() as session:
            session.add(
                DocumentModel(
                    id=ref.id,
                    collection=collection,
                    data=body,
                    created_at=now,
                    updated_at=now,
                )
            )
            await session.commit()

        return DocumentSnapshot(ref=ref, data=_decode(body))

    async def get(self, ref: DocumentRef) -> DocumentSnapshot | None:
        """Fetch one document by reference."""
        stmt = select(DocumentModel).where(
            DocumentModel.collection == ref.collection,
            DocumentModel.id == ref.id,
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            return self._to_snapshot(model) if model else None

    async def get_all(
        self, collection: str, where: FieldFilter | None = None
    ) -> list[DocumentSnapshot]:
        """Fetch a collection in insertion order, optionally filtered."""
        stmt = select(DocumentModel).where(DocumentModel.collection == collection)
        if where is not None:
            stmt = stmt.where(_field_equals(where))
        stmt = stmt.order_by(DocumentModel.seq)

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_snapshot(model) for model in result.scalars()]

    async def set(self, ref: DocumentRef, data: dict[str, Any]) -> DocumentSnapshot:
        """Replace a document's body; fields absent from ``data`` are dropped."""
        now = self._clock()
        body = _encode(data, now)
        stmt = select(DocumentModel).where(
            DocumentModel.collection == ref.collection,
            DocumentModel.id == ref.id,
        )

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
            if not model:
                raise DocumentNotFoundError(ref.collection, ref.id)

            model.data = body
            model.updated_at = now
            await session.commit()

        return DocumentSnapshot(ref=ref, data=_decode(body))

    async def ping(self) -> None:
        async with self._session_factory() as session:
            await session.execute(text("SELECT 1"))

    def _to_snapshot(self, model: DocumentModel) -> DocumentSnapshot:
        """Convert ORM model to a snapshot."""
        return DocumentSnapshot(
            ref=DocumentRef(collection=model.collection, id=model.id),
            data=_decode(model.data),
        )
