"""Document store protocol.

A schema-less store: documents are JSON objects grouped into named
collections. Reads fetch a whole collection, optionally narrowed by a single
equality predicate; writes add a document or overwrite one wholesale.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class Sentinel(Enum):
    """Placeholder values the store resolves at write time."""

    SERVER_TIMESTAMP = "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = Sentinel.SERVER_TIMESTAMP


@dataclass(frozen=True, slots=True)
class DocumentRef:
    """Address of one document."""

    collection: str
    id: str


@dataclass(frozen=True, slots=True)
class DocumentSnapshot:
    """A document body as read from (or written to) the store."""

    ref: DocumentRef
    data: dict[str, Any]

    @property
    def id(self) -> str:
        return self.ref.id


@dataclass(frozen=True, slots=True)
class FieldFilter:
    """Equality predicate on a (possibly dotted) field path."""

    field_path: str
    value: str | int | float | bool


class IDocumentStore(Protocol):
    """Repository interface for the backing document store."""

    async def add(self, collection: str, data: dict[str, Any]) -> DocumentSnapshot:
        """Insert a new document under a store-assigned id."""
        ...

    async def get(self, ref: DocumentRef) -> DocumentSnapshot | None:
        """Fetch a single document by reference."""
        ...

    async def get_all(
        self, collection: str, where: FieldFilter | None = None
    ) -> list[DocumentSnapshot]:
        """Fetch every document of a collection in insertion order."""
        ...

    async def set(self, ref: DocumentRef, data: dict[str, Any]) -> DocumentSnapshot:
        """Replace the whole body of an existing document."""
        ...

    async def ping(self) -> None:
        """Round-trip to the store; raises when it is unreachable."""
        ...
