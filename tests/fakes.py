"""In-memory Firestore double with the surface of FirestoreRESTClient.

Documents live in a dict keyed by path. Supports the calls the repositories
make: collection/document refs, create/set(merge)/update/get,
where/order_by/limit/stream queries and atomic write batches with
Increment and ArrayUnion transforms.
"""

from __future__ import annotations

import copy
import operator
from collections.abc import AsyncIterator
from typing import Any

from app.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    DocumentMissingError,
    DocumentSnapshot,
)
from app.infrastructure.firebase._rest_encoding import ArrayUnion, Increment
from app.shared.utils import generate_cuid

_OPS = {
    "==": operator.eq,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "in": lambda a, b: a in b,
}


def _apply(current: dict[str, Any], data: dict[str, Any]) -> dict[str, Any]:
    out = copy.deepcopy(current)
    for key, value in data.items():
        if isinstance(value, Increment):
            out[key] = (out.get(key) or 0) + value.amount
        elif isinstance(value, ArrayUnion):
            items = list(out.get(key) or [])
            for element in value.values:
                if element not in items:
                    items.append(copy.deepcopy(element))
            out[key] = items
        else:
            out[key] = copy.deepcopy(value)
    return out


class FakeFirestore:
    def __init__(self) -> None:
        self.docs: dict[str, dict[str, Any]] = {}
        self.commits = 0

    def collection(self, collection_id: str) -> FakeCollection:
        return FakeCollection(self, collection_id)

    def batch(self) -> FakeBatch:
        return FakeBatch(self)

    async def aclose(self) -> None:
        return None


class FakeDocument:
    def __init__(self, store: FakeFirestore, path: str) -> None:
        self._store = store
        self.path = path

    @property
    def id(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    def collection(self, collection_id: str) -> FakeCollection:
        return FakeCollection(self._store, f"{self.path}/{collection_id}")

    async def set(self, data: dict[str, Any], merge: bool = False) -> None:
        base = self._store.docs.get(self.path, {}) if merge else {}
        self._store.docs[self.path] = _apply(base, data)

    async def update(self, data: dict[str, Any]) -> None:
        if self.path not in self._store.docs:
            raise DocumentMissingError(self.path)
        self._store.docs[self.path] = _apply(self._store.docs[self.path], data)

    async def get(self) -> DocumentSnapshot | None:
        data = self._store.docs.get(self.path)
        if data is None:
            return None
        return DocumentSnapshot(self.id, copy.deepcopy(data))


class FakeQuery:
    def __init__(self, store: FakeFirestore, path: str) -> None:
        self._store = store
        self._path = path
        self._filters: list[tuple[str, str, Any]] = []
        self._orders: list[tuple[str, str]] = []
        self._limit: int | None = None

    def where(self, field: str, op: str, value: Any) -> FakeQuery:
        self._filters.append((field, op, value))
        return self

    def order_by(self, field: str, direction: str = "ASCENDING") -> FakeQuery:
        self._orders.append((field, direction.upper()))
        return self

    def limit(self, n: int | None) -> FakeQuery:
        self._limit = n
        return self

    def _matches(self, data: dict[str, Any]) -> bool:
        for field, op, value in self._filters:
            if field not in data or (data[field] is None and op != "=="):
                return False
            if not _OPS[op](data[field], value):
                return False
        return True

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        prefix = f"{self._path}/"
        rows = [
            (path.rsplit("/", 1)[-1], data)
            for path, data in self._store.docs.items()
            if path.startswith(prefix) and "/" not in path[len(prefix):]
        ]
        rows = [r for r in rows if self._matches(r[1])]
        # Firestore leaves out documents missing an ordered field.
        rows = [r for r in rows if all(f in r[1] for f, _ in self._orders)]
        for field, direction in reversed(self._orders):
            rows.sort(key=lambda r: r[1][field], reverse=direction == "DESCENDING")
        if self._limit:
            rows = rows[: self._limit]
        for doc_id, data in rows:
            yield DocumentSnapshot(doc_id, copy.deepcopy(data))


class FakeCollection:
    def __init__(self, store: FakeFirestore, path: str) -> None:
        self._store = store
        self._path = path

    @property
    def id(self) -> str:
        return self._path.rsplit("/", 1)[-1]

    def document(self, document_id: str | None = None) -> FakeDocument:
        return FakeDocument(self._store, f"{self._path}/{document_id or generate_cuid()}")

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        path = f"{self._path}/{document_id}"
        if path in self._store.docs:
            raise DocumentExistsError(path)
        self._store.docs[path] = _apply({}, data)

    def where(self, field: str, op: str, value: Any) -> FakeQuery:
        return FakeQuery(self._store, self._path).where(field, op, value)

    def order_by(self, field: str, direction: str = "ASCENDING") -> FakeQuery:
        return FakeQuery(self._store, self._path).order_by(field, direction)

    def limit(self, n: int | None) -> FakeQuery:
        return FakeQuery(self._store, self._path).limit(n)

    def stream(self) -> AsyncIterator[DocumentSnapshot]:
        return FakeQuery(self._store, self._path).stream()


class FakeBatch:
    """Checks every precondition before applying any write."""

    def __init__(self, store: FakeFirestore) -> None:
        self._store = store
        self._writes: list[tuple[str, FakeDocument, dict[str, Any]]] = []

    def create(self, ref: FakeDocument, data: dict[str, Any]) -> FakeBatch:
        self._writes.append(("create", ref, data))
        return self

    def update(self, ref: FakeDocument, data: dict[str, Any]) -> FakeBatch:
        self._writes.append(("update", ref, data))
        return self

    async def commit(self) -> None:
        docs = self._store.docs
        for kind, ref, _ in self._writes:
            if kind == "create" and ref.path in docs:
                raise DocumentExistsError(ref.path)
            if kind == "update" and ref.path not in docs:
                raise DocumentMissingError(ref.path)
        for kind, ref, data in self._writes:
            if kind == "create":
                docs[ref.path] = _apply({}, data)
            else:
                docs[ref.path] = _apply(docs.get(ref.path, {}), data)
        self._store.commits += 1
        self._writes = []
