"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
Keeps serverless bundle small (avoids grpcio / firebase-admin).
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any
from urllib.parse import quote

import httpx

from app.infrastructure.firebase._rest_encoding import (
    _encode_value,
    decode_document,
    encode_document,
    split_transforms,
)
from app.shared.utils import generate_cuid

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
    params: list[tuple[str, str]] | None = None,
) -> Any:
    """Perform async HTTP request to Firestore REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method == "GET":
        resp = await client.get(url, headers=headers, params=params)
    elif method == "PATCH":
        resp = await client.patch(url, headers=headers, json=body, params=params)
    elif method == "POST":
        resp = await client.post(url, headers=headers, json=body, params=params)
    else:
        raise ValueError(f"Unsupported method: {method!r}")
    if resp.status_code == 404:
        return None
    if resp.status_code == 409:
        raise DocumentExistsError("Document already exists")
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


def _doc_id(name: str) -> str:
    return name.split("/")[-1] if name else ""


class DocumentExistsError(Exception):
    """Raised when createDocument returns 409 (document ID already exists)."""


class DocumentMissingError(Exception):
    """Raised when an update targets a document that does not exist."""


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return _doc_id(self._path)

    @property
    def path(self) -> str:
        return self._path

    def collection(self, collection_id: str) -> "CollectionReference":
        """Return a subcollection under this document."""
        return CollectionReference(self._client, f"{self._path}/{collection_id}")

    async def set(self, data: dict[str, Any], merge: bool = False) -> None:
        """Create or overwrite the document; with merge only the given fields change."""
        _, transforms = split_transforms(data)
        if transforms:
            await self._client.commit([_set_write(self._path, data, merge)])
            return
        params = (
            [("updateMask.fieldPaths", key) for key in data] if merge else None
        )
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
            params=params,
        )

    async def update(self, data: dict[str, Any]) -> None:
        """Update fields of an existing document (DocumentMissingError if absent)."""
        await self._client.commit([_update_write(self._path, data)])

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        url = f"{_BASE}/{self._path}"
        out = await _request_async(
            self._client._http, url, access_token=await self._client.get_token()
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_document(out.get("fields")))


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


def _set_write(path: str, data: dict[str, Any], merge: bool) -> dict:
    plain, transforms = split_transforms(data)
    write: dict[str, Any] = {"update": {"name": path, **encode_document(plain)}}
    if merge:
        write["updateMask"] = {"fieldPaths": list(plain)}
    if transforms:
        write["updateTransforms"] = transforms
    return write


def _update_write(path: str, data: dict[str, Any]) -> dict:
    write = _set_write(path, data, merge=True)
    write["currentDocument"] = {"exists": True}
    return write


def _create_write(path: str, data: dict[str, Any]) -> dict:
    write = _set_write(path, data, merge=False)
    write["currentDocument"] = {"exists": False}
    return write


class WriteBatch:
    """Collects writes and applies them atomically through documents:commit."""

    def __init__(self, client: "FirestoreRESTClient"):
        self._client = client
        self._writes: list[dict] = []

    def create(self, ref: DocumentReference, data: dict[str, Any]) -> "WriteBatch":
        self._writes.append(_create_write(ref.path, data))
        return self

    def update(self, ref: DocumentReference, data: dict[str, Any]) -> "WriteBatch":
        self._writes.append(_update_write(ref.path, data))
        return self

    async def commit(self) -> None:
        if not self._writes:
            return
        await self._client.commit(self._writes)
        self._writes = []


_OP_MAP: dict[str, str] = {
    "==": "EQUAL",
    "!=": "NOT_EQUAL",
    "<": "LESS_THAN",
    "<=": "LESS_THAN_OR_EQUAL",
    ">": "GREATER_THAN",
    ">=": "GREATER_THAN_OR_EQUAL",
    "in": "IN",
    "not-in": "NOT_IN",
    "array_contains": "ARRAY_CONTAINS",
    "array-contains": "ARRAY_CONTAINS",
    "array_contains_any": "ARRAY_CONTAINS_ANY",
    "array-contains-any": "ARRAY_CONTAINS_ANY",
}

_DIRECTIONS = {"ASCENDING", "DESCENDING"}


class _Query:
    """Fluent query builder for collection; runs via runQuery (filter, order and limit on server)."""

    def __init__(
        self,
        client: "FirestoreRESTClient",
        parent: str,
        collection_id: str,
    ):
        self._client = client
        self._parent = parent
        self._collection_id = collection_id
        self._filters: list[tuple[str, str, Any]] = []
        self._orders: list[tuple[str, str]] = []
        self._limit: int | None = None

    def where(self, field: str, op: str, value: Any) -> "_Query":
        self._filters.append((field, _OP_MAP.get(op, op), value))
        return self

    def order_by(self, field: str, direction: str = "ASCENDING") -> "_Query":
        direction = direction.upper()
        if direction not in _DIRECTIONS:
            raise ValueError(f"Unsupported order direction: {direction!r}")
        self._orders.append((field, direction))
        return self

    def limit(self, n: int | None) -> "_Query":
        self._limit = n
        return self

    def _structured_query(self) -> dict[str, Any]:
        structured: dict[str, Any] = {
            "from": [{"collectionId": self._collection_id}],
        }
        field_filters = [
            {
                "fieldFilter": {
                    "field": {"fieldPath": field},
                    "op": op,
                    "value": _encode_value(value),
                }
            }
            for field, op, value in self._filters
        ]
        if len(field_filters) == 1:
            structured["where"] = field_filters[0]
        elif field_filters:
            structured["where"] = {
                "compositeFilter": {"op": "AND", "filters": field_filters}
            }
        if self._orders:
            structured["orderBy"] = [
                {"field": {"fieldPath": field}, "direction": direction}
                for field, direction in self._orders
            ]
        if self._limit:
            structured["limit"] = self._limit
        return structured

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Execute the query and yield document snapshots."""
        url = f"{_BASE}/{self._parent}:runQuery"
        body = {"structuredQuery": self._structured_query()}
        resp = await _request_async(
            self._client._http,
            url,
            method="POST",
            body=body,
            access_token=await self._client.get_token(),
        )
        items = resp if isinstance(resp, list) else ([resp] if resp else [])
        for item in items:
            if "document" not in item:
                continue
            doc = item["document"]
            yield DocumentSnapshot(
                _doc_id(doc.get("name", "")), decode_document(doc.get("fields"))
            )


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    @property
    def id(self) -> str:
        return _doc_id(self._path)

    def document(self, document_id: str | None = None) -> DocumentReference:
        """Reference a document; a new CUID is used when no ID is given."""
        return DocumentReference(
            self._client, f"{self._path}/{document_id or generate_cuid()}"
        )

    async def create(self, document_id: str, data: dict[str, Any]) -> None:
        """Create a document with the given ID (fail with DocumentExistsError if it exists)."""
        doc = encode_document(data)
        url = f"{_BASE}/{self._path}?documentId={quote(document_id, safe='')}"
        await _request_async(
            self._client._http,
            url,
            method="POST",
            body=doc,
            access_token=await self._client.get_token(),
        )

    def _query(self) -> _Query:
        parent = self._path.rsplit("/", 1)[0]
        return _Query(self._client, parent, self.id)

    def where(self, field: str, op: str, value: Any) -> _Query:
        """Start a query with a filter. Chain .where(), .order_by(), .limit(), then .stream()."""
        return self._query().where(field, op, value)

    def order_by(self, field: str, direction: str = "ASCENDING") -> _Query:
        return self._query().order_by(field, direction)

    def limit(self, n: int | None) -> _Query:
        return self._query().limit(n)

    def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """Yield every document in the collection."""
        return self._query().stream()


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._database = f"projects/{project_id}/databases/(default)"
        self._prefix = f"{self._database}/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")

    def batch(self) -> WriteBatch:
        return WriteBatch(self)

    async def commit(self, writes: list[dict]) -> None:
        """Apply writes atomically; a failed precondition on update raises DocumentMissingError."""
        out = await _request_async(
            self._http,
            f"{_BASE}/{self._prefix}:commit",
            method="POST",
            body={"writes": writes},
            access_token=await self.get_token(),
        )
        if out is None:
            raise DocumentMissingError("Document to update does not exist")
