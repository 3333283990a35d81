"""Firestore integration over the REST API."""

from app.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    DocumentMissingError,
    FirestoreRESTClient,
)
from app.infrastructure.firebase._rest_encoding import ArrayUnion, Increment
from app.infrastructure.firebase.client import (
    close_firebase,
    get_firestore_client,
    init_firebase,
)

__all__ = [
    "ArrayUnion",
    "DocumentExistsError",
    "DocumentMissingError",
    "FirestoreRESTClient",
    "Increment",
    "close_firebase",
    "get_firestore_client",
    "init_firebase",
]
