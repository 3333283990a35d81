"""Firestore client dependency (composition root)."""

from __future__ import annotations

from fastapi import HTTPException

from app.infrastructure.firebase import FirestoreRESTClient, get_firestore_client


def get_firestore() -> FirestoreRESTClient:
    """Return the Firestore client or raise 503 when credentials are not configured."""
    client = get_firestore_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Firestore not configured (set FIREBASE_SERVICE_ACCOUNT_KEY or PATH)",
        )
    return client
