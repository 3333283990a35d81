"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a
fixed-length input so long passwords are not silently truncated. The async
helpers run bcrypt in a worker thread so request handlers never block.
"""

import asyncio
import base64
import hashlib

import bcrypt

_dummy_hash: str | None = None


def _prehash(password: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte truncation."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        return bool(
            bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8"))
        )
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Return bcrypt hash of password (SHA-256 pre-hashed before bcrypt)."""
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")


async def hash_password_async(password: str) -> str:
    return await asyncio.to_thread(get_password_hash, password)


async def verify_password_async(plain_password: str, hashed_password: str | None) -> bool:
    """Verify off the event loop; unknown users are checked against a dummy hash.

    Comparing against a real hash when the user does not exist keeps login
    timing the same for known and unknown e-mails.
    """
    global _dummy_hash
    if not hashed_password:
        if _dummy_hash is None:
            _dummy_hash = await hash_password_async("not-a-real-password")
        await asyncio.to_thread(verify_password, plain_password, _dummy_hash)
        return False
    return await asyncio.to_thread(verify_password, plain_password, hashed_password)
