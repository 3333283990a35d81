"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Central limit strings and decorators keep
rate limits DRY. Disabled with RATE_LIMIT_ENABLED=false (e.g. in tests).
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import get_settings

limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_settings().rate_limit_enabled,
)

# Single source of truth for rate limit strings and decorators.
AUTH_LIMIT = "10/minute"
AI_LIMIT = "20/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"

limit_auth = limiter.limit(AUTH_LIMIT)
limit_ai = limiter.limit(AI_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
