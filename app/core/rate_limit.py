from __future__ import annotations

from slowapi import Limiter

from app.core.client_ip import client_key
from app.core.config import settings

# Coarse app-wide guard keyed like the per-route sliding windows.
limiter = Limiter(key_func=client_key, enabled=settings.rate_limit_enabled)


def rate_limit(limit: str | None = None):
    if settings.rate_limit_enabled:
        return limiter.limit(limit or settings.rate_limit)

    def decorator(func):
        return func

    return decorator
