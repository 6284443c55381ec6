from __future__ import annotations

from fastapi import Request


def client_key(request: Request) -> str:
    """Identify the calling client: first X-Forwarded-For hop, then X-Real-IP, then the peer."""
    forwarded_for = request.headers.get("x-forwarded-for", "").strip()
    if forwarded_for:
        return forwarded_for.split(",")[0].strip() or "unknown"
    real_ip = request.headers.get("x-real-ip", "").strip()
    if real_ip:
        return real_ip
    if request.client and request.client.host:
        return request.client.host
    return "unknown"
