"""
Caller sanity check for mutating and id-bearing routes.

This is not a rate limiter: it only rejects requests whose transport-reported
address is missing or the `0.0.0.0` placeholder. No counting, no time window.
"""

from __future__ import annotations

from fastapi import HTTPException, Request, status

PLACEHOLDER_ADDRESS = "0.0.0.0"


def is_valid_client(host: str | None) -> bool:
    return bool(host) and host != PLACEHOLDER_ADDRESS


async def check_rate_limit(request: Request) -> None:
    host = request.client.host if request.client else None
    if not is_valid_client(host):
        # Empty body, rendered as plain text by the app's HTTPException handler.
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail="")
