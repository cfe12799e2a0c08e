"""
Fixed-window rate limiter backed by Redis

Keys are built from the client IP and a scope. Endpoints that share a scope
share one window, whatever prefix they are mounted under; without a scope the
request path is used. Redis outages never block a request.
"""
import logging
from typing import Optional
from fastapi import HTTPException, status, Request
from hanuram.config import get_settings
from hanuram.utils.redis_client import redis_client

logger = logging.getLogger(__name__)


class RateLimiter:
    def __init__(self, times: int = 5, seconds: int = 60, scope: Optional[str] = None):
        """
        Args:
            times: requests allowed inside one window
            seconds: window length in seconds
            scope: bucket name shared by every endpoint using this limiter
        """
        self.times = times
        self.seconds = seconds
        self.scope = scope

    async def __call__(self, request: Request):
        settings = get_settings()
        if not settings.rate_limit_enabled or not redis_client:
            return

        client_id = self._get_client_id(request, settings.trust_proxy_headers)
        key = f"rate_limit:{client_id}:{self.scope or request.url.path}"

        try:
            current = await redis_client.get(key)
            if current and int(current) >= self.times:
                raise HTTPException(
                    status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                    detail="Too many requests. Please try again later.",
                )

            async with redis_client.pipeline() as pipe:
                await pipe.incr(key)
                if not current:
                    await pipe.expire(key, self.seconds)
                await pipe.execute()
        except HTTPException:
            raise
        except Exception as exc:
            logger.warning("Rate limiter unavailable: %s", exc)

    def _get_client_id(self, request: Request, trust_proxy_headers: bool) -> str:
        ip = request.client.host if request.client else "unknown"
        forwarded_for = request.headers.get("X-Forwarded-For")
        if trust_proxy_headers and forwarded_for:
            # the first entry is the client, the rest are proxies
            ip = forwarded_for.split(",")[0].strip()
        return f"ip:{ip}"
