"""
Rate limiting for the sign-in / sign-up endpoints
In-memory sliding window keyed by client IP
"""
import time
from collections import defaultdict, deque
from typing import Deque, Dict, Tuple

from fastapi import HTTPException, Request, status

from storefront.core.config import settings


class RateLimiter:
    """
    Sliding window limiter: at most max_requests per window_seconds per identifier.

    State lives in this process only.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._hits: Dict[str, Deque[float]] = defaultdict(deque)

    def hit(self, identifier: str, max_requests: int, window_seconds: int = 60) -> Tuple[bool, int]:
        """
        Record a request if allowed.

        Returns:
            Tuple of (is_allowed, retry_after_seconds)
        """
        now = self._clock()
        hits = self._hits[identifier]

        while hits and hits[0] <= now - window_seconds:
            hits.popleft()

        if len(hits) >= max_requests:
            retry_after = int(hits[0] + window_seconds - now) + 1
            return False, retry_after

        hits.append(now)
        return True, 0

    def reset(self):
        self._hits.clear()


# Global rate limiter instance
rate_limiter = RateLimiter()


def get_client_ip(request: Request) -> str:
    """Client IP, honouring the first X-Forwarded-For hop"""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    if request.client:
        return request.client.host

    return "unknown"


async def auth_rate_limit(request: Request):
    """
    Dependency applied to the auth router.

    Usage:
        router = APIRouter(dependencies=[Depends(auth_rate_limit)])
    """
    limit = settings.AUTH_RATE_LIMIT
    identifier = f"auth:{get_client_ip(request)}"

    is_allowed, retry_after = rate_limiter.hit(identifier, limit)
    if not is_allowed:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Too many attempts. Try again in {retry_after} seconds.",
            headers={"Retry-After": str(retry_after)}
        )
