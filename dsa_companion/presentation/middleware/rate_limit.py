from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from dsa_companion.config import logger
from dsa_companion.data.repositories.redis import RedisClient
from dsa_companion.errors import error_response

rate_limit_logger = logger.getChild("rate_limit")


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Fixed-window request limit per client address, applied to API paths."""

    def __init__(
        self,
        app,
        redis_client: RedisClient,
        limit: int = 100,
        window: int = 15 * 60,
        path_prefix: str = "/api/",
    ):
        super().__init__(app)
        self.redis_client = redis_client
        self.limit = limit  # Max requests per window
        self.window = window  # Window in seconds
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next):
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        key = f"rate_limit:{client_ip}"

        current_count = await self.redis_client.hit(key, self.window)
        if current_count is not None and current_count > self.limit:
            rate_limit_logger.warning(f"Rate limit exceeded for {client_ip}")
            return error_response(
                429, "Too many requests from this IP, please try again later."
            )

        return await call_next(request)
