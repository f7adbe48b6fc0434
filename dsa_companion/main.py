import os
import time
import uuid
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from dsa_companion.config import Config, logger
from dsa_companion.data.repositories import build_model_client, get_redis_client, init_db
from dsa_companion.errors import register_exception_handlers
from dsa_companion.presentation.middleware.rate_limit import RateLimitMiddleware
from dsa_companion.presentation.routes import (
    ai_router,
    health_router,
    problems_router,
    users_router,
)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        client = request.client.host if request.client else "unknown"
        logger.info(
            f"Request started: {request.method} {request.url.path} - "
            f"ID: {request_id} - Client: {client}"
        )
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            logger.info(
                f"Request completed: {request.method} {request.url.path} - "
                f"ID: {request_id} - Status: {response.status_code} - "
                f"Time: {process_time:.4f}s"
            )
            return response
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {request.method} {request.url.path} - "
                f"ID: {request_id} - Error: {e} - "
                f"Time: {process_time:.4f}s"
            )
            raise


@asynccontextmanager
async def life_span(app: FastAPI):
    logger.info(f"Server is starting ({Config.ENVIRONMENT})...")
    if os.environ.get("TESTING") != "True":
        try:
            await init_db()
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise
    else:
        logger.info("Skipping database initialization for tests")

    app.state.model_client = build_model_client()
    yield
    if app.state.model_client is not None:
        await app.state.model_client.close()
    if redis_client is not None:
        await redis_client.close()
    logger.info("Server has been stopped")


version = "v1"

app = FastAPI(
    title="DSA Companion API",
    description="Practice data-structures-and-algorithms problems with AI-generated problems, hints and reviews",
    version=version,
    lifespan=life_span,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Rate limiting
redis_client = get_redis_client()
if redis_client is not None:
    app.add_middleware(
        RateLimitMiddleware,
        redis_client=redis_client,
        limit=Config.RATE_LIMIT_REQUESTS,
        window=Config.RATE_LIMIT_WINDOW,
    )
    logger.info("Rate limiting middleware added")
else:
    logger.info("REDIS_URL not set, rate limiting disabled")

# Request logging
app.add_middleware(LoggingMiddleware)

# Error handlers
register_exception_handlers(app)

# Routes
app.include_router(health_router)
app.include_router(users_router, prefix="/api")
app.include_router(problems_router, prefix="/api")
app.include_router(ai_router, prefix="/api")

logger.info(f"Application startup complete - API version: {version}")


def run():
    uvicorn.run(
        "dsa_companion.main:app",
        host=Config.API_SERVER_HOST,
        port=Config.API_SERVER_PORT,
    )


if __name__ == "__main__":
    run()
