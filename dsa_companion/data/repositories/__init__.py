from .database import async_engine, get_session, init_db
from .model_provider import (
    ModelClient,
    OpenAIModelClient,
    build_model_client,
    get_model_client,
)
from .problem import ProblemRepository, decode_test_cases, encode_test_cases
from .redis import get_redis_client
from .user_repository import UserRepository

__all__ = [
    "async_engine",
    "get_session",
    "init_db",
    "ModelClient",
    "OpenAIModelClient",
    "build_model_client",
    "get_model_client",
    "ProblemRepository",
    "encode_test_cases",
    "decode_test_cases",
    "UserRepository",
    "get_redis_client",
]
