from .ai import ai_router
from .health import health_router
from .problems import problems_router
from .users import users_router

__all__ = [
    "ai_router",
    "health_router",
    "problems_router",
    "users_router",
]
