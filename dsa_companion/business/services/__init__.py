from .auth import UserService, get_user_repository, get_user_service
from .auth_dependency import BearerToken, get_current_user
from .auth_util import (
    create_access_token,
    decode_token,
    generate_password_hash,
    verify_password,
)
from .problem import ProblemService, get_problem_repository, get_problem_service
from .solution_validator import ModelSolutionValidator, SolutionValidator
from .ai_gateway import AIGateway, get_ai_gateway

__all__ = [
    "UserService",
    "get_user_repository",
    "get_user_service",
    "BearerToken",
    "get_current_user",
    "create_access_token",
    "decode_token",
    "generate_password_hash",
    "verify_password",
    "ProblemService",
    "get_problem_repository",
    "get_problem_service",
    "SolutionValidator",
    "ModelSolutionValidator",
    "AIGateway",
    "get_ai_gateway",
]
