from .ai import (
    ExplanationRequest,
    ExplanationResult,
    GeneratedProblem,
    GeneratedProblemResponse,
    GenerateProblemRequest,
    HintRequest,
    HintResult,
    LearningResource,
    QuizQuestion,
    QuizRequest,
    QuizResult,
    SupplementaryRequest,
    SupplementaryResult,
    ValidateSolutionRequest,
    ValidationResult,
)
from .auth import (
    AuthResponse,
    UserBase,
    UserBaseResponse,
    UserCreateModel,
    UserLoginModel,
    UserResponseModel,
    UserUpdateModel,
)
from .base import BaseTable, CamelModel
from .enums import Difficulty
from .envelope import Envelope, Pagination
from .problem import (
    Problem,
    ProblemCreate,
    ProblemFilters,
    ProblemResponse,
    ProblemUpdate,
    TestCase,
)
from .user import User

__all__ = [
    "BaseTable",
    "CamelModel",
    "Difficulty",
    "Envelope",
    "Pagination",
    "User",
    "UserBase",
    "UserCreateModel",
    "UserLoginModel",
    "UserUpdateModel",
    "UserBaseResponse",
    "UserResponseModel",
    "AuthResponse",
    "Problem",
    "ProblemCreate",
    "ProblemUpdate",
    "ProblemResponse",
    "ProblemFilters",
    "TestCase",
    "GenerateProblemRequest",
    "ValidateSolutionRequest",
    "HintRequest",
    "ExplanationRequest",
    "QuizRequest",
    "SupplementaryRequest",
    "GeneratedProblem",
    "GeneratedProblemResponse",
    "ValidationResult",
    "HintResult",
    "ExplanationResult",
    "QuizQuestion",
    "QuizResult",
    "LearningResource",
    "SupplementaryResult",
]
