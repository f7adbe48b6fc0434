from typing import Any, List, Optional

from pydantic import Field

from dsa_companion.data.schemas.base import CamelModel
from dsa_companion.data.schemas.enums import Difficulty
from dsa_companion.data.schemas.problem import ProblemResponse, TestCase


# Requests

class GenerateProblemRequest(CamelModel):
    topic: str = Field(..., min_length=1, examples=["binary search"])
    difficulty: Difficulty
    category: Optional[str] = None


class ValidateSolutionRequest(CamelModel):
    problem_id: str = Field(..., min_length=1)
    solution_code: str = Field(..., min_length=1)
    language: str = "javascript"


class HintRequest(CamelModel):
    problem_id: str = Field(..., min_length=1)
    current_attempt: Optional[int] = Field(None, ge=1)


class ExplanationRequest(CamelModel):
    problem_id: str = Field(..., min_length=1)
    solution_code: Optional[str] = None


class QuizRequest(CamelModel):
    topic: Optional[str] = None


class SupplementaryRequest(CamelModel):
    topic: str = Field(..., min_length=1)
    difficulty: str = Field(..., min_length=1, examples=["beginner", "medium"])


# Shapes the model provider is asked to answer with

class GeneratedProblem(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    difficulty: Difficulty
    category: Optional[str] = None
    test_cases: List[TestCase]
    solution_template: Optional[str] = None
    hints: List[str] = []
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None


class GeneratedProblemResponse(ProblemResponse):
    hints: List[str] = []
    time_complexity: Optional[str] = None
    space_complexity: Optional[str] = None


class ValidationResult(CamelModel):
    is_correct: bool
    passed_tests: int
    total_tests: int
    errors: List[str] = []
    suggestions: List[str] = []
    time_complexity: str = ""
    space_complexity: str = ""
    can_be_optimized: bool = False
    optimization_hints: List[str] = []


class HintResult(CamelModel):
    hint: str
    hint_level: str = "subtle"
    next_step: str = ""


class ExplanationResult(CamelModel):
    explanation: str
    key_concepts: List[str] = []
    algorithm: str = ""
    time_complexity: str = ""
    space_complexity: str = ""
    examples: List[Any] = []


class QuizQuestion(CamelModel):
    question: str
    options: List[str]
    correct_answer: int
    explanation: str = ""


class QuizResult(CamelModel):
    questions: List[QuizQuestion]


class LearningResource(CamelModel):
    type: str
    title: str
    description: str = ""
    url: Optional[str] = None
    difficulty: Optional[str] = None


class SupplementaryResult(CamelModel):
    resources: List[LearningResource] = []
    key_takeaways: List[str] = []
    next_topics: List[str] = []
