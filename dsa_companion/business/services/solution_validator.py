from typing import Protocol

from dsa_companion.business.services import prompts
from dsa_companion.business.services.model_output import request_json
from dsa_companion.data.repositories import ModelClient
from dsa_companion.data.schemas import ProblemResponse, ValidationResult


class SolutionValidator(Protocol):
    async def validate(
        self, problem: ProblemResponse, code: str, language: str
    ) -> ValidationResult:
        ...


class ModelSolutionValidator:
    """
    Judges a solution by asking the model provider.

    The submitted code is never executed; the verdict, including the
    passed/total counts, is whatever the model reports.
    """

    def __init__(self, client: ModelClient):
        self.client = client

    async def validate(
        self, problem: ProblemResponse, code: str, language: str
    ) -> ValidationResult:
        return await request_json(
            self.client,
            prompts.validate_solution_prompt(problem, code, language),
            prompts.TEMPERATURE_VALIDATE,
            ValidationResult,
            empty_detail="Failed to validate solution",
            format_detail="Invalid validation response",
        )
