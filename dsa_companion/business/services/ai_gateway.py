from typing import Optional

from fastapi import Depends

from dsa_companion.business.services import prompts
from dsa_companion.business.services.model_output import ai_logger, request_json
from dsa_companion.business.services.problem import get_problem_repository
from dsa_companion.business.services.solution_validator import (
    ModelSolutionValidator,
    SolutionValidator,
)
from dsa_companion.data.repositories import ModelClient, ProblemRepository, get_model_client
from dsa_companion.data.schemas import (
    Difficulty,
    ExplanationResult,
    GeneratedProblem,
    GeneratedProblemResponse,
    HintResult,
    ProblemCreate,
    ProblemResponse,
    QuizResult,
    SupplementaryResult,
    ValidationResult,
)
from dsa_companion.errors import ResourceNotFoundException


class AIGateway:
    """
    Turns each learning use case into one prompt, one provider call and one
    parsed reply. Only problem generation writes to the database.
    """

    def __init__(
        self,
        client: ModelClient,
        problems: ProblemRepository,
        validator: Optional[SolutionValidator] = None,
    ):
        self.client = client
        self.problems = problems
        self.validator = validator or ModelSolutionValidator(client)

    async def _load_problem(self, problem_id: str) -> ProblemResponse:
        problem = await self.problems.get(problem_id)
        if problem is None:
            ai_logger.warning(f"Problem not found: {problem_id}")
            raise ResourceNotFoundException(detail="Problem not found")
        return problem

    async def generate_problem(
        self, topic: str, difficulty: Difficulty, category: Optional[str] = None
    ) -> GeneratedProblemResponse:
        ai_logger.info(f"Generating {difficulty.value} problem about {topic!r}")
        generated = await request_json(
            self.client,
            prompts.generate_problem_prompt(topic, difficulty.value, category),
            prompts.TEMPERATURE_GENERATE_PROBLEM,
            GeneratedProblem,
            empty_detail="Failed to generate problem",
            format_detail="Invalid problem format generated",
        )

        stored = await self.problems.create(
            ProblemCreate(
                title=generated.title,
                description=generated.description,
                difficulty=generated.difficulty,
                category=generated.category or category or prompts.DEFAULT_CATEGORY,
                test_cases=generated.test_cases,
                solution_template=generated.solution_template,
            )
        )
        ai_logger.info(f"Stored generated problem {stored.id}: {stored.title!r}")
        return GeneratedProblemResponse(
            **stored.model_dump(),
            hints=generated.hints,
            time_complexity=generated.time_complexity,
            space_complexity=generated.space_complexity,
        )

    async def validate_solution(
        self, problem_id: str, code: str, language: str = prompts.DEFAULT_LANGUAGE
    ) -> ValidationResult:
        problem = await self._load_problem(problem_id)
        ai_logger.info(f"Validating {language} solution for problem {problem_id}")
        return await self.validator.validate(problem, code, language)

    async def get_hint(self, problem_id: str, attempt: Optional[int] = None) -> HintResult:
        problem = await self._load_problem(problem_id)
        return await request_json(
            self.client,
            prompts.hint_prompt(problem, attempt or 1),
            prompts.TEMPERATURE_HINT,
            HintResult,
            empty_detail="Failed to generate hint",
            format_detail="Invalid hint response",
        )

    async def get_explanation(
        self, problem_id: str, code: Optional[str] = None
    ) -> ExplanationResult:
        problem = await self._load_problem(problem_id)
        return await request_json(
            self.client,
            prompts.explanation_prompt(problem, code),
            prompts.TEMPERATURE_EXPLANATION,
            ExplanationResult,
            empty_detail="Failed to generate explanation",
            format_detail="Invalid explanation response",
        )

    async def generate_quiz(self, topic: Optional[str] = None) -> QuizResult:
        return await request_json(
            self.client,
            prompts.quiz_prompt(topic),
            prompts.TEMPERATURE_QUIZ,
            QuizResult,
            empty_detail="Failed to generate quiz",
            format_detail="Invalid quiz format",
        )

    async def get_supplementary_materials(
        self, topic: str, difficulty: str
    ) -> SupplementaryResult:
        return await request_json(
            self.client,
            prompts.supplementary_prompt(topic, difficulty),
            prompts.TEMPERATURE_SUPPLEMENTARY,
            SupplementaryResult,
            empty_detail="Failed to generate materials",
            format_detail="Invalid materials format",
        )


def get_ai_gateway(
    client: ModelClient = Depends(get_model_client),
    problems: ProblemRepository = Depends(get_problem_repository),
) -> AIGateway:
    return AIGateway(client, problems)
