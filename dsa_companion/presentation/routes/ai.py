from typing import Optional

from fastapi import APIRouter, Depends

from dsa_companion.business.services import AIGateway, get_ai_gateway
from dsa_companion.data.schemas import (
    Envelope,
    ExplanationRequest,
    ExplanationResult,
    GeneratedProblemResponse,
    GenerateProblemRequest,
    HintRequest,
    HintResult,
    QuizRequest,
    QuizResult,
    SupplementaryRequest,
    SupplementaryResult,
    ValidateSolutionRequest,
    ValidationResult,
)

ai_router = APIRouter(prefix="/ai", tags=["ai"])


@ai_router.post(
    "/generate-problem",
    response_model=Envelope[GeneratedProblemResponse],
    response_model_exclude_none=True,
    summary="Generate a problem",
    description="Asks the model for a new problem on a topic and stores it.",
)
async def generate_problem(
    body: GenerateProblemRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    problem = await gateway.generate_problem(body.topic, body.difficulty, body.category)
    return Envelope(data=problem)


@ai_router.post(
    "/validate-solution",
    response_model=Envelope[ValidationResult],
    response_model_exclude_none=True,
    summary="Validate a solution",
    description="Has the model judge a submitted solution against the problem's test cases.",
)
async def validate_solution(
    body: ValidateSolutionRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    result = await gateway.validate_solution(body.problem_id, body.solution_code, body.language)
    return Envelope(data=result)


@ai_router.post(
    "/hint",
    response_model=Envelope[HintResult],
    response_model_exclude_none=True,
    summary="Get a hint",
)
async def get_hint(
    body: HintRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    return Envelope(data=await gateway.get_hint(body.problem_id, body.current_attempt))


@ai_router.post(
    "/explanation",
    response_model=Envelope[ExplanationResult],
    response_model_exclude_none=True,
    summary="Explain a problem",
)
async def get_explanation(
    body: ExplanationRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    return Envelope(data=await gateway.get_explanation(body.problem_id, body.solution_code))


@ai_router.post(
    "/quiz",
    response_model=Envelope[QuizResult],
    response_model_exclude_none=True,
    summary="Generate a quiz",
)
async def generate_quiz(
    body: Optional[QuizRequest] = None,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    topic = body.topic if body else None
    return Envelope(data=await gateway.generate_quiz(topic))


@ai_router.post(
    "/supplementary",
    response_model=Envelope[SupplementaryResult],
    response_model_exclude_none=True,
    summary="Get supplementary materials",
)
async def get_supplementary_materials(
    body: SupplementaryRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    result = await gateway.get_supplementary_materials(body.topic, body.difficulty)
    return Envelope(data=result)
