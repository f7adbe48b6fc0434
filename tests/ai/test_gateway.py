import pytest

from dsa_companion.business.services import AIGateway
from dsa_companion.business.services.model_output import parse_model_json
from dsa_companion.data.repositories import ProblemRepository
from dsa_companion.data.schemas import Difficulty, HintResult, ValidationResult
from dsa_companion.errors import ResourceNotFoundException, UpstreamFormatException


class RecordingValidator:
    """A validator that never talks to the model."""

    def __init__(self):
        self.seen = []

    async def validate(self, problem, code, language):
        self.seen.append((problem.id, code, language))
        return ValidationResult(is_correct=True, passed_tests=1, total_tests=1)


@pytest.mark.asyncio
async def test_generate_problem_falls_back_to_requested_category(async_session, model_client):
    model_client.queue({
        "title": "Balanced Brackets",
        "description": "Check whether brackets are balanced.",
        "difficulty": "easy",
        "testCases": [{"input": "()", "output": "true", "explanation": "one pair"}],
    })

    async with async_session() as session:
        gateway = AIGateway(model_client, ProblemRepository(session))
        problem = await gateway.generate_problem("stacks", Difficulty.EASY, "stacks")

        assert problem.category == "stacks"
        assert problem.hints == []
        stored = await ProblemRepository(session).get(problem.id)
        assert stored.title == "Balanced Brackets"


@pytest.mark.asyncio
async def test_generate_problem_default_category(async_session, model_client):
    model_client.queue({
        "title": "Queue via stacks",
        "description": "Implement a queue with two stacks.",
        "difficulty": "medium",
        "testCases": [],
    })

    async with async_session() as session:
        gateway = AIGateway(model_client, ProblemRepository(session))
        problem = await gateway.generate_problem("queues", Difficulty.MEDIUM)

    assert problem.category == "General"
    assert '"category": "General"' in model_client.calls[0]["prompt"]


@pytest.mark.asyncio
async def test_validate_solution_uses_injected_validator(async_session, model_client, make_problem):
    problem = make_problem()
    validator = RecordingValidator()

    async with async_session() as session:
        gateway = AIGateway(model_client, ProblemRepository(session), validator=validator)
        result = await gateway.validate_solution(problem.id, "return a + b", "python")

    assert result.is_correct is True
    assert validator.seen == [(problem.id, "return a + b", "python")]
    assert model_client.calls == []


@pytest.mark.asyncio
async def test_hint_for_missing_problem(async_session, model_client):
    async with async_session() as session:
        gateway = AIGateway(model_client, ProblemRepository(session))
        with pytest.raises(ResourceNotFoundException):
            await gateway.get_hint("missing")

    assert model_client.calls == []


def test_parse_model_json_accepts_plain_json():
    result = parse_model_json('{"hint": "Sort first"}', HintResult, "Invalid hint response")

    assert result.hint == "Sort first"
    assert result.hint_level == "subtle"


def test_parse_model_json_rejects_prose():
    with pytest.raises(UpstreamFormatException) as exc_info:
        parse_model_json("Try sorting the input.", HintResult, "Invalid hint response")

    assert exc_info.value.detail == "Invalid hint response"


def test_parse_model_json_rejects_wrong_shape():
    with pytest.raises(UpstreamFormatException):
        parse_model_json('["not", "an", "object"]', HintResult, "Invalid hint response")
