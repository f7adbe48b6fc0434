from typing import Any, Dict, List

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from dsa_companion.config import logger
from dsa_companion.data.repositories import ProblemRepository, encode_test_cases, get_session
from dsa_companion.data.schemas import (
    ProblemCreate,
    ProblemFilters,
    ProblemResponse,
    ProblemUpdate,
)
from dsa_companion.errors import BadRequestException, ResourceNotFoundException

problem_logger = logger.getChild("problem")

# Columns that may be explicitly cleared with null in a partial update
_NULLABLE_FIELDS = {"solution_template"}


class ProblemService:
    def __init__(self, problems: ProblemRepository):
        self.problems = problems

    async def list_problems(self, filters: ProblemFilters) -> List[ProblemResponse]:
        problems = await self.problems.list(filters)
        problem_logger.info(
            f"Listed {len(problems)} problems (difficulty={filters.difficulty}, "
            f"category={filters.category}, limit={filters.limit}, offset={filters.offset})"
        )
        return problems

    async def get_problem(self, problem_id: str) -> ProblemResponse:
        problem = await self.problems.get(problem_id)
        if problem is None:
            raise ResourceNotFoundException(detail="Problem not found")
        return problem

    async def create_problem(self, data: ProblemCreate) -> ProblemResponse:
        problem = await self.problems.create(data)
        problem_logger.info(f"Created problem {problem.id}: {problem.title!r}")
        return problem

    async def update_problem(self, problem_id: str, data: ProblemUpdate) -> ProblemResponse:
        changes = self._column_changes(data)
        if not changes:
            raise BadRequestException(detail="No fields to update")

        if await self.problems.update(problem_id, changes) == 0:
            raise ResourceNotFoundException(detail="Problem not found")

        problem_logger.info(f"Updated problem {problem_id}: {sorted(changes)}")
        return await self.get_problem(problem_id)

    async def delete_problem(self, problem_id: str) -> None:
        if await self.problems.delete(problem_id) == 0:
            raise ResourceNotFoundException(detail="Problem not found")
        problem_logger.info(f"Deleted problem {problem_id}")

    @staticmethod
    def _column_changes(data: ProblemUpdate) -> Dict[str, Any]:
        changes: Dict[str, Any] = {}
        for field in data.model_fields_set:
            value = getattr(data, field)
            if value is None and field not in _NULLABLE_FIELDS:
                continue
            if field == "test_cases":
                value = encode_test_cases(value)
            elif field == "difficulty":
                value = value.value
            changes[field] = value
        return changes


def get_problem_repository(session: AsyncSession = Depends(get_session)) -> ProblemRepository:
    return ProblemRepository(session)


def get_problem_service(
    problems: ProblemRepository = Depends(get_problem_repository),
) -> ProblemService:
    return ProblemService(problems)
