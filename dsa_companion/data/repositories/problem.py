import json
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from dsa_companion.config import logger
from dsa_companion.data.schemas import (
    Problem,
    ProblemCreate,
    ProblemFilters,
    ProblemResponse,
    TestCase,
)
from dsa_companion.data.schemas.base import utcnow
from dsa_companion.errors import DatabaseException

problem_logger = logger.getChild("problem_repository")

_test_cases_adapter = TypeAdapter(List[TestCase])


def encode_test_cases(test_cases: List[TestCase]) -> str:
    return json.dumps([tc.model_dump(by_alias=True) for tc in test_cases])


def decode_test_cases(raw: Optional[str]) -> List[TestCase]:
    """Decode the stored JSON column. Anything malformed means the row is corrupt."""
    try:
        return _test_cases_adapter.validate_python(json.loads(raw))
    except (TypeError, ValueError) as e:
        raise DatabaseException(detail="Stored problem data is corrupted") from e


def to_response(problem: Problem) -> ProblemResponse:
    test_cases = decode_test_cases(problem.test_cases)
    try:
        return ProblemResponse(
            id=problem.id,
            title=problem.title,
            description=problem.description,
            difficulty=problem.difficulty,
            category=problem.category,
            test_cases=test_cases,
            solution_template=problem.solution_template,
            created_at=problem.created_at,
            updated_at=problem.updated_at,
        )
    except ValidationError as e:
        problem_logger.error(f"Problem {problem.id} failed validation on read: {e}")
        raise DatabaseException(detail="Stored problem data is corrupted") from e


class ProblemRepository:
    """Storage access for the problems table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list(self, filters: ProblemFilters) -> List[ProblemResponse]:
        statement = select(Problem)
        if filters.difficulty is not None:
            statement = statement.where(Problem.difficulty == filters.difficulty.value)
        if filters.category is not None:
            statement = statement.where(Problem.category == filters.category)
        statement = (
            statement.order_by(Problem.created_at.desc())
            .offset(filters.offset)
            .limit(filters.limit)
        )
        try:
            result = await self.session.exec(statement)
            rows = result.all()
        except SQLAlchemyError as e:
            problem_logger.error(f"Failed to list problems: {str(e)}")
            raise DatabaseException(detail="Failed to list problems")
        return [to_response(row) for row in rows]

    async def get(self, problem_id: str) -> Optional[ProblemResponse]:
        try:
            problem = await self.session.get(Problem, problem_id)
        except SQLAlchemyError as e:
            problem_logger.error(f"Failed to fetch problem {problem_id}: {str(e)}")
            raise DatabaseException(detail="Failed to fetch problem")
        if problem is None:
            return None
        return to_response(problem)

    async def create(self, data: ProblemCreate) -> ProblemResponse:
        problem = Problem(
            title=data.title,
            description=data.description,
            difficulty=data.difficulty.value,
            category=data.category,
            test_cases=encode_test_cases(data.test_cases),
            solution_template=data.solution_template,
        )
        try:
            self.session.add(problem)
            await self.session.commit()
            await self.session.refresh(problem)
        except SQLAlchemyError as e:
            problem_logger.error(f"Failed to create problem: {str(e)}")
            await self.session.rollback()
            raise DatabaseException(detail="Failed to create problem")
        return to_response(problem)

    async def update(self, problem_id: str, changes: Dict[str, Any]) -> int:
        """Apply column changes and return the number of rows affected."""
        values = dict(changes)
        values["updated_at"] = utcnow()
        try:
            result = await self.session.execute(
                update(Problem).where(Problem.id == problem_id).values(**values)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            problem_logger.error(f"Failed to update problem {problem_id}: {str(e)}")
            await self.session.rollback()
            raise DatabaseException(detail="Failed to update problem")
        return result.rowcount

    async def delete(self, problem_id: str) -> int:
        try:
            result = await self.session.execute(
                delete(Problem).where(Problem.id == problem_id)
            )
            await self.session.commit()
        except SQLAlchemyError as e:
            problem_logger.error(f"Failed to delete problem {problem_id}: {str(e)}")
            await self.session.rollback()
            raise DatabaseException(detail="Failed to delete problem")
        return result.rowcount
