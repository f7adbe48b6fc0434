from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from dsa_companion.business.services import ProblemService, get_problem_service
from dsa_companion.data.schemas import (
    Difficulty,
    Envelope,
    Pagination,
    ProblemCreate,
    ProblemFilters,
    ProblemResponse,
    ProblemUpdate,
)

problems_router = APIRouter(prefix="/problems", tags=["problems"])


@problems_router.get(
    "",
    response_model=Envelope[List[ProblemResponse]],
    response_model_exclude_none=True,
    summary="List problems",
    description="Lists problems newest-first, optionally filtered by difficulty and category.",
)
async def list_problems(
    difficulty: Optional[Difficulty] = None,
    category: Optional[str] = None,
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    problem_service: ProblemService = Depends(get_problem_service),
):
    filters = ProblemFilters(
        difficulty=difficulty, category=category or None, limit=limit, offset=offset
    )
    problems = await problem_service.list_problems(filters)
    return Envelope(
        data=problems,
        pagination=Pagination(limit=limit, offset=offset, count=len(problems)),
    )


@problems_router.get(
    "/{problem_id}",
    response_model=Envelope[ProblemResponse],
    response_model_exclude_none=True,
    summary="Get a problem",
)
async def get_problem(
    problem_id: str,
    problem_service: ProblemService = Depends(get_problem_service),
):
    return Envelope(data=await problem_service.get_problem(problem_id))


@problems_router.post(
    "",
    response_model=Envelope[ProblemResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a problem",
)
async def create_problem(
    problem_data: ProblemCreate,
    problem_service: ProblemService = Depends(get_problem_service),
):
    return Envelope(data=await problem_service.create_problem(problem_data))


@problems_router.put(
    "/{problem_id}",
    response_model=Envelope[ProblemResponse],
    response_model_exclude_none=True,
    summary="Update a problem",
    description="Updates only the fields present in the body.",
)
async def update_problem(
    problem_id: str,
    problem_update: ProblemUpdate,
    problem_service: ProblemService = Depends(get_problem_service),
):
    problem = await problem_service.update_problem(problem_id, problem_update)
    return Envelope(data=problem, message="Problem updated successfully")


@problems_router.delete(
    "/{problem_id}",
    response_model=Envelope[None],
    response_model_exclude_none=True,
    summary="Delete a problem",
)
async def delete_problem(
    problem_id: str,
    problem_service: ProblemService = Depends(get_problem_service),
):
    await problem_service.delete_problem(problem_id)
    return Envelope(message="Problem deleted successfully")
