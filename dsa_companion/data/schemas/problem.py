from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field as PydanticField
from sqlalchemy import Column, Text
from sqlmodel import Field

from dsa_companion.data.schemas.base import BaseTable, CamelModel
from dsa_companion.data.schemas.enums import Difficulty


class Problem(BaseTable, table=True):
    """
    A practice problem. Test cases are kept as a JSON array in a single
    text column and decoded by the repository on the way out.
    """

    __tablename__ = "problems"

    title: str = Field(nullable=False)
    description: str = Field(sa_column=Column(Text, nullable=False))
    difficulty: str = Field(index=True, nullable=False)
    category: str = Field(index=True, nullable=False)
    test_cases: str = Field(sa_column=Column(Text, nullable=False))
    solution_template: Optional[str] = Field(
        default=None, sa_column=Column(Text, nullable=True)
    )


class TestCase(CamelModel):
    """
    One example of a problem's expected behaviour. Input and output hold any
    JSON value, so `[2, 7]` and `"2,7"` are both accepted and stored as given.
    """

    __test__ = False  # keep pytest from collecting this class

    input: Any
    output: Any
    explanation: str = ""


class ProblemBase(CamelModel):
    title: str = PydanticField(..., min_length=1)
    description: str = PydanticField(..., min_length=1)
    difficulty: Difficulty
    category: str = PydanticField(..., min_length=1)
    test_cases: List[TestCase]
    solution_template: Optional[str] = None


class ProblemCreate(ProblemBase):
    pass


class ProblemUpdate(CamelModel):
    title: Optional[str] = PydanticField(None, min_length=1)
    description: Optional[str] = PydanticField(None, min_length=1)
    difficulty: Optional[Difficulty] = None
    category: Optional[str] = PydanticField(None, min_length=1)
    test_cases: Optional[List[TestCase]] = None
    solution_template: Optional[str] = None


class ProblemResponse(ProblemBase):
    id: str
    created_at: datetime
    updated_at: datetime


class ProblemFilters(CamelModel):
    difficulty: Optional[Difficulty] = None
    category: Optional[str] = None
    limit: int = 50
    offset: int = 0
