"""Pydantic schemas for the JSON form of problems and test cases."""

from datetime import timedelta

from pydantic import BaseModel, Field

from domain.models import Problem, ProblemDifficulty, TestCase


class ProblemSchema(BaseModel):
    """JSON representation of a problem."""

    id: int
    name: str = ""
    publisher: str = ""
    grade: int = 0
    input_file: str | None = ""  # "" for standard input, null when unknown
    output_file: str | None = ""  # "" for standard output, null when unknown
    max_time: float = Field(default=0.0, description="Time limit in seconds, 0 for none")
    max_memory_bytes: int = 0
    max_stack_bytes: int = 0
    source: str = ""
    authors: list[str] = Field(default_factory=list)
    difficulty: ProblemDifficulty = ProblemDifficulty.UNKNOWN
    score: int | None = None  # Only set when a solution was submitted

    @classmethod
    def from_domain(cls, problem: Problem) -> "ProblemSchema":
        return cls(
            id=problem.id,
            name=problem.name,
            publisher=problem.publisher,
            grade=problem.grade,
            input_file=problem.input_file,
            output_file=problem.output_file,
            max_time=problem.max_time.total_seconds(),
            max_memory_bytes=problem.max_memory_bytes,
            max_stack_bytes=problem.max_stack_bytes,
            source=problem.source,
            authors=list(problem.authors),
            difficulty=problem.difficulty,
            score=problem.score,
        )

    def to_domain(self) -> Problem:
        return Problem(
            id=self.id,
            name=self.name,
            publisher=self.publisher,
            grade=self.grade,
            input_file=self.input_file,
            output_file=self.output_file,
            max_time=timedelta(seconds=self.max_time),
            max_memory_bytes=self.max_memory_bytes,
            max_stack_bytes=self.max_stack_bytes,
            source=self.source,
            authors=list(self.authors),
            difficulty=self.difficulty,
            score=self.score,
        )


class TestCaseSchema(BaseModel):
    """JSON representation of a test case; contents are decoded as UTF-8."""

    __test__ = False

    input: str
    expected: str
    is_example: bool = False
    score: int = 0

    @classmethod
    def from_domain(cls, test_case: TestCase) -> "TestCaseSchema":
        return cls(
            input=test_case.input.decode(errors="replace"),
            expected=test_case.expected.decode(errors="replace"),
            is_example=test_case.is_example,
            score=test_case.score,
        )

    def to_domain(self) -> TestCase:
        return TestCase(
            input=self.input.encode(),
            expected=self.expected.encode(),
            is_example=self.is_example,
            score=self.score,
        )
