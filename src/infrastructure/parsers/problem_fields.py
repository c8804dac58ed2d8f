"""Column parsers for the restrictions table of a problem page.

The table sits under the ``section-restrictii`` anchor and has one body row.
Every column fills one field (or a pair of related fields) of a ``Problem``.
Values that cannot be parsed are logged and skipped, leaving the field at its
zero value.
"""

from dataclasses import dataclass
from typing import Callable, Sequence

from bs4 import Tag
from loguru import logger

from domain.models import Problem
from domain.normalize import (
    fold_diacritics,
    normalize_text,
    parse_difficulty,
    parse_human_size,
    parse_int,
    parse_seconds,
)

from .traverse import child_text, element_text

KEYBOARD_INPUT = "tastatura"
SCREEN_OUTPUT = "ecran"
TOTAL_MEMORY_TITLE = "Memorie totală"
STACK_SIZE_TITLE = "Dimensiunea stivei"


def _skip(problem: Problem, label: str, raw: str) -> None:
    logger.warning(f"Problem {problem.id}: could not parse {label} from {raw!r}, leaving it unset")


def _span_text(cell: Tag, title: str) -> str:
    span = cell.select_one(f'span[title="{title}"]')
    return element_text(span) if span is not None else ""


def parse_publisher(cell: Tag, problem: Problem) -> None:
    problem.publisher = normalize_text(child_text(cell, "span"))


def parse_grade(cell: Tag, problem: Problem) -> None:
    raw = normalize_text(element_text(cell))
    if not raw:
        return

    grade = parse_int(raw)
    if grade is None:
        _skip(problem, "grade", raw)
        return
    problem.grade = grade


def parse_input_output(cell: Tag, problem: Problem) -> None:
    raw = child_text(cell, "span")
    parts = raw.split("/")
    if len(parts) != 2:
        _skip(problem, "input/output", raw)
        problem.input_file = problem.output_file = None
        return

    input_file, output_file = (part.strip() for part in parts)
    if fold_diacritics(input_file) == KEYBOARD_INPUT or fold_diacritics(output_file) == SCREEN_OUTPUT:
        # The site names the standard streams instead of leaving the cell empty
        problem.input_file = problem.output_file = None
        return

    problem.input_file = input_file
    problem.output_file = output_file


def parse_time_limit(cell: Tag, problem: Problem) -> None:
    raw = normalize_text(element_text(cell))
    if not raw:
        return

    max_time = parse_seconds(raw)
    if max_time is None:
        _skip(problem, "time limit", raw)
        return
    problem.max_time = max_time


def parse_memory_limits(cell: Tag, problem: Problem) -> None:
    memory = _span_text(cell, TOTAL_MEMORY_TITLE)
    stack = _span_text(cell, STACK_SIZE_TITLE)

    memory_bytes = parse_human_size(memory)
    if memory_bytes is None:
        _skip(problem, "memory limit", memory)
    else:
        problem.max_memory_bytes = memory_bytes

    stack_bytes = parse_human_size(stack)
    if stack_bytes is None:
        _skip(problem, "stack limit", stack)
    else:
        problem.max_stack_bytes = stack_bytes


def parse_source(cell: Tag, problem: Problem) -> None:
    if text := normalize_text(element_text(cell)):
        problem.source = text


def parse_authors(cell: Tag, problem: Problem) -> None:
    text = normalize_text(element_text(cell))
    if not text:
        return
    problem.authors = [author.strip() for author in text.split(",")]


def parse_problem_difficulty(cell: Tag, problem: Problem) -> None:
    problem.difficulty = parse_difficulty(element_text(cell))


def parse_score(cell: Tag, problem: Problem) -> None:
    raw = normalize_text(element_text(cell))
    if not raw:
        return

    score = parse_int(raw)
    if score is None:
        _skip(problem, "score", raw)
        return
    problem.score = score


@dataclass(frozen=True)
class FieldColumn:
    """Binds one column of the restrictions table to the parser of its field."""

    index: int
    label: str
    # Diacritic-folded, lowercase fragment expected in the column header
    header_keyword: str
    parse: Callable[[Tag, Problem], None]
    optional: bool = False


FIELD_COLUMNS: tuple[FieldColumn, ...] = (
    FieldColumn(0, "publisher", "postat", parse_publisher),
    FieldColumn(1, "grade", "clasa", parse_grade),
    FieldColumn(2, "input/output", "intrare", parse_input_output),
    FieldColumn(3, "time limit", "timp", parse_time_limit),
    FieldColumn(4, "memory limits", "memori", parse_memory_limits),
    FieldColumn(5, "source", "sursa", parse_source),
    FieldColumn(6, "authors", "autor", parse_authors),
    FieldColumn(7, "difficulty", "dificultate", parse_problem_difficulty),
    FieldColumn(8, "score", "scor", parse_score, optional=True),
)

MIN_COLUMNS = sum(1 for column in FIELD_COLUMNS if not column.optional)
MAX_COLUMNS = len(FIELD_COLUMNS)


def _check_bindings(columns: Sequence[FieldColumn]) -> None:
    for position, column in enumerate(columns):
        if column.index != position:
            raise RuntimeError(
                f"Column {column.label!r} is bound to index {column.index} "
                f"but listed at position {position}"
            )
        if column.optional and position + 1 < len(columns) and not columns[position + 1].optional:
            raise RuntimeError(f"Optional column {column.label!r} must come last")


_check_bindings(FIELD_COLUMNS)


def check_headers(headers: Sequence[str], problem_id: int) -> None:
    """Warn about header cells that do not look like the column they are bound to."""
    for column, header in zip(FIELD_COLUMNS, headers):
        folded = fold_diacritics(normalize_text(header))
        if column.header_keyword not in folded:
            logger.warning(
                f"Problem {problem_id}: column {column.index} is parsed as {column.label} "
                f"but its header reads {header.strip()!r}"
            )


def apply_columns(cells: Sequence[Tag], problem: Problem) -> None:
    """Run every column parser over its cell, in order."""
    for column, cell in zip(FIELD_COLUMNS, cells):
        column.parse(cell, problem)
