"""Unit tests for problem page parsing: restrictions, title and examples."""

from datetime import timedelta

import pytest

from domain.exceptions import HTTPStatusError, RetrievalError, StructuralMismatchError
from domain.models import Problem, ProblemDifficulty, TestCase
from infrastructure.http_client import AsyncHTTPClient
from infrastructure.parsers import ProblemPageParser


@pytest.fixture
def parser(fake_pbinfo):
    return ProblemPageParser(AsyncHTTPClient(transport=fake_pbinfo.transport))


@pytest.mark.asyncio
async def test_parse_problem_with_missing_fields(parser):
    problem = await parser.parse_problem_page(100)

    assert problem == Problem(
        id=100,
        name="NrApPrime",
        publisher="Candale Silviu (silviu)",
        grade=9,
        input_file="nrapprime.in",
        output_file="nrapprime.out",
        max_time=timedelta(milliseconds=100),
        max_memory_bytes=64_000_000,
        max_stack_bytes=8_000_000,
        difficulty=ProblemDifficulty.EASY,
    )
    assert problem.score is None
    assert problem.readable_max_memory == "64MB"


@pytest.mark.asyncio
async def test_parse_problem_with_all_fields(parser):
    problem = await parser.parse_problem_page(3860)

    assert problem == Problem(
        id=3860,
        name="consecutive1",
        publisher="Pracsiu Dan (dnprx)",
        grade=9,
        input_file=None,
        output_file=None,
        max_time=timedelta(seconds=1),
        max_memory_bytes=256_000_000,
        max_stack_bytes=8_000_000,
        source="EJOI 2021, sesiunea de antrenament",
        authors=["Dan Pracsiu", "Marinel Șerban"],
        difficulty=ProblemDifficulty.CONTEST,
        score=100,
    )


@pytest.mark.asyncio
async def test_missing_restrictions_table_is_structural_error(parser):
    with pytest.raises(StructuralMismatchError) as exc_info:
        await parser.parse_problem_page(5)

    assert exc_info.value.problem_id == 5
    assert exc_info.value.operation == "find_problem_by_id"


@pytest.mark.asyncio
async def test_missing_title_is_structural_error(fake_pbinfo, parser):
    fake_pbinfo.pages[6] = fake_pbinfo.pages[100].replace('class="text-primary"', 'class="title"')

    with pytest.raises(StructuralMismatchError, match="title"):
        await parser.parse_problem_page(6)


@pytest.mark.asyncio
@pytest.mark.parametrize("removed, kept", [("<td>-</td>", 7), ("", 10)])
async def test_wrong_column_count_is_structural_error(fake_pbinfo, parser, removed, kept):
    page = fake_pbinfo.pages[100]
    if removed:
        page = page.replace(removed, "", 1)
    else:
        page = page.replace("<td>ușoară</td>", "<td>ușoară</td><td>1</td><td>2</td>")
    fake_pbinfo.pages[7] = page

    with pytest.raises(StructuralMismatchError, match=f"has {kept} columns"):
        await parser.parse_problem_page(7)


@pytest.mark.asyncio
async def test_unknown_problem_wraps_status_error(parser):
    with pytest.raises(RetrievalError) as exc_info:
        await parser.parse_problem_page(999)

    assert not isinstance(exc_info.value, StructuralMismatchError)
    assert isinstance(exc_info.value.__cause__, HTTPStatusError)
    assert "999" in str(exc_info.value)


@pytest.mark.asyncio
async def test_parse_examples_pairs_blocks_in_order(parser):
    examples = await parser.parse_examples(3860)

    assert examples == [
        TestCase(input=b"4\n1 2 3 4", expected=b"4", is_example=True),
        TestCase(input=b"3\n5 1 9", expected=b"1", is_example=True),
    ]


@pytest.mark.asyncio
async def test_parse_examples_with_odd_block_count_fails(fake_pbinfo, parser):
    fake_pbinfo.pages[8] = fake_pbinfo.pages[100].replace("<pre>3</pre>", "")

    with pytest.raises(StructuralMismatchError, match="1 content chunks"):
        await parser.parse_examples(8)


@pytest.mark.asyncio
async def test_parser_without_http_client_fails():
    with pytest.raises(RetrievalError, match="HTTP client not initialized"):
        await ProblemPageParser().parse_problem_page(1)


@pytest.mark.asyncio
async def test_restrictions_table_without_explicit_tbody(fake_pbinfo, parser):
    page = fake_pbinfo.pages[100]
    fake_pbinfo.pages[9] = page.replace("<tbody>", "").replace("</tbody>", "")

    problem = await parser.parse_problem_page(9)

    assert problem.name == "NrApPrime"
    assert problem.grade == 9
    assert problem.max_memory_bytes == 64_000_000


@pytest.mark.asyncio
async def test_leading_newline_of_example_block_is_dropped(fake_pbinfo, parser):
    page = fake_pbinfo.pages[100]
    fake_pbinfo.pages[10] = page.replace("<pre>5\n", "<pre>\n5\n").replace("<pre>3", "<pre>\n3")

    examples = await parser.parse_examples(10)

    assert examples == [TestCase(input=b"5\n11 4 6 13 7", expected=b"3", is_example=True)]
