"""Value objects describing a pbinfo problem."""

from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum


class ProblemDifficulty(str, Enum):
    """Difficulty level shown in a problem's restrictions table."""

    UNKNOWN = "unknown"
    EASY = "easy"
    MEDIUM = "medium"
    DIFFICULT = "difficult"
    CONTEST = "contest"

    def __str__(self) -> str:
        return self.value


# Romanian labels (already diacritic-folded and lowercased) for each level
DIFFICULTY_SYNONYMS: dict[ProblemDifficulty, tuple[str, ...]] = {
    ProblemDifficulty.EASY: ("easy", "usoara", "usor"),
    ProblemDifficulty.MEDIUM: ("medium", "medie", "mediu"),
    ProblemDifficulty.DIFFICULT: ("difficult", "dificila", "dificil"),
    ProblemDifficulty.CONTEST: ("contest", "concurs"),
}


@dataclass
class Problem:
    """A single pbinfo problem.

    Zero values mean "unknown" or "unlimited": grade 0, empty source, zero
    time/memory/stack limits. ``input_file`` and ``output_file`` are empty
    when the solution uses the standard streams, and ``None`` when the site's
    answer could not be trusted. ``score`` is ``None`` unless a solution was
    submitted before.
    """

    id: int
    name: str = ""
    publisher: str = ""
    grade: int = 0
    input_file: str | None = ""
    output_file: str | None = ""
    max_time: timedelta = field(default_factory=timedelta)
    max_memory_bytes: int = 0
    max_stack_bytes: int = 0
    source: str = ""
    authors: list[str] = field(default_factory=list)
    difficulty: ProblemDifficulty = ProblemDifficulty.UNKNOWN
    score: int | None = None

    @property
    def input_from_stdin(self) -> bool:
        return self.input_file == ""

    @property
    def output_to_stdout(self) -> bool:
        return self.output_file == ""

    @property
    def readable_max_memory(self) -> str:
        from domain.normalize import readable_size

        return readable_size(self.max_memory_bytes)

    @property
    def readable_max_stack(self) -> str:
        from domain.normalize import readable_size

        return readable_size(self.max_stack_bytes)
