"""Domain models package."""

from .problem import DIFFICULTY_SYNONYMS, Problem, ProblemDifficulty
from .test_case import TestCase

__all__ = [
    "DIFFICULTY_SYNONYMS",
    "Problem",
    "ProblemDifficulty",
    "TestCase",
]
