from mpa_judge.models.report import ReportRun, ResultRow, Spec, Suite, TestCase, TestResult
from mpa_judge.models.repertoire import RepertoireEntry
from mpa_judge.models.seed import IdentitySeed

__all__ = [
    "IdentitySeed",
    "RepertoireEntry",
    "ReportRun",
    "ResultRow",
    "Spec",
    "Suite",
    "TestCase",
    "TestResult",
]
