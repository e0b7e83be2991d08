from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class Attachment:
    name: str | None = None
    path: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Attachment:
        raw = _as_mapping(raw)
        return cls(name=raw.get("name"), path=raw.get("path"))


@dataclass(frozen=True)
class TestResult:
    """
    One attempt of a test (Playwright `results[]` entry).
    """

    __test__ = False

    status: str | None = None
    error_message: str | None = None
    attachments: tuple[Attachment, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> TestResult:
        raw = _as_mapping(raw)
        error = raw.get("error")
        message = _as_mapping(error).get("message") if error else None
        return cls(
            status=raw.get("status"),
            error_message=str(message) if message else None,
            attachments=tuple(Attachment.from_dict(a) for a in _as_list(raw.get("attachments"))),
        )

    def screenshot_path(self) -> str | None:
        screenshot = next((a for a in self.attachments if a.name == "screenshot"), None)
        if screenshot is not None and screenshot.path:
            return screenshot.path
        return None


@dataclass(frozen=True)
class TestCase:
    __test__ = False

    results: tuple[TestResult, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> TestCase:
        raw = _as_mapping(raw)
        return cls(results=tuple(TestResult.from_dict(r) for r in _as_list(raw.get("results"))))

    @property
    def first_result(self) -> TestResult | None:
        return self.results[0] if self.results else None


@dataclass(frozen=True)
class Spec:
    title: str = ""
    tests: tuple[TestCase, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Spec:
        raw = _as_mapping(raw)
        title = raw.get("title")
        return cls(
            title="" if title is None else str(title),
            tests=tuple(TestCase.from_dict(t) for t in _as_list(raw.get("tests"))),
        )


@dataclass(frozen=True)
class Suite:
    title: str | None = None
    specs: tuple[Spec, ...] = ()
    suites: tuple[Suite, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Suite:
        raw = _as_mapping(raw)
        return cls(
            title=raw.get("title"),
            specs=tuple(Spec.from_dict(s) for s in _as_list(raw.get("specs"))),
            suites=tuple(Suite.from_dict(s) for s in _as_list(raw.get("suites"))),
        )


@dataclass(frozen=True)
class ReportRun:
    """
    Top level of a Playwright JSON reporter file.

    `suites` is required; a missing key raises KeyError just like a malformed
    file would.
    """

    suites: tuple[Suite, ...]
    start_time: str | None = None
    base_url: str | None = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> ReportRun:
        metadata = _as_mapping(raw.get("metadata"))
        base_url = metadata.get("baseURL")
        return cls(
            suites=tuple(Suite.from_dict(s) for s in raw["suites"]),
            start_time=metadata.get("startTime") or None,
            base_url=str(base_url) if base_url else None,
        )


@dataclass(frozen=True)
class ResultRow:
    title: str
    status: str
    error: str = ""
    screenshot_path: str = ""

    @property
    def passed(self) -> bool:
        return self.status == "passed"

