from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from ..core.files import DocumentStore

if TYPE_CHECKING:
    from ..config import Config


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Issue:
    file: str
    message: str
    line: int | None = None
    detail: str | None = None

    @property
    def location(self) -> str:
        return f"{self.file}:{self.line}" if self.line else self.file


@dataclass(frozen=True)
class CheckOutcome:
    issues: tuple[Issue, ...] = ()
    files_checked: int = 0


@dataclass(frozen=True)
class CheckContext:
    root: Path
    docs_dir: Path
    assets_dir: Path
    summary_path: Path
    redirects_path: Path
    config: Config
    files: tuple[str, ...]
    documents: DocumentStore = field(repr=False, compare=False, default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.documents is None:
            object.__setattr__(self, "documents", DocumentStore(self.docs_dir))

    @property
    def summary_name(self) -> str:
        return self.config.summary

    def read(self, rel: str) -> str | None:
        return self.documents.read(rel)


CheckFn = Callable[[CheckContext], CheckOutcome]


@dataclass(frozen=True)
class CheckDef:
    check_id: str
    name: str
    severity: Severity
    fn: CheckFn
    description: str = ""

    def run(self, ctx: CheckContext) -> CheckOutcome:
        return self.fn(ctx)


@dataclass(frozen=True)
class CheckResult:
    check_id: str
    name: str
    severity: Severity
    issues: tuple[Issue, ...] = ()
    files_checked: int = 0
    duration_ms: int = 0

    @property
    def failed(self) -> bool:
        return bool(self.issues)

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR and self.failed

    @property
    def is_warning(self) -> bool:
        return self.severity == Severity.WARNING and self.failed


__all__ = [
    "CheckContext",
    "CheckDef",
    "CheckFn",
    "CheckOutcome",
    "CheckResult",
    "Issue",
    "Severity",
]
