"""Validation outcomes and run aggregation.

Each per-item check returns an :class:`Outcome` value instead of raising.
A :class:`RunResult` is a pure fold over the ordered :class:`ItemResult`
sequence: counts, failure messages and the exit code are all derived, so no
counters are shared between items.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field, computed_field


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class FailureKind(str, Enum):
    """Why an item failed validation."""
    MISSING_DOCUMENT = "missing_document"
    NO_FRONT_MATTER = "no_front_matter"
    MALFORMED_FRONT_MATTER = "malformed_front_matter"
    MISSING_FIELD = "missing_field"
    INVALID_FIELD_SHAPE = "invalid_field_shape"
    MISSING_REQUIRED_FILE = "missing_required_file"
    INVALID_MANIFEST = "invalid_manifest"
    UNREADABLE_DOCUMENT = "unreadable_document"
    CHECK_ERROR = "check_error"


# ---------------------------------------------------------------------------
# Per-item outcome
# ---------------------------------------------------------------------------

class Outcome(BaseModel):
    """Pass, or Fail with a one-line reason."""

    passed: bool = Field(..., description="Overall pass/fail verdict")
    kind: Optional[FailureKind] = Field(default=None, description="Failure category; None on pass")
    reason: str = Field(default="", description="Human-readable single-line reason")
    subject: str = Field(
        default="", description="Field or file the failure is about, when there is one"
    )

    @classmethod
    def ok(cls) -> "Outcome":
        return cls(passed=True)

    @classmethod
    def fail(cls, kind: FailureKind, reason: str, subject: str = "") -> "Outcome":
        # Parser messages can span several lines; reports are one line per item.
        return cls(passed=False, kind=kind, reason=" ".join(reason.split()), subject=subject)


class ItemResult(BaseModel):
    """The outcome of checking one item directory."""

    item: str = Field(..., description="Item directory name")
    label: str = Field(..., description="Display label, '<item>' or '<item>/<subpath>'")
    outcome: Outcome

    @computed_field  # type: ignore[misc]
    @property
    def passed(self) -> bool:
        return self.outcome.passed

    @property
    def message(self) -> str:
        """``<label>`` on pass, ``<label>: <reason>`` on failure."""
        if self.outcome.passed:
            return self.label
        return f"{self.label}: {self.outcome.reason}"


# ---------------------------------------------------------------------------
# Run aggregate
# ---------------------------------------------------------------------------

class RunResult(BaseModel):
    """Aggregate of one validation pass, in discovery order."""

    label: str = Field(default="", description="Profile label such as 'skills' or 'templates'")
    root: str = Field(default="", description="Root directory that was scanned")
    items: list[ItemResult] = Field(default_factory=list)

    @classmethod
    def from_results(
        cls, results: Iterable[ItemResult], label: str = "", root: str | Path = ""
    ) -> "RunResult":
        """Fold an ordered sequence of item results into a run result."""
        return cls(label=label, root=str(root), items=list(results))

    @computed_field  # type: ignore[misc]
    @property
    def total(self) -> int:
        return len(self.items)

    @computed_field  # type: ignore[misc]
    @property
    def passed(self) -> int:
        return sum(1 for item in self.items if item.passed)

    @computed_field  # type: ignore[misc]
    @property
    def failed(self) -> int:
        return self.total - self.passed

    @computed_field  # type: ignore[misc]
    @property
    def all_passed(self) -> bool:
        """True when no item failed. An empty run counts as passing."""
        return self.failed == 0

    @property
    def failures(self) -> list[str]:
        """Failure messages in discovery order."""
        return [item.message for item in self.items if not item.passed]

    @property
    def exit_code(self) -> int:
        return 0 if self.all_passed else 1

    # -- Serialisation helpers -----------------------------------------------

    def to_json(self, indent: int = 2) -> str:
        """Serialise the full result to a JSON string."""
        return self.model_dump_json(indent=indent)

    def save(self, path: Path) -> None:
        """Persist the result to a JSON file, creating parent directories as needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding="utf-8")

    @classmethod
    def load(cls, path: Path) -> "RunResult":
        """Load a result written by :meth:`save`."""
        raw = Path(path).read_text(encoding="utf-8")
        # Serialised computed fields are ignored on input.
        return cls.model_validate_json(raw)

    def summary_dict(self) -> dict[str, Any]:
        """Condensed summary suitable for logs and reports."""
        return {
            "label": self.label,
            "root": self.root,
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "all_passed": self.all_passed,
            "failures": self.failures,
        }
