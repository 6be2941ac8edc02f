"""Exception hierarchy for the catalog validator.

Only :class:`RootNotFoundError` is allowed to abort a run. The front-matter
errors are raised by the parser and converted into failing outcomes by the
per-item checks, so they never reach the reporter.
"""

from __future__ import annotations

from pathlib import Path


class CatalogValidatorError(Exception):
    """Base class for every error raised by this package."""


class RootNotFoundError(CatalogValidatorError):
    """Raised when a catalog root is missing or is not a directory."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)
        super().__init__(f"Catalog root not found: {self.root}")


class NoFrontMatterError(CatalogValidatorError):
    """The document does not open with a ``---`` delimited block."""

    def __init__(self, message: str = "No frontmatter found") -> None:
        super().__init__(message)


class MalformedFrontMatterError(CatalogValidatorError):
    """The front-matter block exists but is not a YAML mapping."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid YAML: {detail}")
