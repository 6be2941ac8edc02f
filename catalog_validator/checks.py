"""Per-item structural checks.

Both checks are read-only and return an :class:`Outcome` instead of
raising. Only the first problem found is reported for an item.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from catalog_validator.errors import MalformedFrontMatterError, NoFrontMatterError
from catalog_validator.frontmatter import parse_front_matter
from catalog_validator.models import FailureKind, Outcome

REQUIRED_FIELDS: tuple[str, ...] = ("name", "description", "triggers")
DEFAULT_REQUIRED_FILES: tuple[str, ...] = ("README.md", ".env.example")
DEFAULT_MANIFEST = "package.json"


# ---------------------------------------------------------------------------
# Skills: front-matter schema
# ---------------------------------------------------------------------------


def check_skill_document(path: Path, min_triggers: int = 3) -> Outcome:
    """Validate the front matter of one skill descriptor document.

    Args:
        path: Path to the descriptor document (usually ``<skill>/SKILL.md``).
        min_triggers: Minimum length of the ``triggers`` list.

    Returns:
        ``Outcome.ok()`` when the document exists, its front matter parses and
        ``name``, ``description`` and ``triggers`` all have the right shape;
        otherwise a failing outcome describing the first problem.
    """
    path = Path(path)
    if not path.is_file():
        return Outcome.fail(FailureKind.MISSING_DOCUMENT, f"Missing {path.name}", path.name)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Outcome.fail(
            FailureKind.UNREADABLE_DOCUMENT, f"Unreadable {path.name}: {exc}", path.name
        )

    try:
        front_matter = parse_front_matter(text)
    except NoFrontMatterError as exc:
        return Outcome.fail(FailureKind.NO_FRONT_MATTER, str(exc))
    except MalformedFrontMatterError as exc:
        return Outcome.fail(FailureKind.MALFORMED_FRONT_MATTER, str(exc))

    for field in REQUIRED_FIELDS:
        if front_matter.get(field) is None:
            return Outcome.fail(
                FailureKind.MISSING_FIELD, f"Missing required field '{field}'", field
            )

    triggers = front_matter["triggers"]
    if not isinstance(triggers, list) or len(triggers) < min_triggers:
        return Outcome.fail(
            FailureKind.INVALID_FIELD_SHAPE,
            f"'triggers' must be a list with at least {min_triggers} items",
            "triggers",
        )

    for field in ("name", "description"):
        value = front_matter[field]
        if not isinstance(value, str) or not value.strip():
            return Outcome.fail(
                FailureKind.INVALID_FIELD_SHAPE, f"'{field}' must be a non-empty string", field
            )

    return Outcome.ok()


# ---------------------------------------------------------------------------
# Templates: directory completeness
# ---------------------------------------------------------------------------


def _reject_constant(name: str) -> None:
    # NaN and Infinity are Python extensions, not JSON.
    raise ValueError(f"Invalid JSON constant {name}")


def check_template_directory(
    path: Path,
    required_files: Sequence[str] = DEFAULT_REQUIRED_FILES,
    manifest: str | None = DEFAULT_MANIFEST,
) -> Outcome:
    """Validate that a template directory ships its required files.

    Args:
        path: The template directory.
        required_files: Filenames that must exist directly inside *path*,
            checked in order.
        manifest: Optional JSON file that must parse when present. ``None``
            skips the manifest check.
    """
    path = Path(path)
    for filename in required_files:
        if not (path / filename).is_file():
            return Outcome.fail(
                FailureKind.MISSING_REQUIRED_FILE, f"Missing {filename}", filename
            )

    if manifest is None:
        return Outcome.ok()

    manifest_path = path / manifest
    if not manifest_path.exists():
        return Outcome.ok()

    try:
        json.loads(manifest_path.read_text(encoding="utf-8"), parse_constant=_reject_constant)
    except (OSError, ValueError) as exc:
        return Outcome.fail(FailureKind.INVALID_MANIFEST, f"Invalid {manifest}: {exc}", manifest)

    return Outcome.ok()
