"""Generic directory-of-items validation engine.

A :class:`CheckProfile` says where the items live, where the thing to check
sits inside each item, and which check to run. The skills and templates
validators are two profiles of the same engine.

Quick usage::

    from catalog_validator.config import Config
    from catalog_validator.engine import skills_profile, validate_catalog

    result = validate_catalog(skills_profile(Config()))
    raise SystemExit(result.exit_code)
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import Optional

from catalog_validator.checks import check_skill_document, check_template_directory
from catalog_validator.config import Config
from catalog_validator.discovery import ItemDirectory
from catalog_validator.models import FailureKind, ItemResult, Outcome, RunResult

Check = Callable[[Path], Outcome]


@dataclass(frozen=True)
class CheckProfile:
    """One configuration of the engine.

    Attributes:
        label: Plural noun used in reports, e.g. ``"skills"``.
        root: Directory whose immediate subdirectories are the items.
        check: Called with the located target, returns an outcome.
        subpath: Target inside each item. ``None`` checks the item directory
            itself.
    """

    label: str
    root: Path
    check: Check
    subpath: Optional[str] = None

    def locate(self, item: str) -> Path:
        """Return the path the check should receive for *item*."""
        item_dir = self.root / item
        return item_dir / self.subpath if self.subpath else item_dir

    def display_name(self, item: str) -> str:
        return f"{item}/{self.subpath}" if self.subpath else item


def skills_profile(config: Config) -> CheckProfile:
    """Profile that validates ``<root>/<skill>/SKILL.md`` front matter."""
    skills = config.skills
    return CheckProfile(
        label="skills",
        root=skills.root,
        check=partial(check_skill_document, min_triggers=skills.min_triggers),
        subpath=skills.document,
    )


def templates_profile(config: Config) -> CheckProfile:
    """Profile that validates ``<root>/<template>/`` completeness."""
    templates = config.templates
    return CheckProfile(
        label="templates",
        root=templates.root,
        check=partial(
            check_template_directory,
            required_files=tuple(templates.required_files),
            manifest=templates.manifest,
        ),
    )


PROFILES: dict[str, Callable[[Config], CheckProfile]] = {
    "skills": skills_profile,
    "templates": templates_profile,
}


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


def check_item(profile: CheckProfile, item: str) -> ItemResult:
    """Run the profile's check for one item.

    Anything that escapes the check is turned into a failing outcome so one
    broken item can never abort the rest of the run.
    """
    target = profile.locate(item)
    try:
        outcome = profile.check(target)
    except Exception as exc:  # noqa: BLE001
        # The item boundary: record the failure and keep going.
        outcome = Outcome.fail(FailureKind.CHECK_ERROR, f"{type(exc).__name__}: {exc}")
    return ItemResult(item=item, label=profile.display_name(item), outcome=outcome)


def validate_catalog(
    profile: CheckProfile,
    max_workers: int = 1,
    include_hidden: bool = True,
) -> RunResult:
    """Validate every item under the profile's root.

    Args:
        profile: What to check and where.
        max_workers: Items checked concurrently. Results always come back in
            discovery order, so the report does not depend on this value.
        include_hidden: Whether dot-prefixed item directories are included.

    Returns:
        The folded :class:`RunResult`.

    Raises:
        RootNotFoundError: If the profile's root is missing or not a
            directory.
    """
    items = ItemDirectory(profile.root, include_hidden=include_hidden)
    names = list(items)

    if max_workers > 1 and len(names) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(partial(check_item, profile), names))
    else:
        results = [check_item(profile, name) for name in names]

    return RunResult.from_results(results, label=profile.label, root=profile.root)
