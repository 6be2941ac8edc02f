"""Shared pytest fixtures for the catalog validator test suite.

Provides reusable fixtures for:
- Temporary skills/ and templates/ catalog roots
- Factories that write valid (or deliberately broken) items
- A Rich console that records output for assertions
"""

from __future__ import annotations

import io
import json
import textwrap
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console


VALID_SKILL = textwrap.dedent("""\
    ---
    name: "Deploy Helper"
    description: "Ships the current branch to staging"
    triggers:
      - deploy
      - ship it
      - release to staging
    ---

    # Deploy Helper

    Body text is free-form markdown.
""")


def front_matter_document(**fields: Any) -> str:
    """Render a SKILL.md whose front matter holds exactly *fields*."""
    lines = ["---"]
    for key, value in fields.items():
        lines.append(f"{key}: {json.dumps(value)}")
    lines.append("---")
    lines.append("")
    lines.append("Body.")
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# Catalog roots
# ---------------------------------------------------------------------------

@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    """Empty skills/ catalog directory."""
    root = tmp_path / "skills"
    root.mkdir()
    yield root


@pytest.fixture
def templates_root(tmp_path: Path) -> Path:
    """Empty templates/ catalog directory."""
    root = tmp_path / "templates"
    root.mkdir()
    yield root


# ---------------------------------------------------------------------------
# Item factories
# ---------------------------------------------------------------------------

@pytest.fixture
def make_skill(skills_root: Path) -> Callable[..., Path]:
    """Factory that writes ``<skills_root>/<name>/SKILL.md``.

    Usage:
        make_skill("alpha")                      # valid document
        make_skill("beta", content="no header")  # custom content
        make_skill("gamma", content=None)        # directory without SKILL.md
    """

    def _make(name: str, content: str | None = VALID_SKILL) -> Path:
        skill_dir = skills_root / name
        skill_dir.mkdir(parents=True, exist_ok=True)
        if content is not None:
            (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        return skill_dir

    return _make


@pytest.fixture
def make_template(templates_root: Path) -> Callable[..., Path]:
    """Factory that writes a template directory.

    By default the template has README.md and .env.example and no
    package.json. Pass ``files`` to choose the files explicitly and
    ``manifest`` to add a package.json with the given raw text.
    """

    def _make(
        name: str,
        files: tuple[str, ...] = ("README.md", ".env.example"),
        manifest: str | None = None,
    ) -> Path:
        template_dir = templates_root / name
        template_dir.mkdir(parents=True, exist_ok=True)
        for filename in files:
            (template_dir / filename).write_text(f"# {name} {filename}\n", encoding="utf-8")
        if manifest is not None:
            (template_dir / "package.json").write_text(manifest, encoding="utf-8")
        return template_dir

    return _make


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_console() -> Console:
    """Narrow, colourless console writing to an in-memory buffer.

    Read the output with ``recording_console.file.getvalue()``.
    """
    return Console(file=io.StringIO(), width=40, color_system=None)


# ---------------------------------------------------------------------------
# Document content
# ---------------------------------------------------------------------------

@pytest.fixture
def valid_skill_text() -> str:
    """A SKILL.md that satisfies every front-matter rule."""
    return VALID_SKILL


@pytest.fixture
def skill_document() -> Callable[..., str]:
    """Factory rendering a SKILL.md from keyword fields (see ``front_matter_document``)."""
    return front_matter_document
