"""Catalog validator configuration.

Typed configuration for both checking profiles. All settings use Pydantic v2
models so they are validated at construction time and can be serialised
to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class SkillsConfig(BaseModel):
    """Where skills live and what their front matter must contain."""

    root: Path = Field(default=Path("skills"), description="Directory holding one folder per skill")
    document: str = Field(default="SKILL.md", description="Descriptor document inside each skill")
    min_triggers: int = Field(
        default=3, ge=0, description="Minimum number of entries in the 'triggers' list"
    )


class TemplatesConfig(BaseModel):
    """Where templates live and which files each one must ship."""

    root: Path = Field(default=Path("templates"), description="Directory holding one folder per template")
    required_files: list[str] = Field(
        default_factory=lambda: ["README.md", ".env.example"],
        description="Files that must exist directly inside every template, checked in order",
    )
    manifest: Optional[str] = Field(
        default="package.json",
        description="Optional JSON manifest that must parse when present (None disables the check)",
    )


class Config(BaseModel):
    """Global validator configuration.

    Created once by the CLI entry point (from defaults, a JSON file or the
    environment) and handed to the profile builders in
    :mod:`catalog_validator.engine`.
    """

    skills: SkillsConfig = Field(default_factory=SkillsConfig)
    templates: TemplatesConfig = Field(default_factory=TemplatesConfig)
    max_workers: int = Field(
        default=1, ge=1, description="Items checked concurrently; 1 keeps the run sequential"
    )
    include_hidden: bool = Field(
        default=True, description="Whether dot-prefixed item directories are validated"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file. Parent directories are created.

        Returns:
            The path that was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a configuration previously written by :meth:`save`."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CATALOG_SKILLS_DIR, CATALOG_TEMPLATES_DIR, CATALOG_MIN_TRIGGERS,
            CATALOG_MAX_WORKERS, CATALOG_INCLUDE_HIDDEN.
        """
        skills_kwargs: dict[str, Any] = {}
        if os.environ.get("CATALOG_SKILLS_DIR"):
            skills_kwargs["root"] = Path(os.environ["CATALOG_SKILLS_DIR"])
        if os.environ.get("CATALOG_MIN_TRIGGERS"):
            skills_kwargs["min_triggers"] = int(os.environ["CATALOG_MIN_TRIGGERS"])

        templates_kwargs: dict[str, Any] = {}
        if os.environ.get("CATALOG_TEMPLATES_DIR"):
            templates_kwargs["root"] = Path(os.environ["CATALOG_TEMPLATES_DIR"])

        kwargs: dict[str, Any] = {}
        if os.environ.get("CATALOG_MAX_WORKERS"):
            kwargs["max_workers"] = int(os.environ["CATALOG_MAX_WORKERS"])
        if os.environ.get("CATALOG_INCLUDE_HIDDEN"):
            kwargs["include_hidden"] = os.environ["CATALOG_INCLUDE_HIDDEN"].strip().lower() in (
                "1",
                "true",
                "yes",
                "on",
            )

        return cls(
            skills=SkillsConfig(**skills_kwargs),
            templates=TemplatesConfig(**templates_kwargs),
            **kwargs,
        )
