"""Command-line entry points.

Usage::

    validate-skills                      # checks ./skills/*/SKILL.md
    validate-templates                   # checks ./templates/*/
    catalog-validator skills --root path/to/skills --report run.json
    python -m catalog_validator templates --workers 4
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError
from rich.console import Console

from catalog_validator.config import Config
from catalog_validator.engine import PROFILES, validate_catalog
from catalog_validator.errors import RootNotFoundError
from catalog_validator.reporter import report_root_not_found, report_run
from catalog_validator.utils import print_error

EXIT_CONFIG_ERROR = 2


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=None,
        help="Catalog directory to scan (default: ./skills or ./templates)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (default: built from CATALOG_* environment variables)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of items checked concurrently (default: 1)",
    )
    parser.add_argument(
        "--report",
        default=None,
        help="Also write the run result as JSON to this file",
    )


def build_parser(command: Optional[str] = None) -> argparse.ArgumentParser:
    """Build the argument parser.

    Args:
        command: Fixed profile for the single-purpose scripts. ``None``
            builds the multi-command parser with a positional profile name.
    """
    if command is not None:
        parser = argparse.ArgumentParser(
            prog=f"validate-{command}",
            description=f"Validate every entry of the {command} catalog",
        )
    else:
        parser = argparse.ArgumentParser(
            prog="catalog-validator",
            description="Validate the skills and templates catalogs",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=(
                "Examples:\n"
                "  catalog-validator skills\n"
                "  catalog-validator templates --root ./templates --workers 4\n"
            ),
        )
        parser.add_argument("command", choices=sorted(PROFILES), help="Catalog to validate")
    _add_common_options(parser)
    return parser


def load_config(args: argparse.Namespace, command: str) -> Config:
    """Resolve configuration: flags override the file, the file replaces the environment."""
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    if args.root:
        getattr(config, command).root = Path(args.root)
    if args.workers is not None:
        config.max_workers = args.workers
    # Re-validate so flag values obey the same constraints as file values.
    return Config.model_validate(config.model_dump())


def run(command: str, args: argparse.Namespace, target: Console | None = None) -> int:
    """Run one catalog validation and return the process exit code."""
    try:
        config = load_config(args, command)
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Error: invalid configuration: {exc}", target)
        return EXIT_CONFIG_ERROR

    profile = PROFILES[command](config)
    try:
        result = validate_catalog(
            profile,
            max_workers=config.max_workers,
            include_hidden=config.include_hidden,
        )
    except RootNotFoundError as exc:
        return report_root_not_found(profile.label, exc.root, target)

    exit_code = report_run(result, target)
    if args.report:
        try:
            result.save(Path(args.report))
        except OSError as exc:
            print_error(f"Error: could not write report: {exc}", target)
            return EXIT_CONFIG_ERROR
    return exit_code


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``catalog-validator`` and ``python -m catalog_validator``."""
    args = build_parser().parse_args(argv)
    return run(args.command, args)


def validate_skills(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``validate-skills``."""
    return run("skills", build_parser("skills").parse_args(argv))


def validate_templates(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for ``validate-templates``."""
    return run("templates", build_parser("templates").parse_args(argv))
