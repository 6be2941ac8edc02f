"""Front-matter extraction and parsing for descriptor documents.

A descriptor document opens with a YAML block fenced by two lines that
consist solely of ``---``::

    ---
    name: Gamma
    description: Short summary
    triggers: [deploy, release, ship]
    ---

    Free-form markdown body.
"""

from __future__ import annotations

from typing import Any

import yaml

from catalog_validator.errors import MalformedFrontMatterError, NoFrontMatterError

DELIMITER = "---"

FrontMatter = dict[str, Any]


def extract_front_matter(text: str) -> str | None:
    """Return the raw text between the opening and closing delimiters.

    The opening delimiter must be the very first line (a UTF-8 byte-order
    mark and trailing whitespace are tolerated). Returns ``None`` when the
    document has no delimited block.
    """
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].rstrip() != DELIMITER:
        return None

    for index in range(1, len(lines)):
        if lines[index].rstrip() == DELIMITER:
            return "\n".join(lines[1:index])
    return None


def parse_front_matter(text: str) -> FrontMatter:
    """Extract and parse the front matter of *text* into a mapping.

    Args:
        text: Full contents of a descriptor document.

    Returns:
        The parsed mapping. An empty block yields an empty mapping.

    Raises:
        NoFrontMatterError: If the document has no delimited block.
        MalformedFrontMatterError: If the block is not valid YAML or does not
            describe a key/value mapping.
    """
    block = extract_front_matter(text)
    if block is None:
        raise NoFrontMatterError()

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as exc:
        raise MalformedFrontMatterError(str(exc)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontMatterError(
            f"expected a key/value mapping, got {type(data).__name__}"
        )
    return data
