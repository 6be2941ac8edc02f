"""Item discovery under a catalog root."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from catalog_validator.errors import RootNotFoundError


class ItemDirectory:
    """Lazy, restartable view of the item directories under *root*.

    Every iteration re-lists the root, so a new pass always reflects the
    current filesystem. Names are yielded in lexicographic order so repeated
    runs over an unchanged tree produce identical output. Plain files are
    skipped.

    Args:
        root: Catalog root such as ``skills/`` or ``templates/``.
        include_hidden: Whether dot-prefixed directories count as items.
    """

    def __init__(self, root: str | Path, include_hidden: bool = True) -> None:
        self.root = Path(root)
        self.include_hidden = include_hidden

    def require(self) -> Path:
        """Return the root, raising :class:`RootNotFoundError` if it is unusable."""
        if not self.root.is_dir():
            raise RootNotFoundError(self.root)
        return self.root

    def __iter__(self) -> Iterator[str]:
        root = self.require()
        names = sorted(entry.name for entry in root.iterdir() if entry.is_dir())
        for name in names:
            if not self.include_hidden and name.startswith("."):
                continue
            yield name

    def paths(self) -> Iterator[Path]:
        """Yield the full path of every item."""
        for name in self:
            yield self.root / name
