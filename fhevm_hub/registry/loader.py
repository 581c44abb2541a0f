"""Example registry: the single lookup table shared by both generators.

The registry is built once per process, from the packaged ``examples.yaml``
or from a caller-supplied data file, and handed to the generators as a
parameter. It exposes no mutators.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import ExampleEntry

DEFAULT_REGISTRY_PATH = Path(__file__).parent / "examples.yaml"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class RegistryError(Exception):
    """Raised when registry data is malformed or inconsistent."""


class UnknownExampleError(RegistryError):
    """Raised when an example name is not a registry key."""

    def __init__(self, name: str, valid_names: list[str]) -> None:
        self.name = name
        self.valid_names = list(valid_names)
        super().__init__(
            f'Example "{name}" not found. '
            f"Available examples: {', '.join(self.valid_names)}"
        )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class ExampleRegistry:
    """Ordered, read-only mapping of example slug to :class:`ExampleEntry`."""

    def __init__(self, entries: dict[str, ExampleEntry]) -> None:
        self._entries = dict(entries)

    # -- Construction ------------------------------------------------------

    @classmethod
    def from_entries(cls, entries: Iterable[ExampleEntry]) -> "ExampleRegistry":
        """Build a registry, rejecting duplicate names."""
        table: dict[str, ExampleEntry] = {}
        for entry in entries:
            if entry.name in table:
                raise RegistryError(f"Duplicate example name in registry: {entry.name}")
            table[entry.name] = entry
        return cls(table)

    @classmethod
    def load(cls, path: str | Path) -> "ExampleRegistry":
        """Load and validate a registry YAML file.

        The file holds a top-level ``examples`` list; each item is a mapping
        with the :class:`ExampleEntry` fields.

        Raises:
            RegistryError: If the file cannot be read, is not valid YAML, or
                an entry fails validation.
        """
        file_path = Path(path)
        try:
            raw = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise RegistryError(f"Cannot read registry {file_path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise RegistryError(f"Invalid YAML in registry {file_path}: {exc}") from exc

        items = _extract_items(raw, file_path)
        entries: list[ExampleEntry] = []
        for index, item in enumerate(items):
            try:
                entries.append(ExampleEntry.model_validate(item))
            except ValidationError as exc:
                raise RegistryError(
                    f"Invalid entry #{index + 1} in registry {file_path}: {exc}"
                ) from exc
        return cls.from_entries(entries)

    @classmethod
    def default(cls) -> "ExampleRegistry":
        """Load the registry shipped with the package."""
        return cls.load(DEFAULT_REGISTRY_PATH)

    # -- Lookup ------------------------------------------------------------

    def lookup(self, name: str) -> ExampleEntry | None:
        return self._entries.get(name)

    def get(self, name: str) -> ExampleEntry:
        """Return the entry for *name* or raise :class:`UnknownExampleError`."""
        entry = self._entries.get(name)
        if entry is None:
            raise UnknownExampleError(name, self.list_names())
        return entry

    def list_names(self) -> list[str]:
        """Registry keys in insertion order."""
        return list(self._entries)

    def entries(self) -> list[ExampleEntry]:
        return list(self._entries.values())

    def __iter__(self) -> Iterator[ExampleEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"ExampleRegistry({self.list_names()!r})"


def _extract_items(raw: Any, file_path: Path) -> list[Any]:
    """Return the ``examples`` list from parsed registry YAML."""
    if not isinstance(raw, dict) or "examples" not in raw:
        raise RegistryError(f"Registry {file_path} must define a top-level 'examples' list")
    items = raw["examples"]
    if not isinstance(items, list):
        raise RegistryError(f"'examples' in registry {file_path} must be a list")
    return items
