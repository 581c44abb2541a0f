"""Pydantic model for a single example registry entry."""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field

SLUG_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"
PACKAGE_PREFIX = "fhevm-example-"


class ExampleEntry(BaseModel):
    """Display metadata and source locations for one teaching example.

    Entries are frozen: the registry is load-once data and nothing edits an
    entry after validation. ``contract_path`` and ``test_path`` may point at
    files that do not exist; the generators handle that case themselves.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., pattern=SLUG_PATTERN, description="Unique lowercase, hyphenated slug")
    title: str = Field(..., min_length=1, description="Human-readable display title")
    description: str = Field(default="", description="One-paragraph summary")
    doc_description: str = Field(
        default="",
        description="Overview text for documentation pages; falls back to description",
    )
    contract_path: str = Field(..., min_length=1, description="Contract source, relative to the hub root")
    test_path: str = Field(..., min_length=1, description="Test source, relative to the hub root")
    category: str = Field(default="basic", min_length=1, description="Grouping tag, e.g. 'basic' or 'advanced'")
    concepts: tuple[str, ...] = Field(default=(), description="Ordered concept tags")
    concept_labels: tuple[str, ...] = Field(
        default=(),
        description="Human-readable concept names for documentation pages",
    )

    @property
    def contract_filename(self) -> str:
        return PurePosixPath(self.contract_path).name

    @property
    def test_filename(self) -> str:
        return PurePosixPath(self.test_path).name

    @property
    def package_name(self) -> str:
        """npm package name of the scaffolded project."""
        return f"{PACKAGE_PREFIX}{self.name}"

    @property
    def doc_filename(self) -> str:
        return f"{self.name}.md"

    @property
    def display_concepts(self) -> tuple[str, ...]:
        """Concept labels for documentation, falling back to the raw tags."""
        return self.concept_labels or self.concepts

    @property
    def page_description(self) -> str:
        return self.doc_description or self.description
