"""GitBook ``SUMMARY.md`` index renderer."""

from __future__ import annotations

from collections.abc import Iterable

from fhevm_hub.registry import ExampleEntry
from fhevm_hub.utils import capitalize_first


def group_by_category(entries: Iterable[ExampleEntry]) -> dict[str, list[ExampleEntry]]:
    """Group entries by category.

    Categories keep first-seen order and entries keep their input order
    within a category. An entry name seen twice is only listed once.
    """
    groups: dict[str, list[ExampleEntry]] = {}
    seen: set[str] = set()
    for entry in entries:
        if entry.name in seen:
            continue
        seen.add(entry.name)
        groups.setdefault(entry.category, []).append(entry)
    return groups


def render_summary(entries: Iterable[ExampleEntry]) -> str:
    """Render the category-grouped table of contents."""
    lines = [
        "# FHEVM Examples",
        "",
        "## Table of Contents",
        "",
    ]
    for category, members in group_by_category(entries).items():
        lines.append(f"### {capitalize_first(category)}")
        lines.append("")
        for entry in members:
            lines.append(f"- [{entry.title}](./{entry.doc_filename})")
        lines.append("")
    return "\n".join(lines)
