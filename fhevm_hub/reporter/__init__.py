"""Documentation generator for the FHEVM example hub.

Renders one markdown page per registry example (overview, concepts, full
contract and test source) and a GitBook ``SUMMARY.md`` index grouping the
pages by category. Produces a :class:`DocsReport` describing every page
written and every example that failed.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, computed_field
from rich.markup import escape
from rich.panel import Panel

from fhevm_hub.config import HubConfig
from fhevm_hub.registry import ExampleEntry, ExampleRegistry
from fhevm_hub.reporter.example_doc import ExampleDocRenderer, fence_language
from fhevm_hub.reporter.summary import group_by_category, render_summary
from fhevm_hub.utils import (
    console,
    ensure_dir,
    print_error,
    print_success,
    print_summary_table,
    read_source,
    write_text,
)

__all__ = [
    # Core engine
    "DocumentationGenerator",
    "DocsReport",
    "DocFailure",
    # Renderers
    "ExampleDocRenderer",
    "fence_language",
    "group_by_category",
    "render_summary",
]


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------

class DocFailure(BaseModel):
    """An example whose page could not be generated."""

    name: str = Field(..., description="Registry name of the example")
    error: str = Field(..., description="Error message")


class DocsReport(BaseModel):
    """Outcome of a ``docs --all`` batch."""

    docs_dir: str = Field(..., description="Directory the pages were written to")
    pages: list[str] = Field(default_factory=list, description="Written page paths")
    failures: list[DocFailure] = Field(default_factory=list)
    summary_path: str = Field(default="", description="Path to SUMMARY.md")

    @computed_field  # type: ignore[misc]
    @property
    def success(self) -> bool:
        """True when every example produced a page."""
        return not self.failures


# ---------------------------------------------------------------------------
# DocumentationGenerator
# ---------------------------------------------------------------------------

class DocumentationGenerator:
    """Generates GitBook-style documentation pages from the registry.

    Usage::

        generator = DocumentationGenerator(ExampleRegistry.default(), HubConfig())
        generator.generate_one("fhe-counter")
        report = generator.generate_all()
    """

    def __init__(
        self,
        registry: ExampleRegistry,
        config: HubConfig | None = None,
        doc_renderer: ExampleDocRenderer | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or HubConfig()
        self._doc_renderer = doc_renderer or ExampleDocRenderer()

    @property
    def docs_dir(self) -> Path:
        return self.config.resolved_docs_dir

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate_one(self, example_name: str) -> Path:
        """Generate and write the page for a single example.

        Raises:
            UnknownExampleError: If *example_name* is not in the registry.
            OSError: If the page cannot be written.
        """
        entry = self.registry.get(example_name)
        path = self._write_page(entry)
        print_success(f"Generated documentation: {path}")
        return path

    def generate_all(self) -> DocsReport:
        """Generate a page for every registry example, then ``SUMMARY.md``.

        A failing example is reported and skipped; it never stops the batch.
        The index lists only the examples whose page was written.
        """
        docs_dir = self.docs_dir
        console.print(
            Panel(
                f"[bold]Documentation Generator[/bold]\n"
                f"Examples: {len(self.registry)}\n"
                f"Docs: {escape(str(docs_dir))}",
                title="FHEVM Example Hub",
                border_style="blue",
            )
        )

        report = DocsReport(docs_dir=str(docs_dir))
        written: list[ExampleEntry] = []

        for entry in self.registry:
            try:
                path = self._write_page(entry)
            except Exception as exc:
                report.failures.append(DocFailure(name=entry.name, error=str(exc)))
                print_error(f"Error generating docs for {entry.name}: {exc}")
                continue
            written.append(entry)
            report.pages.append(str(path))
            print_success(f"Generated: {path}")

        summary_path = write_text(self.config.summary_path, render_summary(written))
        report.summary_path = str(summary_path)
        print_success(f"Generated: {summary_path}")

        self.print_summary(report)
        return report

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def render_page(self, entry: ExampleEntry) -> str:
        """Read the example's sources and render its page."""
        contract_source = read_source(self.config.source_path(entry.contract_path))
        test_source = read_source(self.config.source_path(entry.test_path))
        return self._doc_renderer.render(entry, contract_source, test_source)

    def _write_page(self, entry: ExampleEntry) -> Path:
        content = self.render_page(entry)
        ensure_dir(self.docs_dir)
        return write_text(self.docs_dir / entry.doc_filename, content)

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def print_summary(self, report: DocsReport) -> None:
        """Pretty-print the final success/failure tally."""
        print_summary_table(
            {
                "Pages generated": str(len(report.pages)),
                "Failures": str(len(report.failures)),
                "Index": report.summary_path,
                "Docs directory": report.docs_dir,
            },
            title="Documentation",
        )
        if report.failures:
            console.print("[red bold]Errors:[/red bold]")
            for failure in report.failures:
                console.print(f"  [red]- {escape(failure.name)}: {escape(failure.error)}[/red]")
