"""Tests for the documentation generator (fhevm_hub.reporter).

Covers:
- Single-page generation and unknown names
- Batch generation: one page per entry plus SUMMARY.md
- Missing sources rendered as placeholders
- Failure isolation: one failing example never stops the batch
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from fhevm_hub.config import HubConfig
from fhevm_hub.registry import ExampleRegistry, UnknownExampleError
from fhevm_hub.reporter import DocsReport, DocumentationGenerator, ExampleDocRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def generator(small_registry, hub_config) -> DocumentationGenerator:
    return DocumentationGenerator(small_registry, hub_config)


class TestGenerateOne:
    def test_writes_page(self, generator, hub_root):
        path = generator.generate_one("fhe-counter")

        assert path == hub_root / "docs" / "fhe-counter.md"
        page = path.read_text(encoding="utf-8")
        assert page.startswith("# Simple FHE Counter\n")
        assert "contract FHECounter {" in page
        assert 'describe("FHECounter"' in page

    def test_sources_embedded_exactly(self, generator, hub_root):
        page = generator.generate_one("fhe-counter").read_text(encoding="utf-8")
        contract = (hub_root / "contracts" / "FHECounter.sol").read_text(encoding="utf-8")
        test = (hub_root / "test" / "FHECounter.test.ts").read_text(encoding="utf-8")
        assert "```solidity\n" + contract + "```" in page
        assert "```typescript\n" + test + "```" in page

    def test_does_not_write_summary(self, generator, hub_config):
        generator.generate_one("fhe-counter")
        assert not hub_config.summary_path.exists()

    def test_missing_source_placeholder(self, generator, hub_root):
        page = generator.generate_one("access-control").read_text(encoding="utf-8")
        missing = hub_root / "test" / "advanced" / "AccessControl.test.ts"
        assert f"// File not found: {missing}" in page
        assert "contract AccessControl {}" in page

    def test_unknown_name(self, generator, hub_root):
        with pytest.raises(UnknownExampleError) as excinfo:
            generator.generate_one("nope")
        assert "fhe-counter" in excinfo.value.valid_names
        assert not (hub_root / "docs").exists()

    def test_overwrites_existing_page(self, generator, hub_root):
        page = hub_root / "docs" / "fhe-counter.md"
        page.parent.mkdir(parents=True)
        page.write_text("stale", encoding="utf-8")
        generator.generate_one("fhe-counter")
        assert page.read_text(encoding="utf-8") != "stale"

    def test_absolute_docs_dir(self, small_registry, hub_root, tmp_path):
        config = HubConfig(source_root=hub_root, docs_dir=tmp_path / "site")
        path = DocumentationGenerator(small_registry, config).generate_one("fhe-counter")
        assert path == tmp_path / "site" / "fhe-counter.md"


class TestGenerateAll:
    def test_one_page_per_entry_and_summary(self, generator, hub_root):
        report = generator.generate_all()

        docs = hub_root / "docs"
        assert sorted(p.name for p in docs.iterdir()) == [
            "SUMMARY.md",
            "access-control.md",
            "fhe-counter.md",
        ]
        assert isinstance(report, DocsReport)
        assert report.success is True
        assert report.pages == [str(docs / "fhe-counter.md"), str(docs / "access-control.md")]
        assert report.summary_path == str(docs / "SUMMARY.md")

    def test_summary_content(self, generator, hub_config):
        generator.generate_all()
        summary = hub_config.summary_path.read_text(encoding="utf-8")
        assert summary.index("### Basic") < summary.index("### Advanced")
        assert "- [Simple FHE Counter](./fhe-counter.md)" in summary
        assert "- [FHE Access Control Patterns](./access-control.md)" in summary

    def test_all_sources_missing_still_documents_everything(self, small_registry, tmp_path):
        config = HubConfig(source_root=tmp_path / "empty", docs_dir=tmp_path / "docs")
        report = DocumentationGenerator(small_registry, config).generate_all()

        assert report.success
        assert len(report.pages) == 2
        page = (tmp_path / "docs" / "fhe-counter.md").read_text(encoding="utf-8")
        assert "// File not found:" in page

    def test_failure_is_isolated(self, small_registry, hub_config, capsys):
        real = ExampleDocRenderer()

        def render(entry, contract_source, test_source):
            if entry.name == "fhe-counter":
                raise RuntimeError("template exploded")
            return real.render(entry, contract_source, test_source)

        doc_renderer = MagicMock(spec=ExampleDocRenderer)
        doc_renderer.render.side_effect = render
        generator = DocumentationGenerator(small_registry, hub_config, doc_renderer=doc_renderer)

        report = generator.generate_all()

        docs = hub_config.resolved_docs_dir
        assert not (docs / "fhe-counter.md").exists()
        assert (docs / "access-control.md").is_file()
        assert report.success is False
        assert [f.name for f in report.failures] == ["fhe-counter"]
        assert report.failures[0].error == "template exploded"

        summary = hub_config.summary_path.read_text(encoding="utf-8")
        assert "fhe-counter.md" not in summary
        assert "access-control.md" in summary

        captured = capsys.readouterr()
        assert "fhe-counter" in captured.err
        assert "template exploded" in captured.err

    def test_packaged_registry(self, tmp_path):
        registry = ExampleRegistry.default()
        config = HubConfig(source_root=tmp_path)
        report = DocumentationGenerator(registry, config).generate_all()

        docs = tmp_path / "examples"
        assert report.success
        for name in registry.list_names():
            assert (docs / f"{name}.md").is_file()
        assert (docs / "SUMMARY.md").is_file()
        counter = (docs / "fhe-counter.md").read_text(encoding="utf-8")
        assert registry.get("fhe-counter").doc_description in counter

    def test_rerun_is_identical(self, generator, hub_root):
        generator.generate_all()
        docs = hub_root / "docs"
        first = {p.name: p.read_bytes() for p in docs.iterdir()}
        generator.generate_all()
        assert {p.name: p.read_bytes() for p in docs.iterdir()} == first


class TestRenderPage:
    def test_render_page_does_not_write(self, generator, counter_entry, hub_root):
        page = generator.render_page(counter_entry)
        assert "# Simple FHE Counter" in page
        assert not (hub_root / "docs").exists()

    def test_docs_dir_property(self, generator, hub_root):
        assert generator.docs_dir == Path(hub_root) / "docs"
