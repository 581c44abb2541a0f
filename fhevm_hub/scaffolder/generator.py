"""Main scaffolding orchestrator.

Takes an example name from the registry and generates a standalone Hardhat
project directory for it: the example's contract and test sources plus
``package.json``, ``hardhat.config.ts``, ``tsconfig.json``, ``README.md``
and ``.gitignore``.

Output is staged in a temporary directory and only moved into place once
every file has been written, so a failed run leaves the output directory as
it was.
"""

from __future__ import annotations

import json
import os
import shutil
import tempfile
from pathlib import Path

from pydantic import BaseModel, Field
from rich.markup import escape
from rich.panel import Panel

from fhevm_hub.config import HubConfig
from fhevm_hub.registry import ExampleEntry, ExampleRegistry
from fhevm_hub.registry.models import PACKAGE_PREFIX
from fhevm_hub.utils import console, print_success, print_warning, write_text

from .project_files import ProjectFileRenderer


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when an example project cannot be generated at the requested path."""


# ---------------------------------------------------------------------------
# Result model
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """Outcome of a single :meth:`RepositoryGenerator.generate` run."""

    example: str = Field(..., description="Registry name of the scaffolded example")
    output_dir: Path = Field(..., description="Project root that was written")
    files: list[str] = Field(
        default_factory=list,
        description="Written files, relative to output_dir, in write order",
    )
    skipped: list[str] = Field(
        default_factory=list,
        description="Source paths that did not exist and were not copied",
    )


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class RepositoryGenerator:
    """Scaffolds a standalone example repository from a registry entry.

    Given an example name, generates::

        <output>/contracts/<ContractFile>.sol
        <output>/test/<TestFile>.test.ts
        <output>/package.json
        <output>/hardhat.config.ts
        <output>/tsconfig.json
        <output>/README.md
        <output>/.gitignore
    """

    def __init__(
        self,
        registry: ExampleRegistry,
        config: HubConfig | None = None,
        file_renderer: ProjectFileRenderer | None = None,
    ) -> None:
        self.registry = registry
        self.config = config or HubConfig()
        self.file_renderer = file_renderer or ProjectFileRenderer()

    # -- Public API --------------------------------------------------------

    def generate(
        self,
        example_name: str,
        output_dir: str | Path,
        *,
        force: bool = False,
    ) -> ScaffoldResult:
        """Generate the example project at *output_dir*.

        Args:
            example_name: Registry key of the example.
            output_dir: Project root. Created (with parents) if absent; files
                from a previous generation are overwritten.
            force: Write into a non-empty directory even if it does not hold
                a previously generated example.

        Returns:
            A :class:`ScaffoldResult` describing the written files.

        Raises:
            UnknownExampleError: If *example_name* is not in the registry.
            ScaffoldError: If *output_dir* is a file, or a non-empty unrelated
                directory and *force* is not set.
            OSError: On any file-system failure while writing.
        """
        entry = self.registry.get(example_name)
        target = Path(output_dir)
        self._check_target(target, force)

        console.print(f"\n[bold]Creating FHEVM Example:[/bold] {escape(entry.title)}")
        console.print(f"[dim]Output path: {escape(str(target))}[/dim]\n")

        staging = self._make_staging_dir(target)
        try:
            files, skipped = self._stage(entry, staging)
            self._publish(staging, target)
        finally:
            if staging.exists():
                shutil.rmtree(staging, ignore_errors=True)

        for rel in files:
            print_success(f"Generated {rel}")

        result = ScaffoldResult(
            example=entry.name,
            output_dir=target,
            files=files,
            skipped=skipped,
        )
        self.print_next_steps(result)
        return result

    # -- Target checks -----------------------------------------------------

    def _check_target(self, target: Path, force: bool) -> None:
        """Refuse to write over something that is not a generated example."""
        if not target.exists():
            return
        if not target.is_dir():
            raise ScaffoldError(f"Output path exists and is not a directory: {target}")
        if force:
            return

        contents = [
            p for p in target.iterdir()
            if not p.name.startswith(self.config.staging_prefix)
        ]
        if not contents or _is_generated_project(target):
            return
        raise ScaffoldError(
            f"Output directory {target} is not empty and does not contain a "
            f"generated example; use --force to write into it anyway"
        )

    # -- Staging -----------------------------------------------------------

    def _make_staging_dir(self, target: Path) -> Path:
        """Create the staging directory on the same file system as *target*."""
        if target.is_dir():
            parent = target
        else:
            parent = target.parent
            parent.mkdir(parents=True, exist_ok=True)
        return Path(tempfile.mkdtemp(prefix=self.config.staging_prefix, dir=parent))

    def _stage(self, entry: ExampleEntry, staging: Path) -> tuple[list[str], list[str]]:
        """Write every project file into *staging*.

        Returns:
            ``(files, skipped)``: written paths relative to the project root
            and registry source paths that were missing.
        """
        files: list[str] = []
        skipped: list[str] = []

        (staging / "contracts").mkdir(parents=True, exist_ok=True)
        (staging / "test").mkdir(parents=True, exist_ok=True)

        sources = [
            (entry.contract_path, f"contracts/{entry.contract_filename}", "contract"),
            (entry.test_path, f"test/{entry.test_filename}", "tests"),
        ]
        for source_rel, dest_rel, label in sources:
            source = self.config.source_path(source_rel)
            if not source.is_file():
                print_warning(f"Skipped {label}: source not found at {source}")
                skipped.append(source_rel)
                continue
            shutil.copyfile(source, staging / dest_rel)
            files.append(dest_rel)

        for filename, content in self.file_renderer.render_all(entry).items():
            write_text(staging / filename, content)
            files.append(filename)

        return files, skipped

    def _publish(self, staging: Path, target: Path) -> None:
        """Move staged files into *target*, overwriting previous output."""
        if not target.exists():
            staging.rename(target)
            return

        for staged in sorted(staging.rglob("*")):
            dest = target / staged.relative_to(staging)
            if staged.is_dir():
                dest.mkdir(parents=True, exist_ok=True)
                continue
            dest.parent.mkdir(parents=True, exist_ok=True)
            os.replace(staged, dest)

    # -- Display -----------------------------------------------------------

    def print_next_steps(self, result: ScaffoldResult) -> None:
        """Print the success panel with the commands to run next."""
        commands = "\n".join(
            [
                f"  cd {escape(str(result.output_dir))}",
                "  npm install",
                "  npm run compile",
                "  npm run test",
            ]
        )
        body = f"[bold]Example repository created successfully![/bold]\n\nNext steps:\n{commands}"
        if result.skipped:
            body += "\n\n[yellow]Missing sources (not copied):[/yellow]\n" + "\n".join(
                f"  - {escape(path)}" for path in result.skipped
            )
        console.print(
            Panel(
                body,
                title=f"{PACKAGE_PREFIX}{result.example}",
                border_style="yellow" if result.skipped else "green",
            )
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_generated_project(directory: Path) -> bool:
    """True if *directory* holds a ``package.json`` written by this generator."""
    manifest = directory / "package.json"
    if not manifest.is_file():
        return False
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return False
    name = data.get("name") if isinstance(data, dict) else None
    return isinstance(name, str) and name.startswith(PACKAGE_PREFIX)
