"""FHEVM example hub configuration.

Centralised, typed configuration shared by the repository generator and the
documentation generator. Settings use a Pydantic v2 model so they are
validated at construction time and can be serialised to/from JSON without
boiler-plate.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class HubConfig(BaseModel):
    """Global example hub configuration.

    Built once by the CLI entry point from its flags and then passed to the
    generators. Registry source paths (``contracts/...``, ``test/...``) are
    resolved against ``source_root``.
    """

    source_root: Path = Field(
        default=Path("."),
        description="Hub checkout that registry contract/test paths are relative to",
    )
    docs_dir: Path = Field(
        default=Path("examples"),
        description="Documentation output directory (relative to source_root unless absolute)",
    )
    registry_path: Path | None = Field(
        default=None,
        description="Registry YAML file; the packaged registry is used when unset",
    )
    staging_prefix: str = Field(
        default=".fhevm-staging-",
        min_length=1,
        description="Name prefix of the temporary directory a scaffold is staged in",
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def resolved_docs_dir(self) -> Path:
        """Directory that receives ``<example>.md`` pages and ``SUMMARY.md``."""
        if self.docs_dir.is_absolute():
            return self.docs_dir
        return self.source_root / self.docs_dir

    @property
    def summary_path(self) -> Path:
        """Path to the generated GitBook ``SUMMARY.md`` index."""
        return self.resolved_docs_dir / "SUMMARY.md"

    def source_path(self, relative: str | Path) -> Path:
        """Resolve a registry source path against ``source_root``."""
        path = Path(relative)
        if path.is_absolute():
            return path
        return self.source_root / path

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "HubConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)
