"""Configuration and readme files for a scaffolded example project.

JSON documents (``package.json``, ``tsconfig.json``) are built as plain dicts
and serialised with two-space indentation; text documents
(``hardhat.config.ts``, ``README.md``, ``.gitignore``) come from the Jinja2
templates next to this module. Every method is pure and returns the file
content as a string.
"""

from __future__ import annotations

import json
from typing import Any

from fhevm_hub.registry import ExampleEntry

from .templates import TemplateRenderer

# ---------------------------------------------------------------------------
# Fixed manifest data
# ---------------------------------------------------------------------------

BASE_KEYWORDS: tuple[str, ...] = (
    "fhevm",
    "fhe",
    "zama",
    "privacy",
    "confidential-computing",
)

SCRIPTS: dict[str, str] = {
    "compile": "hardhat compile",
    "test": "hardhat test",
    "node": "hardhat node",
    "clean": "hardhat clean",
    "type-check": "tsc --noEmit",
}

DEV_DEPENDENCIES: dict[str, str] = {
    "@fhevm/hardhat-plugin": "0.0.1-3",
    "@fhevm/mock-utils": "^0.0.1-3",
    "@nomicfoundation/hardhat-ethers": "^3.1.0",
    "@types/chai": "^4.3.5",
    "@types/mocha": "^10.0.1",
    "@types/node": "^20.4.5",
    "chai": "^4.3.7",
    "hardhat": "^2.19.0",
    "mocha": "^10.4.0",
    "ts-node": "^10.9.1",
    "typescript": "^5.1.6",
}

DEPENDENCIES: dict[str, str] = {
    "@fhevm/solidity": "^0.7.0",
    "@zama-fhe/oracle-solidity": "^0.1.0",
    "ethers": "^6.14.0",
}

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2020",
        "module": "commonjs",
        "lib": ["ES2020"],
        "outDir": "./dist",
        "rootDir": "./",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "forceConsistentCasingInFileNames": True,
        "resolveJsonModule": True,
        "declaration": True,
        "declarationMap": True,
        "sourceMap": True,
        "types": ["node"],
    },
    "include": ["test/**/*.ts"],
    "exclude": ["node_modules", "dist", "artifacts", "cache"],
}

BUILD_SETTINGS: dict[str, Any] = {
    "solidity_version": "0.8.24",
    "optimizer_runs": 200,
    "mocha_timeout": 100000,
}

# Output file name -> ProjectFileRenderer method
PROJECT_FILES: dict[str, str] = {
    "package.json": "render_manifest",
    "hardhat.config.ts": "render_build_config",
    "tsconfig.json": "render_tsconfig",
    "README.md": "render_readme",
    ".gitignore": "render_gitignore",
}


# ---------------------------------------------------------------------------
# ProjectFileRenderer
# ---------------------------------------------------------------------------


class ProjectFileRenderer:
    """Renders the per-project files emitted next to the copied sources."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    def render_all(self, entry: ExampleEntry) -> dict[str, str]:
        """Render every project file.

        Returns:
            Mapping of output file name (relative to the project root) to its
            content, in :data:`PROJECT_FILES` order.
        """
        rendered: dict[str, str] = {}
        for filename, method_name in PROJECT_FILES.items():
            method = getattr(self, method_name)
            rendered[filename] = method(entry)
        return rendered

    def render_manifest(self, entry: ExampleEntry) -> str:
        """Render ``package.json`` for the example."""
        manifest = {
            "name": entry.package_name,
            "version": "1.0.0",
            "description": entry.description,
            "main": "index.js",
            "scripts": dict(SCRIPTS),
            "keywords": [*BASE_KEYWORDS, entry.category, *entry.concepts],
            "author": "",
            "license": "MIT",
            "devDependencies": dict(DEV_DEPENDENCIES),
            "dependencies": dict(DEPENDENCIES),
        }
        return _dump_json(manifest)

    def render_build_config(self, entry: ExampleEntry | None = None) -> str:
        """Render ``hardhat.config.ts``; identical for every example."""
        return self.renderer.render("hardhat.config.ts.j2", BUILD_SETTINGS)

    def render_tsconfig(self, entry: ExampleEntry | None = None) -> str:
        return _dump_json(TSCONFIG)

    def render_readme(self, entry: ExampleEntry) -> str:
        return self.renderer.render("README.md.j2", {"entry": entry})

    def render_gitignore(self, entry: ExampleEntry | None = None) -> str:
        return self.renderer.render("gitignore.j2")


def _dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
