"""FHEVM example scaffolder -- generates standalone example repositories.

Takes a registry entry and renders a ready-to-run Hardhat project directory
containing the example's contract and tests plus its configuration files.

Quick usage::

    from fhevm_hub.registry import ExampleRegistry
    from fhevm_hub.scaffolder import RepositoryGenerator

    generator = RepositoryGenerator(ExampleRegistry.default())
    result = generator.generate("fhe-counter", "./out/fhe-counter")
"""

from fhevm_hub.scaffolder.generator import RepositoryGenerator, ScaffoldError, ScaffoldResult
from fhevm_hub.scaffolder.project_files import ProjectFileRenderer
from fhevm_hub.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectFileRenderer",
    "RepositoryGenerator",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateRenderer",
]
