"""Example registry shared by the repository and documentation generators.

Quick usage::

    from fhevm_hub.registry import ExampleRegistry

    registry = ExampleRegistry.default()
    entry = registry.get("fhe-counter")
"""

from fhevm_hub.registry.loader import (
    DEFAULT_REGISTRY_PATH,
    ExampleRegistry,
    RegistryError,
    UnknownExampleError,
)
from fhevm_hub.registry.models import ExampleEntry

__all__ = [
    "DEFAULT_REGISTRY_PATH",
    "ExampleEntry",
    "ExampleRegistry",
    "RegistryError",
    "UnknownExampleError",
]
