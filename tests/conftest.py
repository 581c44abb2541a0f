"""Shared pytest fixtures for the FHEVM example hub test suite.

Provides reusable fixtures for:
- A temporary hub checkout with contract and test sources
- Registry entries and small in-memory registries
- Hub configuration pointing at the temporary checkout
"""

from __future__ import annotations

from pathlib import Path

import pytest

from fhevm_hub.config import HubConfig
from fhevm_hub.registry import ExampleEntry, ExampleRegistry


COUNTER_CONTRACT = """\
// SPDX-License-Identifier: BSD-3-Clause-Clear
pragma solidity ^0.8.24;

import {FHE, euint32, externalEuint32} from "@fhevm/solidity/lib/FHE.sol";

contract FHECounter {
    euint32 private _count;

    function increment(externalEuint32 inputEuint32, bytes calldata inputProof) external {
        euint32 value = FHE.fromExternal(inputEuint32, inputProof);
        _count = FHE.add(_count, value);
        FHE.allowThis(_count);
        FHE.allow(_count, msg.sender);
    }
}
"""

COUNTER_TEST = """\
import { expect } from "chai";
import { ethers, fhevm } from "hardhat";

describe("FHECounter", function () {
  it("encrypted count should be uninitialized after deployment", async function () {
    const counter = await ethers.deployContract("FHECounter");
    expect(await counter.getCount()).to.eq(ethers.ZeroHash);
  });
});
"""

ACCESS_CONTRACT = """\
// SPDX-License-Identifier: BSD-3-Clause-Clear
pragma solidity ^0.8.24;

contract AccessControl {}
"""


# ---------------------------------------------------------------------------
# Hub checkout
# ---------------------------------------------------------------------------

@pytest.fixture
def hub_root(tmp_path: Path) -> Path:
    """Temporary hub checkout.

    Holds both sources of ``fhe-counter`` and only the contract of
    ``access-control`` (its test file is deliberately missing).
    """
    root = tmp_path / "hub"
    (root / "contracts" / "advanced").mkdir(parents=True)
    (root / "test").mkdir(parents=True)
    (root / "contracts" / "FHECounter.sol").write_text(COUNTER_CONTRACT, encoding="utf-8")
    (root / "test" / "FHECounter.test.ts").write_text(COUNTER_TEST, encoding="utf-8")
    (root / "contracts" / "advanced" / "AccessControl.sol").write_text(
        ACCESS_CONTRACT, encoding="utf-8"
    )
    return root


@pytest.fixture
def hub_config(hub_root: Path) -> HubConfig:
    """Configuration resolving sources against :func:`hub_root`."""
    return HubConfig(source_root=hub_root, docs_dir=Path("docs"))


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

@pytest.fixture
def counter_entry() -> ExampleEntry:
    return ExampleEntry(
        name="fhe-counter",
        title="Simple FHE Counter",
        description="Basic demonstration of an encrypted counter using FHEVM",
        contract_path="contracts/FHECounter.sol",
        test_path="test/FHECounter.test.ts",
        category="basic",
        concepts=["fhe-basics"],
    )


@pytest.fixture
def access_entry() -> ExampleEntry:
    return ExampleEntry(
        name="access-control",
        title="FHE Access Control Patterns",
        description="Permission management with FHE.allow() and FHE.allowThis()",
        contract_path="contracts/advanced/AccessControl.sol",
        test_path="test/advanced/AccessControl.test.ts",
        category="advanced",
        concepts=["fhe-allow", "fhe-allowThis"],
        concept_labels=["FHE.allow()", "FHE.allowThis()"],
    )


@pytest.fixture
def small_registry(counter_entry: ExampleEntry, access_entry: ExampleEntry) -> ExampleRegistry:
    """Two-entry registry: one basic example, one advanced example."""
    return ExampleRegistry.from_entries([counter_entry, access_entry])


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    """A small registry YAML data file."""
    path = tmp_path / "registry.yaml"
    path.write_text(
        """\
examples:
  - name: fhe-counter
    title: Simple FHE Counter
    description: Encrypted counter
    contract_path: contracts/FHECounter.sol
    test_path: test/FHECounter.test.ts
    category: basic
    concepts: [fhe-basics, encryption]
  - name: access-control
    title: FHE Access Control Patterns
    contract_path: contracts/advanced/AccessControl.sol
    test_path: test/advanced/AccessControl.test.ts
    category: advanced
""",
        encoding="utf-8",
    )
    return path
