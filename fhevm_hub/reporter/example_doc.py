"""Per-example documentation page renderer.

Produces a GitBook-compatible ``<example>.md`` page with the example's
overview, key concepts, the full contract source, the full test suite and a
fixed "Running the Example" footer.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from fhevm_hub.registry import ExampleEntry

# Source file suffix -> fenced code block language
FENCE_LANGUAGES: dict[str, str] = {
    ".sol": "solidity",
    ".ts": "typescript",
    ".js": "javascript",
}


def fence_language(path: str) -> str:
    """Return the code-fence language for a source path ('' if unknown)."""
    return FENCE_LANGUAGES.get(PurePosixPath(path).suffix.lower(), "")


class ExampleDocRenderer:
    """Renders the markdown documentation page for one example.

    The renderer is pure: source text is read by the caller (see
    :func:`fhevm_hub.utils.read_source`) and passed in, so a missing file
    shows up as its placeholder text inside the code block.
    """

    def render(self, entry: ExampleEntry, contract_source: str, test_source: str) -> str:
        """Render the complete documentation page."""
        sections: list[str] = []

        sections.append(f"# {entry.title}")
        sections.append("")

        # Overview
        sections.append("## Overview")
        sections.append("")
        sections.append(entry.page_description)
        sections.append("")
        sections.append(f"**Category:** `{entry.category}`")
        sections.append("")

        # Key concepts (zero bullets when the entry has none)
        sections.append("## Key Concepts")
        sections.append("")
        for concept in entry.display_concepts:
            sections.append(f"- {concept}")
        if entry.display_concepts:
            sections.append("")

        # Sources
        sections.append("## Smart Contract")
        sections.append("")
        sections.extend(_code_block(contract_source, fence_language(entry.contract_path)))
        sections.append("")
        sections.append("## Test Suite")
        sections.append("")
        sections.extend(_code_block(test_source, fence_language(entry.test_path)))
        sections.append("")

        # FHEVM patterns
        sections.append("## FHEVM Patterns")
        sections.append("")
        sections.append("### Encrypted State Variables")
        sections.append(
            "The contract uses encrypted data types (euint32, euint64) to store "
            "sensitive information while allowing computation without decryption."
        )
        sections.append("")
        sections.append("### Access Control")
        sections.append(
            "FHE.allow() and FHE.allowThis() are used to grant decryption "
            "permissions only to authorized parties."
        )
        sections.append("")
        sections.append("### Encrypted Computation")
        sections.append("Mathematical operations are performed directly on encrypted values.")
        sections.append("")

        # Running the example
        sections.append("## Running the Example")
        sections.append("")
        sections.append("```bash")
        sections.append("npm install")
        sections.append("npm run compile")
        sections.append("npm run test")
        sections.append("```")
        sections.append("")

        sections.append("## Learning Resources")
        sections.append("")
        sections.append("- [FHEVM Documentation](https://docs.zama.ai/fhevm)")
        sections.append("- [Zama Developer Program](https://github.com/zama-ai)")
        sections.append("- [FHE Concepts Guide](https://docs.zama.org/protocol/protocol-concepts)")
        sections.append("")
        sections.append("---")
        sections.append("")
        sections.append("Generated automatically for the FHEVM Example Hub.")
        sections.append("")

        return "\n".join(sections)


def _code_block(source: str, language: str) -> list[str]:
    """Wrap *source* in a fenced block, lengthening the fence if needed.

    The source is embedded unchanged; a newline is only added before the
    closing fence when the source does not already end with one.
    """
    fence = "```"
    while fence in source:
        fence += "`"
    body = source if source.endswith("\n") else source + "\n"
    return [f"{fence}{language}", f"{body}{fence}"]
