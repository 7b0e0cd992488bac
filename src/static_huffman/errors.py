"""Typed errors for static-huffman.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The core raises, the CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_UNSUPPORTED_VERSION = 11
EXIT_MISSING_RESOURCE = 12


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, symbol outside the alphabet)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (corrupt tree, invalid bit, truncated stream)"),
    ExitCodeInfo(EXIT_UNSUPPORTED_VERSION, "UNSUPPORTED_VERSION", "Unsupported tree artifact version"),
    ExitCodeInfo(EXIT_MISSING_RESOURCE, "MISSING_RESOURCE", "Missing artifact file (data.huff / data.pad / data.bin)"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE, do not edit manually.\n")
    lines.append("> Source of truth: `src/static_huffman/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the `shuff` exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every internal error extends `HuffmanError` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffmanError(Exception):
    """Base error for static-huffman."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffmanError):
    exit_code = EXIT_USAGE


class AlphabetViolation(UsageError):
    """A symbol in the input is outside the configured alphabet."""

    def __init__(self, symbol: int, alphabet_size: int, position: int | None = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(
            f"symbol {symbol}{where} is outside the alphabet (size {alphabet_size})"
        )
        self.symbol = symbol
        self.alphabet_size = alphabet_size
        self.position = position


class CorruptPayload(HuffmanError):
    exit_code = EXIT_GENERIC


class InvalidBit(CorruptPayload):
    """A bit value other than '0'/'1' in an encoded sequence."""

    def __init__(self, value: object, position: int) -> None:
        super().__init__(f"invalid bit value {value!r} at position {position}")
        self.value = value
        self.position = position


class TruncatedStream(CorruptPayload):
    """The encoded sequence ends in the middle of a code."""


class MalformedTree(CorruptPayload):
    """The tree artifact cannot be parsed into a valid leaf/internal structure."""


class BadMagic(MalformedTree):
    """The blob is not a tree artifact at all."""


class UnsupportedVersion(HuffmanError):
    exit_code = EXIT_UNSUPPORTED_VERSION


class MissingResource(HuffmanError):
    exit_code = EXIT_MISSING_RESOURCE
