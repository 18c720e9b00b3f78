# src/difftok/core/diff.py
from typing import Iterator, List, Protocol

from difftok.models import DiffLine, LineKind, TokenTally


class Encoder(Protocol):
    def encode(self, text: str) -> List[int]: ...


def iter_diff_lines(text: str) -> Iterator[str]:
    """
    Splits on '\\n' only, dropping one trailing '\\r' per line.
    A final newline does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for line in lines:
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def classify_line(line: str) -> DiffLine:
    # File headers first, otherwise "+++ b/f" would read as an added line.
    if line.startswith("+++") or line.startswith("---"):
        return DiffLine(LineKind.FILE_HEADER)
    if line.startswith("+"):
        return DiffLine(LineKind.ADDED, line[1:])
    if line.startswith("-"):
        return DiffLine(LineKind.REMOVED, line[1:])
    return DiffLine(LineKind.OTHER)


def tally_diff(tokenizer: Encoder, text: str) -> TokenTally:
    """Sums the tokens of added and removed payloads in a unified diff."""
    added = 0
    removed = 0

    for line in iter_diff_lines(text):
        diff_line = classify_line(line)
        if diff_line.kind is LineKind.ADDED:
            added += len(tokenizer.encode(diff_line.payload))
        elif diff_line.kind is LineKind.REMOVED:
            removed += len(tokenizer.encode(diff_line.payload))

    return TokenTally(added=added, removed=removed)
