# src/difftok/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class CountMode:
    """Count every token of standard input."""


@dataclass(frozen=True)
class DiffMode:
    """Read a unified diff from standard input."""


@dataclass(frozen=True)
class GitDiffMode:
    """Run `git diff` with the trailing arguments, passed through verbatim."""
    extra_args: Tuple[str, ...] = ()


Mode = Union[CountMode, DiffMode, GitDiffMode]


@dataclass(frozen=True)
class Configuration:
    encoding_name: str
    mode: Mode
    net_output: bool = False

    @property
    def is_diff(self) -> bool:
        return not isinstance(self.mode, CountMode)


class Action(Enum):
    RUN = "run"
    HELP = "help"
    LIST = "list"


@dataclass(frozen=True)
class Resolution:
    """Outcome of argument resolution: either a configuration to run, or a short-circuit."""
    action: Action
    config: Optional[Configuration] = None


class LineKind(str, Enum):
    FILE_HEADER = "file_header"
    ADDED = "added"
    REMOVED = "removed"
    OTHER = "other"


@dataclass(frozen=True)
class DiffLine:
    kind: LineKind
    payload: str = ""


@dataclass(frozen=True)
class TokenTally:
    """Token totals for the added and removed sides of a diff."""
    added: int = 0
    removed: int = 0

    @property
    def net(self) -> int:
        return self.added - self.removed


@dataclass(frozen=True)
class SingleCount:
    count: int


@dataclass(frozen=True)
class PairCount:
    added: int
    removed: int


@dataclass(frozen=True)
class NetCount:
    delta: int


ReportOutput = Union[SingleCount, PairCount, NetCount]
