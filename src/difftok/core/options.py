# src/difftok/core/options.py
from enum import Enum, auto
from typing import List, Sequence

from difftok.config import DEFAULT_ENCODING
from difftok.errors import ArgumentError
from difftok.models import (
    Action,
    Configuration,
    CountMode,
    DiffMode,
    GitDiffMode,
    Mode,
    Resolution,
)


class _State(Enum):
    SCAN = auto()
    EXPECT_ENCODING = auto()
    GIT_ARGS = auto()


def resolve_arguments(args: Sequence[str]) -> Resolution:
    """
    Scans the argument list (program name excluded) in a single pass.

    - Mode flags overwrite each other: the last one scanned wins.
    - --git takes every remaining argument verbatim and ends the scan.
    - -h/--help and --list return as soon as they are scanned.
    - Combination checks run once, after the scan.
    """
    encoding = DEFAULT_ENCODING
    mode: Mode = CountMode()
    net_output = False

    state = _State.SCAN
    git_args: List[str] = []

    for arg in args:
        if state is _State.GIT_ARGS:
            git_args.append(arg)
            continue

        if state is _State.EXPECT_ENCODING:
            encoding = arg
            state = _State.SCAN
            continue

        if arg in ("-e", "--encoding"):
            state = _State.EXPECT_ENCODING
        elif arg in ("-d", "--diff"):
            mode = DiffMode()
        elif arg == "--git":
            state = _State.GIT_ARGS
        elif arg == "--net":
            net_output = True
        elif arg in ("-h", "--help"):
            return Resolution(Action.HELP)
        elif arg == "--list":
            return Resolution(Action.LIST)
        else:
            raise ArgumentError(f"unrecognized argument '{arg}'")

    if state is _State.EXPECT_ENCODING:
        raise ArgumentError("missing value for --encoding")
    if state is _State.GIT_ARGS:
        mode = GitDiffMode(tuple(git_args))

    config = Configuration(encoding_name=encoding, mode=mode, net_output=net_output)
    _validate(config)
    return Resolution(Action.RUN, config)


def _validate(config: Configuration) -> None:
    if config.net_output and not config.is_diff:
        raise ArgumentError("--net can only be used with --diff or --git")
