# src/difftok/cli.py
import sys
import argparse
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Sequence, TextIO

# Module imports
from difftok.config import DEFAULT_ENCODING, ENCODING_ALIASES, SUPPORTED_ENCODINGS
from difftok.core.diff import tally_diff
from difftok.core.git import GitRunner, run_git_diff
from difftok.core.options import resolve_arguments
from difftok.core.report import build_report, write_report
from difftok.errors import DifftokError, InputError
from difftok.models import Action, CountMode, GitDiffMode
from difftok.utils.tokenizer import Tokenizer, load_encoding

DEFAULT_PROGRAM_NAME = "difftok"


def create_arg_parser(prog: str) -> argparse.ArgumentParser:
    # Only used to render --help; resolve_arguments does the actual scanning.
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Fast token counter for text and unified diffs, using tiktoken.",
        usage=f"{prog} [OPTIONS] < input\n       {prog} [OPTIONS] --git [GIT-DIFF-ARGS...]",
        add_help=False,
    )
    parser.add_argument("-e", "--encoding", metavar="<name>", help=f"Select tokenizer (default: {DEFAULT_ENCODING})")
    parser.add_argument("-d", "--diff", action="store_true", help="Parse a unified diff from stdin and print added/removed token totals")
    parser.add_argument("--git", nargs=argparse.REMAINDER, metavar="ARGS", help="Run 'git diff' with ARGS and count its added/removed tokens")
    parser.add_argument("--net", action="store_true", help="With --diff or --git, print added minus removed")
    parser.add_argument("--list", action="store_true", help="Show supported tokenizer names")
    parser.add_argument("-h", "--help", action="store_true", help="Show this message")
    return parser


def display_name(raw: str) -> str:
    """Program name for messages: the basename of argv[0]."""
    return Path(raw).name or raw or DEFAULT_PROGRAM_NAME


def print_help(prog: str, stream: TextIO) -> None:
    stream.write(create_arg_parser(prog).format_help())


def print_supported(stream: TextIO) -> None:
    names = list(SUPPORTED_ENCODINGS) + list(ENCODING_ALIASES)
    stream.write("Supported encodings:\n")
    for name in names:
        stream.write(f"  {name}\n")


def read_input(stdin: BinaryIO) -> str:
    """Reads all of stdin; invalid UTF-8 is replaced, so counts for such bytes are approximate."""
    try:
        data = stdin.read()
    except OSError as e:
        raise InputError(f"failed to read stdin: {e}") from e
    return data.decode("utf-8", errors="replace")


def run(
    argv: Optional[Sequence[str]] = None,
    *,
    prog: Optional[str] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    load: Callable[[str], Tokenizer] = load_encoding,
    git_diff: GitRunner = run_git_diff,
) -> int:
    """Runs one invocation and returns the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = display_name(sys.argv[0] if sys.argv else "")
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        # 1. Options & tokenizer, both before any output
        resolution = resolve_arguments(argv)
        if resolution.action is Action.HELP:
            print_help(prog, stdout)
            return 0
        if resolution.action is Action.LIST:
            print_supported(stdout)
            return 0

        config = resolution.config
        tokenizer = load(config.encoding_name)

        # 2. Input
        if isinstance(config.mode, GitDiffMode):
            text = git_diff(config.mode.extra_args)
        else:
            text = read_input(stdin if stdin is not None else sys.stdin.buffer)

        # 3. Counting & output
        if isinstance(config.mode, CountMode):
            report = build_report(config, count=len(tokenizer.encode(text)))
        else:
            report = build_report(config, tally=tally_diff(tokenizer, text))
        write_report(report, stdout)
        return 0

    except DifftokError as e:
        print(f"{prog}: {e}", file=stderr)
        return 1


def main():
    prog = display_name(sys.argv[0] if sys.argv else "")
    try:
        status = run(prog=prog)
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"{prog}: unexpected error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    main()
