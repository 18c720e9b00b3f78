# src/difftok/core/git.py
import os
import subprocess
from typing import Callable, List, Optional, Sequence

from difftok.config import GIT_DIFF_ARGS, GIT_EXECUTABLE, GIT_EXECUTABLE_ENV
from difftok.errors import SubprocessError

# Signature shared by run_git_diff and the fakes used in tests.
GitRunner = Callable[[Sequence[str]], str]


def git_executable() -> str:
    return os.environ.get(GIT_EXECUTABLE_ENV) or GIT_EXECUTABLE


def build_git_command(extra_args: Sequence[str], executable: Optional[str] = None) -> List[str]:
    return [executable or git_executable(), *GIT_DIFF_ARGS, *extra_args]


def run_git_diff(extra_args: Sequence[str], executable: Optional[str] = None) -> str:
    """
    Runs `git diff --no-ext-diff --unified=0 <extra_args>` and returns its stdout.

    Blocks until git exits; there is no timeout. On a nonzero exit the
    partial stdout is discarded and git's stderr becomes the error message.
    """
    command = build_git_command(extra_args, executable)
    try:
        result = subprocess.run(command, capture_output=True, check=False)
    except OSError as e:
        raise SubprocessError(f"failed to run {command[0]}: {e}") from e

    if result.returncode != 0:
        message = result.stderr.decode("utf-8", errors="replace").strip()
        if not message:
            message = f"git diff exited with status {result.returncode}"
        raise SubprocessError(message)

    return result.stdout.decode("utf-8", errors="replace")
