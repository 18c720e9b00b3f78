# tests/test_report.py
import io

import pytest

from difftok.core.report import build_report, format_report, write_report
from difftok.models import (
    Configuration,
    CountMode,
    DiffMode,
    GitDiffMode,
    NetCount,
    PairCount,
    SingleCount,
    TokenTally,
)


def test_count_mode_reports_single():
    config = Configuration("o200k_base", CountMode())
    assert build_report(config, count=42) == SingleCount(42)


@pytest.mark.parametrize("mode", [DiffMode(), GitDiffMode(("HEAD",))])
def test_diff_modes_report_pair_or_net(mode):
    tally = TokenTally(added=3, removed=10)
    assert build_report(Configuration("o200k_base", mode), tally=tally) == PairCount(3, 10)
    assert build_report(Configuration("o200k_base", mode, net_output=True), tally=tally) == NetCount(-7)


def test_net_does_not_overflow():
    huge = 2 ** 64
    tally = TokenTally(added=huge, removed=huge * 3)
    assert tally.net == -2 * huge


@pytest.mark.parametrize("report, expected", [
    (SingleCount(0), "0"),
    (PairCount(2, 1), "2 1"),
    (NetCount(1), "1"),
    (NetCount(-5), "-5"),
    (NetCount(0), "0"),
])
def test_format_report(report, expected):
    assert format_report(report) == expected


def test_write_report_is_one_line():
    stream = io.StringIO()
    write_report(PairCount(7, 0), stream)
    assert stream.getvalue() == "7 0\n"
