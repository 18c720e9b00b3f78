# src/difftok/core/report.py
from typing import Optional, TextIO

from difftok.models import (
    Configuration,
    NetCount,
    PairCount,
    ReportOutput,
    SingleCount,
    TokenTally,
)


def build_report(config: Configuration, count: Optional[int] = None, tally: Optional[TokenTally] = None) -> ReportOutput:
    """Count mode reports `count`; diff modes report `tally` as a pair or a net delta."""
    if not config.is_diff:
        return SingleCount(count if count is not None else 0)

    tally = tally or TokenTally()
    if config.net_output:
        return NetCount(tally.net)
    return PairCount(tally.added, tally.removed)


def format_report(report: ReportOutput) -> str:
    if isinstance(report, SingleCount):
        return str(report.count)
    if isinstance(report, PairCount):
        return f"{report.added} {report.removed}"
    if isinstance(report, NetCount):
        return str(report.delta)
    raise TypeError(f"unknown report type: {type(report).__name__}")


def write_report(report: ReportOutput, stream: TextIO) -> None:
    stream.write(format_report(report) + "\n")
