"""
Line aggregation for filecalc.

Core rules:
- One candidate value per line; blank lines are skipped.
- Lines that do not parse as a float are ignored, not errors.
- MEAN over zero numeric lines is 0.0, never NaN.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

log = logging.getLogger(__name__)


class Operation(Enum):
    MEAN = "mean"
    SUM = "sum"

    @classmethod
    def parse(cls, token: str) -> "Operation":
        """Match an operation name case-insensitively."""
        try:
            return cls(token.lower())
        except ValueError:
            raise ValueError(f"Unknown operation: {token!r}") from None


@dataclass
class Accumulator:
    total: float = 0.0
    count: int = 0
    # diagnostics only; never used by the reduction
    blank: int = 0
    skipped: int = 0

    def add(self, value: float) -> None:
        self.total += value
        self.count += 1


def parse_value(text: str) -> Optional[float]:
    """Return the float on a trimmed line, or None for blank/unparseable text."""
    trimmed = text.strip()
    if not trimmed or "_" in trimmed:
        return None
    try:
        return float(trimmed)
    except ValueError:
        return None


def accumulate(lines: Iterable[str], acc: Optional[Accumulator] = None) -> Accumulator:
    """
    Fold lines into an Accumulator.

    Errors raised while iterating `lines` propagate to the caller; the partial
    accumulator is discarded with them.
    """
    acc = acc if acc is not None else Accumulator()
    for line in lines:
        if not line.strip():
            acc.blank += 1
            continue
        value = parse_value(line)
        if value is None:
            acc.skipped += 1
            continue
        acc.add(value)
    return acc


def reduce_accumulator(acc: Accumulator, operation: Operation) -> float:
    if operation is Operation.SUM:
        return acc.total
    if acc.count == 0:
        return 0.0
    return acc.total / acc.count


def aggregate_lines(lines: Iterable[str], operation: Operation) -> float:
    """Accumulate then reduce an in-memory (or lazy) sequence of lines."""
    return reduce_accumulator(accumulate(lines), operation)


def aggregate_file(file_path: str | Path, operation: Operation, encoding: str = "utf-8") -> float:
    """
    Stream `file_path` line by line and reduce it with `operation`.

    OSError (open or read) and UnicodeDecodeError propagate unchanged.
    """
    path = Path(file_path)
    log.debug("Reading %s (operation=%s, encoding=%s)", path, operation.value, encoding)
    # split on "\n" only; a trailing "\r" is removed by strip()
    with path.open("r", encoding=encoding, newline="\n") as f:
        acc = accumulate(f)

    log.info(
        "Aggregated %s: %d numeric, %d blank, %d skipped",
        path,
        acc.count,
        acc.blank,
        acc.skipped,
    )
    return reduce_accumulator(acc, operation)


def mean_from_file(file_path: str | Path) -> float:
    return aggregate_file(file_path, Operation.MEAN)


def sum_from_file(file_path: str | Path) -> float:
    return aggregate_file(file_path, Operation.SUM)
