"""filecalc: sum or mean of the numeric lines in a text file.

- processing: Operation, Accumulator and the accumulate -> reduce pipeline
- config: optional YAML/JSON settings (encoding, log level)
- cli: `filecalc <operation> <file_path>`
"""

from .config import load_config
from .processing import (
    Accumulator,
    Operation,
    accumulate,
    aggregate_file,
    aggregate_lines,
    mean_from_file,
    parse_value,
    reduce_accumulator,
    sum_from_file,
)

__all__ = [
    "load_config",
    "Accumulator",
    "Operation",
    "accumulate",
    "aggregate_file",
    "aggregate_lines",
    "mean_from_file",
    "parse_value",
    "reduce_accumulator",
    "sum_from_file",
]
