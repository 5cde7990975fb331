"""
Column-oriented Precision utility model.

Precision (L. Sweeney, "Achieving k-anonymity privacy protection using
generalization and suppression", 2002) rates each released value by how far up
its generalization hierarchy it was lifted. A value left at the most specific
level scores 1.0, a value lifted to the root scores 0.0. Suppressed rows and
values the hierarchy does not know score 1.0. Scores are averaged per column.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from precision_utility.PrecisionError import PrecisionError, EvaluationInterrupted
from precision_utility.cancellation import check_cancelled
from precision_utility.hierarchy import build_level_maps
from precision_utility.result import ColumnOrientedResult
from precision_utility.suppression import DEFAULT_SUPPRESSION_STRING, make_suppression_predicate

logger = logging.getLogger("precision_utility")


def evaluate(
    output,
    indices: List[int],
    level_maps: List[Optional[dict]],
    suppressed=None,
    cancel=None,
    show_progress: bool = False,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Scans every output row of every analyzed column and averages the precision.

    A column whose rows cannot be read or looked up becomes NaN and its scan
    stops there; the other columns are unaffected. Only cancellation aborts
    the whole evaluation.

    Args:
        output: view exposing get(row, col) and row_count()
        indices: output column index for each analyzed column
        level_maps: one level map (or None) per analyzed column, same order
        suppressed: predicate (output, indices, row) -> bool
        cancel: CancellationToken, threading.Event or None, polled once per row
        show_progress: display a tqdm bar per column

    Returns:
        (mean, min, max) arrays, one entry per analyzed column
    """
    if len(level_maps) != len(indices):
        raise PrecisionError(
            code="INVALID_INPUT",
            message="Expected one level map per analyzed column",
            details=f"{len(indices)} columns, {len(level_maps)} level maps",
        )

    suppressed = suppressed or make_suppression_predicate()
    num_rows = output.row_count()

    result = np.zeros(len(indices), dtype=float)
    minimum = np.zeros(len(indices), dtype=float)
    maximum = np.ones(len(indices), dtype=float)

    for i, column in enumerate(indices):
        levels = level_maps[i]

        for row in tqdm(range(num_rows), desc=f"Precision column {column}", disable=not show_progress):
            try:
                precision = 1.0
                if not suppressed(output, indices, row):
                    value = output.get(row, column)
                    level = levels.get(value) if levels is not None else None
                    if level is not None:
                        precision = 1.0 - level
                result[i] += precision
            except EvaluationInterrupted:
                raise
            except Exception as e:
                logger.warning(f"Precision undefined for column {column}: row {row} failed with {e!r}")
                result[i] = np.nan
                break

            check_cancelled(cancel, where=f"column {column}, row {row}")

    with np.errstate(divide="ignore", invalid="ignore"):
        mean = result / float(num_rows)

    return mean, minimum, maximum


# -------------------------------
# Utility models
# -------------------------------
class UtilityModel:
    """
    Base for column-oriented utility models.

    Holds the output view, the per-column hierarchies, the analyzed column
    indices, the suppression check and the cancellation token.
    """

    def __init__(
        self,
        output,
        hierarchies,
        indices: List[int],
        cancel=None,
        suppressed=None,
        suppression_string: str = DEFAULT_SUPPRESSION_STRING,
        show_progress: bool = False,
    ):
        if len(hierarchies) != len(indices):
            raise PrecisionError(
                code="INVALID_INPUT",
                message="Expected one hierarchy per analyzed column",
                details=f"{len(indices)} columns, {len(hierarchies)} hierarchies",
                suggested_fix="Provide hierarchies in the same order as the selected columns.",
            )
        self.output = output
        self.hierarchies = list(hierarchies)
        self.indices = list(indices)
        self.cancel = cancel
        self.suppressed = suppressed or make_suppression_predicate(suppression_string)
        self.show_progress = show_progress

    def check_interrupt(self, where: Optional[str] = None):
        check_cancelled(self.cancel, where)

    def is_suppressed(self, output, indices, row) -> bool:
        return self.suppressed(output, indices, row)

    def evaluate(self) -> ColumnOrientedResult:
        raise NotImplementedError


class PrecisionModel(UtilityModel):
    """Column-oriented Precision."""

    def evaluate(self) -> ColumnOrientedResult:
        level_maps = build_level_maps(self.hierarchies, self.cancel)
        mean, minimum, maximum = evaluate(
            self.output,
            self.indices,
            level_maps,
            suppressed=self.is_suppressed,
            cancel=self.cancel,
            show_progress=self.show_progress,
        )
        return ColumnOrientedResult(self.output, self.indices, minimum, mean, maximum)
