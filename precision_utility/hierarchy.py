import os
import csv
import logging
from typing import List, Dict, Optional

import numpy as np
import pandas as pd

from precision_utility.PrecisionError import EvaluationInterrupted
from precision_utility.cancellation import check_cancelled

logger = logging.getLogger("precision_utility")


# --------------------------------------------------
# Hierarchy loading
# --------------------------------------------------
def load_hierarchy(path: str, delimiter: str = ";") -> List[List[str]]:
    """
    Reads a generalization hierarchy from a headerless CSV file.

    Each line is one original value followed by its generalizations,
    most specific first. Every cell is read as a string and rows keep
    their own length, so a ragged file stays ragged.

    Returns:
        list of rows, one per original value
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Hierarchy file not found: {path}")

    try:
        with open(path, "r", newline="", encoding="utf-8") as f:
            rows = [row for row in csv.reader(f, delimiter=delimiter) if row]
    except Exception as e:
        raise RuntimeError(f"Failed to read hierarchy '{path}': {e}") from e

    if not rows:
        raise ValueError(f"Hierarchy file is empty: {path}")

    return rows


def _as_rows(hierarchy):
    if isinstance(hierarchy, pd.DataFrame):
        return hierarchy.values.tolist()
    if isinstance(hierarchy, np.ndarray):
        return hierarchy.tolist()
    return hierarchy


# --------------------------------------------------
# Level maps
# --------------------------------------------------
def build_level_map(hierarchy, cancel=None) -> Optional[Dict[str, float]]:
    """
    Maps every value of a hierarchy to its normalized generalization level.

    Levels are walked from most specific to most general, and rows in order
    within a level. A value keeps the level it was first seen at, so
    a value repeated at a more general level keeps its lower score.

    Args:
        hierarchy: 2-D table [values][levels] (list of lists, ndarray or DataFrame)
        cancel: CancellationToken, threading.Event or None, polled once per level

    Returns:
        dict value -> level / (height - 1), or None if the hierarchy is unusable
    """
    try:
        rows = _as_rows(hierarchy)
        height = len(rows[0])
        if height <= 1:
            logger.warning(f"Hierarchy of height {height} has no generalization levels; ignoring it.")
            return None

        if any(len(row) != height for row in rows):
            logger.warning(f"Hierarchy rows differ in length (expected {height} levels); ignoring it.")
            return None

        levels = {}
        for col in range(height):
            score = col / (height - 1)
            for row in rows:
                value = row[col]
                if value not in levels:
                    levels[value] = score

            check_cancelled(cancel, where=f"hierarchy level {col}")

        return levels

    except EvaluationInterrupted:
        raise
    except Exception as e:
        logger.warning(f"Dropping malformed hierarchy: {e!r}")
        return None


def build_level_maps(hierarchies, cancel=None) -> List[Optional[Dict[str, float]]]:
    """
    Builds one level map per hierarchy, in order. Unusable hierarchies yield None.
    """
    return [build_level_map(hierarchy, cancel) for hierarchy in hierarchies]
