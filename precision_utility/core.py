# precision_utility/core.py
import os
import json
import time
import logging
from typing import Optional

from precision_utility.config_validation import load_config
from precision_utility.hierarchy import load_hierarchy
from precision_utility.logging_config import setup_logging
from precision_utility.output_view import DataFrameView
from precision_utility.precision import PrecisionModel
from precision_utility.result import ColumnOrientedResult
from precision_utility.utils import format_time, log_performance

logger = logging.getLogger("precision_utility")


def _write_json_atomic(payload: dict, path: str) -> None:
    temp_path = path + ".tmp"
    try:
        with open(temp_path, "w") as f:
            json.dump(payload, f, indent=2)
        os.replace(temp_path, path)
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def run_pipeline(
    config_path: str = "config.yaml",
    cancel=None,
    output_path: Optional[str] = None,
) -> ColumnOrientedResult:
    """
    Loads the config, the output dataset and one hierarchy per analyzed column,
    evaluates column-oriented precision and optionally writes it as JSON.

    Args:
        config_path: YAML configuration file
        cancel: optional CancellationToken shared with the caller
        output_path: overrides `output_path` from the config

    Returns:
        ColumnOrientedResult
    """
    # === LOAD CONFIGURATION ===
    config = load_config(config_path)
    if output_path is not None:
        config.output_path = output_path

    handler = setup_logging(config.log_file)
    try:
        start = time.time()

        # === LOAD OUTPUT DATA ===
        step = time.time()
        output = DataFrameView.from_csv(config.data_path)
        logger.info(f"Loaded {output.row_count()} rows from {config.data_path}")
        log_performance("Load output data", step)

        indices = [output.column_index(c.column) for c in config.columns]

        # === LOAD HIERARCHIES ===
        step = time.time()
        hierarchies = []
        for c in config.columns:
            try:
                hierarchies.append(load_hierarchy(c.hierarchy, delimiter=config.hierarchy_delimiter))
            except (ValueError, RuntimeError) as e:
                # Unusable hierarchy: the column scores as if nothing was generalized
                logger.warning(f"Ignoring hierarchy for '{c.column}': {e}")
                hierarchies.append([])
        log_performance("Load hierarchies", step)

        # === EVALUATE ===
        step = time.time()
        model = PrecisionModel(
            output,
            hierarchies,
            indices,
            cancel=cancel,
            suppression_string=config.suppression_string,
            show_progress=config.show_progress,
        )
        result = model.evaluate()
        log_performance("Evaluate precision", step)

        for name, entry in result.to_dict().items():
            logger.info(f"Precision of '{name}': {entry['precision']}")

        if config.output_path:
            _write_json_atomic(result.to_dict(), config.output_path)
            logger.info(f"Precision written to {config.output_path}")

        hours, minutes, secs = format_time(time.time() - start)
        logger.info(f"Total time: {hours}h {minutes}m {secs}s")
        return result
    finally:
        logging.getLogger("precision_utility").removeHandler(handler)
        handler.close()
