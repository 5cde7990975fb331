# precision_utility package exports
from precision_utility.PrecisionError import PrecisionError, EvaluationInterrupted
from precision_utility.cancellation import CancellationToken
from precision_utility.hierarchy import build_level_map, build_level_maps
from precision_utility.output_view import DataFrameView
from precision_utility.precision import PrecisionModel, evaluate
from precision_utility.result import ColumnOrientedResult
from precision_utility.core import run_pipeline
