import math
from typing import Dict, List

import numpy as np
import pandas as pd


class ColumnOrientedResult:
    """
    Per-column outcome of a utility model: minimum, value and maximum
    for every analyzed column. A NaN value means the column is undefined.
    """

    def __init__(self, output, indices, minimum, value, maximum):
        if not (len(indices) == len(minimum) == len(value) == len(maximum)):
            raise ValueError("indices, minimum, value and maximum must have the same length")
        self.output = output
        self.indices = list(indices)
        self.min = np.asarray(minimum, dtype=float)
        self.mean = np.asarray(value, dtype=float)
        self.max = np.asarray(maximum, dtype=float)

    def __len__(self):
        return len(self.indices)

    def attributes(self) -> List[str]:
        names = []
        for column in self.indices:
            column_name = getattr(self.output, "column_name", None)
            names.append(column_name(column) if column_name is not None else str(column))
        return names

    def _position(self, attribute) -> int:
        names = self.attributes()
        if attribute in names:
            return names.index(attribute)
        if isinstance(attribute, int) and attribute in self.indices:
            return self.indices.index(attribute)
        raise KeyError(f"Attribute '{attribute}' was not analyzed")

    def minimum(self, attribute) -> float:
        return float(self.min[self._position(attribute)])

    def value(self, attribute) -> float:
        return float(self.mean[self._position(attribute)])

    def maximum(self, attribute) -> float:
        return float(self.max[self._position(attribute)])

    def is_defined(self, attribute) -> bool:
        return not math.isnan(self.value(attribute))

    def to_dict(self) -> Dict[str, Dict]:
        """JSON-friendly form; undefined values become None."""
        out = {}
        for i, name in enumerate(self.attributes()):
            mean = float(self.mean[i])
            out[name] = {
                "column": int(self.indices[i]),
                "min": float(self.min[i]),
                "precision": None if math.isnan(mean) else mean,
                "max": float(self.max[i]),
            }
        return out

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "column": self.indices,
                "min": self.min,
                "precision": self.mean,
                "max": self.max,
            },
            index=pd.Index(self.attributes(), name="attribute"),
        )

    def __repr__(self):
        return f"ColumnOrientedResult(indices={self.indices}, mean={self.mean.tolist()})"
