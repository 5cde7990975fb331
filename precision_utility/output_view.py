from typing import Iterable, Optional

import pandas as pd


class DataFrameView:
    """
    Read-only, row/column addressable view of an anonymized dataset.

    Rows listed in `outliers` are rows the anonymizer removed from the release;
    the default suppression check treats them as suppressed.
    """

    def __init__(self, df: pd.DataFrame, outliers: Optional[Iterable[int]] = None):
        if not isinstance(df, pd.DataFrame):
            raise TypeError("DataFrameView expects a pandas DataFrame")
        self._df = df
        self._outliers = frozenset(int(r) for r in outliers) if outliers is not None else frozenset()

    @classmethod
    def from_csv(cls, path: str, outliers: Optional[Iterable[int]] = None):
        """Reads a CSV with every cell kept as a string (no NaN coercion)."""
        try:
            df = pd.read_csv(path, dtype=str, keep_default_na=False)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"CSV not found: {path}") from e
        except pd.errors.EmptyDataError as e:
            raise ValueError(f"CSV is empty: {path}") from e
        return cls(df, outliers)

    def get(self, row: int, col: int):
        return self._df.iat[row, col]

    def row_count(self) -> int:
        return len(self._df)

    def column_count(self) -> int:
        return self._df.shape[1]

    def column_name(self, col: int) -> str:
        return str(self._df.columns[col])

    def column_index(self, name: str) -> int:
        try:
            return self._df.columns.get_loc(name)
        except KeyError:
            raise KeyError(f"Column '{name}' not found in output data") from None

    def is_outlier(self, row: int) -> bool:
        return row in self._outliers

    @property
    def frame(self) -> pd.DataFrame:
        return self._df
