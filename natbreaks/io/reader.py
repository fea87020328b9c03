"""
Reader: all value reads go through here.

No other module should call pl.read_parquet / pl.read_csv directly.
"""

import numpy as np
import polars as pl
from pathlib import Path
from typing import List, Optional

from natbreaks.validation.errors import InvalidInputError


READERS = {
    '.parquet': pl.read_parquet,
    '.csv': pl.read_csv,
}


def load_frame(path: str) -> pl.DataFrame:
    """Load a parquet or CSV file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"No values file at {path}")
    reader = READERS.get(p.suffix.lower())
    if reader is None:
        raise InvalidInputError(
            f"Unsupported file type '{p.suffix}'. Supported: {', '.join(sorted(READERS))}"
        )
    return reader(str(p))


def numeric_columns(df: pl.DataFrame) -> List[str]:
    """Names of the numeric columns, in frame order."""
    return [name for name, dtype in df.schema.items() if dtype.is_numeric()]


def column_values(df: pl.DataFrame, column: str) -> np.ndarray:
    """One column as float64; nulls become NaN."""
    if column not in df.columns:
        available = ", ".join(df.columns)
        raise KeyError(f"Unknown column: '{column}'. Available: {available}")
    return df.get_column(column).cast(pl.Float64).fill_null(np.nan).to_numpy()


def load_values(path: str, column: Optional[str] = None) -> np.ndarray:
    """
    Load one column of a values file.

    Without a column name the first numeric column is used.
    """
    df = load_frame(path)
    if column is None:
        candidates = numeric_columns(df)
        if not candidates:
            raise InvalidInputError(f"No numeric column in {path}")
        column = candidates[0]
    return column_values(df, column)
