"""
Parallel Column Classification

Classifies several columns of a frame independently using joblib.
Each task owns its sample copy and DP table; nothing is shared.
"""

from typing import Any, Dict, List, Optional

import polars as pl

from natbreaks.core.bounds import BoundsInfo
from natbreaks.io.reader import column_values


def _classify_column(
    values,
    method: str,
    k: Optional[int],
    nodata,
    options: Dict[str, Any],
) -> BoundsInfo:
    """Classify one column - designed for parallel execution."""
    return BoundsInfo.from_values(values, method, k=k, nodata=nodata, **options)


def classify_columns_parallel(
    df: pl.DataFrame,
    columns: List[str],
    method: str = "jenks",
    k: Optional[int] = None,
    nodata=None,
    n_jobs: int = 1,
    verbose: bool = False,
    **options,
) -> List[BoundsInfo]:
    """
    Classify each column of df.

    Args:
        df: Frame holding the columns
        columns: Column names, in output order
        method: Classification member or name
        k: Number of classes
        nodata: Optional sentinel removed from every column
        n_jobs: joblib workers (1 = in-process)
        verbose: Print progress
        **options: Forwarded to the method

    Returns:
        One BoundsInfo per column, in column order
    """
    from joblib import Parallel, delayed

    samples = [column_values(df, c) for c in columns]

    if n_jobs == 1:
        return [_classify_column(s, method, k, nodata, options) for s in samples]

    if verbose:
        print(f"  [PARALLEL] Classifying {len(columns)} columns on {n_jobs} workers...")

    return Parallel(n_jobs=n_jobs)(
        delayed(_classify_column)(s, method, k, nodata, options)
        for s in samples
    )
