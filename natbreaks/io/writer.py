"""
Writer: all parquet writes go through here.

No other module should call df.write_parquet directly.
"""

import polars as pl
from pathlib import Path
from typing import Dict, Optional

from natbreaks.core.bounds import BoundsInfo


def _safe_write(df: Optional[pl.DataFrame], path: Path, verbose: bool = True) -> bool:
    """Write df unless it has no columns (parquet needs a schema). True if written."""
    if df is None or not df.columns:
        if verbose:
            print(f"  !! Skipped {path} (no columns)")
        return False
    df.write_parquet(str(path))
    return True


def breaks_frame(results: Dict[str, BoundsInfo]) -> pl.DataFrame:
    """
    One row per (column, class): lower/upper bound, member count, method, gvf.
    """
    rows = []
    for column, info in results.items():
        bounds = info.bounds
        counts = info.class_counts()
        gvf = info.gvf()
        for i in range(info.nb_class):
            rows.append({
                'column': column,
                'method': info.method.value,
                'class_index': i,
                'lower': float(bounds[i]),
                'upper': float(bounds[i + 1]),
                'count': int(counts[i]),
                'gvf': gvf,
            })

    schema = {
        'column': pl.Utf8,
        'method': pl.Utf8,
        'class_index': pl.Int64,
        'lower': pl.Float64,
        'upper': pl.Float64,
        'count': pl.Int64,
        'gvf': pl.Float64,
    }
    return pl.DataFrame(rows, schema=schema)


def write_breaks(
    df: pl.DataFrame,
    output_dir: str,
    name: str = 'breaks',
    verbose: bool = True,
) -> Optional[Path]:
    """
    Write a breaks frame to <output_dir>/<name>.parquet.

    Returns:
        Path to written file, or None if skipped
    """
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    path = out / f"{name}.parquet"

    if not _safe_write(df, path, verbose=verbose):
        return None

    if verbose:
        print(f"  -> {path} ({len(df)} rows)")

    return path
