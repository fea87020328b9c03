"""
natbreaks Runner
================

Reads a values file, classifies the requested columns, writes breaks.parquet.
Pure orchestration. No computation here.

Usage:
    python -m natbreaks data/counties              # directory with manifest.yaml
    python -m natbreaks data/counties/manifest.yaml
    python -m natbreaks values.parquet --method quantiles --k 7 --column population
"""

import argparse
import math
import time
from pathlib import Path
from typing import List, Optional

import polars as pl

from natbreaks.core.parallel import classify_columns_parallel
from natbreaks.core.registry import Classification
from natbreaks.io.manifest import (
    DEFAULTS,
    get_classification_config,
    get_output_dir,
    get_values_path,
    load_manifest,
    validate_manifest,
)
from natbreaks.io.reader import load_frame, numeric_columns
from natbreaks.io.writer import breaks_frame, write_breaks


def run(
    values_path: str,
    output_dir: str,
    method: str = DEFAULTS['method'],
    k: Optional[int] = DEFAULTS['k'],
    nodata=None,
    columns: Optional[List[str]] = None,
    threshold: float = DEFAULTS['threshold'],
    algorithm: str = DEFAULTS['algorithm'],
    n_jobs: int = 1,
    verbose: bool = True,
) -> pl.DataFrame:
    """
    Classify columns of a values file and write breaks.parquet.

    Args:
        values_path: .parquet or .csv file
        output_dir: Directory for breaks.parquet
        method: Classification name
        k: Number of classes (ignored by head_tail / tail_head)
        nodata: Optional sentinel removed from every column
        columns: Columns to classify (default: every numeric column)
        threshold: Head/tail continuation threshold
        algorithm: Jenks algorithm ('direct' or 'monotone')
        n_jobs: joblib workers
        verbose: Print progress

    Returns:
        The breaks frame that was written
    """
    start = time.time()
    parsed = Classification.parse(method)

    df = load_frame(values_path)
    columns = list(columns) if columns else numeric_columns(df)

    options = {}
    if parsed in (Classification.HEAD_TAIL, Classification.TAIL_HEAD):
        options['threshold'] = threshold
        k = None
    elif parsed == Classification.JENKS_NATURAL_BREAKS:
        options['algorithm'] = algorithm

    if verbose:
        print(f"natbreaks: {parsed.value} on {len(columns)} column(s) of {values_path}")

    infos = classify_columns_parallel(
        df, columns, method=parsed, k=k, nodata=nodata,
        n_jobs=n_jobs, verbose=verbose, **options,
    )
    results = dict(zip(columns, infos))

    if verbose:
        for column, info in results.items():
            shown = ", ".join(f"{b:.6g}" for b in info.breaks)
            print(f"  {column}: [{shown}] (gvf={info.gvf():.4f})")

    out = breaks_frame(results)
    write_breaks(out, output_dir, 'breaks', verbose=verbose)

    if verbose:
        print(f"  done in {time.time() - start:.2f}s")

    return out


def _parse_nodata(text: Optional[str]):
    if text is None:
        return None
    if text.strip().lower() == 'nan':
        return math.nan
    return float(text)


def main(argv: Optional[List[str]] = None):
    """CLI entry point. Resolves the data path into explicit settings and calls run()."""
    parser = argparse.ArgumentParser(
        description="natbreaks: one-dimensional data classification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Methods: jenks, quantiles, equal_interval, arithmetic, head_tail, tail_head

Usage:
  python -m natbreaks ~/data/counties
  python -m natbreaks values.csv --method quantiles --k 7 --column population
"""
    )
    parser.add_argument('data_path', help='Directory with manifest.yaml, a manifest file, or a values file')
    parser.add_argument('--method', help='Classification method (overrides manifest)')
    parser.add_argument('--k', type=int, help='Number of classes (overrides manifest)')
    parser.add_argument('--column', action='append', dest='columns', help='Column to classify (repeatable)')
    parser.add_argument('--nodata', help="No-data sentinel to drop ('nan' allowed)")
    parser.add_argument('--threshold', type=float, help='Head/tail continuation threshold')
    parser.add_argument('--algorithm', choices=['direct', 'monotone'], help='Jenks algorithm')
    parser.add_argument('--output-dir', help='Output directory (default: <data>/output)')
    parser.add_argument('--n-jobs', type=int, help='Parallel workers')
    parser.add_argument('-q', '--quiet', action='store_true', help='Suppress output')

    args = parser.parse_args(argv)
    data_path = Path(args.data_path)

    if data_path.is_dir() or data_path.suffix in ('.yaml', '.yml'):
        manifest = load_manifest(str(data_path))
        errors = validate_manifest(manifest)
        if errors:
            parser.error("invalid manifest:\n  " + "\n  ".join(errors))
        config = get_classification_config(manifest)
        values_path = get_values_path(manifest)
        output_dir = get_output_dir(manifest)
    else:
        config = dict(DEFAULTS)
        values_path = str(data_path)
        output_dir = str(data_path.parent / 'output')

    if args.method is not None:
        config['method'] = args.method
    if args.k is not None:
        config['k'] = args.k
    if args.columns:
        config['columns'] = args.columns
    if args.nodata is not None:
        config['nodata'] = _parse_nodata(args.nodata)
    if args.threshold is not None:
        config['threshold'] = args.threshold
    if args.algorithm is not None:
        config['algorithm'] = args.algorithm
    if args.n_jobs is not None:
        config['n_jobs'] = args.n_jobs
    if args.output_dir is not None:
        output_dir = args.output_dir

    return run(
        values_path=values_path,
        output_dir=output_dir,
        method=config['method'],
        k=config['k'],
        nodata=config['nodata'],
        columns=config['columns'],
        threshold=config['threshold'],
        algorithm=config['algorithm'],
        n_jobs=config['n_jobs'],
        verbose=not args.quiet,
    )


if __name__ == '__main__':
    main()
