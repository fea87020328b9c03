"""
Manifest: parse manifest.yaml into classification config.
"""

import math
import yaml
from pathlib import Path
from typing import Dict, Any, List

from natbreaks.core.registry import Classification
from natbreaks.validation.errors import InvalidInputError


DEFAULTS = {
    'method': 'jenks',
    'k': 5,
    'nodata': None,
    'threshold': 0.4,
    'columns': None,
    'n_jobs': 1,
    'algorithm': 'direct',
}


def load_manifest(data_path: str) -> Dict[str, Any]:
    """
    Load a classification manifest.

    data_path is either a .yaml/.yml file or a directory holding
    manifest.yaml. Relative paths inside the manifest resolve against the
    manifest's own directory, recorded under '_data_dir'.
    """
    p = Path(data_path)
    manifest_path = p if p.suffix in ('.yaml', '.yml') else p / 'manifest.yaml'

    if not manifest_path.is_file():
        raise FileNotFoundError(f"No classification manifest at {manifest_path}")

    manifest = yaml.safe_load(manifest_path.read_text()) or {}
    if not isinstance(manifest, dict):
        raise InvalidInputError(f"{manifest_path} must hold a mapping, got {type(manifest).__name__}")

    manifest['_manifest_path'] = str(manifest_path)
    manifest['_data_dir'] = str(manifest_path.parent)
    return manifest


def get_values_path(manifest: Dict[str, Any]) -> str:
    """Get absolute path to the values file from manifest."""
    rel = manifest.get('paths', {}).get('values', 'values.parquet')
    data_dir = Path(manifest.get('_data_dir', '.'))
    return str(data_dir / rel)


def get_output_dir(manifest: Dict[str, Any]) -> str:
    """Get absolute path to output directory from manifest (not created here)."""
    out_rel = manifest.get('paths', {}).get('output_dir', 'output')
    data_dir = Path(manifest.get('_data_dir', '.'))
    return str(data_dir / out_rel)


def get_classification_config(manifest: Dict[str, Any]) -> Dict[str, Any]:
    """Classification block merged over DEFAULTS, plus parallel.n_jobs."""
    config = dict(DEFAULTS)
    config.update(manifest.get('classification') or {})

    parallel = manifest.get('parallel') or {}
    if 'n_jobs' in parallel:
        config['n_jobs'] = parallel['n_jobs']

    # YAML has no NaN literal other than .nan; accept the string too
    if isinstance(config['nodata'], str) and config['nodata'].strip().lower() == 'nan':
        config['nodata'] = math.nan

    if isinstance(config['columns'], str):
        config['columns'] = [config['columns']]

    return config


def validate_manifest(manifest: Dict[str, Any]) -> List[str]:
    """
    Check a manifest before running anything.

    Returns list of errors. Empty list = manifest usable.
    """
    errors = []
    config = get_classification_config(manifest)

    try:
        method = Classification.parse(config['method'])
    except InvalidInputError as e:
        errors.append(str(e))
        method = None

    takes_k = method not in (None, Classification.HEAD_TAIL, Classification.TAIL_HEAD)
    k = config.get('k')
    if takes_k and (not isinstance(k, int) or isinstance(k, bool) or k < 1):
        errors.append(f"classification.k must be a positive integer, got {k!r}")

    n_jobs = config.get('n_jobs')
    if not isinstance(n_jobs, int) or n_jobs == 0:
        errors.append(f"parallel.n_jobs must be a non-zero integer, got {n_jobs!r}")

    values_path = Path(get_values_path(manifest))
    if not values_path.exists():
        errors.append(f"values file not found: {values_path}")

    return errors
