"""
natbreaks I/O: manifest.yaml, value reads, breaks writes.
"""

from natbreaks.io.manifest import (
    load_manifest,
    get_values_path,
    get_output_dir,
    get_classification_config,
    validate_manifest,
)
from natbreaks.io.reader import load_frame, load_values, numeric_columns, column_values
from natbreaks.io.writer import breaks_frame, write_breaks

__all__ = [
    'load_manifest',
    'get_values_path',
    'get_output_dir',
    'get_classification_config',
    'validate_manifest',
    'load_frame',
    'load_values',
    'numeric_columns',
    'column_values',
    'breaks_frame',
    'write_breaks',
]
