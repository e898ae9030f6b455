"""
reportkit: small helpers for statistical reporting.
"""

from pathlib import Path as _Path

from ._config import config_context, get_config, set_config
from ._integer_check import is_integer_value, is_integer_vector
from ._reporting import (
    ColumnFilterConfig,
    ColumnKind,
    DropdownFilter,
    FilterableTable,
    filterable_table,
)
from ._utils import ElementIdGenerator

with open(_Path(__file__).parent / "VERSION.txt") as _fh:
    __version__ = _fh.read().strip()

__all__ = [
    "is_integer_value",
    "is_integer_vector",
    "FilterableTable",
    "filterable_table",
    "ColumnFilterConfig",
    "ColumnKind",
    "DropdownFilter",
    "ElementIdGenerator",
    "get_config",
    "set_config",
    "config_context",
]
