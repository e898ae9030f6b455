"""Display a dataframe as an interactive table with filters and a CSV download."""

from ._column_filters import ColumnFilterConfig, ColumnKind, DropdownFilter
from ._filterable_table import FilterableTable, filterable_table

__all__ = [
    "FilterableTable",
    "filterable_table",
    "ColumnFilterConfig",
    "ColumnKind",
    "DropdownFilter",
]
