"""
Per-column filter configuration for the filterable table.

Categorical columns get a dropdown listing the categories present in the data
and an exact-match filter; other columns keep the default filter of the table
renderer (a text box matching substrings, ignoring case).

The configuration is plain data: the dropdown options are serialized to JSON
and read by the table's script, which looks options up by position. The
synthetic "All" option has the value ``None`` (``null`` in JSON), which clears
the filter, so it cannot be confused with a category that has the same label.
"""

import enum
import warnings
from dataclasses import dataclass, field

from .. import _config
from .. import _dataframe as sbd

__all__ = [
    "ColumnKind",
    "ColumnFilterConfig",
    "DropdownFilter",
    "EXACT_MATCH",
    "SUBSTRING_MATCH",
    "column_kinds",
    "make_column_filters",
]

EXACT_MATCH = "exact"
SUBSTRING_MATCH = "contains"


class ColumnKind(enum.Enum):
    CATEGORICAL = "categorical"
    OTHER = "other"


def column_kinds(df):
    """Map each column name of ``df`` to its :class:`ColumnKind`."""
    return {
        col_name: (
            ColumnKind.CATEGORICAL
            if sbd.is_categorical(sbd.col(df, col_name))
            else ColumnKind.OTHER
        )
        for col_name in sbd.column_names(df)
    }


def _present_categories(column):
    present = set(v for v in sbd.to_list(column) if v is not None)
    return [c for c in sbd.categories(column) if c in present]


@dataclass(frozen=True)
class DropdownFilter:
    """Render the dropdown filter input of a categorical column.

    Parameters
    ----------
    element_id : str
        Id of the table the dropdown belongs to. Changing the selection
        filters this table only.
    style : str
        Inline CSS applied to the ``<select>`` element.
    all_label : str
        Label of the option that clears the filter. Defaults to the
        ``filter_all_label`` configuration.
    """

    element_id: str
    style: str = "width: 100%; height: 100%;"
    all_label: str = field(
        default_factory=lambda: _config.get_config()["filter_all_label"]
    )

    def render(self, values, name):
        """Build the dropdown for the column ``values`` named ``name``.

        Returns
        -------
        dict
            ``element_id``, ``column``, ``aria_label``, ``style`` and
            ``options``: a list of ``{"label": str, "value": object}`` where
            the first item is the "All" option (value ``None``), followed by
            the distinct categories found in ``values``, in the order of the
            column's categories.
        """
        categories = _present_categories(values)
        labels = [str(c) for c in categories]
        if self.all_label in labels:
            warnings.warn(
                f"Column {name!r} has a category {self.all_label!r}, which is"
                " also the label of the option that clears the filter. Both"
                " appear in the dropdown; the first one selects all rows."
            )
        options = [{"label": self.all_label, "value": None}]
        options.extend(
            {"label": label, "value": category}
            for label, category in zip(labels, categories)
        )
        return {
            "element_id": self.element_id,
            "column": name,
            "aria_label": f"Filter {name}",
            "style": self.style,
            "options": options,
        }


@dataclass(frozen=True)
class ColumnFilterConfig:
    """How one column of the table is filtered.

    ``filter_input`` renders the control used to enter the filter value and
    ``filter_method`` names the predicate applied to each row: ``"exact"``
    keeps rows whose value equals the selected one.
    """

    column: str
    filter_input: DropdownFilter
    filter_method: str = EXACT_MATCH


def make_column_filters(df, element_id, kinds=None):
    """Create one :class:`ColumnFilterConfig` per categorical column of ``df``.

    Returns ``None`` when ``df`` has no categorical column, in which case the
    renderer's default filter applies to all columns.
    """
    if kinds is None:
        kinds = column_kinds(df)
    filters = {
        col_name: ColumnFilterConfig(col_name, DropdownFilter(element_id))
        for col_name, kind in kinds.items()
        if kind is ColumnKind.CATEGORICAL
    }
    return filters or None
