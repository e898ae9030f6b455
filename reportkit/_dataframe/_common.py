import pandas as pd

try:
    import polars as pl
except ImportError:
    pass

from .._dispatch import dispatch, raise_dispatch_unregistered_type

__all__ = [
    #
    # Inspecting containers' type
    #
    "is_dataframe",
    "is_column",
    #
    # Conversions to and from other container types
    #
    "to_list",
    "to_frame",
    "col",
    "set_column",
    #
    # Querying metadata
    #
    "column_names",
    #
    # Categorical columns
    #
    "is_categorical",
    "to_categorical",
    "categories",
    "fill_null_category",
]

#
# Inspecting containers' type
# ===========================
#


@dispatch
def is_dataframe(obj):
    """Return True if ``obj`` is a DataFrame."""
    return False


@is_dataframe.specialize("pandas", argument_type="DataFrame")
def _is_dataframe_pandas(obj):
    return True


@is_dataframe.specialize("polars", argument_type="DataFrame")
def _is_dataframe_polars(obj):
    return True


@dispatch
def is_column(obj):
    """Return True if ``obj`` is a pandas Series or a polars Series."""
    return False


@is_column.specialize("pandas", argument_type="Column")
def _is_column_pandas(obj):
    return True


@is_column.specialize("polars", argument_type="Column")
def _is_column_polars(obj):
    return True


#
# Conversions to and from other container types
# =============================================
#


@dispatch
def to_list(col):
    raise_dispatch_unregistered_type(col, kind="Series")


@to_list.specialize("pandas", argument_type="Column")
def _to_list_pandas(col):
    result = col.tolist()
    return [None if item is pd.NA else item for item in result]


@to_list.specialize("polars", argument_type="Column")
def _to_list_polars(col):
    return col.to_list()


@dispatch
def to_frame(col):
    raise_dispatch_unregistered_type(col, kind="Series")


@to_frame.specialize("pandas", argument_type="Column")
def _to_frame_pandas(col):
    return col.to_frame()


@to_frame.specialize("polars", argument_type="Column")
def _to_frame_polars(col):
    return col.to_frame()


@dispatch
def col(df, col_name):
    raise_dispatch_unregistered_type(df, kind="DataFrame")


@col.specialize("pandas", argument_type="DataFrame")
def _col_pandas(df, col_name):
    return df[col_name]


@col.specialize("polars", argument_type="DataFrame")
def _col_polars(df, col_name):
    return df[col_name]


@dispatch
def set_column(df, col_name, column):
    """Return a copy of ``df`` where the column ``col_name`` is ``column``.

    ``df`` itself is not modified.
    """
    raise_dispatch_unregistered_type(df, kind="DataFrame")


@set_column.specialize("pandas", argument_type="DataFrame")
def _set_column_pandas(df, col_name, column):
    df = df.copy()
    df[col_name] = column
    return df


@set_column.specialize("polars", argument_type="DataFrame")
def _set_column_polars(df, col_name, column):
    return df.with_columns(column.alias(col_name))


#
# Querying metadata
# =================
#


@dispatch
def column_names(df):
    raise_dispatch_unregistered_type(df, kind="DataFrame")


@column_names.specialize("pandas", argument_type="DataFrame")
def _column_names_pandas(df):
    return list(df.columns.values)


@column_names.specialize("polars", argument_type="DataFrame")
def _column_names_polars(df):
    return df.columns


#
# Categorical columns
# ===================
#


@dispatch
def is_categorical(col):
    raise_dispatch_unregistered_type(col, kind="Series")


@is_categorical.specialize("pandas", argument_type="Column")
def _is_categorical_pandas(col):
    return isinstance(col.dtype, pd.CategoricalDtype)


@is_categorical.specialize("polars", argument_type="Column")
def _is_categorical_polars(col):
    return isinstance(col.dtype, (pl.Categorical, pl.Enum))


@dispatch
def to_categorical(col):
    raise_dispatch_unregistered_type(col, kind="Series")


@to_categorical.specialize("pandas", argument_type="Column")
def _to_categorical_pandas(col):
    if isinstance(col.dtype, pd.CategoricalDtype):
        return col
    return col.astype("category")


@to_categorical.specialize("polars", argument_type="Column")
def _to_categorical_polars(col):
    if isinstance(col.dtype, (pl.Categorical, pl.Enum)):
        return col
    return col.cast(pl.String).cast(pl.Categorical())


@dispatch
def categories(col):
    """The categories of a categorical column, in their declared order.

    For pandas and for polars ``Enum`` columns, the list comes from the dtype
    and can contain categories that do not appear in the column. A polars
    ``Categorical`` does not carry a list of its own, so its categories are
    the distinct non-null values, in order of first appearance.
    """
    raise_dispatch_unregistered_type(col, kind="Series")


@categories.specialize("pandas", argument_type="Column")
def _categories_pandas(col):
    return list(col.cat.categories)


@categories.specialize("polars", argument_type="Column")
def _categories_polars(col):
    if isinstance(col.dtype, pl.Enum):
        return col.dtype.categories.to_list()
    return col.cast(pl.String).drop_nulls().unique(maintain_order=True).to_list()


@dispatch
def fill_null_category(col, value):
    """Replace missing values in a categorical column with the label ``value``.

    When ``value`` is not already a category, it is added after the existing
    ones so the order of the other categories is preserved. A polars
    ``Categorical`` becomes an ``Enum`` to keep that order.
    """
    raise_dispatch_unregistered_type(col, kind="Series")


@fill_null_category.specialize("pandas", argument_type="Column")
def _fill_null_category_pandas(col, value):
    if value not in col.cat.categories:
        col = col.cat.add_categories([value])
    return col.fillna(value)


@fill_null_category.specialize("polars", argument_type="Column")
def _fill_null_category_polars(col, value):
    cats = _categories_polars(col)
    if value not in cats:
        cats.append(value)
    return col.cast(pl.String).fill_null(value).cast(pl.Enum(cats))
