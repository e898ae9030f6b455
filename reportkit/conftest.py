import datetime
from types import SimpleNamespace

import pandas as pd
import pytest


def _example_data_dict():
    return {
        "int-col": [4, 0, -1, None],
        "int-not-null-col": [4, 0, -1, 10],
        "float-col": [4.5, 0.5, None, -1.5],
        "str-col": ["one", None, "three", "four"],
        "bool-col": [False, True, None, True],
        "datetime-col": [
            datetime.datetime(2020, 2, 3, 12, 30, 5),
            datetime.datetime(2021, 3, 15, 0, 37, 15),
            datetime.datetime(2022, 2, 13, 17, 3, 25),
            None,
        ],
    }


def _pandas_module_info(description, convert):
    def make_dataframe(data):
        return convert(pd.DataFrame(data))

    def make_column(name, values):
        return convert(pd.Series(values, name=name))

    def make_categorical_column(name, values, categories=None):
        return pd.Series(pd.Categorical(values, categories=categories), name=name)

    return SimpleNamespace(
        name="pandas",
        description=description,
        module=pd,
        DataFrame=pd.DataFrame,
        Column=pd.Series,
        make_dataframe=make_dataframe,
        make_column=make_column,
        make_categorical_column=make_categorical_column,
        empty_dataframe=pd.DataFrame(),
        empty_column=pd.Series([], dtype="object"),
        example_dataframe=make_dataframe(_example_data_dict()),
        example_column=make_column("float-col", _example_data_dict()["float-col"]),
    )


def _polars_module_info():
    import polars as pl

    def make_categorical_column(name, values, categories=None):
        if categories is None:
            return pl.Series(name, values, dtype=pl.Categorical)
        return pl.Series(name, values, dtype=pl.Enum(categories))

    return SimpleNamespace(
        name="polars",
        description="polars",
        module=pl,
        DataFrame=pl.DataFrame,
        Column=pl.Series,
        make_dataframe=pl.DataFrame,
        make_column=lambda name, values: pl.Series(name=name, values=values),
        make_categorical_column=make_categorical_column,
        empty_dataframe=pl.DataFrame(),
        empty_column=pl.Series(),
        example_dataframe=pl.DataFrame(_example_data_dict()),
        example_column=pl.Series("float-col", _example_data_dict()["float-col"]),
    )


_DATAFRAME_MODULES_INFO = {
    "pandas-numpy-dtypes": _pandas_module_info("pandas-numpy-dtypes", lambda x: x),
    "pandas-nullable-dtypes": _pandas_module_info(
        "pandas-nullable-dtypes", lambda x: x.convert_dtypes()
    ),
}

try:
    _DATAFRAME_MODULES_INFO["polars"] = _polars_module_info()
except ImportError:
    pass


@pytest.fixture(params=list(_DATAFRAME_MODULES_INFO.keys()))
def df_module(request):
    """Information about a dataframe module (pandas or polars).

    Tests requesting this fixture run once per entry: pandas with numpy
    dtypes, pandas with nullable (extension) dtypes, and polars when it is
    installed.

    Attributes
    ----------
    name
        ``"pandas"`` or ``"polars"``.
    description
        ``"pandas-numpy-dtypes"``, ``"pandas-nullable-dtypes"`` or ``"polars"``.
    module
        The module object itself.
    DataFrame, Column
        The module's dataframe and column classes.
    make_dataframe
        Build a dataframe from a ``{column_name: values}`` dict.
    make_column
        Build a column: ``df_module.make_column("country", ["France", "Spain"])``.
    make_categorical_column
        Like ``make_column`` but the column is categorical. An optional third
        argument gives the categories in their declared order (a polars
        ``Enum`` is created in that case).
    empty_dataframe, empty_column
        A dataframe with no rows and no columns; a column of length 0.
    example_dataframe, example_column
        See ``_example_data_dict`` in this module; the column is "float-col".
    """
    return _DATAFRAME_MODULES_INFO[request.param]


@pytest.fixture
def example_data_dict():
    return _example_data_dict()


@pytest.fixture
def categorical_df(df_module):
    """A dataframe with a categorical column containing a missing value."""
    grade = df_module.make_categorical_column(
        "grade", ["B", "A", None, "B"], ["A", "B", "C"]
    )
    df = df_module.make_dataframe(
        {"id": [1, 2, 3, 4], "score": [1.5, 2.0, None, 3.0]}
    )
    if df_module.name == "pandas":
        df["grade"] = grade
        return df
    return df.with_columns(grade)
