import pandas as pd
import pytest

from reportkit._dispatch import dispatch, raise_dispatch_unregistered_type


def test_dispatch(df_module):
    @dispatch
    def f(obj):
        return "default"

    @f.specialize("pandas", argument_type="DataFrame")
    def _f_pandas_dataframe(obj):
        return "pandas DataFrame"

    @f.specialize("pandas", argument_type="Column")
    def _f_pandas_column(obj):
        return "pandas Column"

    @f.specialize("polars", argument_type="DataFrame")
    def _f_polars_dataframe(obj):
        return "polars DataFrame"

    @f.specialize("polars", argument_type="Column")
    def _f_polars_column(obj):
        return "polars Column"

    assert f(0) == "default"
    assert f(df_module.empty_dataframe) == f"{df_module.name} DataFrame"
    assert f(df_module.empty_column) == f"{df_module.name} Column"


def test_specialize_all_types():
    @dispatch
    def f(obj):
        return "default"

    @f.specialize("pandas")
    def _f_pandas(obj):
        return "pandas"

    assert f(pd.DataFrame()) == "pandas"
    assert f(pd.Series([], dtype="object")) == "pandas"


def test_unknown_module():
    @dispatch
    def f(obj):
        pass

    with pytest.raises(KeyError, match="Unknown dataframe module"):
        f.specialize("numpy")


def test_raise_dispatch_unregistered_type():
    with pytest.raises(TypeError, match="Expected a Pandas or Polars DataFrame.*'list'"):
        raise_dispatch_unregistered_type([], kind="DataFrame")
