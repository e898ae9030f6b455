import threading

import pandas as pd
import pytest

from reportkit import FilterableTable, config_context, get_config, set_config


def test_config_context():
    assert get_config() == {
        "page_size": 10,
        "download_file_name": "download",
        "filter_all_label": "All",
        "browser_timeout": 5.0,
    }

    # Not using as a context manager affects nothing
    config_context(page_size=3)
    assert get_config()["page_size"] == 10

    with config_context(page_size=3):
        assert get_config()["page_size"] == 3
        with config_context(page_size=5, filter_all_label="Any"):
            assert get_config()["page_size"] == 5
            assert get_config()["filter_all_label"] == "Any"
        assert get_config()["page_size"] == 3
        assert get_config()["filter_all_label"] == "All"
    assert get_config()["page_size"] == 10


def test_config_restored_after_error():
    with pytest.raises(ZeroDivisionError):
        with config_context(browser_timeout=1):
            1 / 0
    assert get_config()["browser_timeout"] == 5.0


def test_set_config():
    original = get_config()
    try:
        set_config(download_file_name="export")
        assert get_config()["download_file_name"] == "export"
    finally:
        set_config(**original)
    assert get_config() == original


@pytest.mark.parametrize(
    "params",
    [
        {"page_size": 0},
        {"page_size": -2},
        {"page_size": 2.5},
        {"page_size": True},
        {"download_file_name": ""},
        {"download_file_name": 12},
        {"filter_all_label": ""},
        {"browser_timeout": 0},
        {"browser_timeout": "5"},
    ],
)
def test_error(params):
    with pytest.raises(ValueError):
        set_config(**params)
    with pytest.raises(ValueError):
        with config_context(**params):
            pass


def test_config_is_thread_local():
    results = {}

    def read_config():
        results["page_size"] = get_config()["page_size"]

    with config_context(page_size=42):
        thread = threading.Thread(target=read_config)
        thread.start()
        thread.join()
        assert get_config()["page_size"] == 42
    assert results["page_size"] == 10


def test_page_size_default():
    df = pd.DataFrame({"a": [1, 2]})
    assert FilterableTable(df).render_options["page_size"] == 10
    with config_context(page_size=25):
        assert FilterableTable(df).render_options["page_size"] == 25
    assert FilterableTable(df, page_size=3).render_options["page_size"] == 3


def test_filter_all_label():
    df = pd.DataFrame({"a": pd.Categorical(["x", "y"])})
    with config_context(filter_all_label="Any"):
        table = FilterableTable(df)
    options = table.filter_options()["a"]
    assert [o["label"] for o in options] == ["Any", "x", "y"]


def test_download_file_name_fallback():
    df = pd.DataFrame({"a": [1]})
    with config_context(download_file_name="export"):
        with pytest.warns(UserWarning, match="using 'export' instead"):
            table = FilterableTable(df, download_file_name="///")
    assert table.csv_file_name == "export.csv"
