import re

import numpy as np
import pandas as pd
import pytest

from reportkit import _utils
from reportkit._utils import (
    ElementIdGenerator,
    get_duplicates,
    is_missing,
    new_element_id,
)


def test_random_string():
    s = _utils.random_string()
    assert re.fullmatch(r"[0-9a-f]{8}", s)
    assert s != _utils.random_string()


def test_get_duplicates():
    assert get_duplicates(["a", "b", "a", "c", "b"]) == ["a", "b"]
    assert get_duplicates([]) == []


def test_element_id_generator():
    gen = ElementIdGenerator(token="tok")
    assert [gen() for _ in range(3)] == [
        "reactable-tok-0",
        "reactable-tok-1",
        "reactable-tok-2",
    ]
    gen = ElementIdGenerator(prefix="table")
    assert re.fullmatch(r"table-[0-9a-f]{8}-0", gen())


def test_element_id_generators_do_not_share_state():
    gen_1 = ElementIdGenerator(token="a")
    gen_2 = ElementIdGenerator(token="a")
    assert gen_1() == gen_2()
    assert gen_1() == "reactable-a-1"


def test_new_element_id_default():
    ids = {new_element_id() for _ in range(100)}
    assert len(ids) == 100
    for element_id in ids:
        assert element_id.startswith("reactable-")


def test_new_element_id_custom_generator():
    assert new_element_id(lambda: "my-table") == "my-table"


@pytest.mark.parametrize("bad_id", ["", None, 3])
def test_new_element_id_bad_generator(bad_id):
    with pytest.raises(ValueError, match="must return a non-empty string"):
        new_element_id(lambda: bad_id)


@pytest.mark.parametrize("value", [None, np.nan, float("nan"), pd.NA, pd.NaT])
def test_is_missing(value):
    assert is_missing(value)


@pytest.mark.parametrize("value", [0, 0.0, "", False, [None], (None,)])
def test_is_not_missing(value):
    assert not is_missing(value)
