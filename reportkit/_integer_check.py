import decimal
import numbers

import pandas as pd

from ._dispatch import dispatch
from ._utils import is_missing

__all__ = ["is_integer_value", "is_integer_vector"]


def is_integer_value(value, allow_missing=False):
    """Check if a value is an integer.

    The check is on the value, not on its type: ``2.0`` is an integer but
    ``2.5`` is not. There is no tolerance, so ``1 + 1e-12`` is not an integer.

    Parameters
    ----------
    value : object
        The value to check.
    allow_missing : bool, default=False
        Result returned when ``value`` is missing (``None``, ``nan``,
        ``pandas.NA``, ``pandas.NaT``).

    Returns
    -------
    bool
        True when ``value`` is a number (including a ``decimal.Decimal``)
        whose remainder modulo 1 is 0. Values that are not numbers (strings,
        booleans, complex numbers...) are never integers.

    See Also
    --------
    is_integer_vector :
        Apply this check to each element of a sequence.

    Examples
    --------
    >>> from reportkit import is_integer_value
    >>> is_integer_value(1)
    True
    >>> is_integer_value(1.1)
    False

    Numbers stored in strings are not numbers:

    >>> is_integer_value("1")
    False

    Decimal numbers are numbers:

    >>> from decimal import Decimal
    >>> is_integer_value(Decimal("2"))
    True

    Missing values:

    >>> is_integer_value(None)
    False
    >>> is_integer_value(float("nan"), allow_missing=True)
    True
    """
    if is_missing(value):
        return bool(allow_missing)
    if isinstance(value, decimal.Decimal):
        return bool(value.is_finite() and value % 1 == 0)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return bool(value % 1 == 0)


@dispatch
def is_integer_vector(values, allow_missing=False):
    """Check which elements of a sequence are integers.

    Parameters
    ----------
    values : iterable
        A list, tuple, numpy array, pandas Series or polars Series. It is
        expected to contain numbers. If it has been converted to strings
        beforehand (for example a numpy array built from ``[1, 2, "3"]``),
        none of its elements is a number and the result is all False.
    allow_missing : bool, default=False
        Result for the missing elements, see :func:`is_integer_value`.

    Returns
    -------
    list of bool, pandas Series or polars Series
        One boolean per element, in the same order. pandas and polars inputs
        give a boolean Series with the same name (and for pandas the same
        index); other inputs give a list.

    Examples
    --------
    >>> from reportkit import is_integer_vector
    >>> is_integer_vector([1, 2, 3])
    [True, True, True]
    >>> is_integer_vector([1.1, 2, 3])
    [False, True, True]
    >>> is_integer_vector([1, None, 3])
    [True, False, True]
    >>> is_integer_vector([1, None, 3], allow_missing=True)
    [True, True, True]
    """
    return [is_integer_value(v, allow_missing=allow_missing) for v in values]


@is_integer_vector.specialize("pandas", argument_type="Column")
def _is_integer_vector_pandas(values, allow_missing=False):
    return pd.Series(
        [is_integer_value(v, allow_missing=allow_missing) for v in values],
        index=values.index,
        name=values.name,
        dtype=bool,
    )


@is_integer_vector.specialize("polars", argument_type="Column")
def _is_integer_vector_polars(values, allow_missing=False):
    import polars as pl

    return pl.Series(
        values.name,
        [is_integer_value(v, allow_missing=allow_missing) for v in values],
        dtype=pl.Boolean,
    )
