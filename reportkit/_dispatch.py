"""
Generic functions with one implementation per dataframe library.

``dispatch`` wraps ``functools.singledispatch``, so the implementation is
chosen from the type of the **first argument**. Implementations are registered
with a library name (``"pandas"`` or ``"polars"``) rather than with a type:
polars is optional, and an implementation for a library that is not installed
is simply left out.

>>> from reportkit._dispatch import dispatch
>>> import pandas as pd

>>> @dispatch
... def describe(obj):
...     return "something else"

>>> @describe.specialize("pandas", argument_type="Column")
... def _describe_pandas_column(obj):
...     return "a pandas Series"

>>> @describe.specialize("pandas", argument_type="DataFrame")
... def _describe_pandas_dataframe(obj):
...     return "a pandas DataFrame"

>>> describe(pd.Series([1, 2]))
'a pandas Series'
>>> describe(pd.DataFrame())
'a pandas DataFrame'
>>> describe([1, 2])
'something else'

Without ``argument_type``, the implementation is registered for both the
dataframe and the column type of the library. See
``reportkit._dataframe._common`` for many generic functions defined this way.
"""

import importlib
from functools import singledispatch

__all__ = ["dispatch", "raise_dispatch_unregistered_type"]

# Type names looked up in each supported library, by kind of container.
_CONTAINER_TYPES = {
    "pandas": {"DataFrame": "DataFrame", "Column": "Series"},
    "polars": {"DataFrame": "DataFrame", "Column": "Series"},
}


def _container_types(module_name, argument_types):
    if module_name not in _CONTAINER_TYPES:
        raise KeyError(
            f"Unknown dataframe module: {module_name!r}. Available modules are"
            f" {list(_CONTAINER_TYPES)}."
        )
    # ImportError is propagated when the library is not installed
    module = importlib.import_module(module_name)
    names = _CONTAINER_TYPES[module_name]
    return [getattr(module, names[kind]) for kind in argument_types]


def raise_dispatch_unregistered_type(obj, kind="object"):
    """Raise the error used by generic functions for unsupported input types."""
    raise TypeError(
        f"Expected a Pandas or Polars {kind}, but got an object of type "
        f"{type(obj).__name__!r}."
    )


def dispatch(function):
    """Turn ``function`` into a generic function of its first argument's type.

    ``function`` itself is called for the types without a registered
    implementation. The returned function has a ``specialize(module_name, *,
    argument_type=None)`` decorator that registers an implementation for the
    ``"DataFrame"`` or ``"Column"`` type (or both) of a dataframe library.
    """
    dispatched = singledispatch(function)

    def specialize(module_name, *, argument_type=None):
        if argument_type is None:
            argument_type = ("DataFrame", "Column")
        elif isinstance(argument_type, str):
            argument_type = (argument_type,)
        try:
            types = _container_types(module_name, argument_type)
        except ImportError:
            types = []

        def decorator(specialized_impl):
            for container_type in types:
                dispatched.register(container_type, specialized_impl)
            return specialized_impl

        return decorator

    dispatched.specialize = specialize
    return dispatched
